from typing import Optional

from fastapi import Depends, Request

from planwizard.generate.planner import PlanSynthesizer
from planwizard.run_utils.llm import PromptRelay
from planwizard.run_utils.store import NullPlanStore, PlanStore


def get_prompt_relay(request: Request) -> Optional[PromptRelay]:
    """Relay built at startup; None when the credential is missing."""
    return getattr(request.app.state, "prompt_relay", None)


def get_plan_store(request: Request) -> PlanStore:
    return getattr(request.app.state, "plan_store", None) or NullPlanStore()


def get_plan_synthesizer(
    relay: Optional[PromptRelay] = Depends(get_prompt_relay),
) -> PlanSynthesizer:
    return PlanSynthesizer(relay)
