from typing import Optional, Protocol

from planwizard.generate.plan_dto import GeneratedPlan


class PlanStore(Protocol):
    def get(self, plan_id: str) -> Optional[GeneratedPlan]: ...


class NullPlanStore:
    """Plans are not persisted; every lookup misses."""

    def get(self, plan_id: str) -> Optional[GeneratedPlan]:
        return None
