from __future__ import annotations

import time
from enum import Enum
from typing import Optional

from planwizard.api.wizard.wizard_dto import AnswerRecord
from planwizard.generate.plan_dto import GeneratedPlan
from planwizard.wizard.flow import Synthesizer, WizardFlowController


class View(str, Enum):
    HOME = "home"
    BUSINESS_WIZARD = "business-wizard"
    DASHBOARD = "dashboard"


class ViewRouter:
    """Top-level switch between the landing page, the wizard and the dashboard."""

    def __init__(self):
        self.touched_at = time.monotonic()
        self.view = View.HOME
        self.wizard: Optional[WizardFlowController] = None
        self.completed_answers: Optional[AnswerRecord] = None
        self.plan: Optional[GeneratedPlan] = None

    def start_wizard(self, synthesizer: Synthesizer) -> WizardFlowController:
        self.wizard = WizardFlowController(synthesizer, on_complete=self._on_complete)
        self.view = View.BUSINESS_WIZARD
        return self.wizard

    def go_home(self) -> None:
        if self.wizard is not None and not self.wizard.is_complete:
            self.wizard = None
        self.view = View.HOME

    def _on_complete(self, answers: AnswerRecord, plan: GeneratedPlan) -> None:
        self.completed_answers = answers
        self.plan = plan
        self.view = View.DASHBOARD
