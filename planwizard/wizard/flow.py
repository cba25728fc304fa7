from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from planwizard.api.wizard.wizard_dto import AnswerRecord
from planwizard.generate.plan_dto import GeneratedPlan
from planwizard.wizard.steps import BUSINESS_WIZARD_STEPS, FIELD_SPECS, WizardStepDefinition

logger = logging.getLogger(__name__)


class Synthesizer(Protocol):
    async def synthesize(self, answers: AnswerRecord) -> GeneratedPlan: ...


class WizardError(Exception):
    pass


class FieldValueError(WizardError):
    def __init__(self, key: str, message: str):
        super().__init__(f"{key}: {message}")
        self.key = key


class StepValidationError(WizardError):
    """Raised when advancing past a step with required fields left blank."""

    def __init__(self, step: int, missing: List[str]):
        super().__init__(f"step {step} is missing required fields: {', '.join(missing)}")
        self.step = step
        self.missing = missing


class WizardStateError(WizardError):
    pass


class WizardFlowController:
    """Drives one pass through the business wizard.

    ``current_step`` is 1-indexed and stays within ``[1, len(steps)]``.
    Advancing from the last step hands a frozen copy of the answers to the
    synthesizer; once a plan is stored the controller is terminal and rejects
    further edits and navigation.
    """

    def __init__(
        self,
        synthesizer: Synthesizer,
        steps: Sequence[WizardStepDefinition] = BUSINESS_WIZARD_STEPS,
        on_complete: Optional[Callable[[AnswerRecord, GeneratedPlan], None]] = None,
    ):
        self.synthesizer = synthesizer
        self.steps = tuple(steps)
        self.on_complete = on_complete
        self.current_step = 1
        self.answers: Dict[str, Any] = {}
        self.plan: Optional[GeneratedPlan] = None
        self.is_generating = False

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def step(self) -> WizardStepDefinition:
        return self.steps[self.current_step - 1]

    @property
    def is_complete(self) -> bool:
        return self.plan is not None

    def _ensure_editable(self):
        if self.plan is not None:
            raise WizardStateError("plan already generated")
        if self.is_generating:
            raise WizardStateError("plan generation in progress")

    def _checked(self, key: str, value: Any) -> Any:
        spec = FIELD_SPECS.get(key)
        if spec is None:
            raise FieldValueError(key, "unknown field")
        if value is None:
            return None

        if spec.kind == "tags":
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise FieldValueError(key, "expected a list of strings")
            return list(value)
        if not isinstance(value, str):
            raise FieldValueError(key, "expected a string")
        if spec.kind == "select" and value and value not in spec.options:
            raise FieldValueError(key, f"'{value}' is not one of {list(spec.options)}")
        return value

    def update_field(self, key: str, value: Any) -> None:
        self.update_fields({key: value})

    def update_fields(self, values: Dict[str, Any]) -> None:
        """Apply several answers at once; nothing is written if any value is rejected."""
        self._ensure_editable()
        checked = {key: self._checked(key, value) for key, value in values.items()}
        for key, value in checked.items():
            if value is None:
                self.answers.pop(key, None)
            else:
                self.answers[key] = value

    def _tags(self, key: str) -> List[str]:
        self._ensure_editable()
        spec = FIELD_SPECS.get(key)
        if spec is None or spec.kind != "tags":
            raise FieldValueError(key, "not a tag field")
        return list(self.answers.get(key) or [])

    def add_tag(self, key: str, tag: str) -> None:
        current = self._tags(key)
        tag = tag.strip()
        if not tag or tag in current:
            return
        self.update_field(key, current + [tag])

    def remove_tag(self, key: str, index: int) -> None:
        current = self._tags(key)
        if not 0 <= index < len(current):
            return
        self.update_field(key, [t for i, t in enumerate(current) if i != index])

    def missing_required(self) -> List[str]:
        missing = []
        for key in self.step.required_fields:
            value = self.answers.get(key)
            if isinstance(value, str):
                value = value.strip()
            if not value:
                missing.append(key)
        return missing

    async def advance(self) -> Optional[GeneratedPlan]:
        self._ensure_editable()
        missing = self.missing_required()
        if missing:
            raise StepValidationError(self.current_step, missing)

        if self.current_step < self.total_steps:
            self.current_step += 1
            return None

        answers = AnswerRecord.model_validate(copy.deepcopy(self.answers))
        self.is_generating = True
        try:
            plan = await self.synthesizer.synthesize(answers)
        finally:
            self.is_generating = False

        self.plan = plan
        logger.info("Wizard completed, plan source=%s", plan.source)
        if self.on_complete is not None:
            self.on_complete(answers, plan)
        return plan

    def retreat(self) -> None:
        self._ensure_editable()
        if self.current_step > 1:
            self.current_step -= 1
