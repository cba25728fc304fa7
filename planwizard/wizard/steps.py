"""Business wizard step and field definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Tuple

FieldKind = Literal["text", "select", "textarea", "tags"]


@dataclass(frozen=True)
class FieldSpec:
    """Single input collected by a wizard step."""

    key: str
    label: str
    kind: FieldKind = "text"
    options: Tuple[str, ...] = ()
    placeholder: str = ""
    required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "kind": self.kind,
            "options": list(self.options),
            "placeholder": self.placeholder,
            "required": self.required,
        }


@dataclass(frozen=True)
class WizardStepDefinition:
    """Wizard step metadata."""

    id: int
    title: str
    description: str
    fields: Tuple[str, ...]
    icon: Optional[str] = None
    specs: Tuple[FieldSpec, ...] = field(default=(), repr=False)

    @property
    def required_fields(self) -> List[str]:
        return [s.key for s in self.specs if s.required]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "fields": list(self.fields),
            "icon": self.icon,
            "specs": [s.to_dict() for s in self.specs],
        }


def _step(id: int, title: str, description: str, icon: str, *specs: FieldSpec) -> WizardStepDefinition:
    return WizardStepDefinition(
        id=id,
        title=title,
        description=description,
        fields=tuple(s.key for s in specs),
        icon=icon,
        specs=specs,
    )


BUSINESS_WIZARD_STEPS: Tuple[WizardStepDefinition, ...] = (
    _step(
        1,
        "Business Foundation",
        "Define your core business model and target market",
        "🏢",
        FieldSpec("businessName", "Business Name", placeholder="Enter your business name", required=True),
        FieldSpec(
            "industry",
            "Industry",
            "select",
            options=(
                "Technology",
                "Healthcare",
                "Finance",
                "Retail",
                "Manufacturing",
                "Professional Services",
                "Education",
                "Real Estate",
                "Other",
            ),
            required=True,
        ),
        FieldSpec(
            "targetMarket",
            "Target Market",
            placeholder="e.g., Small businesses, Enterprise clients, Consumers",
            required=True,
        ),
        FieldSpec(
            "currentRevenue",
            "Current Annual Revenue",
            "select",
            options=("Under $100K", "$100K-500K", "$500K-1M", "$1M-5M", "$5M-10M", "$10M+"),
            required=True,
        ),
    ),
    _step(
        2,
        "Current Challenges",
        "Identify pain points and inefficiencies",
        "⚠️",
        FieldSpec(
            "primaryChallenges",
            "Primary Business Challenges",
            "tags",
            placeholder="Type a challenge and press Enter (e.g., Manual processes, Customer retention)",
        ),
        FieldSpec(
            "timeWasters",
            "Time Wasters",
            "tags",
            placeholder="Type a time waster and press Enter (e.g., Excessive meetings, Email management)",
        ),
        FieldSpec(
            "costCenters",
            "Major Cost Centers",
            "tags",
            placeholder="Type a cost center and press Enter (e.g., Overtime, Customer support)",
        ),
    ),
    _step(
        3,
        "Competitive Analysis",
        "Understand your competitive landscape",
        "🎯",
        FieldSpec("competitors", "Main Competitors", "tags", placeholder="Type competitor names and press Enter"),
        FieldSpec(
            "differentiators",
            "Your Key Differentiators",
            "tags",
            placeholder="What makes you unique? (e.g., Personal service, Advanced technology)",
        ),
        FieldSpec(
            "marketPosition",
            "Current Market Position",
            "select",
            options=("Market Leader", "Strong Competitor", "Growing Player", "Niche Specialist", "New Entrant"),
        ),
    ),
    _step(
        4,
        "AI Strategy Planning",
        "Define your AI implementation strategy",
        "🤖",
        FieldSpec(
            "aiGoals",
            "AI Implementation Goals",
            "tags",
            placeholder="What do you want AI to help with? (e.g., Automate customer service, Improve efficiency)",
        ),
        FieldSpec(
            "budget",
            "Budget Range for AI Implementation",
            "select",
            options=("Under $5K", "$5K-15K", "$15K-50K", "$50K-100K", "$100K+"),
        ),
        FieldSpec(
            "timeline",
            "Implementation Timeline",
            "select",
            options=("1-3 months", "3-6 months", "6-12 months", "12+ months"),
        ),
        FieldSpec(
            "teamReadiness",
            "Team AI Readiness",
            "select",
            options=("Very Ready", "Somewhat Ready", "Need Training", "Starting from Scratch"),
        ),
    ),
    _step(
        5,
        "Success Metrics",
        "Set measurable goals and KPIs",
        "📊",
        FieldSpec(
            "kpis",
            "Key Performance Indicators (KPIs)",
            "tags",
            placeholder="What metrics matter most? (e.g., Revenue growth, Customer satisfaction, Efficiency)",
        ),
        FieldSpec(
            "successCriteria",
            "Success Criteria",
            "textarea",
            placeholder="Define what success looks like for your AI implementation...",
        ),
        FieldSpec(
            "reportingFrequency",
            "Reporting Frequency",
            "select",
            options=("Weekly", "Bi-weekly", "Monthly", "Quarterly"),
        ),
    ),
)

FIELD_SPECS: Dict[str, FieldSpec] = {
    spec.key: spec for step in BUSINESS_WIZARD_STEPS for spec in step.specs
}
