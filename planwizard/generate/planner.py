import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from planwizard.api.wizard.wizard_dto import AnswerRecord
from planwizard.generate.plan_dto import GeneratedPlan
from planwizard.run_utils.llm import PromptRelay, RelayError

logger = logging.getLogger(__name__)


class PlanParseError(Exception):
    """Raised when the model reply does not match the plan shape."""

    def __init__(self, message: str, content: str):
        super().__init__(message)
        self.content = content


PLAN_SHAPE = """{
  "executiveSummary": "2-3 sentence strategic overview",
  "quickWins": [
    {
      "action": "specific actionable step",
      "impact": "expected business outcome",
      "tools": ["AI tool recommendations"],
      "timeframe": "30-90 days",
      "budget": "estimated spend"
    }
  ],
  "strategicInitiatives": [
    {
      "initiative": "major project name",
      "description": "detailed description and benefits",
      "timeframe": "3-12 months",
      "budget": "estimated investment",
      "roi": "expected return percentage"
    }
  ],
  "implementationRoadmap": {
    "phase1": "immediate actions (month 1-2)",
    "phase2": "scaling phase (month 3-6)",
    "phase3": "optimization phase (month 7-12)"
  },
  "techStack": [
    {
      "tool": "specific AI tool/platform",
      "purpose": "what it accomplishes",
      "integration": "how to implement"
    }
  ],
  "successMetrics": [
    {
      "metric": "measurable KPI",
      "target": "specific numerical goal",
      "measurement": "how to track progress"
    }
  ]
}"""


def _text(value: Optional[str], default: str = "Not specified") -> str:
    if value is None or not value.strip():
        return default
    return value.strip()


def _tags(values: Optional[List[str]], default: str = "None specified") -> str:
    items = [v for v in (values or []) if v and v.strip()]
    return ", ".join(items) if items else default


def make_prompt(answers: AnswerRecord) -> str:
    a = answers
    return (
        "Create a comprehensive AI business domination strategy for:\n\n"
        f"Business: {_text(a.businessName)}\n"
        f"Industry: {_text(a.industry)}\n"
        f"Current Revenue: {_text(a.currentRevenue)}\n"
        f"Target Market: {_text(a.targetMarket)}\n\n"
        f"Key Challenges: {_tags(a.primaryChallenges)}\n"
        f"Time Wasters: {_tags(a.timeWasters)}\n"
        f"Cost Centers: {_tags(a.costCenters)}\n"
        f"Competitors: {_tags(a.competitors)}\n"
        f"Differentiators: {_tags(a.differentiators)}\n"
        f"Market Position: {_text(a.marketPosition)}\n\n"
        f"AI Goals: {_tags(a.aiGoals, 'General improvement')}\n"
        f"Budget: {_text(a.budget)}\n"
        f"Timeline: {_text(a.timeline, '6 months')}\n"
        f"Team Readiness: {_text(a.teamReadiness)}\n\n"
        f"KPIs: {_tags(a.kpis)}\n"
        f"Success Criteria: {_text(a.successCriteria)}\n"
        f"Reporting Frequency: {_text(a.reportingFrequency)}\n\n"
        "Generate a detailed JSON response with exactly this shape. "
        "Return pure JSON only, no markdown fences or commentary:\n"
        f"{PLAN_SHAPE}\n\n"
        f"Make this specific to their {_text(a.industry, 'general')} business with actionable, "
        "industry-relevant recommendations."
    )


def _strip_fences(content: str) -> str:
    text = content.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
        if text.rstrip().endswith("```"):
            text = text.rstrip()[:-3]
    return text.strip()


def parse_plan(content: str) -> GeneratedPlan:
    try:
        data = json.loads(_strip_fences(content))
    except json.JSONDecodeError as e:
        raise PlanParseError(f"reply is not JSON: {e}", content) from e
    if not isinstance(data, dict):
        raise PlanParseError("reply is not a JSON object", content)
    try:
        return GeneratedPlan.model_validate({**data, "source": "ai"})
    except ValidationError as e:
        raise PlanParseError(
            f"reply does not match plan shape ({e.error_count()} issues)", content
        ) from e


def fallback_plan(answers: AnswerRecord) -> GeneratedPlan:
    business = _text(answers.businessName, "your business")
    industry = _text(answers.industry, "industry")
    data: Dict[str, Any] = {
        "executiveSummary": (
            f"Transform {business} into an AI-powered {industry} leader through strategic "
            "automation, intelligent customer engagement, and data-driven decision making."
        ),
        "quickWins": [
            {
                "action": "Implement AI-powered customer service chatbot",
                "impact": "Reduce response time by 80% and support costs by 60%",
                "tools": ["ChatGPT API", "Intercom", "Zendesk"],
                "timeframe": "30 days",
                "budget": "$2,000-5,000",
            },
            {
                "action": "Automate data entry and reporting processes",
                "impact": "Save 15+ hours per week on manual tasks",
                "tools": ["Zapier", "Microsoft Power Automate", "Google Apps Script"],
                "timeframe": "45 days",
                "budget": "$1,000-3,000",
            },
            {
                "action": "Deploy AI content generation for marketing",
                "impact": "Increase content output by 300% while reducing costs",
                "tools": ["GPT-4", "Jasper", "Copy.ai"],
                "timeframe": "60 days",
                "budget": "$500-1,500",
            },
        ],
        "strategicInitiatives": [
            {
                "initiative": "Predictive Analytics Platform",
                "description": (
                    "Implement AI-driven analytics to predict customer behavior, optimize "
                    "inventory, and identify growth opportunities"
                ),
                "timeframe": "3-6 months",
                "budget": "$15,000-30,000",
                "roi": "200-400% within 12 months",
            },
            {
                "initiative": "Intelligent CRM System",
                "description": (
                    "AI-enhanced customer relationship management with automated lead scoring, "
                    "personalized communications, and predictive sales forecasting"
                ),
                "timeframe": "4-8 months",
                "budget": "$20,000-40,000",
                "roi": "150-300% within 18 months",
            },
            {
                "initiative": "Process Automation Suite",
                "description": (
                    "Comprehensive automation of core business processes including invoicing, "
                    "scheduling, inventory management, and quality control"
                ),
                "timeframe": "6-12 months",
                "budget": "$25,000-50,000",
                "roi": "300-500% within 24 months",
            },
        ],
        "implementationRoadmap": {
            "phase1": (
                "Foundation Building (Months 1-2): Deploy quick wins, establish data "
                "infrastructure, train team on AI tools"
            ),
            "phase2": (
                "Strategic Implementation (Months 3-6): Launch predictive analytics, enhance "
                "customer systems, optimize processes"
            ),
            "phase3": (
                "Market Domination (Months 7-12): Scale AI capabilities, develop competitive "
                "moats, expand market presence"
            ),
        },
        "techStack": [
            {
                "tool": "OpenAI GPT-4 API",
                "purpose": "Natural language processing, content generation, customer service automation",
                "integration": "API integration with existing systems, custom prompts for business-specific use cases",
            },
            {
                "tool": "Zapier/Microsoft Power Automate",
                "purpose": "Workflow automation and system integration",
                "integration": "Connect existing tools and automate repetitive tasks across platforms",
            },
            {
                "tool": "Tableau/Power BI + AI Analytics",
                "purpose": "Advanced data visualization and predictive analytics",
                "integration": "Connect to business databases for real-time insights and forecasting",
            },
            {
                "tool": "HubSpot/Salesforce with AI",
                "purpose": "Intelligent customer relationship management",
                "integration": "AI-enhanced lead scoring, automated follow-ups, predictive sales analytics",
            },
        ],
        "successMetrics": [
            {
                "metric": "Customer Service Efficiency",
                "target": "80% reduction in response time, 60% cost savings",
                "measurement": "Track response times, resolution rates, and support costs monthly",
            },
            {
                "metric": "Revenue Growth",
                "target": "25-40% increase in annual revenue through AI optimization",
                "measurement": "Monthly revenue tracking with AI attribution analysis",
            },
            {
                "metric": "Operational Efficiency",
                "target": "50% reduction in manual task time",
                "measurement": "Time tracking on automated vs manual processes weekly",
            },
            {
                "metric": "Customer Satisfaction",
                "target": "90%+ satisfaction score with AI-enhanced service",
                "measurement": "Monthly NPS surveys and customer feedback analysis",
            },
        ],
        "competitiveAdvantages": [
            "24/7 AI-powered customer service",
            "Predictive analytics for market opportunities",
            "Automated quality control and consistency",
            "Personalized customer experiences at scale",
            "Data-driven decision making across all departments",
        ],
        "riskMitigation": [
            {
                "risk": "AI implementation complexity",
                "mitigation": "Phased rollout with extensive testing and team training",
            },
            {
                "risk": "Data privacy and security concerns",
                "mitigation": "Implement robust security protocols and compliance measures",
            },
            {
                "risk": "Employee resistance to change",
                "mitigation": "Comprehensive training programs and change management support",
            },
        ],
        "source": "fallback",
    }
    return GeneratedPlan.model_validate(data)


class PlanSynthesizer:
    def __init__(self, relay: Optional[PromptRelay]):
        self.relay = relay

    async def synthesize(self, answers: AnswerRecord) -> GeneratedPlan:
        """Generate a plan for ``answers``; always returns a plan, never raises."""
        if self.relay is None:
            logger.warning("Prompt relay not configured, returning fallback plan")
            return fallback_plan(answers)

        try:
            content = await self.relay.complete(make_prompt(answers))
            plan = parse_plan(content)
        except (RelayError, PlanParseError) as e:
            logger.warning("Plan generation failed, returning fallback plan: %s", e)
            return fallback_plan(answers)
        except Exception:
            logger.exception("Plan generation failed, returning fallback plan")
            return fallback_plan(answers)

        logger.info("Generated plan for %s", _text(answers.businessName, "anonymous business"))
        return plan
