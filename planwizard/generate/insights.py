from typing import Optional

from planwizard.api.wizard.wizard_dto import AnswerRecord, StepInsights

STEP_INSIGHTS = {
    1: "Based on your business foundation, consider focusing on B2B automation tools to scale efficiently.",
    2: "Your challenges suggest high potential for AI-driven process automation and customer service bots.",
    3: "Your competitive position indicates opportunities for AI-powered differentiation strategies.",
    4: "Your AI goals align well with quick-win opportunities in customer service and data analytics.",
    5: "Your success metrics suggest focusing on measurable ROI from AI implementations.",
}

GENERIC_INSIGHT = "Continue to the next step for more insights."

SUGGESTIONS = (
    "Consider implementing chatbot automation",
    "Focus on data analytics for competitive advantage",
    "Automate repetitive customer service tasks",
)


def insights_for(answers: Optional[AnswerRecord], step: Optional[int]) -> StepInsights:
    # answers are accepted for interface parity; hints depend on the step only
    return StepInsights(
        insight=STEP_INSIGHTS.get(step, GENERIC_INSIGHT),
        suggestions=list(SUGGESTIONS),
    )
