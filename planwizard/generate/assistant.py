import json
import logging
from typing import List, Optional

from planwizard.api.wizard.wizard_dto import AnswerRecord
from planwizard.run_utils.llm import PromptRelay

logger = logging.getLogger(__name__)

FALLBACK_SUGGESTIONS = [
    "Consider implementing AI chatbots for customer service automation",
    "Use AI for predictive analytics to optimize your operations",
    "Implement AI-powered content generation for marketing",
]


def make_prompt(answers: AnswerRecord) -> str:
    context = json.dumps(answers.model_dump(exclude_none=True), ensure_ascii=False)
    return (
        f"Based on this business context: {context}, provide 3 specific, actionable "
        "suggestions for AI implementation. Return as a JSON array of strings."
    )


async def suggest(relay: Optional[PromptRelay], answers: AnswerRecord) -> List[str]:
    if relay is None:
        return list(FALLBACK_SUGGESTIONS)
    try:
        content = await relay.complete(make_prompt(answers))
        parsed = json.loads(content)
    except Exception as e:
        logger.warning("Assistant suggestions failed, using defaults: %s", e)
        return list(FALLBACK_SUGGESTIONS)

    if not isinstance(parsed, list):
        return []
    return [s for s in parsed if isinstance(s, str)]
