import pytest

from planwizard.api.wizard.wizard_dto import AnswerRecord
from planwizard.generate.insights import GENERIC_INSIGHT, STEP_INSIGHTS, SUGGESTIONS, insights_for


@pytest.mark.parametrize("step", [1, 2, 3, 4, 5])
def test_known_steps_have_insight_and_three_suggestions(step):
    result = insights_for(AnswerRecord(), step)
    assert result.insight == STEP_INSIGHTS[step]
    assert result.insight
    assert result.suggestions == list(SUGGESTIONS)
    assert len(result.suggestions) == 3


@pytest.mark.parametrize("step", [0, 6, -1, 99, None])
def test_out_of_range_step_gets_generic_insight(step):
    result = insights_for(AnswerRecord(), step)
    assert result.insight == GENERIC_INSIGHT
    assert result.suggestions == list(SUGGESTIONS)


def test_answers_do_not_change_the_insight():
    filled = AnswerRecord(businessName="Acme", industry="Retail", aiGoals=["chatbot"])
    assert insights_for(filled, 3) == insights_for(AnswerRecord(), 3)


def test_suggestion_list_is_a_fresh_copy():
    first = insights_for(None, 1)
    first.suggestions.append("extra")
    assert len(insights_for(None, 1).suggestions) == 3
