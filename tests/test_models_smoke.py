"""Smoke tests for Pydantic models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from conversate_difficulty.models.difficulty import DEFAULT_LEVELS, DifficultyLevel
from conversate_difficulty.models.metrics import (
    AggregatedSignals,
    ConversationMetrics,
    FeedbackTally,
    UserFeedback,
)
from conversate_difficulty.models.persona import PERSONA_COMPLEXITY_RANGES, PersonaId
from conversate_difficulty.models.recommendation import (
    AdjustmentRecommendation,
    Direction,
)
from conversate_difficulty.models.user_profile import ChallengePreference, UserProfile


def _metrics(**overrides) -> ConversationMetrics:
    data = {
        "session_id": "s-1",
        "difficulty_level_id": "intermediate_1",
        "comprehension_score": 75.0,
        "response_time_seconds": 4.0,
        "grammar_accuracy": 70.0,
        "engagement_level": 65.0,
    }
    data.update(overrides)
    return ConversationMetrics(**data)


class TestDifficultyLevel:
    def test_frozen(self):
        level = DEFAULT_LEVELS[0]
        with pytest.raises(ValidationError):
            level.complexity = 5

    def test_complexity_out_of_range_rejected(self):
        data = DEFAULT_LEVELS[0].model_dump()
        data["complexity"] = 11
        with pytest.raises(ValidationError):
            DifficultyLevel(**data)

    def test_axis_values_are_strings(self):
        level = DEFAULT_LEVELS[-1]
        assert level.vocabulary_range == "expert"
        assert level.speaking_speed == "fast"
        assert level.cultural_references == "native"


class TestConversationMetrics:
    def test_defaults(self):
        m = _metrics()
        assert m.user_feedback is None
        assert m.vocabulary_usage_count == 0
        assert isinstance(m.completed_at, datetime)

    def test_feedback_parsed_from_string(self):
        m = _metrics(user_feedback="too_hard")
        assert m.user_feedback == UserFeedback.TOO_HARD

    @pytest.mark.parametrize(
        "field,value",
        [
            ("comprehension_score", 101.0),
            ("comprehension_score", -1.0),
            ("grammar_accuracy", 120.0),
            ("engagement_level", -5.0),
            ("response_time_seconds", -0.1),
        ],
    )
    def test_out_of_range_rejected(self, field, value):
        with pytest.raises(ValidationError):
            _metrics(**{field: value})

    def test_boundaries_accepted(self):
        m = _metrics(comprehension_score=0.0, grammar_accuracy=100.0, response_time_seconds=0.0)
        assert m.comprehension_score == 0.0
        assert m.grammar_accuracy == 100.0

    def test_unknown_feedback_rejected(self):
        with pytest.raises(ValidationError):
            _metrics(user_feedback="meh")


class TestFeedbackTally:
    def test_empty_ratios_are_none(self):
        tally = FeedbackTally()
        assert tally.total == 0
        assert tally.easy_ratio is None
        assert tally.hard_ratio is None

    def test_ratios(self):
        tally = FeedbackTally(too_easy=1, just_right=1, too_hard=2)
        assert tally.total == 4
        assert tally.easy_ratio == pytest.approx(0.25)
        assert tally.hard_ratio == pytest.approx(0.5)


class TestAggregatedSignals:
    def test_no_data_sentinel(self):
        signals = AggregatedSignals.no_data()
        assert signals.has_data is False
        assert signals.comprehension is None
        assert signals.response_time is None
        assert signals.feedback.total == 0


class TestUserProfile:
    def test_defaults(self):
        profile = UserProfile(user_id="u-1")
        assert profile.current_level_id == "beginner_1"
        assert profile.preferred_challenge == ChallengePreference.CHALLENGING
        assert profile.adaptive_auto_adjust is True
        assert profile.strengths == set()

    def test_strengths_from_list(self):
        profile = UserProfile(user_id="u-2", strengths=["grammar", "grammar", "vocabulary"])
        assert profile.strengths == {"grammar", "vocabulary"}


class TestAdjustmentRecommendation:
    def test_confidence_bounds(self):
        with pytest.raises(ValidationError):
            AdjustmentRecommendation(new_difficulty_id="x", reason="r", confidence=101)

    def test_defaults(self):
        rec = AdjustmentRecommendation(new_difficulty_id="x", reason="r", confidence=50)
        assert rec.direction == Direction.MAINTAIN
        assert rec.adjustments == {}


class TestPersona:
    def test_every_persona_has_range(self):
        assert set(PERSONA_COMPLEXITY_RANGES) == set(PersonaId)

    def test_enum_values(self):
        assert PersonaId.MAYA == "maya"
        assert PersonaId.ALEX == "alex"
        assert PersonaId.LUNA == "luna"
