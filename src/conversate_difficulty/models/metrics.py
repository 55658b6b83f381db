"""Per-session conversation metrics and their aggregated form."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class UserFeedback(StrEnum):
    """Explicit learner feedback given at the end of a session."""

    TOO_EASY = "too_easy"
    JUST_RIGHT = "just_right"
    TOO_HARD = "too_hard"


class ConversationMetrics(BaseModel):
    """Performance metrics for one completed conversation.

    Scores are validated on construction, so out-of-range values are
    rejected at ingestion rather than inside the engine.
    """

    model_config = ConfigDict(frozen=True)

    session_id: str
    difficulty_level_id: str
    comprehension_score: float = Field(ge=0, le=100)
    response_time_seconds: float = Field(ge=0)
    grammar_accuracy: float = Field(ge=0, le=100)
    engagement_level: float = Field(ge=0, le=100)
    vocabulary_usage_count: int = Field(default=0, ge=0)
    user_feedback: UserFeedback | None = None
    completed_at: datetime = Field(default_factory=datetime.now)


class FeedbackTally(BaseModel):
    """Histogram of explicit feedback over a metrics window."""

    model_config = ConfigDict(frozen=True)

    too_easy: int = 0
    just_right: int = 0
    too_hard: int = 0

    @property
    def total(self) -> int:
        return self.too_easy + self.just_right + self.too_hard

    @property
    def easy_ratio(self) -> float | None:
        """Share of ``too_easy`` answers, or None without any feedback."""
        if self.total == 0:
            return None
        return self.too_easy / self.total

    @property
    def hard_ratio(self) -> float | None:
        """Share of ``too_hard`` answers, or None without any feedback."""
        if self.total == 0:
            return None
        return self.too_hard / self.total


class AggregatedSignals(BaseModel):
    """Averaged signals over a window of sessions.

    All averages are None for the no-data sentinel (empty window).
    """

    model_config = ConfigDict(frozen=True)

    session_count: int = 0
    comprehension: float | None = None
    response_time: float | None = None
    grammar_accuracy: float | None = None
    engagement: float | None = None
    feedback: FeedbackTally = Field(default_factory=FeedbackTally)

    @property
    def has_data(self) -> bool:
        return self.session_count > 0

    @classmethod
    def no_data(cls) -> "AggregatedSignals":
        return cls()
