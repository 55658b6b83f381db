"""Engine outputs: difficulty recommendations and progression suggestions."""

from enum import IntEnum, StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Direction(IntEnum):
    """Overall difficulty decision."""

    DECREASE = -1
    MAINTAIN = 0
    INCREASE = 1


class DifficultyAxis(StrEnum):
    """Independently adjustable dimensions of a conversation."""

    VOCABULARY = "vocabulary"
    GRAMMAR = "grammar"
    TOPIC_DEPTH = "topic_depth"
    SPEAKING_SPEED = "speaking_speed"


class AxisAdjustment(StrEnum):
    INCREASE = "increase"
    DECREASE = "decrease"
    MAINTAIN = "maintain"


class AdjustmentRecommendation(BaseModel):
    """Recommended difficulty for the next conversation.

    ``adjustments`` only lists axes backed by a qualifying signal; absent
    axes are left to the level defaults.
    """

    model_config = ConfigDict(frozen=True)

    new_difficulty_id: str
    reason: str
    confidence: int = Field(ge=0, le=100)
    direction: Direction = Direction.MAINTAIN
    adjustments: dict[DifficultyAxis, AxisAdjustment] = Field(default_factory=dict)


class ProgressionSuggestion(BaseModel):
    """Next step on the learner's path through the catalog."""

    model_config = ConfigDict(frozen=True)

    next_level_id: str
    focus_areas: list[str]
    time_estimate: str
