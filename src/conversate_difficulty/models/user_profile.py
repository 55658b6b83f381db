"""Learner profile used as input to difficulty recommendations."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class ChallengePreference(StrEnum):
    """How hard the learner wants to be pushed."""

    COMFORTABLE = "comfortable"
    CHALLENGING = "challenging"
    INTENSIVE = "intensive"


class UserProfile(BaseModel):
    user_id: str
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    current_level_id: str = "beginner_1"
    strengths: set[str] = Field(default_factory=set)
    weaknesses: set[str] = Field(default_factory=set)
    learning_goals: list[str] = Field(default_factory=list)
    preferred_challenge: ChallengePreference = ChallengePreference.CHALLENGING
    # Caller-side gate: recommendations are always computed, only applied if True
    adaptive_auto_adjust: bool = True
