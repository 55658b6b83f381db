"""Difficulty recommendation from recent conversation performance."""

from collections.abc import Sequence

import structlog

from conversate_difficulty.engine.aggregator import aggregate, recent_window
from conversate_difficulty.engine.catalog import (
    DifficultyCatalog,
    clamp_complexity,
    default_catalog,
)
from conversate_difficulty.models.difficulty import DifficultyLevel
from conversate_difficulty.models.metrics import AggregatedSignals, ConversationMetrics
from conversate_difficulty.models.recommendation import (
    AdjustmentRecommendation,
    AxisAdjustment,
    DifficultyAxis,
    Direction,
)
from conversate_difficulty.models.user_profile import ChallengePreference, UserProfile

logger = structlog.get_logger()

DEFAULT_CONFIDENCE = 50
PERFORMANCE_UP_CONFIDENCE = 80
PERFORMANCE_DOWN_CONFIDENCE = 75
FEEDBACK_CONFIDENCE = 85
FEEDBACK_RATIO_THRESHOLD = 0.6

NO_DATA_REASON = "no recent data"
MAINTAIN_REASON = "maintaining current difficulty"
STRONG_PERFORMANCE_REASON = "strong performance"
LOW_COMPREHENSION_REASON = "low comprehension"
TOO_EASY_REASON = "feedback: too easy"
TOO_HARD_REASON = "feedback: too hard"


class DifficultyRecommender:
    """Recommends the next conversation's difficulty.

    Deterministic and stateless: identical inputs always produce an
    identical recommendation, and no input makes it raise.

    Args:
        catalog: Difficulty catalog to resolve levels against.
        window_size: Number of most recent sessions considered.
    """

    def __init__(self, catalog: DifficultyCatalog | None = None, window_size: int = 5):
        if window_size < 1:
            raise ValueError(f"Window size must be positive, got {window_size}")
        self.catalog = catalog if catalog is not None else default_catalog()
        self.window_size = window_size

    def recommend(
        self,
        profile: UserProfile,
        recent_metrics: Sequence[ConversationMetrics],
    ) -> AdjustmentRecommendation:
        """Analyze recent sessions and recommend a difficulty level.

        Args:
            profile: Learner profile (current level and challenge preference).
            recent_metrics: Recent session metrics, any order.

        Returns:
            Recommendation with target level, confidence and axis hints.
        """
        if not recent_metrics:
            return AdjustmentRecommendation(
                new_difficulty_id=profile.current_level_id,
                reason=NO_DATA_REASON,
                confidence=DEFAULT_CONFIDENCE,
            )

        signals = aggregate(recent_window(recent_metrics, self.window_size))
        current = self._resolve_current_level(profile)

        direction, confidence, reason = _performance_decision(signals)
        direction, confidence, reason = _apply_feedback(signals, direction, confidence, reason)
        direction, reason = _apply_preference(profile.preferred_challenge, direction, reason)

        target = self.catalog.level_for_complexity(
            clamp_complexity(current.complexity + direction)
        )
        if target is None:
            logger.warning(
                "target_level_missing",
                current_level=current.id,
                direction=int(direction),
            )
            target = current

        recommendation = AdjustmentRecommendation(
            new_difficulty_id=target.id,
            reason=reason,
            confidence=confidence,
            direction=direction,
            adjustments=axis_adjustments(signals, direction),
        )
        logger.info(
            "difficulty_recommended",
            user_id=profile.user_id,
            current_level=current.id,
            new_level=target.id,
            direction=int(direction),
            confidence=confidence,
            sessions=signals.session_count,
        )
        return recommendation

    def _resolve_current_level(self, profile: UserProfile) -> DifficultyLevel:
        level = self.catalog.get_level(profile.current_level_id)
        if level is None:
            logger.warning(
                "unknown_level_defaulted",
                user_id=profile.user_id,
                level_id=profile.current_level_id,
                fallback=self.catalog.lowest.id,
            )
            return self.catalog.lowest
        return level


def _performance_decision(signals: AggregatedSignals) -> tuple[Direction, int, str]:
    if (
        signals.comprehension > 85
        and signals.grammar_accuracy > 80
        and signals.engagement > 70
        and signals.response_time < 3
    ):
        return Direction.INCREASE, PERFORMANCE_UP_CONFIDENCE, STRONG_PERFORMANCE_REASON
    if signals.comprehension < 60 or signals.grammar_accuracy < 50:
        return Direction.DECREASE, PERFORMANCE_DOWN_CONFIDENCE, LOW_COMPREHENSION_REASON
    return Direction.MAINTAIN, DEFAULT_CONFIDENCE, MAINTAIN_REASON


def _apply_feedback(
    signals: AggregatedSignals, direction: Direction, confidence: int, reason: str
) -> tuple[Direction, int, str]:
    """Explicit learner feedback overrides the computed performance decision."""
    feedback = signals.feedback
    if feedback.total == 0:
        return direction, confidence, reason
    if feedback.easy_ratio > FEEDBACK_RATIO_THRESHOLD:
        return Direction.INCREASE, max(confidence, FEEDBACK_CONFIDENCE), TOO_EASY_REASON
    if feedback.hard_ratio > FEEDBACK_RATIO_THRESHOLD:
        return Direction.DECREASE, max(confidence, FEEDBACK_CONFIDENCE), TOO_HARD_REASON
    return direction, confidence, reason


def _apply_preference(
    preference: ChallengePreference, direction: Direction, reason: str
) -> tuple[Direction, str]:
    if preference == ChallengePreference.INTENSIVE and direction >= 0:
        direction = Direction(max(direction, Direction.INCREASE))
    elif preference == ChallengePreference.COMFORTABLE and direction <= 0:
        direction = Direction(min(direction, Direction.DECREASE))
    else:
        return direction, reason
    return direction, f"{reason} (adjusted for {preference.value} preference)"


def axis_adjustments(
    signals: AggregatedSignals, direction: Direction
) -> dict[DifficultyAxis, AxisAdjustment]:
    """Per-axis hints backed by a signal that crosses its own threshold.

    Axes without a qualifying signal are left out rather than set to
    ``maintain``. Nothing is emitted when the direction is ``maintain``.
    """
    adjustments: dict[DifficultyAxis, AxisAdjustment] = {}
    if direction > 0:
        if signals.comprehension > 90:
            adjustments[DifficultyAxis.VOCABULARY] = AxisAdjustment.INCREASE
            adjustments[DifficultyAxis.TOPIC_DEPTH] = AxisAdjustment.INCREASE
        if signals.grammar_accuracy > 85:
            adjustments[DifficultyAxis.GRAMMAR] = AxisAdjustment.INCREASE
        if signals.response_time < 2:
            adjustments[DifficultyAxis.SPEAKING_SPEED] = AxisAdjustment.INCREASE
    elif direction < 0:
        if signals.comprehension < 70:
            adjustments[DifficultyAxis.VOCABULARY] = AxisAdjustment.DECREASE
            adjustments[DifficultyAxis.TOPIC_DEPTH] = AxisAdjustment.DECREASE
        if signals.grammar_accuracy < 60:
            adjustments[DifficultyAxis.GRAMMAR] = AxisAdjustment.DECREASE
        if signals.response_time > 8:
            adjustments[DifficultyAxis.SPEAKING_SPEED] = AxisAdjustment.DECREASE
    return adjustments


def recommend(
    profile: UserProfile,
    recent_metrics: Sequence[ConversationMetrics],
    catalog: DifficultyCatalog | None = None,
    window_size: int = 5,
) -> AdjustmentRecommendation:
    """Functional shortcut for ``DifficultyRecommender(...).recommend(...)``."""
    return DifficultyRecommender(catalog, window_size).recommend(profile, recent_metrics)
