"""Reduce a window of session metrics into averaged signals."""

from collections.abc import Sequence

from conversate_difficulty.models.metrics import (
    AggregatedSignals,
    ConversationMetrics,
    FeedbackTally,
    UserFeedback,
)


def recent_window(
    metrics: Sequence[ConversationMetrics], size: int
) -> list[ConversationMetrics]:
    """Keep the ``size`` most recently completed sessions.

    Input order does not matter; ties on ``completed_at`` keep input order.

    Args:
        metrics: Session metrics in any order.
        size: Maximum number of sessions to keep.

    Returns:
        Up to ``size`` metrics, oldest first.
    """
    if size < 1:
        raise ValueError(f"Window size must be positive, got {size}")
    ordered = sorted(metrics, key=lambda m: m.completed_at.timestamp())
    return ordered[-size:]


def tally_feedback(metrics: Sequence[ConversationMetrics]) -> FeedbackTally:
    counts = {feedback: 0 for feedback in UserFeedback}
    for m in metrics:
        if m.user_feedback is not None:
            counts[m.user_feedback] += 1
    return FeedbackTally(
        too_easy=counts[UserFeedback.TOO_EASY],
        just_right=counts[UserFeedback.JUST_RIGHT],
        too_hard=counts[UserFeedback.TOO_HARD],
    )


def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def aggregate(metrics: Sequence[ConversationMetrics]) -> AggregatedSignals:
    """Average the window's scores and count its feedback.

    Plain arithmetic means, no weighting: a single ``too_hard`` session
    yields ``hard_ratio == 1.0``.

    Args:
        metrics: Recent session metrics.

    Returns:
        Aggregated signals, or the no-data sentinel for an empty window.
    """
    if not metrics:
        return AggregatedSignals.no_data()

    return AggregatedSignals(
        session_count=len(metrics),
        comprehension=_mean([m.comprehension_score for m in metrics]),
        response_time=_mean([m.response_time_seconds for m in metrics]),
        grammar_accuracy=_mean([m.grammar_accuracy for m in metrics]),
        engagement=_mean([m.engagement_level for m in metrics]),
        feedback=tally_feedback(metrics),
    )
