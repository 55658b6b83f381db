"""Difficulty engine facade bundling catalog, recommender and planner."""

from collections.abc import Iterable, Sequence

from conversate_difficulty.config import Settings
from conversate_difficulty.engine.aggregator import aggregate, recent_window
from conversate_difficulty.engine.catalog import (
    DifficultyCatalog,
    default_catalog,
    load_catalog,
)
from conversate_difficulty.engine.progression import suggest_progression
from conversate_difficulty.engine.recommender import DifficultyRecommender
from conversate_difficulty.models.difficulty import ConversationParameters, DifficultyLevel
from conversate_difficulty.models.metrics import AggregatedSignals, ConversationMetrics
from conversate_difficulty.models.persona import PersonaId
from conversate_difficulty.models.recommendation import (
    AdjustmentRecommendation,
    ProgressionSuggestion,
)
from conversate_difficulty.models.user_profile import UserProfile


class DifficultyEngine:
    """Entry point for callers; construct one per request or share freely.

    Holds no mutable state, so a single instance is safe to use from
    concurrent requests.

    Args:
        catalog: Difficulty catalog (built-in levels when omitted).
        window_size: Number of most recent sessions per recommendation.
    """

    def __init__(self, catalog: DifficultyCatalog | None = None, window_size: int = 5):
        self.catalog = catalog if catalog is not None else default_catalog()
        self.window_size = window_size
        self._recommender = DifficultyRecommender(self.catalog, window_size)

    @classmethod
    def from_settings(cls, settings: Settings) -> "DifficultyEngine":
        """Build an engine from settings, loading a custom catalog if configured."""
        catalog = load_catalog(settings.catalog_path) if settings.catalog_path else None
        return cls(catalog=catalog, window_size=settings.metrics_window_size)

    def aggregate(self, recent_metrics: Sequence[ConversationMetrics]) -> AggregatedSignals:
        return aggregate(recent_window(recent_metrics, self.window_size))

    def recommend(
        self,
        profile: UserProfile,
        recent_metrics: Sequence[ConversationMetrics],
    ) -> AdjustmentRecommendation:
        return self._recommender.recommend(profile, recent_metrics)

    def suggest_progression(
        self,
        current_level_id: str,
        strengths: Iterable[str],
        steps: int = 1,
    ) -> ProgressionSuggestion:
        return suggest_progression(current_level_id, strengths, steps, catalog=self.catalog)

    def levels_for_persona(self, persona: PersonaId) -> tuple[DifficultyLevel, ...]:
        return self.catalog.levels_for_persona(persona)

    def conversation_parameters(self, level_id: str) -> ConversationParameters:
        return self.catalog.conversation_parameters(level_id)
