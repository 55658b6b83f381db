"""Difficulty catalog: the ordered table of levels and lookups over it."""

import functools
from collections.abc import Iterable
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from conversate_difficulty.errors import CatalogError
from conversate_difficulty.models.difficulty import (
    DEFAULT_LEVELS,
    MAX_COMPLEXITY,
    MIN_COMPLEXITY,
    ConversationParameters,
    DifficultyLevel,
)
from conversate_difficulty.models.persona import PERSONA_COMPLEXITY_RANGES, PersonaId

logger = structlog.get_logger()


def clamp_complexity(value: int) -> int:
    return max(MIN_COMPLEXITY, min(MAX_COMPLEXITY, value))


class DifficultyCatalog:
    """Read-only, complexity-ordered collection of difficulty levels.

    The catalog must hold exactly one level per complexity value from 1 to
    10 and unique ids; anything else raises CatalogError on construction.

    Args:
        levels: Catalog entries in any order.
    """

    def __init__(self, levels: Iterable[DifficultyLevel]):
        ordered = tuple(sorted(levels, key=lambda level: level.complexity))
        _validate(ordered)
        self._levels = ordered
        self._by_id = {level.id: level for level in ordered}
        self._by_complexity = {level.complexity: level for level in ordered}

    def __len__(self) -> int:
        return len(self._levels)

    def __contains__(self, level_id: object) -> bool:
        return level_id in self._by_id

    def get_level(self, level_id: str) -> DifficultyLevel | None:
        return self._by_id.get(level_id)

    def all_levels(self) -> tuple[DifficultyLevel, ...]:
        return self._levels

    def level_for_complexity(self, complexity: int) -> DifficultyLevel | None:
        """Get the level at ``complexity``, clamped into the 1-10 range."""
        return self._by_complexity.get(clamp_complexity(complexity))

    @property
    def lowest(self) -> DifficultyLevel:
        return self._levels[0]

    @property
    def highest(self) -> DifficultyLevel:
        return self._levels[-1]

    def levels_for_persona(self, persona: PersonaId) -> tuple[DifficultyLevel, ...]:
        return levels_for_persona(persona, self._levels)

    def conversation_parameters(self, level_id: str) -> ConversationParameters:
        """Map a level to numeric generation parameters.

        Unknown ids get the neutral default of 3 on every parameter.
        """
        level = self.get_level(level_id)
        if level is None:
            return ConversationParameters()
        c = level.complexity
        return ConversationParameters(
            vocabulary_complexity=c,
            grammar_complexity=c,
            topic_sophistication=c,
            cultural_depth=c,
            response_speed=c,
        )


def _validate(levels: tuple[DifficultyLevel, ...]) -> None:
    complexities = [level.complexity for level in levels]
    expected = list(range(MIN_COMPLEXITY, MAX_COMPLEXITY + 1))
    if complexities != expected:
        raise CatalogError(
            f"Catalog complexities must be exactly {MIN_COMPLEXITY}..{MAX_COMPLEXITY} "
            f"without gaps or duplicates, got {complexities}"
        )
    ids = [level.id for level in levels]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise CatalogError(f"Duplicate level ids in catalog: {', '.join(duplicates)}")


def levels_for_persona(
    persona: PersonaId, levels: Iterable[DifficultyLevel]
) -> tuple[DifficultyLevel, ...]:
    """Filter levels down to the complexity range a persona offers."""
    low, high = PERSONA_COMPLEXITY_RANGES[PersonaId(persona)]
    return tuple(level for level in levels if low <= level.complexity <= high)


def load_catalog(path: Path) -> DifficultyCatalog:
    """Build a catalog from a YAML file with a top-level ``levels`` list."""
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    raw_levels = data.get("levels") if isinstance(data, dict) else None
    if not isinstance(raw_levels, list):
        raise CatalogError(f"Catalog file has no 'levels' list: {path}")
    try:
        levels = [DifficultyLevel(**entry) for entry in raw_levels]
    except (TypeError, ValidationError) as e:
        raise CatalogError(f"Invalid level entry in {path}: {e}") from e

    catalog = DifficultyCatalog(levels)
    logger.info("catalog_loaded", path=str(path), levels=len(catalog))
    return catalog


@functools.lru_cache(maxsize=1)
def default_catalog() -> DifficultyCatalog:
    """Get the built-in ten-level catalog."""
    return DifficultyCatalog(DEFAULT_LEVELS)
