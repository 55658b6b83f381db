"""Progression planning: next level, focus areas and a time estimate."""

from collections.abc import Iterable

from conversate_difficulty.engine.catalog import DifficultyCatalog, default_catalog
from conversate_difficulty.models.recommendation import ProgressionSuggestion

# Skill tag -> focus area suggested while the skill is not yet a strength
SKILL_FOCUS_AREAS: dict[str, str] = {
    "vocabulary": "vocabulary expansion",
    "grammar": "grammar mastery",
    "pronunciation": "pronunciation refinement",
    "cultural_knowledge": "cultural understanding",
}

DEFAULT_FOCUS = ["conversation practice"]
MASTERY_FOCUS = ["conversation fluency", "cultural mastery"]
STARTER_FOCUS = ["basic vocabulary", "simple grammar"]
ONGOING = "ongoing"


def estimate_time(complexity_gap: int) -> str:
    """Coarse time needed to climb ``complexity_gap`` levels."""
    if complexity_gap == 1:
        return "2-4 weeks"
    if complexity_gap == 2:
        return "1-2 months"
    return "2-3 months"


def focus_areas(strengths: Iterable[str]) -> list[str]:
    known = set(strengths)
    areas = [area for skill, area in SKILL_FOCUS_AREAS.items() if skill not in known]
    return areas or list(DEFAULT_FOCUS)


def suggest_progression(
    current_level_id: str,
    strengths: Iterable[str],
    steps: int = 1,
    catalog: DifficultyCatalog | None = None,
) -> ProgressionSuggestion:
    """Propose the learner's next level.

    Args:
        current_level_id: Level the learner is on now.
        strengths: Skill tags the learner is already strong in.
        steps: Number of complexity levels to climb (1 by default).
        catalog: Catalog to plan against, built-in levels when omitted.

    Returns:
        Next level id, focus areas and time estimate. At the top level the
        current id is returned with an ``ongoing`` estimate.
    """
    if steps < 1:
        raise ValueError(f"Progression steps must be positive, got {steps}")
    catalog = catalog if catalog is not None else default_catalog()

    current = catalog.get_level(current_level_id)
    if current is None:
        return ProgressionSuggestion(
            next_level_id=catalog.lowest.id,
            focus_areas=list(STARTER_FOCUS),
            time_estimate=estimate_time(1),
        )

    if current.complexity >= catalog.highest.complexity:
        return ProgressionSuggestion(
            next_level_id=current.id,
            focus_areas=list(MASTERY_FOCUS),
            time_estimate=ONGOING,
        )

    # level_for_complexity clamps, so a long jump lands on the top level
    target = catalog.level_for_complexity(current.complexity + steps) or current
    return ProgressionSuggestion(
        next_level_id=target.id,
        focus_areas=focus_areas(strengths),
        time_estimate=estimate_time(target.complexity - current.complexity),
    )
