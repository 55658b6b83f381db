"""Command-line entry point for the difficulty engine."""

import argparse
import json
import sys
from pathlib import Path

import structlog
from pydantic import TypeAdapter

from conversate_difficulty.config import get_settings
from conversate_difficulty.engine.service import DifficultyEngine
from conversate_difficulty.errors import DifficultyEngineError
from conversate_difficulty.logging_config import configure_logging
from conversate_difficulty.models.metrics import ConversationMetrics
from conversate_difficulty.models.persona import PersonaId
from conversate_difficulty.models.user_profile import UserProfile

logger = structlog.get_logger()

EXIT_INVALID_INPUT = 2

_metrics_adapter = TypeAdapter(list[ConversationMetrics])


def load_profile(path: Path) -> UserProfile:
    return UserProfile.model_validate_json(path.read_text(encoding="utf-8"))


def load_metrics(path: Path) -> list[ConversationMetrics]:
    """Load a metrics log: either a JSON list or ``{"sessions": [...]}``."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("sessions", [])
    return _metrics_adapter.validate_python(data)


def _cmd_recommend(engine: DifficultyEngine, args: argparse.Namespace) -> dict:
    profile = load_profile(args.profile)
    metrics = load_metrics(args.metrics)
    return engine.recommend(profile, metrics).model_dump(mode="json")


def _cmd_progression(engine: DifficultyEngine, args: argparse.Namespace) -> dict:
    suggestion = engine.suggest_progression(args.level, args.strength, steps=args.steps)
    return suggestion.model_dump(mode="json")


def _cmd_levels(engine: DifficultyEngine, args: argparse.Namespace) -> dict:
    if args.persona:
        levels = engine.levels_for_persona(PersonaId(args.persona))
    else:
        levels = engine.catalog.all_levels()
    return {"levels": [level.model_dump(mode="json") for level in levels]}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conversate-difficulty",
        description="Adaptive difficulty recommendations for conversation practice.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    rec = sub.add_parser("recommend", help="Recommend the next difficulty level")
    rec.add_argument("--profile", type=Path, required=True, help="User profile JSON")
    rec.add_argument("--metrics", type=Path, required=True, help="Session metrics JSON")
    rec.set_defaults(handler=_cmd_recommend)

    prog = sub.add_parser("progression", help="Suggest the next progression step")
    prog.add_argument("--level", required=True, help="Current difficulty level id")
    prog.add_argument(
        "--strength", action="append", default=[], help="Skill the learner is strong in"
    )
    prog.add_argument("--steps", type=int, default=1, help="Levels to climb")
    prog.set_defaults(handler=_cmd_progression)

    lv = sub.add_parser("levels", help="List difficulty levels")
    lv.add_argument("--persona", choices=[p.value for p in PersonaId])
    lv.set_defaults(handler=_cmd_levels)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(production=settings.is_production, level=settings.log_level)

    try:
        engine = DifficultyEngine.from_settings(settings)
        result = args.handler(engine, args)
    except (OSError, ValueError) as e:
        logger.error("invalid_input", command=args.command, error=str(e))
        return EXIT_INVALID_INPUT
    except DifficultyEngineError as e:
        logger.error("engine_configuration_error", error=str(e))
        return EXIT_INVALID_INPUT

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
