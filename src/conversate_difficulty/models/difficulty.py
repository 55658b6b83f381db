"""Difficulty level models and the built-in level table."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class VocabularyRange(StrEnum):
    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class GrammarComplexity(StrEnum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"
    ADVANCED = "advanced"


class TopicDepth(StrEnum):
    SURFACE = "surface"
    MODERATE = "moderate"
    DEEP = "deep"
    PHILOSOPHICAL = "philosophical"


class SpeakingSpeed(StrEnum):
    SLOW = "slow"
    NORMAL = "normal"
    FAST = "fast"


class CulturalReferenceDensity(StrEnum):
    MINIMAL = "minimal"
    MODERATE = "moderate"
    RICH = "rich"
    NATIVE = "native"


MIN_COMPLEXITY = 1
MAX_COMPLEXITY = 10


class DifficultyLevel(BaseModel):
    """One entry of the difficulty catalog (immutable)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    description: str = ""
    complexity: int = Field(ge=MIN_COMPLEXITY, le=MAX_COMPLEXITY)
    vocabulary_range: VocabularyRange
    grammar_complexity: GrammarComplexity
    topic_depth: TopicDepth
    speaking_speed: SpeakingSpeed
    cultural_references: CulturalReferenceDensity


class ConversationParameters(BaseModel):
    """Numeric generation knobs (1-10) derived from a difficulty level."""

    model_config = ConfigDict(frozen=True)

    vocabulary_complexity: int = 3
    grammar_complexity: int = 3
    topic_sophistication: int = 3
    cultural_depth: int = 3
    response_speed: int = 3


def _level(
    id: str,
    name: str,
    description: str,
    complexity: int,
    vocabulary: str,
    grammar: str,
    topic: str,
    speed: str,
    culture: str,
) -> DifficultyLevel:
    return DifficultyLevel(
        id=id,
        name=name,
        description=description,
        complexity=complexity,
        vocabulary_range=VocabularyRange(vocabulary),
        grammar_complexity=GrammarComplexity(grammar),
        topic_depth=TopicDepth(topic),
        speaking_speed=SpeakingSpeed(speed),
        cultural_references=CulturalReferenceDensity(culture),
    )


DEFAULT_LEVELS: tuple[DifficultyLevel, ...] = (
    _level("beginner_1", "Débutant - Premiers Pas",
           "Perfect for your first French conversations",
           1, "basic", "simple", "surface", "slow", "minimal"),
    _level("beginner_2", "Débutant - En Progression",
           "Building confidence with basic conversations",
           2, "basic", "simple", "surface", "slow", "minimal"),
    _level("beginner_3", "Débutant - Solide",
           "Comfortable with everyday topics",
           3, "basic", "moderate", "moderate", "slow", "moderate"),
    _level("intermediate_1", "Intermédiaire - Émergent",
           "Ready for more varied conversations",
           4, "intermediate", "moderate", "moderate", "normal", "moderate"),
    _level("intermediate_2", "Intermédiaire - Développé",
           "Discussing complex topics with confidence",
           5, "intermediate", "moderate", "moderate", "normal", "moderate"),
    _level("intermediate_3", "Intermédiaire - Autonome",
           "Handling sophisticated conversations",
           6, "intermediate", "complex", "deep", "normal", "rich"),
    _level("advanced_1", "Avancé - Compétent",
           "Nuanced discussions and cultural insights",
           7, "advanced", "complex", "deep", "normal", "rich"),
    _level("advanced_2", "Avancé - Maîtrise",
           "Near-native level conversations",
           8, "advanced", "advanced", "deep", "fast", "rich"),
    _level("expert", "Expert - Native-like",
           "Professional and academic level French",
           9, "expert", "advanced", "philosophical", "fast", "native"),
    _level("native", "Natif - Perfectionnement",
           "Indistinguishable from native speakers",
           10, "expert", "advanced", "philosophical", "fast", "native"),
)
