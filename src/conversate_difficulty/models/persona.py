"""Conversation personas and the difficulty range each one offers."""

from enum import StrEnum


class PersonaId(StrEnum):
    """Conversation partner personas."""

    MAYA = "maya"  # patient teacher
    ALEX = "alex"  # casual friend
    LUNA = "luna"  # cultural guide


# Inclusive (min, max) complexity bounds per persona
PERSONA_COMPLEXITY_RANGES: dict[PersonaId, tuple[int, int]] = {
    PersonaId.MAYA: (1, 10),
    PersonaId.ALEX: (1, 6),
    PersonaId.LUNA: (4, 10),
}
