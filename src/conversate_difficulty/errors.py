"""Exceptions raised by the difficulty engine."""


class DifficultyEngineError(Exception):
    """Base class for difficulty engine errors."""


class CatalogError(DifficultyEngineError):
    """The difficulty catalog is misconfigured (gaps, duplicates, bad file)."""
