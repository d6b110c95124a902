"""Core rules engine package for Five Hundred."""

__all__ = [
    "cards",
    "deck",
    "actions",
    "trick",
    "state",
    "scoring",
    "rules_schema",
    "game",
    "service",
]
