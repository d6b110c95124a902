"""Bot strategies for driving Five Hundred games."""

from .base import BotStrategy
from .random_bot import RandomBot

__all__ = ["BotStrategy", "RandomBot"]
