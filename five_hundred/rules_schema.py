"""Validation schema for Five Hundred rules configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RuleSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    score_limit: int = Field(
        500,
        gt=0,
        description="The game ends once any team score leaves [-score_limit, score_limit].",
    )
    trick_points: int = Field(10, ge=0, description="Points per trick for teams that did not win the bid.")
    kitty_size: Literal[3] = Field(3, description="Cards set aside each round for the bid winner.")

    @field_validator("score_limit")
    @classmethod
    def ensure_reachable(cls, value: int) -> int:
        if value % 10 != 0:
            raise ValueError("Score limit must be a multiple of 10.")
        return value

    def is_game_over(self, scores) -> bool:
        return any(not -self.score_limit <= score <= self.score_limit for score in scores)
