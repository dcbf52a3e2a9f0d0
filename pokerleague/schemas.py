"""Pydantic schemas for persisted league data and configuration."""

from pydantic import BaseModel, Field, field_validator

from .constants import (
    BOUNTY_BONUS,
    BOUNTY_SLOTS,
    COUNTED_GAMES,
    DEFAULT_POINTS,
    FISH_CHIP_BONUS,
    PAID_DIVISOR,
)


class PlayerRecord(BaseModel):
    """Player in the directory."""

    id: int = Field(..., ge=0)
    name: str = Field(..., min_length=1)

    class Config:
        extra = 'forbid'


class GameRecord(BaseModel):
    """One game: finishing order winner first, plus knockouts by player id."""

    date: str | None = Field(None, pattern=r'^\d{4}-\d{1,2}-\d{1,2}$')
    results: list[int] = Field(..., min_length=1)
    knockouts: list[tuple[int, int]] = Field(default_factory=list)

    @field_validator('results')
    @classmethod
    def validate_results(cls, v):
        """Ensure nobody finishes twice."""
        seen = set()
        for player_id in v:
            if player_id in seen:
                raise ValueError(f'Player {player_id} appears more than once in results')
            seen.add(player_id)
        return v

    class Config:
        extra = 'forbid'


class SeasonRecord(BaseModel):
    """A season and its games in chronological order."""

    name: str = Field(..., min_length=1)
    games: list[GameRecord] = Field(default_factory=list)

    class Config:
        extra = 'forbid'


class PlayersFile(BaseModel):
    """Complete players.json file structure."""

    players: list[PlayerRecord] = Field(default_factory=list)

    @field_validator('players')
    @classmethod
    def validate_unique_ids(cls, v):
        """Ensure player ids are unique."""
        ids = [p.id for p in v]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f'Duplicate player ids: {duplicates}')
        return v

    class Config:
        extra = 'forbid'


class SeasonsFile(BaseModel):
    """Complete seasons.json file structure."""

    seasons: list[SeasonRecord] = Field(default_factory=list)

    class Config:
        extra = 'forbid'


class LeagueConfig(BaseModel):
    """League scoring settings."""

    placement_points: list[int] = Field(default_factory=lambda: list(DEFAULT_POINTS), min_length=1)
    counted_games: int = Field(COUNTED_GAMES, ge=1)
    bounty_slots: int = Field(BOUNTY_SLOTS, ge=0)
    bounty_bonus: int = Field(BOUNTY_BONUS, ge=0)
    fish_chip_bonus: int = Field(FISH_CHIP_BONUS, ge=0)
    paid_divisor: int = Field(PAID_DIVISOR, ge=1)

    @field_validator('placement_points')
    @classmethod
    def validate_placement_points(cls, v):
        """Ensure points are positive and never increase down the order."""
        if any(points < 1 for points in v):
            raise ValueError(f'Placement points must be positive: {v}')
        if any(a < b for a, b in zip(v, v[1:])):
            raise ValueError(f'Placement points must not increase: {v}')
        return v

    class Config:
        extra = 'forbid'
