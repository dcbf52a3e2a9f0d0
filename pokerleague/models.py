"""Data models for the poker league."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, NamedTuple, Optional

from .constants import COUNTED_GAMES


@dataclass(frozen=True)
class Player:
    """A league player. Identity is the id; the name is for display only."""
    id: int
    name: str = field(compare=False)

    def __str__(self) -> str:
        return self.name


class Knockout(NamedTuple):
    """Record of one player eliminating another."""
    perpetrator: Player
    victim: Player


@dataclass
class PlayerResult:
    """Container for one finisher's points in a single game."""
    player: Player
    position: int  # 1-based finishing position
    placement_points: int
    breakdown: Dict[str, int] = field(default_factory=dict)  # bonus source -> points

    @property
    def bonus_points(self) -> int:
        return sum(self.breakdown.values())

    @property
    def total_points(self) -> int:
        return self.placement_points + self.bonus_points


@dataclass
class Score:
    """
    A player's running record for one season.

    Game totals and bonus components are keyed by game index; a missing
    key means the player did not play that game. All aggregates are
    computed on demand from these mappings.
    """
    player: Player
    points: Dict[int, int] = field(default_factory=dict)
    bonuses: Dict[int, int] = field(default_factory=dict)
    wins: int = 0
    counted_games: int = COUNTED_GAMES

    def record(self, game_index: int, total_points: int, bonus_points: int) -> None:
        """Set the totals for one game, replacing any earlier value."""
        self.points[game_index] = total_points
        self.bonuses[game_index] = bonus_points

    def win(self) -> None:
        """Register that the player won a game."""
        self.wins += 1

    def reset(self) -> None:
        self.points.clear()
        self.bonuses.clear()
        self.wins = 0

    def game_points(self, game_index: int) -> Optional[int]:
        return self.points.get(game_index)

    def game_bonus(self, game_index: int) -> Optional[int]:
        return self.bonuses.get(game_index)

    def game_scores(self) -> List[int]:
        """Recorded game totals in game order."""
        return [self.points[index] for index in sorted(self.points)]

    def games_played(self) -> int:
        return len(self.points)

    def average_points_per_game(self) -> float:
        scores = self.game_scores()
        if not scores:
            return 0.0
        # halves round up: 12.25 -> 12.3
        average = Decimal(sum(scores)) / len(scores)
        return float(average.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))

    def bonus_points(self) -> int:
        return sum(self.bonuses.values())

    def lowest_weekly_points(self) -> int:
        return min(self.game_scores(), default=0)

    def overall_score(self) -> int:
        """Sum of the best `counted_games` game totals."""
        best = sorted(self.game_scores(), reverse=True)
        return sum(best[:self.counted_games])

    def dropped_scores(self) -> List[int]:
        """Game totals that don't count towards the overall score, highest first."""
        return sorted(self.game_scores(), reverse=True)[self.counted_games:]
