"""Scoring rules for a single poker game."""

from typing import Iterable, Optional, Sequence

from .constants import BOUNTY_BONUS, DEFAULT_POINTS, FISH_CHIP_BONUS, PAID_DIVISOR
from .models import Knockout, Player


def placement_points(player_count: int, base: Sequence[int] = DEFAULT_POINTS) -> list[int]:
    """
    Points for each finishing position, winner first.

    Scoring:
        - Up to len(base) players: the first player_count entries of base
        - More players: every base entry gains one point per extra player,
          and the extra positions score extra, extra - 1, ..., 1, so last
          place always receives 1 point

    Examples:
        placement_points(6)  -> [15, 13, 11, 9, 7, 5]
        placement_points(13) -> [18, 16, 14, 12, 10, 8, 7, 6, 5, 4, 3, 2, 1]
    """
    if player_count <= len(base):
        return list(base[:player_count])

    extra = player_count - len(base)
    points = [value + extra for value in base]
    points.extend(range(extra, 0, -1))
    return points


def paid_count(player_count: int, divisor: int = PAID_DIVISOR) -> int:
    """Number of finishers in the money: 6 -> 2, 9 -> 3, 13 -> 4."""
    return player_count // divisor


def fish_chip_bonus(
    player: Player,
    fish_chipper: Optional[Player],
    paid_players: Iterable[Player],
    bonus: int = FISH_CHIP_BONUS,
) -> int:
    """
    Bonus for cashing in the fish-chip.

    Awarded only when the player holds the fish-chip AND finishes in the
    money this game.
    """
    if fish_chipper is None or player != fish_chipper:
        return 0
    return bonus if player in paid_players else 0


def bounty_bonus(
    player: Player,
    knockouts: Iterable[Knockout],
    bounty_players: Iterable[Player],
    bonus: int = BOUNTY_BONUS,
) -> int:
    """Bonus for every bounty player this player knocked out. No cap."""
    bounties = set(bounty_players)
    return sum(
        bonus
        for knockout in knockouts
        if knockout.perpetrator == player and knockout.victim in bounties
    )
