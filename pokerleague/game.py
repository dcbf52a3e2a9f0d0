"""A single poker game and its placement and bonus scoring."""

import logging
from typing import Iterable, Optional

from .config import get_config
from .constants import BONUS_BOUNTY, BONUS_FISH_CHIP
from .models import Knockout, Player, PlayerResult, Score
from .schemas import LeagueConfig
from .scoring import bounty_bonus, fish_chip_bonus, paid_count, placement_points

logger = logging.getLogger('pokerleague.game')


class InvalidGameError(ValueError):
    """Raised when a game's results can't be scored."""


class Game:
    """
    One session's finishing order and knockouts.

    Results and knockouts are fixed at construction. The bounty players and
    fish-chipper are derived from the previous game in the season before
    scoring; the first game of a season has neither.
    """

    def __init__(
        self,
        results: Iterable[Player],
        knockouts: Iterable[tuple[Player, Player]] = (),
        date: Optional[str] = None,
        config: Optional[LeagueConfig] = None,
    ):
        """
        Args:
            results: Players in the order they finished, winner first
            knockouts: (perpetrator, victim) pairs
            date: Date the game was played, "YYYY-M-D"
            config: Scoring rules (default: league config)

        Raises:
            InvalidGameError: If results are empty or list a player twice
        """
        self.results: tuple[Player, ...] = tuple(results)
        if not self.results:
            raise InvalidGameError('A game needs at least one finisher')

        seen = set()
        for player in self.results:
            if player in seen:
                raise InvalidGameError(f'{player.name} (id {player.id}) finished more than once')
            seen.add(player)

        self.knockouts: tuple[Knockout, ...] = tuple(Knockout(*ko) for ko in knockouts)
        self.date = date
        self._valid_knockouts: Optional[list[Knockout]] = None
        self._paid: Optional[list[Player]] = None
        self.config = config or get_config()
        self.index: Optional[int] = None
        self.bounty_players: list[Player] = []
        self.fish_chipper: Optional[Player] = None
        self.log: list[str] = []

    def __repr__(self) -> str:
        names = ', '.join(p.name for p in self.results)
        return f'Game(index={self.index}, date={self.date!r}, results=[{names}])'

    @property
    def config(self) -> LeagueConfig:
        return self._config

    @config.setter
    def config(self, config: LeagueConfig) -> None:
        # the paid set depends on the rules
        self._config = config
        self._paid = None

    @property
    def player_count(self) -> int:
        return len(self.results)

    @property
    def winner(self) -> Player:
        return self.results[0]

    def __contains__(self, player: Player) -> bool:
        return player in self.results

    def set_previous_game_info(self, previous: Optional['Game']) -> None:
        """
        Work out who carries a bounty and who holds the fish-chip.

        Bounties go to the top finishers of the previous game who are
        playing in this one; absentees are skipped so the bounty passes down
        the order. The fish-chip goes to the lowest-placed finisher of the
        previous game who is playing in this one.
        """
        self.bounty_players = []
        self.fish_chipper = None
        if previous is None:
            return

        for player in previous.results:
            if len(self.bounty_players) >= self.config.bounty_slots:
                break
            if player in self:
                self.bounty_players.append(player)

        for player in reversed(previous.results):
            if player in self:
                self.fish_chipper = player
                break

    def placement_points(self) -> list[int]:
        return placement_points(self.player_count, self.config.placement_points)

    def paid_players(self) -> list[Player]:
        """Players in the money, in finishing order."""
        if self._paid is None:
            self._paid = list(self.results[:paid_count(self.player_count, self.config.paid_divisor)])
        return list(self._paid)

    def valid_knockouts(self) -> list[Knockout]:
        """
        Knockouts between two different players who both played this game.

        Worked out once per game, so each ignored knockout is logged once.
        """
        if self._valid_knockouts is not None:
            return list(self._valid_knockouts)

        valid = []
        for knockout in self.knockouts:
            perpetrator, victim = knockout
            if perpetrator == victim:
                logger.warning(f'Ignoring self-knockout by {perpetrator.name} in game {self.index}')
            elif perpetrator not in self or victim not in self:
                logger.warning(
                    f'Ignoring knockout of {victim.name} by {perpetrator.name} in game '
                    f'{self.index}: both players must have played'
                )
            else:
                valid.append(knockout)
        self._valid_knockouts = valid
        return list(valid)

    def fish_chip_bonus(self, player: Player) -> int:
        return fish_chip_bonus(
            player, self.fish_chipper, self.paid_players(), self.config.fish_chip_bonus
        )

    def bounty_bonus(self, player: Player) -> int:
        return bounty_bonus(
            player, self.valid_knockouts(), self.bounty_players, self.config.bounty_bonus
        )

    def player_results(self) -> list[PlayerResult]:
        """Placement points and bonus breakdown for every finisher, winner first."""
        points = self.placement_points()
        paid = self.paid_players()
        knockouts = self.valid_knockouts()

        results = []
        for position, player in enumerate(self.results):
            breakdown = {}
            fish_chip = fish_chip_bonus(player, self.fish_chipper, paid, self.config.fish_chip_bonus)
            if fish_chip:
                breakdown[BONUS_FISH_CHIP] = fish_chip
            bounty = bounty_bonus(player, knockouts, self.bounty_players, self.config.bounty_bonus)
            if bounty:
                breakdown[BONUS_BOUNTY] = bounty
            results.append(
                PlayerResult(
                    player=player,
                    position=position + 1,
                    placement_points=points[position],
                    breakdown=breakdown,
                )
            )
        return results

    def calculate_scores(self, scores: dict[Player, Score]) -> list[PlayerResult]:
        """
        Record this game's points for every finisher.

        Scores are created in `scores` for players seen for the first time.
        Scoring the same game again overwrites its entries without counting
        the win twice.

        Args:
            scores: Season score records keyed by player

        Returns:
            The per-player results that were recorded
        """
        if self.index is None:
            raise ValueError('Game must be added to a season before it can be scored')

        results = self.player_results()
        self.log = self._narrate(results)

        for result in results:
            score = scores.get(result.player)
            if score is None:
                score = Score(result.player, counted_games=self.config.counted_games)
                scores[result.player] = score

            first_scoring = score.game_points(self.index) is None
            score.record(self.index, result.total_points, result.bonus_points)
            if result.position == 1 and first_scoring:
                score.win()

        logger.debug(f'Scored game {self.index}: {len(results)} players, winner {self.winner.name}')
        return results

    def _narrate(self, results: list[PlayerResult]) -> list[str]:
        lines = []
        label = f'Game {self.index + 1}' + (f' ({self.date})' if self.date else '')
        if self.bounty_players:
            lines.append(f'{label}: bounties on {", ".join(p.name for p in self.bounty_players)}')
        if self.fish_chipper is not None:
            lines.append(f'{label}: {self.fish_chipper.name} holds the fish-chip')

        for result in results:
            if BONUS_BOUNTY in result.breakdown:
                victims = [
                    ko.victim.name
                    for ko in self.valid_knockouts()
                    if ko.perpetrator == result.player and ko.victim in self.bounty_players
                ]
                lines.append(
                    f'{label}: {result.player.name} collects the bounty on {", ".join(victims)} '
                    f'(+{result.breakdown[BONUS_BOUNTY]})'
                )
            if BONUS_FISH_CHIP in result.breakdown:
                lines.append(
                    f'{label}: {result.player.name} cashes in the fish-chip '
                    f'(+{result.breakdown[BONUS_FISH_CHIP]})'
                )

        lines.append(f'{label}: {self.winner.name} wins')
        paid = self.paid_players()
        if paid:
            lines.append(f'{label}: paid {", ".join(p.name for p in paid)}')
        else:
            lines.append(f'{label}: nobody in the money')
        return lines
