"""Season orchestration: ordered games and the ranked score table."""

import logging
from typing import Optional

from .config import get_config
from .game import Game
from .models import Player, Score
from .schemas import LeagueConfig

logger = logging.getLogger('pokerleague.season')


class Season:
    """
    An append-only sequence of games and the scores derived from them.

    Games must be added in chronological order. `scores` always reflects
    every game added so far, ranked by overall score (ties keep the order
    in which players first appeared).
    """

    def __init__(self, name: str, config: Optional[LeagueConfig] = None):
        self.name = name
        self.config = config or get_config()
        self.games: list[Game] = []
        self.scores: list[Score] = []
        self._scores: dict[Player, Score] = {}

    def __repr__(self) -> str:
        return f'Season(name={self.name!r}, games={len(self.games)}, players={len(self._scores)})'

    def add_game(self, game: Game) -> Game:
        """
        Append a game, score it and re-rank the season.

        The game is scored under the season's rules.

        Args:
            game: The next game in chronological order

        Returns:
            The game, with its index and previous-game info set
        """
        game.config = self.config
        previous = self.games[-1] if self.games else None
        game.set_previous_game_info(previous)
        game.index = len(self.games)
        self.games.append(game)

        game.calculate_scores(self._scores)
        self._rank()

        logger.info(
            f'{self.name}: added game {game.index + 1} with {game.player_count} players, '
            f'won by {game.winner.name}'
        )
        return game

    def recalculate(self) -> None:
        """Reset every score and replay all games in order."""
        for score in self._scores.values():
            score.reset()

        previous = None
        for index, game in enumerate(self.games):
            game.set_previous_game_info(previous)
            game.index = index
            game.calculate_scores(self._scores)
            previous = game
        self._rank()

    def _rank(self) -> None:
        self.scores = sorted(self._scores.values(), key=lambda s: s.overall_score(), reverse=True)

    def score_for(self, player: Player) -> Optional[Score]:
        return self._scores.get(player)

    def standings(self) -> list[Score]:
        """Scores ranked by overall score, best first."""
        return list(self.scores)

    @property
    def players(self) -> list[Player]:
        """Every player who has appeared this season, in order of first appearance."""
        return list(self._scores)

    @property
    def log(self) -> list[str]:
        """Narrative of every game in order."""
        return [line for game in self.games for line in game.log]
