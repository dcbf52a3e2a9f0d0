"""Persistence for players and seasons.

Only raw inputs are stored: players, and for each season its games'
finishing order and knockouts. Bounties, fish-chips and scores are rebuilt
by replaying every game through `Season.add_game` on load.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Protocol, runtime_checkable

from .constants import PLAYERS_FILE, SEASONS_FILE
from .game import Game
from .models import Player
from .players import PlayerDirectory
from .schemas import (
    GameRecord,
    LeagueConfig,
    PlayerRecord,
    PlayersFile,
    SeasonRecord,
    SeasonsFile,
)
from .season import Season
from .utils import load_json, save_json

logger = logging.getLogger('pokerleague.store')


@runtime_checkable
class LeagueStore(Protocol):
    """Load and save ports the league application depends on."""

    def load_players(self) -> PlayerDirectory: ...

    def save_players(self, directory: PlayerDirectory) -> None: ...

    def load_seasons(self, directory: PlayerDirectory) -> list[Season]: ...

    def save_seasons(self, seasons: Iterable[Season]) -> None: ...


def directory_to_record(directory: PlayerDirectory) -> PlayersFile:
    return PlayersFile(players=[PlayerRecord(id=p.id, name=p.name) for p in directory])


def directory_from_record(record: PlayersFile) -> PlayerDirectory:
    return PlayerDirectory(Player(p.id, p.name) for p in record.players)


def game_to_record(game: Game) -> GameRecord:
    return GameRecord(
        date=game.date,
        results=[p.id for p in game.results],
        knockouts=[(ko.perpetrator.id, ko.victim.id) for ko in game.knockouts],
    )


def game_from_record(
    record: GameRecord,
    directory: PlayerDirectory,
    config: Optional[LeagueConfig] = None,
) -> Game:
    """
    Build a game from its stored form.

    Raises:
        UnknownPlayerError: If any id isn't in the directory
    """
    return Game(
        results=[directory.get(player_id) for player_id in record.results],
        knockouts=[(directory.get(perp), directory.get(victim)) for perp, victim in record.knockouts],
        date=record.date,
        config=config,
    )


def season_to_record(season: Season) -> SeasonRecord:
    return SeasonRecord(name=season.name, games=[game_to_record(g) for g in season.games])


def season_from_record(
    record: SeasonRecord,
    directory: PlayerDirectory,
    config: Optional[LeagueConfig] = None,
) -> Season:
    """
    Rebuild a season by replaying its games in stored order.

    The player directory must already hold every player the season refers to.

    Raises:
        UnknownPlayerError: If a game refers to an unknown player id
    """
    season = Season(record.name, config=config)
    for game_record in record.games:
        season.add_game(game_from_record(game_record, directory, season.config))
    logger.debug(f'Rebuilt season {season.name} from {len(season.games)} games')
    return season


class JsonLeagueStore:
    """
    League data kept as players.json and seasons.json in one directory.

    Missing files load as empty collections.

    Example:
        store = JsonLeagueStore('data')
        directory = store.load_players()
        seasons = store.load_seasons(directory)
    """

    def __init__(self, data_dir: Path | str, config: Optional[LeagueConfig] = None):
        self.data_dir = Path(data_dir)
        self.config = config

    @property
    def players_path(self) -> Path:
        return self.data_dir / PLAYERS_FILE

    @property
    def seasons_path(self) -> Path:
        return self.data_dir / SEASONS_FILE

    def load_players(self) -> PlayerDirectory:
        if not self.players_path.exists():
            logger.debug(f'No players file at {self.players_path}')
            return PlayerDirectory()
        return directory_from_record(load_json(self.players_path, schema=PlayersFile))

    def save_players(self, directory: PlayerDirectory) -> None:
        save_json(self.players_path, directory_to_record(directory))
        logger.info(f'Saved {len(directory)} players to {self.players_path}')

    def load_seasons(self, directory: PlayerDirectory) -> list[Season]:
        if not self.seasons_path.exists():
            logger.debug(f'No seasons file at {self.seasons_path}')
            return []
        record = load_json(self.seasons_path, schema=SeasonsFile)
        return [season_from_record(s, directory, self.config) for s in record.seasons]

    def save_seasons(self, seasons: Iterable[Season]) -> None:
        record = SeasonsFile(seasons=[season_to_record(s) for s in seasons])
        save_json(self.seasons_path, record)
        logger.info(f'Saved {len(record.seasons)} seasons to {self.seasons_path}')
