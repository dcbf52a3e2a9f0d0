"""Player directory: assigns and resolves player identities."""

import logging
from typing import Iterable, Iterator

from .models import Player

logger = logging.getLogger('pokerleague.players')


class UnknownPlayerError(LookupError):
    """Raised when a player id isn't in the directory."""


class AmbiguousPlayerError(LookupError):
    """Raised when a name matches more than one player."""


class PlayerDirectory:
    """Stable integer ids for every player in the league."""

    def __init__(self, players: Iterable[Player] = ()):
        self._players: dict[int, Player] = {}
        for player in players:
            self.add(player)

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players.values())

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def add(self, player: Player) -> Player:
        """
        Register an existing player.

        Names need not be unique; players are told apart by id.

        Raises:
            ValueError: If the id is already taken
        """
        if player.id in self._players:
            raise ValueError(f'Player id {player.id} is already taken by {self._players[player.id].name}')
        self._players[player.id] = player
        return player

    def assign(self, name: str) -> Player:
        """
        Create a player with the next free id.

        Raises:
            ValueError: If the name is empty or already used by another player
        """
        name = name.strip()
        if not name:
            raise ValueError('Player name must not be empty')
        if self.find_by_name(name):
            raise ValueError(f'A player named {name!r} already exists')
        next_id = max(self._players, default=-1) + 1
        player = self.add(Player(next_id, name))
        logger.info(f'Assigned id {player.id} to {player.name}')
        return player

    def get(self, player_id: int) -> Player:
        """
        Resolve a player id.

        Raises:
            UnknownPlayerError: If no player has this id
        """
        try:
            return self._players[player_id]
        except KeyError:
            raise UnknownPlayerError(f'Unknown player id: {player_id}') from None

    def find_by_name(self, name: str) -> list[Player]:
        """Case-insensitive lookup by name; every player with that name, in id order."""
        wanted = name.strip().casefold()
        return sorted(
            (p for p in self._players.values() if p.name.casefold() == wanted),
            key=lambda p: p.id,
        )

    def resolve(self, ref: str) -> Player:
        """
        Resolve a command-line reference: a player id or a name.

        Raises:
            UnknownPlayerError: If nothing matches
            AmbiguousPlayerError: If more than one player has the name
        """
        if ref.isdigit():
            return self.get(int(ref))
        matches = self.find_by_name(ref)
        if not matches:
            raise UnknownPlayerError(f'Unknown player: {ref}')
        if len(matches) > 1:
            ids = ', '.join(str(p.id) for p in matches)
            raise AmbiguousPlayerError(f'More than one player is named {ref!r}, use an id: {ids}')
        return matches[0]
