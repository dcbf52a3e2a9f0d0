from .models import Player, Knockout, PlayerResult, Score
from .scoring import (
    placement_points,
    paid_count,
    fish_chip_bonus,
    bounty_bonus,
)
from .game import Game, InvalidGameError
from .season import Season
from .players import AmbiguousPlayerError, PlayerDirectory, UnknownPlayerError
from .store import (
    LeagueStore,
    JsonLeagueStore,
    season_from_record,
    season_to_record,
)
from .table import (
    LeagueTableRow,
    league_table,
    format_league_table,
    save_standings_json,
    export_table_to_excel,
)

__all__ = [
    # Models
    'Player',
    'Knockout',
    'PlayerResult',
    'Score',
    # Scoring rules
    'placement_points',
    'paid_count',
    'fish_chip_bonus',
    'bounty_bonus',
    # Engine
    'Game',
    'InvalidGameError',
    'Season',
    'PlayerDirectory',
    'UnknownPlayerError',
    'AmbiguousPlayerError',
    # Persistence
    'LeagueStore',
    'JsonLeagueStore',
    'season_from_record',
    'season_to_record',
    # League table
    'LeagueTableRow',
    'league_table',
    'format_league_table',
    'save_standings_json',
    'export_table_to_excel',
]
