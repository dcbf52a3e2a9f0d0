#!/usr/bin/env python3
"""
Poker league CLI

Keeps the league's players and seasons in a data directory and prints the
league table.

Usage:
    pokerleague add-player "David"
    pokerleague add-season "Spring 2026"
    pokerleague add-game "Spring 2026" --date 2026-3-5 --results 2 0 1 3 --knockout 2:0 0:1
    pokerleague table "Spring 2026" --json web/standings.json --excel league.xlsx
    pokerleague log "Spring 2026"
    pokerleague --log-file logs/league.log add-game "Spring 2026" --results 0 1 2
"""

import argparse
import logging
import sys
from datetime import date
from typing import Optional

from .config import get_config
from .game import Game
from .logging_config import get_logger, setup_logging
from .season import Season
from .store import JsonLeagueStore, game_to_record
from .table import export_table_to_excel, format_league_table, league_table, save_standings_json
from .validators import validate_game_record, validate_season

logger = get_logger('cli')


def parse_knockout(value: str) -> tuple[str, str]:
    """Parse "PERPETRATOR:VICTIM" (ids or names)."""
    perpetrator, sep, victim = value.partition(':')
    if not sep or not perpetrator.strip() or not victim.strip():
        raise argparse.ArgumentTypeError(f'Knockout must look like PERPETRATOR:VICTIM, got {value!r}')
    return perpetrator.strip(), victim.strip()


def find_season(seasons: list[Season], name: str) -> Season:
    for season in seasons:
        if season.name == name:
            return season
    raise LookupError(f'No season named {name!r}')


def today() -> str:
    d = date.today()
    return f'{d.year}-{d.month}-{d.day}'


def cmd_add_player(args, store: JsonLeagueStore) -> int:
    directory = store.load_players()
    player = directory.assign(args.name)
    store.save_players(directory)
    print(f'Added {player.name} with id {player.id}')
    return 0


def cmd_add_season(args, store: JsonLeagueStore) -> int:
    directory = store.load_players()
    seasons = store.load_seasons(directory)
    if any(s.name == args.name for s in seasons):
        raise ValueError(f'Season {args.name!r} already exists')
    seasons.append(Season(args.name, config=store.config))
    store.save_seasons(seasons)
    print(f'Added season {args.name}')
    return 0


def cmd_add_game(args, store: JsonLeagueStore) -> int:
    directory = store.load_players()
    seasons = store.load_seasons(directory)
    season = find_season(seasons, args.season)

    game = Game(
        results=[directory.resolve(ref) for ref in args.results],
        knockouts=[(directory.resolve(p), directory.resolve(v)) for p, v in args.knockout],
        date=args.date or today(),
        config=season.config,
    )

    # problems are reported but the game is still recorded as entered
    for problem in validate_game_record(game_to_record(game), directory):
        print(f'⚠️  {problem}', file=sys.stderr)

    season.add_game(game)

    for warning in validate_season(season):
        logger.warning(warning)

    store.save_seasons(seasons)

    if not args.quiet:
        for line in game.log:
            print(line)
    print(f'Recorded game {game.index + 1} of {season.name}')
    return 0


def cmd_table(args, store: JsonLeagueStore) -> int:
    directory = store.load_players()
    season = find_season(store.load_seasons(directory), args.season)

    print('\n' + '=' * 60)
    print(f'{season.name.upper()} - {len(season.games)} games')
    print('=' * 60)
    print(format_league_table(league_table(season)))

    if args.json:
        save_standings_json(args.json, season)
        print(f'Standings saved to {args.json}')
    if args.excel:
        export_table_to_excel(args.excel, season)
        print(f'League table exported to {args.excel}')
    return 0


def cmd_log(args, store: JsonLeagueStore) -> int:
    directory = store.load_players()
    season = find_season(store.load_seasons(directory), args.season)
    for line in season.log:
        print(line)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Poker league scoring and league table')
    parser.add_argument(
        '--data-dir', '-d',
        default='data',
        help='Directory holding players.json and seasons.json',
    )
    parser.add_argument(
        '--config', '-c',
        default=None,
        help='Path to league config JSON (defaults to POKERLEAGUE_CONFIG or data/league_config.json)',
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Show debug logging')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress detailed output')
    parser.add_argument(
        '--log-file',
        default=None,
        metavar='PATH',
        help='Also append log records to this file',
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    add_player = subparsers.add_parser('add-player', help='Register a new player')
    add_player.add_argument('name', help="Player's name")
    add_player.set_defaults(func=cmd_add_player)

    add_season = subparsers.add_parser('add-season', help='Start a new season')
    add_season.add_argument('name', help='Season name')
    add_season.set_defaults(func=cmd_add_season)

    add_game = subparsers.add_parser('add-game', help='Record the next game of a season')
    add_game.add_argument('season', help='Season name')
    add_game.add_argument(
        '--results', '-r',
        nargs='+',
        required=True,
        help='Player ids or names in finishing order, winner first',
    )
    add_game.add_argument(
        '--knockout', '-k',
        type=parse_knockout,
        action='append',
        default=[],
        help='PERPETRATOR:VICTIM, repeat for each knockout',
    )
    add_game.add_argument('--date', default=None, help='Date played, YYYY-M-D (default: today)')
    add_game.set_defaults(func=cmd_add_game)

    table = subparsers.add_parser('table', help='Print the league table')
    table.add_argument('season', help='Season name')
    table.add_argument('--json', default=None, help='Also save standings JSON to this path')
    table.add_argument('--excel', default=None, help='Also export the table to this .xlsx workbook')
    table.set_defaults(func=cmd_table)

    log = subparsers.add_parser('log', help="Print the season's game narrative")
    log.add_argument('season', help='Season name')
    log.set_defaults(func=cmd_log)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    setup_logging(level=level, log_file=args.log_file)

    try:
        store = JsonLeagueStore(args.data_dir, config=get_config(args.config))
        return args.func(args, store)
    except (LookupError, ValueError) as e:
        print(f'❌ {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
