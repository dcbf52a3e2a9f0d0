"""League table building and export."""

import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path

import openpyxl
from openpyxl.styles import Font

from .constants import LEAGUE_TABLE_HEADINGS
from .season import Season
from .utils import save_json

logger = logging.getLogger('pokerleague.table')

# Characters Excel doesn't allow in sheet titles
_INVALID_SHEET_CHARS = '[]:*?/\\'


@dataclass
class LeagueTableRow:
    """One line of the league table."""
    rank: int
    player_id: int
    name: str
    games_played: int
    wins: int
    average_points: float
    bonus_points: int
    lowest_weekly_points: int
    overall_points: int

    def values(self) -> list:
        """Row values in LEAGUE_TABLE_HEADINGS order."""
        return [
            self.rank,
            self.name,
            self.games_played,
            self.wins,
            self.average_points,
            self.bonus_points,
            self.lowest_weekly_points,
            self.overall_points,
        ]


def league_table(season: Season) -> list[LeagueTableRow]:
    """
    Build the ranked league table for a season.

    Players level on overall points share a rank.
    """
    rows = []
    for position, score in enumerate(season.standings()):
        overall = score.overall_score()
        if rows and rows[-1].overall_points == overall:
            rank = rows[-1].rank
        else:
            rank = position + 1
        rows.append(
            LeagueTableRow(
                rank=rank,
                player_id=score.player.id,
                name=score.player.name,
                games_played=score.games_played(),
                wins=score.wins,
                average_points=score.average_points_per_game(),
                bonus_points=score.bonus_points(),
                lowest_weekly_points=score.lowest_weekly_points(),
                overall_points=overall,
            )
        )
    return rows


def format_league_table(rows: list[LeagueTableRow]) -> str:
    """Render table rows as aligned plain text."""
    lines = [LEAGUE_TABLE_HEADINGS] + [[str(v) for v in row.values()] for row in rows]
    widths = [max(len(line[i]) for line in lines) for i in range(len(LEAGUE_TABLE_HEADINGS))]
    rendered = ['  '.join(cell.ljust(width) for cell, width in zip(line, widths)).rstrip() for line in lines]
    rendered.insert(1, '  '.join('-' * width for width in widths))
    return '\n'.join(rendered)


def save_standings_json(path: Path | str, season: Season) -> list[dict]:
    """
    Save a season's league table to JSON.

    Returns:
        The standings as a list of dicts
    """
    standings = [asdict(row) for row in league_table(season)]
    save_json(
        path,
        {
            'season': season.name,
            'games': len(season.games),
            'updated_at': datetime.now(timezone.utc).isoformat(),
            'standings': standings,
        },
    )
    logger.info(f'Standings for {season.name} saved to {path}')
    return standings


def sheet_title(name: str) -> str:
    """Make a season name usable as an Excel sheet title."""
    title = ''.join('_' if c in _INVALID_SHEET_CHARS else c for c in name).strip("'")
    return title[:31] or 'Season'


def export_table_to_excel(path: Path | str, season: Season) -> None:
    """
    Write the season's league table to a worksheet named after the season.

    An existing workbook is updated in place; the season's sheet is
    replaced. Each game gets a column holding the points every player
    scored in it (blank if they didn't play).
    """
    path = Path(path)
    if path.exists():
        wb = openpyxl.load_workbook(path)
    else:
        wb = openpyxl.Workbook()
        wb.remove(wb.active)

    title = sheet_title(season.name)
    if title in wb.sheetnames:
        wb.remove(wb[title])
    ws = wb.create_sheet(title)

    game_headings = [game.date or f'Game {game.index + 1}' for game in season.games]
    ws.append(LEAGUE_TABLE_HEADINGS + game_headings)
    for cell in ws[1]:
        cell.font = Font(bold=True)

    # league_table rows follow standings order
    for row, score in zip(league_table(season), season.standings()):
        game_points = [score.game_points(game.index) for game in season.games]
        ws.append(row.values() + game_points)

    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    wb.close()
    logger.info(f'League table for {season.name} exported to {path}')
