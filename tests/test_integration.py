"""Integration tests for the CLI and data directory workflow."""

import json

import openpyxl
import pytest

from pokerleague.cli import main, parse_knockout
from pokerleague.logging_config import setup_logging
from pokerleague.store import JsonLeagueStore

PLAYERS = ['Alice', 'Bob', 'Carol', 'Dave', 'Erin', 'Frank']


@pytest.fixture
def data_dir(tmp_path):
    """Data directory with six players and an empty season."""
    data_dir = tmp_path / 'data'
    for name in PLAYERS:
        assert main(['-d', str(data_dir), 'add-player', name]) == 0
    assert main(['-d', str(data_dir), 'add-season', 'Spring 2026']) == 0
    return data_dir


def run(data_dir, *args) -> int:
    return main(['-d', str(data_dir), *args])


class TestLeagueWorkflow:
    """End-to-end flow from players to league table."""

    def test_add_players(self, data_dir, capsys):
        players = json.loads((data_dir / 'players.json').read_text())['players']
        assert [p['name'] for p in players] == PLAYERS
        assert [p['id'] for p in players] == list(range(6))

    def test_record_games_and_table(self, data_dir, capsys):
        capsys.readouterr()
        assert run(
            data_dir, 'add-game', 'Spring 2026', '--date', '2026-3-5',
            '--results', 'Alice', 'Bob', 'Carol', 'Dave', 'Erin', 'Frank',
        ) == 0
        assert run(
            data_dir, 'add-game', 'Spring 2026', '--date', '2026-3-12',
            '--results', '2', '0', '1', '3', '4', '5',
            '--knockout', 'Carol:Alice', '--knockout', '3:4',
        ) == 0

        out = capsys.readouterr().out
        assert 'Recorded game 2 of Spring 2026' in out
        assert 'Game 2 (2026-3-12): Carol collects the bounty on Alice (+1)' in out
        assert 'Game 2 (2026-3-12): Frank holds the fish-chip' in out

        assert run(data_dir, 'table', 'Spring 2026') == 0
        table = capsys.readouterr().out
        lines = [line for line in table.splitlines() if line[:1].isdigit()]
        assert lines[0].split()[:2] == ['1', 'Alice']
        assert lines[0].split()[-1] == '28'
        assert lines[1].split()[:2] == ['2', 'Carol']
        assert lines[1].split()[-1] == '27'

    def test_games_persisted_as_raw_records(self, data_dir):
        run(data_dir, 'add-game', 'Spring 2026', '--date', '2026-3-5', '--results', '0', '1', '2')
        run(data_dir, 'add-game', 'Spring 2026', '--date', '2026-3-12', '--results', '2', '1', '0', '-k', '2:0')

        seasons = json.loads((data_dir / 'seasons.json').read_text())['seasons']
        assert seasons[0]['games'] == [
            {'date': '2026-3-5', 'results': [0, 1, 2], 'knockouts': []},
            {'date': '2026-3-12', 'results': [2, 1, 0], 'knockouts': [[2, 0]]},
        ]

        store = JsonLeagueStore(data_dir)
        season = store.load_seasons(store.load_players())[0]
        carol = season.score_for(store.load_players().get(2))
        # bounty on Alice plus the fish-chip cashed in from last place
        assert carol.game_scores() == [11, 17]
        assert carol.bonus_points() == 2

    def test_default_date_is_today(self, data_dir):
        run(data_dir, 'add-game', 'Spring 2026', '--results', '0', '1')
        game = json.loads((data_dir / 'seasons.json').read_text())['seasons'][0]['games'][0]
        year, month, day = game['date'].split('-')
        assert len(year) == 4
        assert not month.startswith('0') and not day.startswith('0')

    def test_exports(self, data_dir, tmp_path):
        run(data_dir, 'add-game', 'Spring 2026', '--date', '2026-3-5', '--results', '0', '1', '2')
        json_path = tmp_path / 'out' / 'standings.json'
        excel_path = tmp_path / 'out' / 'league.xlsx'
        assert run(
            data_dir, 'table', 'Spring 2026', '--json', str(json_path), '--excel', str(excel_path)
        ) == 0

        standings = json.loads(json_path.read_text())['standings']
        assert [s['name'] for s in standings] == ['Alice', 'Bob', 'Carol']

        wb = openpyxl.load_workbook(excel_path)
        assert wb['Spring 2026'].cell(row=2, column=2).value == 'Alice'
        wb.close()

    def test_log(self, data_dir, capsys):
        run(data_dir, 'add-game', 'Spring 2026', '--date', '2026-3-5', '--results', '0', '1', '2')
        run(data_dir, 'add-game', 'Spring 2026', '--date', '2026-3-12', '--results', '1', '0', '2')
        capsys.readouterr()

        assert run(data_dir, 'log', 'Spring 2026') == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == 'Game 1 (2026-3-5): Alice wins'
        assert 'Game 2 (2026-3-12): bounties on Alice, Bob, Carol' in out
        assert out[-1] == 'Game 2 (2026-3-12): paid Bob'

    def test_knockout_problems_reported(self, data_dir, capsys):
        """Test bad knockouts are flagged on stderr but the game is still recorded."""
        capsys.readouterr()
        assert run(
            data_dir, 'add-game', 'Spring 2026', '--results', '0', '1', '2',
            '-k', 'Alice:Alice', '-k', 'Bob:Frank',
        ) == 0
        err = capsys.readouterr().err
        assert 'Player 0 knocked themselves out' in err
        assert 'Knockout 1 -> 5 involves a player who did not play' in err

        games = json.loads((data_dir / 'seasons.json').read_text())['seasons'][0]['games']
        assert games[0]['knockouts'] == [[0, 0], [1, 5]]

    def test_log_file(self, data_dir, tmp_path):
        log_path = tmp_path / 'logs' / 'league.log'
        assert main([
            '-d', str(data_dir), '--log-file', str(log_path),
            'add-game', 'Spring 2026', '--results', '0', '1', '-k', '0:0',
        ]) == 0
        assert log_path.exists()
        assert 'Ignoring self-knockout by Alice' in log_path.read_text()
        setup_logging()

    def test_quiet_hides_game_log(self, data_dir, capsys):
        capsys.readouterr()
        main(['-d', str(data_dir), '-q', 'add-game', 'Spring 2026', '--results', '0', '1', '2'])
        out = capsys.readouterr().out
        assert 'wins' not in out
        assert 'Recorded game 1 of Spring 2026' in out


class TestCliErrors:
    """Domain errors exit with status 1 and leave data untouched."""

    def test_unknown_season(self, data_dir, capsys):
        assert run(data_dir, 'table', 'Winter') == 1
        assert "No season named 'Winter'" in capsys.readouterr().err

    def test_unknown_player(self, data_dir, capsys):
        assert run(data_dir, 'add-game', 'Spring 2026', '--results', '0', '99') == 1
        assert 'Unknown player id: 99' in capsys.readouterr().err
        assert json.loads((data_dir / 'seasons.json').read_text())['seasons'][0]['games'] == []

    def test_duplicate_finisher(self, data_dir, capsys):
        assert run(data_dir, 'add-game', 'Spring 2026', '--results', 'Alice', '1', '0') == 1
        assert 'finished more than once' in capsys.readouterr().err

    def test_duplicate_season(self, data_dir, capsys):
        assert run(data_dir, 'add-season', 'Spring 2026') == 1
        assert 'already exists' in capsys.readouterr().err

    def test_duplicate_player(self, data_dir, capsys):
        assert run(data_dir, 'add-player', 'alice') == 1

    def test_bad_knockout_format(self, data_dir):
        with pytest.raises(SystemExit) as exc:
            run(data_dir, 'add-game', 'Spring 2026', '--results', '0', '1', '--knockout', '0-1')
        assert exc.value.code == 2


class TestParseKnockout:
    def test_ids_and_names(self):
        assert parse_knockout('3:Alice') == ('3', 'Alice')
        assert parse_knockout(' 1 : 2 ') == ('1', '2')
