"""Tests for the player directory."""

import pytest

from pokerleague.models import Player
from pokerleague.players import AmbiguousPlayerError, PlayerDirectory, UnknownPlayerError


class TestPlayerDirectory:
    """Tests for assigning and resolving players."""

    def test_assign_sequential_ids(self):
        directory = PlayerDirectory()
        assert directory.assign('Alice') == Player(0, 'Alice')
        assert directory.assign('Bob').id == 1
        assert len(directory) == 2

    def test_assign_after_gap(self):
        """Test new ids follow the highest existing id."""
        directory = PlayerDirectory([Player(0, 'Alice'), Player(7, 'Bob')])
        assert directory.assign('Carol').id == 8

    def test_assign_strips_name(self):
        assert PlayerDirectory().assign('  Dave ').name == 'Dave'

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            PlayerDirectory().assign('   ')

    def test_assign_rejects_taken_name(self):
        """Test new players can't reuse a name, ignoring case."""
        directory = PlayerDirectory()
        directory.assign('Alice')
        with pytest.raises(ValueError, match='already exists'):
            directory.assign('alice')

    def test_duplicate_id_rejected(self):
        with pytest.raises(ValueError, match='already taken'):
            PlayerDirectory([Player(1, 'Alice'), Player(1, 'Bob')])

    def test_same_name_different_ids(self):
        """Test existing players sharing a name are told apart by id."""
        directory = PlayerDirectory([Player(0, 'Dave'), Player(1, 'Dave')])
        assert len(directory) == 2
        assert directory.get(1).name == 'Dave'
        assert directory.find_by_name('dave') == [Player(0, 'Dave'), Player(1, 'Dave')]

    def test_resolve_ambiguous_name(self):
        directory = PlayerDirectory([Player(0, 'Dave'), Player(1, 'Dave')])
        with pytest.raises(AmbiguousPlayerError, match='0, 1'):
            directory.resolve('Dave')
        assert directory.resolve('1') == Player(1, 'Dave')

    def test_get(self):
        directory = PlayerDirectory([Player(3, 'Erin')])
        assert directory.get(3).name == 'Erin'
        assert 3 in directory
        assert 4 not in directory

    def test_unknown_id_is_lookup_error(self):
        """Test resolving a missing id raises LookupError."""
        with pytest.raises(LookupError):
            PlayerDirectory().get(42)
        with pytest.raises(UnknownPlayerError, match='42'):
            PlayerDirectory().get(42)

    def test_resolve_id_or_name(self):
        directory = PlayerDirectory([Player(0, 'Alice'), Player(1, 'Bob')])
        assert directory.resolve('1').name == 'Bob'
        assert directory.resolve('ALICE').id == 0
        with pytest.raises(UnknownPlayerError):
            directory.resolve('Zed')

    def test_iteration_order(self):
        directory = PlayerDirectory()
        for name in ('Alice', 'Bob', 'Carol'):
            directory.assign(name)
        assert [p.name for p in directory] == ['Alice', 'Bob', 'Carol']
