"""Validation functions for stored games and computed scores."""

from .models import Score
from .players import PlayerDirectory
from .schemas import GameRecord
from .season import Season


def validate_game_record(record: GameRecord, directory: PlayerDirectory) -> list[str]:
    """
    Check a stored game against the player directory.

    Checks:
    - Every result and knockout id is a known player
    - No player finishes twice
    - Knockouts name two different players who both played

    Args:
        record: Game as stored
        directory: Player directory the ids refer to

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    for player_id in record.results:
        if player_id not in directory:
            errors.append(f'Result refers to unknown player id {player_id}')

    seen = set()
    duplicates = set()
    for player_id in record.results:
        if player_id in seen:
            duplicates.add(player_id)
        seen.add(player_id)
    if duplicates:
        errors.append(f'Players finish more than once: {", ".join(map(str, sorted(duplicates)))}')

    for perpetrator, victim in record.knockouts:
        for player_id in (perpetrator, victim):
            if player_id not in directory:
                errors.append(f'Knockout refers to unknown player id {player_id}')
        if perpetrator == victim:
            errors.append(f'Player {perpetrator} knocked themselves out')
        elif perpetrator not in seen or victim not in seen:
            errors.append(f'Knockout {perpetrator} -> {victim} involves a player who did not play')

    return errors


def validate_score(score: Score) -> list[str]:
    """
    Check that a player's season score is internally consistent.

    Sanity checks:
    - Bonus entries only for games with a recorded total
    - Every game total is at least 1 and covers its bonus
    - More wins than games played is impossible

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []
    name = score.player.name

    orphan_bonuses = sorted(set(score.bonuses) - set(score.points))
    if orphan_bonuses:
        warnings.append(f'{name} has bonus points for unplayed games {orphan_bonuses}')

    for index, total in sorted(score.points.items()):
        bonus = score.bonuses.get(index, 0)
        if total < 1:
            warnings.append(f'{name} scored {total} in game {index + 1} (every finisher scores at least 1)')
        if bonus > total - 1:
            warnings.append(f'{name} has {bonus} bonus points out of {total} in game {index + 1}')

    if score.wins > score.games_played():
        warnings.append(f'{name} has {score.wins} wins from {score.games_played()} games')

    return warnings


def validate_season(season: Season) -> list[str]:
    """
    Check every score in a season.

    Also checks that each game's winner is credited and that the table is
    ranked by overall score.
    """
    warnings = []
    for score in season.scores:
        warnings.extend(validate_score(score))

    total_wins = sum(score.wins for score in season.scores)
    if total_wins != len(season.games):
        warnings.append(f'{season.name} has {total_wins} wins recorded for {len(season.games)} games')

    overall = [score.overall_score() for score in season.scores]
    if overall != sorted(overall, reverse=True):
        warnings.append(f'{season.name} standings are not ranked by overall score')

    return warnings
