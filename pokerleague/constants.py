"""Constants for poker league scoring."""

# Points by finishing position, winner first
DEFAULT_POINTS = [15, 13, 11, 9, 7, 5, 4, 3, 2, 1]

# Bonus for holding the fish-chip and finishing in the money
FISH_CHIP_BONUS = 1

# Bonus for each bounty player knocked out
BOUNTY_BONUS = 1

# Number of top finishers from the previous game who carry a bounty
BOUNTY_SLOTS = 3

# One in every PAID_DIVISOR finishers is paid (rounded down)
PAID_DIVISOR = 3

# Best N game totals that count towards the overall score
COUNTED_GAMES = 9

# Keys used in a PlayerResult breakdown
BONUS_FISH_CHIP = 'fish_chip'
BONUS_BOUNTY = 'bounty'

# League table column headings
LEAGUE_TABLE_HEADINGS = [
    'Rank',
    'Name',
    'Games Played',
    'Wins',
    'Average Points Per Game',
    'Bonus Points',
    'Lowest Weekly Points',
    'Overall Points',
]

# Persisted file names inside a data directory
PLAYERS_FILE = 'players.json'
SEASONS_FILE = 'seasons.json'
