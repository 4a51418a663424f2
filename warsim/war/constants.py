"""War-specific constants."""

# Hard stop for a game whose decks never resolve by exhaustion
MAX_MOVES = 1_000_000

# Each side holds this many ascending rank runs (a stress-test sizing, not a real deck)
SUITS_PER_PLAYER = 256

LOWEST_RANK = 2
HIGHEST_RANK = 14  # Ace is highest in War
RANKS_PER_SUIT = HIGHEST_RANK - LOWEST_RANK + 1

# Cards committed by each side when a war breaks out
WAR_CARDS = 3
