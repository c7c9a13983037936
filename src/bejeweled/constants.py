GRID_ROWS = 8
GRID_COLS = 8

# Smallest contiguous run that is cleared from the board.
MIN_MATCH = 3

# Points per resolution pass, keyed on how many cells the pass removes.
SCORE_3 = 10
SCORE_4 = 20
SCORE_5 = 30
# Added to every pass triggered by a previous pass's refill.
FOLLOWUP_BONUS = 5
