"""Game rules constants for Simple Checkers."""

# Board dimensions
BOARD_SIZE = 8

# Starting rows for each player
PLAYER_ONE_ROWS = range(5, 8)  # Rows 5, 6, 7
PLAYER_TWO_ROWS = range(0, 3)  # Rows 0, 1, 2

# Movement directions
# Player 1 moves upward (decreasing row)
# Player 2 moves downward (increasing row)
PLAYER_ONE_FORWARD = -1
PLAYER_TWO_FORWARD = 1

# Diagonal directions for moves
# (row_delta, col_delta)
FORWARD_DIRECTIONS_P1 = [(-1, -1), (-1, 1)]  # Up-left, Up-right
FORWARD_DIRECTIONS_P2 = [(1, -1), (1, 1)]    # Down-left, Down-right

# Rule flag defaults (overridable through RuleSettings)
FORCED_CAPTURE = True
MULTI_JUMP = True
