"""Application constants."""

# Set list bounds per logged workout
MIN_SETS_PER_WORKOUT = 1
MAX_SETS_PER_WORKOUT = 20

# Per-set bounds
MIN_REPS = 1
MAX_REPS = 200
MIN_WEIGHT = 0
MAX_WEIGHT = 2000

# History query limit (clamped)
DEFAULT_HISTORY_LIMIT = 50
MIN_HISTORY_LIMIT = 1
MAX_HISTORY_LIMIT = 200

# Routines (client-side templates)
MAX_EXERCISES_PER_ROUTINE = 20

# Recent exercise quick picks shown by the client
QUICK_PICK_COUNT = 6

# Epley divisor: est1rm = weight * (1 + reps / EPLEY_DIVISOR)
EPLEY_DIVISOR = 30
