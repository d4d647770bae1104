from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
OVERRIDES_DIR = PROJECT_ROOT / "data" / "overrides"

# Lottery settings
LOTTERY_PICKS = 4  # Picks decided by weighted draw; the rest follow standings
MAX_SEEDS = 14  # Rows in the odds table
CELEBRATION_PICK_THRESHOLD = 3  # Reveals of this pick or better get the cue

# Odds chart heat buckets (lower bound in percent -> label), highest first
INTENSITY_BUCKETS = [
    (50.0, "very_high"),
    (20.0, "high"),
    (10.0, "medium"),
]
