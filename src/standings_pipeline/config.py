from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
RAW_DATA_DIR = DATA_DIR / "raw"
REPORTS_DIR = DATA_DIR / "reports"

# League CSV exports (one file per table of the hosted store)
FILE_PATTERNS = {
    "seasons": "seasons.csv",
    "teams": "teams.csv",
    "standings": "standings.csv",
}

SEASON_COLUMNS = ["id", "year", "name"]
TEAM_COLUMNS = ["id", "name", "logo_url"]
STANDING_COLUMNS = ["season_id", "team_id", "wins", "losses", "position"]

# Integer columns in standings.csv; blanks and junk become 0
STANDING_NUMERIC_COLUMNS = ["wins", "losses", "position"]
