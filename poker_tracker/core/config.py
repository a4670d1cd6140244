"""Environment configuration and seed data for the poker tracker."""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///poker_tracker.db")
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
TICK_INTERVAL_SECONDS = float(os.getenv("TICK_INTERVAL_SECONDS", "1.0"))

# Reserved keys in the key/value store
STATE_KEY = "poker-tracker-data"
DEFAULTS_KEY = "poker-tracker-defaults"
FILTERS_KEY = "poker-tracker-filters"

# Seeded on first run, before any saved state is loaded
DEFAULT_STAKES = [
    ("1", ".2/.5/1 (.2 ante)", "8-max"),
    ("2", ".5/1/2 (.5 ante)", "8-max"),
    ("3", "1/2/4 (1 ante)", "8-max"),
    ("4", "2/4 (1 ante)", "HU"),
    ("5", "5/10 (2 ante)", "HU"),
    ("6", "10/20 (2 ante)", "HU"),
]

DEFAULT_FORMATS = [
    ("1", "HU with ante"),
    ("2", "8-max with ante"),
]

DEFAULT_FORMAT_NAME = "HU with ante"
# Picking this format pre-checks the straddle box on the session form
STRADDLE_FORMAT_NAME = "8-max with ante"

# value -> (label, swatch)
COLOR_TAGS = {
    "green": ("General Fish", "#4caf50"),
    "yellow": ("Solid Reg", "#ff9800"),
    "red": ("Excellent Reg", "#f44336"),
    "cyan": ("Passive Fish", "#00bcd4"),
    "magenta": ("Aggro Fish", "#e91e63"),
}

# Stake buckets offered on the player form
PLAYER_STAKE_OPTIONS = ["100", "200", "400", "1000"]
