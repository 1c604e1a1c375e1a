import os
from dotenv import load_dotenv

load_dotenv(override=True)

WINNING_SCORE = 121
PEGGING_LIMIT = 31
HAND_SIZE = 6

CRIB_LOG_FILE = os.getenv("CRIB_LOG_FILE", "")
CRIB_LOG_LEVEL = os.getenv("CRIB_LOG_LEVEL", "INFO")
DEFAULT_SEED = int(os.environ["CRIB_SEED"]) if os.getenv("CRIB_SEED") else None
DEFAULT_PLAYERS = os.getenv("CRIB_PLAYERS", "simple,reasonable")
