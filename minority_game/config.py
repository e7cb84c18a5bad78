from dotenv import load_dotenv

import os

load_dotenv()

ADMIN_PASS = os.getenv("ADMIN_PASS", "admin252")
PLAYER_PASS = os.getenv("PLAYER_PASS", "player")

# memory:// keeps every tick in-process; the game state itself is never shared
BROADCAST_URL = os.getenv("BROADCAST_URL", "memory://")
STATE_CHANNEL = os.getenv("STATE_CHANNEL", "game_state")

ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
    if origin.strip()
]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEFAULT_PLAYER_NAME = "Anonymous"
LOBBY_QUESTION = "Waiting for the next round"
