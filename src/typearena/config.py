"""Global constants and default settings."""

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60
WINDOW_TITLE = "TypeArena"

# Live stats cadence while a session is active (seconds)
LIVE_UPDATE_INTERVAL = 0.1

# Turn countdown before typing is accepted (seconds)
COUNTDOWN_SECONDS = 3

# Standard typing convention: five characters make one word
CHARS_PER_WORD = 5

# Scoring
BASE_POINTS_PER_WPM = 10
ACCURACY_BONUS_FACTOR = 2
TIME_BONUS_LIMIT_S = 120
TIME_BONUS_FACTOR = 0.5
MIN_XP_PER_ROUND = 10

# Progression
XP_PER_LEVEL = 1000
MAX_LEVEL = 50

# Match defaults
DEFAULT_TOTAL_ROUNDS = 3
MAX_PLAYERS = 4
PLAYER_COLORS = ["#e94560", "#4ecca3", "#6bcbff", "#ffd93d"]

# Saved game state is discarded after this many seconds
GAME_STATE_TTL_S = 3600
