# Central place for tuning thresholds (calibration-tuned, keep strict comparisons as-is).

# Default calibration profile ("typical" baseline user)
DEFAULT_TAP_DURATION_MS = 150
DEFAULT_JITTER_PX = 8
DEFAULT_PRESSURE = 0.6
DEFAULT_RESPONSE_LATENCY_MS = 400
DEFAULT_INHIBITION_ERRORS = 1
DEFAULT_GAZE_ACCURACY_PX = 30
DEFAULT_VISUAL_SPEED = "Medium"

VISUAL_SPEEDS = ("Slow", "Medium", "Fast")

# Game A: Water Park Focus Float
WATER_PARK_TARGET_SIZE = 50
WATER_PARK_STREAM_SPEED = 10
WATER_PARK_TARGET_MOVEMENT_SPEED = 2
WATER_PARK_DISTRACTION = "Low"
WATER_PARK_GAME_SPEED = 1.0
WATER_PARK_JITTER_THRESHOLD = 10
WATER_PARK_JITTER_GROWTH = 2
WATER_PARK_SLOW_LATENCY_MS = 500
WATER_PARK_MAX_SLOWDOWN = 0.6
WATER_PARK_HIGH_ERRORS = 3
WATER_PARK_SOME_ERRORS = 1
DISTRACTION_LEVELS = ("None", "Low", "Medium", "High")

# Game B: Maze Stillness
MAZE_PATH_WIDTH = 60
MAZE_TREMOR_TOLERANCE = 5
MAZE_STOP_SIGNAL_MS = 2000
MAZE_COMPLEXITY = "Medium"
MAZE_JITTER_THRESHOLD = 5
MAZE_JITTER_WIDENING = 3
MAZE_SHORT_STOP_MS = 1500
MAZE_LONG_STOP_MS = 2500
MAZE_HIGH_PRESSURE = 0.7
MAZE_TOLERANCE_BONUS = 5
MAZE_COMPLEXITIES = ("Simple", "Medium", "Complex")

# Shared tap duration buckets (Games B and C)
IMPULSIVE_TAP_MS = 100
DELIBERATE_TAP_MS = 300

# Game C: Fruit Ninja
FRUIT_GRAVITY = 0.5
FRUIT_BOMB_PROBABILITY = 0.2
FRUIT_BOMB_DISTINCTNESS = 1.0
FRUIT_COMBO_WINDOW_MS = 300
FRUIT_SPAWN_RATE_MS = 1000
FRUIT_SLOW_LATENCY_MS = 600
FRUIT_FAST_LATENCY_MS = 300
FRUIT_SLOW_GRAVITY = 0.3
FRUIT_SLOW_SPAWN_MS = 1200
FRUIT_FAST_GRAVITY = 0.7
FRUIT_FAST_SPAWN_MS = 800
FRUIT_HIGH_ERRORS = 2
FRUIT_DISTINCT_BOMBS = 1.5
FRUIT_FEWER_BOMBS = 0.15
FRUIT_MORE_BOMBS = 0.25
FRUIT_SHORT_COMBO_MS = 200
FRUIT_LONG_COMBO_MS = 400

# Game D: Catch the Fly
FLY_SIZE = 40
FLY_SPEED = 5
FLY_GAZE_ASSIST_RADIUS = 30
FLY_PATTERN = "Smooth"
FLY_COUNT = 1
FLY_LOOSE_GAZE_PX = 30
FLY_TIGHT_GAZE_PX = 15
FLY_ASSIST_SCALE = 1.2
FLY_TIGHT_ASSIST_RADIUS = 20
FLY_SLOW_LATENCY_MS = 500
FLY_FAST_LATENCY_MS = 300
FLY_SLOW_SPEED = 3
FLY_SLOW_SIZE = 60
FLY_FAST_SPEED = 7
FLY_FAST_SIZE = 30
FLY_SKILLED_GAZE_PX = 20
FLY_SKILLED_LATENCY_MS = 400
FLY_SKILLED_COUNT = 2
FLY_PATTERNS = ("Smooth", "Erratic", "Predictable")

# Profile summary buckets
MOTOR_EXCELLENT_JITTER = 8
MOTOR_GOOD_JITTER = 15
RESPONSE_FAST_MS = 350
RESPONSE_AVERAGE_MS = 550
IMPULSE_GOOD_ERRORS = 2
VISUAL_EXCELLENT_GAZE = 25
VISUAL_GOOD_GAZE = 40
