# config.py
"""
Default settings for the page replacement visualizer.

These values seed the sidebar widgets and the charts; adjust them to change
what the app starts with.
"""

# REFERENCE STRING #
DEFAULT_REFERENCE_STRING = "7 0 1 2 0 3 0 4 2 3 0 3 2"

# FRAMES #
DEFAULT_FRAMES = 3
MIN_FRAMES = 1
MAX_FRAMES = 10

# ALGORITHM #
DEFAULT_ALGORITHM = "fifo"

# PLAYBACK #
DEFAULT_SPEED = 1.0  # steps per second
MIN_SPEED = 0.5
MAX_SPEED = 5.0

# EVENT LOG #
EVENT_LOG_LENGTH = 20  # entries shown in the UI, newest first

# COLOURS #
HIT_COLOR = "#2ecc71"
FAULT_COLOR = "#ff4d4d"
EVICT_COLOR = "#f39c12"
RESIDENT_COLOR = "lightgreen"
EMPTY_COLOR = "lightgray"
