"""Default configuration values for split-ide."""

# The pane every fresh layout starts with
INITIAL_PANE_ID = "pane-initial"

# Bounds for the fraction of a split given to its first child
MIN_RATIO = 0.2
MAX_RATIO = 0.8
DEFAULT_RATIO = 0.5

# Node id prefixes
PANE_ID_PREFIX = "pane"
SPLIT_ID_PREFIX = "split"

# Length of the random part of generated ids
ID_SUFFIX_LENGTH = 7

# New files created alongside a split are named Untitled-2, Untitled-3, ...
UNTITLED_PREFIX = "Untitled"
UNTITLED_FIRST_NUMBER = 2

DEFAULT_DIRECTION = "vertical"
DEFAULT_RESIZE_STEP = 0.05
