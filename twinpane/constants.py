"""Constants for twinpane."""

# Color pair ids.
C_FILE = 1
C_DIRECTORY = 2
C_EXECUTABLE = 3
C_STATUS = 4
C_ERROR = 5
C_BORDER = 6

DEFAULT_EDITOR = "nvim"

# Rows taken by the path bar (top) and the two-line prompt area (bottom).
TOP_BAR_ROWS = 1
PROMPT_ROWS = 2
