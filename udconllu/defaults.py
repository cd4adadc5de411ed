"""Defaults."""

# If true, the first malformed sentence aborts processing.
STRICT = False

# If false, comment lines are dropped on output.
KEEP_COMMENTS = True

LOG_LEVEL = "INFO"

# Output path; None means stdout.
OUTPUT = None
