"""Default configuration values."""

# Composition defaults
DUPLICATE_PREFIX_POLICY = "replace"  # "replace" (last registered wins) or "reject"

# Logging defaults
LOG_LEVEL = "WARNING"
LOG_FORMAT = (
    "<level>{level}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:"
    "<cyan>{line}</cyan> - <level>{message}</level>"
)
LOG_ROTATION = "10 MB"
LOG_RETENTION = "1 week"
