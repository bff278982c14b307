"""Configuration for the gensync package."""

TARGET_DIR_ENV_VAR = "GENSYNC_TARGET_DIR"  # Set when the output root may not share a parent with the sources
LOG_LEVEL_ENV_VAR = "GENSYNC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
