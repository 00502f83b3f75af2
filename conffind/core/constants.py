"""Shared constants for conffind."""

ENCODING = "utf-8"

# Environment variables read by LocatorSettings.from_env
ENV_FORMAT = "CONFFIND_FORMAT"
ENV_LOG_LEVEL = "CONFFIND_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

CURRENT_DIR = "."
PARENT_DIR = ".."
