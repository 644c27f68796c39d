"""Environment name detection."""

import os

ENV_VAR = "PSY_ENV"
DEFAULT_ENVIRONMENT = "development"


def detect_environment() -> str:
    """Detect the current environment name.

    Checks in order:
    1. PSY_ENV env var
    2. Default to "development"

    Returns:
        Detected environment name (lowercase)
    """
    if env := os.environ.get(ENV_VAR, "").strip():
        return env.lower()

    return DEFAULT_ENVIRONMENT
