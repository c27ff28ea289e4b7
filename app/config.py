"""
Configuration settings for the resume builder.

Values come from the environment (or a local .env file) so the same
scripts can run with different validation behaviour without code changes.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os

# Validation timing
# "on_submit": fields are only checked on submit, then re-checked as they change
# "on_change": every change re-checks the edited field
VALIDATION_MODES = ("on_submit", "on_change")

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def get_validation_mode(value: str | None = None) -> str:
    """Return a known validation mode, raising ValueError for anything else."""
    mode = (value if value is not None else os.getenv("RESUME_VALIDATION_MODE", "on_submit"))
    mode = mode.strip().lower()
    if mode not in VALIDATION_MODES:
        raise ValueError(
            f"Unknown validation mode {mode!r}. Expected one of: {', '.join(VALIDATION_MODES)}."
        )
    return mode


def get_strict_steps(value: str | None = None) -> bool:
    """Whether the wizard validates a step before letting the user move on."""
    raw = (value if value is not None else os.getenv("RESUME_STRICT_STEPS", "false"))
    raw = raw.strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ValueError(f"RESUME_STRICT_STEPS must be a boolean flag, got {raw!r}.")


def configure_logging(level: str | None = None) -> None:
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    # streamlit's file watcher is chatty at DEBUG
    logging.getLogger("watchdog").setLevel(logging.WARNING)


APP_TITLE = os.getenv("RESUME_APP_TITLE", "Resume Builder")
APP_DESCRIPTION = "Enter your details to create a resume."
VALIDATION_MODE = get_validation_mode()
STRICT_STEPS = get_strict_steps()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
