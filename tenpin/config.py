import logging
import os

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}

DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


def _canon_flag(val, default: bool = False) -> bool:
    """
    Normalize an on/off environment value:
      - defaults to ``default`` when unset
      - accepts 1/true/yes/on and 0/false/no/off in any case
      - anything else falls back to ``default`` with a warning
    """
    if val is None:
        return default
    text = val.strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    logger.warning("Unrecognised flag value %r; defaulting to %s", val, default)
    return default


def _canon_log_level(val) -> str:
    """Return a level name that ``logging`` understands, upper-cased."""
    level = (val or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(
            "TENPIN_LOG_LEVEL %r is not a logging level; defaulting to %s",
            val,
            DEFAULT_LOG_LEVEL,
        )
        return DEFAULT_LOG_LEVEL
    return level


def strict_tenth_frame_enabled() -> bool:
    return _canon_flag(os.getenv("TENPIN_STRICT_TENTH_FRAME"))


def log_level() -> str:
    return _canon_log_level(os.getenv("TENPIN_LOG_LEVEL"))
