"""Runtime options for bltree.

Options are loaded from the environment once at import; ``configure`` swaps
them at runtime (mostly useful in tests).
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

_FALSE_WORDS = {"0", "false", "no", "off"}


def _check_level(level: str, source: str) -> str:
    # getLevelName maps known names to their number and anything else to "Level <name>"
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level {level!r} in {source}")
    return level


@dataclass(frozen=True)
class TreeOptions:
    """Options for statement construction"""
    check_contracts: bool = True  # Verify every requires clause
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'TreeOptions':
        env = os.environ if environ is None else environ
        check = env.get("BLTREE_CHECK_CONTRACTS", "1").strip().lower() not in _FALSE_WORDS
        level = env.get("BLTREE_LOG_LEVEL", cls.log_level).strip().upper()
        return cls(check_contracts=check, log_level=_check_level(level, "BLTREE_LOG_LEVEL"))


options = TreeOptions.from_env()


def configure(**overrides) -> TreeOptions:
    """Replace fields of the active options and return the previous ones"""
    global options
    previous = options
    if "log_level" in overrides:
        overrides["log_level"] = _check_level(str(overrides["log_level"]).upper(), "configure()")
    options = replace(options, **overrides)
    logging.getLogger("bltree").setLevel(options.log_level)
    return previous


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the package logger"""
    if level is not None:
        level = _check_level(level.upper(), "setup_logging()")
    logger = logging.getLogger("bltree")
    if not any(getattr(h, "_bltree_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        handler._bltree_handler = True
        logger.addHandler(handler)
    logger.setLevel(level or options.log_level)
    return logger
