# src/monkey/config.py
"""Process-wide interpreter settings.

Defaults can be overridden from the environment::

    MONKEY_DEBUG=true MONKEY_RECURSION_LIMIT=20000 monkey run prog.mk
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

_ENV_PREFIX = "MONKEY_"

_ENV_NAMES = {
    "enable_debug_logs": "DEBUG",
    "log_level": "LOG_LEVEL",
    "recursion_limit": "RECURSION_LIMIT",
    "prompt": "PROMPT",
}


def _coerce_value(raw: str, default: Any) -> Any:
    """Convert a raw environment string to the type of ``default``."""
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off", ""}:
            return False
        raise ValueError(f"invalid boolean value: {raw!r}")
    if isinstance(default, int):
        return int(raw.strip())
    # Strings are kept verbatim; a prompt's trailing space is significant
    return raw


@dataclass
class Config:
    enable_debug_logs: bool = False
    log_level: str = "WARNING"
    # Every Monkey call costs several Python frames.
    recursion_limit: int = 10000
    prompt: str = ">> "

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        environ = os.environ if environ is None else environ
        cfg = cls()
        for f in fields(cls):
            key = _ENV_PREFIX + _ENV_NAMES[f.name]
            if key in environ:
                setattr(cfg, f.name, _coerce_value(environ[key], getattr(cfg, f.name)))
        return cfg

    def update(self, **overrides: Any) -> None:
        for name, value in overrides.items():
            if name not in _ENV_NAMES:
                raise AttributeError(f"unknown config option: {name}")
            setattr(self, name, value)

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


config = Config.from_env()
