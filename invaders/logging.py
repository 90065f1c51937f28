"""
Per-module loggers for the game.

    from invaders.logging import get_logger

    log = get_logger('session')
    log.info("New game started with %d aliens", count)

Levels come from the environment when the package is imported:

    INVADERS_LOG_LEVEL=DEBUG      # every module
    INVADERS_LOG_INPUT=TRACE      # just the 'input' logger

or from code with configure_logging(level='DEBUG', modules={'input': 'TRACE'}).
Output goes to stdout as `[module] LEVEL: message`.
"""

import os
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


ENV_PREFIX = 'INVADERS_LOG_'

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


def _parse_level(name: str) -> LogLevel:
    """Level for a name such as 'debug' or 'WARN'; unknown names mean INFO."""
    name = name.strip().upper()
    if name == 'WARN':
        name = 'WARNING'
    return LogLevel.__members__.get(name, LogLevel.INFO)


def configure_logging(level: str = 'INFO', modules: Optional[Dict[str, str]] = None) -> None:
    """Set the default level and, optionally, levels for single modules."""
    _config['default_level'] = _parse_level(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][module.lower()] = _parse_level(module_level)


def disable_logging() -> None:
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()


def _configure_from_env() -> None:
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key[len(ENV_PREFIX):].lower()
        if name == 'level':
            _config['default_level'] = _parse_level(value)
        else:
            _config['module_levels'][name] = _parse_level(value)


_configure_from_env()


class InvadersLogger:
    """Logger for one module; the level is looked up on every call."""

    def __init__(self, module: str):
        self.module = module

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self.module.lower(), _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, msg: str, args: tuple) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {level.name}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, msg, args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, msg, args)


@lru_cache(maxsize=None)
def get_logger(module: str) -> InvadersLogger:
    """Get the shared logger for a module name."""
    return InvadersLogger(module)
