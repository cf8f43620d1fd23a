"""
debug.py - Logging support for the Connect Four engine

This module wraps the standard logging module in a small manager that adds
named verbosity levels, per-component filtering, optional file output and
simple timers. Engine modules log through the shared ``debug`` instance.
"""

import logging
import sys
import time
from enum import Enum
from typing import Dict, List, Optional, Set


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# Logging levels backing each DebugLevel. TRACE rides on DEBUG.
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: logging.DEBUG,
}

LOGGER_NAME = "connect4engine"
CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugManager:
    """Central logging switchboard used by every engine component."""

    def __init__(self, level: DebugLevel = DebugLevel.WARNING):
        self._level = level
        self._enabled = True
        self._log_file: Optional[str] = None
        self._components: Set[str] = set()  # empty means every component
        self._timers: Dict[str, float] = {}
        self._logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(LEVEL_MAP[self._level])

        has_console = any(
            isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            for h in logger.handlers
        )
        if not has_console:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
            logger.addHandler(handler)

        return logger

    def configure(self, level: Optional[DebugLevel] = None,
                  enabled: Optional[bool] = None,
                  log_file: Optional[str] = None,
                  components: Optional[List[str]] = None) -> None:
        """
        Update the manager settings. Arguments left as None are unchanged.

        Args:
            level: Verbosity to log at
            enabled: Master switch for all output
            log_file: Path to mirror output into; an empty string stops file logging
            components: Component names to restrict output to (empty list for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if log_file is not None:
            for handler in self._logger.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    self._logger.removeHandler(handler)
                    handler.close()

            self._log_file = log_file or None
            if self._log_file:
                file_handler = logging.FileHandler(self._log_file)
                file_handler.setFormatter(
                    logging.Formatter(CONSOLE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
                )
                self._logger.addHandler(file_handler)

        if components is not None:
            self._components = set(components)

    def _should_log(self, level: DebugLevel, component: Optional[str]) -> bool:
        if not self._enabled or self._level == DebugLevel.NONE:
            return False
        if level.value > self._level.value:
            return False
        if component and self._components and component not in self._components:
            return False
        return True

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None) -> None:
        """Emit ``message`` at ``level``, tagged with the component name."""
        if not self._should_log(level, component):
            return

        if component:
            message = f"[{component}] {message}"

        if level == DebugLevel.ERROR:
            self._logger.error(message)
        elif level == DebugLevel.WARNING:
            self._logger.warning(message)
        elif level == DebugLevel.INFO:
            self._logger.info(message)
        elif level == DebugLevel.DEBUG:
            self._logger.debug(message)
        elif level == DebugLevel.TRACE:
            self._logger.debug(f"TRACE: {message}")

    def error(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, name: str) -> None:
        self._timers[name] = time.perf_counter()

    def end_timer(self, name: str, component: Optional[str] = None) -> Optional[float]:
        """
        Stop a timer started with start_timer and log the elapsed time.

        Returns:
            Elapsed seconds, or None if no such timer is running
        """
        started = self._timers.pop(name, None)
        if started is None:
            self.warning(f"Timer '{name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.trace(f"Timing [{name}]: {elapsed:.6f} seconds", component)
        return elapsed

    def set_from_string(self, level_str: str) -> bool:
        """Set the level from a command line value such as 'debug'."""
        level = DebugLevel.__members__.get(level_str.strip().upper())
        if level is None:
            self.warning(f"Unknown debug level: {level_str}")
            return False

        self.configure(level=level)
        self.info(f"Debug level set to {level.name}")
        return True


debug = DebugManager()
