"""
debug_logger.py
---------------
Colored console logger for Cactus Run.

Messages are grouped by category (spawn, collision, game state, ...) and
filtered by a global level so noisy per-frame traces stay off by default.
"""

import sys
from datetime import datetime


class LoggerConfig:
    """Which categories print and how verbose the output is."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        "system": True,
        "loading": False,
        "display": True,
        "input": False,
        "game_state": True,
        "entity_spawn": False,
        "entity_cleanup": False,
        "collision": True,
        "render": True,
        "performance": False,
    }


class Colors:
    """ANSI escape codes."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"


class DebugLogger:
    """Static logger: `DebugLogger.state("Run started")`."""

    LINE_LENGTH = 59

    LEVEL_VALUES = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}

    # ===========================================================
    # Internals
    # ===========================================================

    @staticmethod
    def _get_caller() -> str:
        """Name of the class (or module) that called the public log method."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get('self')
        if owner is not None:
            return type(owner).__name__

        module_name = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1][:-3]
        return "".join(part.capitalize() for part in module_name.split("_"))

    @staticmethod
    def _should_log(category: str, level: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        limit = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return DebugLogger.LEVEL_VALUES.get(level, 3) <= limit

    @staticmethod
    def _log(tag: str, message: str, color: str, category: str, level: str = "INFO"):
        if not DebugLogger._should_log(category, level):
            return
        stamp = datetime.now().strftime("%H:%M:%S")
        source = DebugLogger._get_caller()
        print(f"{color}[{stamp}] [{source}][{tag}] {message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str, category: str = "system"):
        DebugLogger._log("INIT", msg, Colors.WHITE, category)

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, Colors.MAGENTA, category)

    @staticmethod
    def state(msg: str, category: str = "game_state"):
        DebugLogger._log("STATE", msg, Colors.CYAN, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, Colors.GREEN, category)

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        """Per-frame detail; only printed at VERBOSE."""
        DebugLogger._log("TRACE", msg, Colors.BLUE, category, "VERBOSE")

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, Colors.YELLOW, category, "WARN")

    # ===========================================================
    # Boot Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Centered header separating startup phases."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """`> Module ........ [OK]` line."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        label = f"> {module}".ljust(30)
        status_str = f"[{status}]"
        dots = "." * max(DebugLogger.LINE_LENGTH - len(label) - len(status_str) - 1, 1)
        print(f"{Colors.WHITE}{label}{dots} {Colors.GREEN}{status_str}{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{' ' * (level * 4)}• {Colors.WHITE}{detail}{Colors.RESET}")
