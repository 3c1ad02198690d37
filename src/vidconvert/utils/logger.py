"""
Provides structured logging with thread-safety and log levels.

Every line carries a UTC timestamp, a level, a dotted event name and a set of
key-value pairs. Lines go through `tqdm.write` so they never tear an active
progress bar, and may additionally be appended to a log file.
"""
import threading
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Optional, TextIO

from tqdm import tqdm

_print_lock = threading.Lock()
_worker_id_map = {}
_worker_counter = 0
_worker_lock = threading.Lock()
_separator = " | "
_log_file: Optional[TextIO] = None


class LogLevel(Enum):
    """Log level enumeration."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


_current_level = LogLevel.INFO


def set_log_level(level: LogLevel) -> None:
    """Set the current log level."""
    global _current_level
    _current_level = level


def set_log_file(path: Optional[Path]) -> Optional[Path]:
    """Mirror every log line into `path` (appending). Pass None to stop."""
    global _log_file
    with _print_lock:
        if _log_file is not None:
            _log_file.close()
            _log_file = None
        if path is None:
            return None
        path = Path(path).expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        _log_file = open(path, "a", encoding="utf-8", buffering=1)
        return path


def _format_kv(data: Dict[str, Any]) -> str:
    """Format key-value pairs for logging."""
    parts = []
    for key, value in data.items():
        if isinstance(value, str):
            # Escape quotes and newlines to keep log entries single-line.
            escaped = value.replace("\r", "\\r").replace("\n", "\\n")
            escaped = escaped.replace('"', '\\"')
            parts.append(f'{key}="{escaped}"')
        elif value is None:
            parts.append(f'{key}=null')
        elif isinstance(value, bool):
            parts.append(f'{key}={str(value).lower()}')
        else:
            parts.append(f'{key}={value}')
    return _separator.join(parts)


def _write_line(text: str) -> None:
    tqdm.write(text)
    if _log_file is not None:
        _log_file.write(text + "\n")


def _should_log(level: LogLevel) -> bool:
    """Check if a message at the given level should be logged."""
    return level.value >= _current_level.value


def log(event: str, level: LogLevel = LogLevel.INFO, **kwargs) -> None:
    """
    Structured logging function.

    Args:
        event: Event name (e.g., 'walk.error', 'transcode.complete')
        level: Log level (TRACE, DEBUG, INFO, WARN, ERROR)
        **kwargs: Key-value pairs to log
    """
    if not _should_log(level):
        return

    if "worker" not in kwargs:
        kwargs["worker"] = get_worker_id()

    with _print_lock:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        kv_str = _format_kv(kwargs) if kwargs else ""
        header = f"{timestamp}{_separator}[{level.name}]{_separator}{event}"

        if kv_str:
            _write_line(f"{header}{_separator}{kv_str}")
        else:
            _write_line(header)


def safe_print(*args, **kwargs) -> None:
    """
    Thread-safe plain output, used for user-facing listings such as dry runs.
    Use log() for structured logging instead.
    """
    with _print_lock:
        print(*args, **kwargs, flush=True)


def get_worker_id() -> str:
    """Get current worker/thread identifier (numeric ID for worker threads)."""
    global _worker_counter
    thread = threading.current_thread()

    if thread is threading.main_thread():
        return "main"

    if thread.ident in _worker_id_map:
        return _worker_id_map[thread.ident]

    with _worker_lock:
        _worker_counter += 1
        worker_id = f"w{_worker_counter}"
        _worker_id_map[thread.ident] = worker_id
        return worker_id
