"""
Error types raised and collected while normalizing a video library.

Three kinds of failure are kept apart:
- a required tool is not installed (`ToolNotFoundError`, `PresetFileError`):
  fatal, the run stops with a user-facing message;
- a tool ran but failed for one file (`ToolFailedError`): recoverable, the
  file is reported and the run moves on;
- a filesystem or input problem (`FilesystemError`, `MissingExtensionError`):
  recoverable for the affected file or subtree.

Every error carries the offending path when there is one.
"""
from pathlib import Path
from typing import Optional


class VidconvertError(Exception):
    """Base class for all errors raised by vidconvert."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.message}: {self.path}"
        return self.message


class ToolNotFoundError(VidconvertError):
    """An external tool could not be launched because it is not installed."""

    def __init__(self, tool: str, path: Optional[Path] = None):
        super().__init__(f"'{tool}' not found on PATH", path)
        self.tool = tool


class PresetFileError(VidconvertError):
    """The HandBrake preset file is missing."""

    def __init__(self, path: Path):
        super().__init__("HandBrake preset file not found", path)


class ToolFailedError(VidconvertError):
    """An external tool ran but reported failure for one file."""

    def __init__(self, tool: str, path: Path, result=None):
        code = result.code if result is not None else None
        super().__init__(f"'{tool}' failed (exit code {code})", path)
        self.tool = tool
        self.result = result


class FilesystemError(VidconvertError):
    """A directory could not be read, or a file could not be moved or removed."""


class MissingExtensionError(VidconvertError):
    """A file inside a scanned tree has no extension to classify it by."""

    def __init__(self, path: Path):
        super().__init__("No extension found for file", path)
