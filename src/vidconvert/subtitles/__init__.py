"""Sidecar subtitle generation with whisper.

- core: the whisper command and single-file generation.
- batch: the worker pool running generation for a selected file list.
"""

from .core import (
    build_whisper_cmd,
    generate_subtitles,
)
from .batch import generate_all

__all__ = [
    "build_whisper_cmd",
    "generate_subtitles",
    "generate_all",
]
