"""
Constants, configuration, structured logging and subprocess helpers shared by
the scan, transcode and subtitles packages.
"""

from .constants import (
    EXIT_FATAL,
    PHASE_SUBTITLES,
    PHASE_TRANSCODE,
    PHASE_WALK,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_OK,
    STATUS_SKIP,
)
from .logger import LogLevel

__all__ = [
    "EXIT_FATAL",
    "PHASE_WALK",
    "PHASE_TRANSCODE",
    "PHASE_SUBTITLES",
    "STATUS_OK",
    "STATUS_FAIL",
    "STATUS_SKIP",
    "STATUS_DRY_RUN",
    "LogLevel",
]
