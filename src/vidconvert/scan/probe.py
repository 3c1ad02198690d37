"""
ffprobe-based checks deciding whether a video needs work.

`is_target_codec` reports whether the primary video stream is already in the
target codec. `has_subtitles` reports whether the file carries a subtitle
stream or has a sidecar subtitle file next to it.
"""
from pathlib import Path
from typing import List

from vidconvert.utils import LogLevel, file_util, logger, system_util
from vidconvert.utils.constants import FFPROBE


def _codec_cmd(path: Path) -> List[str]:
    return [
        FFPROBE, "-v", "error",
        "-select_streams", "v:0",
        "-show_entries", "stream=codec_name",
        "-of", "default=noprint_wrappers=1:nokey=1",
        str(path),
    ]


def _subtitle_cmd(path: Path) -> List[str]:
    return [
        FFPROBE, "-v", "error",
        "-select_streams", "s",
        "-show_entries", "stream=index",
        "-of", "csv=p=0",
        str(path),
    ]


def probe_codec(path: Path) -> str:
    """Return the codec name of the first video stream, or "" when unknown."""
    result = system_util.run_cmd(_codec_cmd(path))
    if not result.ok:
        logger.log("probe.failed", LogLevel.WARN,
                   file=str(path),
                   exit_code=result.code,
                   error=result.stderr.strip()[:200])
        return ""
    # Some containers report several lines; the first one is stream v:0
    lines = result.stdout.strip().splitlines()
    return lines[0].strip() if lines else ""


def is_target_codec(path: Path, target_codec: str) -> bool:
    """
    True when the file's primary video stream is already `target_codec`.

    An empty or failed probe counts as "not the target codec", so the file is
    selected for conversion.
    """
    codec = probe_codec(path)
    logger.log("probe.codec", LogLevel.DEBUG, file=str(path), codec=codec or None)
    return codec != "" and codec.lower() == target_codec.lower()


def has_subtitles(path: Path) -> bool:
    """True when the file has a subtitle stream or a sidecar subtitle file."""
    result = system_util.run_cmd(_subtitle_cmd(path))
    if result.ok and result.stdout.strip():
        logger.log("probe.subtitles", LogLevel.DEBUG, file=str(path), source="stream")
        return True
    if not result.ok:
        logger.log("probe.failed", LogLevel.WARN,
                   file=str(path),
                   exit_code=result.code,
                   error=result.stderr.strip()[:200])

    sidecar = file_util.find_sidecar_subtitle(path)
    if sidecar is not None:
        logger.log("probe.subtitles", LogLevel.DEBUG, file=str(path), source="sidecar", sidecar=sidecar.name)
        return True
    return False
