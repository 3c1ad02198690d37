"""
Path helpers for sidecar subtitles and per-invocation temporary containers.
"""
import uuid
from pathlib import Path
from typing import Optional, Tuple

from vidconvert.utils import logger
from vidconvert.utils.constants import MUX_SUFFIX, SUBTITLE_EXTENSIONS, TRANSCODE_SUFFIX, VIDEO_EXTENSIONS
from vidconvert.utils.logger import LogLevel


def has_extension(path: Path) -> bool:
    return path.suffix != ""


def is_video_file(path: Path) -> bool:
    """Check whether a path carries one of the accepted video extensions."""
    return path.suffix.lower() in VIDEO_EXTENSIONS


def is_temp_artifact(path: Path) -> bool:
    """Check whether a path is one of our own transcode/mux temporary containers."""
    name = path.name
    return name.startswith(".") and (name.endswith(TRANSCODE_SUFFIX) or name.endswith(MUX_SUFFIX))


def find_sidecar_subtitle(video: Path) -> Optional[Path]:
    """Return an existing subtitle file sharing `video`'s stem, if any. Extensions match case-insensitively."""
    try:
        siblings = sorted(video.parent.iterdir())
    except OSError as e:
        logger.log("probe.sidecar_failed", LogLevel.WARN, file=str(video), error=str(e))
        return None
    for candidate in siblings:
        if (candidate.stem == video.stem
                and candidate.suffix.lower() in SUBTITLE_EXTENSIONS
                and candidate.is_file()):
            return candidate
    return None


def temp_paths(src: Path) -> Tuple[Path, Path]:
    """
    Build unique (transcode, mux) container paths next to `src`.

    Names are hidden, derived from the source stem and a random token so that
    concurrent runs over the same directory never collide.
    """
    token = uuid.uuid4().hex[:8]
    base = f".{src.stem}.{token}"
    return src.with_name(base + TRANSCODE_SUFFIX), src.with_name(base + MUX_SUFFIX)


def remove_quietly(*paths: Path) -> None:
    """Delete temporary artifacts that may or may not exist."""
    for p in paths:
        try:
            p.unlink(missing_ok=True)
        except OSError as e:
            logger.log("cleanup.failed", LogLevel.WARN, file=str(p), error=str(e))
