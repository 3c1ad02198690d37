"""
Recursive discovery of the videos a phase has to act on.

A root may be a single file or a directory. Every regular file below it is
classified by extension, then kept or dropped by the phase's predicate:
`needs_transcode` for the transcode phase and `needs_subtitles` for the
subtitle phase. Our own temporary containers are never candidates.
Unreadable directories and files without an extension are
recorded as errors in the returned `WalkResult`; they never abort the walk.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List

from vidconvert.errors import FilesystemError, MissingExtensionError, VidconvertError
from vidconvert.scan import probe
from vidconvert.utils import LogLevel, file_util, logger
from vidconvert.utils.config import RunConfig

Predicate = Callable[[Path], bool]


@dataclass
class WalkResult:
    files: List[Path] = field(default_factory=list)
    errors: List[VidconvertError] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)


def needs_transcode(config: RunConfig) -> Predicate:
    """Select files not already in the target codec, or every file with include_h264."""
    if config.include_h264:
        return lambda path: True
    return lambda path: not probe.is_target_codec(path, config.target_codec)


def needs_subtitles(config: RunConfig) -> Predicate:
    """Select files with neither a subtitle stream nor a sidecar subtitle file."""
    return lambda path: not probe.has_subtitles(path)


def _visit_file(path: Path, predicate: Predicate, result: WalkResult) -> None:
    if not file_util.has_extension(path):
        err = MissingExtensionError(path)
        logger.log("walk.no_extension", LogLevel.WARN, file=str(path))
        result.errors.append(err)
        return
    if not file_util.is_video_file(path):
        return
    if file_util.is_temp_artifact(path):
        logger.log("walk.temp_artifact", LogLevel.DEBUG, file=str(path))
        return
    if predicate(path):
        result.files.append(path)
    else:
        result.skipped.append(path)


def _visit_dir(directory: Path, predicate: Predicate, result: WalkResult) -> None:
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        logger.log("walk.error", LogLevel.ERROR, path=str(directory), error=str(e))
        result.errors.append(FilesystemError(f"Could not read directory ({e.strerror or e})", directory))
        return

    for entry in entries:
        if entry.is_dir():
            _visit_dir(entry, predicate, result)
        elif entry.is_file():
            _visit_file(entry, predicate, result)


def walk(root: Path, predicate: Predicate) -> WalkResult:
    """
    Collect every file under `root` with an accepted video extension that
    satisfies `predicate`.

    Args:
        root: A video file or a directory to descend into.
        predicate: Decides whether a candidate video is selected.

    Returns:
        WalkResult with the selected files in filesystem enumeration order,
        the videos the predicate passed over, and the errors met on the way.
    """
    result = WalkResult()
    root = Path(root)
    if root.is_dir():
        _visit_dir(root, predicate, result)
    elif root.is_file():
        _visit_file(root, predicate, result)
    else:
        logger.log("walk.error", LogLevel.ERROR, path=str(root), error="path does not exist")
        result.errors.append(FilesystemError("Path does not exist", root))

    logger.log("walk.complete", LogLevel.DEBUG,
               root=str(root),
               selected=len(result.files),
               errors=len(result.errors))
    return result
