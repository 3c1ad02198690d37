"""
Functions to build the HandBrakeCLI and mkvmerge commands and to replace a
video in place with its transcoded version.

A conversion runs three steps, each gated on the previous one exiting
successfully:

1. HandBrakeCLI encodes the source into a temporary Matroska container using
   the configured preset.
2. mkvmerge takes video, audio and chapters from that container and every
   other track (notably subtitles) from the source into a second container.
3. The second container atomically replaces the source; the first is deleted.

Both containers get unique hidden names next to the source and are removed
whatever the outcome.
"""
import os
from pathlib import Path
from typing import List

from vidconvert.errors import FilesystemError, ToolFailedError
from vidconvert.report import FileResult
from vidconvert.utils import PHASE_TRANSCODE, STATUS_FAIL, STATUS_OK, LogLevel, file_util, logger, system_util
from vidconvert.utils.config import RunConfig
from vidconvert.utils.constants import HANDBRAKE, MKVMERGE, MKVMERGE_OK_CODES


def build_handbrake_cmd(src: Path, dst: Path, preset_file: Path, preset: str) -> List[str]:
    """Build the HandBrakeCLI command encoding `src` into `dst`."""
    return [
        HANDBRAKE,
        "-i", str(src),
        "-o", str(dst),
        "--preset-import-file", str(preset_file),
        "--preset", preset,
    ]


def build_mkvmerge_cmd(src: Path, encoded: Path, dst: Path) -> List[str]:
    """
    Build the mkvmerge command merging `encoded` and `src` into `dst`.

    From the source: no video (-D), no audio (-A).
    From the encoded file: no subtitles (-S), no buttons (-B), no track
    tags (-T), no attachments (-M).
    """
    return [
        MKVMERGE,
        "-o", str(dst),
        "-D", "-A", str(src),
        "-S", "-B", "-T", "-M", str(encoded),
    ]


def _run_step(tool: str, cmd: List[str], src: Path, debug: bool, ok_codes=(0,)):
    result = system_util.run_cmd(cmd, ok_codes=ok_codes)
    if debug and result.stdout:
        logger.log(f"transcode.{tool.lower()}.output", LogLevel.DEBUG, file=src.name, stdout=result.stdout[-2000:])
    if not result.ok:
        raise ToolFailedError(tool, src, result)
    return result


def transcode_video(src: Path, config: RunConfig) -> FileResult:
    """
    Transcode `src` with HandBrake, remux it with mkvmerge and replace the source.

    Args:
        src: Source video file path
        config: Run configuration (preset, preset file, debug)

    Returns:
        FileResult with STATUS_OK, or STATUS_FAIL and the reason. The source
        is untouched on failure.

    Raises:
        ToolNotFoundError: HandBrakeCLI or mkvmerge is not installed.
    """
    encoded, muxed = file_util.temp_paths(src)
    logger.log("transcode.start", LogLevel.INFO, file=src.name, preset=config.preset)

    try:
        _run_step(HANDBRAKE, build_handbrake_cmd(src, encoded, config.preset_path, config.preset),
                  src, config.debug)
        _run_step(MKVMERGE, build_mkvmerge_cmd(src, encoded, muxed),
                  src, config.debug, ok_codes=MKVMERGE_OK_CODES)
        try:
            os.replace(muxed, src)
        except OSError as e:
            raise FilesystemError(f"Could not replace source ({e.strerror or e})", src) from e
    except ToolFailedError as e:
        stderr = e.result.stderr.strip() if e.result is not None else ""
        logger.log("transcode.failed", LogLevel.ERROR,
                   file=src.name,
                   tool=e.tool,
                   exit_code=e.result.code if e.result is not None else None,
                   error=stderr[-200:] if config.debug else "run with --debug for details")
        return FileResult(src, PHASE_TRANSCODE, f"{STATUS_FAIL} ({e.tool})", str(e))
    except FilesystemError as e:
        logger.log("transcode.failed", LogLevel.ERROR, file=src.name, error=str(e))
        return FileResult(src, PHASE_TRANSCODE, STATUS_FAIL, str(e))
    finally:
        file_util.remove_quietly(encoded, muxed)

    logger.log("transcode.complete", LogLevel.INFO, file=src.name)
    return FileResult(src, PHASE_TRANSCODE, STATUS_OK)
