"""
Sequential transcoding of a selected file list with progress reporting.

Files are converted one at a time on the calling thread. Each outcome is
recorded in the run report; a failing file never stops the batch.
"""
from pathlib import Path
from typing import List

from vidconvert.errors import PresetFileError
from vidconvert.report import ProgressReporter, RunReport
from vidconvert.utils import LogLevel, logger
from vidconvert.utils.config import RunConfig
from . import core


def check_preset_file(config: RunConfig) -> Path:
    """Return the resolved preset file, raising PresetFileError when it is missing."""
    preset_path = config.preset_path
    if not preset_path.is_file():
        raise PresetFileError(preset_path)
    return preset_path


def transcode_files(files: List[Path], config: RunConfig, report: RunReport, label: str = "") -> None:
    """Transcode every file in order, advancing a progress bar per file."""
    if not files:
        logger.log("transcode.none", LogLevel.INFO, path=label, msg="No files need transcoding")
        return

    logger.log("transcode.batch", LogLevel.INFO, path=label, files=len(files))
    with ProgressReporter(len(files), desc=f"Encoding {label}".strip()) as progress:
        for src in files:
            result = report.add(core.transcode_video(src, config))
            progress.advance(result)
    logger.log("transcode.batch_done", LogLevel.INFO, path=label, msg=f"Encoding done for {label}")
