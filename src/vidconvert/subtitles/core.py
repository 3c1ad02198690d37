"""
Subtitle generation for a single video with the whisper CLI.

whisper writes `<stem>.srt` into the video's directory, which is exactly the
sidecar file the subtitle probe looks for on the next run.
"""
from pathlib import Path
from typing import List

from vidconvert.errors import ToolFailedError
from vidconvert.report import FileResult
from vidconvert.utils import PHASE_SUBTITLES, STATUS_FAIL, STATUS_OK, LogLevel, logger, system_util
from vidconvert.utils.config import RunConfig
from vidconvert.utils.constants import WHISPER, WHISPER_OUTPUT_FORMAT


def build_whisper_cmd(src: Path, language: str, model: str) -> List[str]:
    """Build the whisper command transcribing `src` next to itself."""
    return [
        WHISPER,
        str(src),
        "--language", language,
        "--model", model,
        "--output_format", WHISPER_OUTPUT_FORMAT,
        "--output_dir", str(src.parent),
    ]


def generate_subtitles(src: Path, config: RunConfig) -> FileResult:
    """Transcribe `src` into a sidecar subtitle file. Raises ToolNotFoundError if whisper is missing."""
    logger.log("subtitles.start", LogLevel.INFO, file=src.name, model=config.whisper_model)
    result = system_util.run_cmd(build_whisper_cmd(src, config.whisper_language, config.whisper_model))
    if config.debug and result.stdout:
        logger.log("subtitles.whisper.output", LogLevel.DEBUG, file=src.name, stdout=result.stdout[-2000:])

    if not result.ok:
        err = ToolFailedError(WHISPER, src, result)
        logger.log("subtitles.failed", LogLevel.ERROR,
                   file=src.name,
                   exit_code=result.code,
                   error=result.stderr.strip()[-200:] if config.debug else "run with --debug for details")
        return FileResult(src, PHASE_SUBTITLES, STATUS_FAIL, str(err))

    logger.log("subtitles.complete", LogLevel.INFO, file=src.name)
    return FileResult(src, PHASE_SUBTITLES, STATUS_OK)
