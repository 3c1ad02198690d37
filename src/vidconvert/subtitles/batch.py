"""
Parallel subtitle generation on a fixed-size thread pool.

Jobs are independent; they share only the progress bar and the run report,
both of which are thread-safe.
"""
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional

from vidconvert.errors import ToolNotFoundError
from vidconvert.report import ProgressReporter, RunReport
from vidconvert.utils import LogLevel, logger
from vidconvert.utils.config import RunConfig
from . import core

# Executor of the running batch, kept for graceful shutdown on signals
_executor: Optional[ThreadPoolExecutor] = None


def shutdown(wait: bool = True) -> None:
    """Stop accepting jobs; running whisper processes are left to finish."""
    if _executor:
        _executor.shutdown(wait=wait, cancel_futures=True)


def generate_all(files: List[Path], config: RunConfig, report: RunReport, label: str = "") -> None:
    """Generate subtitles for every file using `config.sub_workers` threads."""
    global _executor
    if not files:
        logger.log("subtitles.none", LogLevel.INFO, path=label, msg="No files need subtitles")
        return

    logger.log("subtitles.batch", LogLevel.INFO, path=label, files=len(files), workers=config.sub_workers)
    _executor = ThreadPoolExecutor(max_workers=config.sub_workers)
    try:
        with ProgressReporter(len(files), desc=f"Subtitles {label}".strip()) as progress:
            futs = {_executor.submit(core.generate_subtitles, src, config): src for src in files}
            for fut in as_completed(futs):
                try:
                    result = report.add(fut.result())
                except ToolNotFoundError:
                    for pending in futs:
                        pending.cancel()
                    raise
                progress.advance(result)
    finally:
        _executor.shutdown(wait=True)
        _executor = None
    logger.log("subtitles.batch_done", LogLevel.INFO, path=label)
