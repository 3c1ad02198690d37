"""
Per-file outcomes, the run-level report and the progress bar.

`RunReport` collects a `FileResult` for every file touched in every phase,
plus the walk errors, and summarizes them at the end of the run.
`ProgressReporter` is a thread-safe tqdm counter advanced as dispatch jobs
complete.
"""
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from tqdm import tqdm

from vidconvert.errors import VidconvertError
from vidconvert.utils import (
    PHASE_WALK,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_OK,
    STATUS_SKIP,
    LogLevel,
    logger,
    time_util,
)


@dataclass
class FileResult:
    """Outcome of one file in one phase."""

    path: Path
    phase: str
    status: str
    detail: str = ""

    @property
    def failed(self) -> bool:
        return self.status.startswith(STATUS_FAIL)


class RunReport:
    """Thread-safe, append-only collection of file results."""

    def __init__(self):
        self._lock = threading.Lock()
        self._results: List[FileResult] = []

    def add(self, result: FileResult) -> FileResult:
        with self._lock:
            self._results.append(result)
        return result

    def add_errors(self, errors: Iterable[VidconvertError], phase: str = PHASE_WALK) -> None:
        for err in errors:
            self.add(FileResult(err.path, phase, STATUS_FAIL, err.message))

    @property
    def results(self) -> List[FileResult]:
        with self._lock:
            return list(self._results)

    def failures(self) -> List[FileResult]:
        return [r for r in self.results if r.failed]

    def count(self, status: str) -> int:
        return sum(1 for r in self.results if r.status.startswith(status))

    def summary(self) -> dict:
        return {
            "ok": self.count(STATUS_OK),
            "skip": self.count(STATUS_SKIP),
            "fail": self.count(STATUS_FAIL),
            "dry_run": self.count(STATUS_DRY_RUN),
        }

    def log_failures(self) -> None:
        for r in self.failures():
            logger.log("vidconvert.failure", LogLevel.ERROR,
                       phase=r.phase,
                       file=str(r.path) if r.path is not None else None,
                       detail=r.detail)


class ProgressReporter:
    """Progress bar advanced once per completed dispatch job."""

    def __init__(self, total: int, desc: str):
        self.total = total
        self.done = 0
        self._lock = threading.Lock()
        self._start = time.time()
        self._bar = tqdm(total=total, desc=desc, unit="file")

    def advance(self, result: Optional[FileResult] = None) -> None:
        with self._lock:
            self.done += 1
            self._bar.update(1)
            done = self.done
        eta = time_util.get_eta_total(done, self.total, time.time() - self._start)
        logger.log("progress", LogLevel.DEBUG,
                   completed=done,
                   total=self.total,
                   status=result.status if result else None,
                   eta=eta)

    def close(self) -> None:
        self._bar.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
