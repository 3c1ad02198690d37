"""
Utility functions for running external tools and verifying their availability.

Functions:
    - run_cmd: Executes a tool and returns a structured `ToolResult`. A tool
      that is not installed raises `ToolNotFoundError`.
    - which_or_die: Checks for the presence of a binary on the system's PATH
      and terminates the process if it is unavailable.
"""
import shutil
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Iterable

from vidconvert.errors import ToolNotFoundError
from vidconvert.utils.constants import EXIT_FATAL
from vidconvert.utils.logger import safe_print


class ToolStatus(Enum):
    """Outcome of one external tool invocation."""
    OK = "ok"
    FAILED = "failed"
    LAUNCH_ERROR = "launch-error"


@dataclass
class ToolResult:
    status: ToolStatus
    code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.status is ToolStatus.OK


def run_cmd(cmd: List[str], ok_codes: Iterable[int] = (0,)) -> ToolResult:
    """Run a command and return its result. Exit codes in `ok_codes` count as success."""
    try:
        p = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True, errors="replace")
    except FileNotFoundError as e:
        raise ToolNotFoundError(cmd[0]) from e
    except OSError as e:
        return ToolResult(ToolStatus.LAUNCH_ERROR, -1, "", str(e))

    status = ToolStatus.OK if p.returncode in set(ok_codes) else ToolStatus.FAILED
    return ToolResult(status, p.returncode, p.stdout or "", p.stderr or "")


def which_or_die(binary: str):
    """Check if a binary exists on PATH, exit if not found."""
    if shutil.which(binary) is None:
        safe_print(f"ERROR: '{binary}' not found on PATH. Install it first.", file=sys.stderr)
        sys.exit(EXIT_FATAL)
