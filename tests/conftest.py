"""Shared fixtures: a fake stand-in for the external media tools."""

import threading
from pathlib import Path
from typing import Dict, List

import pytest

from vidconvert.errors import ToolNotFoundError
from vidconvert.utils import logger, system_util
from vidconvert.utils.system_util import ToolResult, ToolStatus


class FakeTools:
    """Emulates ffprobe, HandBrakeCLI, mkvmerge and whisper on the filesystem."""

    def __init__(self):
        self.codecs: Dict[str, str] = {}
        self.subtitle_streams: Dict[str, str] = {}
        self.exit_codes: Dict[str, int] = {}
        self.missing: set = set()
        self.calls: List[List[str]] = []
        self._lock = threading.Lock()

    def tools_called(self) -> List[str]:
        return [cmd[0] for cmd in self.calls]

    def __call__(self, cmd, ok_codes=(0,)):
        with self._lock:
            self.calls.append(list(cmd))
        tool = cmd[0]
        if tool in self.missing:
            raise ToolNotFoundError(tool)

        code = self.exit_codes.get(tool, 0)
        stdout = ""
        status = ToolStatus.OK if code in set(ok_codes) else ToolStatus.FAILED
        if status is ToolStatus.OK:
            stdout = self._emulate(tool, cmd)
        return ToolResult(status, code, stdout, "boom" if code else "")

    def _emulate(self, tool, cmd) -> str:
        if tool == "ffprobe":
            name = Path(cmd[-1]).name
            if "v:0" in cmd:
                return self.codecs.get(name, "") + "\n"
            return self.subtitle_streams.get(name, "")
        if tool == "HandBrakeCLI":
            out = Path(cmd[cmd.index("-o") + 1])
            src = Path(cmd[cmd.index("-i") + 1])
            out.write_text("encoded:" + src.read_text())
            self.codecs[src.name] = "h264"
            return "Encode done!\n"
        if tool == "mkvmerge":
            out = Path(cmd[cmd.index("-o") + 1])
            out.write_text("muxed:" + Path(cmd[-1]).read_text())
            return "Multiplexing took 1 second.\n"
        if tool == "whisper":
            src = Path(cmd[1])
            out_dir = Path(cmd[cmd.index("--output_dir") + 1])
            (out_dir / (src.stem + ".srt")).write_text("1\n00:00:00,000 --> 00:00:01,000\nhello\n")
            return ""
        raise AssertionError(f"unexpected tool {tool}")


@pytest.fixture
def tools(monkeypatch):
    fake = FakeTools()
    monkeypatch.setattr(system_util, "run_cmd", fake)
    monkeypatch.setattr(system_util, "which_or_die", lambda binary: None)
    return fake


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger.set_log_file(None)
    logger.set_log_level(logger.LogLevel.INFO)


@pytest.fixture
def videos(tmp_path):
    """/videos with a.mkv (vp9), b.mp4 (h264) and c.txt."""
    root = tmp_path / "videos"
    root.mkdir()
    (root / "a.mkv").write_text("a")
    (root / "b.mp4").write_text("b")
    (root / "c.txt").write_text("c")
    return root
