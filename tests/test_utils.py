"""Tests for logging, subprocess and path helpers."""

import sys

import pytest

from vidconvert.errors import ToolNotFoundError
from vidconvert.report import FileResult, RunReport
from vidconvert.utils import LogLevel, file_util, logger, system_util
from vidconvert.utils.system_util import ToolStatus


def test_format_kv_keeps_entries_single_line():
    line = logger._format_kv({"file": 'a "b"\nc', "ok": True, "code": 3, "missing": None})
    assert line == 'file="a \\"b\\"\\nc" | ok=true | code=3 | missing=null'


def test_log_respects_level(capsys):
    logger.set_log_level(LogLevel.WARN)
    logger.log("hidden.event", LogLevel.INFO)
    logger.log("shown.event", LogLevel.ERROR, file="x.mkv")
    out = capsys.readouterr().out
    assert "hidden.event" not in out
    assert "[ERROR] | shown.event | file=\"x.mkv\" | worker=\"main\"" in out


def test_run_cmd_reports_exit_status():
    ok = system_util.run_cmd([sys.executable, "-c", "print('hi')"])
    assert ok.status is ToolStatus.OK
    assert ok.stdout.strip() == "hi"

    failed = system_util.run_cmd([sys.executable, "-c", "import sys; sys.exit(2)"])
    assert failed.status is ToolStatus.FAILED
    assert failed.code == 2

    tolerated = system_util.run_cmd([sys.executable, "-c", "import sys; sys.exit(1)"], ok_codes=(0, 1))
    assert tolerated.ok


def test_run_cmd_raises_for_missing_tool():
    with pytest.raises(ToolNotFoundError) as exc:
        system_util.run_cmd(["vidconvert-no-such-tool-xyz", "--help"])
    assert exc.value.tool == "vidconvert-no-such-tool-xyz"


def test_which_or_die_exits_with_fatal_code():
    with pytest.raises(SystemExit) as exc:
        system_util.which_or_die("vidconvert-no-such-tool-xyz")
    assert exc.value.code == 2


def test_temp_paths_are_unique_siblings(tmp_path):
    src = tmp_path / "movie.mp4"
    encoded, muxed = file_util.temp_paths(src)
    encoded2, _ = file_util.temp_paths(src)
    assert encoded.parent == muxed.parent == tmp_path
    assert encoded.name.endswith(".transcode.mkv")
    assert muxed.name.endswith(".mux.mkv")
    assert encoded != encoded2


def test_report_summary_counts_statuses(tmp_path):
    report = RunReport()
    report.add(FileResult(tmp_path / "a", "transcode", "OK"))
    report.add(FileResult(tmp_path / "b", "transcode", "FAIL (HandBrakeCLI)"))
    report.add(FileResult(tmp_path / "c", "subtitles", "DRY-RUN"))
    assert report.summary() == {"ok": 1, "skip": 0, "fail": 1, "dry_run": 1}
    assert [r.path.name for r in report.failures()] == ["b"]


def test_temp_artifacts_are_recognized(tmp_path):
    encoded, muxed = file_util.temp_paths(tmp_path / "a.mkv")
    assert file_util.is_temp_artifact(encoded)
    assert file_util.is_temp_artifact(muxed)
    assert not file_util.is_temp_artifact(tmp_path / "a.mkv")
    assert not file_util.is_temp_artifact(tmp_path / "movie.transcode.mkv")


def test_sidecar_lookup_ignores_extension_case(tmp_path):
    video = tmp_path / "Movie.mkv"
    video.write_text("")
    (tmp_path / "Movie.Srt").write_text("")
    (tmp_path / "Other.srt").write_text("")

    assert file_util.find_sidecar_subtitle(video) == tmp_path / "Movie.Srt"
    assert file_util.find_sidecar_subtitle(tmp_path / "Nothing.mkv") is None
