"""Tests for the codec and subtitle probes."""

import pytest

from vidconvert import scan
from vidconvert.errors import ToolNotFoundError


def test_codec_match_is_trimmed_and_case_insensitive(tools, tmp_path):
    video = tmp_path / "a.mkv"
    video.write_text("")
    tools.codecs["a.mkv"] = "  H264 "

    assert scan.is_target_codec(video, "h264")
    assert not scan.is_target_codec(video, "hevc")


def test_empty_probe_output_is_not_target_codec(tools, tmp_path):
    video = tmp_path / "a.mkv"
    video.write_text("")

    assert not scan.is_target_codec(video, "h264")


def test_failed_probe_is_not_target_codec(tools, tmp_path):
    video = tmp_path / "a.mkv"
    video.write_text("")
    tools.codecs["a.mkv"] = "h264"
    tools.exit_codes["ffprobe"] = 1

    assert not scan.is_target_codec(video, "h264")


def test_missing_ffprobe_raises(tools, tmp_path):
    tools.missing.add("ffprobe")
    with pytest.raises(ToolNotFoundError) as exc:
        scan.is_target_codec(tmp_path / "a.mkv", "h264")
    assert exc.value.tool == "ffprobe"


def test_subtitle_stream_counts_as_subtitles(tools, tmp_path):
    video = tmp_path / "a.mkv"
    video.write_text("")
    tools.subtitle_streams["a.mkv"] = "2\n3\n"

    assert scan.has_subtitles(video)


def test_sidecar_file_counts_as_subtitles(tools, tmp_path):
    video = tmp_path / "show.s01e01.mkv"
    video.write_text("")
    (tmp_path / "show.s01e01.srt").write_text("")

    assert scan.has_subtitles(video)


def test_no_stream_and_no_sidecar_means_no_subtitles(tools, tmp_path):
    video = tmp_path / "a.mkv"
    video.write_text("")
    (tmp_path / "b.srt").write_text("")

    assert not scan.has_subtitles(video)


def test_failed_subtitle_probe_falls_back_to_sidecar(tools, tmp_path):
    video = tmp_path / "a.mkv"
    video.write_text("")
    tools.subtitle_streams["a.mkv"] = "2\n"
    tools.exit_codes["ffprobe"] = 1

    assert not scan.has_subtitles(video)

    (tmp_path / "a.srt").write_text("")
    assert scan.has_subtitles(video)


def test_mixed_case_sidecar_counts_as_subtitles(tools, tmp_path):
    video = tmp_path / "Movie.mkv"
    video.write_text("")
    (tmp_path / "Movie.Srt").write_text("")

    assert scan.has_subtitles(video)
