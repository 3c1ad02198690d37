"""
Constants and default settings for video normalization.

This module holds the accepted video extensions, the sidecar subtitle
extensions, the fixed argument values handed to the external tools, and the
status codes used when reporting per-file outcomes. Tool settings can be
overridden through environment variables (a `.env` file in the working
directory is loaded first); see `vidconvert.utils.config`.
"""

from dotenv import load_dotenv

load_dotenv()

# External tools, resolved on PATH
FFPROBE = "ffprobe"
HANDBRAKE = "HandBrakeCLI"
MKVMERGE = "mkvmerge"
WHISPER = "whisper"

# Run settings
SUB_WORKERS = 4

# Defaults for the tool settings (overridable through the environment)
DEFAULT_TARGET_CODEC = "h264"
DEFAULT_PRESET = "Fast 1080p NVENC"
DEFAULT_PRESET_FILE = "presets.json"
DEFAULT_WHISPER_MODEL = "medium"
DEFAULT_WHISPER_LANGUAGE = "English"

# Environment variable names
ENV_TARGET_CODEC = "VIDCONVERT_TARGET_CODEC"
ENV_PRESET = "VIDCONVERT_PRESET"
ENV_PRESET_FILE = "VIDCONVERT_PRESET_FILE"
ENV_WHISPER_MODEL = "VIDCONVERT_WHISPER_MODEL"
ENV_WHISPER_LANGUAGE = "VIDCONVERT_WHISPER_LANGUAGE"
ENV_SUB_WORKERS = "VIDCONVERT_SUB_WORKERS"
ENV_LOG_FILE = "VIDCONVERT_LOG_FILE"

# Accepted video file extensions
VIDEO_EXTENSIONS = {".mp4", ".mkv", ".avi", ".mov", ".wmv", ".flv", ".webm"}

# Sidecar subtitle extensions; whisper writes .srt
SUBTITLE_EXTENSIONS = {".srt", ".vtt", ".ass", ".ssa", ".sub"}
WHISPER_OUTPUT_FORMAT = "srt"

# Suffixes of the per-invocation temporary containers
TRANSCODE_SUFFIX = ".transcode.mkv"
MUX_SUFFIX = ".mux.mkv"

# mkvmerge exits 1 when it finished with warnings only
MKVMERGE_OK_CODES = {0, 1}

# Phases
PHASE_WALK = "walk"
PHASE_TRANSCODE = "transcode"
PHASE_SUBTITLES = "subtitles"

# Processing status codes
STATUS_OK = "OK"
STATUS_FAIL = "FAIL"
STATUS_SKIP = "SKIP"
STATUS_DRY_RUN = "DRY-RUN"

# Exit code for fatal, user-facing errors
EXIT_FATAL = 2
