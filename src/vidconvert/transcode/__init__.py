"""Video transcoding: HandBrake encode, mkvmerge remux and in-place replacement.

- core: command building and the single-file replace-in-place pipeline.
- batch: sequential processing of a selected file list.
"""

from .core import (
    build_handbrake_cmd,
    build_mkvmerge_cmd,
    transcode_video,
)
from .batch import (
    check_preset_file,
    transcode_files,
)

__all__ = [
    "build_handbrake_cmd",
    "build_mkvmerge_cmd",
    "transcode_video",
    "check_preset_file",
    "transcode_files",
]
