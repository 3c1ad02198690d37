"""
A batch utility that normalizes a video library to a single target codec.

This package walks directory trees, probes every candidate video with ffprobe,
and converts the files that are not already in the target codec using
HandBrakeCLI and mkvmerge. It can also generate sidecar subtitles with whisper
for videos that carry none.

The package is organized into:
- scan: extension filter, codec/subtitle probes and the tree walker.
- transcode: the HandBrake + mkvmerge replace-in-place pipeline.
- subtitles: whisper subtitle generation on a small worker pool.
- utils: constants, configuration, structured logging, subprocess helpers.
"""

__version__ = "1.0.0"

# Debug flag for controlling verbose output
DEBUG: bool = False

__all__ = ["__version__", "DEBUG"]
