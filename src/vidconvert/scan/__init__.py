"""Video discovery: extension filtering, ffprobe checks and the recursive tree walk.

- probe: codec and subtitle checks backed by ffprobe and sidecar lookups.
- walker: recursive traversal applying one of the phase predicates.
"""

from .probe import (
    probe_codec,
    is_target_codec,
    has_subtitles,
)
from .walker import (
    WalkResult,
    walk,
    needs_transcode,
    needs_subtitles,
)

__all__ = [
    # Probing
    "probe_codec",
    "is_target_codec",
    "has_subtitles",
    # Walking
    "WalkResult",
    "walk",
    "needs_transcode",
    "needs_subtitles",
]
