"""
Run configuration: the immutable set of switches and tool settings for one invocation.

Switches come from the command line; tool settings come from the environment
(after `.env` has been loaded by `constants`) and fall back to the defaults in
`constants`.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from vidconvert.utils import constants


@dataclass(frozen=True)
class RunConfig:
    debug: bool = False
    dry_run: bool = False
    include_h264: bool = False
    no_transcode: bool = False
    gen_subs: bool = False
    target_codec: str = constants.DEFAULT_TARGET_CODEC
    preset: str = constants.DEFAULT_PRESET
    preset_file: Path = Path(constants.DEFAULT_PRESET_FILE)
    whisper_model: str = constants.DEFAULT_WHISPER_MODEL
    whisper_language: str = constants.DEFAULT_WHISPER_LANGUAGE
    sub_workers: int = constants.SUB_WORKERS
    log_file: Optional[Path] = None

    @property
    def preset_path(self) -> Path:
        """Preset file resolved against the current working directory."""
        return (Path.cwd() / self.preset_file).resolve()


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}")
    if value < 1:
        raise ValueError(f"{key} must be at least 1, got {value}")
    return value


def from_args(args, env: Optional[Mapping[str, str]] = None) -> RunConfig:
    """Build a RunConfig from parsed CLI arguments and the environment."""
    env = os.environ if env is None else env

    log_file = getattr(args, "log_file", None) or env.get(constants.ENV_LOG_FILE)

    return RunConfig(
        debug=args.debug,
        dry_run=args.dry_run,
        include_h264=args.include_h264,
        no_transcode=args.no_transcode,
        gen_subs=args.gen_subs,
        target_codec=env.get(constants.ENV_TARGET_CODEC) or constants.DEFAULT_TARGET_CODEC,
        preset=env.get(constants.ENV_PRESET) or constants.DEFAULT_PRESET,
        preset_file=Path(env.get(constants.ENV_PRESET_FILE) or constants.DEFAULT_PRESET_FILE),
        whisper_model=env.get(constants.ENV_WHISPER_MODEL) or constants.DEFAULT_WHISPER_MODEL,
        whisper_language=env.get(constants.ENV_WHISPER_LANGUAGE) or constants.DEFAULT_WHISPER_LANGUAGE,
        sub_workers=_env_int(env, constants.ENV_SUB_WORKERS, constants.SUB_WORKERS),
        log_file=Path(log_file) if log_file else None,
    )
