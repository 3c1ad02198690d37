#!/usr/bin/env python3
"""
vidconvert: normalize a video library to a single codec, optionally adding subtitles.

For each path given on the command line:
- Phase 1 (unless --no-transcode): find videos not already in the target codec
  and replace each one in place with a HandBrake + mkvmerge encode.
- Phase 2 (with --gen-subs): find videos without subtitles and generate a
  sidecar .srt for each one with whisper, four at a time.

With --dry-run both phases only list what they would act on.
"""

import argparse
import atexit
import os
import signal
import sys
import time
from pathlib import Path
from typing import List, Optional

import vidconvert as vidconvert_module
from vidconvert import scan, subtitles, transcode
from vidconvert.errors import PresetFileError, ToolNotFoundError, VidconvertError
from vidconvert.report import FileResult, RunReport
from vidconvert.utils import (
    EXIT_FATAL,
    PHASE_SUBTITLES,
    PHASE_TRANSCODE,
    STATUS_DRY_RUN,
    STATUS_SKIP,
    LogLevel,
    config as run_config,
    logger,
    system_util,
    time_util,
)
from vidconvert.utils.constants import FFPROBE, HANDBRAKE, MKVMERGE, WHISPER


def _signal_handler(signum, frame):
    """Handle termination signals gracefully."""
    if getattr(vidconvert_module, "DEBUG", False):
        try:
            sig_name = signal.Signals(signum).name
        except ValueError:
            sig_name = str(signum)
        logger.log("vidconvert.signal", LogLevel.DEBUG, signal=sig_name, signum=signum)

    logger.safe_print("\nShutdown signal received. Stopping gracefully...")
    logger.safe_print("Waiting for running subtitle jobs to complete...")
    subtitles.batch.shutdown(wait=True)
    logger.safe_print("Shutdown complete.")
    sys.exit(0)


def _cleanup():
    """Cleanup function called on exit."""
    subtitles.batch.shutdown(wait=False)
    logger.set_log_file(None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vidconvert",
        description="Converts non H264 video files into H264 video files using a HandBrake preset.",
        epilog="Example: vidconvert ~/Videos --gen-subs",
    )
    parser.add_argument("paths", nargs="+", help="Path(s) to run vidconvert on (files or directories)")
    parser.add_argument("--debug", action="store_true", help="Turn debugging information on")
    parser.add_argument("--dry-run", action="store_true",
                        help="List the files that would be processed without running any tool on them")
    parser.add_argument("--include-h264", action="store_true",
                        help="Also transcode files whose video is already in the target codec")
    parser.add_argument("--no-transcode", action="store_true",
                        help="Do not perform any transcoding (useful if you just want to generate subtitles)")
    parser.add_argument("--gen-subs", action="store_true",
                        help="Generate subtitles using whisper for all videos that do not contain subtitles")
    parser.add_argument("--log-file", help="Also append log output to this file (or set $VIDCONVERT_LOG_FILE)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {vidconvert_module.__version__}")
    return parser


def required_tools(config: run_config.RunConfig) -> List[str]:
    """Tools the requested phases will launch."""
    tools = []
    if (not config.no_transcode and not config.include_h264) or config.gen_subs:
        tools.append(FFPROBE)
    if not config.dry_run:
        if not config.no_transcode:
            tools += [HANDBRAKE, MKVMERGE]
        if config.gen_subs:
            tools.append(WHISPER)
    return tools


def _record_skipped(files: List[Path], phase: str, reason: str, report: RunReport) -> None:
    for f in files:
        report.add(FileResult(f, phase, f"{STATUS_SKIP} ({reason})"))


def _print_selection(files: List[Path], heading: str, phase: str, report: RunReport) -> None:
    logger.safe_print(heading)
    for f in files:
        logger.safe_print(f"  {f}")
        report.add(FileResult(f, phase, STATUS_DRY_RUN))


def process_path(root_arg: str, config: run_config.RunConfig, report: RunReport) -> None:
    """Run the requested phases for one root path."""
    root = Path(root_arg).expanduser()
    walk_errors_recorded = False

    if not config.no_transcode:
        walked = scan.walk(root, scan.needs_transcode(config))
        report.add_errors(walked.errors)
        _record_skipped(walked.skipped, PHASE_TRANSCODE, f"already {config.target_codec}", report)
        walk_errors_recorded = True
        if config.dry_run:
            _print_selection(walked.files, f"The following files WILL be converted in path {root_arg}:",
                             PHASE_TRANSCODE, report)
        else:
            transcode.transcode_files(walked.files, config, report, label=root_arg)

    if config.gen_subs:
        walked = scan.walk(root, scan.needs_subtitles(config))
        if not walk_errors_recorded:
            report.add_errors(walked.errors)
        _record_skipped(walked.skipped, PHASE_SUBTITLES, "has subtitles", report)
        if config.dry_run:
            _print_selection(walked.files, f"The following files WILL get subtitles in path {root_arg}:",
                             PHASE_SUBTITLES, report)
        else:
            subtitles.generate_all(walked.files, config, report, label=root_arg)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = run_config.from_args(args)
    except ValueError as e:
        logger.log("startup.error", LogLevel.ERROR, msg=str(e))
        return EXIT_FATAL

    vidconvert_module.DEBUG = config.debug
    logger.set_log_level(LogLevel.DEBUG if config.debug else LogLevel.INFO)
    if config.log_file:
        log_path = logger.set_log_file(config.log_file)
        logger.safe_print(f"Logging to: {log_path}")

    signal.signal(signal.SIGTERM, _signal_handler)
    signal.signal(signal.SIGINT, _signal_handler)
    atexit.register(_cleanup)

    for tool in required_tools(config):
        system_util.which_or_die(tool)

    start_time = time.time()
    report = RunReport()

    logger.log(
        "vidconvert.start",
        LogLevel.INFO,
        pid=os.getpid(),
        paths=", ".join(args.paths),
        target_codec=config.target_codec,
        include_h264=config.include_h264,
        transcode=not config.no_transcode,
        gen_subs=config.gen_subs,
        dry_run=config.dry_run,
    )

    exit_code = 0
    try:
        if not config.dry_run and not config.no_transcode:
            transcode.check_preset_file(config)
        for root_arg in args.paths:
            process_path(root_arg, config, report)
    except (ToolNotFoundError, PresetFileError) as e:
        logger.log("vidconvert.fatal", LogLevel.ERROR, error=str(e))
        exit_code = EXIT_FATAL
    except VidconvertError as e:
        logger.log("vidconvert.fatal", LogLevel.ERROR, error=str(e))
        exit_code = 1
    finally:
        report.log_failures()
        logger.log(
            "vidconvert.end",
            LogLevel.INFO,
            pid=os.getpid(),
            runtime=time_util.format_runtime(time.time() - start_time),
            exit_code=exit_code,
            **report.summary(),
        )
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
