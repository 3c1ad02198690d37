from datetime import datetime, timedelta, timezone


def get_eta_total(done_count, total_count, elapsed_seconds):
    avg_time_per_file = elapsed_seconds / done_count
    remaining_seconds = avg_time_per_file * (total_count - done_count)
    return _get_eta_string(remaining_seconds)


def format_runtime(runtime_seconds):
    runtime_seconds = int(runtime_seconds)
    hours = runtime_seconds // 3600
    mins = (runtime_seconds % 3600) // 60
    secs = runtime_seconds % 60
    return f"{hours:02d}:{mins:02d}:{secs:02d}"


def _get_eta_string(time_in_seconds):
    completion_time = (datetime.now(timezone.utc) + timedelta(
        seconds=time_in_seconds)).strftime("%Y-%m-%d %H:%M:%S")

    eta_hours = int(time_in_seconds // 3600)
    eta_mins = int((time_in_seconds % 3600) // 60)
    eta_secs = int(time_in_seconds % 60)
    if eta_hours > 0:
        formatted_time = f"{eta_hours}h{eta_mins}m{eta_secs}s"
    elif eta_mins > 0:
        formatted_time = f"{eta_mins}m{eta_secs}s"
    else:
        formatted_time = f"{eta_secs}s"

    return f"{completion_time} ({formatted_time})"
