import math

LABEL_PREFIX = "Compressing video ETA: "

def format_eta(remaining_seconds: int) -> str:
    # No padding. Minutes are floored; the seconds field keeps the sign of
    # remaining_seconds, so an overshoot of 30s renders as "-1m:-30s".
    minutes = math.floor(remaining_seconds / 60)
    seconds = int(math.fmod(remaining_seconds, 60))
    return f"{minutes}m:{seconds}s"

def format_percent(total_seconds: int, elapsed_seconds: int) -> str:
    if total_seconds == 0:
        return "0.00%"
    return f"{elapsed_seconds / total_seconds * 100:.2f}%"

def format_label(total_seconds: int, elapsed_seconds: int) -> str:
    """Spinner text, e.g. "Compressing video ETA: 1m:30s | 25.00%"."""
    remaining = total_seconds - elapsed_seconds
    return f"{LABEL_PREFIX}{format_eta(remaining)} | {format_percent(total_seconds, elapsed_seconds)}"
