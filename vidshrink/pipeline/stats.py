from pathlib import Path
from vidshrink.domain.errors import StatsIOFailure
from vidshrink.domain.models import SizeStats

BYTES_PER_MB = 1024 * 1024

def bytes_to_mb(num_bytes: int) -> float:
    return num_bytes / BYTES_PER_MB

def compute_stats(input_path: Path, output_path: Path) -> SizeStats:
    """Size of both files in MB and the percentage saved.

    An empty input reports 0% reduction.
    """
    try:
        input_bytes = Path(input_path).stat().st_size
        output_bytes = Path(output_path).stat().st_size
    except OSError as e:
        raise StatsIOFailure(f"Cannot read file sizes: {e}") from e

    if input_bytes == 0:
        reduction = 0.0
    else:
        reduction = (input_bytes - output_bytes) / input_bytes * 100

    return SizeStats(
        input_size_mb=bytes_to_mb(input_bytes),
        output_size_mb=bytes_to_mb(output_bytes),
        reduction_percent=reduction,
    )
