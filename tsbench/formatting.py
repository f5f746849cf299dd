"""
Console formatting: numbers, byte sizes, comparisons and banners.
"""

from dataclasses import dataclass
from typing import Optional

from tsbench.stats import Stats

BYTE_UNITS = ["Bytes", "KB", "MB", "GB"]


def format_number(num: int) -> str:
    """Format an integer with thousands separators."""
    return f"{num:,}"


def format_bytes(num_bytes: float) -> str:
    """Format a byte count in the largest unit whose scaled value is at least 1."""
    if num_bytes < 0:
        raise ValueError(f"byte count must be >= 0, got {num_bytes}")
    if num_bytes == 0:
        return "0 Bytes"

    i = 0
    while i < len(BYTE_UNITS) - 1 and num_bytes >= 1024 ** (i + 1):
        i += 1

    scaled = f"{num_bytes / 1024 ** i:.2f}".rstrip("0").rstrip(".")
    return f"{scaled} {BYTE_UNITS[i]}"


@dataclass(frozen=True)
class Improvement:
    """Relative change of ``comparison`` against ``baseline`` (positive = smaller/faster)."""
    percent: Optional[float]  # None when the baseline is zero

    @property
    def direction(self) -> str:
        if self.percent is None:
            return "no data"
        if self.percent > 0:
            return "faster"
        if self.percent < 0:
            return "slower"
        return "equal"

    @property
    def magnitude(self) -> Optional[float]:
        return abs(self.percent) if self.percent is not None else None

    def __str__(self) -> str:
        direction = self.direction
        if direction == "faster":
            return f"🟢 {self.magnitude:.1f}% faster"
        if direction == "slower":
            return f"🔴 {self.magnitude:.1f}% slower"
        if direction == "equal":
            return "🟡 equal"
        return "⚪ no data (baseline is 0)"


def _relative_change(baseline: float, comparison: float) -> Optional[float]:
    if baseline == 0:
        return None
    return (baseline - comparison) / baseline * 100


def calculate_improvement(baseline: float, comparison: float) -> Improvement:
    """Percentage by which ``comparison`` beats ``baseline``."""
    return Improvement(_relative_change(baseline, comparison))


def calculate_space_saving(baseline_bytes: float, comparison_bytes: float) -> Optional[float]:
    """Percentage of storage saved by ``comparison``; None for an empty baseline."""
    return _relative_change(baseline_bytes, comparison_bytes)


def format_space_saving(baseline_bytes: float, comparison_bytes: float) -> str:
    saving = calculate_space_saving(baseline_bytes, comparison_bytes)
    if saving is None:
        return "Space: ⚪ no data (baseline is empty)"
    if saving > 0:
        return f"Space saved: 🟢 {saving:.1f}% (saved {format_bytes(baseline_bytes - comparison_bytes)})"
    return f"Space used: 🔴 {abs(saving):.1f}% more"


def format_stats(stats: Stats, unit: str = "ms") -> str:
    return (f"mean: {stats.mean:.1f}{unit}, median: {stats.median:.1f}{unit}, "
            f"std dev: {stats.std_dev:.1f}{unit}")


def print_separator(char: str = "=", length: int = 80):
    print(char * length)


def print_title(title: str):
    print_separator()
    print(f"📊 {title}")
    print_separator()
