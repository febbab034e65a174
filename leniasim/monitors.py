"""Monitor layout, window placement and frame pacing."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class MonitorInfo:
    """Position and size of one display, in desktop pixels."""

    x: int
    y: int
    width: int
    height: int
    name: str = "Unknown"


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return int(value / 2)


def centered_position(monitor: MonitorInfo, width: int, height: int) -> tuple[int, int]:
    """Top-left corner that centres a ``width`` x ``height`` window on ``monitor``."""
    return (
        monitor.x + _half(monitor.width - width),
        monitor.y + _half(monitor.height - height),
    )


def default_monitor_index(monitors: list[MonitorInfo]) -> int:
    """Index of the monitor a new window opens on: the second one if present.

    With no monitors at all the index stays 0.
    """
    if not monitors:
        return 0
    return min(1, len(monitors) - 1)


def frame_sleep_ms(target_fps: int, elapsed_ms: int) -> int:
    """Milliseconds left to sleep so a frame lasts ``1000 // target_fps`` ms."""
    if target_fps <= 0:
        raise ValueError(f"target_fps must be positive, got {target_fps}")
    return max(0, 1000 // target_fps - elapsed_ms)


@dataclass
class MonitorSelection:
    """The chosen monitor and whether the window still has to move there."""

    monitors: list[MonitorInfo] = field(default_factory=list)
    current: int | None = None
    move_window: bool = False

    def __post_init__(self) -> None:
        if self.current is None:
            self.current = default_monitor_index(self.monitors)

    def select(self, index: int) -> None:
        """Choose the monitor at ``index`` and ask for the window to move."""
        if not 0 <= index < len(self.monitors):
            raise IndexError(
                f"monitor index {index} out of range for {len(self.monitors)} monitors"
            )
        self.current = index
        self.move_window = True

    def pending_position(self, width: int, height: int) -> tuple[int, int] | None:
        """Return where the window must move, once; None when nothing is pending."""
        if not self.move_window or not 0 <= self.current < len(self.monitors):
            return None
        self.move_window = False
        return centered_position(self.monitors[self.current], width, height)