"""Motion tracking from accelerometer samples: shakes and steps."""

import math

SHAKE_MAGNITUDE_THRESHOLD = 18.0
SHAKE_DEBOUNCE_MS = 500
STEP_MAG_HIGH = 12.5
STEP_MAG_LOW = 10.0
STEP_MIN_MS = 280

_INT16_MIN = -(1 << 15)
_INT16_MAX = (1 << 15) - 1


def _to_centi(value: float) -> int:
    return max(_INT16_MIN, min(_INT16_MAX, int(value * 100)))


class MotionTracker:
    """Holds the latest acceleration sample (m/s^2) and derives motion events.

    Feed one sample per frame with ``update``; ``invalidate`` marks the
    sample stale when a read fails.
    """

    def __init__(self) -> None:
        self._accel: tuple[float, float, float] | None = None
        self._last_shake_ms = 0
        self._step_was_high = False
        self._step_last_ms = 0
        self._step_count = 0

    def update(self, ax: float, ay: float, az: float) -> None:
        self._accel = (float(ax), float(ay), float(az))

    def invalidate(self) -> None:
        self._accel = None

    def _magnitude(self) -> float | None:
        if self._accel is None:
            return None
        return math.sqrt(sum(a * a for a in self._accel))

    def read_accel(self) -> tuple[int, int, int]:
        """Latest sample in 0.01 m/s^2 units; zeros if there is none."""
        if self._accel is None:
            return 0, 0, 0
        ax, ay, az = self._accel
        return _to_centi(ax), _to_centi(ay), _to_centi(az)

    def shake_detected(self, now_ms: int) -> bool:
        """True on a strong jolt, at most once per debounce interval."""
        mag = self._magnitude()
        if mag is None:
            return False
        if mag >= SHAKE_MAGNITUDE_THRESHOLD and now_ms - self._last_shake_ms >= SHAKE_DEBOUNCE_MS:
            self._last_shake_ms = now_ms
            return True
        return False

    def _poll_step(self, now_ms: int) -> None:
        mag = self._magnitude()
        if mag is None:
            return
        if mag >= STEP_MAG_HIGH:
            self._step_was_high = True
        elif (mag <= STEP_MAG_LOW and self._step_was_high
              and now_ms - self._step_last_ms >= STEP_MIN_MS):
            self._step_was_high = False
            self._step_last_ms = now_ms
            self._step_count += 1

    def step_delta(self, now_ms: int) -> int:
        """Check the latest sample for a step; return and reset the count."""
        self._poll_step(now_ms)
        count, self._step_count = self._step_count, 0
        return count