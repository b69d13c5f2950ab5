"""Receiver tuning: VFO, offset within the scope and the pass band."""

from __future__ import annotations

DEFAULT_INPUT_RATE = 96000
DEFAULT_FREQUENCY = 14_070_000
DEFAULT_LOW = -3000
DEFAULT_HIGH = 3000


def frequency_to_string(freq: int) -> str:
    """Render a frequency in Hz as a plain string of decimal digits."""
    freq = int(freq)
    if freq < 0:
        raise ValueError(f"frequency cannot be negative: {freq}")
    return str(freq)


def _half(n: int) -> int:
    """Half of n, truncated toward zero."""
    return int(n / 2)


class Tuner:
    """Keeps the device VFO, the selected offset and the filter pass band.

    Small adjustments move the offset within the visible spectrum; once the
    pass band would come close to the edge of the scope, the VFO itself is
    retuned instead.
    """

    def __init__(self, vfo: int = DEFAULT_FREQUENCY,
                 input_rate: int = DEFAULT_INPUT_RATE) -> None:
        if input_rate <= 0:
            raise ValueError("input rate must be positive")
        self.input_rate = input_rate
        self.scope_width = input_rate
        self.low_f = DEFAULT_LOW
        self.high_f = DEFAULT_HIGH
        self.offset = 0
        self.vfo = int(vfo)
        self.center_frequency = self.vfo
        self.selected_frequency = self.vfo
        self.display = frequency_to_string(self.vfo)

    @property
    def filter_band(self) -> tuple[int, int]:
        """Lower and upper edge of the pass band relative to the VFO."""
        return self.offset + self.low_f, self.offset + self.high_f

    @property
    def tuned_frequency(self) -> int:
        """The frequency at the centre of the pass band."""
        return self.vfo + self.offset

    def set_frequency(self, frequency: int) -> None:
        """Retune the VFO to the given frequency."""
        frequency = int(frequency)
        self.center_frequency = frequency
        self.selected_frequency = frequency
        self.vfo = frequency
        self.display = frequency_to_string(self.selected_frequency)

    def adjust_frequency_hz(self, n: int) -> None:
        """Move the pass band by n Hz, retuning the VFO near the scope edge."""
        n = int(n)
        edge = self.scope_width // 2 - self.scope_width // 20
        low_edge = -(self.scope_width // 2) + self.scope_width // 20
        if (self.offset + self.high_f + n >= edge
                or self.offset + self.low_f + n <= low_edge):
            self.set_frequency(self.vfo + self.offset + n)
            return
        self.offset += n
        self.display = frequency_to_string(self.vfo + self.offset)

    def adjust_frequency_khz(self, n: int) -> None:
        """Move the pass band by n kHz."""
        self.adjust_frequency_hz(1000 * int(n))

    def set_in_middle(self) -> None:
        """Retune the VFO to the currently selected frequency."""
        self.set_frequency(self.vfo + self.offset)

    def set_spectrum_width(self, n: int) -> None:
        """Set the pass band to n Hz, centred on the offset."""
        half = _half(int(n))
        self.low_f = -half
        self.high_f = half