"""Pitch detection by autocorrelation of 8-bit ADC samples."""

from collections.abc import Sequence

NUM_ADC_SAMPLES = 512
NUM_AUTOCORRELATION_SAMPLES = 128
PEAK_THRESHOLD = 2000


def average(samples: Sequence[int]) -> int:
    """Return the integer mean (rounded down) of unsigned 8-bit samples."""
    if not samples:
        raise ValueError("cannot average an empty block of samples")
    if any(not 0 <= s <= 255 for s in samples):
        raise ValueError("samples must be unsigned 8-bit values")
    return sum(samples) // len(samples)


def _to_int8(value: int) -> int:
    return (value + 128) % 256 - 128


def offset_correct(samples: Sequence[int], mean: int) -> list[int]:
    """Subtract the mean from each sample, wrapping to a signed 8-bit value."""
    return [_to_int8(s - mean) for s in samples]


def autocorrelation(data: Sequence[int], lags: int) -> list[int]:
    """Return the autocorrelation of ``data`` for lags ``0 .. lags - 1``."""
    return [
        sum(a * b for a, b in zip(data, data[lag:]))
        for lag in range(lags)
    ]


def find_highest_peak(values: Sequence[int], threshold: int) -> int:
    """Return the index of the highest strict local maximum, or 0.

    The first and last values are never peaks. If the highest peak is
    below ``threshold`` (or there is none), 0 is returned.
    """
    peak = 0
    amplitude = 0
    for index in range(1, len(values) - 1):
        value = values[index]
        if values[index - 1] < value > values[index + 1] and value > amplitude:
            peak, amplitude = index, value
    return 0 if amplitude < threshold else peak


def detect_period(samples: Sequence[int]) -> int:
    """Return the fundamental period of a block of samples, or 0 if none."""
    corrected = offset_correct(samples, average(samples))
    correlation = autocorrelation(corrected, NUM_AUTOCORRELATION_SAMPLES)
    return find_highest_peak(correlation, PEAK_THRESHOLD)