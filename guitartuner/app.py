"""The tuner: turn a block of samples into a note and show it on the display."""

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from guitartuner.analysis import (
    NUM_ADC_SAMPLES,
    NUM_AUTOCORRELATION_SAMPLES,
    autocorrelation,
    average,
    detect_period,
    offset_correct,
)
from guitartuner.debug import debug_stream
from guitartuner.lcd import Lcd
from guitartuner.tables import frequency_label, note_label

LINE_WIDTH = 15
SPLASH_BRIGHTNESS = 70
PROMPT = "Play a string! "
BLANK = " " * LINE_WIDTH


@dataclass(frozen=True)
class Reading:
    """Result of analysing one block: the period and the two display lines."""

    period: int
    lines: tuple[str, str]

    @property
    def detected(self) -> bool:
        return self.period != 0

    @property
    def note(self) -> str | None:
        return note_label(self.period).strip() if self.detected else None

    @property
    def frequency(self) -> str | None:
        return frequency_label(self.period).strip() if self.detected else None


def read_note(samples: Sequence[int]) -> Reading:
    """Analyse a block of unsigned 8-bit samples."""
    period = detect_period(samples)
    if period == 0:
        return Reading(0, (PROMPT, BLANK))
    note_line = f"Note: {note_label(period)}       "[:LINE_WIDTH]
    freq_line = f"f= {frequency_label(period)}Hz  "[:LINE_WIDTH]
    return Reading(period, (note_line, freq_line))


class Tuner:
    """Drives the display from blocks of samples."""

    def __init__(
        self,
        lcd: Lcd,
        delay: Callable[[float], None] = time.sleep,
        set_brightness: Callable[[int], None] | None = None,
    ) -> None:
        self.lcd = lcd
        self.delay = delay
        self.set_brightness = set_brightness

    def display_splash(self) -> None:
        """Show the title screen, then the prompt."""
        if self.set_brightness is not None:
            self.set_brightness(SPLASH_BRIGHTNESS)
        self.lcd.write_string("  PIC18F16Q40   ", 16, 0)
        self.lcd.write_string("  Guitar Tuner  ", 16, 1)
        self.delay(3.0)
        self.lcd.return_home()
        self.delay(0.002)
        self.lcd.clear_display()
        self.delay(0.002)
        self.lcd.write_string(PROMPT, LINE_WIDTH, 0)

    def note_read(self, samples: Sequence[int]) -> Reading:
        """Analyse one block and show the result."""
        reading = read_note(samples)
        for row, line in enumerate(reading.lines):
            self.lcd.write_string(line, LINE_WIDTH, row)
        return reading


def _blocks(data: bytes) -> list[bytes]:
    return [
        data[start:start + NUM_ADC_SAMPLES]
        for start in range(0, len(data) - NUM_ADC_SAMPLES + 1, NUM_ADC_SAMPLES)
    ]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="guitartuner",
        description="Detect the note in blocks of raw unsigned 8-bit samples.",
    )
    parser.add_argument("input", help="file of raw samples, or - for stdin")
    parser.add_argument("--debug-out", type=Path, help="write visualiser frames here")
    args = parser.parse_args(argv)

    if args.input == "-":
        data = sys.stdin.buffer.read()
    else:
        data = Path(args.input).read_bytes()

    blocks = _blocks(data)
    if not blocks:
        parser.error(f"need at least {NUM_ADC_SAMPLES} samples")

    debug_frames: list[bytes] = []
    for block in blocks:
        reading = read_note(block)
        if reading.detected:
            print(f"{reading.note} {reading.frequency} Hz")
        else:
            print("no note detected")
        if args.debug_out is not None:
            corrected = offset_correct(block, average(block))
            correlation = autocorrelation(corrected, NUM_AUTOCORRELATION_SAMPLES)
            debug_frames.extend(debug_stream(corrected, correlation))

    if args.debug_out is not None:
        args.debug_out.write_bytes(b"".join(debug_frames))
    return 0


if __name__ == "__main__":
    sys.exit(main())