# guitartuner

A small pitch detector for guitar strings. It works on blocks of 512 unsigned
8-bit samples taken at about 8928.57 Hz. For each block it does four things:

1. It removes the DC offset by subtracting the integer mean of the block.
2. It computes the autocorrelation over lags 0 to 127.
3. It picks the highest strict local peak. If that peak is below 2000, the
   block counts as "no note".
4. It looks up the peak's lag, the period, in a table of note names and
   frequencies.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Command line

```
guitartuner SAMPLES [--debug-out FRAMES]
```

`SAMPLES` is a file of raw unsigned 8-bit samples, or `-` to read them from
standard input. The input is cut into blocks of 512 samples, and any trailing
partial block is ignored. For each block the command prints one line:

- `<note> <frequency> Hz` when a note is found, for example `E 82.67 Hz`
- `no note detected` otherwise

With fewer than 512 samples the command exits with an error.

`--debug-out FRAMES` writes the framed debug stream for every block to the
file `FRAMES`.

## Library use

```python
from guitartuner.analysis import detect_period
from guitartuner.tables import note_label, frequency_label
from guitartuner.app import read_note

samples = [...]  # 512 unsigned 8-bit values
period = detect_period(samples)
if period:
    print(note_label(period), frequency_label(period))

reading = read_note(samples)
print(reading.detected, reading.note, reading.frequency)
print(reading.lines)  # the two 15-character display lines
```

### `guitartuner.analysis`

This module exposes the steps one by one:

- `average(samples)`: the integer mean. It raises `ValueError` on an empty
  block or on values outside 0–255.
- `offset_correct(samples, mean)`: subtracts the mean from each sample and
  wraps the result to a signed 8-bit value.
- `autocorrelation(data, lags)`
- `find_highest_peak(values, threshold)`
- `detect_period(samples)`: runs all of the above.

### `guitartuner.tables`

`note_label(period)` and `frequency_label(period)` return the padded table
entries for periods 0 to 127. Any other period raises `IndexError`.

### `guitartuner.debug`

This module builds frames for a serial data visualiser. `encode_frame(trigger,
sample, correlation)` gives 8 bytes:

- the start byte `0x33`
- an unsigned trigger byte
- a signed sample byte
- a little-endian signed 32-bit correlation value
- the end byte `0xCC`

Out-of-range values raise `ValueError`. `debug_stream(corrected, correlation)`
yields one frame per sample. Only the first frame has the trigger set.

### `guitartuner.lcd`

This module drives an HD44780 character display in 4-bit mode. The display
sits behind an SPI port expander (`Expander`), and a digital potentiometer
(`Digipot`) sets its contrast. Every transfer goes through a bus object with a
`write(chip, data)` method. `RecordingBus` keeps each transfer in its `writes`
list. `Lcd` offers:

- `setup`
- `return_home`
- `clear_display`
- `set_addr`
- `write_char`
- `write_string`
- `set_contrast`

### `guitartuner.app`

`Tuner(lcd)` puts the results on an `Lcd`. `display_splash()` shows the title
screen and then the "Play a string!" prompt. `note_read(samples)` analyses one
block, writes both lines, and returns the `Reading`.

## What it does not do

The package does not capture audio. It only analyses samples you give it.
It has no hardware bus either: an `Lcd` only talks to a bus object you supply,
such as `RecordingBus`. The command line prints its readings as text and does
not use the display.

## Tests

```
pytest
```