"""Lookup tables that map an autocorrelation period to a note and a frequency.

The period is measured in samples at the tuner's sampling rate of about
8928.57 Hz, so period ``n`` stands for a fundamental of ``8928.57 / n`` Hz.
Entries are padded to a fixed width so they can be placed on the display
as they are.
"""

TABLE_SIZE = 128
FREQUENCY_WIDTH = 8
NOTE_WIDTH = 2

_FREQUENCIES = """
    0.00 8928.57 4464.29 2976.19 2232.14 1785.71 1488.10 1275.51 1116.07 992.06
    892.86 811.69 744.05 686.81 637.76 595.24 558.04 525.21 496.03 469.92
    446.43 425.17 405.84 388.20 372.02 357.14 343.41 330.69 318.88 307.88
    297.62 288.02 279.02 270.56 262.61 255.10 248.02 241.31 234.96 228.94
    223.21 217.77 212.59 207.64 202.92 198.41 194.10 189.97 186.01 182.22
    178.57 175.07 171.70 168.46 165.34 162.34 159.44 156.64 153.94 151.33
    148.81 146.37 144.01 141.72 139.51 137.36 135.28 133.26 131.30 129.40
    127.55 125.75 124.01 122.31 120.66 119.05 117.48 115.96 114.47 113.02
    111.61 110.23 108.89 107.57 106.29 105.04 103.82 102.63 101.46 100.32
    99.21 98.12 97.05 96.01 94.98 93.98 93.01 92.05 91.11 90.19
    89.29 88.40 87.54 86.69 85.85 85.03 84.23 83.44 82.67 81.91
    81.17 80.44 79.72 79.01 78.32 77.64 76.97 76.31 75.67 75.03
    74.40 73.79 73.19 72.59 72.00 71.43 70.86 70.30
"""

# Notes for periods 1..127; period 0 means "no note" and is blank.
_NOTES = """
    C# C# F# C# A F# D# C# B A G# F# F D# D C# C B A# A G# G# G F# F F E
    D# D# D D C# C# C C B B A# A# A A G# G# G# G G F# F# F# F F F E E E
    D# D# D# D# D D D C# C# C# C# C C C C B B B B A# A# A# A# A A A A A
    G# G# G# G# G# G G G G G F# F# F# F# F# F# F F F F F F E E E E E E
    D# D# D# D# D# D# D# D D D D D D D C# C#
"""

FREQUENCY_TABLE: tuple[str, ...] = tuple(
    value.ljust(FREQUENCY_WIDTH) for value in _FREQUENCIES.split()
)
NOTE_TABLE: tuple[str, ...] = tuple(
    name.ljust(NOTE_WIDTH) for name in ["", *_NOTES.split()]
)


def _check_period(period: int) -> int:
    if not 0 <= period < TABLE_SIZE:
        raise IndexError(f"period {period} is outside 0..{TABLE_SIZE - 1}")
    return period


def frequency_label(period: int) -> str:
    """Return the padded frequency text (in Hz) for a period in samples."""
    return FREQUENCY_TABLE[_check_period(period)]


def note_label(period: int) -> str:
    """Return the padded note name for a period in samples."""
    return NOTE_TABLE[_check_period(period)]