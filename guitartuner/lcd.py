"""Driver for an HD44780 character display behind an SPI port expander.

The display's data nibble, RS and E lines hang off port B of an SPI I/O
expander; its contrast comes from an SPI digital potentiometer. Both are
reached through a bus object with a ``write(chip, data)`` method.
"""

import enum
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

INSTRUCTION = 0
DATA = 1

_IODIRB = 0x01
_OLATB = 0x15
_WRITE_BYTE = 0x40
_ENABLE = 1 << 3
_ROW_STRIDE = 40


class Chip(enum.Enum):
    """Devices selected on the shared SPI bus."""

    EXPANDER = "expander"
    DIGIPOT = "digipot"


class Bus(Protocol):
    def write(self, chip: Chip, data: bytes) -> None: ...


@dataclass
class RecordingBus:
    """Bus that keeps every transfer it is given, in order."""

    writes: list[tuple[Chip, bytes]] = field(default_factory=list)

    def write(self, chip: Chip, data: bytes) -> None:
        self.writes.append((chip, bytes(data)))


class Expander:
    """SPI I/O expander whose port B drives the display."""

    def __init__(self, bus: Bus) -> None:
        self.bus = bus

    def send_byte(self, addr: int, byte: int) -> None:
        self.bus.write(Chip.EXPANDER, bytes([_WRITE_BYTE, addr, byte]))

    def setup(self) -> None:
        """Make every port B pin an output."""
        self.send_byte(_IODIRB, 0)

    def set_output(self, output: int) -> None:
        self.send_byte(_OLATB, output)


class Digipot:
    """SPI digital potentiometer setting the display contrast."""

    def __init__(self, bus: Bus) -> None:
        self.bus = bus

    def set_wiper(self, value: int) -> None:
        self.bus.write(Chip.DIGIPOT, bytes([0, value]))


class Lcd:
    """HD44780 display driven in 4-bit mode through the expander."""

    def __init__(
        self, bus: Bus, delay: Callable[[float], None] = time.sleep
    ) -> None:
        self.expander = Expander(bus)
        self.digipot = Digipot(bus)
        self.delay = delay

    @staticmethod
    def _packet(nibble: int, rs: int) -> int:
        return ((nibble << 4) | (int(rs) << 2)) & 0xFF

    def send_nibble(self, nibble: int, rs: int) -> None:
        packet = self._packet(nibble, rs)
        self.expander.set_output(packet)
        self.expander.set_output(packet | _ENABLE)
        self.delay(1e-6)
        self.expander.set_output(packet)

    def send_byte(self, byte: int, rs: int) -> None:
        high = self._packet(byte >> 4, rs)
        low = self._packet(byte & 0x0F, rs)
        self.expander.set_output(high)
        self.expander.set_output(high | _ENABLE)
        self.delay(1e-6)
        self.expander.set_output(low)
        self.delay(1e-6)
        self.expander.set_output(low | _ENABLE)

    def setup(self) -> None:
        """Run the power-on sequence that puts the display in 4-bit mode."""
        self.expander.setup()
        self.expander.set_output(0)
        self.delay(0.040)
        self.send_nibble(0x3, INSTRUCTION)
        self.delay(0.005)
        self.send_nibble(0x3, INSTRUCTION)
        self.delay(100e-6)
        self.send_nibble(0x3, INSTRUCTION)
        self.delay(0.010)
        self.send_nibble(0x2, INSTRUCTION)
        for command in (0x2C, 0x0C, 0x06, 0x0C):
            self.send_byte(command, INSTRUCTION)
            self.delay(0.005)
        self.return_home()
        self.delay(0.005)
        self.clear_display()
        self.delay(0.005)

    def return_home(self) -> None:
        self.send_byte(0x02, INSTRUCTION)

    def clear_display(self) -> None:
        self.send_byte(0x01, INSTRUCTION)

    def set_addr(self, row: int, column: int) -> None:
        self.send_byte((0x80 | (column + row * _ROW_STRIDE)) & 0xFF, INSTRUCTION)

    def write_char(self, character: int | str) -> None:
        code = ord(character) if isinstance(character, str) else character
        if not 0 <= code <= 0xFF:
            raise ValueError(f"character {character!r} does not fit in a byte")
        self.send_byte(code, DATA)

    def write_string(self, text: str | bytes, length: int, row: int) -> None:
        """Write the first ``length`` characters of ``text`` at the start of ``row``."""
        if length > len(text):
            raise ValueError(f"text has fewer than {length} characters")
        self.set_addr(row, 0)
        self.delay(60e-6)
        for character in text[:length]:
            self.write_char(character)
            self.delay(60e-6)

    def set_contrast(self, contrast: int) -> None:
        self.digipot.set_wiper(contrast)