import pytest

from guitartuner.lcd import Chip, Digipot, Expander, Lcd, RecordingBus


def outputs(bus):
    return [data[2] for chip, data in bus.writes if chip is Chip.EXPANDER and data[1] == 0x15]


def decode(values):
    """Turn 4-output byte transfers back into (rs, byte) pairs."""
    result = []
    for start in range(0, len(values), 4):
        chunk = values[start:start + 4]
        result.append(((chunk[0] >> 2) & 1, (chunk[0] & 0xF0) | (chunk[2] >> 4)))
    return result


def make_lcd():
    bus = RecordingBus()
    delays = []
    return bus, delays, Lcd(bus, delay=delays.append)


def test_expander_wire_bytes():
    bus = RecordingBus()
    expander = Expander(bus)
    expander.setup()
    expander.set_output(0x55)
    assert bus.writes == [
        (Chip.EXPANDER, b"\x40\x01\x00"),
        (Chip.EXPANDER, b"\x40\x15\x55"),
    ]


def test_digipot_wire_bytes():
    bus = RecordingBus()
    Digipot(bus).set_wiper(10)
    assert bus.writes == [(Chip.DIGIPOT, b"\x00\x0a")]


def test_set_contrast_uses_digipot():
    bus, _, lcd = make_lcd()
    lcd.set_contrast(42)
    assert bus.writes == [(Chip.DIGIPOT, bytes([0, 42]))]


def test_send_byte_strobes_enable():
    bus, _, lcd = make_lcd()
    lcd.send_byte(0x41, 1)
    assert outputs(bus) == [0x44, 0x4C, 0x14, 0x1C]


def test_send_nibble_pulses_enable_and_drops_it():
    bus, delays, lcd = make_lcd()
    lcd.send_nibble(0x3, 0)
    values = outputs(bus)
    assert len(values) == 3
    assert values[0] == values[2]
    assert values[1] == values[0] | 0x08
    assert delays == [1e-6]


def test_write_string_round_trip():
    bus, delays, lcd = make_lcd()
    lcd.write_string("Hello", 5, 0)
    decoded = decode(outputs(bus))
    assert decoded[0] == (0, 0x80)
    assert bytes(b for _, b in decoded[1:]).decode() == "Hello"
    assert all(rs == 1 for rs, _ in decoded[1:])
    assert delays.count(60e-6) == 6


def test_write_string_truncates_to_length():
    bus, _, lcd = make_lcd()
    lcd.write_string("abcdef", 3, 0)
    assert bytes(b for _, b in decode(outputs(bus))[1:]) == b"abc"


def test_write_string_second_row_address():
    bus, _, lcd = make_lcd()
    lcd.write_string("x", 1, 1)
    assert decode(outputs(bus))[0] == (0, 0x80 | 40)


def test_write_string_too_short_text():
    _, _, lcd = make_lcd()
    with pytest.raises(ValueError):
        lcd.write_string("ab", 3, 0)


def test_write_char_rejects_wide_character():
    _, _, lcd = make_lcd()
    with pytest.raises(ValueError):
        lcd.write_char("\u20ac")


def test_home_and_clear_commands():
    bus, _, lcd = make_lcd()
    lcd.return_home()
    lcd.clear_display()
    assert decode(outputs(bus)) == [(0, 0x02), (0, 0x01)]


def test_setup_sequence():
    bus, delays, lcd = make_lcd()
    lcd.setup()
    assert bus.writes[0] == (Chip.EXPANDER, b"\x40\x01\x00")
    values = outputs(bus)
    assert values[0] == 0
    # four nibbles of three transfers each, then six commands of four
    nibbles = [values[1 + 3 * i] >> 4 for i in range(4)]
    assert nibbles == [3, 3, 3, 2]
    commands = [b for _, b in decode(values[13:])]
    assert commands == [0x2C, 0x0C, 0x06, 0x0C, 0x02, 0x01]
    assert delays[0] == 0.040