import pytest

from guitartuner.tables import (
    FREQUENCY_TABLE,
    NOTE_TABLE,
    TABLE_SIZE,
    frequency_label,
    note_label,
)


def test_tables_cover_every_period():
    assert TABLE_SIZE == 128
    assert [frequency_label(p) for p in range(TABLE_SIZE)] == list(FREQUENCY_TABLE)
    assert [note_label(p) for p in range(TABLE_SIZE)] == list(NOTE_TABLE)
    with pytest.raises(IndexError):
        frequency_label(TABLE_SIZE)
    with pytest.raises(IndexError):
        note_label(TABLE_SIZE)


def test_known_entries():
    assert frequency_label(0) == "0.00    "
    assert frequency_label(1) == "8928.57 "
    assert frequency_label(127) == "70.30   "
    assert note_label(0) == "  "
    assert note_label(5) == "A "
    assert note_label(127) == "C#"


def test_entries_have_fixed_width():
    assert all(len(frequency_label(p)) == 8 for p in range(TABLE_SIZE))
    assert all(len(note_label(p)) == 2 for p in range(TABLE_SIZE))


def test_frequencies_fall_as_period_grows():
    values = [float(frequency_label(p)) for p in range(1, TABLE_SIZE)]
    assert values == sorted(values, reverse=True)


def test_frequency_times_period_is_sample_rate():
    base = float(frequency_label(1))
    for period in range(1, TABLE_SIZE):
        assert float(frequency_label(period)) * period == pytest.approx(base, abs=period * 0.01)


@pytest.mark.parametrize("period", [-1, 128, 1000])
def test_out_of_range_period(period):
    with pytest.raises(IndexError):
        frequency_label(period)
    with pytest.raises(IndexError):
        note_label(period)