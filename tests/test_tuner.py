import pytest

from ft8rx.tuner import Tuner, frequency_to_string


def test_frequency_to_string_digits():
    assert frequency_to_string(14070000) == "14070000"


def test_frequency_to_string_single_digit():
    assert frequency_to_string(7) == "7"


def test_frequency_to_string_negative_rejected():
    with pytest.raises(ValueError):
        frequency_to_string(-5)


def test_invalid_rate_rejected():
    with pytest.raises(ValueError):
        Tuner(14_000_000, 0)


def test_initial_state():
    t = Tuner(14_074_000, 96000)
    assert t.vfo == 14_074_000
    assert t.offset == 0
    assert t.filter_band == (t.low_f, t.high_f)
    assert t.low_f == -t.high_f
    assert t.display == "14074000"


def test_small_adjust_moves_offset_only():
    start = 14_000_000
    t = Tuner(start, 96000)
    t.adjust_frequency_hz(1500)
    assert t.vfo == start
    assert t.offset == 1500
    assert t.filter_band == (1500 + t.low_f, 1500 + t.high_f)
    assert t.display == frequency_to_string(start + 1500)


def test_adjust_inside_scope_stays_on_vfo():
    start = 14_000_000
    t = Tuner(start, 96000)
    t.adjust_frequency_hz(40000)
    assert t.vfo == start
    assert t.tuned_frequency == start + 40000


def test_adjust_near_edge_retunes_vfo():
    start = 14_000_000
    t = Tuner(start, 96000)
    t.adjust_frequency_hz(41000)
    assert t.vfo == start + 41000
    assert t.selected_frequency == start + 41000
    assert t.center_frequency == t.vfo


def test_adjust_negative_edge_retunes_vfo():
    start = 14_000_000
    t = Tuner(start, 96000)
    t.adjust_frequency_hz(-41000)
    assert t.vfo == start - 41000


def test_adjust_khz_equals_hz_times_thousand():
    a = Tuner(7_000_000, 96000)
    b = Tuner(7_000_000, 96000)
    a.adjust_frequency_khz(2)
    b.adjust_frequency_hz(2000)
    assert a.offset == b.offset
    assert a.vfo == b.vfo


def test_set_in_middle_moves_vfo_to_selection():
    start = 10_000_000
    t = Tuner(start, 96000)
    t.adjust_frequency_hz(2500)
    t.set_in_middle()
    assert t.vfo == start + 2500
    assert t.display == frequency_to_string(start + 2500)


def test_set_spectrum_width_symmetric():
    t = Tuner()
    t.set_spectrum_width(2000)
    assert t.high_f - t.low_f == 2000
    assert t.low_f == -t.high_f


def test_set_frequency_updates_display():
    t = Tuner()
    t.set_frequency(3_573_000)
    assert t.display == "3573000"
    assert t.center_frequency == t.selected_frequency == 3_573_000