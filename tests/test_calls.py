from ft8rx.callsign import HASH_END, decode_callsign
from ft8rx.calls import CallExtractor


def put(bits, offset, width, value):
    for i in range(width):
        bits[offset + i] = (value >> (width - 1 - i)) & 1


def type1(c28b, g15, i3=1, c28a=2):
    bits = [0] * 77
    put(bits, 0, 28, c28a)
    put(bits, 29, 28, c28b)
    put(bits, 59, 15, g15)
    put(bits, 74, 3, i3)
    return bits


def grid_value(grid):
    a, b = ord(grid[0]) - 65, ord(grid[1]) - 65
    return (a * 18 + b) * 100 + int(grid[2]) * 10 + int(grid[3])


CALL = HASH_END + 424242


def test_call_with_grid():
    result = CallExtractor().extract_call(type1(CALL, grid_value("JO22")))
    assert result == [decode_callsign(CALL), "JO22"]


def test_same_call_reported_once():
    extractor = CallExtractor()
    first = extractor.extract_call(type1(CALL, grid_value("JO22")))
    second = extractor.extract_call(type1(CALL, grid_value("JO22"), i3=2))
    assert len(first) == 2
    assert second == []


def test_report_value_gives_no_grid():
    result = CallExtractor().extract_call(type1(CALL, 40))
    assert result == [decode_callsign(CALL)]


def test_zero_grid_gives_call_only():
    result = CallExtractor().extract_call(type1(CALL, 0))
    assert result == [decode_callsign(CALL)]


def test_grid_in_field_r_is_skipped():
    result = CallExtractor().extract_call(type1(CALL, grid_value("RR73")))
    assert result == [decode_callsign(CALL)]


def test_special_token_is_not_a_call():
    assert CallExtractor().extract_call(type1(2, grid_value("JO22"))) == []
    assert CallExtractor().extract_call(type1(HASH_END, 0)) == []


def test_type3_reads_second_call():
    bits = [0] * 77
    put(bits, 30, 28, CALL)
    put(bits, 74, 3, 3)
    extractor = CallExtractor()
    assert extractor.extract_call(bits) == [decode_callsign(CALL)]
    assert extractor.extract_call(bits) == []


def test_other_types_yield_nothing():
    for i3 in (0, 4, 5, 6, 7):
        bits = type1(CALL, grid_value("JO22"), i3=i3)
        assert CallExtractor().extract_call(bits) == []


def test_extractors_do_not_share_state():
    bits = type1(CALL, 0)
    assert CallExtractor().extract_call(bits) == CallExtractor().extract_call(bits)
    assert CallExtractor().extract_call(bits)[0] == decode_callsign(CALL)