from ft8rx.hashes import MISSING, HashTable


def test_lookup_of_unknown_key_gives_placeholder():
    table = HashTable(None)
    assert table.lookup(0x123) == "<....>"
    assert MISSING == "<....>"


def test_add_and_lookup():
    table = HashTable(None)
    table.add_hash(0xABC, "K1ABC")
    assert table.lookup(0xABC) == "K1ABC"
    assert 0xABC in table


def test_existing_key_is_not_overwritten():
    table = HashTable(None)
    table.add_hash(7, "PA0JAN")
    table.add_hash(7, "W9XYZ")
    assert table.lookup(7) == "PA0JAN"
    assert len(table) == 1


def test_save_writes_source_format(tmp_path):
    path = tmp_path / "hashes.txt"
    table = HashTable(path)
    table.add_hash(0xABC, "K1ABC")
    table.save()
    assert path.read_text(encoding="latin-1") == "<ABC:K1ABC>\n"


def test_round_trip_through_file(tmp_path):
    path = tmp_path / "hashes.txt"
    with HashTable(path) as table:
        table.add_hash(0x1F, "PJ4/KA1ABC")
        table.add_hash(0xFFF, "W9XYZ")
    again = HashTable(path)
    assert dict(again) == {0x1F: "PJ4/KA1ABC", 0xFFF: "W9XYZ"}


def test_reads_hand_written_file_and_skips_garbage(tmp_path):
    path = tmp_path / "hashes.txt"
    path.write_text("<A:G4ABC>\nnot a line\n<ZZ:bad>\n<A:OTHER>\n", encoding="latin-1")
    table = HashTable(path)
    assert table.lookup(0xA) == "G4ABC"
    assert len(table) == 1


def test_missing_file_gives_empty_table(tmp_path):
    table = HashTable(tmp_path / "nothing-here.txt")
    assert len(table) == 0
    assert table.lookup(1) == MISSING