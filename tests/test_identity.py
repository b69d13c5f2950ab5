import pytest

from ft8rx.identity import IncompleteIdentityError, save_identity
from ft8rx.settings import Settings


def test_identity_stored(tmp_path):
    s = Settings(tmp_path / "id.ini")
    save_identity(s, "N0CALL", "JO21fx", "dipole")
    assert s.get("ft8Settings", "homeCall", "") == "N0CALL"
    assert s.get("ft8Settings", "homeGrid", "") == "JO21fx"
    assert s.get("ft8Settings", "antenna", "") == "dipole"


def test_identity_persists(tmp_path):
    path = tmp_path / "id.ini"
    s = Settings(path)
    save_identity(s, "N0CALL", "JO21fx", "dipole")
    s.sync()
    assert Settings(path).get("ft8Settings", "homeCall", "") == "N0CALL"


@pytest.mark.parametrize(
    "call, grid, antenna",
    [("", "JO21", "loop"), ("N0CALL", "", "loop"), ("N0CALL", "JO21", "")],
)
def test_incomplete_rejected_and_nothing_saved(tmp_path, call, grid, antenna):
    s = Settings(tmp_path / "id.ini")
    with pytest.raises(IncompleteIdentityError):
        save_identity(s, call, grid, antenna)
    assert s.get("ft8Settings", "homeCall", "unset") == "unset"


def test_error_is_value_error(tmp_path):
    s = Settings(tmp_path / "id.ini")
    with pytest.raises(ValueError):
        save_identity(s, "", "", "")