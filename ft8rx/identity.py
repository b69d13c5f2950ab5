"""Storing the station's own identity for spot reporting."""

from __future__ import annotations

from .settings import Settings

GROUP = "ft8Settings"


class IncompleteIdentityError(ValueError):
    """Raised when callsign, grid or antenna is left empty."""


def save_identity(settings: Settings, callsign: str, grid: str,
                  antenna: str) -> None:
    """Store callsign, home grid and antenna; all three must be filled in."""
    missing = [name for name, value in
               (("callsign", callsign), ("grid", grid), ("antenna", antenna))
               if not value]
    if missing:
        raise IncompleteIdentityError(
            "the form is not filled in completely: " + ", ".join(missing))
    settings.set(GROUP, "homeCall", callsign)
    settings.set(GROUP, "homeGrid", grid)
    settings.set(GROUP, "antenna", antenna)