from __future__ import annotations

from enum import Enum


class PresenceFilter(str, Enum):
    """Which entries of a day sheet to keep."""

    ALL = "all"
    PRESENT = "present"
    ABSENT = "absent"


class PfiStage(str, Enum):
    """Stages of the formation route tracked for adult cohorts."""

    FIRST = "FIRST"
    SECOND = "SECOND"
    THIRD = "THIRD"
