from __future__ import annotations

from typing import Any, Iterable, Mapping

from ..core.exceptions import ConfigurationError
from .model import CohortProfile
from .registry import CohortRegistry

REQUIRED_KEYS = ("id", "name", "min_age", "max_age", "member_label", "leader_label")


def _as_profile(raw: Mapping[str, Any]) -> CohortProfile:
    missing = [k for k in REQUIRED_KEYS if k not in raw]
    if missing:
        raise ConfigurationError(f"Cohort profile {raw.get('id', '?')} missing keys: {', '.join(missing)}")

    try:
        min_age = int(raw["min_age"])
        max_age = int(raw["max_age"])
    except (TypeError, ValueError):
        raise ConfigurationError(f"Cohort profile {raw['id']} has non-integer age bounds")

    return CohortProfile(
        cohort_id=str(raw["id"]),
        name=str(raw["name"]),
        min_age=min_age,
        max_age=max_age,
        member_label=str(raw["member_label"]),
        leader_label=str(raw["leader_label"]),
        is_admin=bool(raw.get("is_admin", False)),
        show_pfi=bool(raw.get("show_pfi", False)),
    )


def build_profiles(raw_profiles: Iterable[Mapping[str, Any]]) -> list[CohortProfile]:
    return [_as_profile(r) for r in raw_profiles]


def load_registry(raw_profiles: Iterable[Mapping[str, Any]], *, allow_gaps: bool = False) -> CohortRegistry:
    """Build the registry from the configuration source (fails fast on bad config)."""
    return CohortRegistry(build_profiles(raw_profiles), allow_gaps=allow_gaps)
