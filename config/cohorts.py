"""Cohort configuration source shared by every environment.

Age bounds are completed years, inclusive. The administrative profile spans
the whole range for access control only.
"""

import os

COHORT_PROFILES = [
    {
        "id": "r21-kids",
        "name": "R21 Kids",
        "min_age": 1,
        "max_age": 9,
        "member_label": "niño",
        "leader_label": "Maestra Dominical",
    },
    {
        "id": "estacion-r21",
        "name": "Estación R21",
        "min_age": 10,
        "max_age": 13,
        "member_label": "preadolescente",
        "leader_label": "Líder Preadolescente",
    },
    {
        "id": "zona-r21",
        "name": "Zona R21",
        "min_age": 14,
        "max_age": 17,
        "member_label": "adolescente",
        "leader_label": "Líder Adolescente",
    },
    {
        "id": "renovacion-21",
        "name": "Renovación 21",
        "min_age": 18,
        "max_age": 99,
        "member_label": "joven",
        "leader_label": "Líder Juvenil",
        "show_pfi": True,
    },
    {
        "id": "admin",
        "name": "Administrador",
        "min_age": 0,
        "max_age": 99,
        "member_label": "usuario",
        "leader_label": "Administrador",
        "is_admin": True,
        "show_pfi": True,
    },
]


def secret_hashes_from_env() -> dict:
    """COHORT_SECRET_HASH_<ID> env vars (id upper-cased, '-' as '_') -> werkzeug hash."""
    out = {}
    for profile in COHORT_PROFILES:
        var = "COHORT_SECRET_HASH_" + profile["id"].upper().replace("-", "_")
        value = os.getenv(var)
        if value:
            out[profile["id"]] = value
    return out
