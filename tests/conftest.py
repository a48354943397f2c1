from __future__ import annotations

from datetime import date

import pytest

from src.cohort_attendance.cohort_attendance.cohorts.model import CohortProfile
from src.cohort_attendance.cohort_attendance.cohorts.registry import CohortRegistry

PROFILES = [
    CohortProfile("r21-kids", "R21 Kids", 1, 9, "niño", "Maestra Dominical"),
    CohortProfile("estacion-r21", "Estación R21", 10, 13, "preadolescente", "Líder Preadolescente"),
    CohortProfile("zona-r21", "Zona R21", 14, 17, "adolescente", "Líder Adolescente"),
    CohortProfile("renovacion-21", "Renovación 21", 18, 99, "joven", "Líder Juvenil", show_pfi=True),
    CohortProfile("admin", "Administrador", 0, 99, "usuario", "Administrador", is_admin=True, show_pfi=True),
]


@pytest.fixture
def registry() -> CohortRegistry:
    return CohortRegistry(PROFILES)


@pytest.fixture
def today() -> date:
    return date(2026, 3, 15)
