"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ADMIN_COHORT_ID = "admin"

DEFAULT_UPCOMING_BIRTHDAY_DAYS = 7
PERCENT_SCALE = 100

# Formation route (PFI) levels grouped by stage.
PFI_STAGE_LEVELS = {
    "FIRST": ("Consolidado", "Discipulado 1", "Discipulado 2"),
    "SECOND": ("Escuela de Liderazgo", "Escuela de Felipes", "Escuela de Maestros"),
    "THIRD": ("Seminario Bíblico", "No Aplica"),
}
