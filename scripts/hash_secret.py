"""Print the werkzeug hash for a cohort transition secret.

Usage: python scripts/hash_secret.py <cohort-id>
The hash goes into COHORT_SECRET_HASH_<ID> (e.g. COHORT_SECRET_HASH_ZONA_R21).
"""

from __future__ import annotations

import getpass
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.cohort_attendance.cohort_attendance.auth.secrets import hash_secret


def main() -> None:
    if len(sys.argv) != 2:
        sys.exit(__doc__)

    cohort_id = sys.argv[1]
    secret = getpass.getpass(f"Secret for {cohort_id}: ")
    var = "COHORT_SECRET_HASH_" + cohort_id.upper().replace("-", "_")
    sys.stdout.write(f"{var}={hash_secret(secret)}\n")


if __name__ == "__main__":
    main()
