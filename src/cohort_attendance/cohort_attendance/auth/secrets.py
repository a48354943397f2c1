from __future__ import annotations

import logging
from typing import Mapping

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty

logger = logging.getLogger(__name__)


def hash_secret(secret: str) -> str:
    """Hash a cohort secret for configuration (never store the plaintext)."""
    return generate_password_hash(require_non_empty(secret, "secret"))


class CohortSecretVerifier:
    """``verify(cohort_id, secret)`` predicate over per-cohort password hashes."""

    def __init__(self, secret_hashes: Mapping[str, str]):
        self._hashes = {str(k): str(v) for k, v in secret_hashes.items() if v}

    def verify(self, cohort_id: str, secret: str) -> bool:
        secret_hash = self._hashes.get(cohort_id)
        if not secret_hash or not secret:
            return False

        try:
            return check_password_hash(secret_hash, secret)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            logger.warning("Unusable secret hash configured for cohort %s", cohort_id)
            return False

    __call__ = verify

    def has_secret(self, cohort_id: str) -> bool:
        return cohort_id in self._hashes
