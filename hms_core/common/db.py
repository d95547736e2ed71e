# hms_core/common/db.py
from __future__ import annotations

import logging
from contextlib import contextmanager

from django.db import IntegrityError, transaction

from hms_core.common.api.exceptions import ConflictError

logger = logging.getLogger(__name__)


@contextmanager
def conflict_on_integrity(message: str):
    """
    Runs the block inside a savepoint and turns a unique-constraint violation
    into a 409 ConflictError. The outer transaction stays usable.
    """
    try:
        with transaction.atomic():
            yield
    except IntegrityError as exc:
        logger.info("Integrity violation translated to conflict: %s", exc)
        raise ConflictError(message) from exc
