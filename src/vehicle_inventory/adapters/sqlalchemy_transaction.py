from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


@contextmanager
def rollback_on_error(session: Session) -> Iterator[None]:
    """Roll the session back when a multi-row write fails, then re-raise.

    Nothing written inside the block stays visible once the exception leaves it.
    """
    try:
        yield
    except Exception as exc:
        logger.warning(
            "Rolling back failed write",
            extra={"error_type": type(exc).__name__, "error_message": str(exc)},
        )
        session.rollback()
        raise
