"""Package logger. Every module logs through ``hrledger`` or a child of it."""
import logging
import sys
import uuid
from hrledger.config import settings

_RUN_ID = uuid.uuid4().hex[:8]


def get_run_id() -> str:
    """Short id shared by every log line of this process."""
    return _RUN_ID


def _build_logger() -> logging.Logger:
    log = logging.getLogger("hrledger")
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            f"%(asctime)s [{_RUN_ID}] %(levelname)s %(name)s: %(message)s"
        ))
        log.addHandler(handler)
    log.setLevel(settings.LOG_LEVEL.upper())
    return log


logger = _build_logger()
