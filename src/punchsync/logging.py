"""Package logger.

Every process gets a short run id so log lines from one CLI invocation or one
API worker can be told apart.
"""
import logging
import sys
import uuid

from punchsync.config import settings

_RUN_ID = uuid.uuid4().hex[:8]


def get_run_id() -> str:
    return _RUN_ID


def _build_logger() -> logging.Logger:
    log = logging.getLogger("punchsync")
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            f"%(asctime)s [%(levelname)s] [{_RUN_ID}] %(name)s: %(message)s"
        ))
        log.addHandler(handler)
    log.setLevel(settings.LOG_LEVEL.upper())
    return log


logger = _build_logger()
