"""Engine used by the unit of work, with SQLite connection pragmas.

The CLI and the API may both write preferences to the same file, so file
databases run in WAL mode with a busy timeout. In-memory databases get only
the timeout.
"""
from sqlalchemy import event
from punchsync.db import engine
import punchsync.models  # noqa: F401   # registers table mappers

BUSY_TIMEOUT_MS = 5000


def sqlite_pragmas(file_backed: bool) -> list[str]:
    pragmas = [f"PRAGMA busy_timeout={BUSY_TIMEOUT_MS}"]
    if file_backed:
        pragmas += ["PRAGMA journal_mode=WAL", "PRAGMA synchronous=NORMAL"]
    return pragmas


def register_sqlite_pragmas(target) -> None:
    file_backed = target.url.database not in (None, "", ":memory:")
    pragmas = sqlite_pragmas(file_backed)

    def _on_connect(dbapi_conn, _):
        cur = dbapi_conn.cursor()
        for statement in pragmas:
            cur.execute(statement)
        cur.close()

    event.listen(target, "connect", _on_connect)


if engine.dialect.name == "sqlite":
    register_sqlite_pragmas(engine)

__all__ = ["engine", "register_sqlite_pragmas", "sqlite_pragmas"]
