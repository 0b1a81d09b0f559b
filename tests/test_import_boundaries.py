"""
Import boundary guards.

- UI files must never import sqlmodel, sqlalchemy or any punchsync DB module;
  they talk to the backend through ``punchsync.ui.api_client`` only.
- Service files must not import fastapi.
- The timesheet core must stay pure: no DB, HTTP or web framework imports.
"""

import ast
from collections.abc import Callable
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

REPO_ROOT = Path(__file__).parent.parent
PACKAGE_ROOT = REPO_ROOT / "src" / "punchsync"

UI_BANNED_MODULES = {
    "sqlmodel",
    "sqlalchemy",
}
UI_BANNED_PREFIXES = (
    "punchsync.models",
    "punchsync.db",
    "punchsync.infra.db",
    "punchsync.services",
)

CORE_BANNED_PREFIXES = (
    "sqlmodel",
    "sqlalchemy",
    "httpx",
    "fastapi",
    "streamlit",
    "punchsync.infra",
    "punchsync.services",
    "punchsync.config",
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _file_imports_any(path: Path, is_banned: Callable[[str], bool]) -> bool:
    """Parse *path* with AST and return True if any import matches *is_banned*."""
    source = path.read_text(encoding="utf-8")
    try:
        tree = ast.parse(source, filename=str(path))
    except SyntaxError:
        return True

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if is_banned(alias.name):
                    return True
        elif isinstance(node, ast.ImportFrom):
            if is_banned(node.module or ""):
                return True

    return False


def _violations(root: Path, is_banned: Callable[[str], bool]) -> list[str]:
    return [
        py_file.relative_to(REPO_ROOT).as_posix()
        for py_file in sorted(root.rglob("*.py"))
        if _file_imports_any(py_file, is_banned)
    ]


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


def test_ui_import_boundaries() -> None:
    def is_banned(module: str) -> bool:
        return module in UI_BANNED_MODULES or module.startswith(UI_BANNED_PREFIXES)

    violations = _violations(PACKAGE_ROOT / "ui", is_banned)
    assert not violations, (
        "UI files must use the API client instead of DB imports:\n"
        + "\n".join(f"  {v}" for v in violations)
    )


def test_service_import_boundaries() -> None:
    """Service files must not import from fastapi."""
    violations = _violations(PACKAGE_ROOT / "services", lambda m: m.startswith("fastapi"))
    assert not violations, (
        "Service files must not import fastapi:\n"
        + "\n".join(f"  {v}" for v in violations)
    )


def test_timesheet_core_is_pure() -> None:
    violations = _violations(PACKAGE_ROOT / "timesheet", lambda m: m.startswith(CORE_BANNED_PREFIXES))
    assert not violations, (
        "The timesheet core must not depend on I/O layers:\n"
        + "\n".join(f"  {v}" for v in violations)
    )
