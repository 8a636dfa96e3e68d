"""
Import boundary guard.

Rules:
  - src/hrledger/domain/ is the pure core: no sqlmodel, sqlalchemy, fastapi,
    httpx, settings or any hrledger infra/service/api module.
  - src/hrledger/services/ must not import fastapi.
"""

import ast
from collections.abc import Callable
from pathlib import Path

REPO_ROOT = Path(__file__).parent.parent
PKG_ROOT = REPO_ROOT / "src" / "hrledger"

DOMAIN_BANNED_MODULES = {"sqlmodel", "sqlalchemy", "fastapi", "httpx", "pydantic_settings"}
DOMAIN_BANNED_PREFIXES = (
    "hrledger.models",
    "hrledger.db",
    "hrledger.infra",
    "hrledger.services",
    "hrledger.api",
    "hrledger.config",
)


def _is_banned_for_domain(module_name: str) -> bool:
    if module_name.split(".")[0] in DOMAIN_BANNED_MODULES:
        return True
    return any(module_name.startswith(prefix) for prefix in DOMAIN_BANNED_PREFIXES)


def _file_imports_any(path: Path, is_banned: Callable[[str], bool]) -> bool:
    """Parse *path* with AST and return True if any import matches *is_banned*."""
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            if any(is_banned(alias.name) for alias in node.names):
                return True
        elif isinstance(node, ast.ImportFrom):
            if is_banned(node.module or ""):
                return True
    return False


def _violations(root: Path, is_banned: Callable[[str], bool]) -> list[str]:
    return [
        p.relative_to(REPO_ROOT).as_posix()
        for p in sorted(root.rglob("*.py"))
        if _file_imports_any(p, is_banned)
    ]


def test_domain_import_boundaries() -> None:
    violations = _violations(PKG_ROOT / "domain", _is_banned_for_domain)
    assert not violations, (
        "Domain files must stay free of persistence, HTTP and settings imports:\n"
        + "\n".join(f"  {v}" for v in violations)
    )


def test_service_import_boundaries() -> None:
    """Service files must not import from fastapi."""
    _is_fastapi = lambda m: m.startswith("fastapi")  # noqa: E731
    violations = _violations(PKG_ROOT / "services", _is_fastapi)
    assert not violations, (
        "Service files must not import fastapi:\n"
        + "\n".join(f"  {v}" for v in violations)
    )
