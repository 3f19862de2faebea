"""Architecture guard tests."""

from __future__ import annotations

import ast
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[2] / "itinerary_analyzer"

FORBIDDEN_IMPORTS = {
    ("domain", "analysis"): "domain layer must not import analysis layer",
    ("domain", "checkers"): "domain layer must not import checkers",
    ("domain", "infrastructure"): "domain layer must not import infrastructure layer",
    ("domain", "api"): "domain layer must not import api layer",
    ("checkers", "analysis"): "checkers must not import the analysis pipeline",
    ("checkers", "infrastructure"): "checkers must stay free of I/O concerns",
    ("checkers", "api"): "checkers must not import api layer",
    ("analysis", "api"): "analysis layer must not import api layer",
}


def _layer(module_name: str) -> str | None:
    parts = module_name.split(".")
    if len(parts) < 2 or parts[0] != "itinerary_analyzer":
        return None
    return parts[1]


def _imports(path: Path) -> list[tuple[str, int]]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    found: list[tuple[str, int]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            found.extend((alias.name, node.lineno) for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            found.append((node.module, node.lineno))
    return found


def test_import_boundaries_guard():
    violations: list[str] = []
    for path in sorted(PACKAGE_ROOT.rglob("*.py")):
        source_layer = path.relative_to(PACKAGE_ROOT).parts[0]
        for target, lineno in _imports(path):
            reason = FORBIDDEN_IMPORTS.get((source_layer, _layer(target) or ""))
            if reason:
                violations.append(f"{path.name}:{lineno} imports {target} ({reason})")
    assert violations == [], "Import boundary violations:\n" + "\n".join(violations)
