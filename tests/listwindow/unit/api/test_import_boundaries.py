from __future__ import annotations

import ast
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parents[4]
PACKAGE_ROOT = REPO_ROOT / "listwindow"


def _iter_python_files(base: Path) -> list[Path]:
    return [path for path in base.rglob("*.py") if "__pycache__" not in path.parts]


def _collect_import_targets(path: Path, *, top_level_only: bool) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    nodes = tree.body if top_level_only else list(ast.walk(tree))
    targets: list[str] = []
    for node in nodes:
        if isinstance(node, ast.Import):
            for alias in node.names:
                targets.append(alias.name)
        elif isinstance(node, ast.ImportFrom) and node.module is not None:
            targets.append(node.module)
    return targets


def test_api_has_no_top_level_runtime_or_qt_imports() -> None:
    violations: list[str] = []
    for path in _iter_python_files(PACKAGE_ROOT / "api"):
        for target in _collect_import_targets(path, top_level_only=True):
            if target.startswith(("listwindow.runtime", "listwindow.qt", "PyQt6")):
                violations.append(f"{path.relative_to(REPO_ROOT)} -> {target}")
    assert not violations, "listwindow.api top-level imports must stay contract-only:\n" + "\n".join(
        violations
    )


def test_core_never_imports_qt() -> None:
    violations: list[str] = []
    for base in (PACKAGE_ROOT / "api", PACKAGE_ROOT / "runtime"):
        for path in _iter_python_files(base):
            for target in _collect_import_targets(path, top_level_only=False):
                if target.startswith(("listwindow.qt", "PyQt6")):
                    violations.append(f"{path.relative_to(REPO_ROOT)} -> {target}")
    assert not violations, "Core engine must not depend on Qt:\n" + "\n".join(violations)


def test_no_wildcard_imports() -> None:
    violations: list[str] = []
    for path in _iter_python_files(PACKAGE_ROOT):
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        for node in ast.walk(tree):
            if isinstance(node, ast.ImportFrom) and any(alias.name == "*" for alias in node.names):
                violations.append(f"{path.relative_to(REPO_ROOT)} -> {node.module}")
    assert not violations, "Wildcard imports are not allowed:\n" + "\n".join(violations)
