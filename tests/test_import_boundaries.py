"""Import boundary and layering regression tests."""

from __future__ import annotations

import ast
from pathlib import Path

import inline_resources

PACKAGE_DIR = Path(inline_resources.__file__).parent


def _imported_modules(py_file: Path) -> list[str]:
    tree = ast.parse(py_file.read_text(), filename=str(py_file))
    names: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            names.append(node.module or "")
    return names


def test_transform_layer_does_not_import_runner_or_cli():
    offenders: list[tuple[str, str]] = []
    for py_file in sorted((PACKAGE_DIR / "transform").glob("*.py")):
        for module_name in _imported_modules(py_file):
            if module_name.startswith(("inline_resources.runner", "inline_resources.cli")):
                offenders.append((py_file.name, module_name))

    assert offenders == [], f"transform imported orchestration modules: {offenders}"


def test_style_urls_are_never_evaluated():
    offenders = []
    for py_file in sorted(PACKAGE_DIR.rglob("*.py")):
        if "tests" in py_file.relative_to(PACKAGE_DIR).parts:
            continue
        tree = ast.parse(py_file.read_text(), filename=str(py_file))
        for node in ast.walk(tree):
            if (
                isinstance(node, ast.Call)
                and isinstance(node.func, ast.Name)
                and node.func.id in {"eval", "exec"}
            ):
                offenders.append(py_file.name)

    assert offenders == []
