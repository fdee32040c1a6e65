from __future__ import annotations

import ast
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]


def _python_files(root: Path):
    for path in root.rglob("*.py"):
        if "dist" in path.parts:
            continue
        yield path


def _imported_modules(path: Path):
    tree = ast.parse(path.read_text(encoding="utf-8", errors="ignore"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name
        elif isinstance(node, ast.ImportFrom):
            yield node.module or ""


def test_core_layer_does_not_import_infra_layer():
    violations: list[tuple[str, str]] = []
    for path in _python_files(ROOT / "core"):
        for name in _imported_modules(path):
            if name == "infra" or name.startswith("infra."):
                violations.append((str(path.relative_to(ROOT)), name))

    assert not violations, f"Core layer imports infra layer: {violations}"


def test_read_model_packages_stay_free_of_io_libraries():
    # financials and timeline are pure; only services and reporting touch storage or files
    banned = ("sqlalchemy", "matplotlib", "openpyxl", "reportlab")
    violations: list[tuple[str, str]] = []
    for package in ("financials", "timeline"):
        for path in _python_files(ROOT / "core" / "services" / package):
            for name in _imported_modules(path):
                if name.split(".")[0] in banned:
                    violations.append((str(path.relative_to(ROOT)), name))

    assert not violations, f"Read-model modules import I/O libraries: {violations}"
