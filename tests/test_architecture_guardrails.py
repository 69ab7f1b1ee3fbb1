from __future__ import annotations

import ast
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]

# Modules that must stay free of persistence and I/O so they can run anywhere.
PURE_MODULES = [
    ROOT / "core" / "services" / "auth" / "policy.py",
    ROOT / "core" / "services" / "importing" / "columns.py",
    ROOT / "core" / "services" / "importing" / "csv_parser.py",
    ROOT / "core" / "services" / "importing" / "template.py",
    ROOT / "core" / "services" / "importing" / "validator.py",
    ROOT / "core" / "services" / "common" / "durations.py",
]


def _python_files(root: Path):
    for path in root.rglob("*.py"):
        if "dist" in path.parts:
            continue
        yield path


def _imported_modules(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8", errors="ignore"))
    names: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            names.append(node.module or "")
    return names


def _matches(name: str, prefix: str) -> bool:
    return name == prefix or name.startswith(prefix + ".")


def test_core_layer_does_not_import_infra_or_cli():
    violations = [
        (str(path.relative_to(ROOT)), name)
        for path in _python_files(ROOT / "core")
        for name in _imported_modules(path)
        if _matches(name, "infra") or _matches(name, "main")
    ]
    assert not violations, f"Core layer imports outer layers: {violations}"


def test_resolver_parser_and_validator_stay_pure():
    violations = [
        (str(path.relative_to(ROOT)), name)
        for path in PURE_MODULES
        for name in _imported_modules(path)
        if _matches(name, "sqlalchemy") or _matches(name, "openpyxl") or _matches(name, "infra")
    ]
    assert not violations, f"Pure modules pull in persistence or rendering: {violations}"


def test_every_infra_module_is_imported_somewhere():
    sources = [ROOT / "main.py"]
    for folder in ("core", "infra", "migration", "tests"):
        sources.extend(_python_files(ROOT / folder))

    imported: set[str] = set()
    for path in sources:
        imported.update(_imported_modules(path))

    orphans = [
        str(path.relative_to(ROOT))
        for path in _python_files(ROOT / "infra")
        if path.name != "__init__.py"
        and ".".join(path.relative_to(ROOT).with_suffix("").parts) not in imported
    ]
    assert not orphans, f"Infra modules nothing imports: {orphans}"
