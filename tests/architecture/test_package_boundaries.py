"""Architecture boundary tests for the package topology.

Enforces the dependency DAG:
  core → domain, providers
  providers → domain
  domain → (nothing)
"""

from __future__ import annotations

import ast
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
SOURCE_ROOT = REPO_ROOT / "resume_ai"

SUBMODULES = {"core", "domain", "providers"}

ALLOWED_DEPS: dict[str, set[str]] = {
    "core": {"domain", "providers"},
    "providers": {"domain"},
    "domain": set(),
}


def _submodule_of(file_path: Path) -> str | None:
    rel = file_path.relative_to(SOURCE_ROOT)
    parts = rel.parts
    if parts and parts[0] in SUBMODULES:
        return parts[0]
    return None


def _imported_modules(file_path: Path) -> set[str]:
    tree = ast.parse(file_path.read_text(encoding="utf-8"), filename=str(file_path))
    result: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                result.add(alias.name)
        elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
            result.add(node.module)
    return result


def _imported_submodules(file_path: Path) -> set[str]:
    result: set[str] = set()
    for module_name in _imported_modules(file_path):
        parts = module_name.split(".")
        if len(parts) >= 2 and parts[0] == "resume_ai" and parts[1] in SUBMODULES:
            result.add(parts[1])
    return result


def test_architecture_boundaries() -> None:
    violations: list[str] = []
    for py_file in sorted(SOURCE_ROOT.rglob("*.py")):
        owner = _submodule_of(py_file)
        if owner is None:
            continue
        for dep in _imported_submodules(py_file):
            if dep != owner and dep not in ALLOWED_DEPS.get(owner, set()):
                rel = py_file.relative_to(REPO_ROOT)
                violations.append(
                    f"{rel}: resume_ai.{owner} imports resume_ai.{dep} "
                    f"(allowed: {sorted(ALLOWED_DEPS.get(owner, set()))})"
                )

    assert not violations, "Architecture boundary violation(s):\n" + "\n".join(sorted(violations))


def test_domain_and_extraction_do_no_io() -> None:
    banned = {"httpx", "os", "yaml"}
    for py_file in [*(SOURCE_ROOT / "domain").rglob("*.py"), SOURCE_ROOT / "core" / "extraction.py"]:
        imported = {name.split(".")[0] for name in _imported_modules(py_file)}
        assert not (imported & banned), f"{py_file.name} imports {sorted(imported & banned)}"
