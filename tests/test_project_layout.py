from __future__ import annotations

from pathlib import Path


def test_required_package_paths_exist() -> None:
    root = Path(__file__).resolve().parents[1]
    required = [
        "src/bindgen/cli.py",
        "src/bindgen/config.py",
        "src/bindgen/codegen/__init__.py",
        "src/bindgen/build/__init__.py",
        "src/bindgen/logging/__init__.py",
        "pyproject.toml",
    ]
    for rel in required:
        assert (root / rel).exists(), rel
