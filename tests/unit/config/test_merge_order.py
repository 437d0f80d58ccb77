from __future__ import annotations

from pathlib import Path

from bindgen.config import CliOverrides, default_workers, load_effective_config


def test_defaults_without_config_file(tmp_path: Path) -> None:
    config = load_effective_config(tmp_path)

    root = tmp_path.resolve()
    assert config.input_dir == root
    assert config.output_dir == root / "generated"
    assert config.workers == min(default_workers(), 256)
    assert config.audit_log is None


def test_merge_order_defaults_then_file_then_cli(tmp_path: Path) -> None:
    (tmp_path / "bindgen.toml").write_text(
        "\n".join(
            [
                "[build]",
                'input_dir = "templates"',
                'output_dir = "src/generated"',
                "workers = 3",
                'audit_log = "logs/build.jsonl"',
            ]
        ),
        encoding="utf-8",
    )
    overrides = CliOverrides(workers=8)

    config = load_effective_config(tmp_path, overrides)

    root = tmp_path.resolve()
    assert config.input_dir == root / "templates"
    assert config.output_dir == root / "src" / "generated"
    assert config.workers == 8
    assert config.audit_log == root / "logs" / "build.jsonl"


def test_cli_paths_have_highest_precedence(tmp_path: Path) -> None:
    (tmp_path / "bindgen.toml").write_text('[build]\noutput_dir = "gen"\n', encoding="utf-8")
    custom = tmp_path / "elsewhere"

    config = load_effective_config(tmp_path, CliOverrides(output_dir=custom))

    assert config.output_dir == custom.resolve()
    assert config.to_public_dict()["output_dir"] == str(custom.resolve())
