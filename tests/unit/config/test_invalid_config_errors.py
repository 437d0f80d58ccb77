from __future__ import annotations

from pathlib import Path

import pytest

from bindgen.config import CliOverrides, load_effective_config


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("build = 1\n", "Config section 'build' must be a table."),
        ("[build]\nworkers = 0\n", "Config field 'build.workers' must be a positive integer."),
        ("[build]\nworkers = true\n", "Config field 'build.workers' must be a positive integer."),
        ("[build]\nworkers = 1000\n", "Config field 'build.workers' must be <= 256."),
        ("[build]\ninput_dir = 3\n", "Config field 'build.input_dir' must be a non-empty string."),
        ("[build]\nverbose = true\n", "Config field 'build.verbose' is not supported."),
    ],
)
def test_invalid_config_file_values(tmp_path: Path, body: str, message: str) -> None:
    (tmp_path / "bindgen.toml").write_text(body, encoding="utf-8")

    with pytest.raises(ValueError) as raised:
        load_effective_config(tmp_path)

    assert str(raised.value) == message


def test_invalid_worker_override(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="overrides.workers"):
        load_effective_config(tmp_path, CliOverrides(workers=-1))


def test_output_dir_containing_input_dir_is_rejected(tmp_path: Path) -> None:
    overrides = CliOverrides(input_dir=tmp_path / "out" / "src", output_dir=tmp_path / "out")

    with pytest.raises(ValueError, match="must not contain input_dir"):
        load_effective_config(tmp_path, overrides)


def test_output_dir_equal_to_input_dir_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="must not contain input_dir"):
        load_effective_config(tmp_path, CliOverrides(output_dir=tmp_path))
