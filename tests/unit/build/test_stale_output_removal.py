from __future__ import annotations

from pathlib import Path

from bindgen.build import remove_stale


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("x", encoding="utf-8")
    return path


def test_files_outside_keep_set_and_empty_dirs_are_removed(tmp_path: Path) -> None:
    out = tmp_path / "out"
    kept = _touch(out / "card.ts")
    _touch(out / "card.css.ts")
    _touch(out / "old" / "deep" / "gone.ts")
    nested_kept = _touch(out / "pages" / "index.ts")
    _touch(out / "pages" / "removed.ts")

    removed = remove_stale(out, {kept, nested_kept})

    assert [path.relative_to(out).as_posix() for path in removed] == [
        "card.css.ts",
        "old/deep/gone.ts",
        "old/deep",
        "old",
        "pages/removed.ts",
    ]
    assert kept.exists()
    assert nested_kept.exists()
    assert not (out / "old").exists()


def test_output_root_is_removed_when_nothing_is_kept(tmp_path: Path) -> None:
    out = tmp_path / "out"
    _touch(out / "a" / "b.ts")

    removed = remove_stale(out, set())

    assert removed[-1] == out
    assert not out.exists()


def test_missing_output_root_is_a_no_op(tmp_path: Path) -> None:
    assert remove_stale(tmp_path / "missing", set()) == []
