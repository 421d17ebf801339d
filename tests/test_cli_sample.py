from __future__ import annotations

import io
from collections import Counter
from pathlib import Path

import pytest
from wordlists.cli import main


def _write(path: Path, lines: list[str]) -> str:
    path.write_text("".join(f"{w}\n" for w in lines), encoding="utf-8")
    return str(path)


def test_sample_cli_sorts_whole_list(tmp_path: Path) -> None:
    src = _write(tmp_path / "in.txt", ["Wolf", "ant", "Bee", "cat"])
    out = tmp_path / "out.txt"
    assert main([src, str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "ant\nBee\ncat\nWolf\n"


def test_sample_cli_empty_input(tmp_path: Path) -> None:
    src = tmp_path / "in.txt"
    src.write_text("", encoding="utf-8")
    out = tmp_path / "out.txt"
    assert main([str(src), str(out)]) == 0
    assert out.read_bytes() == b""


def test_sample_cli_size_from_reference(tmp_path: Path) -> None:
    words = [f"w{i}" for i in range(30)]
    src = _write(tmp_path / "dict.txt", words)
    ref = _write(tmp_path / "itwêwina", ["nipiy", "atim", "maskwa"])
    out = tmp_path / "words"
    assert main(["--size-from", ref, "--seed", "5", src, str(out)]) == 0
    got = out.read_text(encoding="utf-8").splitlines()
    assert len(got) == 3
    assert not Counter(got) - Counter(words)


def test_sample_cli_seed_is_repeatable(tmp_path: Path) -> None:
    src = _write(tmp_path / "in.txt", [f"w{i:02d}" for i in range(40)])
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    assert main(["-n", "5", "--seed", "3", src, str(a)]) == 0
    assert main(["-n", "5", "--seed", "3", src, str(b)]) == 0
    assert a.read_text(encoding="utf-8") == b.read_text(encoding="utf-8")


def test_sample_cli_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main([str(tmp_path / "nope.txt"), str(tmp_path / "out.txt")])
    assert code == 1
    err = capsys.readouterr().err
    assert "error: no such file" in err
    assert not (tmp_path / "out.txt").exists()


def test_sample_cli_oversized_sample(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = _write(tmp_path / "in.txt", ["a", "b"])
    code = main(["-n", "3", src, str(tmp_path / "out.txt")])
    assert code == 1
    assert "exceeds" in capsys.readouterr().err


def test_sample_cli_negative_size_is_usage_error(tmp_path: Path) -> None:
    src = _write(tmp_path / "in.txt", ["a"])
    with pytest.raises(SystemExit) as ei:
        main(["-n", "-1", src, str(tmp_path / "out.txt")])
    assert ei.value.code == 2


def test_sample_cli_size_options_are_exclusive(tmp_path: Path) -> None:
    src = _write(tmp_path / "in.txt", ["a"])
    with pytest.raises(SystemExit) as ei:
        main(["-n", "1", "--size-from", src, src, str(tmp_path / "out.txt")])
    assert ei.value.code == 2


def test_sample_cli_requires_two_paths() -> None:
    with pytest.raises(SystemExit) as ei:
        main(["only-one"])
    assert ei.value.code == 2


def test_sample_cli_invalid_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    src = _write(tmp_path / "in.txt", ["a"])
    monkeypatch.setenv("SAMPLING__SEED", "not-a-number")
    assert main([src, str(tmp_path / "out.txt")]) == 1
    assert "invalid configuration" in capsys.readouterr().err


def test_sample_cli_logs_json_to_stderr(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    buf = io.StringIO()
    monkeypatch.setattr("sys.stderr", buf)
    src = _write(tmp_path / "in.txt", ["b", "a"])
    assert main(["--verbose", src, str(tmp_path / "out.txt")]) == 0
    logged = buf.getvalue()
    assert '"event":"pipeline_completed"' in logged
    assert '"event":"cli_completed"' in logged


def test_sample_cli_malformed_toml_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    src = _write(tmp_path / "in.txt", ["a"])
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "wordlists.toml").write_text("[sampling\nseed = 1\n", encoding="utf-8")
    assert main([src, str(tmp_path / "out.txt")]) == 1
    assert "error: invalid configuration" in capsys.readouterr().err
    assert not (tmp_path / "out.txt").exists()
