"""CLI integration tests for input resolution."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from coqindent.cli import build_request, main, _parse_args  # pyright: ignore[reportPrivateUsage]


def _make_tree(root: Path) -> None:
    """Create a small Coq project tree for testing."""
    theories = root / "theories"
    theories.mkdir()
    (theories / "Lemma.v").write_text("Lemma x : True.\n")
    (theories / "Lemma.vo").write_bytes(b"\x00")
    (theories / "notes.txt").write_text("not coq\n")
    extracted = theories / "Extracted"
    extracted.mkdir()
    (extracted / "Gen.v").write_text("Definition g := 0.\n")


def _lines(out: str) -> list[str]:
    return [line for line in out.strip().split("\n") if line]


def test_directory_input(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    _make_tree(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert main(["."]) == 0
    names = sorted(Path(line).name for line in _lines(capsys.readouterr().out))
    assert names == ["Gen.v", "Lemma.v"]


def test_exclude_directory(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    _make_tree(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert main(["--exclude", "theories/Extracted", "."]) == 0
    out = capsys.readouterr().out
    assert "Lemma.v" in out
    assert "Gen.v" not in out


def test_stdin_marker_and_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "foo.v").write_text("")
    monkeypatch.chdir(tmp_path)
    assert main(["-", "foo.v"]) == 0
    assert _lines(capsys.readouterr().out) == ["-", str((tmp_path / "foo.v").resolve())]


def test_same_file_twice_is_listed_once(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    f = tmp_path / "foo.v"
    f.write_text("")
    monkeypatch.chdir(tmp_path)
    assert main(["foo.v", str(f)]) == 0
    assert len(_lines(capsys.readouterr().out)) == 1


def test_line_range_with_several_inputs_is_rejected(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "a.v").write_text("")
    (tmp_path / "b.v").write_text("")
    monkeypatch.chdir(tmp_path)
    assert main(["--from", "3", "a.v", "b.v"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "--from and --upto cannot be used with more than one input file." in captured.err


def test_line_range_counts_stdin(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "a.v").write_text("")
    monkeypatch.chdir(tmp_path)
    assert main(["--upto", "10", "-", "a.v"]) == 1
    assert capsys.readouterr().out == ""


def test_line_range_with_single_input(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "a.v").write_text("")
    monkeypatch.chdir(tmp_path)
    assert main(["--from", "3", "--upto", "10", "a.v", "./a.v"]) == 0
    assert len(_lines(capsys.readouterr().out)) == 1


def test_request_passes_options_through(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "a.v").write_text("")
    monkeypatch.chdir(tmp_path)
    options, _ = _parse_args(["--check", "--from", "2", "--upto", "5", "a.v"])
    request = build_request(options)
    assert request.check is True
    assert (request.from_line, request.upto_line) == (2, 5)
    assert len(request.inputs) == 1


@pytest.mark.parametrize("value", ["0", "-1", "abc"])
def test_invalid_line_number(value: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--from", value, "a.v"])
    assert exc.value.code != 0
    assert "not a valid line number" in capsys.readouterr().err


def test_missing_input_warns_and_continues(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "a.v").write_text("")
    monkeypatch.chdir(tmp_path)
    assert main(["missing.v", "a.v"]) == 0
    captured = capsys.readouterr()
    assert "Warning: missing.v -- " in captured.err
    assert [Path(line).name for line in _lines(captured.out)] == ["a.v"]


def test_no_inputs_is_an_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "Error: No input specified" in capsys.readouterr().err


def test_config_exclude_applies(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    _make_tree(tmp_path)
    (tmp_path / "coqindent.toml").write_text('exclude = ["theories/Extracted"]\n')
    monkeypatch.chdir(tmp_path)
    assert main(["."]) == 0
    out = capsys.readouterr().out
    assert "Lemma.v" in out
    assert "Gen.v" not in out


def test_ignore_file_applies(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    _make_tree(tmp_path)
    (tmp_path / ".coqindentignore").write_text("theories/Extracted\n")
    monkeypatch.chdir(tmp_path)
    assert main(["."]) == 0
    assert "Gen.v" not in capsys.readouterr().out

    assert main(["--no-ignore-file", "."]) == 0
    assert "Gen.v" in capsys.readouterr().out


def test_verbose_reports_unreadable_directory(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    if os.getuid() == 0:
        pytest.skip("root can list directories regardless of permissions")
    (tmp_path / "a.v").write_text("")
    locked = tmp_path / "locked"
    locked.mkdir()
    locked.chmod(0)
    monkeypatch.chdir(tmp_path)
    try:
        assert main(["-v", "."]) == 0
        captured = capsys.readouterr()
        assert "Cannot read directory" in captured.err
        assert [Path(line).name for line in _lines(captured.out)] == ["a.v"]
    finally:
        locked.chmod(stat.S_IRWXU)


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--version"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("v") or out.startswith("unknown")
