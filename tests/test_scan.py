"""Tests for the CJK scanner command line."""

import io

import pytest

from unicjk.config import ScanConfig
from unicjk.scan import format_result, main, scan_paths, scan_text


@pytest.fixture
def scan_config():
    return ScanConfig(alpha_only=True, min_cjk_fraction=0.5, show_runs=True)


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "default.yaml").write_text(
        "scan:\n  alpha_only: true\n  min_cjk_fraction: 0.5\n  show_runs: false\n"
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_scan_text_mostly_latin(scan_config):
    result = scan_text("Hello世界", scan_config)
    assert result["cjk_count"] == 2
    assert result["total_count"] == 7
    assert result["fraction"] == pytest.approx(2 / 7)
    assert result["is_cjk_text"] is False
    assert result["runs"] == ["世界"]


def test_scan_text_mostly_cjk(scan_config):
    result = scan_text("你好世界 ok", scan_config)
    assert result["cjk_count"] == 4
    assert result["fraction"] == pytest.approx(4 / 6)
    assert result["is_cjk_text"] is True
    assert result["runs"] == ["你好世界"]


def test_scan_text_without_cjk_is_never_cjk_text():
    config = ScanConfig(alpha_only=True, min_cjk_fraction=0.0, show_runs=False)
    result = scan_text("plain ascii", config)
    assert result["fraction"] == 0.0
    assert result["is_cjk_text"] is False


def test_format_result(scan_config):
    result = scan_text("你好世界 ok", scan_config)
    assert format_result("a.md", result, show_runs=False) == "a.md\t4\t0.6667\tcjk"
    assert format_result("a.md", result, show_runs=True) == "a.md\t4\t0.6667\tcjk\t你好世界"


def test_scan_paths_skips_unreadable(tmp_path, scan_config):
    good = tmp_path / "good.txt"
    good.write_text("こんにちは", encoding="utf-8")
    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"\xff\xfe\xfa")
    missing = tmp_path / "missing.txt"

    results = scan_paths([str(good), str(bad), str(missing)], scan_config)

    assert [name for name, _ in results] == [str(good)]
    assert results[0][1]["fraction"] == 1.0


def test_main_with_paths(workspace, capsys):
    doc = workspace / "doc.md"
    doc.write_text("# 見出し", encoding="utf-8")
    other = workspace / "other.md"
    other.write_text("# heading", encoding="utf-8")

    assert main([str(doc), str(other)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"{doc}\t3\t1.0000\tcjk",
        f"{other}\t0\t0.0000\tnon-cjk",
    ]


def _stdin_bytes(data: bytes, encoding: str) -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(data), encoding=encoding)


def test_main_reads_stdin(workspace, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", _stdin_bytes("안녕 hi".encode("utf-8"), "utf-8"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["-\t2\t0.5000\tcjk"]


def test_main_decodes_stdin_as_utf8_regardless_of_locale(workspace, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", _stdin_bytes("안녕 hi".encode("utf-8"), "latin-1"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["-\t2\t0.5000\tcjk"]


def test_main_without_config_dir_uses_defaults(tmp_path, monkeypatch, capsys, caplog):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", _stdin_bytes("hi".encode("utf-8"), "utf-8"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["-\t0\t0.0000\tnon-cjk"]
    assert "using built-in scan defaults" in caplog.text


def test_main_with_missing_named_config_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        main(["--config-name", "strict"])
