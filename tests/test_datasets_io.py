from pathlib import Path

import pytest
from packages.datasets import ReadError, WriteError, read_words, write_lines
from packages.datasets import io as dio


def test_read_words_trims_and_drops_blanks(tmp_path: Path):
    wl = tmp_path / "words.txt"
    wl.write_text("  cab  \n\n\nfig\n", encoding="utf-8")
    assert read_words(wl) == ["cab", "fig"]


def test_read_words_handles_crlf_and_no_trailing_newline(tmp_path: Path):
    wl = tmp_path / "words.txt"
    wl.write_bytes(b"cab\r\n\tfig \r\nzest")
    assert read_words(str(wl)) == ["cab", "fig", "zest"]


def test_read_words_empty_file(tmp_path: Path):
    wl = tmp_path / "empty.txt"
    wl.write_text("", encoding="utf-8")
    assert read_words(wl) == []


def test_read_words_missing_file(tmp_path: Path):
    with pytest.raises(ReadError) as exc:
        read_words(tmp_path / "nope.txt")
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_read_words_invalid_utf8(tmp_path: Path):
    wl = tmp_path / "latin1.txt"
    wl.write_bytes(b"cab\ncaf\xe9\n")
    with pytest.raises(ReadError) as exc:
        read_words(wl)
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


def test_write_lines_truncates_and_terminates(tmp_path: Path):
    out = tmp_path / "out.txt"
    out.write_text("stale\nstale\nstale\n", encoding="utf-8")
    outcome = write_lines(["cab", "fig:0xF16"], out)
    assert outcome.ok and outcome.written == 2 and outcome.total == 2
    assert out.read_bytes() == b"cab\nfig:0xF16\n"


def test_write_lines_empty_result_creates_empty_file(tmp_path: Path):
    out = tmp_path / "out.txt"
    outcome = write_lines([], out)
    assert outcome.ok and out.exists() and out.read_text(encoding="utf-8") == ""


def test_write_lines_cannot_create(tmp_path: Path):
    with pytest.raises(WriteError):
        write_lines(["cab"], tmp_path / "missing-dir" / "out.txt")


class _FlakyFile:
    """Accepts `limit` writes, then fails like a full disk."""

    def __init__(self, limit):
        self.limit = limit
        self.lines = []

    def write(self, s):
        if len(self.lines) >= self.limit:
            raise OSError(28, "No space left on device")
        self.lines.append(s)
        return len(s)

    def __enter__(self):
        return self

    def close(self):
        pass

    def __exit__(self, *exc):
        return False


def test_write_lines_stops_at_first_failed_line(tmp_path: Path, monkeypatch):
    flaky = _FlakyFile(limit=2)
    monkeypatch.setattr(dio.Path, "open", lambda self, *a, **kw: flaky)

    outcome = write_lines(["cab", "cafe", "fig", "zest"], tmp_path / "out.txt")
    assert not outcome.ok
    assert outcome.written == 2 and outcome.total == 4
    assert "No space left" in outcome.error
    assert flaky.lines == ["cab\n", "cafe\n"]


def test_write_lines_disk_full_is_reported_not_raised():
    if not Path("/dev/full").exists():
        pytest.skip("needs /dev/full")
    outcome = write_lines(["cab", "fig"], "/dev/full")
    assert not outcome.ok
    assert outcome.written == 0 and outcome.total == 2
    assert "No space left" in outcome.error


def test_read_words_trims_unicode_whitespace_only(tmp_path: Path):
    wl = tmp_path / "words.txt"
    nbsp_line = chr(0xA0) + "fig" + chr(0x3000)
    wl.write_text("cab\x1f\n" + nbsp_line + "\n\x0bzest\x0c\n", encoding="utf-8")
    words = read_words(wl)
    assert words == ["cab\x1f", "fig", "zest"]


def test_read_lines_splits_on_newline_only(tmp_path: Path):
    wl = tmp_path / "words.txt"
    wl.write_text("cab" + chr(0x2028) + "fig\r\nzest\x0cbad\n", encoding="utf-8")
    assert dio.read_lines(wl) == ["cab" + chr(0x2028) + "fig", "zest\x0cbad"]
