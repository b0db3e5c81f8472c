import hashlib

from qhash.checksums import ChecksumEntry, parse_md5_file
from qhash.cli import main


def _config(tmp_path):
    return str(tmp_path / "qhash.conf")


def test_hash_single_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.txt").write_bytes(b"alpha")
    assert main(["--config", _config(tmp_path), "a.txt"]) == 0
    out = capsys.readouterr().out
    assert out == hashlib.md5(b"alpha").hexdigest() + "  a.txt\n"


def test_hash_many_files_uppercase_sha1(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a").write_bytes(b"one")
    (tmp_path / "b").write_bytes(b"two")
    code = main(["--config", _config(tmp_path), "-a", "sha1", "-u", "a", "b"])
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        hashlib.sha1(b"one").hexdigest().upper() + "  a",
        hashlib.sha1(b"two").hexdigest().upper() + "  b",
    ]


def test_md5_list_is_loaded(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "x.bin").write_bytes(b"content")
    (tmp_path / "list.md5").write_text("ABC  x.bin\n")
    assert main(["--config", _config(tmp_path), "list.md5"]) == 0
    out = capsys.readouterr().out
    assert out == hashlib.md5(b"content").hexdigest() + "  x.bin\n"


def test_missing_file_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--config", _config(tmp_path), "ghost.bin"]) == 1
    assert "Unable to open file ghost.bin" in capsys.readouterr().err


def test_output_file_written(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.txt").write_bytes(b"alpha")
    assert main(["--config", _config(tmp_path), "-o", "sums", "a.txt"]) == 0
    entries = parse_md5_file(tmp_path / "sums.md5")
    assert entries == [ChecksumEntry(hashlib.md5(b"alpha").hexdigest(), "a.txt")]


def test_unsupported_output_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.txt").write_bytes(b"alpha")
    assert main(["--config", _config(tmp_path), "-o", "sums.sha1", "a.txt"]) == 1
    assert not (tmp_path / "sums.sha1").exists()


def test_no_files_prints_nothing(tmp_path, capsys):
    assert main(["--config", _config(tmp_path)]) == 0
    assert capsys.readouterr().out == ""