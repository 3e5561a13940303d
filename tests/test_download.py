import functools
import threading
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest

from schoolkit.download import USAGE, download, main, target_path

CONTENT = b"hello from the test server\n"


class _QuietHandler(SimpleHTTPRequestHandler):
    def log_message(self, format, *args):
        pass


@pytest.fixture
def server(tmp_path):
    root = tmp_path / "site"
    root.mkdir()
    (root / "file.txt").write_bytes(CONTENT)
    handler = functools.partial(_QuietHandler, directory=str(root))
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_address[1]}"
    httpd.shutdown()
    httpd.server_close()


def test_target_path_uses_url_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert target_path("http://localhost/a/b.tar.gz", None) == Path.cwd() / "b.tar.gz"


def test_target_path_explicit():
    assert target_path("http://localhost/a/b.tar.gz", "out.bin") == Path("out.bin")


def test_download_to_path(server, tmp_path):
    out = tmp_path / "saved.txt"
    assert download(f"{server}/file.txt", out) == out
    assert out.read_bytes() == CONTENT


def test_download_to_cwd(server, tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    path = download(f"{server}/file.txt")
    assert path == work / "file.txt"
    assert path.read_bytes() == CONTENT


def test_error_response_still_saved(server, tmp_path):
    out = tmp_path / "missing.html"
    download(f"{server}/missing", out)
    assert out.exists()
    assert out.read_bytes() != CONTENT


@pytest.mark.parametrize("argv", [[], ["help"]])
def test_main_usage(argv, capsys):
    assert main(argv) == 1
    assert USAGE in capsys.readouterr().err


def test_main_output_flag_needs_path(capsys):
    assert main(["http://localhost/file", "-o"]) == 1
    assert "-o" in capsys.readouterr().err


@pytest.mark.parametrize("flag", ["-o", "-O", "--output", "-output"])
def test_main_output_flags(flag, server, tmp_path):
    out = tmp_path / "flagged.txt"
    assert main([f"{server}/file.txt", flag, str(out)]) == 0
    assert out.read_bytes() == CONTENT


def test_main_unknown_flag_saves_in_cwd(server, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([f"{server}/file.txt", "--verbose", "ignored"]) == 0
    assert (tmp_path / "file.txt").read_bytes() == CONTENT
    assert not (tmp_path / "ignored").exists()