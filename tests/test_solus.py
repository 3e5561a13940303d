import subprocess
from unittest import mock

import pytest

from schoolkit.solus import (
    ALREADY_FETCHED,
    FETCH_USAGE,
    clone_command,
    fetch,
    fetch_all,
    local_repo_command,
    main_fetch,
    main_local,
)


def _echo_url(args, **kwargs):
    return subprocess.CompletedProcess(args, 0, stdout=args[-1] + "\n")


def test_clone_command():
    assert clone_command("atom") == [
        "git",
        "clone",
        "https://dev.getsol.us/source/atom.git",
    ]


def test_fetch_returns_output():
    with mock.patch("schoolkit.solus.subprocess.run", side_effect=_echo_url):
        assert fetch("brave") == clone_command("brave")[-1] + "\n"


def test_fetch_all_keeps_order(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    repos = ["atom", "brave", "mutter"]
    with mock.patch("schoolkit.solus.subprocess.run", side_effect=_echo_url):
        outputs = fetch_all(repos)
    assert outputs == [clone_command(repo)[-1] + "\n" for repo in repos]


def test_fetch_all_refuses_existing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "brave").mkdir()
    with pytest.raises(FileExistsError, match=ALREADY_FETCHED):
        fetch_all(["atom", "brave"])


def test_fetch_all_needs_a_repo():
    with pytest.raises(ValueError, match="Usage"):
        fetch_all([])


def test_main_fetch_usage(capsys):
    assert main_fetch([]) == 1
    assert FETCH_USAGE in capsys.readouterr().err


def test_main_fetch_reports_git_output(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    error = subprocess.CalledProcessError(128, ["git"], output="fatal: not found")
    with mock.patch("schoolkit.solus.subprocess.run", side_effect=error):
        assert main_fetch(["atom"]) == 1
    assert "fatal: not found" in capsys.readouterr().err


def test_local_repo_commands():
    assert local_repo_command(True) == [
        "sh",
        "-c",
        "sudo rm -fv /var/lib/solbuild/local/*.eopkg",
    ]
    assert local_repo_command(False)[2] == "sudo cp -v *.eopkg /var/lib/solbuild/local"


def test_main_local_runs_clean(capsys):
    done = subprocess.CompletedProcess([], 0, stdout="removed\n")
    with mock.patch("schoolkit.solus.subprocess.run", return_value=done) as run:
        assert main_local(["--clean"]) == 0
    assert run.call_args.args[0] == local_repo_command(True)
    assert capsys.readouterr().out == "removed\n"


def test_main_local_failure(capsys):
    failed = subprocess.CompletedProcess([], 1, stdout="denied\n")
    with mock.patch("schoolkit.solus.subprocess.run", return_value=failed):
        assert main_local([]) == 1
    assert "denied" in capsys.readouterr().err