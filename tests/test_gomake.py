import subprocess
from unittest import mock

import pytest

from schoolkit import gomake
from schoolkit.gomake import OUTPUTS, cross_compile_commands, main, release_command


@pytest.fixture
def on_linux(monkeypatch):
    monkeypatch.setattr(gomake.sys, "platform", "linux")


def test_release_command():
    command, env = release_command()
    assert command == 'go build -ldflags="-s -w"'
    assert env == {"GOOS": "linux", "GOARCH": "amd64"}


def test_cross_compile_targets():
    builds = cross_compile_commands(False)
    assert [env["GOOS"] for _, env in builds] == ["linux", "darwin", "windows"]
    assert all(env["GOARCH"] == "amd64" for _, env in builds)
    for (command, _), output in zip(builds, OUTPUTS):
        assert command == f"go build -o $(pwd)/{output}"


def test_cross_compile_release_strips():
    assert all('-ldflags="-s -w"' in command for command, _ in cross_compile_commands(True))


def test_refuses_other_systems(monkeypatch):
    monkeypatch.setattr(gomake.sys, "platform", "darwin")
    assert main([]) == 1


def test_clean_removes_outputs(on_linux, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for output in OUTPUTS:
        (tmp_path / output).write_text("binary")
    assert main(["clean"]) == 0
    assert not any((tmp_path / output).exists() for output in OUTPUTS)


def test_clean_without_outputs_fails(on_linux, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["clean"]) == 1


def test_release_build_runs_bash(on_linux):
    with mock.patch("schoolkit.gomake.subprocess.run") as run:
        assert main(["--release"]) == 0
    assert run.call_count == 1
    assert run.call_args.args[0] == ["/bin/bash", "-c", release_command()[0]]
    assert run.call_args.kwargs["env"]["GOOS"] == "linux"


def test_cross_compile_runs_three_builds(on_linux):
    with mock.patch("schoolkit.gomake.subprocess.run") as run:
        assert main(["-cross-compile", "-release"]) == 0
    commands = [call.args[0][2] for call in run.call_args_list]
    assert commands == [command for command, _ in cross_compile_commands(True)]


def test_failed_build_reports(on_linux):
    error = subprocess.CalledProcessError(1, ["go"])
    with mock.patch("schoolkit.gomake.subprocess.run", side_effect=error):
        assert main(["--release"]) == 1


def test_no_flags_does_nothing(on_linux):
    with mock.patch("schoolkit.gomake.subprocess.run") as run:
        assert main([]) == 0
    assert run.call_count == 0