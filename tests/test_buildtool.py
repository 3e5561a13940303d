import subprocess
from unittest import mock

import pytest

from schoolkit.buildtool import FLAGS, USAGE, build_command, detect_language, main


@pytest.mark.parametrize(
    ("name", "language"),
    [("main.go", "Go"), ("prog.cpp", "C++"), ("prog.cxx", "C++")],
)
def test_detect_language_supported(name, language):
    assert detect_language(name) == language


@pytest.mark.parametrize("name", ["script.py", "", "main.go.bak", "src/main.go"])
def test_detect_language_unsupported(name):
    assert detect_language(name) is None


def test_cpp_command_uses_flags():
    command = build_command("prog.cpp")
    assert command.startswith("clang++ -std=c++14 -stdlib=libc++ prog.cpp")
    assert command.endswith(FLAGS)
    assert "-o compiled-cpp" in command


def test_go_command_strips_debug_data():
    assert build_command("main.go") == 'go build -ldflags="-s -w" -o compiled-go main.go'


def test_build_command_rejects_other_files():
    with pytest.raises(ValueError):
        build_command("notes.txt")


def test_main_prints_usage_for_unknown_file(capsys):
    assert main(["notes.txt"]) == 0
    assert capsys.readouterr().out.strip() == USAGE.strip()


def test_main_runs_compiler(capsys):
    done = subprocess.CompletedProcess([], 0, stdout="built")
    with mock.patch("schoolkit.buildtool.subprocess.run", return_value=done) as run:
        assert main(["main.go"]) == 0
    assert run.call_args.args[0] == ["sh", "-c", build_command("main.go")]
    assert "built" in capsys.readouterr().out


def test_main_reports_failure(capsys):
    failed = subprocess.CompletedProcess([], 1, stdout="compile error")
    with mock.patch("schoolkit.buildtool.subprocess.run", return_value=failed):
        assert main(["prog.cpp"]) == 1
    assert "compile error" in capsys.readouterr().err