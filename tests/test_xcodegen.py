import subprocess

import pytest

from tauri_macos_xcode.xcodegen import find_xcodeproj, open_in_xcode, run_xcodegen


def test_runs_xcodegen_generate(tmp_path, fake_run, capsys):
    run_xcodegen(tmp_path)
    cmd, kwargs = fake_run.calls[0]
    assert cmd == ["xcodegen", "generate"]
    assert kwargs["cwd"] == str(tmp_path)
    assert kwargs["check"] is True
    assert "Xcode project generated successfully" in capsys.readouterr().out


def test_verbose_prints_command(tmp_path, fake_run, capsys):
    run_xcodegen(tmp_path, verbose=True)
    assert "[debug] $ xcodegen generate" in capsys.readouterr().out


@pytest.mark.parametrize("error", [
    FileNotFoundError("xcodegen"),
    subprocess.CalledProcessError(1, ["xcodegen", "generate"]),
])
def test_failure_raises_install_hint(tmp_path, fake_run, error):
    fake_run.error = error
    with pytest.raises(RuntimeError, match="brew install xcodegen"):
        run_xcodegen(tmp_path)


def test_find_xcodeproj(tmp_path):
    assert find_xcodeproj(tmp_path) is None
    (tmp_path / "TestApp.xcodeproj").mkdir()
    assert find_xcodeproj(tmp_path) == tmp_path / "TestApp.xcodeproj"


def test_open_in_xcode(tmp_path, fake_popen):
    project = tmp_path / "TestApp.xcodeproj"
    open_in_xcode(project)
    assert fake_popen.instances[0].cmd == ["open", str(project)]
