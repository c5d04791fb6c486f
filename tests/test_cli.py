import pytest

from tauri_macos_xcode import __version__, cli


@pytest.fixture
def calls(monkeypatch):
    recorded = []
    monkeypatch.setattr(cli, "init", lambda path, verbose=False: recorded.append(("init", path, verbose)))

    def fake_dev(path, open_project=False, verbose=False):
        recorded.append(("dev", path, open_project, verbose))
        return 0

    monkeypatch.setattr(cli, "dev", fake_dev)
    return recorded


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 1
    assert "usage: tauri-macos-xcode" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_init_command(calls):
    cli.main(["init", "--path", "/tmp/app"])
    assert calls == [("init", "/tmp/app", False)]


def test_init_defaults(calls):
    cli.main(["init", "-v"])
    assert calls == [("init", None, True)]


def test_dev_command(calls):
    with pytest.raises(SystemExit) as exc:
        cli.main(["dev", "-o", "-p", "/tmp/app"])
    assert exc.value.code == 0
    assert calls == [("dev", "/tmp/app", True, False)]


@pytest.mark.parametrize("command", ["init", "dev"])
def test_errors_exit_non_zero(monkeypatch, capsys, command):
    def boom(*args, **kwargs):
        raise FileNotFoundError("Could not find Tauri project root (no src-tauri directory)")

    monkeypatch.setattr(cli, command, boom)
    with pytest.raises(SystemExit) as exc:
        cli.main([command])

    assert exc.value.code == 1
    assert "❌ Error: Could not find Tauri project root" in capsys.readouterr().err
