import json
import subprocess

import pytest
from PIL import Image

from tauri_macos_xcode.discovery import AppInfo

BASE_CONFIG = {
    "productName": "TestApp",
    "identifier": "com.test.app",
    "version": "1.0.0",
    "build": {"beforeDevCommand": "npm run dev"},
}


@pytest.fixture
def app_info():
    return AppInfo(
        product_name="TestApp",
        identifier="com.test.testapp",
        bundle_id_prefix="com.test",
        version="1.0.0",
        macos_deployment_target="11.0",
    )


@pytest.fixture
def make_project(tmp_path):
    """Create a minimal Tauri project; returns its root."""
    def _make(config=None, package_json=None, name="app"):
        root = tmp_path / name
        src_tauri = root / "src-tauri"
        src_tauri.mkdir(parents=True)
        cfg = BASE_CONFIG if config is None else config
        (src_tauri / "tauri.conf.json").write_text(json.dumps(cfg))
        if package_json is not None:
            (root / "package.json").write_text(json.dumps(package_json, indent=2))
        return root
    return _make


@pytest.fixture
def write_icon():
    def _write(path, size=512):
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGBA", (size, size), (255, 0, 0, 255)).save(str(path), "PNG")
        return path
    return _write


@pytest.fixture
def fake_run(monkeypatch):
    """Replace subprocess.run; records calls and succeeds by default."""
    calls = []

    def run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        if run.error:
            raise run.error
        return subprocess.CompletedProcess(cmd, 0)

    run.error = None
    run.calls = calls
    monkeypatch.setattr(subprocess, "run", run)
    return run


class FakePopen:
    instances = []

    def __init__(self, cmd, **kwargs):
        self.cmd = cmd
        self.kwargs = kwargs
        self.pid = 4242
        self.returncode = None
        self.terminated = False
        self.killed = False
        self.hang_on_terminate = False
        FakePopen.instances.append(self)

    def poll(self):
        return self.returncode

    def terminate(self):
        self.terminated = True
        if not self.hang_on_terminate:
            self.returncode = -15

    def kill(self):
        self.killed = True
        self.returncode = -9

    def wait(self, timeout=None):
        if self.returncode is None:
            if timeout is not None:
                raise subprocess.TimeoutExpired(self.cmd, timeout)
            self.returncode = 0
        return self.returncode


@pytest.fixture
def fake_popen(monkeypatch):
    FakePopen.instances = []
    monkeypatch.setattr(subprocess, "Popen", FakePopen)
    return FakePopen
