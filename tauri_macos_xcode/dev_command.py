#!/usr/bin/env python3
"""`dev`: start the frontend dev server and optionally open Xcode."""

from pathlib import Path

from .dev_server import DevServer
from .discovery import find_project_root, get_dev_command, read_tauri_config
from .init_project import macos_dir_for
from .xcodegen import find_xcodeproj, open_in_xcode


def dev(path=None, open_project: bool = False, verbose: bool = False) -> int:
    """Run the dev server until it exits; returns its exit code (0 without one)."""
    project_root = Path(path) if path else find_project_root()
    config = read_tauri_config(project_root)
    macos_dir = macos_dir_for(project_root)

    if not (macos_dir / "project.yml").exists():
        raise FileNotFoundError('macOS Xcode project not found. Run "tauri-macos-xcode init" first.')

    server = None
    dev_command = get_dev_command(config)
    if dev_command:
        script, cwd = dev_command
        server = DevServer(script, project_root / cwd if cwd else project_root, verbose=verbose)
        server.start()
        server.install_signal_handlers()

    try:
        if open_project:
            xcodeproj = find_xcodeproj(macos_dir)
            if xcodeproj:
                open_in_xcode(xcodeproj)
            else:
                print(f"❌ Xcode project not found. Try running xcodegen manually in: {macos_dir}")

        if server is None:
            return 0
        return server.wait()
    finally:
        if server is not None:
            server.stop()
