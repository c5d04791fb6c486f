#!/usr/bin/env python3
"""Run XcodeGen and open the resulting project in Xcode."""

import subprocess
from pathlib import Path
from typing import Optional

INSTALL_HINT = "Failed to run xcodegen. Make sure xcodegen is installed: brew install xcodegen"


class XcodeGen:
    def __init__(self, macos_dir, verbose: bool = False):
        self.macos_dir = Path(macos_dir)
        self.verbose = verbose

    def log(self, msg: str):
        print(msg)

    def debug(self, msg: str):
        if self.verbose:
            print(f"  [debug] {msg}")

    def run_cmd(self, cmd: list) -> subprocess.CompletedProcess:
        self.debug(f"$ {' '.join(str(c) for c in cmd)} (in {self.macos_dir})")
        return subprocess.run(cmd, cwd=str(self.macos_dir), check=True)

    def generate(self):
        """`xcodegen generate` in the macOS dir; output streams to the terminal."""
        self.log("🔨 Running xcodegen...")
        try:
            self.run_cmd(["xcodegen", "generate"])
        except (OSError, subprocess.CalledProcessError) as e:
            self.debug(f"xcodegen failed: {e}")
            raise RuntimeError(INSTALL_HINT) from e
        self.log("  ✅ Xcode project generated successfully")


def run_xcodegen(macos_dir, verbose: bool = False):
    XcodeGen(macos_dir, verbose=verbose).generate()


def find_xcodeproj(macos_dir) -> Optional[Path]:
    projects = sorted(Path(macos_dir).glob("*.xcodeproj"))
    return projects[0] if projects else None


def open_in_xcode(project_path) -> subprocess.Popen:
    print(f"🚀 Opening {Path(project_path).name}...")
    return subprocess.Popen(["open", str(project_path)])
