#!/usr/bin/env python3
"""Frontend dev server process management."""

import signal
import subprocess
import sys
from pathlib import Path
from typing import Optional

STOP_TIMEOUT = 5


class DevServer:
    """Runs `build.beforeDevCommand` through the shell and ties it to our lifetime."""

    def __init__(self, command: str, cwd, verbose: bool = False):
        self.command = command
        self.cwd = Path(cwd)
        self.verbose = verbose
        self.process: Optional[subprocess.Popen] = None

    def log(self, msg: str):
        print(msg)

    def debug(self, msg: str):
        if self.verbose:
            print(f"  [debug] {msg}")

    def start(self) -> subprocess.Popen:
        self.log("🌐 Starting dev server...")
        self.debug(f"$ {self.command} (in {self.cwd})")
        self.process = subprocess.Popen(self.command, shell=True, cwd=str(self.cwd))
        return self.process

    def stop(self):
        if self.process is None or self.process.poll() is not None:
            return
        self.debug(f"Stopping dev server (pid {self.process.pid})")
        self.process.terminate()
        try:
            self.process.wait(timeout=STOP_TIMEOUT)
        except subprocess.TimeoutExpired:
            self.process.kill()
            self.process.wait()

    def handle_signal(self, signum, frame):
        # Only unwind here. The interrupted wait() still holds the Popen lock,
        # so the caller stops the process once the stack is back out of it.
        self.debug(f"Received {signal.Signals(signum).name}")
        sys.exit(0)

    def install_signal_handlers(self):
        """SIGINT/SIGTERM exit with status 0; callers stop the server in a `finally`."""
        signal.signal(signal.SIGINT, self.handle_signal)
        signal.signal(signal.SIGTERM, self.handle_signal)

    def wait(self) -> int:
        if self.process is None:
            return 0
        return self.process.wait()
