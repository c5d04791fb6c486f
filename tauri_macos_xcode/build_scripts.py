#!/usr/bin/env python3
"""Build scripts Xcode runs to compile the Rust side of the app."""

from pathlib import Path

from .template import read_template

SCRIPTS = [
    ("build-rust.sh.template", "build-rust.sh"),
    ("build.swift.template", "build.swift"),
]


def generate_build_scripts(macos_dir) -> list[Path]:
    scripts_dir = Path(macos_dir) / "scripts"
    scripts_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for template_name, filename in SCRIPTS:
        path = scripts_dir / filename
        path.write_text(read_template(template_name), encoding="utf-8")
        path.chmod(0o755)
        print(f"  ✅ Created scripts/{filename}")
        written.append(path)
    return written
