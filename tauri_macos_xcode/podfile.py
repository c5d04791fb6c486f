#!/usr/bin/env python3
"""CocoaPods Podfile for the macOS target."""

from pathlib import Path

from .template import process_template, template_vars


def generate_podfile(macos_dir, app_info) -> Path:
    out_path = Path(macos_dir) / "Podfile"
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(process_template("Podfile.template", template_vars(app_info)), encoding="utf-8")
    print("  ✅ Created Podfile")
    return out_path
