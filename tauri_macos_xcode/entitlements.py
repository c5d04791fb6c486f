#!/usr/bin/env python3
"""Entitlements plist: the user's own file if configured, else the default."""

import shutil
from pathlib import Path

from .template import read_template


def generate_entitlements(macos_dir, app_info, project_root=None) -> Path:
    target_dir = Path(macos_dir) / app_info.target_name
    target_dir.mkdir(parents=True, exist_ok=True)

    filename = f"{app_info.target_name}.entitlements"
    out_path = target_dir / filename

    if app_info.entitlements and project_root:
        source = Path(project_root) / "src-tauri" / app_info.entitlements
        if source.is_file():
            shutil.copyfile(source, out_path)
            print(f"  ✅ Copied {app_info.entitlements} to {app_info.target_name}/{filename}")
            return out_path
        print(f"  ⚠️  Warning: Entitlements file not found: {source}, using defaults")

    out_path.write_text(read_template("entitlements.template"), encoding="utf-8")
    print(f"  ✅ Created {app_info.target_name}/{filename}")
    return out_path
