#!/usr/bin/env python3
"""`init`: generate src-tauri/gen/apple-macos and run XcodeGen."""

import json
from pathlib import Path

from .assets import generate_assets
from .build_scripts import generate_build_scripts
from .discovery import detect_package_manager, find_project_root, get_app_info, read_tauri_config
from .entitlements import generate_entitlements
from .info_plist import generate_info_plist
from .podfile import generate_podfile
from .project_yml import generate_project_yml
from .xcodegen import run_xcodegen

MACOS_DIR = Path("src-tauri") / "gen" / "apple-macos"
DEV_SCRIPT_NAME = "tauri:macos:dev"
DEV_SCRIPT = "tauri-macos-xcode dev --open"
GITIGNORE = "xcuserdata/\nbuild/\n"


def macos_dir_for(project_root) -> Path:
    return Path(project_root) / MACOS_DIR


def update_package_json(project_root) -> bool:
    """Add the tauri:macos:dev script to package.json unless it is already there."""
    pkg_path = Path(project_root) / "package.json"
    if not pkg_path.exists():
        print("  ⚠️  Warning: package.json not found, skipping tauri:macos:dev script")
        return False

    pkg = json.loads(pkg_path.read_text(encoding="utf-8"))
    if isinstance(pkg, dict) and pkg.get("scripts") is None:
        pkg["scripts"] = {}
    if not isinstance(pkg, dict) or not isinstance(pkg["scripts"], dict):
        print(f"  ⚠️  Warning: package.json has no scripts object, skipping {DEV_SCRIPT_NAME} script")
        return False

    scripts = pkg["scripts"]
    if DEV_SCRIPT_NAME in scripts:
        print(f"  ⏭️  package.json already has a {DEV_SCRIPT_NAME} script")
        return False

    scripts[DEV_SCRIPT_NAME] = DEV_SCRIPT
    pkg_path.write_text(json.dumps(pkg, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    print(f"  ✅ Updated package.json with {DEV_SCRIPT_NAME} script")
    return True


def init(path=None, verbose: bool = False) -> Path:
    """Generate the macOS Xcode project; returns the macOS dir."""
    project_root = Path(path) if path else find_project_root()
    config = read_tauri_config(project_root)
    app_info = get_app_info(config, project_root)
    macos_dir = macos_dir_for(project_root)

    print(f"🔍 Creating macOS Xcode project for \"{app_info.product_name}\"...\n")

    macos_dir.mkdir(parents=True, exist_ok=True)
    (macos_dir / app_info.target_name).mkdir(exist_ok=True)

    generate_project_yml(macos_dir, app_info, project_root)
    generate_info_plist(macos_dir, app_info, project_root)
    generate_assets(macos_dir, app_info, project_root)
    generate_build_scripts(macos_dir)
    generate_podfile(macos_dir, app_info)

    (macos_dir / ".gitignore").write_text(GITIGNORE)
    print("  ✅ Created .gitignore\n")

    run_xcodegen(macos_dir, verbose=verbose)

    # After xcodegen, which may leave an empty entitlements file behind.
    generate_entitlements(macos_dir, app_info, project_root)
    print()

    update_package_json(project_root)

    pm = detect_package_manager(project_root)
    print("\n🎉 macOS Xcode project created successfully!\n")
    print("Next steps:")
    print(f"  1. Run: {pm} run {DEV_SCRIPT_NAME}")
    print("     (or: tauri-macos-xcode dev --open)")
    print(f"  2. Build and run the {app_info.target_name} scheme in Xcode")

    return macos_dir
