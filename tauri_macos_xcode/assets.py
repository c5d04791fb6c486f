#!/usr/bin/env python3
"""Assets.xcassets with an AppIcon set resampled from the Tauri icon."""

import json
from pathlib import Path
from typing import Optional

from PIL import Image

# macOS AppIcon matrix: (point size, scale)
ICON_SIZES = [
    (16, 1), (16, 2),
    (32, 1), (32, 2),
    (128, 1), (128, 2),
    (256, 1), (256, 2),
    (512, 1), (512, 2),
]

# Tried in order under src-tauri/icons/
SOURCE_ICONS = ["icon.png", "128x128@2x.png", "128x128.png"]

CATALOG_INFO = {"author": "xcode", "version": 1}


def icon_filename(size: int, scale: int) -> str:
    suffix = f"@{scale}x" if scale > 1 else ""
    return f"icon_{size}x{size}{suffix}.png"


def icon_set_contents() -> dict:
    images = [
        {
            "filename": icon_filename(size, scale),
            "idiom": "mac",
            "scale": f"{scale}x",
            "size": f"{size}x{size}",
        }
        for size, scale in ICON_SIZES
    ]
    return {"images": images, "info": CATALOG_INFO}


def find_source_icon(project_root) -> Optional[Path]:
    icons_dir = Path(project_root) / "src-tauri" / "icons"
    for name in SOURCE_ICONS:
        candidate = icons_dir / name
        if candidate.exists():
            return candidate
    return None


def render_icons(source: Path, iconset_dir: Path) -> list[Path]:
    """Resample `source` into every size/scale of the AppIcon matrix."""
    with Image.open(source) as img:
        img = img.convert("RGBA")
        written = []
        for size, scale in ICON_SIZES:
            pixels = size * scale
            out_path = iconset_dir / icon_filename(size, scale)
            img.resize((pixels, pixels), Image.LANCZOS).save(str(out_path), "PNG")
            written.append(out_path)
    return written


def generate_assets(macos_dir, app_info, project_root) -> Path:
    assets_dir = Path(macos_dir) / "Assets.xcassets"
    iconset_dir = assets_dir / "AppIcon.appiconset"
    iconset_dir.mkdir(parents=True, exist_ok=True)

    (assets_dir / "Contents.json").write_text(json.dumps({"info": CATALOG_INFO}, indent=2) + "\n")
    (iconset_dir / "Contents.json").write_text(json.dumps(icon_set_contents(), indent=2) + "\n")

    source = find_source_icon(project_root)
    if not source:
        print("  ✅ Created Assets.xcassets (no source icon found, add icons manually)")
        return assets_dir

    print(f"  🎨 Generating app icons for {app_info.product_name} from {source.name}")
    try:
        render_icons(source, iconset_dir)
    except (OSError, ValueError) as e:
        print(f"  ⚠️  Warning: Failed to generate icons: {e}")
        print("  ✅ Created Assets.xcassets (add your icons manually)")
        return assets_dir

    print("  ✅ Created Assets.xcassets with icons")
    return assets_dir
