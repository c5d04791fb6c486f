#!/usr/bin/env python3
"""Info.plist generation, plus the plist pieces project.yml reuses."""

import plistlib
import re
from pathlib import Path
from typing import Optional
from xml.parsers.expat import ExpatError
from xml.sax.saxutils import escape

from .template import process_template, template_vars

CATEGORY_PREFIX = "public.app-category."

# Tauri category names -> LSApplicationCategoryType UTIs
CATEGORY_MAP = {
    "Business": "public.app-category.business",
    "Developer Tool": "public.app-category.developer-tools",
    "Developer Tools": "public.app-category.developer-tools",
    "Education": "public.app-category.education",
    "Entertainment": "public.app-category.entertainment",
    "Finance": "public.app-category.finance",
    "Game": "public.app-category.games",
    "Games": "public.app-category.games",
    "Action Game": "public.app-category.action-games",
    "Adventure Game": "public.app-category.adventure-games",
    "Arcade Game": "public.app-category.arcade-games",
    "Board Game": "public.app-category.board-games",
    "Card Game": "public.app-category.card-games",
    "Casino Game": "public.app-category.casino-games",
    "Dice Game": "public.app-category.dice-games",
    "Educational Game": "public.app-category.educational-games",
    "Family Game": "public.app-category.family-games",
    "Kids Game": "public.app-category.kids-games",
    "Music Game": "public.app-category.music-games",
    "Puzzle Game": "public.app-category.puzzle-games",
    "Racing Game": "public.app-category.racing-games",
    "Role Playing Game": "public.app-category.role-playing-games",
    "Simulation Game": "public.app-category.simulation-games",
    "Sports Game": "public.app-category.sports-games",
    "Strategy Game": "public.app-category.strategy-games",
    "Trivia Game": "public.app-category.trivia-games",
    "Word Game": "public.app-category.word-games",
    "Graphics Design": "public.app-category.graphics-design",
    "Graphics & Design": "public.app-category.graphics-design",
    "Health & Fitness": "public.app-category.healthcare-fitness",
    "Healthcare & Fitness": "public.app-category.healthcare-fitness",
    "Lifestyle": "public.app-category.lifestyle",
    "Medical": "public.app-category.medical",
    "Music": "public.app-category.music",
    "News": "public.app-category.news",
    "Photography": "public.app-category.photography",
    "Productivity": "public.app-category.productivity",
    "Reference": "public.app-category.reference",
    "Social Networking": "public.app-category.social-networking",
    "Sports": "public.app-category.sports",
    "Travel": "public.app-category.travel",
    "Utility": "public.app-category.utilities",
    "Utilities": "public.app-category.utilities",
    "Video": "public.app-category.video",
    "Weather": "public.app-category.weather",
}


# Lookup key ignoring case, spaces and punctuation: "DeveloperTool" == "Developer Tool"
NORMALIZED_CATEGORIES = {re.sub(r"[^a-z]", "", name.lower()): uti for name, uti in CATEGORY_MAP.items()}


def map_category(category: str) -> str:
    """Map a Tauri category name to an Apple UTI; unknown names pass through."""
    if category.startswith(CATEGORY_PREFIX):
        return category
    key = re.sub(r"[^a-z]", "", category.lower())
    return NORMALIZED_CATEGORIES.get(key, category)


def document_type(assoc: dict) -> dict:
    """CFBundleDocumentTypes entry for one file association."""
    extensions = list(assoc["ext"])
    entry = {
        "CFBundleTypeName": assoc.get("name") or extensions[0],
        "CFBundleTypeRole": assoc.get("role") or "Editor",
        "CFBundleTypeExtensions": extensions,
    }
    if assoc.get("contentTypes"):
        entry["LSItemContentTypes"] = list(assoc["contentTypes"])
    entry["LSHandlerRank"] = assoc.get("rank") or "Default"
    return entry


def exported_type(assoc: dict) -> Optional[dict]:
    """UTExportedTypeDeclarations entry, or None if the association exports nothing."""
    exported = assoc.get("exportedType")
    if not exported:
        return None

    entry = {"UTTypeIdentifier": exported["identifier"]}
    if exported.get("conformsTo"):
        entry["UTTypeConformsTo"] = list(exported["conformsTo"])
    entry["UTTypeTagSpecification"] = {
        "public.filename-extension": list(assoc["ext"]),
    }
    return entry


def file_association_properties(associations) -> dict:
    if not associations:
        return {}

    properties = {"CFBundleDocumentTypes": [document_type(a) for a in associations]}
    exported = [e for e in (exported_type(a) for a in associations) if e]
    if exported:
        properties["UTExportedTypeDeclarations"] = exported
    return properties


def read_custom_info_plist(app_info, project_root) -> Optional[dict]:
    """Load the user's bundle.macOS.infoPlist (relative to src-tauri).

    Returns None, after printing a warning, when the file is missing or is not
    a dictionary plist.
    """
    if not app_info.info_plist or not project_root:
        return None

    plist_path = Path(project_root) / "src-tauri" / app_info.info_plist
    if not plist_path.exists():
        print(f"  ⚠️  Warning: Custom Info.plist file not found: {plist_path}")
        return None

    try:
        with open(plist_path, "rb") as f:
            data = plistlib.load(f)
    except (plistlib.InvalidFileException, ExpatError, ValueError) as e:
        print(f"  ⚠️  Warning: Could not parse Info.plist file: {plist_path} ({e})")
        return None

    if not isinstance(data, dict):
        print(f"  ⚠️  Warning: Could not parse Info.plist file: {plist_path}")
        return None
    return data


def build_info_plist(app_info, project_root=None) -> dict:
    # The template is XML, so names like "Tom & Jerry" must be escaped first.
    variables = {key: escape(value) for key, value in template_vars(app_info).items()}
    rendered = process_template("Info.plist.template", variables)
    plist = plistlib.loads(rendered.encode("utf-8"))

    if app_info.category:
        plist["LSApplicationCategoryType"] = map_category(app_info.category)
    if app_info.copyright:
        plist["NSHumanReadableCopyright"] = app_info.copyright

    plist.update(file_association_properties(app_info.file_associations))

    custom = read_custom_info_plist(app_info, project_root)
    if custom:
        plist.update(custom)

    return plist


def generate_info_plist(macos_dir, app_info, project_root=None) -> Path:
    target_dir = Path(macos_dir) / app_info.target_name
    target_dir.mkdir(parents=True, exist_ok=True)

    plist = build_info_plist(app_info, project_root)
    out_path = target_dir / "Info.plist"
    with open(out_path, "wb") as f:
        plistlib.dump(plist, f, sort_keys=False)

    print(f"  ✅ Created {app_info.target_name}/Info.plist")
    return out_path
