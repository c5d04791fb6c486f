#!/usr/bin/env python3
"""Locate a Tauri project and derive the app info every generator works from."""

import json
import os
import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .globs import expand_glob, get_glob_base, has_magic

CONFIG_FILE = "tauri.conf.json"
MACOS_CONFIG_FILE = "tauri.macos.conf.json"

DEFAULT_PRODUCT_NAME = "TauriApp"
DEFAULT_IDENTIFIER = "com.example.app"
DEFAULT_VERSION = "0.1.0"
DEFAULT_MACOS_TARGET = "11.0"

LOCK_FILES = [
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("bun.lockb", "bun"),
    ("bun.lock", "bun"),
    ("package-lock.json", "npm"),
]


@dataclass
class ResourceMapping:
    source: str
    target: str = ""


@dataclass
class AppInfo:
    product_name: str
    identifier: str
    bundle_id_prefix: str
    version: str
    macos_deployment_target: str
    category: Optional[str] = None
    copyright: Optional[str] = None
    files: Optional[dict] = None
    frameworks: Optional[list] = None
    resources: Optional[list] = None
    file_associations: Optional[list] = None
    entitlements: Optional[str] = None
    info_plist: Optional[str] = None

    @property
    def target_name(self) -> str:
        return f"{self.product_name}_macOS"


def find_project_root(start_dir=None) -> Path:
    """Walk up from `start_dir` (default: cwd) to the first dir holding src-tauri/."""
    directory = Path(start_dir or os.getcwd()).resolve()
    while directory != directory.parent:
        if (directory / "src-tauri").exists():
            return directory
        directory = directory.parent
    raise FileNotFoundError("Could not find Tauri project root (no src-tauri directory)")


def merge_patch(base, patch):
    """Apply an RFC 7396 JSON merge patch; how Tauri layers platform configs."""
    if not isinstance(patch, dict):
        return patch
    merged = dict(base) if isinstance(base, dict) else {}
    for key, value in patch.items():
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = merge_patch(merged.get(key), value)
    return merged


def read_tauri_config(project_root) -> dict:
    """Parse src-tauri/tauri.conf.json, with tauri.macos.conf.json merged on top."""
    src_tauri = Path(project_root) / "src-tauri"
    config_path = src_tauri / CONFIG_FILE
    if not config_path.exists():
        raise FileNotFoundError(f"{CONFIG_FILE} not found at {config_path}")

    config = json.loads(config_path.read_text(encoding="utf-8"))

    override_path = src_tauri / MACOS_CONFIG_FILE
    if override_path.exists():
        config = merge_patch(config, json.loads(override_path.read_text(encoding="utf-8")))

    return config


def _normalize_target(target: str) -> str:
    if target in (".", "./"):
        return ""
    return target[2:] if target.startswith("./") else target


def _directory_pattern(pattern: str, cwd: Path) -> str:
    # A bare directory means "everything below it", as Tauri bundles it.
    if not has_magic(pattern) and (cwd / pattern).is_dir():
        return pattern.rstrip("/") + "/**/*"
    return pattern


def parse_resources(resources, base_path=None) -> Optional[list]:
    """Expand `bundle.resources` into ResourceMapping entries.

    The list form copies every match to the Resources root. The object form
    maps `{pattern: target}` and keeps each match's path below the pattern's
    static prefix, so `{"docs/readme.md": "help"}` lands at `help/readme.md`.
    """
    if not resources:
        return None

    cwd = Path(base_path or os.getcwd())
    results = []

    if isinstance(resources, list):
        for pattern in resources:
            for file in expand_glob(_directory_pattern(pattern, cwd), cwd):
                results.append(ResourceMapping(source=file, target=""))
        return results or None

    for pattern, target in resources.items():
        normalized_target = _normalize_target(target)
        expanded = _directory_pattern(pattern, cwd)
        glob_base = get_glob_base(expanded.removeprefix("./"))
        for file in expand_glob(expanded, cwd):
            relative = file[len(glob_base) + 1:] if glob_base else file
            final = posixpath.join(normalized_target, relative) if normalized_target else relative
            results.append(ResourceMapping(source=file, target=final))

    return results or None


def parse_file_associations(associations) -> Optional[list]:
    """Copy each association with leading dots stripped from its extensions."""
    if not associations:
        return None
    return [
        {**assoc, "ext": [ext[1:] if ext.startswith(".") else ext for ext in assoc.get("ext", [])]}
        for assoc in associations
    ]


def get_app_info(config: dict, project_root=None) -> AppInfo:
    bundle = config.get("bundle") or {}
    macos = bundle.get("macOS") or {}

    identifier = config.get("identifier") or bundle.get("identifier") or DEFAULT_IDENTIFIER
    bundle_id_prefix = ".".join(identifier.split(".")[:-1])

    # Resource globs are relative to src-tauri, like the rest of the manifest.
    base_path = Path(project_root) / "src-tauri" if project_root else None

    return AppInfo(
        product_name=config.get("productName") or DEFAULT_PRODUCT_NAME,
        identifier=identifier,
        bundle_id_prefix=bundle_id_prefix,
        version=config.get("version") or DEFAULT_VERSION,
        macos_deployment_target=macos.get("minimumSystemVersion") or DEFAULT_MACOS_TARGET,
        category=bundle.get("category"),
        copyright=bundle.get("copyright"),
        files=macos.get("files"),
        frameworks=macos.get("frameworks"),
        resources=parse_resources(bundle.get("resources"), base_path),
        file_associations=parse_file_associations(bundle.get("fileAssociations")),
        entitlements=macos.get("entitlements"),
        info_plist=macos.get("infoPlist"),
    )


def get_dev_command(config: dict) -> Optional[tuple[str, Optional[str]]]:
    """Return (script, cwd) for build.beforeDevCommand, or None.

    Tauri accepts either a plain string or `{"script": ..., "cwd": ...}`.
    """
    command = (config.get("build") or {}).get("beforeDevCommand")
    if not command:
        return None
    if isinstance(command, str):
        return command, None
    script = command.get("script")
    if not script:
        return None
    return script, command.get("cwd")


def detect_package_manager(project_root) -> str:
    """Guess npm/yarn/pnpm/bun from package.json's packageManager, then lock files."""
    root = Path(project_root)
    pkg_path = root / "package.json"
    if pkg_path.exists():
        try:
            manager = json.loads(pkg_path.read_text(encoding="utf-8")).get("packageManager")
        except (json.JSONDecodeError, AttributeError):
            manager = None
        if not isinstance(manager, str):
            manager = ""
        for name in ("pnpm", "yarn", "bun", "npm"):
            if manager.startswith(name):
                return name

    for lock_file, name in LOCK_FILES:
        if (root / lock_file).exists():
            return name

    return "npm"
