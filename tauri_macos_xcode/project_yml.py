#!/usr/bin/env python3
"""project.yml generation - the XcodeGen project descriptor."""

import posixpath
from pathlib import Path
from typing import Optional

import yaml

from .info_plist import file_association_properties, map_category, read_custom_info_plist
from .template import process_template, template_vars

# Paths in the manifest are relative to src-tauri; project.yml sits in src-tauri/gen/apple-macos.
SRC_TAURI_PREFIX = "../../"

# First component of a Contents/ destination -> XcodeGen copyFiles destination
CONTENTS_DESTINATIONS = {
    "Resources": "resources",
    "SharedSupport": "sharedSupport",
    "Frameworks": "frameworks",
    "PlugIns": "plugins",
    "MacOS": "executables",
}

# Destinations whose contents Xcode has to code sign
SIGNED_DESTINATIONS = ("executables", "plugins")


def _yaml_quote_escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _header(rendered: str) -> str:
    lines = []
    for line in rendered.splitlines():
        if not line.startswith("#"):
            break
        lines.append(line)
    return "\n".join(lines) + "\n" if lines else ""


def parse_contents_destination(dest_path: str) -> tuple[str, Optional[str]]:
    """Map a Tauri `Contents/`-relative destination to (destination, subpath).

    >>> parse_contents_destination("embedded.provisionprofile")
    ('wrapper', None)
    >>> parse_contents_destination("Resources/fonts/a.ttf")
    ('resources', 'fonts')
    """
    parts = dest_path.split("/")
    if len(parts) == 1:
        return "wrapper", None

    destination = CONTENTS_DESTINATIONS.get(parts[0])
    if destination:
        middle = parts[1:-1]
        return destination, "/".join(middle) if middle else None

    # Unknown top-level directory: copy into the bundle wrapper, keeping the path.
    return "wrapper", "/".join(parts[:-1])


def resource_subpath(target: str) -> Optional[str]:
    """Directory part of a resource target; XcodeGen copies into directories only."""
    if not target or target == ".":
        return None
    if "/" in target:
        return posixpath.dirname(target) or None
    # A bare name is a directory unless it looks like a file.
    return None if "." in target else target


def framework_dependencies(frameworks) -> list[dict]:
    """Split bundle.macOS.frameworks into SDK frameworks and embedded binaries."""
    system, embedded, dylibs = [], [], []
    for fw in frameworks or []:
        if fw.endswith(".dylib"):
            dylibs.append(fw)
        elif "/" in fw or "\\" in fw:
            embedded.append(fw)
        else:
            system.append(fw)

    deps = [{"sdk": f"{fw}.framework"} for fw in system]
    deps += [{"framework": SRC_TAURI_PREFIX + fw, "embed": True} for fw in embedded + dylibs]
    return deps


def copy_file_source(path: str, destination: str, subpath: Optional[str] = None) -> dict:
    copy_files = {"destination": destination}
    if subpath:
        copy_files["subpath"] = subpath
    return {"path": SRC_TAURI_PREFIX + path, "buildPhase": {"copyFiles": copy_files}}


def bundle_file_entries(files) -> tuple[list[dict], list[dict]]:
    """Return (dependencies, sources) for bundle.macOS.files."""
    deps, sources = [], []
    for dest, src in (files or {}).items():
        destination, subpath = parse_contents_destination(dest)
        if destination in SIGNED_DESTINATIONS:
            deps.append({
                "framework": SRC_TAURI_PREFIX + src,
                "embed": True,
                "codeSign": True,
                "copy": {"destination": destination},
            })
        else:
            sources.append(copy_file_source(src, destination, subpath))
    return deps, sources


def resource_entries(resources) -> list[dict]:
    return [
        copy_file_source(resource.source, "resources", resource_subpath(resource.target))
        for resource in resources or []
    ]


def build_project(app_info, project_root=None) -> tuple[str, dict]:
    """Render the template and apply the manifest; returns (header, document)."""
    variables = {key: _yaml_quote_escape(value) for key, value in template_vars(app_info).items()}
    rendered = process_template("project.yml.template", variables)
    project = yaml.safe_load(rendered)

    target = project["targets"][app_info.target_name]
    settings = target["settings"]["base"]
    properties = target["info"]["properties"]

    if app_info.category:
        settings["INFOPLIST_KEY_LSApplicationCategoryType"] = map_category(app_info.category)
    if app_info.copyright:
        settings["INFOPLIST_KEY_NSHumanReadableCopyright"] = app_info.copyright

    properties.update(file_association_properties(app_info.file_associations))

    custom = read_custom_info_plist(app_info, project_root)
    if custom:
        properties.update(custom)

    signed_deps, file_sources = bundle_file_entries(app_info.files)
    target["dependencies"].extend(framework_dependencies(app_info.frameworks))
    target["dependencies"].extend(signed_deps)

    target["sources"].extend(file_sources)
    target["sources"].extend(resource_entries(app_info.resources))

    return _header(rendered), project


def generate_project_yml(macos_dir, app_info, project_root=None) -> Path:
    macos_dir = Path(macos_dir)
    macos_dir.mkdir(parents=True, exist_ok=True)

    header, project = build_project(app_info, project_root)
    body = yaml.safe_dump(project, sort_keys=False, default_flow_style=False, allow_unicode=True)

    out_path = macos_dir / "project.yml"
    out_path.write_text(header + body, encoding="utf-8")
    print("  ✅ Created project.yml")
    return out_path
