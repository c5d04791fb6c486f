#!/usr/bin/env python3
"""Template loading and {{TOKEN}} substitution."""

import re
from pathlib import Path

TOKEN_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def replace_template_vars(template: str, variables: dict) -> str:
    """Replace every {{NAME}} with variables[NAME]; unknown tokens stay as-is."""
    def substitute(match):
        key = match.group(1)
        return str(variables[key]) if key in variables else match.group(0)

    return TOKEN_PATTERN.sub(substitute, template)


def get_templates_dir() -> Path:
    templates_dir = Path(__file__).resolve().parent / "templates"
    if not templates_dir.is_dir():
        raise FileNotFoundError("Could not find templates directory")
    return templates_dir


def read_template(name: str) -> str:
    path = get_templates_dir() / name
    if not path.is_file():
        raise FileNotFoundError(f"Template not found: {name}")
    return path.read_text(encoding="utf-8")


def process_template(name: str, variables: dict) -> str:
    return replace_template_vars(read_template(name), variables)


def template_vars(app_info) -> dict:
    """The fixed variable set every generator renders with."""
    return {
        "PRODUCT_NAME": app_info.product_name,
        "BUNDLE_IDENTIFIER": app_info.identifier,
        "BUNDLE_ID_PREFIX": app_info.bundle_id_prefix,
        "VERSION": app_info.version,
        "MACOS_DEPLOYMENT_TARGET": app_info.macos_deployment_target,
    }
