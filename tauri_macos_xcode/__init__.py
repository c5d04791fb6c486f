"""tauri-macos-xcode - Generate an Xcode project for macOS Tauri apps."""

__version__ = "0.1.0"

from .discovery import (
    AppInfo,
    ResourceMapping,
    detect_package_manager,
    find_project_root,
    get_app_info,
    read_tauri_config,
)
from .init_project import init
from .dev_command import dev

__all__ = [
    "AppInfo",
    "ResourceMapping",
    "detect_package_manager",
    "dev",
    "find_project_root",
    "get_app_info",
    "init",
    "read_tauri_config",
]
