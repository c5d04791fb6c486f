import pytest

from tauri_macos_xcode.template import (
    get_templates_dir,
    process_template,
    read_template,
    replace_template_vars,
    template_vars,
)


def test_replaces_single_variable():
    assert replace_template_vars("Hello {{NAME}}!", {"NAME": "World"}) == "Hello World!"


def test_replaces_repeated_and_multiple_variables():
    text = "{{PRODUCT}} v{{VERSION}} ({{PRODUCT}})"
    assert replace_template_vars(text, {"PRODUCT": "MyApp", "VERSION": "1.0.0"}) == "MyApp v1.0.0 (MyApp)"


def test_unknown_variables_are_left_alone():
    assert replace_template_vars("{{KNOWN}} {{UNKNOWN}}", {"KNOWN": "value"}) == "value {{UNKNOWN}}"
    assert replace_template_vars("{{VAR}}", {}) == "{{VAR}}"


def test_multiline_template():
    text = "Line 1: {{A}}\nLine 2: {{B}}\nLine 3: {{A}}"
    assert replace_template_vars(text, {"A": "x", "B": "y"}) == "Line 1: x\nLine 2: y\nLine 3: x"


def test_templates_dir_ships_every_template():
    names = {p.name for p in get_templates_dir().iterdir()}
    assert {
        "project.yml.template",
        "Info.plist.template",
        "entitlements.template",
        "Podfile.template",
        "build-rust.sh.template",
        "build.swift.template",
    } <= names


def test_read_template_keeps_tokens():
    content = read_template("project.yml.template")
    assert "{{PRODUCT_NAME}}" in content
    assert "{{BUNDLE_IDENTIFIER}}" in content
    assert "CFBundleName" in read_template("Info.plist.template")


def test_read_missing_template_raises():
    with pytest.raises(FileNotFoundError):
        read_template("non-existent.template")


def test_process_template_substitutes_app_info(app_info):
    content = process_template("Podfile.template", template_vars(app_info))
    assert "target 'TestApp_macOS'" in content
    assert "platform :osx, '11.0'" in content
    assert "{{" not in content
