"""
Shared helpers for CLI commands.
"""

import sys

from wasmgo import __version__
from wasmgo.builder.deps import INSTALL_URLS
from wasmgo.builder.go import GoPlugin, MODULE_FILE
from wasmgo.system.paths import join_paths


def print_header(plugin: GoPlugin) -> None:
    info = plugin.info()
    print(f"🐹 wasmgo v{__version__}")
    print(f"   {info.description}")
    print()


def has_module_file(project: str) -> bool:
    return join_paths(project, MODULE_FILE).exists()


def check_project_validity(plugin: GoPlugin, project: str) -> bool:
    """Print a diagnostic and return False if the project is not a Go project."""
    if not plugin.can_handle_project(project):
        print("❌ Error: Not a valid Go project", file=sys.stderr)
        print(f"   Looking for go.mod or .go files in: {project}", file=sys.stderr)
        print("   Make sure you're in a Go project directory", file=sys.stderr)
        return False
    return True


def install_suggestions(missing: list[str]) -> list[str]:
    """Return download hints for the missing tool entries."""
    tools = {entry.split(" ", 1)[0] for entry in missing}
    return [hint for tool, hint in INSTALL_URLS.items() if tool in tools]


def check_dependencies(plugin: GoPlugin) -> bool:
    """Print missing tools with install suggestions; return False if any."""
    missing = plugin.get_builder().check_dependencies()
    if not missing:
        return True

    print("❌ Missing required dependencies:", file=sys.stderr)
    for dep in missing:
        print(f"   • {dep}", file=sys.stderr)

    suggestions = install_suggestions(missing)
    if suggestions:
        print(file=sys.stderr)
        print("💡 Installation suggestions:", file=sys.stderr)
        for suggestion in suggestions:
            print(f"   • {suggestion}", file=sys.stderr)
    return False
