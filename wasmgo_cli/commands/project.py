"""
wasmgo inspect / can-handle / clean / init commands.
"""

import shutil
import sys
from pathlib import Path
from typing import Any

from wasmgo.builder.go import GoPlugin
from wasmgo.config import write_default_settings
from wasmgo.errors import MissingEntryFileError
from wasmgo_cli.commands.common import has_module_file, print_header
from wasmgo_cli.commands.info import TOOL_DESCRIPTIONS


def _source_files(plugin: GoPlugin, project: str) -> list[str]:
    extensions = set(plugin.supported_extensions())
    try:
        return sorted(
            p.name
            for p in Path(project).iterdir()
            if p.is_file() and p.suffix[1:].lower() in extensions
        )
    except OSError:
        return []


def inspect_command(args: Any, plugin: GoPlugin) -> int:
    """Print a project analysis and dependency report."""
    project = args.project
    print_header(plugin)
    print("🔍 Inspecting Go project...")
    print()

    if not plugin.can_handle_project(project):
        print("❌ Invalid project: Not a Go project", file=sys.stderr)
        print(f"   Looking for go.mod or .go files in: {project}", file=sys.stderr)
        return 1

    print("📊 Project Analysis")
    print("═══════════════════")

    go_files = _source_files(plugin, project)
    if go_files:
        print(f"📁 Go files: {', '.join(go_files)}")
    if has_module_file(project):
        print("📦 Module: Found go.mod")

    try:
        entry = plugin.find_entry_file(project)
        print(f"🚪 Entry file: {entry.name}")
    except MissingEntryFileError as e:
        print(f"⚠️  {e}")

    print("🎯 Type: Go WebAssembly project")
    print("🔧 Build Tool: TinyGo")
    print()
    print("📋 Dependencies")
    print("═══════════════")

    missing = plugin.get_builder().check_dependencies()
    if missing:
        for dep in missing:
            print(f"❌ {dep}")
        print()
        print("⚠️  Some required dependencies are missing. Install them to proceed.")
        return 1

    for tool in plugin.info().dependencies:
        print(f"✅ {tool} - {TOOL_DESCRIPTIONS.get(tool, tool)}")
    print()
    print("🎉 Project is ready to compile!")
    return 0


def can_handle_command(args: Any, plugin: GoPlugin) -> int:
    project = args.project
    if not plugin.can_handle_project(project):
        print("❌ No, wasmgo cannot handle this project")
        print(f"🔍 Looking for go.mod or .go files in: {project}")
        return 1

    print("✅ Yes, wasmgo can handle this project")
    if has_module_file(project):
        print(f"📁 Found go.mod at: {Path(project) / 'go.mod'}")
    else:
        print(f"📁 Found Go files in: {project}")
    return 0


def clean_command(args: Any, plugin: GoPlugin) -> int:
    """Remove the project's dist directory."""
    project = args.project
    print(f"🧹 Cleaning project artifacts: {project}")

    dist_path = Path(project) / "dist"
    if dist_path.exists():
        try:
            shutil.rmtree(dist_path)
            print("✅ Cleaned dist directory")
        except OSError as e:
            print(f"⚠️  Failed to clean dist directory: {e}")
            return 1

    print("✅ Project cleaned successfully!")
    return 0


def init_command(args: Any, plugin: GoPlugin) -> int:
    """
    Write a commented wasmgo.toml into the project.

    Raises:
        ConfigError: If the file exists (without --force) or cannot be written
    """
    path = write_default_settings(Path(args.project), overwrite=args.force)
    print(f"📝 Wrote {path}")
    return 0
