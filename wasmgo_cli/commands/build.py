"""
wasmgo run / compile commands.

Both validate the project and its tools, merge wasmgo.toml settings with
the command-line flags, and drive the plugin's builder.
"""

import logging
import sys
from pathlib import Path
from typing import Any

from wasmgo.builder.go import GoPlugin
from wasmgo.builder.types import BuildConfig, OptimizationLevel, TargetType
from wasmgo.config import Settings, load_settings
from wasmgo.errors import PluginError
from wasmgo_cli.commands.common import (
    check_dependencies,
    check_project_validity,
    print_header,
)

TARGETS = {"wasm": TargetType.STANDARD, "webapp": TargetType.WEB}


def resolve_settings(args: Any) -> Settings:
    """
    Merge command-line flags over the project's wasmgo.toml.

    Verbose settings also raise the root logger to DEBUG.

    Raises:
        ConfigError: If wasmgo.toml is present but invalid
    """
    settings = load_settings(Path(args.project))
    resolved = Settings(
        output=args.output if args.output is not None else settings.output,
        optimization=(
            args.optimization
            if args.optimization is not None
            else settings.optimization
        ),
        verbose=bool(args.verbose) or settings.verbose,
    )

    # wasmgo.toml can turn on verbosity after the CLI configured logging
    if resolved.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    return resolved


def _build_config(args: Any, settings: Settings, target: TargetType) -> BuildConfig:
    return BuildConfig(
        project_path=Path(args.project),
        output_directory=Path(settings.output),
        verbose=settings.verbose,
        optimization_level=OptimizationLevel(settings.optimization),
        target_type=target,
    )


def run_command(args: Any, plugin: GoPlugin) -> int:
    """
    Build a project for execution and print the artifact path.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    settings = resolve_settings(args)

    if settings.verbose:
        print_header(plugin)
        print("🚀 Preparing Go project for execution...")
        print(f"📁 Project: {args.project}")
        print(f"📦 Output: {settings.output}")
        print(f"🎯 Optimization: {settings.optimization}")
        print()

    if not check_project_validity(plugin, args.project):
        return 1
    if not check_dependencies(plugin):
        return 1

    config = _build_config(args, settings, TargetType.STANDARD)
    try:
        result = plugin.get_builder().build(config)
    except PluginError as e:
        print(f"❌ Failed to prepare project for execution: {e}", file=sys.stderr)
        return 1

    if settings.verbose:
        print("✅ Project ready for execution!")
        print(f"🎯 Entry point: {result.wasm_file_path}")
    else:
        print(result.wasm_file_path)
    return 0


def compile_command(args: Any, plugin: GoPlugin) -> int:
    """
    Compile a project and report the produced files.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    settings = resolve_settings(args)

    if settings.verbose:
        print_header(plugin)
        print("🔨 Compiling Go project to WebAssembly...")
        print(f"📁 Project: {args.project}")
        print(f"📦 Output: {settings.output}")
        print(f"🎯 Optimization: {settings.optimization}")
        print(f"🏗️  Target: {args.target}")
        print()

    if not check_project_validity(plugin, args.project):
        return 1
    if not check_dependencies(plugin):
        return 1

    config = _build_config(args, settings, TARGETS[args.target])
    try:
        result = plugin.get_builder().build(config)
    except PluginError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print("✅ Compilation completed successfully!")
    print(f"🎯 WASM file: {result.wasm_file_path}")

    if result.js_file_path is not None:
        print(f"📄 JS bindings: {result.js_file_path}")

    if result.additional_files:
        print(f"📂 Additional files: {len(result.additional_files)}")
        if settings.verbose:
            for path in result.additional_files:
                print(f"   • {path}")
    return 0
