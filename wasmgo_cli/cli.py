"""
wasmgo CLI - Go WebAssembly plugin for Wasmrun.

Usage:
    wasmgo run [-p PATH] [-o DIR] [--optimization LEVEL] [-v]
    wasmgo compile [-p PATH] [-o DIR] [--optimization LEVEL] [--target TARGET] [-v]
    wasmgo inspect [-p PATH]
    wasmgo can-handle PATH
    wasmgo check-deps
    wasmgo clean PATH
    wasmgo info
    wasmgo frameworks
    wasmgo init [PATH]
"""

import argparse
import logging
import sys
from pathlib import Path

from wasmgo import __version__
from wasmgo.builder.go import GoPlugin
from wasmgo.config import ConfigError
from wasmgo.errors import PluginError
from wasmgo.plugin.manifest import ManifestError

OPTIMIZATION_CHOICES = ["debug", "release", "size"]
TARGET_CHOICES = ["wasm", "webapp"]


def _add_build_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-p",
        "--project",
        default=".",
        metavar="PATH",
        help="Project path containing go.mod or main.go",
    )
    # None means "not given": wasmgo.toml or the built-in default applies
    parser.add_argument(
        "-o", "--output", default=None, metavar="DIR", help="Output directory"
    )
    parser.add_argument(
        "--optimization",
        choices=OPTIMIZATION_CHOICES,
        default=None,
        help="Optimization level (default: release)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose compilation output",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="wasmgo",
        description="Go WebAssembly plugin for Wasmrun",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--manifest",
        type=Path,
        default=None,
        metavar="FILE",
        help="Read plugin metadata from this manifest",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    run = sub.add_parser(
        "run", aliases=["r"], help="Run a Go WebAssembly project for execution"
    )
    _add_build_arguments(run)

    compile_ = sub.add_parser(
        "compile", aliases=["c", "build"], help="Compile a Go project to WebAssembly"
    )
    _add_build_arguments(compile_)
    compile_.add_argument(
        "--target", choices=TARGET_CHOICES, default="wasm", help="Target type"
    )

    inspect = sub.add_parser(
        "inspect",
        aliases=["check"],
        help="Inspect project structure, dependencies, and frameworks",
    )
    inspect.add_argument("-p", "--project", default=".", metavar="PATH")

    can_handle = sub.add_parser(
        "can-handle", help="Check if wasmgo can handle the project"
    )
    can_handle.add_argument("project", metavar="PATH")

    sub.add_parser(
        "check-deps", aliases=["deps"], help="Check dependencies and system requirements"
    )

    clean = sub.add_parser("clean", help="Clean build artifacts")
    clean.add_argument("project", metavar="PATH")

    sub.add_parser("info", help="Show plugin information and capabilities")
    sub.add_parser("frameworks", help="Show supported frameworks and project types")

    init = sub.add_parser("init", help="Write a wasmgo.toml with default settings")
    init.add_argument("project", nargs="?", default=".", metavar="PATH")
    init.add_argument("--force", action="store_true", help="Overwrite an existing file")

    return parser


# Alias -> canonical subcommand
COMMAND_ALIASES = {
    "r": "run",
    "c": "compile",
    "build": "compile",
    "check": "inspect",
    "deps": "check-deps",
}


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def dispatch(command: str, args: argparse.Namespace, plugin: GoPlugin) -> int:
    """Route a canonical subcommand name to its handler."""
    if command == "run":
        from wasmgo_cli.commands.build import run_command

        return run_command(args, plugin)
    elif command == "compile":
        from wasmgo_cli.commands.build import compile_command

        return compile_command(args, plugin)
    elif command == "inspect":
        from wasmgo_cli.commands.project import inspect_command

        return inspect_command(args, plugin)
    elif command == "can-handle":
        from wasmgo_cli.commands.project import can_handle_command

        return can_handle_command(args, plugin)
    elif command == "clean":
        from wasmgo_cli.commands.project import clean_command

        return clean_command(args, plugin)
    elif command == "init":
        from wasmgo_cli.commands.project import init_command

        return init_command(args, plugin)
    elif command == "check-deps":
        from wasmgo_cli.commands.info import check_deps_command

        return check_deps_command(args, plugin)
    elif command == "info":
        from wasmgo_cli.commands.info import info_command

        return info_command(args, plugin)
    elif command == "frameworks":
        from wasmgo_cli.commands.info import frameworks_command

        return frameworks_command(args, plugin)

    raise ValueError(f"Unknown command: {command}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the wasmgo CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    verbose = bool(getattr(args, "verbose", False))
    setup_logging(verbose)

    try:
        plugin = GoPlugin.from_manifest(args.manifest)
        command = COMMAND_ALIASES.get(args.command, args.command)
        return dispatch(command, args, plugin)

    except (PluginError, ManifestError, ConfigError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
