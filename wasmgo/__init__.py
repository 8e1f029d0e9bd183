"""
wasmgo - Go WebAssembly plugin for the Wasmrun build runner.

This is the main package that exports the public API and the two host
entry points:

    wasm_plugin_info()    -> PluginInfo
    wasm_plugin_create()  -> Plugin

Hosts discover the plugin through the "wasmrun.plugins" entry point group.
"""

__version__ = "0.1.0"

from wasmgo.builder.go import GoBuilder, GoPlugin
from wasmgo.builder.types import BuildConfig, BuildResult, OptimizationLevel, TargetType
from wasmgo.errors import PluginError
from wasmgo.plugin.interface import Plugin, WasmBuilder
from wasmgo.plugin.manifest import ManifestError, PluginInfo

WasmGoPlugin = GoPlugin


def wasm_plugin_info() -> PluginInfo:
    """Return the plugin descriptor."""
    return WasmGoPlugin().info()


def wasm_plugin_create() -> Plugin:
    """Return a ready-to-use plugin instance."""
    return WasmGoPlugin()


__all__ = [
    "__version__",
    "BuildConfig",
    "BuildResult",
    "GoBuilder",
    "GoPlugin",
    "ManifestError",
    "OptimizationLevel",
    "Plugin",
    "PluginError",
    "PluginInfo",
    "TargetType",
    "WasmBuilder",
    "WasmGoPlugin",
    "wasm_plugin_create",
    "wasm_plugin_info",
]
