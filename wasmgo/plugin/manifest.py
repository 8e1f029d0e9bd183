"""
Plugin Manifest.

This module reads plugin metadata from a TOML manifest.

The manifest carries a [package] table and a vendor-specific
[package.metadata.wasm-plugin] table:

    [package.metadata.wasm-plugin]
    name = "go"
    extensions = ["go"]
    entry_files = ["main.go", "cmd/main.go", "app.go", "go.mod"]

    [package.metadata.wasm-plugin.capabilities]
    compile_wasm = true
    ...

    [package.metadata.wasm-plugin.dependencies]
    tools = ["tinygo", "go"]
    hints = { wasm-opt = "install binaryen" }   # optional
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Any

from wasmgo.config.toml_handler import TOMLError, parse_toml, read_toml

logger = logging.getLogger(__name__)

METADATA_TABLE = "package.metadata.wasm-plugin"
LOCAL_MANIFEST = "wasm-plugin.toml"
MANIFEST_ENV_VAR = "WASMGO_MANIFEST"


class ManifestError(Exception):
    """Base exception for manifest-related errors."""

    pass


class ValidationError(ManifestError):
    """Raised when a manifest is missing required metadata."""

    pass


class PluginType(Enum):
    BUILTIN = "builtin"
    EXTERNAL = "external"
    REGISTRY = "registry"


@dataclass(frozen=True)
class PluginSource:
    """
    Where the plugin was obtained from.

    Exactly one of the groups is populated depending on kind:
    registry (name, version), git (url, branch) or local (path).
    """

    kind: str
    name: str | None = None
    version: str | None = None
    url: str | None = None
    branch: str | None = None
    path: Path | None = None

    @classmethod
    def registry(cls, name: str, version: str) -> "PluginSource":
        return cls(kind="registry", name=name, version=version)

    @classmethod
    def git(cls, url: str, branch: str | None = None) -> "PluginSource":
        return cls(kind="git", url=url, branch=branch)

    @classmethod
    def local(cls, path: Path) -> "PluginSource":
        return cls(kind="local", path=path)


@dataclass(frozen=True)
class PluginCapabilities:
    compile_wasm: bool = True
    compile_webapp: bool = False
    live_reload: bool = False
    optimization: bool = False
    custom_targets: tuple[str, ...] = ()


@dataclass(frozen=True)
class PluginInfo:
    """
    Static description of a plugin, read once from its manifest.

    Attributes:
        name: Plugin name as known to the host (e.g. "go")
        version: Package version
        description: Package description
        author: First package author, or "Unknown"
        extensions: Source file extensions the plugin handles
        entry_files: Entry file candidates, in priority order
        plugin_type: Always EXTERNAL for manifest-loaded plugins
        source: Where the plugin comes from
        dependencies: External tool names the plugin needs on PATH
        capabilities: Capability flags
        install_hints: Extra (tool, hint) pairs declared in the manifest
    """

    name: str
    version: str
    description: str
    author: str
    extensions: tuple[str, ...]
    entry_files: tuple[str, ...]
    plugin_type: PluginType
    source: PluginSource | None
    dependencies: tuple[str, ...]
    capabilities: PluginCapabilities
    install_hints: tuple[tuple[str, str], ...] = ()


def _require(table: dict[str, Any], key: str, kind: type, where: str) -> Any:
    if key not in table:
        raise ValidationError(f"Missing required field: {where}.{key}")
    value = table[key]
    if not isinstance(value, kind):
        raise ValidationError(
            f"Field {where}.{key} must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _string_list(table: dict[str, Any], key: str, where: str) -> tuple[str, ...]:
    values = _require(table, key, list, where)
    for value in values:
        if not isinstance(value, str):
            raise ValidationError(f"Field {where}.{key} must contain only strings")
    return tuple(values)


def _table(table: dict[str, Any], key: str, where: str) -> dict[str, Any]:
    return _require(table, key, dict, where)


def _metadata_table(data: dict[str, Any]) -> dict[str, Any]:
    package = data.get("package")
    metadata = package.get("metadata") if isinstance(package, dict) else None
    wasm_plugin = metadata.get("wasm-plugin") if isinstance(metadata, dict) else None
    if not isinstance(wasm_plugin, dict):
        raise ValidationError(f"Missing [{METADATA_TABLE}] section in manifest")
    return wasm_plugin


def plugin_info_from_dict(data: dict[str, Any]) -> PluginInfo:
    """
    Build PluginInfo from parsed manifest data.

    Raises:
        ValidationError: If the package table or plugin metadata is incomplete
    """
    if not isinstance(data.get("package"), dict):
        raise ValidationError("Missing [package] section in manifest")
    package = data["package"]
    wasm_plugin = _metadata_table(data)

    capabilities = _table(wasm_plugin, "capabilities", f"{METADATA_TABLE}")
    caps_where = f"{METADATA_TABLE}.capabilities"
    dependencies = _table(wasm_plugin, "dependencies", f"{METADATA_TABLE}")
    deps_where = f"{METADATA_TABLE}.dependencies"

    hints = dependencies.get("hints", {})
    if not isinstance(hints, dict) or not all(
        isinstance(v, str) for v in hints.values()
    ):
        raise ValidationError(f"Field {deps_where}.hints must map tool names to strings")

    authors = package.get("authors") or []
    author = authors[0] if authors and isinstance(authors[0], str) else "Unknown"

    name = _require(package, "name", str, "package")
    version = _require(package, "version", str, "package")

    return PluginInfo(
        name=_require(wasm_plugin, "name", str, METADATA_TABLE),
        version=version,
        description=_require(package, "description", str, "package"),
        author=author,
        extensions=_string_list(wasm_plugin, "extensions", METADATA_TABLE),
        entry_files=_string_list(wasm_plugin, "entry_files", METADATA_TABLE),
        plugin_type=PluginType.EXTERNAL,
        source=PluginSource.registry(name, version),
        dependencies=_string_list(dependencies, "tools", deps_where),
        capabilities=PluginCapabilities(
            compile_wasm=_require(capabilities, "compile_wasm", bool, caps_where),
            compile_webapp=_require(capabilities, "compile_webapp", bool, caps_where),
            live_reload=_require(capabilities, "live_reload", bool, caps_where),
            optimization=_require(capabilities, "optimization", bool, caps_where),
            custom_targets=_string_list(capabilities, "custom_targets", caps_where),
        ),
        install_hints=tuple(hints.items()),
    )


def parse_manifest(manifest_path: Path) -> PluginInfo:
    """
    Parse a plugin manifest file.

    Args:
        manifest_path: Path to the TOML manifest

    Returns:
        PluginInfo

    Raises:
        ManifestError: If the file cannot be read or parsed
        ValidationError: If the plugin metadata is missing or malformed
    """
    try:
        data = read_toml(Path(manifest_path))
    except TOMLError as e:
        raise ManifestError(str(e)) from e
    return plugin_info_from_dict(data)


def embedded_manifest_text() -> str:
    """Return the manifest shipped inside the package."""
    return resources.files("wasmgo").joinpath("plugin.toml").read_text(encoding="utf-8")


def load_plugin_info(manifest_path: Path | None = None) -> PluginInfo:
    """
    Load plugin metadata.

    Lookup order: the explicit path, $WASMGO_MANIFEST, ./wasm-plugin.toml in
    the working directory, then the manifest embedded in the package.

    Raises:
        ManifestError: If the selected manifest is unreadable or invalid
    """
    if manifest_path is None and os.environ.get(MANIFEST_ENV_VAR):
        manifest_path = Path(os.environ[MANIFEST_ENV_VAR])

    if manifest_path is None and Path(LOCAL_MANIFEST).is_file():
        manifest_path = Path(LOCAL_MANIFEST)

    if manifest_path is not None:
        logger.debug("Loading plugin manifest from %s", manifest_path)
        return parse_manifest(manifest_path)

    logger.debug("Loading embedded plugin manifest")
    try:
        data = parse_toml(embedded_manifest_text(), source="embedded manifest")
    except TOMLError as e:
        raise ManifestError(str(e)) from e
    return plugin_info_from_dict(data)
