"""
Tests for plugin manifest parsing.

This test suite covers:
1. Parsing a complete manifest
2. Author fallback and manifest-declared install hints
3. Missing sections and fields (typed errors, no process abort)
4. Manifest lookup order (explicit, environment, working directory, embedded)
"""

import tempfile
from pathlib import Path

import pytest

import wasmgo
from conftest import FakeRunner
from wasmgo.builder.go import GoPlugin
from wasmgo.plugin.manifest import (
    ManifestError,
    PluginSource,
    PluginType,
    ValidationError,
    load_plugin_info,
    parse_manifest,
)

VALID_MANIFEST = """
[package]
name = "wasmgo"
version = "1.2.3"
authors = ["Gopher <gopher@example.com>", "Second"]
description = "Go plugin"
license = "MIT"

[package.metadata.wasm-plugin]
name = "go"
extensions = ["go"]
entry_files = ["main.go", "app.go"]

[package.metadata.wasm-plugin.capabilities]
compile_wasm = true
compile_webapp = true
live_reload = false
optimization = true
custom_targets = ["wasm", "wasi"]

[package.metadata.wasm-plugin.dependencies]
tools = ["tinygo", "go", "wasm-opt"]
hints = { wasm-opt = "install binaryen" }
"""


def write_manifest(directory: Path, content: str, name: str = "wasm-plugin.toml") -> Path:
    path = directory / name
    path.write_text(content)
    return path


class TestManifestParsing:
    """Test manifest parsing and validation."""

    def test_parse_valid_manifest(self):
        """Should parse every field of a complete manifest."""
        with tempfile.TemporaryDirectory() as tmpdir:
            info = parse_manifest(write_manifest(Path(tmpdir), VALID_MANIFEST))

            assert info.name == "go"
            assert info.version == "1.2.3"
            assert info.description == "Go plugin"
            assert info.author == "Gopher <gopher@example.com>"
            assert info.extensions == ("go",)
            assert info.entry_files == ("main.go", "app.go")
            assert info.plugin_type is PluginType.EXTERNAL
            assert info.source.kind == "registry"
            assert info.source.name == "wasmgo"
            assert info.source.version == "1.2.3"
            assert info.dependencies == ("tinygo", "go", "wasm-opt")
            assert info.capabilities.compile_webapp is True
            assert info.capabilities.live_reload is False
            assert info.capabilities.custom_targets == ("wasm", "wasi")
            assert info.install_hints == (("wasm-opt", "install binaryen"),)

    def test_author_fallback(self):
        """Missing or empty authors become 'Unknown'."""
        content = VALID_MANIFEST.replace(
            'authors = ["Gopher <gopher@example.com>", "Second"]', "authors = []"
        )
        with tempfile.TemporaryDirectory() as tmpdir:
            info = parse_manifest(write_manifest(Path(tmpdir), content))

            assert info.author == "Unknown"

    def test_missing_metadata_section(self):
        """A manifest without the plugin table raises instead of aborting."""
        content = '[package]\nname = "x"\nversion = "0.1.0"\ndescription = "x"\n'
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(ValidationError, match="Missing \\[package.metadata.wasm-plugin\\]"):
                parse_manifest(write_manifest(Path(tmpdir), content))

    def test_missing_package_section(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(ValidationError, match="Missing \\[package\\]"):
                parse_manifest(write_manifest(Path(tmpdir), 'title = "x"\n'))

    def test_missing_required_field(self):
        """Each required plugin field is checked."""
        content = VALID_MANIFEST.replace('entry_files = ["main.go", "app.go"]\n', "")
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(ValidationError, match="entry_files"):
                parse_manifest(write_manifest(Path(tmpdir), content))

    def test_missing_capability(self):
        content = VALID_MANIFEST.replace("live_reload = false\n", "")
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(ValidationError, match="capabilities.live_reload"):
                parse_manifest(write_manifest(Path(tmpdir), content))

    def test_wrong_field_type(self):
        content = VALID_MANIFEST.replace('extensions = ["go"]', 'extensions = "go"')
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(ValidationError, match="must be list"):
                parse_manifest(write_manifest(Path(tmpdir), content))

    def test_plugin_info_is_hashable(self):
        """Parsed metadata is immutable all the way down."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_manifest(Path(tmpdir), VALID_MANIFEST)
            first = parse_manifest(path)
            second = parse_manifest(path)

            assert hash(first) == hash(second)
            assert len({first, second}) == 1

    def test_manifest_hints_reach_dependency_check(self):
        """Tools declared with a manifest hint are reported with it."""
        with tempfile.TemporaryDirectory() as tmpdir:
            info = parse_manifest(write_manifest(Path(tmpdir), VALID_MANIFEST))
            plugin = GoPlugin(info, FakeRunner(installed=("tinygo", "go")))

            assert plugin.check_dependencies() == ["wasm-opt (install binaryen)"]

    def test_validation_error_is_manifest_error(self):
        assert issubclass(ValidationError, ManifestError)

    def test_manifest_file_not_found(self):
        with pytest.raises(ManifestError, match="TOML file not found"):
            parse_manifest(Path("/nonexistent/wasm-plugin.toml"))

    def test_invalid_toml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(ManifestError, match="Failed to parse TOML"):
                parse_manifest(write_manifest(Path(tmpdir), "[package\nname ="))


class TestManifestLookup:
    """Test load_plugin_info lookup order."""

    def test_embedded_manifest(self, tmp_path, monkeypatch):
        """The packaged manifest describes the Go plugin."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("WASMGO_MANIFEST", raising=False)

        info = load_plugin_info()

        assert info.name == "go"
        assert info.version == wasmgo.__version__
        assert info.dependencies == ("tinygo", "go")
        assert "main.go" in info.entry_files

    def test_working_directory_manifest(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("WASMGO_MANIFEST", raising=False)
        write_manifest(tmp_path, VALID_MANIFEST)

        assert load_plugin_info().version == "1.2.3"

    def test_environment_manifest(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = write_manifest(tmp_path, VALID_MANIFEST, name="custom.toml")
        monkeypatch.setenv("WASMGO_MANIFEST", str(path))

        assert load_plugin_info().entry_files == ("main.go", "app.go")

    def test_explicit_path_wins(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("WASMGO_MANIFEST", str(tmp_path / "missing.toml"))
        path = write_manifest(tmp_path, VALID_MANIFEST, name="explicit.toml")

        assert load_plugin_info(path).author == "Gopher <gopher@example.com>"

    def test_host_entry_points(self, tmp_path, monkeypatch):
        """wasm_plugin_info and wasm_plugin_create agree."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("WASMGO_MANIFEST", raising=False)

        info = wasmgo.wasm_plugin_info()
        plugin = wasmgo.wasm_plugin_create()

        assert plugin.info() == info
        assert plugin.get_builder().language_name() == "Go"


class TestPluginSource:
    """Test PluginSource constructors."""

    def test_registry_source(self):
        source = PluginSource.registry("wasmgo", "0.1.0")

        assert (source.kind, source.name, source.version) == ("registry", "wasmgo", "0.1.0")
        assert source.url is None and source.path is None

    def test_git_source(self):
        source = PluginSource.git("https://github.com/anistark/wasmgo", branch="main")

        assert source.kind == "git"
        assert source.url == "https://github.com/anistark/wasmgo"
        assert source.branch == "main"
        assert source.name is None

    def test_git_source_default_branch(self):
        assert PluginSource.git("https://example.com/repo.git").branch is None

    def test_local_source(self, tmp_path):
        source = PluginSource.local(tmp_path)

        assert source.kind == "local"
        assert source.path == tmp_path
        assert source.url is None
