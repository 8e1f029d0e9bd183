"""
Shared fixtures: plugin metadata and a fake command runner.
"""

from pathlib import Path

import pytest

from wasmgo.errors import PluginIOError
from wasmgo.plugin.manifest import (
    PluginCapabilities,
    PluginInfo,
    PluginSource,
    PluginType,
)
from wasmgo.system.commands import CommandOutput

VERSION_PROBES = (["version"], ["--version"])


class FakeRunner:
    """
    CommandRunner double.

    Tool probes succeed for the tools in `installed`; tools in `unspawnable`
    raise PluginIOError like a missing executable would. A build call exits
    with `build_returncode` and writes the -o file when `create_output` is set.
    """

    def __init__(
        self,
        installed=("tinygo", "go"),
        unspawnable=(),
        build_returncode=0,
        stdout="",
        stderr="",
        create_output=True,
    ):
        self.installed = set(installed)
        self.unspawnable = set(unspawnable)
        self.build_returncode = build_returncode
        self.stdout = stdout
        self.stderr = stderr
        self.create_output = create_output
        self.calls = []

    def run(self, command, args, cwd=None, verbose=False):
        self.calls.append((command, list(args), cwd))

        if command in self.unspawnable:
            raise PluginIOError(FileNotFoundError(2, "No such file", command))

        if list(args) in VERSION_PROBES:
            return CommandOutput(0 if command in self.installed else 127)

        if self.create_output and self.build_returncode == 0:
            output_path = Path(args[args.index("-o") + 1])
            output_path.write_bytes(b"\x00asm\x01\x00\x00\x00")

        return CommandOutput(self.build_returncode, self.stdout, self.stderr)

    @property
    def build_calls(self):
        return [c for c in self.calls if c[1] and c[1][0] == "build"]


@pytest.fixture
def plugin_info():
    return PluginInfo(
        name="go",
        version="0.1.0",
        description="Go WebAssembly plugin for Wasmrun",
        author="Test Author",
        extensions=("go",),
        entry_files=("main.go", "cmd/main.go", "app.go", "go.mod"),
        plugin_type=PluginType.EXTERNAL,
        source=PluginSource.registry("wasmgo", "0.1.0"),
        dependencies=("tinygo", "go"),
        capabilities=PluginCapabilities(
            compile_wasm=True,
            compile_webapp=False,
            live_reload=True,
            optimization=True,
            custom_targets=("wasm",),
        ),
    )


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def go_project(tmp_path):
    """A minimal Go module with a main.go."""
    project = tmp_path / "hello"
    project.mkdir()
    (project / "go.mod").write_text("module hello\n\ngo 1.21\n")
    (project / "main.go").write_text(
        'package main\n\nimport "fmt"\n\nfunc main() {\n    fmt.Println("Hello")\n}\n'
    )
    return project
