"""
wasmgo info / frameworks / check-deps commands.
"""

from typing import Any

from wasmgo.builder.go import GoPlugin
from wasmgo_cli.commands.common import install_suggestions, print_header

TOOL_DESCRIPTIONS = {
    "go": "Go compiler",
    "tinygo": "WebAssembly compiler for Go",
}


def check_deps_command(args: Any, plugin: GoPlugin) -> int:
    print_header(plugin)
    print("🔍 Checking system dependencies...")
    print()

    missing = plugin.get_builder().check_dependencies()

    if not missing:
        print("✅ All required dependencies are available!")
        print()
        print("📋 Available tools:")
        for tool in plugin.info().dependencies:
            print(f"   ✅ {tool} - {TOOL_DESCRIPTIONS.get(tool, tool)}")
        return 0

    print("❌ Missing required dependencies:")
    for dep in missing:
        print(f"   • {dep}")

    print()
    print("💡 Installation suggestions:")
    for suggestion in install_suggestions(missing):
        print(f"   • {suggestion}")
    print("   • On macOS with Homebrew: brew install go tinygo")
    print("   • On Ubuntu/Debian: sudo apt install golang-go && follow TinyGo instructions")
    return 1


def info_command(args: Any, plugin: GoPlugin) -> int:
    info = plugin.info()
    caps = info.capabilities

    print_header(plugin)
    print("🔧 Plugin Information")
    print("═════════════════════")
    print(f"Name: {info.name}")
    print(f"Version: {info.version}")
    print(f"Description: {info.description}")
    print(f"Author: {info.author}")
    print(f"Extensions: {', '.join(info.extensions)}")
    print(f"Entry files: {', '.join(info.entry_files)}")
    print(f"Dependencies: {', '.join(info.dependencies)}")
    print()

    print("🎯 Capabilities")
    print("═══════════════")
    flags = [
        ("Standard WASM compilation", caps.compile_wasm),
        ("Web application bundles", caps.compile_webapp),
        ("Live reload", caps.live_reload),
        ("Multiple optimization levels", caps.optimization),
    ]
    for label, enabled in flags:
        print(f"{'✅' if enabled else '❌'} {label}")
    if caps.custom_targets:
        print(f"🎯 Targets: {', '.join(caps.custom_targets)}")
    print()

    print("📄 Usage")
    print("════════")
    print("Primary (via Wasmrun):")
    print("   wasmrun run ./my-go-project")
    print("   wasmrun compile ./my-project --optimization size")
    print()
    print("Standalone (testing/development):")
    print("   wasmgo run -p ./my-project")
    print("   wasmgo compile -p ./my-project --target webapp")
    print("   wasmgo inspect -p ./my-project")
    return 0


def frameworks_command(args: Any, plugin: GoPlugin) -> int:
    print_header(plugin)
    print("🌐 Supported Frameworks & Project Types")
    print("═══════════════════════════════════════")
    print()
    print("📦 Project Types:")
    print("   • Standard WASM    - Basic Go → WebAssembly compilation via TinyGo")
    print("   • Web Applications - Full Go web apps compiled to WebAssembly")
    print()
    print("🔧 Build Tools:")
    print("   • TinyGo           - Primary WebAssembly compiler for Go")
    print("   • go               - Standard Go toolchain for dependency management")
    print()
    print("🎯 Optimization Levels:")
    print("   • debug            - Fast compilation, debug symbols")
    print("   • release          - Balanced optimization")
    print("   • size             - Smallest possible output")
    return 0
