"""
External Tool Dependency Checks.

Install hints live in a lookup table keyed by tool name. Manifests can add
entries through [package.metadata.wasm-plugin.dependencies.hints].
"""

import logging
from collections.abc import Iterable, Mapping

from wasmgo.system.commands import CommandRunner, is_tool_installed

logger = logging.getLogger(__name__)

INSTALL_HINTS: Mapping[str, str] = {
    "tinygo": "install from https://tinygo.org",
    "go": "Go compiler",
}

# Download pages shown by the CLI under "Installation suggestions"
INSTALL_URLS: Mapping[str, str] = {
    "go": "Install Go: https://golang.org/dl/",
    "tinygo": "Install TinyGo: https://tinygo.org/getting-started/install/",
}


def merged_hints(extra: Mapping[str, str] | None = None) -> dict[str, str]:
    hints = dict(INSTALL_HINTS)
    if extra:
        hints.update(extra)
    return hints


def format_missing(tool: str, hints: Mapping[str, str] | None = None) -> str:
    """
    Format a missing tool for display.

    Returns:
        "tool (hint)" when a hint is known, otherwise the bare tool name
    """
    hint = (INSTALL_HINTS if hints is None else hints).get(tool)
    return f"{tool} ({hint})" if hint else tool


def check_dependencies(
    tools: Iterable[str],
    runner: CommandRunner | None = None,
    hints: Mapping[str, str] | None = None,
) -> list[str]:
    """
    Probe every tool and report the ones that are not usable.

    Args:
        tools: Tool names to probe
        runner: Runner used for the version probes
        hints: Hint table (defaults to INSTALL_HINTS)

    Returns:
        Formatted entries for missing tools, in input order
    """
    missing = []
    for tool in tools:
        if not is_tool_installed(tool, runner):
            logger.info("Required tool missing: %s", tool)
            missing.append(format_missing(tool, hints))
    return missing
