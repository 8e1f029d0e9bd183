"""
wasmgo Plugin Descriptor - manifest metadata and host-facing interfaces.

This module handles:
- Plugin manifest parsing
- Plugin and WasmBuilder interfaces the host programs against
"""

__all__ = []
