"""
wasmgo Builder - Go project detection and TinyGo compilation.

This module handles:
- Build configuration and result types
- External tool dependency checks
- Entry file resolution and compiler invocation
"""

__all__ = []
