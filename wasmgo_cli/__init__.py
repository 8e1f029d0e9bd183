"""
wasmgo CLI - standalone command-line interface for the Go plugin.

Lets developers compile, inspect and check Go projects without a Wasmrun
host.
"""

__all__ = []
