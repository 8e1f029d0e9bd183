"""
wasmgo System Helpers - process execution and filesystem paths.
"""

__all__ = []
