"""
Build Configuration and Result Types.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class OptimizationLevel(Enum):
    DEBUG = "debug"
    RELEASE = "release"
    SIZE = "size"


class TargetType(Enum):
    STANDARD = "standard"
    WEB = "web"


@dataclass(frozen=True)
class BuildConfig:
    """
    Parameters for a single build call.

    Attributes:
        project_path: Go project directory
        output_directory: Directory the .wasm file is written to
        verbose: Print the compiler command line and output
        optimization_level: Requested optimization level
        target_type: Standard module or web application bundle
    """

    project_path: Path
    output_directory: Path
    verbose: bool = False
    optimization_level: OptimizationLevel = OptimizationLevel.RELEASE
    target_type: TargetType = TargetType.STANDARD


@dataclass(frozen=True)
class BuildResult:
    """
    Output of a successful build.

    Attributes:
        wasm_file_path: Compiled WebAssembly artifact
        js_file_path: Companion JavaScript loader, if any
        additional_files: Other produced files
        is_wasm_bindgen: Whether the artifact needs wasm-bindgen glue
    """

    wasm_file_path: Path
    js_file_path: Path | None = None
    additional_files: list[Path] = field(default_factory=list)
    is_wasm_bindgen: bool = False
