"""
mruby build configurator
Selects the toolchain, compiler defines and core gems for the embedded
mruby runtime from the host platform and environment
"""

__version__ = "1.0.0"

from .directive import (
    BUILD_TYPE_VAR,
    CORE_GEMS,
    UTF8_STRING_DEFINE,
    BuildDirective,
    BuildFlags,
    Toolchain,
    compute_directive,
)
from .main import BuildConfigurator

__all__ = [
    "BuildConfigurator",
    "BuildDirective",
    "BuildFlags",
    "Toolchain",
    "compute_directive",
    "BUILD_TYPE_VAR",
    "CORE_GEMS",
    "UTF8_STRING_DEFINE",
    "__version__",
]
