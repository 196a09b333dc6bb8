"""
Build directive computation for the embedded mruby runtime

Decides the toolchain, debug mode, compiler defines and gem selection
from the host platform identifier and the process environment.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


# Set by the CMake side of the game build (ProvideMRuby.cmake)
BUILD_TYPE_VAR = "TSC_BUILD_TYPE"

# Lets mruby's String class handle non-ascii characters properly
UTF8_STRING_DEFINE = "MRB_UTF8_STRING"

# Platforms whose system compiler is clang
CLANG_PLATFORMS = ("freebsd", "openbsd")

# Gems from mruby's core collection. The binaries (mruby, mirb) are not
# built, neither are the rather unusual parts of mruby that are not needed.
CORE_GEMS: Tuple[str, ...] = (
    "mruby-print",
    "mruby-sprintf",
    "mruby-math",
    "mruby-time",
    "mruby-struct",
    "mruby-sleep",
    "mruby-enum-ext",
    "mruby-string-ext",
    "mruby-numeric-ext",
    "mruby-array-ext",
    "mruby-hash-ext",
    "mruby-range-ext",
    "mruby-proc-ext",
    "mruby-symbol-ext",
    "mruby-random",
    "mruby-object-ext",
    "mruby-kernel-ext",
)


class Toolchain(Enum):
    """Compiler suite used to build mruby"""

    GCC = "gcc"
    CLANG = "clang"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BuildFlags:
    """Preprocessor defines plus the debug switch"""

    defines: Tuple[str, ...] = (UTF8_STRING_DEFINE,)
    debug: bool = False


@dataclass(frozen=True)
class BuildDirective:
    """Everything the build orchestrator needs to configure mruby"""

    toolchain: Toolchain
    flags: BuildFlags = field(default_factory=BuildFlags)
    gems: Tuple[str, ...] = CORE_GEMS

    @property
    def debug(self) -> bool:
        return self.flags.debug

    @property
    def defines(self) -> Tuple[str, ...]:
        return self.flags.defines

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain representation of the directive

        Returns:
            Dictionary with toolchain, debug, defines and gems
        """
        return {
            "toolchain": self.toolchain.value,
            "debug": self.debug,
            "defines": list(self.defines),
            "gems": list(self.gems),
        }


def select_toolchain(platform_id: Optional[str]) -> Toolchain:
    """Clang on the BSDs, gcc everywhere else"""
    platform_id = (platform_id or "").lower()
    if any(name in platform_id for name in CLANG_PLATFORMS):
        return Toolchain.CLANG
    return Toolchain.GCC


def is_debug_build(env: Optional[Mapping[str, str]],
                   build_type_var: str = BUILD_TYPE_VAR) -> bool:
    """
    Check whether the build type asks for a debug build

    Any value containing "debug" in any case counts, so "xdebugging" and
    "nodebug" both enable debug mode while "RelWithDebInfo" does not.

    Args:
        env: Environment mapping
        build_type_var: Name of the build type variable

    Returns:
        True if debug mode should be enabled
    """
    if not env or not isinstance(build_type_var, str):
        return False
    build_type = env.get(build_type_var)
    if not isinstance(build_type, str):
        return False
    return "debug" in build_type.lower()


def compute_directive(platform_id: Optional[str],
                      env: Optional[Mapping[str, str]],
                      build_type_var: str = BUILD_TYPE_VAR) -> BuildDirective:
    """
    Compute the build directive for the given host

    Args:
        platform_id: Host platform identifier (e.g. "x86_64-linux")
        env: Environment mapping, only the build type variable is read
        build_type_var: Name of the build type variable

    Returns:
        BuildDirective for the external build orchestrator
    """
    return BuildDirective(
        toolchain=select_toolchain(platform_id),
        flags=BuildFlags(
            defines=(UTF8_STRING_DEFINE,),
            debug=is_debug_build(env, build_type_var),
        ),
        gems=CORE_GEMS,
    )


__all__ = [
    "BUILD_TYPE_VAR",
    "UTF8_STRING_DEFINE",
    "CLANG_PLATFORMS",
    "CORE_GEMS",
    "Toolchain",
    "BuildFlags",
    "BuildDirective",
    "select_toolchain",
    "is_debug_build",
    "compute_directive",
]
