import pytest

from mruby_build.directive import (
    BUILD_TYPE_VAR,
    CORE_GEMS,
    UTF8_STRING_DEFINE,
    BuildDirective,
    BuildFlags,
    Toolchain,
    compute_directive,
    is_debug_build,
    select_toolchain,
)


@pytest.mark.parametrize("platform_id", [
    "linux-gnu",
    "x86_64-linux",
    "windows",
    "x64-mingw32",
    "arm64-darwin23",
    "netbsd",
    "dragonfly",
    "",
    None,
    "???",
])
def test_non_bsd_platforms_use_gcc(platform_id):
    assert compute_directive(platform_id, {}).toolchain is Toolchain.GCC


@pytest.mark.parametrize("platform_id", [
    "freebsd13",
    "amd64-freebsd14",
    "FreeBSD",
    "openbsd7",
    "x86_64-OpenBSD7.3",
    "OPENBSD",
])
def test_bsd_platforms_use_clang(platform_id):
    assert compute_directive(platform_id, {}).toolchain is Toolchain.CLANG


@pytest.mark.parametrize("env", [
    {},
    {"TSC_BUILD_TYPE": ""},
    {"TSC_BUILD_TYPE": "Release"},
    {"TSC_BUILD_TYPE": "MinSizeRel"},
    {"TSC_BUILD_TYPE": "RelWithDebInfo"},
    {"OTHER": "Debug"},
])
def test_debug_off_without_debug_build_type(env):
    assert compute_directive("x86_64-linux", env).debug is False


@pytest.mark.parametrize("build_type", ["Debug", "DEBUG", "debug", "xdebugging", "nodebug"])
def test_debug_on_for_any_debug_substring(build_type):
    assert compute_directive("x86_64-linux", {BUILD_TYPE_VAR: build_type}).debug is True


def test_debug_with_missing_env():
    assert is_debug_build(None) is False


def test_debug_uses_custom_variable_name():
    env = {"MY_BUILD": "Debug", BUILD_TYPE_VAR: "Release"}
    assert is_debug_build(env, "MY_BUILD") is True
    assert compute_directive("linux", env, build_type_var="MY_BUILD").debug is True
    assert compute_directive("linux", env).debug is False


@pytest.mark.parametrize("platform_id,env", [
    ("linux-gnu", {}),
    ("freebsd13", {"TSC_BUILD_TYPE": "Debug"}),
    ("windows", {"TSC_BUILD_TYPE": "Release"}),
])
def test_defines_and_gems_never_vary(platform_id, env):
    directive = compute_directive(platform_id, env)
    assert directive.defines == (UTF8_STRING_DEFINE,)
    assert directive.gems == CORE_GEMS


def test_core_gems_are_library_only():
    assert len(CORE_GEMS) == 17
    assert len(set(CORE_GEMS)) == len(CORE_GEMS)
    assert not [gem for gem in CORE_GEMS if gem.startswith("mruby-bin-")]
    assert CORE_GEMS[0] == "mruby-print"
    assert CORE_GEMS[-1] == "mruby-kernel-ext"


def test_compute_directive_is_idempotent():
    env = {"TSC_BUILD_TYPE": "Debug"}
    assert compute_directive("openbsd7", env) == compute_directive("openbsd7", env)


def test_compute_directive_does_not_mutate_env():
    env = {"TSC_BUILD_TYPE": "Debug"}
    compute_directive("linux", env)
    assert env == {"TSC_BUILD_TYPE": "Debug"}


def test_example_scenarios():
    linux = compute_directive("linux-gnu", {})
    assert linux == BuildDirective(toolchain=Toolchain.GCC,
                                   flags=BuildFlags(defines=("MRB_UTF8_STRING",), debug=False),
                                   gems=CORE_GEMS)

    freebsd = compute_directive("freebsd13", {"TSC_BUILD_TYPE": "Release"})
    assert (freebsd.toolchain, freebsd.debug) == (Toolchain.CLANG, False)

    openbsd = compute_directive("openbsd7", {"TSC_BUILD_TYPE": "Debug"})
    assert (openbsd.toolchain, openbsd.debug) == (Toolchain.CLANG, True)

    windows = compute_directive("windows", {"TSC_BUILD_TYPE": "debugging-extra"})
    assert (windows.toolchain, windows.debug) == (Toolchain.GCC, True)


def test_directive_is_frozen():
    directive = compute_directive("linux", {})
    with pytest.raises(AttributeError):
        directive.toolchain = Toolchain.CLANG


def test_to_dict():
    assert compute_directive("freebsd13", {"TSC_BUILD_TYPE": "Debug"}).to_dict() == {
        "toolchain": "clang",
        "debug": True,
        "defines": ["MRB_UTF8_STRING"],
        "gems": list(CORE_GEMS),
    }


def test_select_toolchain_str():
    assert str(select_toolchain("freebsd")) == "clang"
    assert str(select_toolchain("linux")) == "gcc"


def test_debug_with_unusable_variable_name():
    assert is_debug_build({"TSC_BUILD_TYPE": "Debug"}, ["TSC_BUILD_TYPE"]) is False
    assert compute_directive("linux", {"TSC_BUILD_TYPE": "Debug"}, build_type_var=None).debug is False
