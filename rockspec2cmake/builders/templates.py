"""
CMakeLists.txt rendering

Each render_* function produces the text of one section of the generated
script. render() concatenates them in a fixed order. Nothing here mutates
the builder it is given.
"""

from typing import Iterable, List, Mapping, Sequence

from ..platform import translate


INDENT = "    "
SCRIPT_EXTENSION = "lua"

INSTALL_DEFAULTS = """\
install(FILES ${BUILD_COPY_DIRECTORIES} DESTINATION ${CMAKE_INSTALL_PREFIX})
install(DIRECTORY ${BUILD_INSTALL_LUA} DESTINATION ${INSTALL_LMOD})
install(DIRECTORY ${BUILD_INSTALL_LIB} DESTINATION ${INSTALL_LIB})
install(DIRECTORY ${BUILD_INSTALL_CONF} DESTINATION ${INSTALL_ETC})
install(DIRECTORY ${BUILD_INSTALL_BIN} DESTINATION ${INSTALL_BIN})

"""


def _indent(text: str) -> str:
    return "".join(INDENT + line if line.strip() else line
                   for line in text.splitlines(keepends=True))


def _quote(message: str) -> str:
    return message.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")


def _platform_block(platform: str, body: str) -> str:
    """Wrap body in a condition that only holds on platform"""
    if not body:
        return ""
    return f"if ({translate(platform)})\n{_indent(body)}endif()\n\n"


def render_preamble(package_name: str) -> str:
    """Project declaration and default install locations"""
    return (
        "# Generated Cmake file begin\n"
        "cmake_minimum_required(VERSION 3.1)\n"
        "\n"
        f"project({package_name} C CXX)\n"
        "\n"
        "find_package(Lua)\n"
        "\n"
        "## INSTALL DEFAULTS (Relative to CMAKE_INSTALL_PREFIX)\n"
        "# Primary paths\n"
        'set(INSTALL_BIN bin CACHE PATH "Where to install binaries to.")\n'
        'set(INSTALL_LIB lib CACHE PATH "Where to install libraries to.")\n'
        'set(INSTALL_ETC etc CACHE PATH "Where to store configuration files")\n'
        'set(INSTALL_SHARE share CACHE PATH "Directory for shared data.")\n'
        "\n"
        'set(INSTALL_LMOD ${INSTALL_LIB}/lua CACHE PATH "Directory to install Lua modules.")\n'
        'set(INSTALL_CMOD ${INSTALL_LIB}/lua CACHE PATH "Directory to install Lua binary modules.")\n'
        "\n"
    )


def render_fatal_errors(errors: Iterable[str]) -> str:
    return "".join(f'message(FATAL_ERROR "{_quote(message)}")\n\n' for message in errors)


def render_unsupported_guards(platforms: Iterable[str]) -> str:
    return "".join(
        f"if ({translate(platform)})\n"
        f'{INDENT}message(FATAL_ERROR "Unsupported platform '
        '(your platform was explicitly marked as not supported)")\n'
        "endif()\n\n"
        for platform in platforms)


def render_supported_guard(platforms: Sequence[str]) -> str:
    """Abort unless at least one of the supported platforms matches"""
    if not platforms:
        return ""
    expr = " AND ".join(f"NOT {translate(platform)}" for platform in platforms)
    return (
        f"if ({expr})\n"
        f'{INDENT}message(FATAL_ERROR "Unsupported platform '
        '(your platform is not in list of supported platforms)")\n'
        "endif()\n\n"
    )


def render_variables(variables: Mapping[str, str]) -> str:
    if not variables:
        return ""
    return "".join(f"set({name} {value})\n" for name, value in variables.items()) + "\n"


def render_platform_variables(platform_variables: Mapping[str, Mapping[str, str]]) -> str:
    return "".join(
        _platform_block(platform, "".join(f"set({name} {value})\n"
                                          for name, value in variables.items()))
        for platform, variables in platform_variables.items())


def render_install_defaults() -> str:
    """Install rules for build.install and build.copy_directories"""
    return INSTALL_DEFAULTS


def render_script_module(name: str) -> str:
    # Module a.b.c is installed from its single source as a/b/c/c.lua
    destination = name.replace(".", "/")
    new_name = f"{name.rsplit('.', 1)[-1]}.{SCRIPT_EXTENSION}"
    return (f"install(FILES ${{{name}_SOURCES}} DESTINATION ${{INSTALL_LMOD}}/{destination} "
            f"RENAME {new_name})\n")


def render_script_modules(names: Iterable[str]) -> str:
    text = "".join(render_script_module(name) for name in names)
    return text + "\n" if text else ""


def render_platform_script_modules(platform_targets: Mapping[str, List[str]],
                                   default_targets: Sequence[str]) -> str:
    return "".join(
        _platform_block(platform, "".join(render_script_module(name) for name in targets
                                          if name not in default_targets))
        for platform, targets in platform_targets.items())


def render_native_module(name: str) -> str:
    """Library target, library lookup, usage requirements and install rule"""
    return (
        f"add_library({name} ${{{name}_SOURCES}})\n"
        "\n"
        f"foreach(LIBRARY ${{{name}_LIBRARIES}})\n"
        f"{INDENT}find_library(${{LIBRARY}} ${{LIBRARY}} ${{{name}_LIBDIRS}})\n"
        "endforeach(LIBRARY)\n"
        "\n"
        f"target_include_directories({name} PRIVATE ${{{name}_INCDIRS}})\n"
        f"target_compile_definitions({name} PRIVATE ${{{name}_DEFINES}})\n"
        f"target_link_libraries({name} PRIVATE ${{{name}_LIBRARIES}})\n"
        f"install(TARGETS {name} DESTINATION ${{INSTALL_CMOD}})\n"
        "\n"
    )


def render_native_modules(names: Iterable[str]) -> str:
    return "".join(render_native_module(name) for name in names)


def render_platform_native_modules(platform_targets: Mapping[str, List[str]],
                                   default_targets: Sequence[str]) -> str:
    return "".join(
        _platform_block(platform, "".join(render_native_module(name) for name in targets
                                          if name not in default_targets))
        for platform, targets in platform_targets.items())


def render(builder) -> str:
    """
    Render a populated CMakeBuilder

    Args:
        builder: CMakeBuilder holding the package configuration

    Returns:
        Complete CMakeLists.txt contents
    """
    sections = [
        render_preamble(builder.package_name),
        # Errors come first so nothing else is evaluated on bad input
        render_fatal_errors(builder.errors),
        render_unsupported_guards(builder.unsupported_platforms),
        render_supported_guard(builder.supported_platforms),
        render_variables(builder.variables),
        render_platform_variables(builder.platform_variables),
        render_install_defaults(),
        render_script_modules(builder.script_targets),
        render_platform_script_modules(builder.platform_script_targets, builder.script_targets),
        render_native_modules(builder.native_targets),
        render_platform_native_modules(builder.platform_native_targets, builder.native_targets),
    ]
    return "".join(sections)


__all__ = [
    "render",
    "render_preamble",
    "render_fatal_errors",
    "render_unsupported_guards",
    "render_supported_guard",
    "render_variables",
    "render_platform_variables",
    "render_install_defaults",
    "render_script_module",
    "render_script_modules",
    "render_platform_script_modules",
    "render_native_module",
    "render_native_modules",
    "render_platform_native_modules",
]
