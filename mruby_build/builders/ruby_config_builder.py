"""
mruby build_config.rb builder
"""

from .base_builder import CollectingBuilder


HEADER = """\
# -*- coding: utf-8 -*-
# mruby build configuration, generated by mruby-build.
# Do not edit; rerun mruby-build instead.
"""


class RubyConfigBuilder(CollectingBuilder):
    """Renders the directive as an mruby build configuration file"""

    def __init__(self, *args, build_name: str = "host", **kwargs):
        super().__init__(*args, **kwargs)
        self.build_name = build_name

    def render(self) -> str:
        if self.toolchain is None:
            raise ValueError("No toolchain selected")

        if self.build_name == "host":
            lines = ["MRuby::Build.new do |conf|"]
        else:
            lines = [f'MRuby::Build.new({_quote(self.build_name)}) do |conf|']

        lines.append(f"  toolchain :{self.toolchain.value}")

        if self.debug:
            lines.append("")
            lines.append("  enable_debug")

        if self.defines:
            flags = ", ".join(_quote(f"-D{name}") for name in self.defines)
            lines.append("")
            lines.append("  conf.cc do |cc|")
            lines.append(f"    cc.flags += [{flags}]")
            lines.append("  end")

        if self.gems:
            lines.append("")
            for gem in self.gems:
                lines.append(f"  conf.gem :core => {_quote(gem)}")

        lines.append("end")
        return HEADER + "\n" + "\n".join(lines) + "\n"


def _quote(value: str) -> str:
    # "#" too, so "#{...}" is not interpolated by Ruby
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("#", "\\#")
    return f'"{escaped}"'
