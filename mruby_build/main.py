#!/usr/bin/env python3
"""
Main entry point for the mruby build configurator
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Dict, Mapping, Optional

from .builders import BaseBuilder, ManifestBuilder, RubyConfigBuilder
from .config import ConfigLoader, SUPPORTED_FORMATS
from .directive import BuildDirective, compute_directive
from .platform import PlatformDetector
from .utils import Logger


class BuildConfigurator:
    """Computes the mruby build directive for a host and renders it"""

    def __init__(self,
                 platform_id: str = "auto",
                 env: Optional[Mapping[str, str]] = None,
                 config: Optional[ConfigLoader] = None,
                 verbose: bool = False,
                 log_file: Optional[str] = None):
        """
        Initialize the configurator

        Args:
            platform_id: Host platform identifier, or "auto" to detect it
            env: Environment mapping (defaults to os.environ)
            config: Loaded settings (defaults to an empty ConfigLoader)
            verbose: Enable verbose output
            log_file: Optional log file path
        """
        self.env = dict(os.environ if env is None else env)
        self.config = config or ConfigLoader(env=self.env)
        self.verbose = verbose or bool(self.config.get_option("verbose", False))

        # Setup logging
        self.logger = Logger(verbose=self.verbose,
                             log_file=log_file or self.config.get_option("log_file"))

        # Detect platform
        if platform_id == "auto":
            self.platform_info = PlatformDetector().detect()
            self.platform_id = self.platform_info["platform_id"]
        else:
            self.platform_id = platform_id
            self.platform_info = {"platform_id": platform_id}

        self.build_type_var = self.config.get_option("build_type_variable")
        self.directive = compute_directive(self.platform_id, self.env,
                                           build_type_var=self.build_type_var)

        self.logger.info(f"Platform: {self.platform_id}")
        self.logger.debug(f"Platform info: {self.platform_info}")
        self.logger.debug(f"{self.build_type_var}={self.env.get(self.build_type_var, '')!r}")
        self.logger.info(f"Toolchain: {self.directive.toolchain}")
        self.logger.info(f"Debug mode: {'on' if self.directive.debug else 'off'}")

    def get_builder(self, fmt: Optional[str] = None,
                    build_name: Optional[str] = None,
                    dry_run: bool = False) -> BaseBuilder:
        """
        Get a builder for an output format, with the directive applied

        Args:
            fmt: Output format (ruby, json, yaml)
            build_name: mruby build name, only used by the ruby format
            dry_run: If True, builders don't write files

        Returns:
            Builder instance
        """
        fmt = fmt or self.config.get_option("format", "ruby")

        if fmt == "ruby":
            builder = RubyConfigBuilder(
                logger=self.logger,
                dry_run=dry_run,
                build_name=build_name or self.config.get_option("build_name", "host"),
            )
        elif fmt in ManifestBuilder.FORMATS:
            builder = ManifestBuilder(logger=self.logger, dry_run=dry_run, fmt=fmt)
        else:
            raise ValueError(f"Unsupported format: {fmt}. "
                             f"Supported: {', '.join(SUPPORTED_FORMATS)}")

        return builder.apply(self.directive)

    def render(self, fmt: Optional[str] = None, build_name: Optional[str] = None) -> str:
        """Render the directive in the given format"""
        return self.get_builder(fmt, build_name).render()

    def write(self, path: Path, fmt: Optional[str] = None,
              build_name: Optional[str] = None, dry_run: bool = False) -> bool:
        """
        Render the directive to a file

        Returns:
            True if the file was written
        """
        written = self.get_builder(fmt, build_name, dry_run=dry_run).write(path)
        if written:
            self.logger.success(f"Wrote build configuration to {path}")
        return written

    def show_info(self) -> None:
        """Show the computed build directive"""
        from . import __version__

        directive: BuildDirective = self.directive
        print(f"\nmruby build configurator v{__version__}")
        print(f"{'='*50}")
        print(f"Platform: {self.platform_id}")
        print(f"Toolchain: {directive.toolchain}")
        print(f"Debug mode: {'on' if directive.debug else 'off'} "
              f"({self.build_type_var}={self.env.get(self.build_type_var, '')!r})")
        print(f"Defines: {', '.join(directive.defines)}")
        print(f"\nGems ({len(directive.gems)}):")
        for gem in directive.gems:
            print(f"  - {gem}")


def _build_env(build_type: Optional[str], build_type_var: str) -> Dict[str, str]:
    env = dict(os.environ)
    if build_type is not None:
        env[build_type_var] = build_type
    return env


def main(argv=None):
    """Command-line interface"""
    parser = argparse.ArgumentParser(
        prog="mruby-build",
        description="mruby build configurator - selects toolchain, flags and gems",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s render                          # Print build_config.rb for this host
  %(prog)s render -o build/mruby_config.rb # Write it to a file
  %(prog)s render --format json            # Print a JSON manifest
  %(prog)s info --build-type Debug         # Show the directive for a debug build
        """
    )

    parser.add_argument(
        "command",
        choices=["render", "info"],
        help="Command to execute"
    )

    parser.add_argument(
        "--platform",
        default="auto",
        help="Host platform identifier, e.g. x86_64-linux (default: auto-detect)"
    )

    parser.add_argument(
        "--build-type",
        help="Value for the build type variable (default: taken from the environment)"
    )

    parser.add_argument(
        "--format",
        choices=list(SUPPORTED_FORMATS),
        help="Output format (default: ruby)"
    )

    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Write output to this file instead of stdout"
    )

    parser.add_argument(
        "--build-name",
        help="mruby build name (default: host)"
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="YAML settings file (default: $MRUBY_BUILD_CONFIG or ./mruby_build.yaml)"
    )

    parser.add_argument(
        "--log-file",
        help="Also write log messages to this file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Don't write any files"
    )

    args = parser.parse_args(argv)

    # Initialize configurator
    try:
        config = ConfigLoader(args.config)
        env = _build_env(args.build_type, config.get_option("build_type_variable"))
        configurator = BuildConfigurator(
            platform_id=args.platform,
            env=env,
            config=config,
            verbose=args.verbose,
            log_file=args.log_file
        )
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Execute command
    try:
        if args.command == "render":
            output = args.output or config.get_option("output")
            if output:
                configurator.write(Path(output), fmt=args.format,
                                   build_name=args.build_name, dry_run=args.dry_run)
            else:
                sys.stdout.write(configurator.render(fmt=args.format,
                                                     build_name=args.build_name))

        elif args.command == "info":
            configurator.show_info()

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except (OSError, ValueError) as e:
        configurator.logger.error(f"Error: {e}")
        if configurator.verbose:
            import traceback
            traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
