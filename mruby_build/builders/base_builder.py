"""
Base builder class that all builders inherit from
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional

from ..directive import BuildDirective, Toolchain


class BaseBuilder(ABC):
    """Abstract base class for all builders

    A builder receives the decisions of a BuildDirective one by one, the
    same way mruby's MRuby::Build block configures a build, and renders
    them into something an external orchestrator can consume.
    """

    def __init__(self, logger: Optional[Any] = None, dry_run: bool = False):
        """
        Initialize base builder

        Args:
            logger: Logger instance
            dry_run: If True, don't actually write files
        """
        self.logger = logger
        self.dry_run = dry_run

    @abstractmethod
    def select_toolchain(self, toolchain: Toolchain) -> None:
        """Select the compiler suite"""

    @abstractmethod
    def enable_debug(self) -> None:
        """Turn on debug mode"""

    @abstractmethod
    def append_compiler_define(self, name: str) -> None:
        """Add a preprocessor define to the C compiler flags"""

    @abstractmethod
    def include_gem(self, name: str) -> None:
        """Compile a core gem into the library"""

    @abstractmethod
    def render(self) -> str:
        """Render the collected configuration"""

    def apply(self, directive: BuildDirective) -> "BaseBuilder":
        """
        Feed a directive into this builder

        Args:
            directive: Directive to apply

        Returns:
            The builder itself
        """
        self.select_toolchain(directive.toolchain)
        if directive.debug:
            self.enable_debug()
        for define in directive.defines:
            self.append_compiler_define(define)
        for gem in directive.gems:
            self.include_gem(gem)
        return self

    def write(self, path: Path) -> bool:
        """
        Render and write to a file

        Args:
            path: Output file

        Returns:
            True if the file was written
        """
        path = Path(path)
        content = self.render()

        if self.dry_run:
            self._log("info", f"[DRY RUN] Would write {len(content)} bytes to {path}")
            return False

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        self._log("debug", f"Wrote {path}")
        return True

    def _log(self, level: str, msg: str) -> None:
        if self.logger is not None:
            getattr(self.logger, level)(msg)


class CollectingBuilder(BaseBuilder):
    """Builder that records the directive's decisions for rendering"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.toolchain: Optional[Toolchain] = None
        self.debug = False
        self.defines: List[str] = []
        self.gems: List[str] = []

    def select_toolchain(self, toolchain: Toolchain) -> None:
        self.toolchain = toolchain

    def enable_debug(self) -> None:
        self.debug = True

    def append_compiler_define(self, name: str) -> None:
        if name not in self.defines:
            self.defines.append(name)

    def include_gem(self, name: str) -> None:
        if name not in self.gems:
            self.gems.append(name)
