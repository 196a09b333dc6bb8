"""
Platform detection
"""

import sys
import platform
from typing import Dict, Any


class PlatformDetector:
    """Detects and provides information about the current platform"""

    def detect(self) -> Dict[str, Any]:
        """
        Detect current platform

        Returns:
            Dictionary with platform information
        """
        return {
            "os": platform.system(),
            "platform_id": self.detect_platform_id(),
            "machine": platform.machine(),
            "python_version": sys.version,
        }

    def detect_platform_id(self) -> str:
        """
        Get a Ruby style platform identifier

        Mirrors RUBY_PLATFORM, e.g. "x86_64-linux", "amd64-freebsd13"
        or "amd64-win32".
        """
        machine = self._get_machine()
        return f"{machine}-{sys.platform}".lower()

    def _get_machine(self) -> str:
        """Get normalized machine name"""
        machine = platform.machine().strip().lower()
        return machine or "unknown"


__all__ = ["PlatformDetector"]
