"""
JSON / YAML manifest builder
"""

import json
import yaml
from typing import Any, Dict

from .base_builder import CollectingBuilder


class ManifestBuilder(CollectingBuilder):
    """Renders the directive as a machine readable manifest"""

    FORMATS = ("json", "yaml")

    def __init__(self, *args, fmt: str = "json", **kwargs):
        super().__init__(*args, **kwargs)
        if fmt not in self.FORMATS:
            raise ValueError(f"Unsupported manifest format: {fmt}. "
                             f"Supported: {', '.join(self.FORMATS)}")
        self.fmt = fmt

    def to_dict(self) -> Dict[str, Any]:
        return {
            "toolchain": self.toolchain.value if self.toolchain else None,
            "debug": self.debug,
            "defines": list(self.defines),
            "gems": list(self.gems),
        }

    def render(self) -> str:
        data = self.to_dict()
        if self.fmt == "yaml":
            return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)
        return json.dumps(data, indent=2) + "\n"
