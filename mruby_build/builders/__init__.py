"""
Builder components for the supported output formats
"""

from .base_builder import BaseBuilder, CollectingBuilder
from .ruby_config_builder import RubyConfigBuilder
from .manifest_builder import ManifestBuilder

__all__ = [
    "BaseBuilder",
    "CollectingBuilder",
    "RubyConfigBuilder",
    "ManifestBuilder",
]
