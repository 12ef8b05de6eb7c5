"""
Core logic package.

Provides path matching, resource compilation and context synthesis.
"""

from .context_builder import ContextBuilder
from .path_matcher import extract_params, is_valid_match
from .resource_compiler import compile_resource

__all__ = [
    "ContextBuilder",
    "extract_params",
    "is_valid_match",
    "compile_resource",
]
