"""
Resource name compilation.

Substitutes a parameter mapping back into a wildcard template.
"""

import random
from typing import Callable, Mapping, Optional

from .exceptions import MissingParamError
from .path_matcher import split_segments, wildcard_name

Placeholder = Callable[[str], str]


def random_placeholder(name: str) -> str:
    """Stand-in value for an unresolved wildcard, e.g. "user" -> "user4"."""
    return f"{name}{random.randint(1, 9)}"


def compile_resource(
    template: str,
    params: Mapping[str, str],
    placeholder: Optional[Placeholder] = None,
) -> str:
    """
    Build a literal resource path from a template.

    Args:
        template: wildcard template (e.g. "companies/{company}/users/{user}")
        params: wildcard name -> value
        placeholder: called with the wildcard name when params lack a value.
            When omitted, a missing value raises MissingParamError.

    Returns:
        The compiled path, joined with "/" and without leading/trailing slash.
    """
    compiled = []
    for segment in split_segments(template):
        name = wildcard_name(segment)
        if name is None:
            compiled.append(segment)
            continue

        value = params.get(name)
        if value is None:
            if placeholder is None:
                raise MissingParamError(template, name)
            value = placeholder(name)
        compiled.append(str(value))

    return "/".join(compiled)
