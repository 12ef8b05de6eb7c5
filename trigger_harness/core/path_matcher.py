"""
Wildcard path matching.

Templates and literal paths are slash-delimited segment sequences. A template
segment of the form "{name}" is a wildcard; any other segment must match the
literal path exactly.
"""

import logging
import re
from typing import Dict, List, Optional

logger = logging.getLogger("trigger_harness.path_matcher")

_WILDCARD_RE = re.compile(r"^\{([^/{}]+)\}$")


def split_segments(path: str) -> List[str]:
    """Trim leading/trailing slashes and split on "/"."""
    return path.strip("/").split("/")


def wildcard_name(segment: str) -> Optional[str]:
    """
    Return the wildcard name if the segment is "{name}", else None.

    Example: "{company}" -> "company", "users" -> None
    """
    match = _WILDCARD_RE.match(segment)
    if match:
        return match.group(1)
    return None


def is_wildcard(segment: str) -> bool:
    return wildcard_name(segment) is not None


def is_valid_match(template: str, path: str) -> bool:
    """
    Check whether a literal path fits a wildcard template.

    Segment counts must be equal, and every literal template segment must be
    present verbatim at the same position. Comparison is syntactic: a path
    segment such as "{still_wild}" only satisfies the identical template text
    or a wildcard position.
    """
    template_segments = split_segments(template)
    path_segments = split_segments(path)

    if len(template_segments) != len(path_segments):
        return False

    for template_segment, path_segment in zip(template_segments, path_segments):
        if is_wildcard(template_segment):
            continue
        if template_segment != path_segment:
            return False
    return True


def extract_params(template: str, path: str) -> Dict[str, str]:
    """
    Extract wildcard bindings from a literal path.

    Returns an empty dict when the path does not match. Path segments that are
    themselves still unfilled wildcards are skipped, so a partially
    instantiated path yields a partial mapping.

    Example:
        extract_params("companies/{company}/users/{user}",
                       "companies/{still_wild}/users/abe")
        → {"user": "abe"}
    """
    if not is_valid_match(template, path):
        return {}

    params: Dict[str, str] = {}
    for template_segment, path_segment in zip(split_segments(template), split_segments(path)):
        name = wildcard_name(template_segment)
        if name is None:
            continue
        if "{" in path_segment or "}" in path_segment:
            continue
        params[name] = path_segment

    logger.debug(f"Extracted params {params} from {path!r} using {template!r}")
    return params
