from __future__ import annotations

"""
Navigation Map Loader.

Decodes YAML/JSON navigation sources into the immutable NavigationTree
model. Every sequence entry must be a page name (string) or a mapping of
track names to sequences; anything else is rejected with a StructureError
pointing at the offending entry.
"""

import logging
import os
from typing import Any, List

import yaml

from pagenav.domain.errors import NavigationLoadError, StructureError
from pagenav.domain.nav_models import GroupSet, Leaf, NavigationNode, NavigationTree, Track

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_navigation(path: str) -> NavigationTree:
    """
    Read and parse a navigation file.

    Args:
        path: Filesystem path to a YAML or JSON navigation map.

    Returns:
        NavigationTree: The parsed root sequence.

    Raises:
        NavigationLoadError: If the file cannot be read or decoded.
        StructureError: If the decoded data has an invalid shape.
    """
    logger.debug(f"Loading navigation map from: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise NavigationLoadError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise NavigationLoadError(path, f"not valid UTF-8: {e}") from e

    return parse_navigation_text(text, source=os.path.basename(path))


def parse_navigation_text(text: str, source: str = "<string>") -> NavigationTree:
    """
    Decode YAML (or JSON) text and parse it into a NavigationTree.

    Args:
        text: Raw document content.
        source: Name used in error messages.

    Returns:
        NavigationTree: The parsed root sequence.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise NavigationLoadError(source, f"invalid YAML: {e}") from e

    tree = parse_navigation(data)
    logger.debug(f"Parsed navigation '{source}' with {len(tree)} top-level entries.")
    return tree


def parse_navigation(data: Any) -> NavigationTree:
    """
    Convert decoded YAML/JSON data into a NavigationTree.

    Args:
        data: The decoded document. Must be a list.

    Returns:
        NavigationTree: The parsed root sequence.

    Raises:
        StructureError: If any entry is neither a string nor a track mapping.
    """
    if not isinstance(data, list):
        raise StructureError(
            f"Navigation root must be a sequence, found {_kind(data)}", location="$"
        )
    return _parse_sequence(data, "$")

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _parse_sequence(items: List[Any], location: str) -> NavigationTree:
    return tuple(_parse_node(item, f"{location}[{i}]") for i, item in enumerate(items))


def _parse_node(item: Any, location: str) -> NavigationNode:
    if isinstance(item, str):
        if not item:
            raise StructureError("Page name must not be empty", location=location)
        return Leaf(item)

    if isinstance(item, dict):
        if not item:
            raise StructureError("Track mapping must declare at least one track", location=location)

        tracks: List[Track] = []
        for name, children in item.items():
            if not isinstance(name, str) or not name:
                raise StructureError(
                    f"Track name must be a non-empty string, found {name!r}", location=location
                )
            track_location = f"{location}.{name}"
            if not isinstance(children, list):
                raise StructureError(
                    f"Track '{name}' must be a sequence, found {_kind(children)}",
                    location=track_location,
                )
            tracks.append(Track(name, _parse_sequence(children, track_location)))
        return GroupSet(tuple(tracks))

    raise StructureError(
        f"Entry must be a page name or a track mapping, found {_kind(item)}", location=location
    )


def _kind(value: Any) -> str:
    if value is None:
        return "nothing"
    return type(value).__name__
