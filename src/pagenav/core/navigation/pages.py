from __future__ import annotations

"""
Navigation Page Lister.

Enumerates every page referenced by a navigation map as a filesystem path,
in document order. Used by build scripts to know which files to render.
"""

import os
from typing import List, Sequence

from pagenav.domain.errors import StructureError
from pagenav.domain.nav_models import GroupSet, Leaf, NavigationNode, NavigationTree


def list_pages(tree: NavigationTree, root_path: str, shared: str) -> List[str]:
    """
    List the file path of every page in the navigation map.

    Pages inside tracks live under '<root>/<track>/<subtrack>/...'; pages at
    the root of the map live under '<root>/<shared>'.

    Args:
        tree: Root sequence of the navigation map.
        root_path: Directory prepended to every page path.
        shared: Directory name used for root-level pages.

    Returns:
        List[str]: Page paths in document order.
    """
    pages: List[str] = []
    _collect(tree, "", root_path, shared, pages)
    return pages


def _collect(
        nodes: Sequence[NavigationNode],
        track_path: str,
        root_path: str,
        shared: str,
        out: List[str],
) -> None:
    for node in nodes:
        if isinstance(node, Leaf):
            out.append(os.path.join(root_path, track_path or shared, node.name))
        elif isinstance(node, GroupSet):
            for track in node.tracks:
                _collect(track.children, os.path.join(track_path, track.name), root_path, shared, out)
        else:
            raise StructureError(
                f"Expected a Leaf or GroupSet, found {type(node).__name__}",
                location="$/" + track_path if track_path else "$",
            )
