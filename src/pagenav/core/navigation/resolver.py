from __future__ import annotations

"""
Next-Page Resolver.

Computes the pages that follow a given page in document order. Sequences
are linear: only their leftmost reachable leaf can come next. GroupSets are
branch points: every track they declare is an equally valid continuation,
so a GroupSet fans out into one candidate per non-empty track.

The search is a plain recursion where each frame owns one tree level and
reports one of three outcomes to its caller: the path was not found, the
path was found but nothing follows it at this level, or the candidates
have already been resolved.
"""

import logging
from typing import List, Sequence, Tuple, Union

from pagenav.domain.errors import StructureError
from pagenav.domain.nav_models import (
    GroupSet,
    Leaf,
    NavigationNode,
    NavigationTree,
    NextPageResult,
    NextPageStatus,
    PagePath,
    Resolved,
    ResolvedPath,
    SearchOutcome,
    SearchState,
)

logger = logging.getLogger(__name__)

Crumbs = Tuple[str, ...]
_Walkable = Union[NavigationNode, Sequence[NavigationNode]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_next(tree: NavigationTree, path: PagePath) -> List[ResolvedPath]:
    """
    Return the destinations that follow `path` in document order.

    An empty list means there is no next page: either `path` is the last
    reachable leaf, the tree has no leaves, or `path` is not in the tree.
    Use `locate_next` to tell those cases apart.

    Args:
        tree: Root sequence of the navigation map.
        path: Track names followed by a leaf name, or empty for the start.

    Returns:
        List[ResolvedPath]: Candidates in track declaration order.

    Raises:
        StructureError: If a node is neither a Leaf nor a GroupSet.
    """
    return locate_next(tree, path).candidates


def locate_next(tree: NavigationTree, path: PagePath) -> NextPageResult:
    """
    Resolve the next pages of `path` and classify the outcome.

    Args:
        tree: Root sequence of the navigation map.
        path: Track names followed by a leaf name, or empty for the start.

    Returns:
        NextPageResult: FOUND with candidates, TERMINAL, or NOT_FOUND.
    """
    components = tuple(path)

    if not components:
        first = _first_paths(tree, ())
        if not first:
            logger.debug("Navigation map has no reachable pages.")
            return NextPageResult(NextPageStatus.TERMINAL)
        return NextPageResult(NextPageStatus.FOUND, [list(p) for p in first])

    outcome = _search_sequence(tree, components, ())
    logger.debug(f"Search for {'/'.join(components)} ended with: {outcome}")

    if isinstance(outcome, Resolved):
        return NextPageResult(NextPageStatus.FOUND, [list(p) for p in outcome.paths])
    if outcome is SearchState.EXHAUSTED:
        return NextPageResult(NextPageStatus.TERMINAL)
    return NextPageResult(NextPageStatus.NOT_FOUND)


def first_descendants(node: _Walkable, breadcrumb: Sequence[str] = ()) -> List[ResolvedPath]:
    """
    Compute the leftmost reachable leaves below `node`.

    A Leaf yields itself. A sequence yields the result of its first element
    that reaches any leaf. A GroupSet yields the results of all its tracks.
    Each path is prefixed with `breadcrumb` and the track names traversed.

    Args:
        node: A Leaf, a GroupSet, or a sequence of nodes.
        breadcrumb: Track names already traversed to reach `node`.

    Returns:
        List[ResolvedPath]: The candidates, empty for a dead end.
    """
    return [list(p) for p in _first_paths(node, tuple(breadcrumb))]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (SEARCH AND BACKTRACKING)
# -----------------------------------------------------------------------------

def _search_sequence(
        nodes: Sequence[NavigationNode],
        path: Crumbs,
        crumbs: Crumbs,
) -> SearchOutcome:
    """
    Scan one sequence for `path` and resolve what follows the match.

    After a match, later elements are only asked for their first
    descendants. Dead-end elements (empty tracks) are skipped. If the
    sequence ends first, EXHAUSTED lets the caller continue one level up.
    """
    matched = False

    for node in nodes:
        if matched:
            nexts = _first_paths(node, crumbs)
            if nexts:
                return Resolved(nexts)
            continue

        outcome = _search_node(node, path, crumbs)
        if isinstance(outcome, Resolved):
            return outcome
        matched = outcome is SearchState.EXHAUSTED

    return SearchState.EXHAUSTED if matched else SearchState.NOT_FOUND


def _search_node(node: NavigationNode, path: Crumbs, crumbs: Crumbs) -> SearchOutcome:
    """Match one sequence element against the remaining path components."""
    if isinstance(node, Leaf):
        if len(path) == 1 and node.name == path[0]:
            return SearchState.EXHAUSTED
        return SearchState.NOT_FOUND

    if isinstance(node, GroupSet):
        # A GroupSet is only entered through a named track
        if len(path) < 2:
            return SearchState.NOT_FOUND
        track = node.track(path[0])
        if track is None:
            return SearchState.NOT_FOUND
        return _search_sequence(track.children, path[1:], crumbs + (track.name,))

    raise _unexpected_node(node, crumbs)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (FIRST DESCENDANTS)
# -----------------------------------------------------------------------------

def _first_paths(node: _Walkable, crumbs: Crumbs) -> Tuple[Crumbs, ...]:
    """Tuple-based core of `first_descendants`."""
    if isinstance(node, Leaf):
        return (crumbs + (node.name,),)

    if isinstance(node, GroupSet):
        out: List[Crumbs] = []
        for track in node.tracks:
            out.extend(_first_paths(track.children, crumbs + (track.name,)))
        return tuple(out)

    if isinstance(node, (tuple, list)):
        # Skips leading dead ends rather than stopping at the first element
        for child in node:
            paths = _first_paths(child, crumbs)
            if paths:
                return paths
        return ()

    raise _unexpected_node(node, crumbs)


def _unexpected_node(node: object, crumbs: Crumbs) -> StructureError:
    location = "$" + "".join(f".{c}" for c in crumbs)
    return StructureError(
        f"Expected a Leaf or GroupSet, found {type(node).__name__}",
        location=location,
    )
