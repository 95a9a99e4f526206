from __future__ import annotations

"""
Navigation Map Data Models.

Provides the immutable node types describing a multi-page site structure
and the tagged result types exchanged between the resolver and its callers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Leaf:
    """
    A single page entry in the navigation map.

    Attributes:
        name: Page file name (e.g. 'index.md').
    """
    name: str


@dataclass(frozen=True)
class Track:
    """
    One named, ordered sub-sequence inside a GroupSet.

    Attributes:
        name: Track name, used as a breadcrumb component.
        children: Ordered nodes of the track. May be empty.
    """
    name: str
    children: Tuple["NavigationNode", ...] = ()


@dataclass(frozen=True)
class GroupSet:
    """
    A branch point bundling one or more independently ordered tracks.

    Track names are unique within one GroupSet but may recur elsewhere
    in the tree.

    Attributes:
        tracks: Tracks in declaration order.
    """
    tracks: Tuple[Track, ...]

    def track(self, name: str) -> Optional[Track]:
        """Return the track called `name`, or None when absent."""
        for t in self.tracks:
            if t.name == name:
                return t
        return None

    @property
    def track_names(self) -> List[str]:
        return [t.name for t in self.tracks]


NavigationNode = Union[Leaf, GroupSet]
NavigationTree = Tuple[NavigationNode, ...]

# A position in the tree: track names followed by a leaf name, or empty
PagePath = Sequence[str]
ResolvedPath = List[str]

# -----------------------------------------------------------------------------
# SEARCH OUTCOMES
# -----------------------------------------------------------------------------

class SearchState(Enum):
    """Non-resolving outcomes of a scope search."""
    NOT_FOUND = "not_found"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Resolved:
    """
    Outcome carrying the next candidates once they have been computed.

    Attributes:
        paths: Candidate destinations in track declaration order.
    """
    paths: Tuple[Tuple[str, ...], ...]


SearchOutcome = Union[SearchState, Resolved]

# -----------------------------------------------------------------------------
# PUBLIC RESULT
# -----------------------------------------------------------------------------

class NextPageStatus(Enum):
    FOUND = "found"
    TERMINAL = "terminal"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class NextPageResult:
    """
    Tri-state answer of a next-page lookup.

    Attributes:
        status: FOUND when candidates exist, TERMINAL when the page is the
            last reachable one, NOT_FOUND when the path matches no leaf.
        candidates: Destination paths (only populated when FOUND).
    """
    status: NextPageStatus
    candidates: List[ResolvedPath] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is NextPageStatus.FOUND
