from __future__ import annotations

"""
Navigation Error Taxonomy.

All failures surfaced by the loader, resolver and service derive from
NavigationError so that interface layers can report them uniformly.
"""

from typing import Sequence


class NavigationError(Exception):
    """Base class for every navigation processing failure."""


class StructureError(NavigationError):
    """
    Raised when a node is neither a page name nor a track mapping.

    Attributes:
        location: Dotted/indexed location of the offending node (e.g. '$[1].src[0]').
    """

    def __init__(self, message: str, location: str = "$") -> None:
        self.location = location
        super().__init__(f"{message} (at {location})")


class NavigationLoadError(NavigationError):
    """Raised when the navigation source cannot be read or decoded."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        super().__init__(f"Could not load navigation '{source}': {reason}")


class PageNotFoundError(NavigationError):
    """Raised when the current page matches no leaf of the navigation map."""

    def __init__(self, page: str, components: Sequence[str] = ()) -> None:
        self.page = page
        self.components = list(components)
        super().__init__(f"Could not find page in navigation: {page}")


class NoNextPageError(NavigationError):
    """Raised when the current page is the last reachable page."""

    def __init__(self, page: str) -> None:
        self.page = page
        super().__init__(f"Could not find next page for: {page}")
