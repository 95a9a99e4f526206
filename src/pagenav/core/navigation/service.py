from __future__ import annotations

"""
Navigation Service.

Orchestrates the resolver, formatter and page lister for interface layers.
This is the boundary where empty resolver answers become reportable
errors: an unknown page raises PageNotFoundError and the last page
raises NoNextPageError.
"""

import logging
from typing import Any, Dict, List

from pagenav.core.navigation.formatter import format_next_pages, split_page_path
from pagenav.core.navigation.pages import list_pages
from pagenav.core.navigation.resolver import locate_next
from pagenav.domain.config import effective_default_track
from pagenav.domain.errors import NoNextPageError, PageNotFoundError
from pagenav.domain.nav_models import NavigationTree, NextPageStatus

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def find_next_pages(tree: NavigationTree, current_page: str, config: Dict[str, Any]) -> Dict[str, str]:
    """
    Resolve and format the next pages of `current_page`.

    Args:
        tree: Parsed navigation map.
        current_page: Page path relative to the site root.
        config: Validated configuration (id_prefix, shared_track,
            default_track, url_prefix).

    Returns:
        Dict[str, str]: Identifier -> URL mapping.

    Raises:
        PageNotFoundError: If the page is not part of the navigation map.
        NoNextPageError: If the page is the last reachable one.
    """
    components = split_page_path(current_page, config["shared_track"])
    logger.debug(f"Resolving next pages for components: {components}")

    result = locate_next(tree, components)

    if result.status is NextPageStatus.NOT_FOUND:
        raise PageNotFoundError(current_page, components)
    if result.status is NextPageStatus.TERMINAL:
        raise NoNextPageError(current_page)

    mapping = format_next_pages(
        result.candidates,
        id_prefix=config["id_prefix"],
        default_track=effective_default_track(config),
        url_prefix=config["url_prefix"],
    )
    logger.info(f"Resolved {len(mapping)} next page(s) for: {current_page}")
    return mapping


def collect_pages(tree: NavigationTree, config: Dict[str, Any]) -> List[str]:
    """
    List every page file referenced by the navigation map.

    Args:
        tree: Parsed navigation map.
        config: Validated configuration (root_path, shared_track).

    Returns:
        List[str]: Page paths in document order.
    """
    pages = list_pages(tree, config["root_path"], config["shared_track"])
    logger.info(f"Navigation references {len(pages)} page(s).")
    return pages
