from __future__ import annotations

"""
Next-Page Output Formatter.

Translates between filesystem-relative page paths and resolver paths, and
renders resolved candidates into the flat identifier -> URL mapping that
templates consume.
"""

import os
import posixpath
import re
from typing import Dict, List, Sequence

from pagenav.domain.nav_models import ResolvedPath

ID_SEPARATOR = "-"
TRACK_SEPARATOR = "_"

_SPLIT_RX = re.compile(r"[\\/]" if os.sep == "\\" else r"/")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_page_path(current_page: str, shared: str) -> List[str]:
    """
    Split a page path into resolver components.

    A leading component equal to the shared track name is dropped, since
    root-level pages are stored under that directory but live at the
    root of the navigation map.

    Args:
        current_page: Relative path such as 'lib/utils/helper.md'.
        shared: Name of the shared track directory.

    Returns:
        List[str]: Path components, empty for an empty page.
    """
    page = (current_page or "").strip()
    if not page:
        return []

    parts = _SPLIT_RX.split(page)
    if parts and parts[0] == shared:
        parts = parts[1:]
    return parts


def format_next_pages(
        candidates: Sequence[ResolvedPath],
        id_prefix: str,
        default_track: str,
        url_prefix: str = "",
) -> Dict[str, str]:
    """
    Build the identifier -> URL mapping for resolved candidates.

    Identifiers are '<id_prefix>-<track>_<subtrack>'. A single candidate
    collapses to the bare prefix so templates can address the common
    linear case without knowing the track.

    Args:
        candidates: Resolved destination paths.
        id_prefix: Prefix of every identifier.
        default_track: Track used for root-level pages.
        url_prefix: Prefix prepended to every URL.

    Returns:
        Dict[str, str]: Mapping in candidate order.
    """
    entries: List[List[str]] = []
    for components in candidates:
        *breadcrumb, file_name = components
        if not breadcrumb:
            breadcrumb = [default_track]
        identifier = id_prefix + ID_SEPARATOR + TRACK_SEPARATOR.join(breadcrumb)
        # Absolute components would reset posixpath.join
        segments = [c.lstrip("/") for c in breadcrumb + [file_name]]
        entries.append([identifier, posixpath.join(url_prefix or "", *segments)])

    if len(entries) == 1:
        entries[0][0] = id_prefix

    return {identifier: url for identifier, url in entries}
