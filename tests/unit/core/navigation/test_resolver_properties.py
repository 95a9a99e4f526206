from __future__ import annotations

"""
Property tests for the Next-Page Resolver.

Random navigation maps are generated from fixed seeds and every page is
checked against independent oracles: document order for single-track
maps, and an explicit walk up the ancestor chain for branching maps.
"""

import itertools
import random
from typing import Any, Iterator, List, Sequence, Tuple

import pytest

from pagenav.core.navigation.loader import parse_navigation
from pagenav.core.navigation.resolver import first_descendants, locate_next, resolve_next
from pagenav.domain.nav_models import Leaf, NavigationNode, NextPageStatus

SEEDS = range(40)
TRACK_NAMES = ["shared", "guide", "api", "extra"]

Level = Tuple[Sequence[NavigationNode], int, Tuple[str, ...]]

# -----------------------------------------------------------------------------
# Generators and oracles
# -----------------------------------------------------------------------------

def _random_nav(rng: random.Random, counter: Iterator[int], max_tracks: int, depth: int = 0) -> List[Any]:
    """Build a raw map with unique page names and recurring track names."""
    items: List[Any] = []
    for _ in range(rng.randint(0, 4)):
        if depth < 3 and rng.random() < 0.4:
            group = {}
            for _ in range(rng.randint(1, max_tracks)):
                group[rng.choice(TRACK_NAMES)] = _random_nav(rng, counter, max_tracks, depth + 1)
            items.append(group)
        else:
            items.append(f"page{next(counter)}.md")
    return items


def _make_tree(seed: int, max_tracks: int):
    rng = random.Random(seed)
    return parse_navigation(_random_nav(rng, itertools.count(), max_tracks))


def _leaves(nodes, crumbs=(), chain=()) -> Iterator[Tuple[List[str], Tuple[Level, ...]]]:
    """Yield (path, ancestor chain) for every leaf in document order."""
    for i, node in enumerate(nodes):
        level = chain + ((nodes, i, crumbs),)
        if isinstance(node, Leaf):
            yield list(crumbs) + [node.name], level
        else:
            for track in node.tracks:
                yield from _leaves(track.children, crumbs + (track.name,), level)


def _expected_next(chain: Tuple[Level, ...]) -> List[List[str]]:
    """Nearest following element, innermost level first, that reaches a leaf."""
    for nodes, index, crumbs in reversed(chain):
        for following in nodes[index + 1:]:
            found = first_descendants(following, crumbs)
            if found:
                return found
    return []

# -----------------------------------------------------------------------------
# Properties
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("seed", SEEDS)
def test_single_track_maps_follow_document_order(seed):
    tree = _make_tree(seed, max_tracks=1)
    paths = [path for path, _ in _leaves(tree)]

    assert resolve_next(tree, []) == ([paths[0]] if paths else [])
    for current, following in zip(paths, paths[1:] + [None]):
        expected = [following] if following else []
        assert resolve_next(tree, current) == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_branching_maps_match_ancestor_walk(seed):
    tree = _make_tree(seed, max_tracks=3)
    for path, chain in _leaves(tree):
        assert resolve_next(tree, path) == _expected_next(chain)


@pytest.mark.parametrize("seed", SEEDS)
def test_every_leaf_is_found_or_terminal(seed):
    tree = _make_tree(seed, max_tracks=3)
    for path, _ in _leaves(tree):
        status = locate_next(tree, path).status
        assert status in (NextPageStatus.FOUND, NextPageStatus.TERMINAL)


@pytest.mark.parametrize("seed", SEEDS)
def test_unknown_page_is_not_found(seed):
    tree = _make_tree(seed, max_tracks=3)
    assert locate_next(tree, ["missing.md"]).status is NextPageStatus.NOT_FOUND
    assert locate_next(tree, ["shared", "missing.md"]).status is NextPageStatus.NOT_FOUND


@pytest.mark.parametrize("seed", SEEDS)
def test_resolution_is_idempotent(seed):
    tree = _make_tree(seed, max_tracks=3)
    for path, _ in _leaves(tree):
        assert resolve_next(tree, path) == resolve_next(tree, path)


@pytest.mark.parametrize("seed", SEEDS)
def test_fan_out_prefixes_each_candidate_with_a_track(seed):
    tree = _make_tree(seed, max_tracks=3)
    for path, _ in _leaves(tree):
        candidates = resolve_next(tree, path)
        if len(candidates) > 1:
            # Branch candidates are distinct and each lives inside a track
            assert len({tuple(c) for c in candidates}) == len(candidates)
            assert all(len(c) >= 2 for c in candidates)
