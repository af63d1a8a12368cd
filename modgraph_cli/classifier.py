"""Pick the greatest version of each module, the way minimal version selection does.

Node names of the form ``module@version`` are grouped by module.  Within a
group the greatest semantic version is *selected*; every other version is
*superseded*.  Names without ``@`` (the main module) are ignored.

The scan is single pass over nodes in discovery order: when a greater
version turns up, the previous best is moved to the superseded list at
that moment instead of being resolved afterwards.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

import semver

from .graph import Graph
from .models import Classification

logger = logging.getLogger(__name__)

VERSION_DELIMITER = "@"


def split_version(name: str) -> Tuple[str, Optional[str]]:
    """Split ``module@version`` at the first ``@``.

    Returns ``(name, None)`` for unversioned names.
    """
    module, sep, version = name.partition(VERSION_DELIMITER)
    if not sep:
        return name, None
    return module, version


def parse_version(token: str) -> Optional[semver.Version]:
    """Parse a Go-style version (``v1.2.3``, ``v1.2``, ``1.2.3-rc.1``).

    Returns None for anything that is not a valid semantic version.
    """
    text = token[1:] if token.startswith("v") else token
    core = text.split("-", 1)[0].split("+", 1)[0]
    # Shorthand (v1, v1.2) is only valid without a prerelease or build suffix.
    if core != text and core.count(".") < 2:
        return None
    try:
        return semver.Version.parse(text, optional_minor_and_patch=True)
    except ValueError:
        return None


def compare_versions(left: str, right: str) -> int:
    """Three-way comparison of two version tokens.

    Invalid versions sort below every valid one and compare equal to each
    other.  Build metadata is ignored.
    """
    left_version = parse_version(left)
    right_version = parse_version(right)
    if left_version is None and right_version is None:
        return 0
    if left_version is None:
        return -1
    if right_version is None:
        return 1
    return left_version.compare(right_version)


def classify_names(names: Iterable[str]) -> Classification:
    """Classify node names given in discovery order.

    Names are expected to be unique; the caller deduplicates by node.
    Equal versions keep the first one seen as selected.
    """
    best: Dict[str, str] = {}
    superseded: List[str] = []

    for name in names:
        module, version = split_version(name)
        if version is None:
            continue

        current = best.get(module)
        if current is None:
            best[module] = version
        elif compare_versions(current, version) < 0:
            superseded.append(module + VERSION_DELIMITER + current)
            best[module] = version
        else:
            superseded.append(name)

    selected = sorted(module + VERSION_DELIMITER + version for module, version in best.items())
    logger.debug("Classified %d selected, %d superseded", len(selected), len(superseded))
    return Classification(selected=tuple(selected), superseded=tuple(superseded))


def classify(graph: Graph) -> Classification:
    """Classify every node of *graph* in first-mention order."""
    return classify_names(graph.names())
