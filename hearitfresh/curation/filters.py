"""
Text filters for album titles and track names.

Two predicates are used by the curation pipeline:

    Keyword exclusion:
        The lower-cased name must not contain any blacklisted substring.
        Matching is substring based, so "Editorial" is excluded by "edit"
        and "Tourist" by "tour".

    First-occurrence deduplication:
        A name equal (exact, case-sensitive) to an earlier name in the same
        input is dropped. "Song" and "song" are NOT duplicates, even though
        keyword exclusion itself ignores case.

Album titles go through keyword exclusion only; track names go through
both.
"""

from typing import Iterable, Protocol, TypeVar


# Lower-case substrings marking remixes, live recordings and alternate versions
BLACKLISTED_WORDS = (
    "remix",
    "mix",
    "edit",
    "radio",
    "- live",
    " ver.",
    "live-",
    "version",
    "tour",
    "live",
    "event",
    "concert",
)


class Named(Protocol):
    name: str


N = TypeVar("N", bound=Named)


def is_blacklisted(name: str) -> bool:
    """Return True if the lower-cased name contains a blacklisted word."""
    lowered = name.lower()
    return any(word in lowered for word in BLACKLISTED_WORDS)


def exclude_blacklisted(items: Iterable[N]) -> list[N]:
    """Keep items whose name is not blacklisted, in input order."""
    return [item for item in items if not is_blacklisted(item.name)]


def filter_tracks(items: Iterable[N]) -> list[N]:
    """
    Drop blacklisted variants and repeated names in a single pass.

    Args:
        items: Anything exposing a `name` attribute (Track, Album...).

    Returns:
        Surviving items in input order. For every name, only the first
        occurrence can survive.

    Example:
        Names "Song", "Song (Remix)", "Song", "Other" filter down to
        "Song", "Other".
    """
    seen: set[str] = set()
    result: list[N] = []

    for item in items:
        name = item.name
        duplicate = name in seen
        seen.add(name)
        if duplicate or is_blacklisted(name):
            continue
        result.append(item)

    return result
