"""Instance name exclusion filter."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from gssh.core.models import Instance


def normalize_exclusions(exclusions: Iterable[str]) -> tuple[str, ...]:
    """Drop empty and whitespace-only entries from an exclusion list.

    Parameters
    ----------
    exclusions : Iterable[str]
        Raw substrings from the user configuration

    Returns
    -------
    tuple[str, ...]
        Entries usable as exclusion substrings, in their original order
    """
    return tuple(entry for entry in exclusions if entry.strip())


def is_excluded(name: str, exclusions: Iterable[str]) -> bool:
    """Check whether a name contains any exclusion substring.

    Matching is case-sensitive. Blank entries never match, so an exclusion
    list of ``[""]`` excludes nothing.

    Parameters
    ----------
    name : str
        Instance name
    exclusions : Iterable[str]
        Exclusion substrings

    Returns
    -------
    bool
        True if the name must be hidden
    """
    return any(entry in name for entry in exclusions if entry.strip())


def filter_excluded(
    instances: Iterable[Instance], exclusions: Sequence[str]
) -> list[Instance]:
    """Return the instances whose names are not excluded."""
    return [instance for instance in instances if not is_excluded(instance.name, exclusions)]
