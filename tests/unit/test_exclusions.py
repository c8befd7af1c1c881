"""Unit tests for the instance name exclusion filter."""

from gssh.core.exclusions import filter_excluded, is_excluded, normalize_exclusions
from gssh.core.models import Instance


def test_is_excluded_matches_substring_anywhere() -> None:
    assert is_excluded("gke-pool-1", ["gke-"])
    assert is_excluded("my-gke-node", ["gke-"])
    assert not is_excluded("web-1", ["gke-"])


def test_is_excluded_is_case_sensitive() -> None:
    assert not is_excluded("GKE-pool", ["gke-"])


def test_is_excluded_ignores_blank_entries() -> None:
    """Test that an exclusion list of empty strings excludes nothing."""
    assert not is_excluded("anything", [""])
    assert not is_excluded("anything", ["  "])


def test_is_excluded_with_no_exclusions() -> None:
    assert not is_excluded("gke-pool", [])


def test_normalize_exclusions_drops_blank_entries_and_keeps_order() -> None:
    assert normalize_exclusions(["b-", "", "  ", "a-"]) == ("b-", "a-")


def test_filter_excluded_preserves_order() -> None:
    instances = [
        Instance("web-2", "z", "RUNNING"),
        Instance("gke-x", "z", "RUNNING"),
        Instance("web-1", "z", "STOPPED"),
    ]

    result = filter_excluded(instances, ("gke-",))

    assert [instance.name for instance in result] == ["web-2", "web-1"]
