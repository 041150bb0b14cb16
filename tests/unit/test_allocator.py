"""Tests for identifier allocation."""

from __future__ import annotations

from pathlib import Path

import pytest

from rfcs.allocator import ClaimedIdentifiers, allocate_identifier
from rfcs.identifiers import IdentifierSource, extract_identifier, format_identifier
from rfcs.scan import RfcBranch, RfcDocument


def _doc(name: str) -> RfcDocument:
    identifier = extract_identifier(Path(name).name, IdentifierSource.FILE)
    assert identifier is not None
    return RfcDocument(path=Path(name), identifier=identifier)


def _branch(name: str) -> RfcBranch:
    identifier = extract_identifier(name, IdentifierSource.BRANCH)
    assert identifier is not None
    return RfcBranch(name=name, identifier=identifier)


class TestAllocateIdentifier:
    """Tests for allocate_identifier."""

    def test_empty_set(self) -> None:
        assert allocate_identifier(set()) == 1
        assert format_identifier(allocate_identifier(set())) == "001"

    def test_appends_after_contiguous_run(self) -> None:
        assert format_identifier(allocate_identifier({1, 2, 3})) == "004"

    def test_fills_lowest_gap(self) -> None:
        """A gap is filled before appending after the maximum."""
        assert format_identifier(allocate_identifier({1, 3, 4})) == "002"

    def test_width_grows_past_999(self) -> None:
        assert format_identifier(allocate_identifier(set(range(1, 1000)))) == "1000"

    def test_legacy_large_identifier_does_not_block_gap(self) -> None:
        assert allocate_identifier({1, 2, 3, 9999}) == 4

    def test_zero_is_ignored(self) -> None:
        """RFC 000 is a valid document but never blocks allocation of 1."""
        assert allocate_identifier({0}) == 1
        assert allocate_identifier({0, 1}) == 2

    @pytest.mark.parametrize(
        "claimed",
        [set(), {2}, {1, 2, 5, 6}, {3, 1, 2, 7, 4}, {10, 11, 12}, set(range(1, 50)) - {17}],
    )
    def test_result_is_minimal_unclaimed(self, claimed: set[int]) -> None:
        """The result is unclaimed and every smaller positive integer is claimed."""
        result = allocate_identifier(claimed)
        assert result >= 1
        assert result not in claimed
        assert all(value in claimed for value in range(1, result))

    def test_is_deterministic(self) -> None:
        claimed = frozenset({1, 2, 4})
        assert allocate_identifier(claimed) == allocate_identifier(claimed) == 3

    def test_accepts_any_iterable_with_duplicates(self) -> None:
        assert allocate_identifier([1, 1, 2, 2]) == 3


class TestClaimedIdentifiers:
    """Tests for ClaimedIdentifiers snapshots."""

    def test_values_union_files_and_branches(self) -> None:
        claims = ClaimedIdentifiers(
            documents=(_doc("001.md"), _doc("002.md")),
            branches=(_branch("003-draft"),),
        )
        assert claims.values == frozenset({1, 2, 3})
        assert len(claims.candidates) == 3

    def test_duplicate_files_are_ambiguous(self) -> None:
        claims = ClaimedIdentifiers(documents=(_doc("005-a.md"), _doc("nested/005-b.md")))
        assert claims.ambiguous() == {5: ["005-a.md", "nested/005-b.md"]}
        assert claims.values == frozenset({5})

    def test_duplicate_branches_are_ambiguous(self) -> None:
        claims = ClaimedIdentifiers(branches=(_branch("007-one"), _branch("007-two")))
        assert claims.ambiguous() == {7: ["007-one", "007-two"]}

    def test_file_and_branch_sharing_identifier_is_not_ambiguous(self) -> None:
        """An RFC under review has both its file and its branch."""
        claims = ClaimedIdentifiers(
            documents=(_doc("004-New-Thing.md"),),
            branches=(_branch("004-New-Thing"),),
        )
        assert claims.ambiguous() == {}
