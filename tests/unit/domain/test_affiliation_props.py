"""Hypothesis property tests for Affiliation and UniqueAffiliationList.

Properties exercised:

- **Validation**: construction succeeds iff the trimmed input is non-empty ASCII
  alphanumerics; the stored name is the trimmed input.
- **Uniqueness**: no sequence of successful operations leaves two equal elements.
- **add_all atomicity**: a failing `add_all` leaves the receiver unchanged.
- **merge_from**: never fails, is idempotent, and yields the ordered union.
- **set_affiliations**: the receiver ends equal to the replacement.
- **to_set isolation** and **string round trip**.
"""

from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from addressbook.domain.affiliation import TRIM_CHARS, Affiliation
from addressbook.domain.errors import DuplicateAffiliationError, IllegalValueError
from addressbook.domain.unique_affiliation_list import UniqueAffiliationList
from addressbook.domain.utils import elements_are_unique
from tests.fixtures.affiliations import (
    affiliations,
    unique_affiliation_lists,
    valid_names,
)

pytestmark = [pytest.mark.property]

ALNUM = set(string.ascii_letters + string.digits)


@given(st.text(alphabet=st.characters(max_codepoint=0x3000), max_size=16))
def test_validation_matches_trimmed_alphanumerics(raw: str) -> None:
    """Construction succeeds exactly for non-empty ASCII alphanumerics.

    Only code points up to U+0020 are trimmed; wider Unicode spaces stay and fail.
    """
    trimmed = raw.strip(TRIM_CHARS)
    expected_ok = bool(trimmed) and set(trimmed) <= ALNUM
    try:
        affiliation = Affiliation(raw)
    except IllegalValueError:
        assert not expected_ok
    else:
        assert expected_ok
        assert affiliation.name == trimmed


padding = st.text(alphabet=TRIM_CHARS, max_size=3)


@given(valid_names, padding, padding)
def test_equal_after_trimming(name: str, left: str, right: str) -> None:
    """Padding does not affect equality or hashing."""
    padded = Affiliation(left + name + right)
    assert padded == Affiliation(name)
    assert hash(padded) == hash(Affiliation(name))


@given(affiliations)
def test_str_round_trip(affiliation: Affiliation) -> None:
    """The bracketed core of str() parses back to an equal affiliation."""
    rendered = str(affiliation)
    assert rendered == f"[{affiliation.name}]"
    assert Affiliation(rendered[1:-1]) == affiliation


@given(
    unique_affiliation_lists,
    st.lists(
        st.tuples(
            st.sampled_from(["add", "add_all", "merge_from", "set", "clear"]),
            unique_affiliation_lists,
        ),
        max_size=10,
    ),
)
def test_no_duplicates_after_any_operations(start, operations) -> None:
    """Whatever succeeds, the list never holds two equal affiliations."""
    for operation, other in operations:
        try:
            if operation == "add":
                for affiliation in other:
                    start.add(affiliation)
            elif operation == "add_all":
                start.add_all(other)
            elif operation == "merge_from":
                start.merge_from(other)
            elif operation == "set":
                start.set_affiliations(other)
            else:
                start.clear()
        except DuplicateAffiliationError:
            pass
        assert elements_are_unique(start)
        assert start.to_set() == set(start)


@given(unique_affiliation_lists, unique_affiliation_lists)
def test_add_all_is_all_or_nothing(receiver, other) -> None:
    """add_all either appends everything or changes nothing."""
    before = receiver.copy()
    try:
        receiver.add_all(other)
    except DuplicateAffiliationError:
        assert receiver == before
        assert not before.to_set().isdisjoint(other.to_set())
    else:
        assert list(receiver) == list(before) + list(other)


@given(unique_affiliation_lists, unique_affiliation_lists)
def test_merge_from_is_ordered_union_and_idempotent(receiver, other) -> None:
    """merge_from appends the missing elements in order; repeating it changes nothing."""
    before = list(receiver)
    receiver.merge_from(other)
    expected = before + [a for a in other if a not in before]
    assert list(receiver) == expected
    receiver.merge_from(other)
    assert list(receiver) == expected


@given(unique_affiliation_lists, unique_affiliation_lists)
def test_set_affiliations_replaces(receiver, replacement) -> None:
    """set_affiliations leaves the receiver equal to the replacement."""
    receiver.set_affiliations(replacement)
    assert receiver == replacement


@given(unique_affiliation_lists, affiliations)
def test_to_set_is_isolated(source, extra) -> None:
    """Mutating the snapshot never changes later iteration."""
    before = list(source)
    snapshot = source.to_set()
    snapshot.add(extra)
    snapshot.clear()
    assert list(source) == before


@given(st.lists(affiliations, min_size=1, max_size=8), st.data())
def test_strict_construction_rejects_any_repeat(items, data) -> None:
    """Repeating any element makes strict construction fail."""
    repeated = data.draw(st.sampled_from(items))
    with pytest.raises(DuplicateAffiliationError):
        UniqueAffiliationList.from_iterable(items + [repeated])
