"""Tests for duplicate grouping."""

import itertools

from block_dedup.detector.grouper import DuplicateGrouper, group_pairwise


def _membership(groups) -> set[frozenset[str]]:
    return {frozenset(g.paths) for g in groups}


def test_groups_equal_fingerprints(make_candidate) -> None:
    """Files sharing a fingerprint end up in one group."""
    candidates = [
        make_candidate("/a.txt", (1, 2)),
        make_candidate("/b.txt", (1, 2)),
        make_candidate("/c.txt", (3,)),
    ]

    groups = DuplicateGrouper().group(candidates)

    assert len(groups) == 1
    assert groups[0].paths == ("/a.txt", "/b.txt")
    assert groups[0].count == 2


def test_unique_files_are_not_emitted(make_candidate) -> None:
    """No group is produced for files without a peer."""
    candidates = [make_candidate(f"/{i}.bin", (i,)) for i in range(5)]

    assert DuplicateGrouper().group(candidates) == []


def test_prefix_fingerprint_is_not_equal(make_candidate) -> None:
    """Fingerprints of different length never match."""
    candidates = [
        make_candidate("/short", (7,)),
        make_candidate("/long", (7, 7)),
    ]

    assert DuplicateGrouper().group(candidates) == []


def test_same_path_twice_is_not_a_group(make_candidate) -> None:
    """Group members are distinct paths."""
    candidates = [make_candidate("/same", (1,)), make_candidate("/same", (1,))]

    assert DuplicateGrouper().group(candidates) == []


def test_members_sorted_and_groups_ordered_by_key(make_candidate) -> None:
    """Output order is fixed regardless of input order."""
    candidates = [
        make_candidate("/z/2", (2,)),
        make_candidate("/m", (1,)),
        make_candidate("/b/2", (2,)),
        make_candidate("/a", (1,)),
        make_candidate("/c", (1,)),
    ]

    groups = DuplicateGrouper().group(candidates)

    assert [g.paths for g in groups] == [("/a", "/c", "/m"), ("/b/2", "/z/2")]
    assert [g.group_id for g in groups] == [1, 2]
    assert groups[0].key < groups[1].key


def test_grouping_is_insensitive_to_input_order(make_candidate) -> None:
    """Every permutation of the input gives identical groups."""
    candidates = [
        make_candidate("/a", (1, 1)),
        make_candidate("/b", (1, 1)),
        make_candidate("/c", (2,)),
        make_candidate("/d", (2,)),
        make_candidate("/e", (3,)),
    ]
    grouper = DuplicateGrouper()
    expected = [g.paths for g in grouper.group(candidates)]

    for permutation in itertools.permutations(candidates):
        assert [g.paths for g in grouper.group(permutation)] == expected


def test_matches_pairwise_reference(make_candidate) -> None:
    """Linear grouping produces the same groups as all-pairs comparison."""
    candidates = [
        make_candidate(f"/file{i}", (i % 4, i % 3), size=i % 4)
        for i in range(24)
    ] + [make_candidate("/empty1", ()), make_candidate("/empty2", ())]

    linear = DuplicateGrouper().group(candidates)
    reference = group_pairwise(candidates)

    assert _membership(linear) == _membership(reference)
    assert [(g.key, g.paths) for g in linear] == [(g.key, g.paths) for g in reference]


def test_group_key_is_fingerprint_bytes(make_candidate) -> None:
    """The group key is the canonical form of the shared fingerprint."""
    candidates = [make_candidate("/x", (1, 2)), make_candidate("/y", (1, 2))]

    group = DuplicateGrouper().group(candidates)[0]

    assert group.key == group.fingerprint.key
    assert group.key == b"\x01\x00\x00\x00\x02\x00\x00\x00"
    assert group.block_count == 2
