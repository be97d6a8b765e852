import operator

import pytest

from volray.sequences import (
    OperationTimeout,
    all_of_pairs,
    any_of_pairs,
    are_inverse,
    assign_elements,
    compose,
    copy_elements,
    copy_if_index,
    ends_with,
    find_if_pairs,
    for_each_pair,
    for_each_pair_unordered,
    is_permutation,
    permutate_cycle,
    permutate_from_indices,
    permutate_from_iter,
    permutate_inverse,
    permutate_to_indices,
    remove_if_index,
    starts_with,
    transpose,
    vector_less,
)


def test_timeout_message():
    assert str(OperationTimeout()) == "timeout error"


def test_all_of_pairs():
    assert all_of_pairs([1, 2, 3], [2, 3, 4], operator.lt)
    assert not all_of_pairs([1, 5, 3], [2, 3, 4], operator.lt)


def test_find_and_any_of_pairs():
    assert find_if_pairs([1, 5, 3], [2, 3, 4], operator.gt) == 1
    assert find_if_pairs([1, 2], [2, 3], operator.gt) is None
    assert any_of_pairs([1, 5], [2, 3], operator.gt)
    assert not any_of_pairs([1, 2], [2, 3], operator.gt)


def test_transpose_twice_is_identity():
    rows = [[1, 2, 3], [4, 5, 6]]
    once = transpose(rows)
    assert once == [[1, 4], [2, 5], [3, 6]]
    assert transpose(once) == rows
    assert transpose([]) == []


def test_copy_elements():
    source = ["a", "b", "c", "d"]
    target = ["w", "x", "y", "z"]
    result = copy_elements(source, target, [0, 2])
    assert result == ["a", "x", "c", "z"]
    assert target == ["w", "x", "y", "z"]


def test_remove_and_copy_if_index_are_complementary():
    items = list("abcdef")
    mask = [index % 2 == 0 for index in range(len(items))]
    kept = copy_if_index(items, mask)
    removed = remove_if_index(items, lambda i: mask[i])
    assert kept == ["a", "c", "e"]
    assert removed == ["b", "d", "f"]
    assert sorted(kept + removed) == items


def test_permutate_to_and_from_indices_round_trip():
    perm = [2, 0, 3, 1]
    values = ["p", "q", "r", "s"]
    scattered = permutate_to_indices(perm, values, [None] * 4)
    assert permutate_from_indices(perm, scattered) == values


def test_permutate_inverse():
    perm = [2, 0, 3, 1]
    inverse = permutate_inverse(perm)
    assert are_inverse(perm, inverse)
    assert are_inverse(inverse, perm)
    assert permutate_inverse(inverse) == perm


def test_permutate_inverse_rejects_non_permutation():
    with pytest.raises(ValueError):
        permutate_inverse([0, 0, 1])


def test_is_permutation():
    assert is_permutation([3, 1, 0, 2])
    assert is_permutation([])
    assert not is_permutation([0, 1, 1])
    assert not is_permutation([0, 5])


def test_are_inverse_false():
    assert not are_inverse([1, 0, 2], [0, 1, 2])


def test_permutate_from_iter_matches_indexing():
    items = ["a", "b", "c", "d", "e"]
    from_index = [3, 4, 0, 2, 1]
    result = permutate_from_iter(items, from_index)
    assert result == [items[i] for i in from_index]


def test_permutate_from_iter_rejects_bad_index():
    with pytest.raises(ValueError):
        permutate_from_iter(["a", "b"], [0, 0])


def test_permutate_cycle_with_sequence():
    items = ["a", "b", "c", "d"]
    from_index = [1, 2, 0, 3]
    assert permutate_cycle(items, from_index) == ["b", "c", "a", "d"]


def test_permutate_cycle_with_function():
    items = list(range(5))
    result = permutate_cycle(items, lambda i: (i + 1) % 5)
    assert result == [items[(i + 1) % 5] for i in range(5)]


def test_permutate_cycle_without_return_raises():
    with pytest.raises(ValueError):
        permutate_cycle(["a", "b", "c"], [1, 2, 1])


def test_assign_elements():
    out = [0] * 5
    assert assign_elements([1, 3], out, 7) == [0, 7, 0, 7, 0]
    assert assign_elements([1, 2, 3], out, 7, lambda i: i != 2) == [0, 7, 0, 7, 0]
    assert out == [0] * 5


def test_for_each_pair_counts():
    seen = []
    fn = for_each_pair([1, 2], ["a", "b", "c"], lambda a, b: seen.append((a, b)))
    assert len(seen) == 6
    assert (2, "c") in seen
    assert callable(fn) and fn is not None

    same = []
    for_each_pair([1, 2, 3], None, lambda a, b: same.append((a, b)))
    assert len(same) == 9
    assert (2, 2) in same


def test_for_each_pair_unordered():
    seen = []
    for_each_pair_unordered(["a", "b", "c", "d"], lambda a, b: seen.append((a, b)))
    assert len(seen) == 6
    assert all(a < b for a, b in seen)
    assert len(set(seen)) == len(seen)


def test_compose_order():
    f = compose(str, abs)
    assert f(-5) == "5"
    g = compose(lambda x: x * 2, lambda x: x + 1)
    assert g(3) == (3 + 1) * 2


def test_starts_and_ends_with():
    assert ends_with("scene.bin", ".bin")
    assert not ends_with("bin", "scene.bin")
    assert starts_with("scene.bin", "scene")
    assert not starts_with("sc", "scene")


def test_vector_less():
    assert vector_less([1, 2], [1, 3])
    assert vector_less([1, 2], [1, 2, 0])
    assert not vector_less([1, 2], [1, 2])
    assert not vector_less([2], [1, 9])