import pytest

from algokit.linked_list import (
    ListNode,
    add_two_numbers,
    build_list,
    cycle_start,
    delete_node,
    has_cycle,
    intersection_node,
    is_palindrome,
    list_values,
    merge_two_lists,
    middle_node,
    remove_nth_from_end,
    reverse_k_group,
    reverse_list,
    rotate_right,
)


def _nodes(head):
    out = []
    while head is not None:
        out.append(head)
        head = head.next
    return out


def _with_cycle(values, pos):
    head = build_list(values)
    nodes = _nodes(head)
    nodes[-1].next = nodes[pos]
    return head, nodes


def _digits(number):
    return build_list(int(d) for d in reversed(str(number)))


def _number(head):
    return int("".join(str(d) for d in reversed(list_values(head))))


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3, 4]])
def test_build_and_values_round_trip(values):
    assert list_values(build_list(values)) == values


def test_build_empty_is_none():
    assert build_list([]) is None


@pytest.mark.parametrize("a,b", [(342, 465), (9999999, 9999), (0, 0), (5, 5), (0, 123)])
def test_add_two_numbers(a, b):
    assert _number(add_two_numbers(_digits(a), _digits(b))) == a + b


def test_add_two_numbers_one_side_missing():
    assert _number(add_two_numbers(_digits(85), None)) == 85


def test_add_two_numbers_both_empty():
    with pytest.raises(ValueError):
        add_two_numbers(None, None)


def test_delete_node():
    head = build_list([4, 5, 1, 9])
    delete_node(_nodes(head)[1])
    assert list_values(head) == [4, 1, 9]


def test_delete_last_node_rejected():
    head = build_list([4, 5])
    with pytest.raises(ValueError):
        delete_node(_nodes(head)[-1])


@pytest.mark.parametrize(
    "a,b", [([1, 2, 4], [1, 3, 4]), ([], [0]), ([], []), ([5], [1, 2, 3])]
)
def test_merge_two_lists(a, b):
    merged = merge_two_lists(build_list(a), build_list(b))
    assert list_values(merged) == sorted(a + b)


def test_merge_same_list():
    head = build_list([1, 2])
    assert merge_two_lists(head, head) is head


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6], [9]])
def test_middle_node(values):
    assert middle_node(build_list(values)).val == values[len(values) // 2]


def test_middle_of_empty():
    assert middle_node(None) is None


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_remove_nth_from_end(n):
    values = [1, 2, 3, 4, 5]
    index = len(values) - n
    result = remove_nth_from_end(build_list(values), n)
    assert list_values(result) == values[:index] + values[index + 1 :]


def test_remove_only_node():
    assert remove_nth_from_end(build_list([1]), 1) is None


@pytest.mark.parametrize("n", [0, 3])
def test_remove_nth_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(build_list([1, 2]), n)


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert list_values(reverse_list(build_list(values))) == values[::-1]


def test_has_cycle_true():
    head, _ = _with_cycle([3, 2, 0, -4], 1)
    assert has_cycle(head) is True


def test_has_cycle_false():
    assert has_cycle(build_list([1, 2, 3])) is False
    assert has_cycle(None) is False


def test_intersection_found():
    shared = build_list([8, 4, 5])
    a = build_list([4, 1])
    _nodes(a)[-1].next = shared
    b = build_list([5, 6, 1])
    _nodes(b)[-1].next = shared
    assert intersection_node(a, b) is shared


def test_intersection_absent():
    assert intersection_node(build_list([2, 6, 4]), build_list([1, 5])) is None


@pytest.mark.parametrize(
    "values", [[1, 2, 2, 1], [1, 2, 1], [1, 2], [1], [], [1, 2, 3, 2, 2]]
)
def test_is_palindrome_and_list_restored(values):
    head = build_list(values)
    assert is_palindrome(head) is (values == values[::-1])
    assert list_values(head) == values


def test_reverse_k_group_pinned():
    assert list_values(reverse_k_group(build_list([1, 2, 3, 4, 5]), 2)) == [2, 1, 4, 3, 5]
    assert list_values(reverse_k_group(build_list([1, 2, 3, 4, 5]), 3)) == [3, 2, 1, 4, 5]


def test_reverse_k_group_edges():
    values = [1, 2, 3, 4]
    assert list_values(reverse_k_group(build_list(values), 1)) == values
    assert list_values(reverse_k_group(build_list(values), 4)) == values[::-1]
    assert list_values(reverse_k_group(build_list(values), 5)) == values


def test_reverse_k_group_invalid():
    with pytest.raises(ValueError):
        reverse_k_group(build_list([1]), 0)


def test_cycle_start():
    head, nodes = _with_cycle([3, 2, 0, -4], 1)
    assert cycle_start(head) is nodes[1]


def test_cycle_start_at_head():
    head, nodes = _with_cycle([1, 2], 0)
    assert cycle_start(head) is nodes[0]


def test_cycle_start_none():
    assert cycle_start(build_list([1, 2, 3])) is None


def test_rotate_right_pinned():
    assert list_values(rotate_right(build_list([1, 2, 3, 4, 5]), 2)) == [4, 5, 1, 2, 3]


@pytest.mark.parametrize("k", [0, 1, 3, 5, 7, 12])
def test_rotate_right_matches_slicing(k):
    values = [1, 2, 3, 4, 5]
    shift = k % len(values)
    expected = values[-shift:] + values[:-shift] if shift else values
    assert list_values(rotate_right(build_list(values), k)) == expected


def test_rotate_short_lists():
    assert rotate_right(None, 3) is None
    single = ListNode(1)
    assert rotate_right(single, 4) is single


def test_rotate_negative_rejected():
    with pytest.raises(ValueError):
        rotate_right(build_list([1, 2]), -1)