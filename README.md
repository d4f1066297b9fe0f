# algokit

Classic algorithms written as plain Python functions and a few small node
classes. There are no runtime dependencies. Python 3.10 or later is needed.

## Modules

### `algokit.binary_search`

- `largest_min_distance(positions, cows)`: the largest minimum gap when placing
  `cows` at the given positions.
- `allocate_books(pages, students)`: the smallest possible maximum number of
  pages one student gets when books are handed out in contiguous runs. Raises
  `ValueError` if `students` is below 1 or exceeds the number of books.
- `kth_element(first, second, k)`: the k-th smallest (1-based) element of two
  sorted sequences.
- `median_of_sorted_arrays(first, second)`: the median of two sorted sequences
  as a float.
- `matrix_median(matrix)`: the median of a matrix with sorted rows, values
  between 1 and 10**9 and an odd element count.
- `nth_root(n, m)`: the n-th root of `m` to within 1e-6.
- `search_rotated(nums, target)`: index of `target` in a rotated sorted
  sequence, or -1.
- `single_non_duplicate(nums)`: the one element that is not paired in a sorted
  sequence.

### `algokit.greedy`

- `Item(value, weight)` and `Job(id, deadline, profit)`: frozen dataclasses.
- `fractional_knapsack(capacity, items)`: best value, splitting the last item
  if needed.
- `job_scheduling(jobs)`: `(jobs_done, total_profit)` for unit-time jobs.
- `min_coins(value)`: the coins, largest first, from the denominations 1, 2, 5,
  10, 20, 50, 100, 500 and 1000.
- `min_platforms(arrivals, departures)`: platforms needed so no train waits.
- `max_meetings(starts, ends)`: most meetings one room can hold; a meeting must
  start strictly after the previous one ends.

### `algokit.heaps`

- `MedianFinder`: running median with `add_num(num)` and `find_median()`;
  `find_median()` raises `ValueError` before any number is added.
- `top_k_frequent(nums, k)`: the `k` most frequent values, most frequent first.
- `find_kth_largest(nums, k)`: the k-th largest value.
- `max_sum_combinations(first, second, count)`: the `count` largest sums of one
  value from each sequence, largest first.
- `merge_k_sorted(arrays)`: all values in ascending order.

### `algokit.arrays`

- `three_sum(nums)`: every distinct ascending triple that sums to zero.
- `max_consecutive_ones(nums)`: length of the longest run of ones.
- `remove_duplicates(nums)`: compacts a sorted list in place and returns the
  number of unique values now at its front.
- `trap(heights)`: rain water held by an elevation profile.

### `algokit.binary_tree`

- `TreeNode(val, left=None, right=None)`.
- `inorder`, `preorder`, `postorder`: traversals as lists of values.
- `all_traversals(root)`: `(inorder, preorder, postorder)` from one stack walk.
- `morris_inorder`, `morris_preorder`: traversals through temporary threaded
  links; the tree is restored before they return.
- `left_view`, `top_view`, `bottom_view`: the values seen from each side.
- `vertical_traversal(root)`: columns left to right, ordered by row and then by
  value within a row.
- `root_to_node_path(root, target)`: values from the root to the first node
  holding `target`, or `[]`.
- `width_of_binary_tree(root)`: widest level, counting gaps between its end
  nodes.

### `algokit.recursion`

- `combination_sum(candidates, target)`: combinations with reuse; candidates
  must be positive.
- `combination_sum2(candidates, target)`: distinct combinations, each
  candidate used at most once.
- `kth_permutation(n, k)`: the k-th lexicographic permutation of the digits
  1..n as a string.
- `palindrome_partitions(text)`: every split of `text` into palindromes.
- `subsets_with_dup(nums)`: every distinct subset, each in ascending order.
- `subset_sums(nums)`: the sum of every subset.

### `algokit.linked_list`

- `ListNode(val=0, next=None)`, `build_list(values)`, `list_values(head)`.
- `add_two_numbers(first, second)`: sum of two numbers stored least
  significant digit first, as a new list.
- `delete_node(node)`: removes a node that is not the last one, in O(1).
- `merge_two_lists`, `middle_node`, `remove_nth_from_end`, `reverse_list`,
  `reverse_k_group`, `rotate_right`: these relink the given nodes in place.
- `has_cycle`, `cycle_start`, `intersection_node`.
- `is_palindrome(head)`: the list is left unchanged.

### `algokit.special_lists`

- `MultiLevelNode(data, next=None, bottom=None)` and `flatten(root)`: merges
  the sorted columns into one sorted chain linked through `bottom`, reusing
  the nodes.
- `RandomNode(val, next=None, random=None)` and `copy_random_list(head)`: a
  deep copy whose `random` links point into the copy.

Invalid arguments, such as an out-of-range `k` or `n`, raise `ValueError`.

## Examples

```python
from algokit.binary_search import largest_min_distance
from algokit.heaps import MedianFinder
from algokit.linked_list import build_list, list_values, reverse_list

largest_min_distance([1, 2, 8, 4, 9], 3)   # 3

finder = MedianFinder()
for value in (5, 15, 1, 3):
    finder.add_num(value)
finder.find_median()                        # 4.0

list_values(reverse_list(build_list([1, 2, 3])))  # [3, 2, 1]
```

## What it does not do

This is a library only. There is no command-line tool, and nothing reads
input files or stores results.

## Running the tests

```
pip install -e ".[test]"
pytest
```