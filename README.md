# algokit

A collection of classic algorithms written as plain Python functions and small
classes. It needs nothing outside the standard library.

The test suite uses pytest, which the `test` extra installs.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.arrays` | in-place array work: `remove_duplicates`, `move_zeroes`, `reverse_in_place`, `plus_one`, `merge_sorted_into`, `sort_colors`, `wiggle_sort`, `first_missing_positive`, `find_duplicate`, `find_duplicate_binary_search`, `find_duplicate_cycle`, `product_except_self` |
| `algokit.searching` | binary searches: `search_matrix`, `search_rotated`, `search_range`, `kth_smallest`, `median_of_sorted`, `median_of_sorted_merge`, `int_sqrt` |
| `algokit.scanning` | one-pass scans over sequences: `max_sliding_window`, `missing_number`, `increasing_triplet`, `top_k_frequent`, `intersect`, `max_subarray`, `can_jump`, `merge_intervals`, `four_sum_count`, `trap`, `largest_rectangle_area`, `count_smaller` |
| `algokit.integers` | 32-bit integer arithmetic: `divide`, `is_power_of_three`, `add_bitwise`, `power`, `reverse_digits`, `parse_int` |
| `algokit.text` | string algorithms: `is_anagram`, `find_substring`, `length_of_longest_substring`, `count_and_say`, `first_unique_char`, `longest_substring_k`, `fizz_buzz`, `wildcard_match`, `group_anagrams`, `longest_palindrome`, `min_window`, `num_decodings` |
| `algokit.backtracking` | `permute`, `permute_unique`, `subsets` |
| `algokit.dynamic` | dynamic programming: `num_squares`, `unique_paths`, `climb_stairs`, `length_of_lis`, `length_of_lis_quadratic`, `length_of_lis_patience`, `coin_change`, `coin_change_recursive`, `coin_change_table`, `unique_paths_with_obstacles`, `longest_increasing_path` |
| `algokit.grid` | two-dimensional boards: `game_of_life`, `is_valid_sudoku`, `rotate`, `spiral_order`, `set_zeroes`, `word_exists` |
| `algokit.linked` | `ListNode` (with `from_values` and iteration over its values), `is_palindrome`, `delete_node`, `odd_even_list` |
| `algokit.trees` | `TreeNode`, `lowest_common_ancestor`, `serialize`, `deserialize`, `inorder`, `is_valid_bst` |
| `algokit.design` | `MedianFinder`, `RandomizedSet`, `Shuffler`, `flatten` |
| `algokit.graphs` | `network_delay_time` (Dijkstra's algorithm) |

## Examples

```python
from algokit.scanning import max_sliding_window, merge_intervals
from algokit.text import min_window
from algokit.dynamic import coin_change

max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3)   # [3, 3, 5, 5, 6, 7]
merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]]) # [[1, 6], [8, 10], [15, 18]]
min_window("ADOBECODEBANC", "ABC")                   # "BANC"
coin_change([1, 2, 5], 11)                           # 3
```

Linked lists and trees:

```python
from algokit.linked import ListNode, odd_even_list
from algokit.trees import serialize, deserialize

head = odd_even_list(ListNode.from_values([1, 2, 3, 4, 5]))
list(head)                 # [1, 3, 5, 2, 4]

root = deserialize("1 2 # # 3 4 # # 5 # # ")
serialize(root)            # "1 2 # # 3 4 # # 5 # # "
```

Small data structures:

```python
import random
from algokit.design import MedianFinder, Shuffler, flatten

finder = MedianFinder()
finder.add_num(1)
finder.add_num(2)
finder.find_median()       # 1.5

list(flatten([1, [2, [3, 4]], 5]))   # [1, 2, 3, 4, 5]

shuffler = Shuffler([1, 2, 3], rng=random.Random(0))
shuffler.shuffle()         # a random ordering of [1, 2, 3]
shuffler.reset()           # [1, 2, 3]
```

`RandomizedSet` and `Shuffler` accept an optional `random.Random` instance so
their results can be made repeatable.

## Notes

Functions whose names describe an in-place change (`move_zeroes`,
`sort_colors`, `reverse_in_place`, `merge_sorted_into`, `wiggle_sort`,
`rotate`, `set_zeroes`, `game_of_life` and the like) change the list they are
given. `plus_one` changes its list and also returns it.

Invalid input raises an exception rather than returning a sentinel, for
example `ValueError` for an empty `max_subarray` input or a `kth_smallest`
rank out of range, and `ZeroDivisionError` from `divide` by zero. Functions
whose result can legitimately be "not found" (`search_rotated`,
`search_range`, `find_substring`, `first_unique_char`, `coin_change`,
`network_delay_time`) return -1 for it.

## What it does not do

algokit is a library only: it has no command-line program and keeps no data
between runs, apart from `num_squares`, which reuses its earlier results
within one process.