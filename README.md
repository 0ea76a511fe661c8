# algocollection

A small library of well-known algorithms over plain Python data: lists of
integers, strings, singly linked lists, binary trees and adjacency lists.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algocollection.sums`: `two_sum` (every matching index pair, flattened),
  `three_sum`, `two_sum_sorted` (1-based positions), `max_subarray`,
  `max_product`, `product_except_self`, `min_subarray`
- `algocollection.sequences`: `remove_duplicates`, `sort_colors`,
  `merge_sorted`, `rotate`, `move_zeroes`, `intersect`, `frequency_sort`,
  `longest_consecutive`, `earliest_full_bloom`
- `algocollection.searching`: `search_rotated`, `find_peak_element`,
  `dominant_index`, `count_smaller`
- `algocollection.frequency`: `majority_element`, `majority_elements`,
  `contains_duplicate`, `find_duplicate`, `find_duplicates`
- `algocollection.stacks`: `largest_rectangle_area`, `maximal_rectangle`,
  `next_greater_element`, `next_greater_elements`,
  `remove_duplicate_letters`, `StockSpanner`
- `algocollection.strings`: `multiply`, `group_anagrams`, `compress`,
  `count_palindromic_substrings`, `rotate_string`, `largest_odd_number`
- `algocollection.backtracking`: `solve_sudoku`, `solve_n_queens`
- `algocollection.linked_list`: `ListNode`, `from_values`, `to_values`,
  `remove_nth_from_end`, `has_cycle`, `detect_cycle`, `reverse_list`,
  `is_palindrome`
- `algocollection.tree`: `TreeNode`, `from_level_order`, `is_same_tree`,
  `right_side_view`, `lowest_common_ancestor`, `diameter`
- `algocollection.graph`: `is_bipartite`

## Conventions

- Functions that change their argument in place: `remove_duplicates`
  (returns the number of values kept), `sort_colors`, `merge_sorted`,
  `rotate`, `move_zeroes`, `frequency_sort` (also returns the list),
  `compress` (returns the encoded length), `solve_sudoku` (returns whether
  the board was completed) and `reverse_list` / `remove_nth_from_end`,
  which relink the nodes and return the new head.
- "Not found" answers are `-1` where the result is an index or a value
  (`search_rotated`, `dominant_index`, `majority_element`, `find_duplicate`,
  `min_subarray`), an empty list for `two_sum_sorted`, and `None` for
  `detect_cycle`.
- Invalid input raises `ValueError`: an empty list for `max_subarray` and
  `max_product`, a non-positive `p` for `min_subarray`, a non-digit in
  `multiply`, a board that is not 9x9 in `solve_sudoku`, a negative `n` in
  `solve_n_queens`, an out-of-range `n` in `remove_nth_from_end`, a cyclic
  list in `to_values`, an unknown neighbour in `is_bipartite`, and
  similar mismatches in `merge_sorted`, `earliest_full_bloom`,
  `find_duplicates`, `maximal_rectangle` and `next_greater_element`.

## Examples

```python
from algocollection.sums import three_sum
from algocollection.strings import multiply
from algocollection.stacks import StockSpanner
from algocollection.linked_list import from_values, reverse_list, to_values
from algocollection.tree import from_level_order, right_side_view

three_sum([-1, 0, 1, 2, -1, -4])      # [[-1, -1, 2], [-1, 0, 1]]
multiply("123", "456")                # "56088"

spanner = StockSpanner()
[spanner.next(p) for p in [100, 80, 60, 70, 60, 75, 85]]  # [1, 1, 1, 2, 1, 4, 6]

to_values(reverse_list(from_values([1, 2, 3])))  # [3, 2, 1]

root = from_level_order([1, 2, 3, None, 5, None, 4])
right_side_view(root)                 # [1, 3, 4]
```

## What it does not do

The package is a library only: it has no command-line program, and it
reads no input files. Call its functions from your own code.