# algosolve

A library of compact solutions to classic algorithm problems, grouped by the
kind of data they work on. It uses only the standard library.

## Modules

- `algosolve.nodes`: the node types `ListNode` (iterating over a node yields
  the values from it to the end of the list), `TreeNode` and `NaryNode`, with
  the helpers `build_list`, `list_values`, `build_tree` and `tree_values`.
  Trees are built from and read back to level-order lists, `None` marking a
  missing child.
- `algosolve.linked_lists`: `merge_two_lists`, `split_list_to_parts`,
  `is_sub_path`, `spiral_matrix`, `insert_greatest_common_divisors`,
  `modified_list`. These relink the nodes they are given rather than copying
  them.
- `algosolve.trees`: `inorder_traversal`, `postorder_traversal`,
  `nary_postorder`, `is_symmetric`, `max_depth`, `sorted_array_to_bst`.
- `algosolve.arithmetic`: `plus_one`, `my_sqrt`, `climb_stairs`,
  `nth_ugly_number`, `find_complement`, `min_steps`, `min_bit_flips`.
- `algosolve.strings`: `length_of_longest_substring`, `str_str`,
  `largest_number`, `number_to_words`, `reverse_vowels`, `nearest_palindromic`,
  `fraction_addition`, `strange_printer`, `min_add_to_make_valid`, `get_lucky`,
  `kth_distinct`, `count_seniors`, `minimum_pushes`.
- `algosolve.grids`: `num_magic_squares_inside`, `robot_sim`,
  `spiral_matrix_iii`, `regions_by_slashes`, `min_days`, `count_sub_islands`.
- `algosolve.arrays`: the `KthLargest` stream tracker and `combination_sum2`,
  `smallest_range`, `smallest_distance_pair`, `lemonade_change`,
  `max_width_ramp`, `stone_game_ii`, `xor_queries`, `can_be_equal`,
  `can_arrange`, `range_sum`, `chalk_replacer`, `max_points`,
  `smallest_chair`, `construct_2d_array`, `missing_rolls`, `min_swaps`,
  `min_groups`, `longest_subarray`.
- `algosolve.graphs`: `remove_stones`, `max_probability`,
  `modified_graph_edges`.

Invalid arguments raise `ValueError`, for example `split_list_to_parts` with
`k < 1`, `number_to_words` with a negative number, or `smallest_range` with an
empty list.

## Examples

```python
from algosolve.nodes import build_list, list_values
from algosolve.linked_lists import merge_two_lists
from algosolve.strings import number_to_words
from algosolve.arrays import KthLargest

merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
print(list_values(merged))          # [1, 1, 2, 3, 4, 4]

print(number_to_words(12345))       # Twelve Thousand Three Hundred Forty Five

stream = KthLargest(3, [4, 5, 8, 2])
print(stream.add(3))                # 4
```

## What it does not do

This is a library of functions only: it installs no command and reads no input
files. Call the functions from your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```