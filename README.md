# algoset

A library of classic algorithm solutions in plain Python. It also has small
helpers to build, parse and print singly linked lists and binary trees. It
needs nothing outside the standard library.

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

- `algoset.listnode`: `ListNode`, `build_list`, `parse_list`, `list_values`, `format_list`
- `algoset.treenode`: `TreeNode`, `build_tree`, `parse_tree`, `level_order_values`, `format_tree`
- `algoset.basics`: `lower_bound`, `upper_bound`, `quick_sort` (sorts in place)
- `algoset.formatting`: `to_text` (renders sequences as `[a,b,c]` and booleans as `1`/`0`), `xor_hash`
- `algoset.lists`: `add_two_numbers`, `remove_nth_from_end`, `swap_pairs`, `detect_cycle`, `reorder_list`, `insert_greatest_common_divisors`
- `algoset.trees`: `construct_maximum_binary_tree`
- `algoset.strings`: `length_of_longest_substring`, `longest_palindrome`, `longest_palindrome_manacher`, `zigzag_convert`, `my_atoi`, `longest_common_prefix`, `generate_parenthesis`, `group_anagrams_sorted`, `group_anagrams_counted`, `min_window`, `is_anagram`, `check_inclusion`, `most_words_found`
- `algoset.numbers`: `reverse_integer`, `is_palindrome_number`, `int_to_roman`, `roman_to_int`, `eval_rpn`, `is_happy`, `subset_xor_sum`
- `algoset.arrays`: `two_sum`, `max_area`, `three_sum_binary_search`, `three_sum_two_pointers`, `search_rotated`, `subsets`
- `algoset.stacks`: `MinStack` (`push`, `pop`, `top`, `get_min`), `largest_rectangle_area`, `car_fleet`
- `algoset.windows`: `min_subarray_len`, `max_sliding_window_rescan`, `max_sliding_window_heap`, `max_sliding_window_deque`, `longest_consecutive`
- `algoset.grids`: `unique_paths_iii`, `diagonal_sort`, `count_points`
- `algoset.groupings`: `intersection`, `group_the_people`, `sum_odd_length_subarrays`, `check_arithmetic_subarrays`, `min_operations`, `count_pairs`, `sort_people`, `find_the_prefix_common_array`

Invalid input raises an exception. For example, `remove_nth_from_end` raises
`ValueError` when `n` is out of range, `int_to_roman` raises it outside 0 to
3999, and an empty `MinStack` raises `IndexError`.

## Example

```python
from algoset.listnode import build_list, format_list
from algoset.lists import swap_pairs
from algoset.treenode import parse_tree, format_tree

print(format_list(swap_pairs(build_list([1, 2, 3, 4]))))   # [2, 1, 4, 3]
print(format_tree(parse_tree("[1,null,2,3]")))              # [1, null, 2, 3]
```

## Command line

```
algoset
algoset "[1,null,2,3]"
```

The command takes a binary tree as level-order text, with `null` for a
missing node. It parses the tree and prints it back in bracketed form. With no
argument it uses a built-in sample tree.

## Not included

The package has no thread-coordination classes. Everything in it runs in a
single thread.