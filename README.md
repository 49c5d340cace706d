# leetkit

A collection of classic algorithm problems, with the binary-tree and
linked-list helpers they need. Everything is plain Python with no
runtime dependencies.

## Installation

```
pip install leetkit
```

For the test suite:

```
pip install "leetkit[test]"
pytest
```

## Building blocks

`leetkit.structures` has `TreeNode` and `ListNode`, plus helpers to build,
show and compare them.

```python
from leetkit.structures import build_tree, build_list, list_to_string, format_tree

tree = build_tree([3, 9, 20, None, None, 15, 7])  # level order; None marks a missing child
print(format_tree(tree))                            # "3 9 20 15 7"

head = build_list([1, 2, 3])
print(list_to_string(head))                         # "1->2->3"
```

`is_same_tree` compares two trees by shape and values; `is_same_list`
compares two lists value by value; `iter_list` yields a list's values;
`print_tree` and `print_list` print the same text as `format_tree` and
`list_to_string`.

## Modules

| Module | Contents |
| --- | --- |
| `leetkit.structures` | `TreeNode`, `ListNode`, `build_tree`, `build_list`, `is_same_tree`, `is_same_list`, `iter_list`, `format_tree`, `list_to_string`, `print_tree`, `print_list` |
| `leetkit.linked_lists` | `RandomListNode`, `copy_random_list`, `has_cycle`, `sort_list`, `quick_sort_list`, `get_intersection_node`, `remove_nth_from_end`, `add_two_numbers`, `reverse_list`, `merge_two_lists`, `merge_k_lists` |
| `leetkit.trees` | `is_symmetric`, `level_order`, `zigzag_level_order`, `max_depth`, `build_from_traversals`, `sorted_array_to_bst`, `connect`, `connect_bfs`, `connect_iterative`, `max_path_sum`, `deepest_leaves_sum`, `deepest_leaves_sum_bfs`, `get_target_copy`, `kth_smallest`, `kth_smallest_iterative` |
| `leetkit.designs` | `LRUCache`, `MinStack`, `Trie` |
| `leetkit.arrays` | `two_sum`, `max_area`, `three_sum`, `single_number`, `longest_consecutive`, `longest_consecutive_set`, `majority_element`, `majority_element_divide`, `rotate`, `rotate_by_reversal`, `contains_duplicate`, `find_peak_element`, `find_peak_element_binary`, `find_kth_largest`, `find_kth_largest_heap` |
| `leetkit.dynamic` | `generate_pascal`, `max_profit`, `max_profit_multiple`, `max_profit_valleys`, `can_complete_circuit`, `can_complete_circuit_brute`, `max_product`, `rob`, `rob_recursive`, `get_skyline` |
| `leetkit.strings` | `is_match`, `is_palindrome`, `roman_to_int`, `palindrome_partitions`, `word_break`, `word_break_dfs`, `word_break_dp`, `word_break_sentences`, `longest_common_prefix`, `eval_rpn`, `fraction_to_decimal`, `letter_combinations`, `title_to_number`, `largest_number`, `is_valid_parentheses`, `generate_parentheses`, `calculate` |
| `leetkit.graphs` | `shortest_path_binary_matrix`, `ladder_length`, `ladder_length_bidirectional`, `capture_surrounded`, `num_islands`, `can_finish`, `can_finish_by_degrees`, `find_order`, `find_order_bfs`, `find_words` |
| `leetkit.arithmetic` | `max_points`, `trailing_zeroes`, `reverse_bits`, `hamming_weight`, `is_happy`, `count_primes`, `count_primes_trial` |

## Examples

```python
from leetkit.designs import LRUCache
from leetkit.strings import fraction_to_decimal
from leetkit.trees import level_order
from leetkit.structures import build_tree

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)        # 1
cache.put(3, 3)     # evicts key 2
cache.get(2)        # -1

fraction_to_decimal(4, 333)                              # "0.(012)"
level_order(build_tree([3, 9, 20, None, None, 15, 7]))   # [[3], [9, 20], [15, 7]]
```

## Several approaches to one problem

Some problems come with more than one approach, such as `word_break`,
`word_break_dfs` and `word_break_dp`. Where a problem has a single right
answer the approaches agree. Where several answers are valid they may
pick different ones: `find_peak_element` returns the first peak from the
left while `find_peak_element_binary` returns whichever peak its binary
search meets, and `find_order` and `find_order_bfs` can return different
valid course orders.

Functions that change their input say so: `rotate`, `rotate_by_reversal`
and `capture_surrounded` work in place, and most list functions relink
the nodes they are given. Invalid input, such as an empty sequence where
a value is needed or a `k` out of range, raises `ValueError`.

## What it does not do

leetkit is a library only: it has no command-line tool, and it reads and
writes no files.