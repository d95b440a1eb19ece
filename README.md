# algonotes

A collection of classic algorithms and data structures written as plain,
readable Python. Functions take ordinary Python values (lists, strings,
integers) and return their results; nothing is printed. The package has no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algonotes.numbers` | `is_armstrong`, binary/decimal digit conversion (`binary_to_decimal`, `decimal_to_binary`, `add_binary`), bit helpers (`get_bit`, `set_bit`, `clear_bit`, `update_bit`, `clear_last_bits`, `is_even`, `is_power_of_two`, `count_set_bits`), `fast_power`, the recurrences `friend_pairings` and `tiling_ways`, `opposite_task`, `multifactorial`, `nth_prime` (up to the 15000th prime) and `is_triangular_position` |
| `algonotes.arrays` | `reversed_items`, `max_subarray_sum` (Kadane) with `_brute` and `_prefix` variants, `max_product_subarray` and `max_product_subarray_scan`, `contains_duplicate`, `search_rotated`, `max_profit`, `trapped_water`, `pair_sum`, `is_anagram`, `staircase_search`, `spiral_order` |
| `algonotes.sorting` | `counting_sort`, `stable_counting_sort`, `insertion_sort`, `selection_sort`, `merge`, `merge_sort`, `partition`, `quick_sort`, `randomized_quick_sort`, `is_sorted` |
| `algonotes.backtracking` | `stone_pile_difference`, `binary_strings_without_consecutive_ones`, `remove_duplicates`, `n_queens`, `grid_paths`, `count_grid_ways`, `permutations`, `solve_sudoku` |
| `algonotes.patterns` | `left_triangle`, `inverted_right_triangle`, `pyramid` (rows of `*` and `.`) |
| `algonotes.binary_tree` | `Node`, `build_tree` from a preorder listing with `-1` or `None` for missing children, traversals, `height`, `count_nodes`, `sum_of_nodes`, `diameter`, `is_identical`, `is_subtree`, top/bottom/left/right views, `kth_level`, `path_to`, `lca_by_paths`, `lowest_common_ancestor`, `node_distance`, `kth_ancestor`, `transform_to_sum_tree` |
| `algonotes.bst` | `insert`, `build_bst`, `search`, `delete`, `values_in_range`, `root_to_leaf_paths` |
| `algonotes.stacks` | `Stack`, `BoundedStack`, `LinkedStack`, `QueueStack`; `push_bottom`, `reverse_stack`, `largest_rectangle`, `next_greater`, `has_duplicate_parentheses`, `stock_span` |
| `algonotes.queues` | `LinkedQueue`, `ArrayQueue`, `CircularQueue`, `StackQueue`; `first_non_repeating`, `interleave_halves`, `reverse_queue` |
| `algonotes.hash_table` | `HashTable` with separate chaining; it doubles its size when the entry count reaches twice the table size |
| `algonotes.heap` | `MaxHeap`, a list-backed binary max-heap |
| `algonotes.graph` | `Graph`, adjacency lists with `add_edge`, `neighbours`, `adjacency` and `bfs` |

## Examples

```python
from algonotes.arrays import max_subarray_sum, trapped_water, spiral_order
from algonotes.sorting import merge_sort
from algonotes.backtracking import n_queens
from algonotes.binary_tree import build_tree, level_order
from algonotes.heap import MaxHeap
from algonotes.graph import Graph

max_subarray_sum([2, -3, 6, -5, 4, 2])        # 7
trapped_water([4, 2, 0, 6, 3, 2, 5])          # 11
spiral_order([[1, 2], [3, 4]])                 # [1, 2, 4, 3]
merge_sort([5, 6, 8, 7, 1])                    # [1, 5, 6, 7, 8]
len(n_queens(4))                               # 2

root = build_tree([1, 2, 4, -1, -1, 5, -1, -1, 3, -1, 6, -1, -1])
level_order(root)                              # [[1], [2, 3], [4, 5, 6]]

heap = MaxHeap()
for value in (50, 10, 100):
    heap.push(value)
heap.top()                                     # 100

graph = Graph()
graph.add_edge(0, 1)
graph.add_edge(1, 2)
graph.bfs(0)                                   # [0, 1, 2]
```

## Errors

Operations that cannot proceed raise an exception rather than returning a
sentinel value:

- popping or peeking an empty stack, queue or heap raises `IndexError`;
- pushing onto a full `BoundedStack`, `ArrayQueue` or `CircularQueue` raises
  `OverflowError`;
- `HashTable.search` raises `KeyError` for a missing key, while
  `HashTable.remove` returns `False`;
- functions given input they cannot handle (an empty sequence for the
  subarray functions, an out-of-range `nth_prime`, a malformed sudoku grid,
  unbalanced parentheses) raise `ValueError`.

## What it does not do

This is a library only. It installs no command-line program, reads nothing
from standard input and prints nothing; every result is returned to the
caller.