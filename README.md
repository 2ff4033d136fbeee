# dsakit

Classic data-structure and algorithm routines in plain Python, with no
third-party dependencies. Everything is a library function or class; the
package has no command-line program.

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

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `three_sum`, `four_sum`, `is_sorted_rotated`, `max_profit`, `longest_consecutive`, `majority_element`, `majority_elements`, `max_consecutive_ones`, `max_product`, `max_subarray`, `merge_intervals`, `merge_sorted`, `missing_number`, `move_zeroes`, `next_permutation`, `pascal_triangle`, `remove_element`, `remove_duplicates`, `reverse_pairs`, `rotate`, `single_number`, `sort_colors`, `subarray_sum`, `two_sum` |
| `dsakit.matrices` | `rotate_image`, `search_matrix`, `set_zeroes`, `spiral_order` |
| `dsakit.mathutils` | `count_primes`, `is_palindrome_number`, `power`, `reverse_integer`, `fibonacci`, `is_palindrome_text`, `climb_stairs` |
| `dsakit.searching` | `binary_search`, `find_peak_element`, `min_eating_speed`, `find_kth_positive`, `min_days`, `find_min`, `find_peak_grid`, `search_sorted_matrix`, `search_range`, `search_insert`, `search_rotated`, `search_rotated_with_duplicates`, `ship_within_days`, `single_non_duplicate`, `smallest_divisor` |
| `dsakit.bits` | `divide`, `min_bit_flips`, `is_power_of_two`, `single_number`, `single_number_thrice`, `single_numbers_pair`, `subsets` |
| `dsakit.trees` | `TreeNode`, `tree_from_list`, `inorder`, `preorder`, `postorder`, `level_order`, `max_depth`, `is_balanced`, `diameter`, `max_path_sum`, `is_same_tree`, `search_bst` |
| `dsakit.graphs` | `count_provinces`, `oranges_rotting` |
| `dsakit.heaps` | `is_n_straight_hand`, `find_kth_largest`, `least_interval` |
| `dsakit.lists` | `ListNode`, `build_list`, `to_list`, `add_two_numbers`, `has_cycle`, `detect_cycle`, `delete_middle`, `remove_nth_from_end`, `get_intersection_node`, `middle_node`, `is_palindrome`, `reverse_list`, `rotate_right` |
| `dsakit.listops` | `RandomNode`, `reverse_k_group`, `odd_even_list`, `sort_list`, `delete_node`, `copy_random_list`, `merge_k_lists` |
| `dsakit.singly` | `SinglyLinkedList` |
| `dsakit.doubly` | `DoublyLinkedList` |
| `dsakit.containers` | `MinStack`, `BoundedStack`, `BoundedQueue`, `QueueViaStacks`, `StackViaQueue` |
| `dsakit.stackalgos` | `next_greater_element`, `next_greater_circular`, `is_valid_parentheses`, `trap` |
| `dsakit.strings` | `length_of_last_word`, `is_isomorphic`, `largest_odd`, `max_nesting_depth`, `remove_outer_parentheses`, `reverse_words`, `roman_to_int`, `frequency_sort`, `my_atoi`, `beauty_sum`, `is_anagram` |

Functions whose names describe an in-place change (`move_zeroes`,
`next_permutation`, `rotate`, `sort_colors`, `merge_sorted`, `rotate_image`,
`set_zeroes`, ...) modify the list they are given and return `None`, or the new
length where the name says "remove". Empty input where an answer cannot exist
raises `ValueError`; the containers raise `IndexError` on an empty pop or peek
and `OverflowError` when a bounded one is full.

## Examples

```python
from dsakit.arrays import three_sum, merge_intervals
from dsakit.searching import binary_search
from dsakit.bits import divide, min_bit_flips
from dsakit.strings import reverse_words, roman_to_int, my_atoi

three_sum([-1, -1, 2, 0, 1])                       # [[-1, -1, 2], [-1, 0, 1]]
merge_intervals([[1, 3], [2, 6], [8, 10]])         # [[1, 6], [8, 10]]
binary_search([-1, 0, 3, 5, 9, 12], 9)             # 4
divide(22, 3)                                      # 7
min_bit_flips(10, 7)                               # 3
reverse_words("   the sky is     blue   ")         # 'blue is sky the'
roman_to_int("XII")                                # 12
my_atoi(" +9743764253581200415067431L")            # 2147483647 (clamped to 32 bits)
```

Trees are built from level-order values, with `None` for a missing child:

```python
from dsakit.trees import tree_from_list, max_depth, level_order

root = tree_from_list([3, 9, 20, None, None, 15, 7])
max_depth(root)                                    # 3
level_order(root)                                  # [3, 9, 20, 15, 7]
```

Linked-list helpers work on `ListNode` chains:

```python
from dsakit.lists import build_list, reverse_list, to_list

to_list(reverse_list(build_list([1, 2, 3])))       # [3, 2, 1]
```

The list and container classes:

```python
from dsakit.singly import SinglyLinkedList
from dsakit.doubly import DoublyLinkedList
from dsakit.containers import MinStack, BoundedQueue

items = SinglyLinkedList([10, 20])
items.insert_at(30, 1)
list(items)                                        # [10, 30, 20]
items.delete_at(1)                                 # 30

both_ways = DoublyLinkedList([1, 2, 3])
list(reversed(both_ways))                          # [3, 2, 1]

stack = MinStack()
for value in (10, 20, 30):
    stack.push(value)
stack.top(), stack.get_min()                       # (30, 10)

queue = BoundedQueue(3)
for value in (10, 20, 40):
    queue.enqueue(value)
queue.dequeue()                                    # 10
queue.peek()                                       # 20
queue.is_full()                                    # True: dequeued slots are not reused
```