# dsakit

A small collection of classic data structures and algorithms written in
plain Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.dynamic_array` | `DynamicArray`, a growable array whose `capacity` doubles when full and halves when at most a quarter is in use |
| `dsakit.stacks` | `ArrayStack` (bounded), `DynamicStack` (with `push_bottom`), `LinkedStack` (with `top`) and `delete_min` |
| `dsakit.max_stack` | `MaxStack`, with constant-time `find_max` |
| `dsakit.queues` | `ArrayQueue` (circular buffer), `DynamicQueue`, `LinkedQueue` |
| `dsakit.heaps` | `MaxHeap`, `MinHeap`, `heap_sort`, `heap_sort_descending`, `min_of_max_heap` |
| `dsakit.priority_queue` | `PriorityQueue` of `Pair` items: largest key first, earliest inserted among equal keys |
| `dsakit.bst` | Binary search tree functions on `Node`: `insert`, `insert_unique`, `build`, `search`, `delete`, `find_min`, `find_max`, `lowest_common_ancestor`, `quick_search`, `inorder`, `depth` |
| `dsakit.intersection` | `ListNode`, `from_values` and `intersection_point` for merged singly linked lists |
| `dsakit.fibonacci` | `fib_recursive`, `fib_pair`, `fib_iterative`, `fib_iterative_mod`, `fib_matrix` and `timed` |
| `dsakit.hanoi` | `three_tower_moves` and `four_tower_moves`, generators of `(from, to)` moves |
| `dsakit.matrix` | `multiply` and `format_matrix` for integer matrices |

A few details worth knowing:

- `ArrayQueue(capacity)` keeps one slot free, so it holds at most
  `capacity - 1` values.
- `fib_recursive`, `fib_iterative_mod` and `fib_matrix` return F(n) modulo
  10000; `fib_iterative` and `fib_pair` return exact values.
- `bst.delete` returns `(new_root, removed_node)`, and `bst.quick_search`
  returns `(node, new_root)` after lifting the found node one level.
- `delete_min` works on any stack with `is_empty`, `push` and `pop`, and
  keeps the order of the remaining values.

## Installation

```
pip install dsakit
```

## Examples

```python
from dsakit.dynamic_array import DynamicArray
from dsakit.max_stack import MaxStack
from dsakit.heaps import heap_sort
from dsakit.fibonacci import fib_iterative
from dsakit.matrix import multiply

arr = DynamicArray()
for value in (1, 2, 3, 4, 5):
    arr.append(value)
arr.pop()
print(list(arr))            # [1, 2, 3, 4]

stack = MaxStack()
for value in (3, 7, 2):
    stack.push(value)
print(stack.find_max())     # 7

print(heap_sort([12, 11, 13, 5, 6, 7]))   # [5, 6, 7, 11, 12, 13]
print(fib_iterative(10))                  # 55
print(multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]))  # [[19, 22], [43, 50]]
```

Operations that cannot succeed raise exceptions rather than returning
status codes: popping an empty stack raises `StackUnderflow`, a full
`ArrayQueue` raises `QueueOverflow`, an empty heap raises `HeapEmpty`,
multiplying matrices of incompatible shapes raises `DimensionMismatch`,
and lists that share no node make `intersection_point` raise
`NoIntersection`.

## Command-line tools

Four small commands are installed with the package.

`dsakit-dynamic-array` takes no options. It appends 1 to 5, removes the
last value, appends 6 and 7, and prints the array after each step.

`dsakit-matrix` takes no options. It reads the dimensions of two matrices
and then their elements, row by row, from standard input, and prints the
product:

```
echo "2 2 2 2  1 2 3 4  5 6 7 8" | dsakit-matrix
```

`dsakit-hanoi` prints the moves for the Tower of Hanoi. The number of
disks is given as an argument, or read from standard input when omitted;
`-t/--towers` chooses 3 pegs (the default) or 4:

```
dsakit-hanoi 3
dsakit-hanoi --towers 4 5
```

`dsakit-fibonacci` computes F(n) and reports the time taken. `n` is given
as an argument or read from standard input; `-a/--algorithm` picks one of
`iterative` (the default), `iterative-mod`, `matrix`, `pair` or
`recursive`, and `--plain` prints only the number:

```
dsakit-fibonacci 30
dsakit-fibonacci --algorithm matrix --plain 1000
```

`dsakit-hanoi --help` and `dsakit-fibonacci --help` list their options.

## What it does not do

The structures hold values in memory only; nothing is saved to disk.
There is no string search: the searches offered are over the binary
search trees in `dsakit.bst`.

## Running the tests

```
pip install -e ".[test]"
pytest
```