# dsakit

Classic data structures and algorithm exercises in plain Python, with no
dependencies beyond the standard library.

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

- `dsakit.linked_lists` – singly linked lists built from `Node` cells
  (`value`, `next`). Functions take and return the head node:
  `from_values`, `iter_values`, `to_values`, `insert_at_head`,
  `build_by_head_insertion`, `insert_at_position`, `delete_from_head`,
  `delete_at_position`, `delete_from_tail`, `contains`, `has_loop`
  (tortoise-and-hare cycle check), `lists_equal`, and the formatters
  `format_arrows` (`1->2->3`, or `NULL` when empty), `format_lines` and
  `format_reversed`. Positions here are counted from 0.
- `dsakit.circular_list` – `CircularList`, a circular list kept through its
  tail, with `insert_at_beginning`, `insert_at_end`, `delete_at_beginning`
  and `delete_at_end`; it supports `len()` and iteration from the head.
- `dsakit.doubly_list` – `DoublyLinkedList` with insertion and deletion at
  either end or at a position counted from 1, plus `len()`, forward
  iteration and `reversed()`.
- `dsakit.stacks` – `MaxStack` (with `maximum()`), `Stack` (with `peek`,
  `is_empty`, `top_down`), `LinkedQueue` (with `top`, `is_empty`) and
  `TwoStackQueue` (with `enqueue`, `dequeue`, `front`); `is_balanced` for
  bracket strings; and the query runners `run_stack_queries` and
  `run_queue_commands`, which return the lines the queries produce
  (`Invalid` for operations on an empty container). Removing from an empty
  container through the classes raises `IndexError`.
- `dsakit.expressions` – `precedence`, `infix_to_postfix` for single-letter
  operands, and `evaluate_postfix`, which feeds the given operands to the
  letters in turn and applies each operator as `top op below`, with
  division truncating toward zero.
- `dsakit.trees` – `BinarySearchTree` (equal values go left) with
  `inorder`, `preorder` and `postorder` returning lists.
- `dsakit.shortest_paths` – `build_adjacency` for 1-based undirected graphs
  (keeping the lightest parallel edge), `dijkstra` (distances, `None` when
  unreachable) and `shortest_reach` (distances to vertices 1..n, `-1` when
  unreachable, vertices at distance 0 left out).
- `dsakit.tree_paths` – `PathSumTree(node_count, edges)`, a tree rooted at
  node 0 with `lca`, `update` of a node's value and `path_sum` between two
  nodes.
- `dsakit.fighting_pits` – `FightingPits(team_count, fighters)` with
  `add_fighter(strength, team)` and `fight(x, y)`, which returns the winning
  team number when team `x` strikes first.
- `dsakit.puzzles` – `accessory_collection` (returns `None` when no
  arrangement exists), `chief_hopper`, `cutting_boards` (result modulo
  1 000 000 007), `DecibinaryTable` with `nth(k)`, `reverse_shuffle_merge`
  and `sherlock_minimax`.

## Examples

```python
from dsakit.linked_lists import from_values, insert_at_position, format_arrows
from dsakit.expressions import infix_to_postfix
from dsakit.trees import BinarySearchTree
from dsakit.stacks import is_balanced

head = from_values([1, 2, 4])
head = insert_at_position(head, 2, 3)
print(format_arrows(head))              # 1->2->3->4

print(infix_to_postfix("a+b*(c^d-e)"))  # abcd^e-*+

tree = BinarySearchTree([4, 2, 6, 1, 3])
print(tree.inorder())                   # [1, 2, 3, 4, 6]

print(is_balanced("{[()]}"))            # True
```

## What it does not do

The package is a library only. It installs no commands and reads nothing
from standard input; every exercise is reached by calling its function or
class with Python values.