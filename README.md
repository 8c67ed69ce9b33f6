# dsworkbook

Classic data structures and algorithms as a small, dependency-free Python
library: stacks, queues, linked lists, trees, heaps, graphs, shortest paths,
spanning trees and simple sorts, plus a handful of introductory exercises.

Functions return values (numbers, lists, strings) rather than printing them,
and bounded containers raise exceptions when full or empty.

## Contents

| Module | What it holds |
| --- | --- |
| `dsworkbook.basics` | `describe_sum`, `shortfall`, `letter_grade`, `grade_band`, `digits_low_first`, `even_odd_sums`, `weight_combinations`, `random_array`, `find_max` |
| `dsworkbook.recursion` | `recursive_sum`, `digits_high_first`, `digits_low_first`, `recursive_max`, `gcd`, `fibonacci` (value and call count), `hanoi` (a list of `HanoiMove`), `factorial_iterative`, `factorial_recursive`, `power` |
| `dsworkbook.matrix` | `random_matrix`, `transpose`, `multiply`, `format_matrix` |
| `dsworkbook.polynomial` | `DensePolynomial` and `SparsePolynomial` (built from `Term`s), both supporting `+` and `str()` |
| `dsworkbook.stack` | bounded `Stack` raising `StackOverflowError` / `StackEmptyError` |
| `dsworkbook.expressions` | `brackets_balanced`, `letters_only`, `is_palindrome`, `precedence`, `infix_to_postfix`, `evaluate_postfix` |
| `dsworkbook.queues` | `LinearQueue`, `CircularQueue`, `CircularDeque`, `deque_palindrome`, raising `QueueFullError` / `QueueEmptyError` |
| `dsworkbook.array_list` | bounded `ArrayList` with 0-based positions, raising `ListFullError` |
| `dsworkbook.linked_lists` | `SinglyLinkedList`, `CircularLinkedList`, `DoublyLinkedList` with 1-based positions |
| `dsworkbook.binary_tree` | `TreeNode`; `preorder`, `inorder`, `postorder`, `iterative_inorder`, `level_order`, `node_count`, `leaf_count` |
| `dsworkbook.bst` | `BinarySearchTree` with `insert`, `delete`, `minimum`, traversals, counts and `in` |
| `dsworkbook.heap` | array-backed `MaxHeap` with `insert`, `delete_max`, `items` |
| `dsworkbook.matrix_graph` | adjacency-matrix `MatrixGraph` with `dfs_recursive`, `dfs_iterative`, `bfs` |
| `dsworkbook.list_graph` | adjacency-list `ListGraph` with optionally weighted `Edge`s, DFS, BFS and `edges_by_weight` |
| `dsworkbook.shortest_paths` | `dijkstra` (distances plus a `DijkstraStep` per step), `floyd`, `format_distances`, `INF` |
| `dsworkbook.spanning_tree` | `DisjointSet`, `kruskal`, `prim` |
| `dsworkbook.sorting` | `insertion_sort_passes`, `bubble_sort_passes`, returning the array after each pass |

## Examples

```python
from dsworkbook.expressions import infix_to_postfix, evaluate_postfix

postfix = infix_to_postfix("(2+3)*4")   # "23+4*"
evaluate_postfix(postfix)              # 20
```

```python
from dsworkbook.bst import BinarySearchTree

tree = BinarySearchTree([35, 68, 99, 18, 7, 3, 12, 26, 22, 30])
tree.node_count(), tree.leaf_count()   # (10, 5)
tree.inorder()                         # keys in ascending order
tree.delete(35)                        # True
```

```python
from dsworkbook.list_graph import ListGraph
from dsworkbook.spanning_tree import kruskal, prim

graph = ListGraph()
for name in "abcdefg":
    graph.add_vertex(name)
for v1, v2, weight in [
    ("a", "b", 29), ("a", "f", 10), ("b", "c", 16), ("b", "g", 15),
    ("c", "d", 12), ("d", "e", 22), ("d", "g", 18), ("e", "f", 27),
    ("e", "g", 25),
]:
    graph.add_edge(v1, v2, weight)

[str(edge) for edge in kruskal(graph)]
# ['[af10]', '[cd12]', '[bg15]', '[bc16]', '[de22]', '[ef27]']
prim(graph, "e")
# ['e', 'd', 'c', 'b', 'g', 'f', 'a']
```

## What it does not do

The package is a library only: it has no command-line program and reads no
input. Where a caller wants text output, helpers such as `format_matrix`,
`MatrixGraph.format`, `ListGraph.format`, `format_distances` and the `str()`
of the containers produce it.

## Running the tests

```
pip install -e .[test]
pytest
```