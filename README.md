# dsakit

Compact implementations of classic data structures and algorithms, using only
the Python standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `dsakit.dp` | `coin_change`, `fibonacci_memo`, `fibonacci_table`, `knapsack`, `knapsack_memo` |
| `dsakit.sorting` | `merge_sort`, `binary_search` |
| `dsakit.heap` | `Heap`, a binary min-heap or max-heap |
| `dsakit.mst` | `Edge`, `kruskal`, `prim`, minimum spanning trees |
| `dsakit.food_list` | `Food`, `FoodList`, `Person`, `PersonList`, people each with a list of foods |
| `dsakit.age_list` | `Entry`, `AgeList`, named entries with pushes and pops at both ends and sorted insertion by age |
| `dsakit.campus_map` | `Campus`, `render_map`, places linked north, south, east and west |
| `dsakit.counter` | `TickCounter`, `run_prompt`, `main`, a background counter with a prompt |

## Examples

### Dynamic programming

```python
from dsakit.dp import coin_change, fibonacci_memo, fibonacci_table, knapsack, knapsack_memo

coin_change([1, 2, 5], 6)                  # 2
coin_change([2], 3)                        # -1, the amount cannot be made
fibonacci_memo(10)                         # 55
fibonacci_table(10)                        # 55
knapsack(5, [2, 3, 5], [10, 15, 20])       # 25
knapsack_memo(5, [2, 3, 5], [10, 15, 20])  # 25
```

Negative amounts, capacities, coins or weights, and `weights`/`values` of
different lengths, raise `ValueError`.

### Sorting and searching

```python
from dsakit.sorting import merge_sort, binary_search

values = merge_sort([401, 32, 199, 501, 222, 10, 2, 3, 919])
# [2, 3, 10, 32, 199, 222, 401, 501, 919]
binary_search(values, 501)   # 7
binary_search(values, 4)     # None
```

`merge_sort` returns a new list and leaves its argument alone.

### Heaps

```python
from dsakit.heap import Heap

heap = Heap(maximum=True)
for value in (1, 100, 20, 3000, 32):
    heap.push(value)
heap.peek()          # 3000
heap.pop()           # 3000
len(heap)            # 4
heap.as_list()       # values in storage order
print(heap.render_tree())
```

`Heap()` without arguments is a min-heap. `pop` and `peek` on an empty heap
raise `IndexError`. `render_tree` returns the heap drawn sideways, right
subtree on top, four spaces per level.

### Minimum spanning trees

```python
from dsakit.mst import Edge, kruskal, prim

edges = [Edge(0, 1, 7), Edge(0, 2, 4), Edge(1, 3, 2), Edge(2, 4, 3), Edge(3, 4, 3)]
kruskal(edges, 5)
# [Edge(1, 3, 2), Edge(2, 4, 3), Edge(3, 4, 3), Edge(0, 2, 4)]

matrix = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]
prim(matrix)
# [Edge(0, 1, 2), Edge(1, 2, 3), Edge(0, 3, 6), Edge(1, 4, 5)]
```

`kruskal` returns edges in the order it picks them; `prim` returns one
`Edge(parent, vertex, cost)` per vertex other than `start`, in vertex order.
In the matrix, 0 means no edge. A disconnected graph, an out-of-range vertex
or a non-square matrix raises `ValueError`.

### People and their foods

```python
from dsakit.food_list import PersonList

people = PersonList()
people.add_person("Andi")
people.add_food("Andi", "Jeruk", 10)
people.add_person("Budi")
people.add_food("Budi", "Apel", 20)
people.remove_food("Budi", "Apel")   # True
print(people.view(), end="")
# Andi
# Jeruk 10
# Budi
```

`add_food` and `remove_food` raise `KeyError` for an unknown person.
`remove_person` and `FoodList.remove` return whether something was removed.

### Entries ordered by age

```python
from dsakit.age_list import AgeList

entries = AgeList()
entries.push_head("Jordan", 23)
entries.push_tail("Toni", 40)
entries.insert_sorted("Guan", 30)
print(entries.render(), end="")
# Name : Jordan, Age: 23 -> Name : Guan, Age: 30 -> Name : Toni, Age: 40 ->
entries.find(30)         # Entry(name='Guan', age=30)
entries.remove_age(30)   # removes and returns that entry
```

Popping from an empty list raises `IndexError`; `remove_age` raises
`KeyError` when no entry has that age. `render` returns `Empty` for an empty
list.

### Campus map

```python
from dsakit.campus_map import Campus, render_map

root = Campus("Anggrek", 1000)
south = root.add_south("Syahdan", 500)
root.add_north("Kantin", 10)
root.add_east("Mart", 20)
south.add_west("Kijang", 200)
print(render_map(root, 1))
```

Adding a neighbour on a side that is already taken raises `ValueError`.
`render_map` expands each campus once and stops below `max_level`.

## Command line

`dsakit-counter` starts a counter that goes up by one each second in the
background. At the prompt, type `d` to show the current count or `q` to quit;
end of input also quits.

```
dsakit-counter
dsakit-counter --interval 0.5
```

`--interval` sets the seconds between ticks. The same counter is available in
code as `TickCounter`, which can be used as a context manager, and
`run_prompt(counter, stdin, stdout)` drives the prompt over any text streams.

## What this package does not do

Everything is held in memory; nothing is saved to or loaded from files. The
rendering methods return strings rather than printing them.