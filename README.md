# corestructs

Compact, easy-to-follow implementations of the classic data structures:

| Module | Class | What it is |
| --- | --- | --- |
| `corestructs.vector` | `Vector` | Growable array that doubles its capacity when full |
| `corestructs.circular_queue` | `CircularQueue`, `QueueEmptyError`, `QueueFullError` | Fixed-capacity ring-buffer queue |
| `corestructs.linked_list` | `SinglyLinkedList` | Singly linked list with index access |
| `corestructs.priority_queue` | `SortedPriorityQueue` | Max-priority queue kept as a sorted array |
| `corestructs.heap` | `MaxHeap` | Array-backed binary max-heap |
| `corestructs.tree` | `BinarySearchTree`, `TraversalType` | Unbalanced binary search tree with traversals |
| `corestructs.cli` | `main` | The `corestructs` command |

The package uses only the standard library and supports Python 3.10 and
later. Every structure lives in memory only; nothing is saved to disk.

## Installation

```
pip install corestructs
```

## Usage

### Vector

`Vector` keeps an explicit `capacity` that doubles when an insertion finds
it full. Indexing outside the stored elements raises `IndexError`, as does
`pop()` on an empty vector.

```python
from corestructs.vector import Vector

vec = Vector(5)
for i in range(10):
    vec.append(i)

str(vec)          # "[0, 1, 2, 3, 4, 5, 6, 7, 8, 9]"
vec.capacity      # 10
vec.insert(3, 99)
vec.remove(3)     # 99
vec.pop()         # 9
vec.find(4)       # 4, the index of the first match (-1 when absent)
```

### Circular queue

A `CircularQueue` has a fixed capacity. Enqueueing into a full queue raises
`QueueFullError`; dequeueing from or peeking into an empty one raises
`QueueEmptyError`.

```python
from corestructs.circular_queue import CircularQueue

queue = CircularQueue(5)
for i in range(5):
    queue.enqueue(i)
for _ in range(3):
    queue.dequeue()
queue.enqueue(5)
queue.enqueue(6)

str(queue)             # "[3, 4, 5, 6]"
queue.peek()           # 3
queue.memory_layout()  # "[5, 6, _, 3, 4]", "_" marks unused slots
```

### Singly linked list

`push` and `pop` work at the front of the list; `insert`, `remove` and
indexing take a position and raise `IndexError` when it is out of range.

```python
from corestructs.linked_list import SinglyLinkedList

items = SinglyLinkedList()
items.push(2)
items.push(1)
items.insert(len(items), 3)
str(items)      # "[1, 2, 3]"
items[1] = 20
items.pop()     # 1, removed from the front
items.is_empty()  # False
```

### Priority queues

Both priority queues hand out the largest value first and grow their
capacity when full. Taking from an empty one raises `IndexError`.

```python
from corestructs.priority_queue import SortedPriorityQueue
from corestructs.heap import MaxHeap

pq = SortedPriorityQueue(5)
for value in (5, 3, 8, 1, 7, 2):
    pq.enqueue(value)
str(pq)         # "[8, 7, 5, 3, 2, 1]"
pq.peek()       # 8
pq.dequeue()    # 8
pq.clear()
pq.has_items()  # False

heap = MaxHeap(4)
for value in (5, 3, 8, 1):
    heap.enqueue(value)
heap.dequeue()  # 8
print(heap.render())  # the heap drawn level by level
```

### Binary search tree

Equal values go to the right subtree. Traversals are generators, breadth
first or depth first in pre-, in- or post-order chosen with a
`TraversalType`.

```python
from corestructs.tree import BinarySearchTree, TraversalType

tree = BinarySearchTree("aloha")
list(tree.breadth_first())                        # ['a', 'l', 'h', 'o', 'a']
list(tree.depth_first(TraversalType.IN_ORDER))    # ['a', 'a', 'h', 'l', 'o']
```

## Command line

The `corestructs` command runs a demonstration or timing for each structure:

```
corestructs vector            # self-checks of the vector operations
corestructs vector 100000     # time appending 100000 elements
corestructs queue             # circular queue walkthrough, including wrap-around
corestructs sll 10000 [1]     # linked list timings; a non-zero second value prints the lists
corestructs pqueue [size] [--seed N]   # sorted priority queue demo, random values when a size is given
corestructs heap 10 [--seed N]         # fill a max-heap with random values, draw it, then drain it
corestructs tree breadth      # tree traversals of the characters of a string
```

See all options with `corestructs --help`.

## Running the tests

```
pip install -e ".[test]"
pytest
```