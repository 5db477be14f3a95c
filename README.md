# algokit

Binary search trees, a handful of concurrency building blocks and a small
factory-pattern example, written in plain Python with no third-party
dependencies.

## Search trees

- `algokit.bstree.BSTree`: an unbalanced binary search tree of `BSTNode`
  objects. `insert(key, value)` returns `False` when the key is already
  present and replaces its value in that case. Also offers `find`, `remove`,
  `min`, `max`, the traversals `inorder`, `preorder` and `postorder` (each
  returns a list of keys), `height` (`-1` for an empty tree, `0` for a single
  node) and `is_balanced`. Supports `len()`, `in` and iteration in key order.
- `algokit.avltree.AVLTree`: a self-balancing AVL tree of `AVLNode` objects
  with the same operations. `insert` returns `False` for an existing key and
  leaves its value untouched; `is_balanced` also verifies each node's stored
  balance factor.
- `algokit.rbtree.RBTree`: a red-black tree of `RBNode` objects coloured with
  `Color.RED` / `Color.BLACK`. It offers `insert`, `inorder` (a list of
  `(key, value, colour)` triples) and `check`, which returns whether every
  red-black property holds and logs each violation it finds as a warning.
  There is no removal or lookup beyond `in`.

```python
from algokit.avltree import AVLTree

tree = AVLTree()
for position, key in enumerate([16, 3, 7, 11, 9, 26, 18, 14, 15]):
    tree.insert(key, position)

tree.find(11).value   # 3
tree.remove(7)        # True
tree.height()
tree.is_balanced()    # True
```

## Concurrency

- `algokit.mtqueue.MTQueue`: a thread-safe queue that hands out the most
  recently pushed item first. `pop` blocks until an item exists; `push` wakes
  one waiter and `push_many` wakes all of them. `pop_hold()` is a context
  manager that pops an item and keeps the queue locked for the block.
- `algokit.rwlock.RWLock`: a reader-writer lock with `read_locked()` and
  `write_locked()` context managers; waiting writers take precedence over new
  readers. `ThreadSafeCounter` (`get`, `increment`, `reset`) and `WRData`
  (`read`, `write`) are built on it.
- `algokit.threadpool.ThreadPool`: a fixed number of worker threads (four by
  default) that run `Task` objects queued with `add_task` in FIFO order.
  `start_threads` starts the workers; `shutdown` lets them finish every queued
  task and joins them. It can also be used as a context manager.
  `ShowValueTask` prints the worker's thread id together with a value.
- `algokit.stoppable`: `StopToken` is a one-way stop flag with callbacks that
  run when a stop is first requested. `StoppableThread` is an abstract base
  whose `do_execute` runs on its own thread after `start`, polls `is_exit`,
  and returns once `stop` is called.
- `algokit.mtvector.MTVector`: a fixed-length list of floats whose
  `set_value` is serialised by a lock. `modifier()` returns an
  `MTVectorModifier` which, used as a `with` block, holds the lock for a batch
  of writes; its `set_value` appends the value and ignores the index.
- `algokit.fibonacci`: `fibonacci(n)` returns F(n) wrapped to a signed
  64-bit integer. `fibonacci_in_thread(n)` computes it on a dedicated thread
  and `fibonacci_async(n)` on an executor; both return a
  `concurrent.futures.Future`.

```python
from algokit.fibonacci import fibonacci, fibonacci_async

fibonacci(10)                   # 55
fibonacci_async(90).result()    # 2880067194370816120
```

## Factory pattern

`algokit.weapons.create_weapon("sword")` and `create_weapon("bow")` build a
`Sword` or a `Bow`, both subclasses of the abstract `Weapon`; `use()` returns
a line describing the attack. Any other kind raises `UnknownWeaponError`, a
`ValueError`.

## Command line

```
algokit-weapons
```

This builds and uses a sword and a bow, then asks for an axe, which is
reported as an unknown weapon type on standard error. The command takes no
options.

## What is not included

The package has no sorting routines; it covers the trees, concurrency
helpers and weapon factory listed above and nothing else.

## Running the tests

```
pip install -e ".[test]"
pytest
```