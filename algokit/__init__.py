"""Search trees, threading building blocks and a weapon factory."""

__version__ = "0.1.0"

__all__ = [
    "avltree",
    "bstree",
    "fibonacci",
    "mtqueue",
    "mtvector",
    "rbtree",
    "rwlock",
    "stoppable",
    "threadpool",
    "weapons",
]