"""Order book, bounded FIFO queues, a thread-safe linked list and numeric helpers."""

__version__ = "0.1.0"

__all__ = ["concurrent_list", "fifo", "mathutils", "orderbook"]