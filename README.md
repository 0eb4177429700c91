# latencylab

A small toolkit of building blocks that show up in low-latency trading code:

- `latencylab.orderbook`: a price-time priority limit order book with
  matching, cancel and modify, trade capture and depth snapshots.
- `latencylab.fifo`: bounded circular FIFO queues. `Fifo` is for use within
  a single thread. `SpscFifo` is for one producer thread and one consumer
  thread.
- `latencylab.concurrent_list`: a linked list that several threads can
  insert into at the head at the same time.
- `latencylab.mathutils`: `factorial`, `gcd`, `fibonacci`, `log_base2`, and
  `distance` between two `Point`s.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Order book

```python
from latencylab.orderbook import Book, Order, now_ns

book = Book()
book.add(Order(3001, True, 100.5, 1000, now_ns()))
book.add(Order(3002, False, 100.25, 600, now_ns()))
book.add(Order(3003, False, 100.4, 500, now_ns()))

for trade in book.trades():
    print(trade.buy_id, trade.sell_id, trade.qty, trade.price)

book.print(3)
```

### Orders

An `Order` has the fields `id`, `buy`, `price`, `qty` and `ts`.

`Book.add` stores a copy of the order and then matches crossing orders.
It raises `ValueError` if an order with the same id is already resting in the book.

### Matching

- Bids are kept with the highest price first.
- Asks are kept with the lowest price first.
- Within a price level, orders fill in the order they arrived.
- Each fill is recorded as a `Trade` with the fields `buy_id`, `sell_id`, `price`, `qty` and `ts`.
- A fill is priced at the sell order's limit price.
- An order that is completely filled leaves the book.

### Cancel and modify

`Book.cancel(order_id)` and `Book.modify(order_id, price, qty)` both return `False` for an unknown order id.

Modifying an order's price takes it out of the book and adds it again. The order loses its time priority and may trade at once. Changing only the quantity keeps the order's place in its level.

### Inspecting the book

- `Book.snapshot(depth)` returns a pair of lists, bids and asks, each holding up to `depth` `LevelSummary(price, qty)` values with the best level first.
- `Book.render(depth=10)` returns the book as a text table.
- `Book.print(depth=10)` writes that table to standard output.
- `Book.trades()` returns a copy of the trades so far, oldest first.
- `Book.clear_trades()` empties the recorded trades.
- `now_ns()` returns the wall-clock time in nanoseconds.

## FIFO queues

```python
import queue

from latencylab.fifo import Fifo

fifo = Fifo(2)
fifo.push("a")
fifo.push("b")
print(len(fifo), fifo.capacity(), fifo.full())   # 2 2 True
try:
    fifo.push("c")
except queue.Full:
    print("no room")
print(fifo.pop())                                # a
```

`push` raises `queue.Full` when the queue is full. `pop` removes and returns the oldest value, and raises `queue.Empty` when there is none. A negative capacity raises `ValueError`.

`SpscFifo` has the same interface. It is safe to share between exactly one producer thread calling `push` and one consumer thread calling `pop`.

## Concurrent list

```python
from latencylab.concurrent_list import ConcurrentList

items = ConcurrentList()
items.insert(10)
items.insert(20)
print(list(items))      # [20, 10], newest first
print(items.render())   # "20 10 "
```

Each insertion retries a compare-and-swap on the head until it succeeds, so concurrent inserts are never lost.

The `latencylab-list` command fills one shared list from two threads at the same time. One thread inserts 10, 20, … 50 and the other inserts 100, 200, … 500. The command then prints the list's contents on one line:

```
latencylab-list
```

## Math helpers

```python
from latencylab.mathutils import Point, distance, factorial, fibonacci, gcd, log_base2

factorial(5)                          # 120
gcd(48, 18)                           # 6
fibonacci(10)                         # 55
log_base2(1024)                       # 10
distance(Point(0, 0), Point(3, 4))    # 5.0
```

These functions raise `ValueError` for arguments they cannot handle:

- `factorial` and `fibonacci` reject negative values.
- `gcd` rejects negative arguments.

`log_base2` does not raise. It returns 0 for any value of 1 or less.

## What it does not do

The order book lives only in memory:

- It does not read orders from a market data feed or a network connection.
- It does not keep orders or trades in storage.
- It offers no command line interface.