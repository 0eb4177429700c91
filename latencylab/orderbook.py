"""A price-time priority limit order book with continuous matching."""

from __future__ import annotations

import bisect
import sys
import time
from dataclasses import dataclass, field, replace
from typing import Iterator

__all__ = ["Order", "Trade", "LevelSummary", "Book", "now_ns"]


def now_ns() -> int:
    """Return the current wall-clock time in nanoseconds since the epoch."""
    return time.time_ns()


@dataclass
class Order:
    """A resting or incoming limit order."""

    id: int
    buy: bool
    price: float
    qty: int
    ts: int = 0


@dataclass(frozen=True)
class Trade:
    """A fill between a buy order and a sell order."""

    buy_id: int
    sell_id: int
    price: float
    qty: int
    ts: int


@dataclass(frozen=True)
class LevelSummary:
    """Aggregated quantity resting at one price."""

    price: float
    qty: int


@dataclass
class _Level:
    price: float
    qty: int = 0
    orders: dict[int, Order] = field(default_factory=dict)

    def front(self) -> Order:
        return next(iter(self.orders.values()))


class _Side:
    """Price levels of one side, kept ordered best price first."""

    def __init__(self, descending: bool) -> None:
        self._descending = descending
        self._keys: list[float] = []
        self._levels: dict[float, _Level] = {}

    def _key(self, price: float) -> float:
        return -price if self._descending else price

    def _price(self, key: float) -> float:
        return -key if self._descending else key

    def __bool__(self) -> bool:
        return bool(self._levels)

    def __iter__(self) -> Iterator[_Level]:
        for key in self._keys:
            yield self._levels[self._price(key)]

    def get(self, price: float) -> _Level | None:
        return self._levels.get(price)

    def level(self, price: float) -> _Level:
        lvl = self._levels.get(price)
        if lvl is None:
            lvl = _Level(price)
            self._levels[price] = lvl
            bisect.insort(self._keys, self._key(price))
        return lvl

    def remove(self, price: float) -> None:
        del self._levels[price]
        key = self._key(price)
        del self._keys[bisect.bisect_left(self._keys, key)]

    def best(self) -> _Level:
        return self._levels[self._price(self._keys[0])]


class Book:
    """Limit order book that matches crossing orders as they arrive."""

    def __init__(self) -> None:
        self._bids = _Side(descending=True)
        self._asks = _Side(descending=False)
        self._refs: dict[int, Order] = {}
        self._trades: list[Trade] = []

    def _side(self, buy: bool) -> _Side:
        return self._bids if buy else self._asks

    def add(self, order: Order) -> None:
        """Insert a copy of ``order`` and run matching."""
        if order.id in self._refs:
            raise ValueError(f"order {order.id} is already in the book")
        stored = replace(order)
        lvl = self._side(stored.buy).level(stored.price)
        lvl.orders[stored.id] = stored
        lvl.qty += stored.qty
        self._refs[stored.id] = stored
        self._match()

    def cancel(self, order_id: int) -> bool:
        """Remove a resting order; return whether it was found."""
        stored = self._refs.get(order_id)
        if stored is None:
            return False
        side = self._side(stored.buy)
        lvl = side.get(stored.price)
        if lvl is None:
            return False
        del lvl.orders[order_id]
        lvl.qty = max(lvl.qty - stored.qty, 0)
        if not lvl.orders:
            side.remove(stored.price)
        del self._refs[order_id]
        return True

    def modify(self, order_id: int, price: float, qty: int) -> bool:
        """Amend an order's price and quantity; return whether it was found.

        A price change loses time priority; a quantity-only change keeps it.
        """
        stored = self._refs.get(order_id)
        if stored is None:
            return False
        if price != stored.price:
            updated = replace(stored, price=price, qty=qty)
            if not self.cancel(order_id):
                return False
            self.add(updated)
            return True
        lvl = self._side(stored.buy).get(stored.price)
        if lvl is None:
            return False
        lvl.qty = max(lvl.qty - stored.qty, 0) + qty
        stored.qty = qty
        return True

    def _retire(self, side: _Side, lvl: _Level, order: Order) -> None:
        del lvl.orders[order.id]
        self._refs.pop(order.id, None)
        if not lvl.orders:
            side.remove(lvl.price)

    def _match(self) -> None:
        while self._bids and self._asks:
            bid_level = self._bids.best()
            ask_level = self._asks.best()
            if bid_level.price < ask_level.price:
                break
            bid = bid_level.front()
            ask = ask_level.front()
            fill = min(bid.qty, ask.qty)
            self._trades.append(Trade(bid.id, ask.id, ask.price, fill, now_ns()))
            bid.qty -= fill
            ask.qty -= fill
            bid_level.qty -= fill
            ask_level.qty -= fill
            if bid.qty == 0:
                self._retire(self._bids, bid_level, bid)
            if ask.qty == 0:
                self._retire(self._asks, ask_level, ask)

    def snapshot(self, depth: int) -> tuple[list[LevelSummary], list[LevelSummary]]:
        """Return up to ``depth`` best levels of bids and asks."""
        bids = [LevelSummary(l.price, l.qty) for _, l in zip(range(depth), self._bids)]
        asks = [LevelSummary(l.price, l.qty) for _, l in zip(range(depth), self._asks)]
        return bids, asks

    def render(self, depth: int = 10) -> str:
        """Format the top ``depth`` levels as a two-column table."""
        bids, asks = self.snapshot(depth)
        parts = [
            "\nBOOK\nBIDS               ASKS\nPrc     Qty       Prc     Qty\n",
            "------  ---       ------  ---\n",
        ]
        for i in range(max(len(bids), len(asks))):
            row = f"{bids[i].price:g}   {bids[i].qty}" if i < len(bids) else " " * 12
            row += " " * 7
            if i < len(asks):
                row += f"{asks[i].price:g}   {asks[i].qty}"
            parts.append(row + "\n")
        parts.append("\n")
        return "".join(parts)

    def print(self, depth: int = 10) -> None:
        """Write the rendered book to standard output."""
        sys.stdout.write(self.render(depth))

    def trades(self) -> list[Trade]:
        """Return the trades executed so far, oldest first."""
        return list(self._trades)

    def clear_trades(self) -> None:
        """Forget all recorded trades."""
        self._trades.clear()