import pytest

from latencylab.orderbook import Book, LevelSummary, Order, Trade, now_ns


def _summary(levels):
    return [(l.price, l.qty) for l in levels]


def _trades(book):
    return [(t.buy_id, t.sell_id, t.qty, t.price) for t in book.trades()]


@pytest.fixture
def book():
    bk = Book()
    bk.add(Order(1001, True, 100.5, 1000, now_ns()))
    bk.add(Order(1002, True, 100.3, 400, now_ns()))
    bk.add(Order(1003, True, 99.8, 600, now_ns()))
    bk.add(Order(2001, False, 100.7, 800, now_ns()))
    bk.add(Order(2002, False, 101.0, 300, now_ns()))
    bk.add(Order(2003, False, 100.75, 150, now_ns()))
    return bk


def test_initial_book_levels(book):
    bids, asks = book.snapshot(5)
    assert _summary(bids) == [(100.5, 1000), (100.3, 400), (99.8, 600)]
    assert _summary(asks) == [(100.7, 800), (100.75, 150), (101.0, 300)]
    assert book.trades() == []


def test_cancel(book):
    assert book.cancel(1002) is True
    bids, _ = book.snapshot(5)
    assert _summary(bids) == [(100.5, 1000), (99.8, 600)]
    assert book.cancel(1002) is False


def test_modify_quantity_same_price(book):
    book.cancel(1002)
    assert book.modify(1003, 99.8, 900) is True
    bids, _ = book.snapshot(5)
    assert _summary(bids) == [(100.5, 1000), (99.8, 900)]


def test_modify_price_crosses_and_trades(book):
    book.cancel(1002)
    book.modify(1003, 99.8, 900)
    assert book.modify(2001, 100.4, 800) is True
    assert _trades(book) == [(1001, 2001, 800, 100.4)]
    bids, asks = book.snapshot(5)
    assert _summary(bids) == [(100.5, 200), (99.8, 900)]
    assert _summary(asks) == [(100.75, 150), (101.0, 300)]


def test_modify_unknown_order(book):
    assert book.modify(9999, 100.0, 10) is False


def test_matching_sequence():
    m = Book()
    m.add(Order(3001, True, 100.5, 1000, now_ns()))
    m.add(Order(3002, False, 100.25, 600, now_ns()))
    m.add(Order(3003, False, 100.4, 500, now_ns()))
    assert _trades(m) == [(3001, 3002, 600, 100.25), (3001, 3003, 400, 100.4)]
    bids, asks = m.snapshot(3)
    assert bids == []
    assert asks == [LevelSummary(100.4, 100)]


def test_render_final_snapshot():
    m = Book()
    m.add(Order(3001, True, 100.5, 1000, now_ns()))
    m.add(Order(3002, False, 100.25, 600, now_ns()))
    m.add(Order(3003, False, 100.4, 500, now_ns()))
    expected = (
        "\nBOOK\nBIDS               ASKS\nPrc     Qty       Prc     Qty\n"
        "------  ---       ------  ---\n"
        + " " * 12 + " " * 7 + "100.4   100\n"
        + "\n"
    )
    assert m.render(3) == expected


def test_print_writes_render(book, capsys):
    book.print(5)
    assert capsys.readouterr().out == book.render(5)


def test_snapshot_depth_limits(book):
    bids, asks = book.snapshot(1)
    assert _summary(bids) == [(100.5, 1000)]
    assert _summary(asks) == [(100.7, 800)]


def test_time_priority_within_level():
    bk = Book()
    bk.add(Order(1, True, 50.0, 10))
    bk.add(Order(2, True, 50.0, 10))
    bk.add(Order(3, False, 50.0, 15))
    assert _trades(bk) == [(1, 3, 10, 50.0), (2, 3, 5, 50.0)]
    bids, asks = bk.snapshot(5)
    assert _summary(bids) == [(50.0, 5)]
    assert asks == []


def test_trade_price_is_resting_ask_price():
    bk = Book()
    bk.add(Order(1, False, 10.0, 5))
    bk.add(Order(2, True, 12.0, 5))
    trades = bk.trades()
    assert len(trades) == 1
    assert trades[0].price == 10.0
    assert isinstance(trades[0], Trade)


def test_clear_trades(book):
    book.modify(2001, 100.4, 800)
    assert book.trades()
    book.clear_trades()
    assert book.trades() == []


def test_add_does_not_alias_caller_order():
    bk = Book()
    order = Order(1, True, 10.0, 5)
    bk.add(order)
    bk.add(Order(2, False, 10.0, 3))
    assert order.qty == 5
    bids, _ = bk.snapshot(1)
    assert _summary(bids) == [(10.0, 2)]


def test_duplicate_id_rejected(book):
    with pytest.raises(ValueError):
        book.add(Order(1001, True, 90.0, 1))


def test_filled_order_cannot_be_cancelled():
    bk = Book()
    bk.add(Order(1, True, 10.0, 5))
    bk.add(Order(2, False, 10.0, 5))
    assert bk.cancel(1) is False
    assert bk.cancel(2) is False


def test_now_ns_advances():
    first = now_ns()
    second = now_ns()
    assert second >= first > 0