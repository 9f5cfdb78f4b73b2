from __future__ import annotations

from src.domain.algorithms.route_slicer import slice_ahead
from src.domain.models.route import RouteCheckpoint


def _route(*stops: tuple[str, int | str]) -> list[RouteCheckpoint]:
    return [
        RouteCheckpoint(id=f"cp-{stop_id}", stop_id=stop_id, sequence_order=order)
        for stop_id, order in stops
    ]


def test_returns_checkpoints_after_last_passed_stop() -> None:
    checkpoints = _route(("A", 1), ("B", 2), ("C", 3))

    ahead = slice_ahead(checkpoints, "B")

    assert [(c.stop_id, c.sequence_order) for c in ahead] == [("C", 3)]


def test_unknown_stop_yields_empty_list() -> None:
    checkpoints = _route(("A", 1), ("B", 2), ("C", 3))

    assert slice_ahead(checkpoints, "Z") == []
    assert slice_ahead(checkpoints, None) == []
    assert slice_ahead([], "A") == []


def test_last_stop_has_nothing_ahead() -> None:
    assert slice_ahead(_route(("A", 1), ("B", 2)), "B") == []


def test_text_orders_compare_numerically() -> None:
    checkpoints = _route(("A", "2"), ("B", "9"), ("C", "10"), ("D", "11"))

    ahead = slice_ahead(checkpoints, "B")

    assert [c.stop_id for c in ahead] == ["C", "D"]


def test_input_order_is_preserved_and_orders_are_increasing() -> None:
    checkpoints = _route(("A", 1), ("B", 3), ("C", 5), ("D", 8))

    ahead = slice_ahead(checkpoints, "A")
    orders = [int(c.sequence_order) for c in ahead]

    assert [c.stop_id for c in ahead] == ["B", "C", "D"]
    assert orders == sorted(orders)
    assert all(o > 1 for o in orders)


def test_unreadable_orders_are_skipped() -> None:
    checkpoints = _route(("A", 1), ("B", "n/a"), ("C", 3))

    assert [c.stop_id for c in slice_ahead(checkpoints, "A")] == ["C"]
    assert slice_ahead(checkpoints, "B") == []


def test_integral_float_orders_are_accepted() -> None:
    checkpoints = _route(("A", 1.0), ("B", "2.0"), ("C", 3), ("D", "2.5"))

    ahead = slice_ahead(checkpoints, "A")

    assert [c.stop_id for c in ahead] == ["B", "C"]
    assert [c.stop_id for c in slice_ahead(checkpoints, "B")] == ["C"]
