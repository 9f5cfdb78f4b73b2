from __future__ import annotations

from typing import Sequence

from src.domain.models.route import RouteCheckpoint


def _order(checkpoint: RouteCheckpoint) -> int | None:
    # Numeric, so "10" sorts after "9" even when the feed sends text.
    # Integral floats ("2.0", 2.0) are accepted, fractional ones are not.
    try:
        value = float(str(checkpoint.sequence_order).strip())
    except ValueError:
        return None
    if not value.is_integer():
        return None
    return int(value)


def slice_ahead(
    checkpoints: Sequence[RouteCheckpoint], last_passed_stop_id: str | None
) -> list[RouteCheckpoint]:
    """Checkpoints strictly ahead of the last passed stop, in input order.

    An unknown stop id (vehicle off-route or position unknown) yields an
    empty list.
    """

    if not last_passed_stop_id:
        return []

    passed_order: int | None = None
    for c in checkpoints:
        if c.stop_id == last_passed_stop_id:
            passed_order = _order(c)
            if passed_order is not None:
                break
    if passed_order is None:
        return []

    out: list[RouteCheckpoint] = []
    for c in checkpoints:
        order = _order(c)
        if order is not None and order > passed_order:
            out.append(c)
    return out
