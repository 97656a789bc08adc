from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
import math
from typing import Any

from sugarcharts.errors import ChartDataError, EmptySeriesError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Entry:
    label: str = ""
    value: float = 0.0


def normalize_entries(data: Any) -> tuple[Entry, ...]:
    """Coerce supported inputs into an ordered, non-empty tuple of entries.

    Accepts `Entry` objects, `(label, value)` pairs, mappings with
    `label`/`value` keys, or a pandas DataFrame with those columns.
    """
    if data is None:
        raise ChartDataError("entries input is required")

    if pd is not None and isinstance(data, pd.DataFrame):
        for column in ("label", "value"):
            if column not in data.columns:
                raise ChartDataError(f"column not found: {column}")
        raw_items: list[Any] = list(zip(data["label"].tolist(), data["value"].tolist(), strict=False))
    elif isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
        raw_items = list(data)
    else:
        raise ChartDataError(f"unsupported entries input type: {type(data)!r}")

    if not raw_items:
        raise EmptySeriesError()
    return tuple(_coerce_entry(item, index=i) for i, item in enumerate(raw_items))


def _coerce_entry(item: Any, *, index: int) -> Entry:
    if isinstance(item, Entry):
        label, value = item.label, item.value
    elif isinstance(item, Mapping):
        if "value" not in item:
            raise ChartDataError(f"entry {index} is missing `value`")
        label, value = item.get("label", ""), item["value"]
    elif isinstance(item, Sequence) and not isinstance(item, (str, bytes, bytearray)) and len(item) == 2:
        label, value = item[0], item[1]
    else:
        raise ChartDataError(f"unsupported entry at index {index}: {item!r}")
    return Entry(label="" if label is None else str(label), value=_coerce_value(value, index=index))


def _coerce_value(raw: Any, *, index: int) -> float:
    if isinstance(raw, bool):
        raise ChartDataError(f"value at index {index} must be numeric, got bool")
    if isinstance(raw, Decimal):
        out = float(raw)
    else:
        try:
            out = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"value at index {index} is not numeric: {raw!r}") from exc
    if not math.isfinite(out):
        raise ChartDataError(f"value at index {index} is not finite: {raw!r}")
    return out
