from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Optional
from exceptions.custom_errors import InvalidSortKeyError
from utils.constants import ASC, DESC, SORT_KEYS


@dataclass(frozen=True)
class SortState:
    """Column the table is ordered by. ``key=None`` keeps the arrival order."""

    key: Optional[str] = None
    direction: str = ASC


def toggle_sort(state: SortState, key: str) -> SortState:
    """
    Clicking a header: the same column flips direction, a new column starts
    ascending.
    """
    if key not in SORT_KEYS:
        raise InvalidSortKeyError(f"Cannot sort by {key!r}; expected one of {', '.join(SORT_KEYS)}")

    if state.key == key and state.direction == ASC:
        return replace(state, direction=DESC)
    return SortState(key=key, direction=ASC)


def _sort_value(record: Any, key: str):
    value = record[key] if isinstance(record, dict) else getattr(record, key)
    # missing values sort after present ones when ascending
    return (value is None, value)


def sort_records(records: Iterable[Any], state: SortState) -> List[Any]:
    """
    Return a new list ordered by ``state``; the input is never mutated.

    ``sorted`` is stable, so equal keys keep their arrival order in both
    directions and sorting an already sorted list changes nothing.
    """
    records = list(records)
    if state.key is None:
        return records

    return sorted(
        records,
        key=lambda r: _sort_value(r, state.key),
        reverse=state.direction == DESC,
    )
