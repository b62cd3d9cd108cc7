"""
Order count aggregation for the admin report.
"""

from typing import Any, Dict, Hashable, Iterable, List, NamedTuple, Tuple

# Fixed report order for meal categories. Anything else sorts after these.
CATEGORY_ORDER = {"breakfast": 0, "lunch": 1, "snack": 2}


class OrderCount(NamedTuple):
    category: Any
    item_name: str
    count: int


def _category_key(category: Any) -> Hashable:
    # str-based enums hash by member name, so compare on the raw value
    return getattr(category, "value", category)


def _category_rank(category: Any) -> int:
    return CATEGORY_ORDER.get(_category_key(category), len(CATEGORY_ORDER))


class OrderAggregator:
    """
    Counts confirmed orders per (meal category, item name).

    The input is consumed once at construction. Rows come out sorted by the
    fixed category order; inside a category items keep the order in which
    they were first seen. Category values are not validated.
    """

    def __init__(self, entries: Iterable[Tuple[Any, str]]):
        counts: Dict[Tuple[Hashable, str], List[Any]] = {}
        for category, item_name in entries:
            key = (_category_key(category), item_name)
            if key in counts:
                counts[key][2] += 1
            else:
                counts[key] = [category, item_name, 1]

        # sorted() is stable, so first-encounter order survives inside a category
        self._rows: Tuple[OrderCount, ...] = tuple(
            sorted(
                (OrderCount(*row) for row in counts.values()),
                key=lambda row: _category_rank(row.category),
            )
        )

    @property
    def rows(self) -> List[OrderCount]:
        return list(self._rows)

    @property
    def total(self) -> int:
        return sum(row.count for row in self._rows)

    def total_for(self, category: Any) -> int:
        wanted = _category_key(category)
        return sum(
            row.count for row in self._rows if _category_key(row.category) == wanted
        )

    def __iter__(self):
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)


def aggregate_orders(entries: Iterable[Tuple[Any, str]]) -> List[OrderCount]:
    """Shortcut returning just the sorted rows."""
    return OrderAggregator(entries).rows
