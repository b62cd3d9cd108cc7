"""
Tests for order count aggregation used by the admin report.
"""

from domain.enums import MealType
from core.order_aggregator import OrderAggregator, OrderCount, aggregate_orders


SAMPLE = [
    ("lunch", "Rice"),
    ("breakfast", "Toast"),
    ("lunch", "Rice"),
    ("snack", "Chips"),
]


def test_groups_and_sorts_by_category():
    agg = OrderAggregator(SAMPLE)

    assert agg.rows == [
        ("breakfast", "Toast", 1),
        ("lunch", "Rice", 2),
        ("snack", "Chips", 1),
    ]
    assert agg.total == 4
    assert agg.total_for("lunch") == 2
    assert agg.total_for("breakfast") == 1
    assert agg.total_for("snack") == 1


def test_rows_are_named():
    row = OrderAggregator(SAMPLE).rows[1]
    assert isinstance(row, OrderCount)
    assert row.category == "lunch"
    assert row.item_name == "Rice"
    assert row.count == 2


def test_empty_input():
    agg = OrderAggregator([])
    assert agg.rows == []
    assert agg.total == 0
    assert agg.total_for("lunch") == 0
    assert len(agg) == 0


def test_first_encounter_order_within_category():
    entries = [
        ("lunch", "Pasta"),
        ("lunch", "Curry"),
        ("breakfast", "Yogurt"),
        ("lunch", "Apple Salad"),
        ("lunch", "Curry"),
    ]
    rows = aggregate_orders(entries)
    assert [(r.item_name, r.count) for r in rows] == [
        ("Yogurt", 1),
        ("Pasta", 1),
        ("Curry", 2),
        ("Apple Salad", 1),
    ]


def test_same_name_in_different_categories_is_counted_separately():
    rows = aggregate_orders([("lunch", "Fruit"), ("snack", "Fruit"), ("snack", "Fruit")])
    assert rows == [("lunch", "Fruit", 1), ("snack", "Fruit", 2)]


def test_unknown_category_is_kept_and_sorted_last():
    rows = aggregate_orders([("brunch", "Waffles"), ("snack", "Chips"), ("brunch", "Waffles")])
    assert rows == [("snack", "Chips", 1), ("brunch", "Waffles", 2)]


def test_enum_categories_group_with_plain_strings():
    agg = OrderAggregator(
        [(MealType.LUNCH, "Rice"), ("lunch", "Rice"), (MealType.BREAKFAST, "Toast")]
    )
    assert [(r.item_name, r.count) for r in agg] == [("Toast", 1), ("Rice", 2)]
    assert agg.total_for(MealType.LUNCH) == 2
    assert agg.total_for("lunch") == 2


def test_accepts_a_generator():
    agg = OrderAggregator(pair for pair in SAMPLE)
    assert agg.total == 4


def test_repeated_aggregation_is_identical():
    assert aggregate_orders(SAMPLE) == aggregate_orders(SAMPLE)

    agg = OrderAggregator(SAMPLE)
    assert agg.rows == agg.rows
    assert list(agg) == list(agg)


def test_rows_copy_cannot_change_the_aggregate():
    agg = OrderAggregator(SAMPLE)
    rows = agg.rows
    rows.clear()
    assert agg.total == 4
    assert len(agg.rows) == 3
