from pydantic import BaseModel
from typing import Dict, List
from datetime import date


class OrderCountRow(BaseModel):
    """Number of confirmed orders for one dish"""

    meal_type: str
    menu_item_name: str
    order_count: int


class OrderReportResponse(BaseModel):
    report_date: date
    total_orders: int
    totals_by_meal_type: Dict[str, int]
    items: List[OrderCountRow]
