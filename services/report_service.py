from datetime import date
from sqlalchemy.orm import Session
import logging

from core.order_aggregator import OrderAggregator
from domain.enums import MealType
from domain.schemas.report_schemas import OrderCountRow, OrderReportResponse
from repositories import OrderRepository

logger = logging.getLogger("smartcanteen.reports")

CSV_HEADERS = ("Meal Type", "Item Name", "Order Count")


def _category_label(category) -> str:
    return getattr(category, "value", str(category))


class ReportService:
    """Order counts per dish for the admin report"""

    @staticmethod
    def aggregate(db: Session, report_date: date) -> OrderAggregator:
        pairs = OrderRepository(db).confirmed_item_pairs(report_date)
        return OrderAggregator(pairs)

    @staticmethod
    def build_report(db: Session, report_date: date) -> OrderReportResponse:
        aggregator = ReportService.aggregate(db, report_date)
        report = OrderReportResponse(
            report_date=report_date,
            total_orders=aggregator.total,
            totals_by_meal_type={
                meal_type.value: aggregator.total_for(meal_type) for meal_type in MealType
            },
            items=[
                OrderCountRow(
                    meal_type=_category_label(row.category),
                    menu_item_name=row.item_name,
                    order_count=row.count,
                )
                for row in aggregator
            ],
        )
        logger.info(
            f"report_built date={report_date.isoformat()} "
            f"total={report.total_orders} items={len(report.items)}"
        )
        return report

    @staticmethod
    def to_csv(report: OrderReportResponse) -> str:
        """
        Three comma-joined columns with one header line.

        Values are written as-is; a comma inside an item name is not escaped.
        """
        lines = [",".join(CSV_HEADERS)]
        lines.extend(
            ",".join((row.meal_type, row.menu_item_name, str(row.order_count)))
            for row in report.items
        )
        return "\n".join(lines)

    @staticmethod
    def csv_filename(report_date: date) -> str:
        return f"meal-orders-{report_date.isoformat()}.csv"
