"""Sales statistics per volunteer group."""

from typing import Any

from src.models.catalog import GROUP_NAMES, GroupName
from src.services.order_service import OrderService


def group_label(group: GroupName) -> str:
    """Short label for a group, e.g. ``Group A`` for ``Group A (Pathfinders)``."""
    return group.value.split("(")[0].strip()


class DashboardService:
    """Aggregates order totals for the organizer dashboard."""

    def __init__(self, order_service: OrderService | None = None) -> None:
        self.order_service = order_service or OrderService()

    def sales_by_group(self) -> list[dict[str, Any]]:
        """Sales and order counts per group, in GROUP_NAMES order.

        Every order counts, fulfilled or not.
        """
        stats = {
            group: {"group": group, "label": group_label(group), "sales": 0.0, "orders": 0}
            for group in GROUP_NAMES
        }
        for order in self.order_service.list_orders():
            entry = stats[GroupName(order["assigned_group"])]
            entry["sales"] += order["total_price"]
            entry["orders"] += 1
        return list(stats.values())

    def summary(self) -> dict[str, Any]:
        """Per-group stats plus overall revenue, order count and average."""
        groups = self.sales_by_group()
        total_sales = sum(entry["sales"] for entry in groups)
        total_orders = sum(entry["orders"] for entry in groups)
        return {
            "groups": groups,
            "total_sales": total_sales,
            "total_orders": total_orders,
            "average_order_value": total_sales / total_orders if total_orders else 0.0,
        }
