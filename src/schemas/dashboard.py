"""Dashboard Pydantic schemas."""

from pydantic import BaseModel, Field

from src.models.catalog import GroupName


class GroupSales(BaseModel):
    """Sales for a single volunteer group."""

    group: GroupName
    label: str = Field(description="Short group label, e.g. 'Group A'")
    sales: float = Field(description="Sum of order totals in dollars")
    orders: int = Field(description="Number of orders")


class DashboardResponse(BaseModel):
    """Schema for GET /dashboard."""

    groups: list[GroupSales] = Field(description="Per-group stats in rotation order")
    total_sales: float
    total_orders: int
    average_order_value: float
