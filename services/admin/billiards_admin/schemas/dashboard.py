"""Pydantic schemas for the dashboard counters."""

from billiards_admin.schemas.base import CamelModel


class DashboardStats(CamelModel):
    tables: int = 0
    products: int = 0
    employees: int = 0
    bills_today: int = 0
