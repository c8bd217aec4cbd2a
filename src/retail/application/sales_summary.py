"""Application service: Sales Summary use case (query).

The figures behind the dashboard page: catalog and customer counts,
revenue from paid orders, a seven-day sales series and the latest orders.
"""

from __future__ import annotations

from datetime import timedelta

from retail.application.dto import DailySalesDTO, SalesSummaryDTO, order_to_dto
from retail.domain.clock import Clock, SystemClock
from retail.domain.model.order import OrderStatus
from retail.domain.model.value_objects import Money
from retail.domain.repository.unit_of_work import UnitOfWork

CHART_DAYS = 7
RECENT_ORDERS = 4


class SalesSummaryHandler:

    def __init__(self, uow: UnitOfWork, clock: Clock | None = None) -> None:
        self._uow = uow
        self._clock = clock or SystemClock()

    def handle(self) -> SalesSummaryDTO:
        with self._uow as uow:
            products = uow.products.list_all()
            customers = uow.customers.list_all()
            orders = uow.orders.list_all()

        orders = sorted(orders, key=lambda o: o.created_at, reverse=True)
        paid = [o for o in orders if o.status == OrderStatus.PAID]

        today = self._clock.now().date()
        days = [today - timedelta(days=offset) for offset in range(CHART_DAYS - 1, -1, -1)]
        daily_sales = [
            DailySalesDTO(
                day=day.isoformat(),
                total=str(Money.total([o.total for o in paid if o.created_at.date() == day])),
            )
            for day in days
        ]

        return SalesSummaryDTO(
            total_products=len(products),
            total_customers=len(customers),
            total_orders=len(orders),
            revenue=str(Money.total([o.total for o in paid])),
            daily_sales=daily_sales,
            recent_orders=[order_to_dto(o) for o in orders[:RECENT_ORDERS]],
        )
