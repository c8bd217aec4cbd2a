"""Application service: Add Customer use case."""

from __future__ import annotations

from retail.application.dto import CustomerDTO, customer_to_dto
from retail.domain.clock import Clock, SystemClock
from retail.domain.model.customer import Customer
from retail.domain.repository.unit_of_work import UnitOfWork


class AddCustomerHandler:

    def __init__(self, uow: UnitOfWork, clock: Clock | None = None) -> None:
        self._uow = uow
        self._clock = clock or SystemClock()

    def handle(
        self,
        name: str,
        document: str = "",
        email: str = "",
        phone: str = "",
        active: bool = True,
    ) -> CustomerDTO:
        customer = Customer.create(
            name=name,
            document=document,
            email=email,
            phone=phone,
            active=active,
            created_at=self._clock.now(),
        )
        with self._uow as uow:
            uow.customers.save(customer)
            uow.commit()
        return customer_to_dto(customer)
