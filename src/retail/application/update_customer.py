"""Application service: Update Customer use case."""

from __future__ import annotations

from retail.application.dto import CustomerDTO, customer_to_dto
from retail.domain.exceptions import NotFoundError
from retail.domain.repository.unit_of_work import UnitOfWork


class UpdateCustomerHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        customer_id: str,
        *,
        name: str | None = None,
        document: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        active: bool | None = None,
    ) -> CustomerDTO:
        """Edit the given fields; orders keep the name they were created with."""
        with self._uow as uow:
            customer = uow.customers.get_by_id(customer_id)
            if customer is None:
                raise NotFoundError(f"Customer '{customer_id}' not found")

            if name is not None:
                customer.rename(name)
            if document is not None:
                customer.document = document.strip()
            if email is not None:
                customer.email = email.strip()
            if phone is not None:
                customer.phone = phone.strip()
            if active is not None:
                customer.active = active

            uow.customers.save(customer)
            uow.commit()

        return customer_to_dto(customer)
