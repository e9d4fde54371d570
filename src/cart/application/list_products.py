"""Application service: List Products use case (query)."""

from __future__ import annotations

from cart.application.dto import ProductDTO
from cart.domain.repository.unit_of_work import UnitOfWork


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[ProductDTO]:
        with self._uow as uow:
            products = uow.products.list_all()
        return [ProductDTO.from_product(p) for p in products]
