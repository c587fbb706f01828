"""Application service: Suggest Price use case."""

from __future__ import annotations

from decimal import Decimal

from acme.domain.model.product import Product


class SuggestPriceHandler:

    def handle(self, cost: str, margin_percent: str) -> Decimal:
        """Return *cost* marked up by *margin_percent* percent.

        Raises ValidationError if either value is not a number.
        """
        product = Product.from_fields(cost=cost)
        return product.calculate_suggested_price(margin_percent)
