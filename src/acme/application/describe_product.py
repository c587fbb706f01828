"""Application service: Describe Product use case."""

from __future__ import annotations

from decimal import Decimal

from acme.application.dto import ProductDTO, ProductSpec
from acme.domain.model.product import Product


class DescribeProductHandler:

    def handle(self, spec: ProductSpec) -> ProductDTO:
        """Build a product from *spec* and project it for display.

        A rejected name is reported through ``validation_message``;
        it does not raise.
        """
        fields = {
            "product_id": spec.product_id,
            "product_name": spec.product_name,
            "description": spec.description,
        }
        if spec.cost is not None:
            fields["cost"] = spec.cost
        if spec.category is not None:
            fields["category"] = spec.category
        if spec.sequence_number is not None:
            fields["sequence_number"] = spec.sequence_number

        product = Product.from_fields(**fields)
        if spec.vendor_company is not None:
            product.product_vendor.company_name = spec.vendor_company

        return ProductDTO(
            product_id=product.product_id,
            product_name=product.product_name,
            description=product.description,
            category=product.category,
            sequence_number=product.sequence_number,
            product_code=product.product_code,
            minimum_price=_format_money(product.minimum_price),
            cost=_format_money(product.cost),
            vendor_company=product.product_vendor.company_name,
            greeting=product.say_hello(),
            validation_message=product.validation_message,
        )


def _format_money(amount: Decimal) -> str:
    return f"${amount:.2f}"
