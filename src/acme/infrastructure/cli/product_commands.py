"""CLI commands for inspecting a Product."""

from __future__ import annotations

import click

from acme.application.describe_product import DescribeProductHandler
from acme.application.dto import ProductSpec
from acme.application.suggest_price import SuggestPriceHandler
from acme.domain.exceptions import DomainException


@click.command("show")
@click.option("--id", "product_id", type=int, default=0, help="Product ID.")
@click.option("--name", default=None, help="Product name (3-20 characters).")
@click.option("--description", default=None, help="Free-text description.")
@click.option("--category", default=None, help="Category (default: Tools).")
@click.option("--sequence", "sequence_number", type=int, default=None,
              help="Sequence number (default: 1).")
@click.option("--cost", default=None, help="Cost (e.g. 15.00).")
@click.option("--vendor", "vendor_company", default=None, help="Vendor company name.")
def product_show(
    product_id: int,
    name: str | None,
    description: str | None,
    category: str | None,
    sequence_number: int | None,
    cost: str | None,
    vendor_company: str | None,
) -> None:
    """Show a product's fields and derived values."""
    spec = ProductSpec(
        product_id=product_id,
        product_name=name,
        description=description,
        cost=cost,
        category=category,
        sequence_number=sequence_number,
        vendor_company=vendor_company,
    )

    try:
        dto = DescribeProductHandler().handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'ID:':<15} {dto.product_id}")
    click.echo(f"{'Name:':<15} {dto.product_name or ''}")
    click.echo(f"{'Description:':<15} {dto.description or ''}")
    click.echo(f"{'Category:':<15} {dto.category or ''}")
    click.echo(f"{'Sequence:':<15} {dto.sequence_number}")
    click.echo(f"{'Code:':<15} {dto.product_code}")
    click.echo(f"{'Cost:':<15} {dto.cost}")
    click.echo(f"{'Minimum price:':<15} {dto.minimum_price}")
    click.echo(f"{'Vendor:':<15} {dto.vendor_company or ''}")
    if dto.validation_message:
        click.echo(f"{'Validation:':<15} {dto.validation_message}")


@click.command("hello")
@click.option("--id", "product_id", type=int, default=0, help="Product ID.")
@click.option("--name", default=None, help="Product name.")
@click.option("--description", default=None, help="Free-text description.")
def product_hello(product_id: int, name: str | None, description: str | None) -> None:
    """Print the product greeting."""
    spec = ProductSpec(product_id=product_id, product_name=name, description=description)
    dto = DescribeProductHandler().handle(spec)
    click.echo(dto.greeting)


@click.command("price")
@click.option("--cost", required=True, help="Cost (e.g. 50.00).")
@click.option("--margin", required=True, help="Margin percent (e.g. 10).")
def product_price(cost: str, margin: str) -> None:
    """Print the suggested price for a cost and margin."""
    try:
        suggested = SuggestPriceHandler().handle(cost=cost, margin_percent=margin)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(str(suggested))
