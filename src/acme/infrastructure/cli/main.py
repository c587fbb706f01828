import logging

import click

from acme.infrastructure.cli.product_commands import (
    product_hello,
    product_price,
    product_show,
)


@click.group()
@click.option("--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Acme product catalog tools"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Inspect products."""


# Register subcommands
product.add_command(product_hello)
product.add_command(product_price)
product.add_command(product_show)
