import random
import click
from flask.cli import with_appcontext
from storefront.extensions import get_services
from storefront.services import ProductCatalog


@click.command("catalog-check")
@with_appcontext
def catalog_check():
    """Validate the seeded catalog and print a per-category summary."""
    catalog = get_services().catalog
    products = catalog.get_all()
    for category in catalog.get_categories():
        click.echo(f"{category['name']}: {category['product_count']} products")
    out_of_stock = sum(1 for p in products if not p.in_stock)
    click.echo(
        f"{len(products)} products, {len(catalog.get_deals(len(products)))} on sale, "
        f"{out_of_stock} out of stock."
    )


@click.command("recommend")
@click.argument("product_id", type=int)
@click.option("--limit", default=8, show_default=True, help="Number of products to return")
@click.option("--seed", type=int, default=None, help="Seed for the scoring jitter")
@with_appcontext
def recommend(product_id, limit, seed):
    """Print "bought together" recommendations for PRODUCT_ID."""
    services = get_services()
    rng = random.Random(seed) if seed is not None else services.catalog.rng
    catalog = ProductCatalog(services.store, rng=rng)
    anchor = catalog.get_by_id(product_id)
    if not anchor:
        raise click.ClickException(f"Product {product_id} not found")
    click.echo(f"Recommendations for #{anchor.id} {anchor.title} ({anchor.category}):")
    for product in catalog.get_recommendations(product_id, "bought", limit):
        click.echo(f"  #{product.id} {product.title} [{product.category}] ${product.price:.2f} {product.rating}*")


def register_cli(app):
    app.cli.add_command(catalog_check)
    app.cli.add_command(recommend)
