"""Catalogue administration CLI commands."""

import typer
from rich.console import Console
from rich.table import Table

from src.storefront.core.errors import StorefrontError
from src.storefront.core.services import DbSessionService
from src.storefront.entities import CategoryRepository, ProductRepository
from src.storefront.runtime.context import get_config
from src.storefront.runtime.init_db import init_db, seed_catalogue

console = Console()


def register(app: typer.Typer) -> None:
    app.command("init-db")(init_db_command)
    app.command("seed")(seed_command)
    app.command("list-products")(list_products_command)
    app.command("serve")(serve_command)


def init_db_command(
    drop: bool = typer.Option(False, "--drop", help="Drop all tables before creating them"),
) -> None:
    """Create the storefront schema."""
    init_db(drop=drop)
    console.print(f"[green]✅ Schema ready at {get_config().database.url}[/green]")


def seed_command() -> None:
    """Create the schema and load the demo catalogue into an empty database."""
    db_service = DbSessionService()
    init_db(db_service)
    try:
        with db_service.session_scope() as session:
            count = seed_catalogue(session)
    except StorefrontError as e:
        console.print(f"[red]❌ Failed to seed catalogue: {e.message}[/red]")
        raise typer.Exit(code=1) from e

    if count:
        console.print(f"[green]✅ Seeded {count} products[/green]")
    else:
        console.print("[yellow]Catalogue already populated, nothing seeded[/yellow]")


def list_products_command(
    category: int | None = typer.Option(None, "--category", "-c", help="Only list this category"),
) -> None:
    """List products with their category, price and active sizes."""
    db_service = DbSessionService()
    with db_service.session_scope() as session:
        categories = {c.id: c.name for c in CategoryRepository(session).list_all()}
        repository = ProductRepository(session)
        products = (
            repository.list_by_category(category) if category else repository.list_all()
        )

    if not products:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(title="Products")
    table.add_column("ID", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Name", style="green")
    table.add_column("Price", justify="right")
    table.add_column("Sizes", style="blue")
    table.add_column("Active", style="yellow")
    for product in products:
        table.add_row(
            str(product.id),
            categories.get(product.category_id, "?"),
            product.name,
            f"{product.price:.2f}",
            ", ".join(size.name for size in product.active_sizes),
            "✅" if product.is_active else "❌",
        )
    console.print(table)
    console.print(f"\n[green]Found {len(products)} products[/green]")


def serve_command(
    host: str | None = typer.Option(None, "--host", help="Bind address, defaults to config"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port, defaults to config"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Serve the HTTP API with uvicorn."""
    import uvicorn

    cfg = get_config().app
    uvicorn.run(
        "src.storefront.api.http.app:app",
        host=host or cfg.host,
        port=port or cfg.port,
        reload=reload,
        access_log=False,
    )
