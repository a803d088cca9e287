"""Command-line interface for the seed catalog."""

import click
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from .catalog.engine import query_catalog
from .catalog.normalizer import normalize_records
from .catalog.sources import read_spreadsheet
from .database import Base, SessionLocal, engine, init_db
from .schemas.catalog import FilterState, SortSpec
from .services import AuthService, ProductService
from .utils.logger import logger


@click.group()
def cli():
    """Savaj Seeds catalog CLI."""
    pass


# Database commands
@cli.group()
def db():
    """Database management commands."""
    pass


@db.command()
def init():
    """Initialize the database (create tables and seed if empty)."""
    click.echo("Initializing database...")
    try:
        init_db()
        click.echo("✅ Database initialized successfully!")
    except Exception as e:
        click.echo(f"❌ Error: {e}", err=True)


@db.command()
@click.confirmation_option(prompt="Are you sure you want to drop all tables?")
def reset():
    """Reset the database (drop and recreate all tables)."""
    click.echo("Resetting database...")
    try:
        import app.models  # noqa: F401

        Base.metadata.drop_all(engine)
        init_db()
        click.echo("✅ Database reset successfully!")
    except Exception as e:
        click.echo(f"❌ Error: {e}", err=True)


# Catalog commands
@cli.group()
def catalog():
    """Catalog spreadsheet commands."""
    pass


@catalog.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--category", "categories", multiple=True, help="Category filter (repeatable)")
@click.option("--season", "seasons", multiple=True, help="Season filter (repeatable)")
@click.option("--difficulty", "difficulty_levels", multiple=True, help="Difficulty filter")
@click.option("--available", is_flag=True, help="Only available products")
@click.option("--featured", is_flag=True, help="Only featured products")
@click.option("--sort", "sort_field", default="name", help="name, category, createdAt or featured")
@click.option("--direction", default="asc", type=click.Choice(["asc", "desc"]))
def preview(path, categories, seasons, difficulty_levels, available, featured, sort_field, direction):
    """Normalize a spreadsheet and print the resulting catalog without saving it."""
    try:
        products = normalize_records(read_spreadsheet(path))
    except Exception as e:
        click.echo(f"❌ Error reading {path}: {e}", err=True)
        return

    filters = FilterState.from_params(
        categories=categories,
        seasons=seasons,
        difficulty_levels=difficulty_levels,
        availability=available or None,
        featured=featured or None,
    )
    view = query_catalog(products, filters, SortSpec.from_params(sort_field, direction))

    click.echo(f"\nShowing {view.stats.filtered_count} of {view.stats.total_products} products:\n")
    for p in view.products:
        seasons_text = ", ".join(season.value for season in p.seasonality)
        click.echo(f"{p.id} | {p.name}")
        click.echo(f"   Category: {p.category.value} | Seasons: {seasons_text}")
        click.echo(f"   Maturity: {p.maturity_time} | Yield: {p.yield_expectation}")
        click.echo()

    click.echo("Categories:")
    for category, count in sorted(view.stats.category_stats.items()):
        click.echo(f"   {category}: {count}")


@catalog.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def import_catalog(path):
    """Create or update products from a spreadsheet."""
    session = SessionLocal()
    try:
        result = ProductService().import_records(session, read_spreadsheet(path))
        click.echo(
            f"✅ Imported {result.imported} new, updated {result.updated}, "
            f"skipped {result.skipped} of {result.total_rows} rows"
        )
        for error in result.errors:
            click.echo(f"   ⚠️  {error}")
    except Exception as e:
        logger.error(f"Catalog import from {path} failed: {e}")
        click.echo(f"❌ Error: {e}", err=True)
    finally:
        session.close()


# Admin commands
@cli.group()
def admin():
    """Admin account commands."""
    pass


@admin.command()
@click.option("--email", prompt=True, help="Admin email")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--name", help="Display name")
def create(email, password, name):
    """Create an admin account."""
    session = SessionLocal()
    try:
        account = AuthService().create_admin(session, email=email, password=password, name=name)
        click.echo(f"✅ Admin created: {account.email} (ID: {account.id})")
    except Exception as e:
        click.echo(f"❌ Error: {e}", err=True)
    finally:
        session.close()


@admin.command("purge-sessions")
def purge_sessions():
    """Delete expired admin sessions."""
    session = SessionLocal()
    try:
        removed = AuthService().purge_expired_sessions(session)
        click.echo(f"✅ Removed {removed} expired sessions")
    except Exception as e:
        click.echo(f"❌ Error: {e}", err=True)
    finally:
        session.close()


if __name__ == "__main__":
    cli()
