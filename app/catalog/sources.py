"""Catalog sources: where the canonical product list comes from."""

from pathlib import Path
from typing import IO, Any, Dict, List, Optional, Protocol, Sequence, Union

import pandas as pd
from sqlalchemy.orm import Session

from app.catalog.normalizer import normalize_records
from app.models.product import Product
from app.schemas.catalog import CatalogProduct
from app.utils.logger import logger

EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}


class CatalogSource(Protocol):
    """Anything that can produce the full canonical catalog."""

    def fetch_all(self) -> List[CatalogProduct]:
        ...


def read_spreadsheet(
    source: Union[str, Path, IO[bytes]], filename: Optional[str] = None
) -> List[Dict[str, Any]]:
    """Read the first sheet of an Excel workbook (or a CSV file) into raw records.

    Args:
        source: Path or binary file object
        filename: Name used to pick the parser when ``source`` is a file object

    Returns:
        One dict per row, keyed by the header cells
    """
    suffix = Path(filename or str(source)).suffix.lower()
    if suffix in EXCEL_SUFFIXES:
        df = pd.read_excel(source, sheet_name=0, dtype=str)
    else:
        df = pd.read_csv(source, dtype=str, keep_default_na=False)

    df = df.dropna(how="all")
    df.columns = [str(column).strip() for column in df.columns]
    return df.to_dict(orient="records")


class SpreadsheetCatalogSource:
    """Catalog read from the product spreadsheet and normalized on every fetch."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def fetch_all(self) -> List[CatalogProduct]:
        records = read_spreadsheet(self.path)
        logger.debug(f"Read {len(records)} rows from {self.path}")
        return normalize_records(records)


class DatabaseCatalogSource:
    """Catalog read from the products table; rows already have the canonical shape."""

    def __init__(self, db: Session):
        self.db = db

    def fetch_all(self) -> List[CatalogProduct]:
        products = self.db.query(Product).order_by(Product.id).all()
        return [product.to_catalog_product() for product in products]


class InMemoryCatalogSource:
    """Fixed catalog, used by tests and previews."""

    def __init__(self, products: Sequence[CatalogProduct]):
        self.products = list(products)

    def fetch_all(self) -> List[CatalogProduct]:
        return list(self.products)


def get_all_products(source: CatalogSource) -> List[CatalogProduct]:
    """Fetch the catalog, degrading to an empty catalog when the source fails."""
    try:
        return source.fetch_all()
    except Exception as e:
        logger.error(f"Catalog ingestion failed from {type(source).__name__}: {e}")
        return []
