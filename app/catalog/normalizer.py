"""Normalization of raw spreadsheet rows into canonical catalog products."""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from app.catalog.fields import RecordKeyIndex, clean_text, parse_flag, slugify
from app.catalog.rules import (
    DEFAULT_MATURITY_TIME,
    DEFAULT_SUBCATEGORY,
    DEFAULT_YIELD_EXPECTATION,
    FIELD_PATTERNS,
    SPECIFICATION_FIELDS,
    infer_category,
    map_seasons,
)
from app.models.enums import DifficultyLevel
from app.schemas.catalog import CatalogProduct, ProductImage, ProductSpecification
from app.utils.logger import logger

FALLBACK_SLUG = "product"


def extract_fields(record: Mapping[str, Any]) -> Dict[str, str]:
    """Resolve every canonical field of ``record`` through ``FIELD_PATTERNS``.

    Fields missing from the record come back as ``""``. A key matched by an
    earlier pattern is not reused, so "Long Description" never feeds the bare
    "description" pattern.
    """
    index = RecordKeyIndex(record)
    fields: Dict[str, str] = {}
    claimed = set()
    for pattern, field in FIELD_PATTERNS:
        if fields.get(field):
            continue
        key = index.find_key(pattern, exclude=claimed)
        if key is None:
            fields.setdefault(field, "")
            continue
        claimed.add(key)
        fields[field] = clean_text(record[key])
    return fields


def build_specifications(fields: Mapping[str, str]) -> List[ProductSpecification]:
    """Specification rows for the fields that carry a value."""
    return [
        ProductSpecification(id=spec_id, name=label, value=fields[field], category=group)
        for field, label, group, spec_id in SPECIFICATION_FIELDS
        if fields.get(field)
    ]


def order_images(images: Iterable[ProductImage]) -> List[ProductImage]:
    """Keep at most one primary image, put it first, then order by sort_order."""
    ordered = sorted(images, key=lambda image: image.sort_order)
    primary = next((image for image in ordered if image.is_primary), None)
    result = []
    if primary is not None:
        result.append(primary)
    for image in ordered:
        if image is primary:
            continue
        result.append(image.model_copy(update={"is_primary": False}) if image.is_primary else image)
    return result


def parse_images(value: str, name: str) -> List[ProductImage]:
    """Split a comma/newline separated list of URLs into images, first one primary."""
    urls = [url.strip() for url in value.replace("\n", ",").split(",") if url.strip()]
    return [
        ProductImage(
            url=url,
            alt_text=name if position == 0 else f"{name} - View {position + 1}",
            is_primary=position == 0,
            sort_order=position,
        )
        for position, url in enumerate(urls)
    ]


def normalize_record(
    record: Mapping[str, Any], now: Optional[datetime] = None
) -> Optional[CatalogProduct]:
    """Turn one raw record into a canonical product.

    Returns None when the record has no product name: such rows carry no
    product and are skipped rather than treated as errors.
    """
    fields = extract_fields(record)
    name = fields["name"]
    if not name:
        return None

    timestamp = now or datetime.utcnow()
    crop_name = fields["crop_name"]
    category = infer_category(crop_name, name)

    description = fields["description"] or fields["morphological_characters"] or (
        f"{name} - quality {(crop_name or category.value).lower()} seeds."
    )

    return CatalogProduct(
        id=slugify(name) or FALLBACK_SLUG,
        name=name,
        category=category,
        subcategory=fields["subcategory"] or DEFAULT_SUBCATEGORY,
        crop_name=crop_name,
        description=description,
        long_description=fields["long_description"] or description,
        specifications=build_specifications(fields),
        seasonality=map_seasons(fields["season"]),
        difficulty_level=DifficultyLevel.lookup(fields["difficulty_level"])
        or DifficultyLevel.INTERMEDIATE,
        maturity_time=fields["maturity_time"] or DEFAULT_MATURITY_TIME,
        yield_expectation=fields["yield_expectation"] or DEFAULT_YIELD_EXPECTATION,
        availability=parse_flag(fields["availability"], default=True),
        featured=parse_flag(fields["featured"], default=False),
        images=order_images(parse_images(fields["images"], name)),
        created_at=timestamp,
        updated_at=timestamp,
    )


def dedupe_ids(products: Iterable[CatalogProduct]) -> List[CatalogProduct]:
    """Suffix repeated ids with -2, -3, ... in input order."""
    seen = set()
    result = []
    for product in products:
        candidate = product.id
        suffix = 2
        while candidate in seen:
            candidate = f"{product.id}-{suffix}"
            suffix += 1
        seen.add(candidate)
        result.append(product if candidate == product.id else product.model_copy(update={"id": candidate}))
    return result


def normalize_records(
    records: Iterable[Mapping[str, Any]], now: Optional[datetime] = None
) -> List[CatalogProduct]:
    """Normalize a batch of raw records into a catalog snapshot with unique ids."""
    timestamp = now or datetime.utcnow()
    products = []
    skipped = 0
    for position, record in enumerate(records, start=1):
        product = normalize_record(record, now=timestamp)
        if product is None:
            skipped += 1
            logger.debug(f"Skipping row {position}: no product name")
            continue
        products.append(product)

    if skipped:
        logger.info(f"Normalized {len(products)} products, skipped {skipped} rows without a name")
    return dedupe_ids(products)
