"""Ordered rule tables used to normalize free-text catalog data.

Every table is evaluated top to bottom and the first matching rule wins, so
the order of the entries is part of the behaviour. Keep field crops ahead of
vegetables in ``CROP_NAME_RULES``: "Sweet Corn" is catalogued as Maize.
"""

from dataclasses import dataclass
from typing import Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar, Union

from app.models.enums import ProductCategory, Season, SpecificationCategory

T = TypeVar("T")


@dataclass(frozen=True)
class KeywordRule(Generic[T]):
    """Maps any of ``keywords`` (substring match on lower-cased text) to ``result``."""

    keywords: Tuple[str, ...]
    result: T

    def match(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


def _rule(result, *keywords):
    return KeywordRule(keywords=tuple(keywords), result=result)


CROP_NAME_RULES: List[KeywordRule[ProductCategory]] = [
    # Field crops
    _rule(ProductCategory.COTTON, "cotton", "kapas"),
    _rule(ProductCategory.WHEAT, "wheat"),
    _rule(ProductCategory.GROUNDNUT, "groundnut", "peanut"),
    _rule(ProductCategory.CUMIN, "cumin", "jeera"),
    _rule(ProductCategory.SESAME, "sesame"),
    _rule(ProductCategory.CASTOR, "castor"),
    _rule(ProductCategory.MAIZE, "maize", "corn"),
    _rule(ProductCategory.PIGEON_PEA, "pigeon", "arhar", "tuvar"),
    _rule(ProductCategory.GRAM, "gram", "chana"),
    _rule(ProductCategory.MILLET, "millet", "bajra", "jowar", "sorghum"),
    _rule(ProductCategory.CORIANDER, "coriander", "dhaniya"),
    _rule(ProductCategory.CROP, "rice", "paddy", "mustard", "soybean", "soyabean"),
    # Vegetables
    _rule(
        ProductCategory.VEGETABLE,
        "vegetable",
        "okra",
        "bhindi",
        "tomato",
        "chilli",
        "chili",
        "brinjal",
        "gourd",
        "cucumber",
        "bean",
        "capsicum",
        "onion",
        "melon",
        "pumpkin",
        "cabbage",
        "cauliflower",
        "carrot",
        "radish",
        "spinach",
    ),
    _rule(ProductCategory.HYBRID, "hybrid"),
]

# Loose vegetable detection on the product name when the crop name is blank
PRODUCT_NAME_RULES: List[KeywordRule[ProductCategory]] = [
    _rule(
        ProductCategory.VEGETABLE,
        "okra",
        "bottle",
        "bitter",
        "sponge",
        "ridge",
        "chilli",
        "tomato",
        "cucumber",
        "bean",
    ),
]

SEASON_RULES: List[KeywordRule[Season]] = [
    _rule(Season.MONSOON, "kharif", "monsoon"),
    _rule(Season.WINTER, "rabi", "winter"),
    _rule(Season.SUMMER, "summer"),
    _rule(Season.ALL_SEASON, "all season", "all-season"),
    _rule(Season.SPRING, "spring"),
]

# (key substring, canonical field); earlier patterns win for the same field, and a
# key matched by one pattern is not offered to later ones
FIELD_PATTERNS: List[Tuple[str, str]] = [
    ("product name", "name"),
    ("variety", "name"),
    ("crop", "crop_name"),
    ("seed color", "seed_color"),
    ("seed colour", "seed_color"),
    ("fruit color", "seed_color"),
    ("fruit colour", "seed_color"),
    ("morphological", "morphological_characters"),
    ("flower color", "flower_color"),
    ("flower colour", "flower_color"),
    ("fruit shape", "fruit_shape"),
    ("height", "plant_height"),
    ("maturity", "maturity_time"),
    ("yield", "yield_expectation"),
    ("season", "season"),
    ("long description", "long_description"),
    ("short description", "description"),
    ("description", "description"),
    ("sub category", "subcategory"),
    ("subcategory", "subcategory"),
    ("difficulty", "difficulty_level"),
    ("availab", "availability"),
    ("stock", "availability"),
    ("featured", "featured"),
    ("image", "images"),
]

# (canonical field, display name, group, specification id)
SPECIFICATION_FIELDS: List[Tuple[str, str, SpecificationCategory, str]] = [
    ("seed_color", "Seed Color", SpecificationCategory.BASIC, "seedColor"),
    ("morphological_characters", "Morphological Characters", SpecificationCategory.BASIC, "morph"),
    ("flower_color", "Flower Color", SpecificationCategory.BASIC, "flowerColor"),
    ("fruit_shape", "Fruit Shape", SpecificationCategory.BASIC, "fruitShape"),
    ("plant_height", "Plant Height", SpecificationCategory.BASIC, "plantHeight"),
    ("maturity_time", "Maturity Time", SpecificationCategory.GROWING, "maturityTime"),
    ("yield_expectation", "Expected Yield", SpecificationCategory.HARVEST, "yieldExpectation"),
]

DEFAULT_SUBCATEGORY = "General"
DEFAULT_MATURITY_TIME = "60-80 days"
DEFAULT_YIELD_EXPECTATION = "High"


def first_match(rules: Sequence[KeywordRule[T]], text: str) -> Optional[T]:
    """Result of the first rule matching the lower-cased ``text``, or None."""
    lowered = (text or "").lower()
    if not lowered:
        return None
    for rule in rules:
        if rule.match(lowered):
            return rule.result
    return None


def infer_category(crop_name: str, product_name: str) -> ProductCategory:
    """Crop-name rules first, then product-name rules, then Other."""
    return (
        first_match(CROP_NAME_RULES, crop_name)
        or first_match(PRODUCT_NAME_RULES, product_name)
        or ProductCategory.OTHER
    )


def map_seasons(value: Union[str, Iterable[str], None]) -> List[Season]:
    """Map free-text season labels onto the controlled vocabulary.

    Several tags may apply ("Kharif, Rabi" gives Monsoon and Winter). The
    result follows ``SEASON_RULES`` order and is never empty: text that
    matches nothing maps to All-Season.
    """
    if value is None:
        text = ""
    elif isinstance(value, str):
        text = value
    else:
        text = ", ".join(str(item) for item in value)
    lowered = text.lower()

    seasons = [rule.result for rule in SEASON_RULES if rule.match(lowered)]
    return seasons or [Season.ALL_SEASON]
