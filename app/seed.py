"""Database seeding for first-time startup."""

from sqlalchemy import text
from sqlalchemy.orm import Session

from app.catalog.rules import infer_category
from app.config import settings
from app.models import Admin, Product, ProductImage
from app.models.enums import DifficultyLevel
from app.utils.logger import logger

SAMPLE_PRODUCTS = [
    {
        "name": "Savaj Hybrid Tomato S-101",
        "slug": "savaj-hybrid-tomato-s-101",
        "description": "High-yielding hybrid tomato variety with excellent disease resistance.",
        "long_description": (
            "Savaj Hybrid Tomato S-101 is a premium variety developed for Indian climatic "
            "conditions. It offers high yield potential, uniform fruit size, and excellent "
            "keeping quality. The fruits are deep red, firm, and ideal for long-distance "
            "transportation."
        ),
        "crop_name": "Tomato",
        "seed_color": "Brownish",
        "morphological_characters": "Determinate plant habit",
        "flower_color": "Yellow",
        "fruit_shape": "Round",
        "plant_height": "3-4 feet",
        "seasonality": ["Kharif", "Rabi"],
        "maturity_time": "60-65 days after transplanting",
        "yield_expectation": "25-30 tons/acre",
        "difficulty_level": DifficultyLevel.INTERMEDIATE,
        "image": "/images/product-tomato.jpg",
        "featured": True,
    },
    {
        "name": "Savaj Premium Wheat W-45",
        "slug": "savaj-premium-wheat-w-45",
        "description": "Drought-tolerant wheat variety with superior grain quality.",
        "long_description": (
            "W-45 is a research-backed wheat variety widely appreciated for its golden grains "
            "and high protein content. It is resistant to rust and suitable for late sowing "
            "conditions."
        ),
        "crop_name": "Wheat",
        "seed_color": "Golden",
        "morphological_characters": "Semi-dwarf",
        "plant_height": "90-100 cm",
        "seasonality": ["Rabi"],
        "maturity_time": "110-120 days",
        "yield_expectation": "20-22 quintals/acre",
        "difficulty_level": DifficultyLevel.BEGINNER,
        "image": "/images/product-wheat.jpg",
        "featured": True,
    },
    {
        "name": "Savaj Hybrid Cotton C-22",
        "slug": "savaj-hybrid-cotton-c-22",
        "description": "Bollworm-resistant hybrid cotton with long staple length.",
        "long_description": (
            "C-22 is a BT cotton hybrid known for its large boll size and easy picking. It has "
            "a strong root system and performs well in both irrigated and rainfed conditions."
        ),
        "crop_name": "Cotton",
        "seed_color": "Black",
        "morphological_characters": "Bushy",
        "flower_color": "Cream",
        "plant_height": "4-5 feet",
        "seasonality": ["Kharif"],
        "maturity_time": "150-160 days",
        "yield_expectation": "10-12 quintals/acre",
        "difficulty_level": DifficultyLevel.ADVANCED,
        "image": "/images/category-crop.jpg",
        "featured": True,
    },
    {
        "name": "Savaj Okra Green Star",
        "slug": "savaj-okra-green-star",
        "description": "Dark green, tender okra pods with YVMV resistance.",
        "long_description": (
            "Green Star is a vigorous okra variety that produces dark green, 5-ridged, tender "
            "fruits. It is highly tolerant to Yellow Vein Mosaic Virus (YVMV) and Enation Leaf "
            "Curl Virus (ELCV)."
        ),
        "crop_name": "Okra",
        "seed_color": "Dark Grey",
        "morphological_characters": "Erect branching",
        "flower_color": "Yellow with red center",
        "fruit_shape": "Pentagonal",
        "plant_height": "4-5 feet",
        "seasonality": ["Summer", "Kharif"],
        "maturity_time": "45-50 days",
        "yield_expectation": "5-7 tons/acre",
        "difficulty_level": DifficultyLevel.BEGINNER,
        "image": "/images/category-vegetable.jpg",
        "featured": False,
    },
    {
        "name": "Savaj Cucumber Cool Green",
        "slug": "savaj-cucumber-cool-green",
        "description": "Crispy, bitter-free cucumber for fresh consumption.",
        "long_description": (
            "Cool Green is a high-yielding variety suitable for salad purposes. Fruits are "
            "cylindrical, dark green, and uniform in size. Excellent for organic farming."
        ),
        "crop_name": "Cucumber",
        "seed_color": "White",
        "morphological_characters": "Vining",
        "flower_color": "Yellow",
        "fruit_shape": "Cylindrical",
        "seasonality": ["Summer", "Kharif"],
        "maturity_time": "35-40 days",
        "yield_expectation": "15-20 tons/acre",
        "difficulty_level": DifficultyLevel.INTERMEDIATE,
        "image": "/images/product-pepper.jpg",
        "featured": False,
    },
    {
        "name": "Savaj Hybrid Maize M-55",
        "slug": "savaj-hybrid-maize-m-55",
        "description": "High starch content hybrid maize for food and fodder.",
        "long_description": (
            "M-55 is a dual-purpose hybrid suitable for grain and fodder. It has bold "
            "orange-yellow grains and stays green till harvest."
        ),
        "crop_name": "Maize",
        "seed_color": "Orange-Yellow",
        "morphological_characters": "Tall, erected leaves",
        "plant_height": "7-8 feet",
        "seasonality": ["Kharif", "Rabi"],
        "maturity_time": "95-100 days",
        "yield_expectation": "30-35 quintals/acre",
        "difficulty_level": DifficultyLevel.INTERMEDIATE,
        "image": "/images/category-crop.jpg",
        "featured": True,
    },
]


def build_sample_products() -> list[Product]:
    """Build the demo catalog shown on a fresh install."""
    products = []
    for entry in SAMPLE_PRODUCTS:
        data = dict(entry)
        image_url = data.pop("image")
        product = Product(
            category=infer_category(data["crop_name"], data["name"]),
            availability=True,
            **data,
        )
        product.images = [
            ProductImage(url=image_url, alt_text=product.name, is_primary=True, sort_order=0)
        ]
        products.append(product)
    return products


def _build_admin() -> Admin | None:
    """Build the initial admin from settings, if credentials are configured."""
    if not settings.admin_email or not settings.admin_password:
        logger.warning("ADMIN_EMAIL/ADMIN_PASSWORD not set, skipping admin account")
        return None

    admin = Admin(email=settings.admin_email, name="Administrator", active=True)
    admin.set_password(settings.admin_password)
    return admin


def seed_if_empty(engine) -> None:
    """Seed the database with default data if it has not been seeded yet.

    The admin account and the sample catalog are seeded independently, each
    only when its table is empty.

    Args:
        engine: SQLAlchemy engine instance. A session is created from this
                engine to perform all seed operations in a single transaction.
    """
    session = Session(bind=engine)
    try:
        admin_count = session.execute(text("SELECT COUNT(*) FROM admins")).scalar()
        product_count = session.execute(text("SELECT COUNT(*) FROM products")).scalar()

        seeded = []
        if admin_count == 0:
            admin = _build_admin()
            if admin is not None:
                session.add(admin)
                seeded.append("1 admin")

        if product_count == 0 and settings.seed_sample_products:
            products = build_sample_products()
            session.add_all(products)
            seeded.append(f"{len(products)} products")

        session.commit()

        if seeded:
            logger.info(f"Database seeded: {', '.join(seeded)}")
    except Exception:
        session.rollback()
        logger.exception("Failed to seed database")
    finally:
        session.close()
