"""Tests for database models."""

import pytest
from datetime import datetime, timedelta

from app.models import Admin, AdminSession, Contact, Product, ProductImage, Visitor
from app.models.enums import DifficultyLevel, ProductCategory, Season, SpecificationCategory


class TestProductModel:
    """Test Product model."""

    def test_create_product(self, test_db):
        """Test creating a product with column defaults."""
        product = Product(name="Savaj Okra Green Star", slug="savaj-okra-green-star")
        test_db.add(product)
        test_db.commit()

        assert product.id is not None
        assert product.category == ProductCategory.OTHER
        assert product.seasonality == ["All-Season"]
        assert product.page_views == 0
        assert product.availability is True
        assert product.created_at is not None

    def test_seasonality_normalized(self):
        """Test free-text season labels are stored as canonical labels."""
        product = Product(name="A", slug="a", seasonality=["Kharif", "rabi"])
        assert product.seasonality == ["Monsoon", "Winter"]
        assert product.season_list == [Season.MONSOON, Season.WINTER]

        product.seasonality = []
        assert product.seasonality == ["All-Season"]

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            Product(name="  ", slug="blank")

    def test_product_repr(self, sample_products):
        """Test product string representation."""
        assert "savaj-hybrid-tomato-s-101" in repr(sample_products[0])
        assert "Vegetable" in repr(sample_products[0])

    def test_images_ordered_and_cascade(self, test_db):
        """Test images follow sort_order and are removed with the product."""
        product = Product(name="Savaj Cucumber", slug="savaj-cucumber")
        product.images = [
            ProductImage(url="/b.jpg", sort_order=1),
            ProductImage(url="/a.jpg", sort_order=0, is_primary=True),
        ]
        test_db.add(product)
        test_db.commit()
        test_db.refresh(product)

        assert [image.url for image in product.images] == ["/a.jpg", "/b.jpg"]

        test_db.delete(product)
        test_db.commit()
        assert test_db.query(ProductImage).count() == 0

    def test_to_catalog_product(self, sample_products):
        """Test conversion to the canonical catalog shape."""
        maize = sample_products[5].to_catalog_product()

        assert maize.id == "savaj-hybrid-maize-m-55"
        assert maize.category == ProductCategory.MAIZE
        assert maize.difficulty_level == DifficultyLevel.INTERMEDIATE
        assert maize.seasonality == [Season.MONSOON, Season.WINTER]
        assert maize.images[0].url == "/images/category-crop.jpg"
        specs = {spec.name: spec for spec in maize.specifications}
        assert specs["Seed Color"].value == "Orange-Yellow"
        assert specs["Maturity Time"].category == SpecificationCategory.GROWING
        assert "Flower Color" not in specs


class TestAdminModel:
    """Test Admin and AdminSession models."""

    def test_password_hashing(self):
        """Test password is hashed and verifiable."""
        admin = Admin(email="Owner@SavajSeeds.com", name="Owner", active=True)
        admin.set_password("s3cret")

        assert admin.email == "owner@savajseeds.com"
        assert admin.password_hash != "s3cret"
        assert admin.check_password("s3cret") is True
        assert admin.check_password("wrong") is False

    def test_invalid_email(self):
        with pytest.raises(ValueError):
            Admin(email="not-an-email")

    def test_inactive_admin_fails_password_check(self, admin_user):
        admin_user.active = False
        assert admin_user.check_password("adminpass123") is False

    def test_session_expiry(self, test_db, admin_user):
        session = AdminSession(
            token="abc",
            admin_id=admin_user.id,
            expires_at=datetime.utcnow() + timedelta(hours=1),
        )
        test_db.add(session)
        test_db.commit()

        assert session.is_expired is False
        session.expires_at = datetime.utcnow() - timedelta(seconds=1)
        assert session.is_expired is True


class TestContactModel:
    """Test Contact model."""

    def test_blank_phone_stored_as_none(self, test_db):
        contact = Contact(
            name=" Ravi ",
            email="ravi@example.com",
            phone="  ",
            category="Dealership",
            subject="Hello",
            message="Hi there",
        )
        test_db.add(contact)
        test_db.commit()

        assert contact.name == "Ravi"
        assert contact.phone is None

    def test_required_fields(self):
        with pytest.raises(ValueError):
            Contact(name="Ravi", email="ravi@example.com", category="Other", subject="", message="x")


class TestVisitorModel:
    """Test Visitor model."""

    def test_create_visitor(self, test_db):
        visitor = Visitor(ip_address=" 203.0.113.5 ")
        test_db.add(visitor)
        test_db.commit()

        assert visitor.ip_address == "203.0.113.5"
        assert visitor.total_visits == 1
        assert visitor.visited_at is not None
