"""Tests for service classes."""

import pytest
from datetime import datetime, timedelta

from app.models import AdminSession, ProductCategory
from app.schemas.contact import ContactCreate
from app.schemas.product import ProductCreate
from app.services import AuthService, ContactService, ProductService, VisitorService
from app.services.contact_service import REQUIRED_FIELDS_MESSAGE
from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD, FIXED_NOW


class TestProductService:
    """Test ProductService."""

    def test_create_product_derives_slug(self, test_db):
        """Test the slug is derived from the name when omitted."""
        service = ProductService()

        product = service.create_product(
            test_db,
            {
                "name": "Savaj Bottle Gourd BG-7",
                "category": ProductCategory.VEGETABLE,
                "seasonality": ["Kharif"],
                "images": [{"url": "/images/bg7.jpg"}, {"url": "/images/bg7-2.jpg"}],
            },
        )

        assert product.id is not None
        assert product.slug == "savaj-bottle-gourd-bg-7"
        assert product.seasonality == ["Monsoon"]
        assert [image.is_primary for image in product.images] == [True, False]
        assert product.images[0].alt_text == "Savaj Bottle Gourd BG-7"

    def test_image_sort_order_defaults_to_position(self, test_db):
        """Test images posted without a sort_order keep their list position."""
        product_in = ProductCreate(
            name="Savaj Ridge Gourd",
            images=[{"url": "/images/rg-1.jpg"}, {"url": "/images/rg-2.jpg"}, {"url": "/images/rg-3.jpg"}],
        )

        product = ProductService().create_product(test_db, product_in.model_dump())

        assert [image.sort_order for image in product.images] == [0, 1, 2]
        assert [image.url for image in product.images] == [
            "/images/rg-1.jpg",
            "/images/rg-2.jpg",
            "/images/rg-3.jpg",
        ]

    def test_duplicate_slug_rejected(self, test_db, sample_products):
        """Test that a second product with the same slug is refused."""
        service = ProductService()

        with pytest.raises(ValueError, match="slug already exists"):
            service.create_product(test_db, {"name": "Savaj Premium Wheat W-45"})

    def test_get_by_id_or_slug(self, test_db, sample_products):
        """Test lookup by slug first, then by numeric id."""
        service = ProductService()
        wheat = sample_products[1]

        assert service.get_by_id_or_slug(test_db, wheat.slug).id == wheat.id
        assert service.get_by_id_or_slug(test_db, str(wheat.id)).id == wheat.id
        assert service.get_by_id_or_slug(test_db, "no-such-seed") is None

    def test_list_products_filters(self, test_db, sample_products):
        """Test keyword, category and featured filters."""
        service = ProductService()

        assert [p.slug for p in service.list_products(test_db, keyword="TOMATO")] == [
            "savaj-hybrid-tomato-s-101"
        ]
        vegetables = service.list_products(test_db, category="vegetable")
        assert {p.crop_name for p in vegetables} == {"Tomato", "Okra", "Cucumber"}
        assert len(service.list_products(test_db, featured=True)) == 4
        assert service.list_products(test_db, category="Fruit") == []

    def test_list_products_ordered_by_name(self, test_db, sample_products):
        """Test listing is alphabetical."""
        names = [p.name for p in ProductService().list_products(test_db)]
        assert names == sorted(names)

    def test_increment_views(self, test_db, sample_products):
        """Test the page view counter goes up by one per call."""
        service = ProductService()
        product = sample_products[0]

        service.increment_views(test_db, product)
        service.increment_views(test_db, product)

        assert product.page_views == 2

    def test_update_product_merges(self, test_db, sample_products):
        """Test None values keep the stored value and a new slug is checked."""
        service = ProductService()
        tomato = sample_products[0]

        updated = service.update_product(
            test_db, tomato, {"description": "Updated", "maturity_time": None}
        )
        assert updated.description == "Updated"
        assert updated.maturity_time == "60-65 days after transplanting"

        with pytest.raises(ValueError):
            service.update_product(test_db, tomato, {"slug": "savaj-premium-wheat-w-45"})

    def test_delete(self, test_db, sample_products):
        """Test deleting a product and a missing id."""
        service = ProductService()

        assert service.delete(test_db, sample_products[0].id) is True
        assert service.delete(test_db, 9999) is False
        assert service.count(test_db) == 5

    def test_import_records(self, test_db, raw_records):
        """Test spreadsheet rows are created, then updated on a second import."""
        service = ProductService()

        first = service.import_records(test_db, raw_records)
        assert (first.total_rows, first.imported, first.updated, first.skipped) == (4, 3, 0, 1)
        assert first.errors == []

        maize = service.get_by_slug(test_db, "hybrid-maize-seeds")
        assert maize.category == ProductCategory.MAIZE
        assert maize.seasonality == ["Monsoon", "Winter"]
        assert maize.plant_height == "7-8 feet"
        assert maize.featured is True
        assert service.get_by_slug(test_db, "cotton-gold").availability is False
        assert service.get_by_slug(test_db, "green-okra-seeds").category == ProductCategory.VEGETABLE

        second = service.import_records(test_db, raw_records)
        assert (second.imported, second.updated) == (0, 3)
        assert service.count(test_db) == 3


class TestContactService:
    """Test ContactService."""

    def test_submit(self, test_db):
        """Test a complete form is stored."""
        service = ContactService()
        form = ContactCreate(
            name="Ravi Patel",
            email="ravi@example.com",
            category="Dealership",
            subject="Dealer enquiry",
            message="I would like to stock your seeds.",
        )

        contact = service.submit(test_db, form)

        assert contact.id is not None
        assert contact.phone is None
        assert service.find_by_email(test_db, "ravi@example.com").id == contact.id

    def test_submit_missing_field(self, test_db):
        """Test a blank required field is rejected."""
        form = ContactCreate(name="Ravi", email="ravi@example.com", category="Other", subject="Hi", message="  ")

        with pytest.raises(ValueError, match=REQUIRED_FIELDS_MESSAGE):
            ContactService().submit(test_db, form)

        assert ContactService().count(test_db) == 0


class TestAuthService:
    """Test AuthService."""

    def test_authenticate(self, test_db, admin_user):
        """Test valid and invalid credentials."""
        service = AuthService()

        assert service.authenticate(test_db, ADMIN_EMAIL.upper(), ADMIN_PASSWORD).id == admin_user.id
        assert service.authenticate(test_db, ADMIN_EMAIL, "wrong") is None
        assert service.authenticate(test_db, "nobody@example.com", ADMIN_PASSWORD) is None

    def test_inactive_admin_cannot_log_in(self, test_db, admin_user):
        """Test deactivated accounts are refused."""
        admin_user.active = False
        test_db.commit()

        assert AuthService().authenticate(test_db, ADMIN_EMAIL, ADMIN_PASSWORD) is None

    def test_create_admin_duplicate(self, test_db, admin_user):
        """Test an email can only be registered once."""
        with pytest.raises(ValueError):
            AuthService().create_admin(test_db, email=ADMIN_EMAIL, password="another")

    def test_session_lifecycle(self, test_db, admin_user):
        """Test a session resolves to its admin until it is ended."""
        service = AuthService()

        session = service.create_session(test_db, admin_user, ip_address="10.0.0.1")
        assert session.expires_at > datetime.utcnow()
        assert admin_user.last_login_at is not None
        assert service.get_session_admin(test_db, session.token).id == admin_user.id

        assert service.end_session(test_db, session.token) is True
        assert service.get_session_admin(test_db, session.token) is None
        assert service.get_session_admin(test_db, None) is None

    def test_expired_session_removed(self, test_db, admin_user):
        """Test an expired session is rejected and deleted."""
        service = AuthService()
        session = service.create_session(test_db, admin_user)
        session.expires_at = datetime.utcnow() - timedelta(minutes=1)
        test_db.commit()
        token = session.token

        assert service.get_session_admin(test_db, token) is None
        assert test_db.query(AdminSession).filter(AdminSession.token == token).first() is None

    def test_purge_expired_sessions(self, test_db, admin_user):
        """Test only expired sessions are purged."""
        service = AuthService()
        live = service.create_session(test_db, admin_user)
        stale = service.create_session(test_db, admin_user)
        stale.expires_at = datetime.utcnow() - timedelta(hours=1)
        test_db.commit()

        assert service.purge_expired_sessions(test_db) == 1
        assert service.get_session_admin(test_db, live.token).id == admin_user.id


class TestVisitorService:
    """Test VisitorService."""

    def test_repeat_visits_counted_hourly(self, test_db):
        """Test a returning visitor counts again only after an hour."""
        service = VisitorService()

        visitor = service.log_visit(test_db, "203.0.113.5", "Mozilla/5.0", now=FIXED_NOW)
        assert visitor.total_visits == 1

        visitor = service.log_visit(test_db, "203.0.113.5", now=FIXED_NOW + timedelta(minutes=30))
        assert visitor.total_visits == 1

        visitor = service.log_visit(test_db, "203.0.113.5", now=FIXED_NOW + timedelta(hours=2))
        assert visitor.total_visits == 2
        assert visitor.user_agent == "Mozilla/5.0"

    def test_unknown_address_ignored(self, test_db):
        """Test visits without a usable address are not stored."""
        service = VisitorService()

        assert service.log_visit(test_db, "unknown") is None
        assert service.log_visit(test_db, "") is None
        assert service.count(test_db) == 0

    def test_stats(self, test_db):
        """Test aggregate visitor counts."""
        service = VisitorService()
        service.log_visit(test_db, "203.0.113.5", now=FIXED_NOW)
        service.log_visit(test_db, "203.0.113.5", now=FIXED_NOW + timedelta(hours=2))
        service.log_visit(test_db, "198.51.100.7", now=FIXED_NOW - timedelta(days=3))

        stats = service.get_stats(test_db, now=FIXED_NOW + timedelta(hours=2))

        assert stats.unique_visitors == 2
        assert stats.total_visits == 3
        assert stats.active_last_24h == 1
        assert stats.active_last_7d == 2

    def test_concurrent_first_visit(self, test_db, monkeypatch):
        """Test a duplicate insert for the same address returns the stored row."""
        service = VisitorService()
        stored = service.log_visit(test_db, "203.0.113.5", now=FIXED_NOW)

        real_get_by_ip = service.get_by_ip
        lookups = []

        def miss_first_lookup(db, ip_address):
            lookups.append(ip_address)
            if len(lookups) == 1:
                return None
            return real_get_by_ip(db, ip_address)

        monkeypatch.setattr(service, "get_by_ip", miss_first_lookup)

        visitor = service.log_visit(test_db, "203.0.113.5", now=FIXED_NOW)

        assert visitor.id == stored.id
        assert visitor.total_visits == 1
        assert service.count(test_db) == 1
