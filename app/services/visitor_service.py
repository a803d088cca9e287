"""Visitor logging."""

from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.visitor import Visitor
from app.schemas.visitor import VisitorStats
from app.services.base import BaseService
from app.utils.logger import logger

# A returning visitor counts again only after this interval
REVISIT_INTERVAL = timedelta(hours=1)


class VisitorService(BaseService[Visitor]):
    """Service for the per-IP visitor log."""

    def __init__(self):
        """Initialize visitor service."""
        super().__init__(Visitor)

    def get_by_ip(self, db: Session, ip_address: str) -> Optional[Visitor]:
        return db.query(Visitor).filter(Visitor.ip_address == ip_address).first()

    def log_visit(
        self,
        db: Session,
        ip_address: str,
        user_agent: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Optional[Visitor]:
        """
        Record a visit from ``ip_address``.

        A first visit creates the row. A repeat visit increments
        ``total_visits`` only when the previous counted visit is older than
        ``REVISIT_INTERVAL``.

        Returns:
            The visitor row, or None when the address is unknown
        """
        if not ip_address or ip_address == "unknown":
            return None

        now = now or datetime.utcnow()
        try:
            visitor = self.get_by_ip(db, ip_address)
            if visitor is None:
                visitor = Visitor(
                    ip_address=ip_address,
                    user_agent=user_agent,
                    visited_at=now,
                    total_visits=1,
                )
                db.add(visitor)
                logger.info(f"Logged new visitor {ip_address}")
            elif now - visitor.visited_at >= REVISIT_INTERVAL:
                visitor.visited_at = now
                visitor.user_agent = user_agent or visitor.user_agent
                visitor.total_visits += 1
                logger.debug(f"Visitor {ip_address} returned (total {visitor.total_visits})")

            db.commit()
            db.refresh(visitor)
            return visitor

        except IntegrityError:
            # A concurrent first visit from the same address inserted the row
            db.rollback()
            logger.debug(f"Visitor {ip_address} already recorded by a concurrent request")
            return self.get_by_ip(db, ip_address)

        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error logging visitor {ip_address}: {e}")
            raise

    def get_stats(self, db: Session, now: Optional[datetime] = None) -> VisitorStats:
        """Unique visitors, total visits and recent activity."""
        now = now or datetime.utcnow()
        total_visits = db.query(func.coalesce(func.sum(Visitor.total_visits), 0)).scalar()
        return VisitorStats(
            unique_visitors=self.count(db),
            total_visits=int(total_visits or 0),
            active_last_24h=db.query(Visitor)
            .filter(Visitor.visited_at >= now - timedelta(days=1))
            .count(),
            active_last_7d=db.query(Visitor)
            .filter(Visitor.visited_at >= now - timedelta(days=7))
            .count(),
        )
