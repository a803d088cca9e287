"""Admin authentication and server-side sessions."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.security import generate_session_token, session_expiry
from app.models.admin import Admin, AdminSession
from app.services.base import BaseService
from app.utils.logger import logger


class AuthService(BaseService[Admin]):
    """
    Service for admin accounts and their login sessions.

    Sessions are rows in ``admin_sessions``; the cookie only carries the
    random token, so logging out or expiring a session takes effect at once.
    """

    def __init__(self):
        """Initialize auth service."""
        super().__init__(Admin)

    def get_by_email(self, db: Session, email: str) -> Optional[Admin]:
        """Find an admin by email (case-insensitive)."""
        return db.query(Admin).filter(Admin.email == email.strip().lower()).first()

    def create_admin(
        self, db: Session, email: str, password: str, name: Optional[str] = None
    ) -> Admin:
        """
        Create an admin account.

        Raises:
            ValueError: If the email is already registered
        """
        if self.get_by_email(db, email):
            raise ValueError(f"Admin already exists: {email}")

        admin = Admin(email=email, name=name, active=True)
        admin.set_password(password)
        try:
            db.add(admin)
            db.commit()
            db.refresh(admin)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating admin {email}: {e}")
            raise

        logger.info(f"Created admin {admin.email}")
        return admin

    def authenticate(self, db: Session, email: str, password: str) -> Optional[Admin]:
        """Return the admin if the credentials are valid and the account is active."""
        admin = self.get_by_email(db, email)
        if admin is None or not admin.check_password(password):
            logger.warning(f"Failed login attempt for {email}")
            return None
        return admin

    def create_session(
        self,
        db: Session,
        admin: Admin,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> AdminSession:
        """Open a new session for ``admin`` and record the login time."""
        now = datetime.utcnow()
        session = AdminSession(
            token=generate_session_token(),
            admin_id=admin.id,
            expires_at=session_expiry(now),
            ip_address=ip_address,
            user_agent=(user_agent or "")[:500] or None,
        )
        try:
            admin.last_login_at = now
            db.add(session)
            db.commit()
            db.refresh(session)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating session for admin {admin.id}: {e}")
            raise

        logger.info(f"Admin {admin.email} logged in")
        return session

    def get_session_admin(self, db: Session, token: Optional[str]) -> Optional[Admin]:
        """Admin owning a live session ``token``; expired sessions are removed."""
        if not token:
            return None

        session = db.query(AdminSession).filter(AdminSession.token == token).first()
        if session is None:
            return None

        if session.is_expired:
            self.end_session(db, token)
            return None

        admin = session.admin
        if admin is None or not admin.active:
            return None
        return admin

    def end_session(self, db: Session, token: Optional[str]) -> bool:
        """Delete the session for ``token``; True if one existed."""
        if not token:
            return False
        try:
            deleted = db.query(AdminSession).filter(AdminSession.token == token).delete()
            db.commit()
            return deleted > 0
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error ending session: {e}")
            raise

    def purge_expired_sessions(self, db: Session) -> int:
        """Delete every expired session and return how many were removed."""
        try:
            deleted = (
                db.query(AdminSession)
                .filter(AdminSession.expires_at <= datetime.utcnow())
                .delete()
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error purging expired sessions: {e}")
            raise

        if deleted:
            logger.info(f"Purged {deleted} expired admin sessions")
        return deleted
