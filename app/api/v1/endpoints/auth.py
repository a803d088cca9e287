"""Authentication endpoints."""

from fastapi import APIRouter, HTTPException, Request, Response, status

from app.config import settings
from app.core.rate_limit import get_client_ip, limiter
from app.dependencies import DbSession, CurrentAdmin, SessionToken
from app.schemas.auth import AdminResponse, LoginRequest, LoginResponse
from app.schemas.common import Message
from app.services.auth_service import AuthService

router = APIRouter()
auth_service = AuthService()


@router.post("/login", response_model=LoginResponse)
@limiter.limit("10/minute")
async def login(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    db: DbSession,
) -> LoginResponse:
    """Authenticate an admin and set the session cookie."""
    admin = auth_service.authenticate(db, credentials.email, credentials.password)
    if admin is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    session = auth_service.create_session(
        db,
        admin,
        ip_address=get_client_ip(request),
        user_agent=request.headers.get("user-agent"),
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.token,
        max_age=settings.session_expire_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )

    return LoginResponse(
        admin=AdminResponse.model_validate(admin),
        expires_at=session.expires_at,
    )


@router.post("/logout", response_model=Message)
async def logout(response: Response, token: SessionToken, db: DbSession) -> Message:
    """End the current session and clear the cookie."""
    auth_service.end_session(db, token)
    response.delete_cookie(key=settings.session_cookie_name, path="/")
    return Message(message="Successfully logged out")


@router.get("/me", response_model=AdminResponse)
async def get_current_admin_info(current_admin: CurrentAdmin) -> AdminResponse:
    """Get the logged-in admin."""
    return AdminResponse.model_validate(current_admin)
