from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from app.config import settings
from app.core.security import extract_claims
from app.core.exceptions import UnauthorizedException, ForbiddenException
from app.database import get_db
from app.repositories.principal_repository import PrincipalRepository
from app.repositories.user_profile_repository import UserProfileRepository
from app.models.principal import Principal
from app.models.tenant_context import TenantContext

security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security), db: Session = Depends(get_db)
) -> Principal:
    """
    FastAPI dependency to validate JWT and get/create the principal.

    Flow:
    1. Extract token from Authorization: Bearer <token>
    2. Validate JWT using shared SECRET_KEY
    3. Extract user id from 'sub', plus 'email' / 'name' if present
    4. Get or auto-create the Principal record, refreshing email/name
    5. Return Principal object for use in endpoints

    Raises:
        HTTPException 401: If token missing, invalid or expired
    """
    try:
        if credentials is None:
            raise UnauthorizedException("Not authenticated")

        user_id, email, display_name = extract_claims(credentials.credentials)
        return PrincipalRepository(db).sync_from_claims(user_id, email, display_name)

    except UnauthorizedException as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_tenant_context(
    principal: Principal = Depends(get_current_user), db: Session = Depends(get_db)
) -> TenantContext:
    """
    Resolve the caller's company through their user profile.

    Raises:
        ForbiddenException: If the caller has not completed signup
    """
    profile = UserProfileRepository(db).get_by_id(principal.id)
    if profile is None or not profile.company_id:
        raise ForbiddenException("No company linked to this user. Complete signup first.")
    return TenantContext(principal=principal, profile=profile)


async def require_admin(principal: Principal = Depends(get_current_user)) -> Principal:
    """
    Only principals whose email is listed in ADMIN_EMAILS pass.

    Raises:
        ForbiddenException: If the caller is not an administrator
    """
    if not principal.email or principal.email.lower() not in settings.admin_emails_list:
        raise ForbiddenException("Administrator access required")
    return principal
