from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.exceptions import ValidationException
from app.database import get_db
from app.dependencies import get_current_user
from app.models.principal import Principal
from app.repositories.company_repository import CompanyRepository
from app.repositories.user_profile_repository import UserProfileRepository
from app.schemas.tenant_schemas import BootstrapRequest, BootstrapResult, ProfileResponse
from app.services.bootstrap_service import TenantBootstrapService

router = APIRouter()


@router.post("/complete-signup", response_model=BootstrapResult)
async def complete_signup(
    response: Response,
    principal: Principal = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Seed a company for the authenticated user.

    - Safe to call repeatedly: a user who already has a company gets
      `created: false` and nothing is written
    - The company is named after the user's display name, or email
    """
    if not principal.email:
        raise ValidationException("Token has no email claim; cannot complete signup")

    service = TenantBootstrapService(db)
    result = service.bootstrap(
        BootstrapRequest(
            user_id=principal.id,
            email=principal.email,
            display_name=principal.display_name,
        )
    )
    if not result.success:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return result


@router.get("/me", response_model=ProfileResponse)
async def get_me(principal: Principal = Depends(get_current_user), db: Session = Depends(get_db)):
    """Get the caller's identity and company link (company fields are null before signup)"""
    profile = UserProfileRepository(db).get_by_id(principal.id)
    company_id = profile.company_id if profile else None
    company = CompanyRepository(db).get_by_id(company_id) if company_id else None
    return ProfileResponse(
        user_id=principal.id,
        email=principal.email,
        display_name=principal.display_name,
        company_id=company_id,
        company_name=company.name if company else None,
    )
