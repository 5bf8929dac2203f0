from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_admin
from app.models.principal import Principal
from app.schemas.tenant_schemas import MigrationRequest, MigrationResult
from app.services.backfill_service import TenantBackfillService

router = APIRouter()


@router.post("/migrate", response_model=MigrationResult)
async def migrate_data_to_company(
    request: MigrationRequest,
    response: Response,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """
    Assign legacy records without a company to `company_id` and link
    `user_email` to that company.

    - **Requires administrator access**
    - Not atomic across collections; re-running only touches records
      that are still unassigned
    """
    service = TenantBackfillService(db)
    result = service.migrate(request)
    if not result.success:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return result
