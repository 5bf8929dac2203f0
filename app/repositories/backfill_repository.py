"""Data access for the company backfill: unscoped-record selection and stamping."""

from sqlalchemy import update
from sqlalchemy.orm import Session

from app.models.base import Base


class BackfillRepository:
    """Repository for company_id backfill across tenant-scoped models"""

    def __init__(self, db: Session):
        self.db = db

    def get_unassigned_ids(self, model: type[Base]) -> list[str]:
        """
        Get ids of records whose company_id is unset.

        Args:
            model: Tenant-scoped model class (has id and company_id columns)

        Returns:
            List of record ids, in id order
        """
        rows = (
            self.db.query(model.id)
            .filter(model.company_id.is_(None))
            .order_by(model.id)
            .all()
        )
        return [row[0] for row in rows]

    def assign_company(self, model: type[Base], record_ids: list[str], company_id: str) -> int:
        """
        Stamp company_id onto the given records and commit them as one batch.

        Only records still unassigned are touched, so a record scoped by
        someone else since it was selected keeps its company.

        Returns:
            Number of records updated
        """
        result = self.db.execute(
            update(model)
            .where(model.id.in_(record_ids), model.company_id.is_(None))
            .values(company_id=company_id)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return result.rowcount
