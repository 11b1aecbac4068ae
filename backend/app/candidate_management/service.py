"""
Candidate management service - engagement creation and listing
"""
from typing import List
from sqlalchemy.orm import Session, joinedload
import structlog

from app.candidate_management.lifecycle import DisengagementScheduler, derive_status, utcnow
from app.candidate_management.schemas import CandidateManagementCreate
from app.core.exceptions import ValidationError
from app.core.validators import is_blank, parse_datetime, parse_rate
from app.models.candidate_management import CandidateManagement, EngagementStatus
from app.models.company import Management

logger = structlog.get_logger()


class CandidateManagementService:
    """Service for assigning candidates to engagements"""

    def list_for_company(self, db: Session, company_id: int) -> List[CandidateManagement]:
        """All engagement records of a company, candidate joined in"""
        records = (
            db.query(CandidateManagement)
            .join(CandidateManagement.management)
            .filter(Management.company_id == company_id)
            .options(joinedload(CandidateManagement.candidates))
            .order_by(CandidateManagement.id)
            .all()
        )
        logger.info("candidate_management_listed", company_id=company_id, count=len(records))
        return records

    def create(
        self,
        db: Session,
        payload: CandidateManagementCreate,
        scheduler: DisengagementScheduler,
    ) -> CandidateManagement:
        """
        Validate, derive the status, persist, then arm the disengagement job.

        Nothing is written when validation fails. The job is armed only for
        ACTIVE records whose end date lies in the future, and is not awaited.
        """
        if is_blank(payload.rate) or is_blank(payload.position):
            raise ValidationError("Rate and position are required fields")
        rate = parse_rate(payload.rate)
        if rate == 0:
            raise ValidationError("Rate and position are required fields", details={"field": "rate"})

        if payload.candidate_id is None or payload.management_id is None:
            raise ValidationError("candidate_id and management_id are required fields")

        start_date = parse_datetime(payload.start_date, "start_date")
        if start_date is None:
            raise ValidationError("start_date is required", details={"field": "start_date"})
        end_date = parse_datetime(payload.end_date, "end_date")

        status = derive_status(end_date)

        record = CandidateManagement(
            candidate_id=payload.candidate_id,
            management_id=payload.management_id,
            status=status.value,
            start_date=start_date,
            end_date=end_date,
            position=payload.position,
            rate=rate,
        )

        db.add(record)
        db.commit()
        db.refresh(record)

        logger.info(
            "candidate_management_created",
            record_id=record.id,
            candidate_id=record.candidate_id,
            management_id=record.management_id,
            status=record.status,
        )

        if end_date is not None and status == EngagementStatus.ACTIVE:
            scheduler.schedule(record.id, end_date, now=utcnow())

        return record


candidate_management_service = CandidateManagementService()
