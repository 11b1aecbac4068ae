"""
Candidate process service - evaluation associations between candidates and processes
"""
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session, joinedload
import structlog

from app.candidate_process.schemas import CandidateProcessUpdate
from app.core.exceptions import CandidateBatchError, NotFoundError
from app.models.candidate import Candidate
from app.models.candidate_process import CandidateProcess

logger = structlog.get_logger()


class CandidateProcessService:
    """Service for candidate-process associations"""

    def list_for_process(self, db: Session, process_id: int) -> List[CandidateProcess]:
        associations = (
            db.query(CandidateProcess)
            .options(
                joinedload(CandidateProcess.candidates),
                joinedload(CandidateProcess.process),
            )
            .filter(CandidateProcess.process_id == process_id)
            .order_by(CandidateProcess.id)
            .all()
        )
        if not associations:
            raise NotFoundError("Candidate processes for process", str(process_id))
        return associations

    def _get_or_404(self, db: Session, association_id: int) -> CandidateProcess:
        association = db.get(CandidateProcess, association_id)
        if association is None:
            raise NotFoundError("Candidate-Process association", str(association_id))
        return association

    def update(
        self,
        db: Session,
        association_id: int,
        changes: CandidateProcessUpdate,
    ) -> Tuple[CandidateProcess, Optional[List[CandidateProcess]]]:
        """
        Update evaluation fields and optionally add candidates to the process.

        The field update and every addition share one transaction: if any
        referenced candidate is missing the whole request is rolled back.
        Returns the updated association and the added ones (None when no
        candidate_ids were given).
        """
        association = self._get_or_404(db, association_id)

        fields = changes.model_dump(exclude_unset=True, exclude={"candidate_ids"})
        for name, value in fields.items():
            setattr(association, name, value)

        added: Optional[List[CandidateProcess]] = None
        if changes.candidate_ids:
            added = []
            for candidate_id in changes.candidate_ids:
                if db.get(Candidate, candidate_id) is None:
                    db.rollback()
                    logger.warning(
                        "candidate_batch_rolled_back",
                        association_id=association_id,
                        missing_candidate_id=candidate_id,
                    )
                    raise CandidateBatchError(candidate_id)
                new_association = CandidateProcess(
                    candidate_id=candidate_id,
                    process_id=association.process_id,
                )
                db.add(new_association)
                added.append(new_association)

        db.commit()
        db.refresh(association)
        for new_association in added or []:
            db.refresh(new_association)

        logger.info(
            "candidate_process_updated",
            association_id=association_id,
            fields=sorted(fields),
            added=len(added or []),
        )
        return association, added

    def delete(self, db: Session, association_id: int) -> None:
        association = self._get_or_404(db, association_id)
        db.delete(association)
        db.commit()
        logger.info("candidate_process_deleted", association_id=association_id)


candidate_process_service = CandidateProcessService()
