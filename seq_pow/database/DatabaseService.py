from typing import List, Optional

from .database import session_scope
from .entity.VdfProofEntity import VdfProofEntity
from .mixins.saveable import Saveable


class DatabaseService:
    """Batch writes and lookups for stored proofs."""

    @staticmethod
    def save_many(instances: List[Saveable]) -> None:
        """
        Save several instances in a single transaction; either all rows land or none do.

        Args:
            instances: List of Saveable instances to save
        """
        with session_scope() as session:
            session.add_all(instances)

    @staticmethod
    def find_proof(proof_id: Optional[str] = None, request_id: Optional[str] = None) -> Optional[VdfProofEntity]:
        """
        Look up a stored proof by its id, or by the request id it was solved for.

        Args:
            proof_id: Primary key of the proof row
            request_id: Request id given at solve time; the first match is returned

        Returns:
            The entity, or None if nothing matches
        """
        if proof_id is None and request_id is None:
            raise ValueError("Either proof_id or request_id is required")
        with session_scope() as session:
            query = session.query(VdfProofEntity)
            if proof_id is not None:
                query = query.filter_by(id=proof_id)
            if request_id is not None:
                query = query.filter_by(request_id=request_id)
            return query.first()
