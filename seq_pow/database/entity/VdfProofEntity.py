import uuid
from typing import List, Optional

from sqlalchemy import Boolean, Column, JSON, String

from ..mixins.saveable import Saveable
from ..database import get_orm_base

# Define the Base class for ORM models
Base = get_orm_base()


class VdfProofEntity(Base, Saveable):
    """Database entity for storing solved VDF instances and their proofs."""

    __tablename__ = "vdf_proofs"

    id = Column(
        String, primary_key=True, default=lambda: str(uuid.uuid4())
    )  # Unique generated string ID
    request_id = Column(String, nullable=True)  # Optional id of the request that asked for this proof
    N = Column(String, nullable=False)  # Store hex string of modulus N
    g = Column(String, nullable=False)  # Store hex string of start element g
    y = Column(String, nullable=False)  # Store hex string of output y
    t = Column(String, nullable=False)  # Store base 10 string of step count t
    proof = Column(JSON, nullable=False)  # Proof as a JSON list of hex strings
    pubkey = Column(String, nullable=True)  # Hex of the prover's VRF public key
    meets_difficulty = Column(Boolean, nullable=True)  # Evaluator verdict at solve time

    def __repr__(self):
        return f"<VdfProof(id={self.id}, request_id={self.request_id}, t={self.t}, rounds={len(self.proof)})>"

    def __init__(
        self,
        N_hex: str,
        g_hex: str,
        y_hex: str,
        t: str,
        proof: List[str],
        pubkey_hex: Optional[str] = None,
        meets_difficulty: Optional[bool] = None,
        request_id: Optional[str] = None,
    ):
        """Initialize a VDF proof entity.

        Args:
            N_hex (str): Hex string of modulus N
            g_hex (str): Hex string of start element g
            y_hex (str): Hex string of output y
            t (str): Base 10 string of step count t
            proof (List[str]): Hex strings of the midpoints, round 0 first
            pubkey_hex (Optional[str]): Hex of the VRF public key
            meets_difficulty (Optional[bool]): Evaluator verdict
            request_id (Optional[str]): Associated request id
        """
        self.id = str(uuid.uuid4())
        self.N = N_hex
        self.g = g_hex
        self.y = y_hex
        self.t = t
        self.proof = proof
        self.pubkey = pubkey_hex
        self.meets_difficulty = meets_difficulty
        self.request_id = request_id
