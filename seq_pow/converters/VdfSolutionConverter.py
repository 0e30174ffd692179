"""Converter for solved VDF instances."""

from typing import Any, Dict, Optional

from ..database.entity.VdfProofEntity import VdfProofEntity
from ..errors import InvalidParameterError
from ..group import GroupParameters
from ..mpc import MPC
from ..vdf.VdfSolution import VdfSolution
from ..vrf.VrfPublicKey import VrfPublicKey


class VdfSolutionConverter:
    """Converter between VdfSolution, hex dictionaries and VdfProofEntity.

    Integers are written as lowercase hex without the 0x prefix; the step
    count is written in base 10.
    """

    @staticmethod
    def to_dict(
        solution: VdfSolution,
        pubkey: Optional[VrfPublicKey] = None,
        meets_difficulty: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Convert a VdfSolution to a JSON-serializable dictionary.

        Args:
            solution (VdfSolution): The solution to convert
            pubkey (Optional[VrfPublicKey]): Public key to embed
            meets_difficulty (Optional[bool]): Evaluator verdict to embed

        Returns:
            Dict[str, Any]: The serialized solution
        """
        data: Dict[str, Any] = {
            "N": MPC.to_hex(solution.get_N()),
            "g": MPC.to_hex(solution.get_g()),
            "y": MPC.to_hex(solution.get_y()),
            "t": str(solution.get_t()),
            "proof": [MPC.to_hex(mu) for mu in solution.get_proof()],
        }
        if pubkey is not None:
            data["pubkey"] = pubkey.to_hex()
        if meets_difficulty is not None:
            data["meets_difficulty"] = meets_difficulty
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> VdfSolution:
        """Convert a dictionary produced by to_dict back to a VdfSolution.

        Args:
            data (Dict[str, Any]): The serialized solution

        Returns:
            VdfSolution: The decoded solution

        Raises:
            InvalidParameterError: If a field is missing or malformed
        """
        if not isinstance(data, dict) or not isinstance(data.get("proof"), (list, tuple)):
            raise InvalidParameterError("Malformed VDF solution: proof must be a list of hex strings")
        try:
            return VdfSolution(
                GroupParameters(MPC.from_hex(data["N"])),
                MPC.from_hex(data["g"]),
                MPC.from_hex(data["y"]),
                int(str(data["t"]), 10),
                [MPC.from_hex(mu) for mu in data["proof"]],
            )
        except InvalidParameterError:
            raise
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise InvalidParameterError(f"Malformed VDF solution: {e!r}") from e

    @staticmethod
    def pubkey_from_dict(data: Dict[str, Any]) -> Optional[VrfPublicKey]:
        """Read the embedded public key, if any."""
        digits = data.get("pubkey")
        return None if digits is None else VrfPublicKey.from_hex(digits)

    @staticmethod
    def to_entity(
        solution: VdfSolution,
        pubkey: Optional[VrfPublicKey] = None,
        meets_difficulty: Optional[bool] = None,
        request_id: Optional[str] = None,
    ) -> VdfProofEntity:
        """Convert a VdfSolution to a VdfProofEntity.

        Args:
            solution (VdfSolution): The solution to convert
            pubkey (Optional[VrfPublicKey]): Public key to store
            meets_difficulty (Optional[bool]): Evaluator verdict to store
            request_id (Optional[str]): Associated request id

        Returns:
            VdfProofEntity: The database entity
        """
        data = VdfSolutionConverter.to_dict(solution)
        return VdfProofEntity(
            N_hex=data["N"],
            g_hex=data["g"],
            y_hex=data["y"],
            t=data["t"],
            proof=data["proof"],
            pubkey_hex=None if pubkey is None else pubkey.to_hex(),
            meets_difficulty=meets_difficulty,
            request_id=request_id,
        )

    @staticmethod
    def from_entity(entity: VdfProofEntity) -> VdfSolution:
        """Convert a VdfProofEntity back to a VdfSolution.

        Args:
            entity (VdfProofEntity): The stored entity

        Returns:
            VdfSolution: The decoded solution
        """
        return VdfSolutionConverter.from_dict(
            {"N": entity.N, "g": entity.g, "y": entity.y, "t": entity.t, "proof": entity.proof}
        )
