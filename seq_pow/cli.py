"""Command line tool for solving, proving and verifying sequential squaring VDFs."""

import argparse
import json
import logging
import sys
import time
from typing import List, Optional, Tuple

from .converters import VdfSolutionConverter
from .database import DatabaseService, initialize_database
from .errors import InvalidParameterError
from .group import GroupParameters
from .mpc import MPC
from .protocol_constants import BENCH_STEP_COUNTS, PREV_BLOCK_HASH, RSA_2048_MODULUS, TARGET_HASH
from .seed import SeedDerivation
from .utils import configure_logging
from .vdf import Evaluator, ProofGenerator, ProofVerifier, VdfSolution
from .vrf import VrfKeyPair, VrfPublicKey

logger = logging.getLogger("seq_pow.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="seq-pow",
        description="Sequential squaring VDF with Pietrzak halving proofs.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: SEQ_POW_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    solve = subparsers.add_parser("solve", help="Evaluate the VDF and print the solution with its proof as JSON")
    solve.add_argument("t", type=int, help="The number of sequential squarings")
    solve.add_argument("--seed", default=PREV_BLOCK_HASH, help="Seed hash (hex), reduced mod N")
    solve.add_argument("--target", default=TARGET_HASH, help="Difficulty target (hex), reduced mod N")
    solve.add_argument("--modulus", default=None, help="Modulus N (hex, default RSA-2048)")
    solve.add_argument("--pubkey", default=None, help="VRF public key (hex, default: fresh key)")
    solve.add_argument("--output", default=None, help="Write the JSON here instead of stdout")
    solve.add_argument("--save", action="store_true", help="Also store the solution in the configured database")
    solve.add_argument("--request-id", default=None, help="Request id stored with a saved solution")

    verify = subparsers.add_parser("verify", help="Verify a JSON solution produced by solve")
    verify.add_argument("path", nargs="?", default=None, help="Path to the JSON file, or - for stdin")
    verify.add_argument("--target", default=TARGET_HASH, help="Difficulty target (hex), reduced mod N")
    verify.add_argument("--proof-id", default=None, help="Verify a stored solution by its id")
    verify.add_argument("--request-id", default=None, help="Verify a stored solution by its request id")
    verify.add_argument("--pubkey", default=None, help="VRF public key (hex, default: the one stored with the solution)")

    bench = subparsers.add_parser("bench", help="Time solve, prove and verify over increasing step counts")
    bench.add_argument("--steps", type=int, nargs="+", default=BENCH_STEP_COUNTS, help="Step counts to time")
    return parser.parse_args(argv)


def _group(modulus_hex: Optional[str]) -> GroupParameters:
    if modulus_hex is None:
        return GroupParameters(RSA_2048_MODULUS)
    return GroupParameters.from_hex(modulus_hex)


def _solve(args: argparse.Namespace) -> int:
    group = _group(args.modulus)
    seed = group.reduce(MPC.from_hex(args.seed))
    target = group.reduce(MPC.from_hex(args.target))
    pubkey = VrfPublicKey.from_hex(args.pubkey) if args.pubkey else VrfKeyPair.keygen()[1]

    g = SeedDerivation.derive_start(group, pubkey, seed)
    start_time = time.time()
    y, meets_difficulty = Evaluator.evaluate(group, g, args.t, pubkey, target)
    logger.info("Evaluated %d squarings in %.4f seconds", args.t, time.time() - start_time)

    start_time = time.time()
    proof = ProofGenerator.generate_proof(group, g, y, args.t)
    logger.info("Generated %d-round proof in %.4f seconds", len(proof), time.time() - start_time)

    solution = VdfSolution(group, g, y, args.t, proof)
    if args.save:
        initialize_database()
        entity = VdfSolutionConverter.to_entity(solution, pubkey, meets_difficulty, args.request_id)
        entity.save()
        logger.info("Saved solution %s", entity.id)

    text = json.dumps(VdfSolutionConverter.to_dict(solution, pubkey, meets_difficulty), indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
    else:
        print(text)
    return 0


def _load_solution(args: argparse.Namespace) -> Tuple[VdfSolution, Optional[VrfPublicKey]]:
    """Read the solution to verify from the database or from a JSON file."""
    if args.proof_id or args.request_id:
        initialize_database()
        entity = DatabaseService.find_proof(proof_id=args.proof_id, request_id=args.request_id)
        if entity is None:
            raise InvalidParameterError("No stored solution matches the given id")
        pubkey = None if entity.pubkey is None else VrfPublicKey.from_hex(entity.pubkey)
        return VdfSolutionConverter.from_entity(entity), pubkey

    if args.path is None:
        raise InvalidParameterError("A JSON path, --proof-id or --request-id is required")
    if args.path == "-":
        data = json.load(sys.stdin)
    else:
        with open(args.path, "r", encoding="utf-8") as f:
            data = json.load(f)
    return VdfSolutionConverter.from_dict(data), VdfSolutionConverter.pubkey_from_dict(data)


def _verify(args: argparse.Namespace) -> int:
    solution, stored_pubkey = _load_solution(args)
    pubkey = VrfPublicKey.from_hex(args.pubkey) if args.pubkey else stored_pubkey
    if pubkey is None:
        raise InvalidParameterError("A public key is required to verify")
    # The target is a public parameter and is never taken from the solution
    target = solution.get_group().reduce(MPC.from_hex(args.target))

    start_time = time.time()
    result = ProofVerifier.verify(
        solution.get_group(),
        solution.get_g(),
        solution.get_y(),
        solution.get_t(),
        solution.get_proof(),
        pubkey,
        target,
    )
    logger.info("Verification took %.4f seconds", time.time() - start_time)
    print(f"proof valid: {result.proof_valid}")
    print(f"meets difficulty: {result.meets_difficulty}")
    print("Valid" if result.accepted else "Invalid")
    return 0 if result.accepted else 1


def _bench(args: argparse.Namespace) -> int:
    group = GroupParameters(RSA_2048_MODULUS)
    seed = group.reduce(MPC.from_hex(PREV_BLOCK_HASH))
    target = group.reduce(MPC.from_hex(TARGET_HASH))
    print(f"seed:\t\t0x{MPC.to_hex(seed):0>64}")
    print(f"target:\t\t0x{MPC.to_hex(target):0>64}")
    print()

    _, pubkey = VrfKeyPair.keygen()
    g = SeedDerivation.derive_start(group, pubkey, seed)

    for t in args.steps:
        start_time = time.time()
        y, _ = Evaluator.evaluate(group, g, t, pubkey, target)
        solve_time = time.time() - start_time

        start_time = time.time()
        proof = ProofGenerator.generate_proof(group, g, y, t)
        prove_time = time.time() - start_time

        # Transcript gate only; the demo target is not expected to be met
        start_time = time.time()
        valid = ProofVerifier.verify_transcript(group, g, y, t, proof)
        verify_time = time.time() - start_time

        print(
            f"num_steps {t:>9}: solve {solve_time:.4f}s  prove {prove_time:.4f}s  "
            f"verify {verify_time:.4f}s  rounds {len(proof)}  {'ok' if valid else 'FAILED'}"
        )
        if not valid:
            return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool."""
    args = parse_args(argv)
    configure_logging(args.log_level)
    handlers = {"solve": _solve, "verify": _verify, "bench": _bench}
    try:
        return handlers[args.command](args)
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
