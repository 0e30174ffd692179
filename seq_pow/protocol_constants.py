# protocol_constants.py

from seq_pow.mpc import MPC


# RSA-2048 challenge number, factorization unknown
RSA_2048_MODULUS = MPC.mpz(
    "25195908475657893494027183240048398571429282126204032027777137836043662020707595556264018525880784"
    "40691829064124951508218929855914917618450280848912007284499268739280728777673597141834727026189637"
    "50149718246911650776133798590957000973304597488084284017974291006424586918171951187461215151726546"
    "32282216869987549182422433637259085141865462043576798423387184774447920739934236584823824281198163"
    "81501067481045166037730605620161967625613384414360383390441495263443219011465754445417842402092461"
    "65157233507787077498171257724679629263863563732899121548314381678998850404453640235273819513786365"
    "64391212010397122822120720357"
)

# 256-bit demo inputs (previous block header hash and difficulty hash)
PREV_BLOCK_HASH = "1eeb30c7163271850b6d018e8282093ac6755a771da6267edf6c9b4fce9242ba"
TARGET_HASH = "07fb30c7163271850b6d018e8282093ac6755a771da6267edf6c9b4fce9242ba"

BENCH_STEP_COUNTS = [
    1_000, 2_000, 4_000, 8_000, 16_000, 32_000, 64_000, 128_000, 256_000,
]

CHALLENGE_BYTES = 16  # Fiat-Shamir challenge width (128 bits)
START_EXPANSION_BYTES = 16  # Extra bytes hashed past the modulus width before reduction

# Domain separation tags
FIAT_SHAMIR_TAG = b"seq-pow/fiat-shamir/v1"
START_TAG = b"seq-pow/start/v1"
STATE_TAG = b"seq-pow/state/v1"
