"""
AES-128 block cipher: runs the round transformations over one block.

Round schedules (NR = 10):

Encrypt:
- Round 0: AddRoundKey
- Rounds 1-9: SubBytes, ShiftRows, MixColumns, AddRoundKey
- Round 10: SubBytes, ShiftRows, AddRoundKey (no MixColumns)

Decrypt:
- Round 10: AddRoundKey
- Rounds 9-1: InvShiftRows, InvSubBytes, AddRoundKey, InvMixColumns
- Round 0: InvShiftRows, InvSubBytes, AddRoundKey
"""

from enum import Enum

from .constants import BLOCK_SIZE, EXPANDED_KEY_SIZE, NR
from .errors import NullStateError, RoundKeyLengthError
from .key_schedule import round_key
from .trace import TraceRecorder
from .transforms import add_round_key, mix_columns, shift_rows, sub_bytes
from .utils import State, bytes_to_state, state_to_bytes


class Direction(Enum):
    """Which way a block is run through the cipher."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


_FULL_ROUND = ["SubBytes", "ShiftRows", "MixColumns", "AddRoundKey"]
_INV_FULL_ROUND = ["InvShiftRows", "InvSubBytes", "AddRoundKey", "InvMixColumns"]

# (round, operations); the round number also selects the round key
ENCRYPT_SCHEDULE: list[tuple[int, list[str]]] = (
    [(0, ["AddRoundKey"])]
    + [(r, _FULL_ROUND) for r in range(1, NR)]
    + [(NR, ["SubBytes", "ShiftRows", "AddRoundKey"])]  # final round: no MixColumns
)

DECRYPT_SCHEDULE: list[tuple[int, list[str]]] = (
    [(NR, ["AddRoundKey"])]
    + [(r, _INV_FULL_ROUND) for r in range(NR - 1, 0, -1)]
    + [(0, ["InvShiftRows", "InvSubBytes", "AddRoundKey"])]
)

SCHEDULES = {
    Direction.ENCRYPT: ENCRYPT_SCHEDULE,
    Direction.DECRYPT: DECRYPT_SCHEDULE,
}


def _apply(op: str, state: State, key: bytes) -> State:
    if op == "SubBytes":
        return sub_bytes(state)
    elif op == "InvSubBytes":
        return sub_bytes(state, inverse=True)
    elif op == "ShiftRows":
        return shift_rows(state)
    elif op == "InvShiftRows":
        return shift_rows(state, inverse=True)
    elif op == "MixColumns":
        return mix_columns(state)
    elif op == "InvMixColumns":
        return mix_columns(state, inverse=True)
    elif op == "AddRoundKey":
        return add_round_key(state, key)
    raise ValueError(f"Unknown operation: {op}")


def cipher_block(
    state: State,
    expanded_key: bytes,
    direction: Direction,
    tracer: TraceRecorder | None = None,
) -> State:
    """
    Run one state through all rounds in the given direction.

    Args:
        state: Input state (4x4, column-major)
        expanded_key: 176-byte key schedule from expand_key()
        direction: Direction.ENCRYPT or Direction.DECRYPT
        tracer: Optional trace recorder, fed after every operation

    Returns:
        Output state

    Raises:
        NullStateError: If state is None
        RoundKeyLengthError: If expanded_key is not 176 bytes
    """
    if state is None:
        raise NullStateError("cipher_block received no state")
    if len(expanded_key) != EXPANDED_KEY_SIZE:
        raise RoundKeyLengthError(
            f"Expanded key must be {EXPANDED_KEY_SIZE} bytes, got {len(expanded_key)}"
        )

    if tracer:
        tracer.record(round=SCHEDULES[direction][0][0], operation="Input",
                      direction=direction.value, state=state)

    for round_num, operations in SCHEDULES[direction]:
        key = round_key(expanded_key, round_num)
        for op in operations:
            state = _apply(op, state, key)
            if tracer:
                entry = {"round": round_num, "operation": op,
                         "direction": direction.value, "state": state}
                if op == "AddRoundKey":
                    entry["round_key"] = key
                tracer.record(**entry)

    return state


def encrypt_block(block: bytes, expanded_key: bytes,
                  tracer: TraceRecorder | None = None) -> bytes:
    """
    Encrypt a single 16-byte block with an expanded key.
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Block must be 16 bytes, got {len(block)}")
    state = cipher_block(bytes_to_state(block), expanded_key, Direction.ENCRYPT, tracer)
    return state_to_bytes(state)


def decrypt_block(block: bytes, expanded_key: bytes,
                  tracer: TraceRecorder | None = None) -> bytes:
    """
    Decrypt a single 16-byte block with an expanded key.
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Block must be 16 bytes, got {len(block)}")
    state = cipher_block(bytes_to_state(block), expanded_key, Direction.DECRYPT, tracer)
    return state_to_bytes(state)
