"""
AES round transformations (FIPS-197 Sections 5.1 and 5.3).

Each function takes a state and returns a new one. The inverse flag
selects the decryption form; add_round_key is its own inverse.
"""

from .constants import BLOCK_SIZE, INV_MIX_COLUMNS_MATRIX, MIX_COLUMNS_MATRIX, sbox_lookup
from .errors import NullStateError, RoundKeyLengthError
from .gf import gf_dot
from .utils import State


def _require_state(state: State | None, operation: str) -> State:
    if state is None:
        raise NullStateError(f"{operation} received no state")
    return state


def sub_bytes(state: State, inverse: bool = False) -> State:
    """Substitute every byte through the S-box (inverse S-box if inverse)."""
    state = _require_state(state, "SubBytes")
    return tuple(
        tuple(sbox_lookup(value, inverse) for value in row)
        for row in state
    )


def shift_rows(state: State, inverse: bool = False) -> State:
    """
    Rotate row r left by r positions (right by r if inverse).

    Row 0 is unchanged.
    """
    state = _require_state(state, "ShiftRows")
    result = []
    for r, row in enumerate(state):
        shift = -r if inverse else r
        result.append(tuple(row[(col + shift) % 4] for col in range(4)))
    return tuple(result)


def mix_columns(state: State, inverse: bool = False) -> State:
    """
    Multiply each column by the fixed MixColumns matrix over GF(2^8).
    """
    state = _require_state(state, "MixColumns")
    matrix = INV_MIX_COLUMNS_MATRIX if inverse else MIX_COLUMNS_MATRIX

    columns = []
    for col in range(4):
        column = [state[row][col] for row in range(4)]
        columns.append([gf_dot(matrix[row], column) for row in range(4)])

    return tuple(
        tuple(columns[col][row] for col in range(4))
        for row in range(4)
    )


def add_round_key(state: State, round_key: bytes) -> State:
    """
    XOR the state with a 16-byte round key.

    The key is laid out column-major like the state: key byte col*4 + row
    pairs with state[row][col].
    """
    state = _require_state(state, "AddRoundKey")
    if len(round_key) != BLOCK_SIZE:
        raise RoundKeyLengthError(
            f"Round key must be 16 bytes, got {len(round_key)}"
        )
    return tuple(
        tuple(state[row][col] ^ round_key[col * 4 + row] for col in range(4))
        for row in range(4)
    )
