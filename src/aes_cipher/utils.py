"""
Utility functions for byte/state conversions, padding and hex formatting.

AES state is 4x4 bytes in column-major order:
  state[row][col] where row, col in [0..3]

Column-major mapping from 16-byte array:
  byte[0]  -> state[0][0]
  byte[1]  -> state[1][0]
  byte[2]  -> state[2][0]
  byte[3]  -> state[3][0]
  byte[4]  -> state[0][1]
  ...
  byte[15] -> state[3][3]

States are tuples of row tuples; transformations build new ones instead of
mutating.
"""

from .constants import BLOCK_SIZE

State = tuple[tuple[int, int, int, int], ...]


def bytes_to_state(data: bytes) -> State:
    """
    Convert 16 bytes to 4x4 AES state (column-major).

    Args:
        data: 16 bytes of input

    Returns:
        4x4 tuple of integers (0-255)
    """
    if len(data) != BLOCK_SIZE:
        raise ValueError(f"Expected 16 bytes, got {len(data)}")

    return tuple(
        tuple(data[col * 4 + row] for col in range(4))
        for row in range(4)
    )


def state_to_bytes(state: State) -> bytes:
    """
    Convert 4x4 AES state to 16 bytes (column-major).
    """
    return bytes(state[row][col] for col in range(4) for row in range(4))


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert hex string to bytes.

    Whitespace is ignored so grouped input like "00112233 44556677" works.
    """
    return bytes.fromhex("".join(hex_str.split()))


def bytes_to_hex(data: bytes) -> str:
    """Convert bytes to lowercase hex string."""
    return data.hex()


def state_to_hex(state: State) -> str:
    """
    Convert state to hex string (via bytes).
    """
    return bytes_to_hex(state_to_bytes(state))


def hex_to_state(hex_str: str) -> State:
    """
    Convert hex string to state.
    """
    return bytes_to_state(hex_to_bytes(hex_str))


def format_state_grid(state: State) -> str:
    """
    Format state as a readable 4x4 grid.

    Returns multi-line string like:
      2b 28 ab 09
      7e ae f7 cf
      15 d2 15 4f
      16 a6 88 3c
    """
    lines = []
    for row in range(4):
        row_hex = [f"{state[row][col]:02x}" for col in range(4)]
        lines.append("  " + " ".join(row_hex))
    return "\n".join(lines)


def format_state_words(state: State) -> str:
    """Format state as 4 space-separated 32-bit words (column-major)."""
    words = []
    for col in range(4):
        words.append("".join(f"{state[row][col]:02x}" for row in range(4)))
    return " ".join(words)


def zero_pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Extend data with zero bytes up to the next multiple of block_size.

    Data that is already aligned (including empty data) is returned as is.
    No length marker is added.
    """
    remainder = len(data) % block_size
    if remainder == 0:
        return bytes(data)
    return bytes(data) + bytes(block_size - remainder)


def split_blocks(data: bytes, block_size: int = BLOCK_SIZE) -> list[bytes]:
    """Split aligned data into consecutive blocks."""
    if len(data) % block_size:
        raise ValueError(
            f"Data length {len(data)} is not a multiple of {block_size}"
        )
    return [data[i:i + block_size] for i in range(0, len(data), block_size)]
