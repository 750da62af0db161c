"""
GF(2^8) arithmetic for MixColumns.

Field: GF(2)[x] / (x^8 + x^4 + x^3 + x + 1), i.e. reduction polynomial 0x11B.
"""

# Low byte of the reduction polynomial (the x^8 term is shifted out)
REDUCTION = 0x1b


def xtime(a: int) -> int:
    """Multiply by x in GF(2^8)."""
    return ((a << 1) ^ REDUCTION) & 0xff if a & 0x80 else (a << 1) & 0xff


def gf_multiply(a: int, b: int) -> int:
    """
    Multiply two bytes in GF(2^8) (shift-and-add).

    Args:
        a: First operand (0-255)
        b: Second operand (0-255)

    Returns:
        Product a * b reduced modulo 0x11B
    """
    a &= 0xff
    b &= 0xff
    product = 0
    for _ in range(8):
        if b & 1:
            product ^= a
        a = xtime(a)
        b >>= 1
    return product


def gf_dot(row: tuple[int, ...], column: list[int] | tuple[int, ...]) -> int:
    """Dot product of a matrix row and a column, summed with XOR."""
    result = 0
    for coeff, value in zip(row, column):
        result ^= gf_multiply(coeff, value)
    return result
