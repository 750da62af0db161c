"""
Error taxonomy for the AES-128 core.

Every failure is a local precondition violation on fixed-size data. The
exception carries an ErrorCode so callers that prefer an explicit result
(see modes.try_encrypt / modes.try_decrypt) can report it without string
matching.
"""

from enum import Enum


class ErrorCode(Enum):
    """Kinds of failure reported by the cipher core."""

    KEY_LENGTH_INVALID = "KeyLengthInvalid"
    WORD_LENGTH_INVALID = "WordLengthInvalid"
    ROUND_KEY_LENGTH_MISMATCH = "RoundKeyLengthMismatch"
    NULL_STATE = "NullState"
    UNKNOWN = "Unknown"


class AESError(ValueError):
    """Base class for cipher core errors."""

    code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class KeyLengthError(AESError):
    """Key is not exactly 16 bytes."""

    code = ErrorCode.KEY_LENGTH_INVALID


class WordLengthError(AESError):
    """Key-schedule word is not exactly 4 bytes."""

    code = ErrorCode.WORD_LENGTH_INVALID


class RoundKeyLengthError(AESError):
    """Round key (or expanded key) does not match the state size."""

    code = ErrorCode.ROUND_KEY_LENGTH_MISMATCH


class NullStateError(AESError):
    """A transformation received no state."""

    code = ErrorCode.NULL_STATE
