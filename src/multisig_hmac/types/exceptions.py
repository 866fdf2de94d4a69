"""
Exception hierarchy for the multisig HMAC scheme.

Only usage faults are exceptions. A signature that fails to verify is an
ordinary `False` result and never raises.
"""

from __future__ import annotations

from typing import Sequence


class MultisigHmacError(Exception):
    """
    Base exception for all multisig HMAC errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class MultisigHmacUsageError(MultisigHmacError, ValueError):
    """
    Base class for input-validation faults.

    These signal a programming error on the caller's side. The operation
    is aborted and no plausible-looking result is returned.
    """


class UnknownSuiteError(MultisigHmacUsageError):
    """
    Raised when a hash suite name is not one of the supported suites.

    Attributes:
        name: The requested suite name.
        supported: The names that would have been accepted.
    """

    def __init__(self, name: str, supported: Sequence[str]) -> None:
        self.name = name
        self.supported = tuple(supported)
        super().__init__(f"Unknown hash suite '{name}'. Supported suites: {list(self.supported)}")


class SignerIndexError(MultisigHmacUsageError):
    """
    Raised when a signer index cannot be addressed by a 32-bit bitfield.

    Attributes:
        value: The offending index.
        max_index: The largest valid index (inclusive).
    """

    def __init__(self, value: object, *, max_index: int) -> None:
        self.value = value
        self.max_index = max_index
        super().__init__(f"Signer index {value!r} is out of range (valid range: [0, {max_index}])")


class ByteLengthError(MultisigHmacUsageError):
    """
    Raised when a byte string does not have the length the active suite requires.

    Attributes:
        type_name: What was being checked (e.g. "Key.secret").
        expected: The required length.
        actual: The length received.
    """

    def __init__(self, type_name: str, *, expected: int, actual: int) -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{type_name} requires exactly {expected} bytes, got {actual}")


class ThresholdError(MultisigHmacUsageError):
    """
    Raised when a threshold is not a positive uint32.

    Attributes:
        value: The offending threshold.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Threshold must be a positive 32-bit integer, got {value!r}")


class BitfieldError(MultisigHmacUsageError):
    """
    Raised when a signer bitfield is malformed.

    Attributes:
        value: The offending bitfield.
        detail: What is wrong with it.
    """

    def __init__(self, value: object, detail: str) -> None:
        self.value = value
        self.detail = detail
        super().__init__(f"Invalid bitfield {value!r}: {detail}")


class KeysetTooSmallError(MultisigHmacUsageError):
    """
    Raised when a verifier is handed fewer keys than the signature addresses.

    Attributes:
        required: The minimum number of keys needed.
        actual: The number of keys supplied.
    """

    def __init__(self, *, required: int, actual: int) -> None:
        self.required = required
        self.actual = actual
        super().__init__(f"Signature addresses {required} key slots, but only {actual} keys given")


class EmptyCombinationError(MultisigHmacUsageError):
    """Raised when asked to combine an empty collection of partial signatures."""

    def __init__(self) -> None:
        super().__init__("Cannot combine an empty sequence of partial signatures")


class CancellationError(MultisigHmacUsageError):
    """
    Raised when XOR-folding partial signatures cancelled contributions.

    This happens when two partial signatures share a signer index. Both the
    honest case and a crafted cancelling pair end up here.

    Attributes:
        expected: Number of partial signatures combined.
        actual: Number of signer bits left in the combined bitfield.
    """

    def __init__(self, *, expected: int, actual: int, detail: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        msg = (
            f"Combining {expected} partial signatures left {actual} signer bits; "
            "duplicate signer indices cancelled out"
        )
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
