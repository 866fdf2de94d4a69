"""Unsigned Integer Type Specification."""

from __future__ import annotations

from typing import Any, ClassVar, Literal, SupportsIndex

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


class BaseUint(int):
    """A base class for custom unsigned integer types that inherits from `int`."""

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: SupportsIndex) -> Self:
        """
        Create and validate a new Uint instance.

        Only genuine integers are accepted: booleans, floats and strings are
        rejected instead of being silently coerced.

        Raises:
            TypeError: If `value` is not an integer.
            OverflowError: If `value` is outside the allowed range [0, 2**BITS - 1].
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int for {cls.__name__}, got {type(value).__name__}")
        int_value = int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def max_value(cls) -> int:
        """Largest value representable by this type."""
        return 2**cls.BITS - 1

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            """Pydantic validation function that calls the class constructor."""
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.int_schema(ge=0, lt=2**cls.BITS),
            python_schema=core_schema.no_info_plain_validator_function(validate),  # type: ignore[operator]
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    def to_bytes(
        self,
        length: SupportsIndex | None = None,
        byteorder: Literal["little", "big"] = "little",
        *,
        signed: bool = False,
    ) -> bytes:
        """
        Return an array of bytes representing the integer.

        Defaults to little-endian and a fixed length based on `BITS`.
        """
        actual_length = self.BITS // 8 if length is None else int(length)
        return super().to_bytes(length=actual_length, byteorder=byteorder, signed=signed)

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """Parse exactly `BITS // 8` little-endian bytes."""
        if len(data) != cls.BITS // 8:
            raise ValueError(f"{cls.__name__} expects exactly {cls.BITS // 8} bytes, got {len(data)}")
        return cls(int.from_bytes(data, "little"))

    def _raise_type_error(self, other: Any, op_symbol: str) -> None:
        """Helper to raise a consistent TypeError."""
        raise TypeError(
            f"Unsupported operand type(s) for {op_symbol}: "
            f"'{type(self).__name__}' and '{type(other).__name__}'"
        )

    def __xor__(self, other: Any) -> Self:
        """Handle the bitwise XOR operator (`^`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "^")
        return type(self)(super().__xor__(other))

    def __lshift__(self, other: Any) -> Self:
        """
        Handle the left bit-shift operator (`<<`).

        Shifting past `BITS` raises instead of wrapping around.
        """
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "<<")
        return type(self)(super().__lshift__(other))

    def __eq__(self, other: object) -> bool:
        """Handle the equality operator (`==`)"""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "==")
        return super().__eq__(other)

    def __ne__(self, other: object) -> bool:
        """Handle the inequality operator (`!=`)"""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "!=")
        return super().__ne__(other)

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        """Return the informal, user-friendly string representation."""
        return str(int(self))

    def __hash__(self) -> int:
        """Return a distinct hash for the object."""
        return hash((type(self), int(self)))


class Uint32(BaseUint):
    """A type representing a 32-bit unsigned integer (uint32)."""

    BITS = 32
