"""Fixed-point shares, epochs and Merkle leaf records for revenue distribution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, TypeVar

U8_MAX = 0xFF
U16_MAX = 0xFFFF
U32_MAX = 0xFFFF_FFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF

PUBKEY_LEN = 32

#: Largest span, in epochs, used for any time-based calculation.
EPOCH_DURATION_MAX = U32_MAX


def _check_uint(name: str, value: int, maximum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")
    return value


def _check_key(name: str, key: bytes) -> bytes:
    key = bytes(key)
    if len(key) != PUBKEY_LEN:
        raise ValueError(f"{name} must be {PUBKEY_LEN} bytes, got {len(key)}")
    return key


@dataclass(frozen=True, order=True)
class DoubleZeroEpoch:
    """A DoubleZero epoch number (unsigned 64-bit)."""

    value: int = 0

    def __post_init__(self) -> None:
        _check_uint("epoch", self.value, U64_MAX)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DoubleZeroEpoch):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def as_seed(self) -> bytes:
        """The epoch as 8 little-endian bytes."""
        return self.value.to_bytes(8, "little")

    def saturating_add_duration(self, epoch_duration: int) -> DoubleZeroEpoch:
        """Advance by a 32-bit duration, capping at the largest epoch."""
        _check_uint("epoch duration", epoch_duration, EPOCH_DURATION_MAX)
        return DoubleZeroEpoch(min(self.value + epoch_duration, U64_MAX))


_S = TypeVar("_S", bound="_UnitShare")


@dataclass(frozen=True, order=True)
class _UnitShare:
    """A share of a whole, expressed as an integer numerator over a fixed maximum."""

    value: int = 0

    _max_value: ClassVar[int]
    _inner_max: ClassVar[int]

    def __post_init__(self) -> None:
        _check_uint(type(self).__name__, self.value, self._max_value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value}/{self._max_value}"

    def _same_kind(self, other: _UnitShare) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )


def _share_from_int(cls: type[_S], value: int) -> _S:
    _check_uint("value", value, U64_MAX)
    if value > cls._inner_max:
        raise ValueError("Value too large for inner type")
    if value > cls._max_value:
        raise ValueError("Value exceeds maximum allowed")
    return cls(value)


def _share_mul_scalar(share: _UnitShare, x: int) -> int:
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError("scalar must be an int")
    if x < 0:
        raise ValueError("scalar must not be negative")
    return (share.value * x) // share._max_value


def _share_checked_add(share: _S, other: _S) -> _S | None:
    share._same_kind(other)
    total = share.value + other.value
    if total > share._max_value:
        return None
    return type(share)(total)


def _share_checked_sub(share: _S, other: _S) -> _S | None:
    share._same_kind(other)
    difference = share.value - other.value
    if difference < 0:
        return None
    return type(share)(difference)


def _share_saturating_add(share: _S, other: _S) -> _S:
    share._same_kind(other)
    return type(share)(min(share.value + other.value, share._max_value))


def _share_saturating_sub(share: _S, other: _S) -> _S:
    share._same_kind(other)
    return type(share)(max(share.value - other.value, 0))


class UnitShare16(_UnitShare):
    """A 16-bit unit share with maximum value 10,000 (e.g. 420 is 4.20%)."""

    _max_value = 10_000
    _inner_max = U16_MAX

    @classmethod
    def from_int(cls, value: int) -> UnitShare16:
        """Build a share from an unsigned 64-bit integer, rejecting invalid values."""
        return _share_from_int(cls, value)

    def mul_scalar(self, x: int) -> int:
        """Apply this share to ``x``, rounding down."""
        return _share_mul_scalar(self, x)

    def checked_add(self, other: UnitShare16) -> UnitShare16 | None:
        """Sum of both shares, or None if it exceeds the maximum."""
        return _share_checked_add(self, other)

    def checked_sub(self, other: UnitShare16) -> UnitShare16 | None:
        """Difference of both shares, or None if it would be negative."""
        return _share_checked_sub(self, other)

    def saturating_add(self, other: UnitShare16) -> UnitShare16:
        """Sum of both shares, capped at the maximum."""
        return _share_saturating_add(self, other)

    def saturating_sub(self, other: UnitShare16) -> UnitShare16:
        """Difference of both shares, floored at zero."""
        return _share_saturating_sub(self, other)


class UnitShare32(_UnitShare):
    """A 32-bit unit share with maximum value 1,000,000,000 (e.g. 420,000,069 is 42.0000069%)."""

    _max_value = 1_000_000_000
    _inner_max = U32_MAX

    @classmethod
    def from_int(cls, value: int) -> UnitShare32:
        """Build a share from an unsigned 64-bit integer, rejecting invalid values."""
        return _share_from_int(cls, value)

    def mul_scalar(self, x: int) -> int:
        """Apply this share to ``x``, rounding down."""
        return _share_mul_scalar(self, x)

    def checked_add(self, other: UnitShare32) -> UnitShare32 | None:
        """Sum of both shares, or None if it exceeds the maximum."""
        return _share_checked_add(self, other)

    def checked_sub(self, other: UnitShare32) -> UnitShare32 | None:
        """Difference of both shares, or None if it would be negative."""
        return _share_checked_sub(self, other)

    def saturating_add(self, other: UnitShare32) -> UnitShare32:
        """Sum of both shares, capped at the maximum."""
        return _share_saturating_add(self, other)

    def saturating_sub(self, other: UnitShare32) -> UnitShare32:
        """Difference of both shares, floored at zero."""
        return _share_saturating_sub(self, other)


UnitShare16.MIN = UnitShare16(0)
UnitShare16.MAX = UnitShare16(UnitShare16._max_value)
UnitShare32.MIN = UnitShare32(0)
UnitShare32.MAX = UnitShare32(UnitShare32._max_value)

ValidatorFee = UnitShare16
BurnRate = UnitShare32


@dataclass(frozen=True)
class SolanaValidatorDebt:
    """The amount a validator owes for an epoch; a Merkle leaf."""

    node_id: bytes = bytes(PUBKEY_LEN)
    amount: int = 0

    LEAF_PREFIX: ClassVar[bytes] = b"solana_validator_debt"
    SIZE: ClassVar[int] = PUBKEY_LEN + 8

    def __post_init__(self) -> None:
        object.__setattr__(self, "node_id", _check_key("node_id", self.node_id))
        _check_uint("amount", self.amount, U64_MAX)

    def to_bytes(self) -> bytes:
        """Serialize as the key followed by the little-endian amount."""
        return self.node_id + self.amount.to_bytes(8, "little")

    @classmethod
    def from_bytes(cls, data: bytes) -> SolanaValidatorDebt:
        """Parse the layout written by :meth:`to_bytes`."""
        data = bytes(data)
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        return cls(data[:PUBKEY_LEN], int.from_bytes(data[PUBKEY_LEN:], "little"))


@dataclass
class RewardShare:
    """A contributor's share of rewards; a Merkle leaf.

    The last four bytes pack the economic burn rate (low 30 bits) and a
    blocked flag (bit 31).
    """

    contributor_key: bytes = bytes(PUBKEY_LEN)
    unit_share: int = 0
    remaining_bytes: bytes = field(default=bytes(4))

    LEAF_PREFIX: ClassVar[bytes] = b"reward_share"
    FLAG_IS_BLOCKED_BIT: ClassVar[int] = 31
    FLAG_IS_BLOCKED_MASK: ClassVar[int] = 1 << 31
    ECONOMIC_BURN_RATE_MASK: ClassVar[int] = 0x3FFF_FFFF
    SIZE: ClassVar[int] = PUBKEY_LEN + 4 + 4

    def __post_init__(self) -> None:
        self.contributor_key = _check_key("contributor_key", self.contributor_key)
        _check_uint("unit_share", self.unit_share, U32_MAX)
        self.remaining_bytes = bytes(self.remaining_bytes)
        if len(self.remaining_bytes) != 4:
            raise ValueError("remaining_bytes must be 4 bytes")

    @classmethod
    def create(
        cls,
        contributor_key: bytes,
        unit_share: int,
        should_block: bool,
        economic_burn_rate: int,
    ) -> RewardShare:
        """Build a reward share, rejecting rates above the unit maximum."""
        share = UnitShare32(unit_share)
        burn_rate = UnitShare32(economic_burn_rate)
        combined = burn_rate.value
        if should_block:
            combined |= cls.FLAG_IS_BLOCKED_MASK
        return cls(contributor_key, share.value, combined.to_bytes(4, "little"))

    @property
    def _combined(self) -> int:
        return int.from_bytes(self.remaining_bytes, "little")

    @_combined.setter
    def _combined(self, value: int) -> None:
        self.remaining_bytes = value.to_bytes(4, "little")

    def checked_unit_share(self) -> UnitShare32 | None:
        """The unit share if it is within range, else None."""
        if self.unit_share > UnitShare32._max_value:
            return None
        return UnitShare32(self.unit_share)

    @property
    def is_blocked(self) -> bool:
        return bool(self._combined & self.FLAG_IS_BLOCKED_MASK)

    @is_blocked.setter
    def is_blocked(self, should_block: bool) -> None:
        if should_block:
            self._combined = self._combined | self.FLAG_IS_BLOCKED_MASK
        else:
            self._combined = self._combined & ~self.FLAG_IS_BLOCKED_MASK & U32_MAX

    @property
    def economic_burn_rate(self) -> int:
        return self._combined & self.ECONOMIC_BURN_RATE_MASK

    @economic_burn_rate.setter
    def economic_burn_rate(self, rate: UnitShare32) -> None:
        if not isinstance(rate, UnitShare32):
            raise TypeError("economic burn rate must be a UnitShare32")
        cleared = self._combined & ~self.ECONOMIC_BURN_RATE_MASK & U32_MAX
        self._combined = cleared | rate.value

    def checked_economic_burn_rate(self) -> UnitShare32 | None:
        """The economic burn rate if it is within range, else None."""
        rate = self.economic_burn_rate
        if rate > UnitShare32._max_value:
            return None
        return UnitShare32(rate)

    def to_bytes(self) -> bytes:
        """Serialize as key, little-endian unit share, then the packed bytes."""
        return (
            self.contributor_key
            + self.unit_share.to_bytes(4, "little")
            + self.remaining_bytes
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> RewardShare:
        """Parse the layout written by :meth:`to_bytes`."""
        data = bytes(data)
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        return cls(
            data[:PUBKEY_LEN],
            int.from_bytes(data[PUBKEY_LEN : PUBKEY_LEN + 4], "little"),
            data[PUBKEY_LEN + 4 :],
        )


@dataclass
class ByteFlags:
    """Eight individually addressable bit flags in one byte."""

    value: int = 0

    def __post_init__(self) -> None:
        _check_uint("flags", self.value, U8_MAX)

    def __int__(self) -> int:
        return self.value

    @staticmethod
    def _check_index(index: int) -> None:
        if index < 0:
            raise ValueError("bit index must not be negative")

    def bit(self, index: int) -> bool:
        """Whether the bit is set; indices of 8 and above read as unset."""
        self._check_index(index)
        if index >= 8:
            return False
        return bool(self.value & (1 << index))

    def set_bit(self, index: int, value: bool) -> None:
        """Set or clear a bit; indices of 8 and above are ignored."""
        self._check_index(index)
        if index >= 8:
            return
        if value:
            self.value |= 1 << index
        else:
            self.value &= ~(1 << index) & U8_MAX