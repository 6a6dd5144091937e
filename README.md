# revdist

Small, dependency-free value types for revenue distribution accounting,
all in the module `revdist.shares`:

- `DoubleZeroEpoch`: an unsigned 64-bit epoch number. It compares equal to
  plain integers, has an 8-byte little-endian seed form (`as_seed()`), and
  advances by a 32-bit duration with `saturating_add_duration()`, capping at
  the largest 64-bit value.
- `UnitShare16` and `UnitShare32`: bounded fixed-point fractions. A
  `UnitShare16` runs from 0 to 10,000 (420 is 4.20%); a `UnitShare32` runs
  from 0 to 1,000,000,000. Each has `MIN` and `MAX`, `from_int()`,
  `checked_add()` / `checked_sub()` (returning `None` when the result leaves
  the valid range), `saturating_add()` / `saturating_sub()`, and
  `mul_scalar()`, which scales an integer by the share, rounding down.
  `ValidatorFee` and `BurnRate` are aliases for `UnitShare16` and
  `UnitShare32`.
- `SolanaValidatorDebt` and `RewardShare`: fixed-layout records used as
  Merkle leaves, with `to_bytes()` / `from_bytes()` and a `LEAF_PREFIX`.
  A `RewardShare` packs an economic burn rate (low 30 bits) and a "blocked"
  flag (bit 31) into its trailing four bytes; both are exposed as the
  `economic_burn_rate` and `is_blocked` properties.
- `ByteFlags`: one byte of individually addressable bit flags. Indices of 8
  and above read as unset and are ignored when set.

## Installation

```
pip install revdist
```

## Usage

```python
from revdist.shares import (
    ByteFlags,
    DoubleZeroEpoch,
    RewardShare,
    UnitShare16,
    UnitShare32,
)

fee = UnitShare16(500)          # 5%
print(fee)                      # 500/10000
print(fee.mul_scalar(1_000))    # 50

half = UnitShare32(500_000_000)
print(half.checked_add(UnitShare32(600_000_000)))     # None
print(half.saturating_add(UnitShare32(600_000_000)))  # 1000000000/1000000000

share = UnitShare32.from_int(250_000_000)             # raises ValueError if out of range

epoch = DoubleZeroEpoch(1)
print(epoch.saturating_add_duration(3))  # 4
print(epoch.as_seed())                   # b'\x01\x00\x00\x00\x00\x00\x00\x00'

reward = RewardShare.create(bytes(32), 400_000_000, False, 100_000_000)
print(reward.checked_unit_share())          # 400000000/1000000000
print(reward.checked_economic_burn_rate())  # 100000000/1000000000
reward.is_blocked = True
reward.economic_burn_rate = UnitShare32(200_000_000)
data = reward.to_bytes()
assert RewardShare.from_bytes(data) == reward

flags = ByteFlags(0)
flags.set_bit(3, True)
print(flags.bit(3))                      # True
```

Values outside a type's range raise `ValueError` when the value is built;
values of the wrong type raise `TypeError`. The checked operations return
`None` instead of raising.

## What it does not do

This package holds only the value types. It does not compute Merkle roots
or proofs, keep any accounts or storage, process payments or distributions,
or provide a command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```