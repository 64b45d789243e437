from dataclasses import dataclass

# ------------------ Constants ------------------ #

### The minimum tick that may be used by a position. Same bound as in UniswapV3's TickMath.
MIN_TICK = -887272
### The maximum tick that may be used by a position - symmetric to MIN_TICK
MAX_TICK = -MIN_TICK

MAX_UINT8 = 2**8 - 1
MAX_UINT128 = 2**128 - 1
MAX_UINT256 = 2**256 - 1

MIN_INT16 = -(2**15)
MAX_INT16 = 2**15 - 1
MIN_INT24 = -(2**23)
MAX_INT24 = 2**23 - 1
MIN_INT128 = -(2**127)
MAX_INT128 = 2**127 - 1

# Width of a bitmap word and number of compressed ticks covered by one word
WORD_SIZE = 256


# ------------------ Error kinds ------------------ #


class RadiswapError(Exception):
    pass


## Tick is not a multiple of the pool's tick spacing
class InvalidTickSpacing(RadiswapError, ValueError):
    pass


## tickLower >= tickUpper or a tick outside [MIN_TICK, MAX_TICK]
class TickRangeInvalid(RadiswapError, ValueError):
    pass


## Minting or burning zero liquidity
class ZeroLiquidityRequest(RadiswapError, ValueError):
    pass


## MSB/LSB of zero is undefined. Reaching this means a caller broke an invariant.
class ZeroInput(RadiswapError, AssertionError):
    pass


# ------------------ Input type checks ------------------ #

# Python ints are unbounded, so every value entering the libraries is checked against
# the width it would have in the original contract.


def checkInt(value, minValue, maxValue):
    assert type(value) == int, "Not an integer"
    assert value >= minValue, "UF"
    assert value <= maxValue, "OF"


def checkUInt128(number):
    checkInt(number, 0, MAX_UINT128)


def checkUInt256(number):
    checkInt(number, 0, MAX_UINT256)


def checkInt16(number):
    checkInt(number, MIN_INT16, MAX_INT16)


def checkInt24(number):
    checkInt(number, MIN_INT24, MAX_INT24)


def checkInt128(number):
    checkInt(number, MIN_INT128, MAX_INT128)


def checkBool(value):
    assert type(value) == bool, "Not a boolean"


def checkDict(value):
    assert isinstance(value, dict), "Not a dict"


# Owners are identified by an address-like value (string or integer)
def checkAccount(value):
    assert type(value) in (str, int), "Not an account"


_TYPE_CHECKS = {
    "uint128": checkUInt128,
    "uint256": checkUInt256,
    "int16": checkInt16,
    "int24": checkInt24,
    "int128": checkInt128,
    "bool": checkBool,
    "dict": checkDict,
    "account": checkAccount,
    "accounts": checkAccount,
}


### @notice Checks each keyword's value(s) against the type named by the keyword.
### @dev A single value or a tuple of values can be passed per type,
### e.g. checkInputTypes(int24=(tickLower, tickUpper), uint128=amount)
def checkInputTypes(**kwargs):
    for typeName, values in kwargs.items():
        check = _TYPE_CHECKS[typeName]
        if not isinstance(values, tuple):
            values = (values,)
        for value in values:
            check(value)


# ------------------ Shared dataclasses ------------------ #


@dataclass
class TickInfo:
    ## the total position liquidity that references this tick
    liquidityGross: int
    ## true iff liquidityGross != 0. Kept alongside liquidityGross and always recomputed with it.
    initialized: bool


@dataclass
class PositionInfo:
    ## the amount of liquidity owned by this position
    liquidity: int


# ------------------ Shared utility functions ------------------ #


def insertUninitializedTicksToMapping(mapping, keys):
    for key in keys:
        mapping[key] = TickInfo(0, False)
