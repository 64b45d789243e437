from radiswapV3.src.libraries.Shared import *

### @title Math library for liquidity


### @notice Add a signed liquidity delta to liquidity and revert if it overflows or underflows
### @param x The liquidity before change
### @param y The delta by which liquidity should be changed
### @return z The liquidity delta
def addDelta(x, y):
    checkInputTypes(uint128=x, int128=y)
    z = x + y
    if y < 0:
        assert z >= 0, "LS"
    else:
        assert z <= MAX_UINT128, "LA"
    return z
