from radiswapV3.src.libraries.Shared import *
from radiswapV3.src.libraries import LiquidityMath

### @title Tick
### @notice Contains functions for managing tick processes and relevant calculations


### @notice Derives max liquidity per tick from given tick spacing
### @dev Executed within the pool constructor
### @param tickSpacing The amount of required tick separation, realized in multiples of `tickSpacing`
###     e.g., a tickSpacing of 3 requires ticks to be initialized every 3rd tick i.e., ..., -6, -3, 0, 3, 6, ...
### @return The max liquidity per tick
def tickSpacingToMaxLiquidityPerTick(tickSpacing):
    checkInputTypes(int24=(tickSpacing))
    # Integer ceil/floor so that the bounds stay exact
    minTick = -(-MIN_TICK // tickSpacing) * tickSpacing
    maxTick = (MAX_TICK // tickSpacing) * tickSpacing
    numTicks = ((maxTick - minTick) // tickSpacing) + 1
    return MAX_UINT128 // numTicks


### @notice Updates a tick and returns true if the tick was flipped from initialized to uninitialized, or vice versa
### @param self The mapping containing all tick information for initialized ticks
### @param tick The tick that will be updated
### @param liquidityDelta A new amount of liquidity to be added (subtracted) when tick is crossed from left to right (right to left)
### @param maxLiquidity The maximum liquidity allocation for a single tick
### @return flipped Whether the tick was flipped from initialized to uninitialized, or vice versa
def update(self, tick, liquidityDelta, maxLiquidity):
    checkInputTypes(
        dict=self,
        int24=(tick),
        int128=(liquidityDelta),
        uint128=maxLiquidity,
    )

    # Tick might not exist - create it
    if not self.__contains__(tick):
        insertUninitializedTicksToMapping(self, [tick])

    info = self[tick]

    liquidityGrossBefore = info.liquidityGross
    liquidityGrossAfter = LiquidityMath.addDelta(liquidityGrossBefore, liquidityDelta)

    assert liquidityGrossAfter <= maxLiquidity, "LO"

    flipped = (liquidityGrossAfter == 0) != (liquidityGrossBefore == 0)

    # Both fields are written together so that they never disagree
    info.liquidityGross = liquidityGrossAfter
    info.initialized = liquidityGrossAfter != 0

    return flipped


### @notice Clears tick data
### @param self The mapping containing all initialized tick information for initialized ticks
### @param tick The tick that will be cleared
def clear(self, tick):
    checkInputTypes(dict=self, int24=(tick))
    del self[tick]
