from radiswapV3.src.libraries.Shared import *
from radiswapV3.src.libraries import LiquidityMath

### @title Position
### @notice Positions represent an owner address' liquidity between a lower and upper tick boundary


def getPositionKey(owner, tickLower, tickUpper):
    checkInputTypes(account=owner, int24=(tickLower, tickUpper))
    return (owner, tickLower, tickUpper)


### @notice Returns the Info struct of a position, given an owner and position boundaries
### @param self The mapping containing all user positions
### @param owner The address of the position owner
### @param tickLower The lower tick boundary of the position
### @param tickUpper The upper tick boundary of the position
### @return position The position info struct of the given owners' position
### @return created Whether the position has just been created
def get(self, owner, tickLower, tickUpper):
    checkInputTypes(dict=self)

    # Need to handle non-existing positions in Python
    key = getPositionKey(owner, tickLower, tickUpper)
    created = not self.__contains__(key)
    if created:
        self[key] = PositionInfo(0)
    return self[key], created


### @notice Credits accumulated liquidity to a user's position
### @param self The individual position to update
### @param liquidityDelta The change in pool liquidity as a result of the position update
def update(self, liquidityDelta):
    checkInputTypes(int128=(liquidityDelta))

    if liquidityDelta == 0:
        assert self.liquidity > 0, "NP"  ## disallow pokes for 0 liquidity positions
        liquidityNext = self.liquidity
    else:
        liquidityNext = LiquidityMath.addDelta(self.liquidity, liquidityDelta)

    ## update the position
    self.liquidity = liquidityNext
