import logging

from .libraries.Shared import *

from .libraries import (
    Tick,
    TickBitmap,
    Position,
)

from dataclasses import dataclass

logger = logging.getLogger(__name__)

### Tick spacing bounds enforced when a pool is created, as in UniswapV3Factory.enableFeeAmount.
### Capping the spacing keeps every word boundary tick within int24.
MAX_TICK_SPACING = 16384


@dataclass
class ModifyPositionParams:
    ## the address that owns the position
    owner: "str | int"
    ## the lower and upper tick of the position
    tickLower: int
    tickUpper: int
    ## any change in liquidity
    liquidityDelta: int


class RadiswapPool:
    def __init__(self, tickSpacing):
        checkInputTypes(int24=(tickSpacing))
        assert tickSpacing > 0 and tickSpacing < MAX_TICK_SPACING, "TS"

        self.tickSpacing = tickSpacing
        self.maxLiquidityPerTick = Tick.tickSpacingToMaxLiquidityPerTick(tickSpacing)

        ## total liquidity minted into the pool and not yet burnt
        self.liquidity = 0

        # Each pool instance owns its own mappings
        self.ticks = dict()
        self.positions = dict()
        self.tickBitmap = dict()

    ### @dev Common checks for valid tick inputs.
    def checkTicks(tickLower, tickUpper):
        checkInputTypes(int24=(tickLower, tickUpper))
        if tickLower >= tickUpper:
            raise TickRangeInvalid("TLU")
        if tickLower < MIN_TICK:
            raise TickRangeInvalid("TLM")
        if tickUpper > MAX_TICK:
            raise TickRangeInvalid("TUM")

    ### @dev Checks that both ticks of a position can be flipped in the bitmap.
    def checkTickSpacing(self, tickLower, tickUpper):
        for tick in (tickLower, tickUpper):
            if tick % self.tickSpacing != 0:
                raise InvalidTickSpacing(
                    "Tick %d is not a multiple of tick spacing %d"
                    % (tick, self.tickSpacing)
                )

    def getPosition(self, owner, tickLower, tickUpper):
        return self.positions.get(Position.getPositionKey(owner, tickLower, tickUpper))

    def getLiquidityGross(self, tick):
        checkInputTypes(int24=(tick))
        info = self.ticks.get(tick)
        return info.liquidityGross if info is not None else 0

    ## @notice Adds liquidity for the given recipient/tickLower/tickUpper position
    ## @dev Token amounts owed for the liquidity are settled by the caller, this only
    ## books the liquidity in the ticks, the bitmap and the position.
    ## @param recipient The address for which the liquidity will be created
    ## @param tickLower The lower tick of the position in which to add liquidity
    ## @param tickUpper The upper tick of the position in which to add liquidity
    ## @param amount The amount of liquidity to mint
    ## @return position The updated position
    def mint(self, recipient, tickLower, tickUpper, amount):
        checkInputTypes(
            accounts=(recipient),
            int24=(tickLower, tickUpper),
            uint128=(amount),
        )
        if amount == 0:
            raise ZeroLiquidityRequest("Zero Liquidity")
        # Positive int128 so it can be used as a liquidity delta
        assert amount <= MAX_INT128, "OF"

        position = self._modifyPosition(
            ModifyPositionParams(recipient, tickLower, tickUpper, amount)
        )

        self.liquidity += amount

        logger.debug(
            "Minted %d liquidity for %s in [%d, %d]",
            amount,
            recipient,
            tickLower,
            tickUpper,
        )
        return position

    ## @notice Burn liquidity from the owner's position
    ## @dev Ticks and positions whose liquidity returns to zero are cleared.
    ## @param owner The position's owner
    ## @param tickLower The lower tick of the position for which to burn liquidity
    ## @param tickUpper The upper tick of the position for which to burn liquidity
    ## @param amount How much liquidity to burn
    ## @return position The updated position
    def burn(self, owner, tickLower, tickUpper, amount):
        checkInputTypes(
            accounts=(owner),
            int24=(tickLower, tickUpper),
            uint128=(amount),
        )
        if amount == 0:
            raise ZeroLiquidityRequest("Zero Liquidity")

        position = self.getPosition(owner, tickLower, tickUpper)
        # Check before any update so that a failing burn doesn't create the position
        assert position is not None, "NP"
        assert position.liquidity >= amount, "LS"

        position = self._modifyPosition(
            ModifyPositionParams(owner, tickLower, tickUpper, -amount)
        )

        self.liquidity -= amount

        if position.liquidity == 0:
            del self.positions[Position.getPositionKey(owner, tickLower, tickUpper)]

        logger.debug(
            "Burnt %d liquidity for %s in [%d, %d]", amount, owner, tickLower, tickUpper
        )
        return position

    ## @dev Effect some changes to a position
    ## @param params the position details and the change to the position's liquidity to effect
    ## @return position a storage pointer referencing the position with the given owner and tick range
    def _modifyPosition(self, params):
        checkInputTypes(
            accounts=(params.owner),
            int24=(params.tickLower, params.tickUpper),
            int128=(params.liquidityDelta),
        )

        RadiswapPool.checkTicks(params.tickLower, params.tickUpper)
        self.checkTickSpacing(params.tickLower, params.tickUpper)

        # Check the tick caps up front so that either both ticks are updated or none
        if params.liquidityDelta > 0:
            for tick in (params.tickLower, params.tickUpper):
                assert (
                    self.getLiquidityGross(tick) + params.liquidityDelta
                    <= self.maxLiquidityPerTick
                ), "LO"

        return self._updatePosition(
            params.owner,
            params.tickLower,
            params.tickUpper,
            params.liquidityDelta,
        )

    ### @dev Gets and updates a position with the given liquidity delta
    ### @param owner the owner of the position
    ### @param tickLower the lower tick of the position's tick range
    ### @param tickUpper the upper tick of the position's tick range
    ### @return position A reference to the updated position
    def _updatePosition(self, owner, tickLower, tickUpper, liquidityDelta):
        checkInputTypes(
            accounts=(owner),
            int24=(tickLower, tickUpper),
            int128=(liquidityDelta),
        )

        # mint and burn reject zero amounts, so both ticks always change
        flippedLower = Tick.update(
            self.ticks, tickLower, liquidityDelta, self.maxLiquidityPerTick
        )
        flippedUpper = Tick.update(
            self.ticks, tickUpper, liquidityDelta, self.maxLiquidityPerTick
        )

        if flippedLower:
            TickBitmap.flipTick(self.tickBitmap, tickLower, self.tickSpacing)
            logger.debug("Flipped tick %d", tickLower)
        if flippedUpper:
            TickBitmap.flipTick(self.tickBitmap, tickUpper, self.tickSpacing)
            logger.debug("Flipped tick %d", tickUpper)

        # This will create a position if it doesn't exist
        position, _ = Position.get(self.positions, owner, tickLower, tickUpper)
        Position.update(position, liquidityDelta)

        ## clear any tick data that is no longer needed
        if liquidityDelta < 0:
            if flippedLower:
                Tick.clear(self.ticks, tickLower)
            if flippedUpper:
                Tick.clear(self.ticks, tickUpper)

        return position

    ### @notice Returns the next initialized tick within one bitmap word of the given tick
    ### @param tick The starting tick
    ### @param lte Search at or below the tick (True) or strictly above it (False)
    def nextInitializedTickWithinOneWord(self, tick, lte):
        return TickBitmap.nextInitializedTickWithinOneWord(
            self.tickBitmap, tick, self.tickSpacing, lte
        )

    ### @notice Returns the next initialized tick, searching word by word
    ### @dev Stops at MIN_TICK (lte) or MAX_TICK (gt) if no initialized tick is found, in which
    ### case the bound is returned as not initialized.
    def nextInitializedTick(self, tick, lte):
        checkInputTypes(int24=(tick), bool=(lte))

        while True:
            (tickNext, initialized) = self.nextInitializedTickWithinOneWord(tick, lte)
            if initialized:
                return tickNext, True
            if lte:
                if tickNext <= MIN_TICK:
                    return MIN_TICK, False
                # Continue strictly below the word just searched
                tick = tickNext - 1
            else:
                if tickNext >= MAX_TICK:
                    return MAX_TICK, False
                tick = tickNext
