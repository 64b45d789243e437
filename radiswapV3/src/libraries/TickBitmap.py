from radiswapV3.src.libraries.Shared import *
from radiswapV3.src.libraries import BitMath

### @title Packed tick initialized state library
### @notice Stores a packed mapping of tick index to its initialized state
### @dev The mapping uses int16 for keys since ticks are represented as int24 and there are 256 (2^8) values per word.
### The mapping itself (self) is a dict owned by the pool. Missing words are all-zero words.


### @notice Compresses a tick by the tick spacing, rounding towards negative infinity
### @dev Python's floor division already rounds towards negative infinity, unlike Solidity's
### truncating division, so no extra decrement is needed for negative ticks.
def compress(tick, tickSpacing):
    checkInputTypes(int24=(tick, tickSpacing))
    assert tickSpacing > 0, "TS"
    return tick // tickSpacing


### @notice Computes the position in the mapping where the initialized bit for a tick lives
### @param tick The compressed tick for which to compute the position
### @return wordPos The key in the mapping containing the word in which the bit is stored
### @return bitPos The bit position in the word where the flag is stored
def position(tick):
    checkInputTypes(int24=(tick))
    wordPos = tick >> 8
    # Floor modulo, always in [0, 255]
    bitPos = tick % WORD_SIZE
    return wordPos, bitPos


def getWord(self, wordPos):
    checkInputTypes(dict=self, int16=wordPos)
    return self.get(wordPos, 0)


### @notice Flips the initialized state for a given tick from false to true, or vice versa
### @param self The mapping in which to flip the tick
### @param tick The tick to flip
### @param tickSpacing The spacing between usable ticks
def flipTick(self, tick, tickSpacing):
    checkInputTypes(dict=self, int24=(tick, tickSpacing))
    compressed = compress(tick, tickSpacing)
    if tick % tickSpacing != 0:
        ## ensure that the tick is spaced
        raise InvalidTickSpacing(
            "Tick %d is not a multiple of tick spacing %d" % (tick, tickSpacing)
        )

    wordPos, bitPos = position(compressed)
    mask = 1 << bitPos
    self[wordPos] = getWord(self, wordPos) ^ mask


### @notice Returns whether the bit for a given tick is set
def isInitialized(self, tick, tickSpacing):
    checkInputTypes(dict=self, int24=(tick, tickSpacing))
    wordPos, bitPos = position(compress(tick, tickSpacing))
    return (getWord(self, wordPos) >> bitPos) & 1 == 1


### @notice Returns the next initialized tick contained in the same word (or adjacent word) as the tick that is either
### to the left (less than or equal to) or right (greater than) of the given tick
### @param self The mapping in which to compute the next initialized tick
### @param tick The starting tick
### @param tickSpacing The spacing between usable ticks
### @param lte Whether to search for the next initialized tick to the left (less than or equal to the starting tick)
### @return nextTick The next initialized or uninitialized tick up to 256 ticks away from the current tick
### @return initialized Whether the next tick is initialized, as the function only searches within up to 256 ticks
def nextInitializedTickWithinOneWord(self, tick, tickSpacing, lte):
    checkInputTypes(dict=self, int24=(tick, tickSpacing), bool=lte)
    ## only usable ticks are searched, which keeps the word of compressed + 1 within int16
    if tick < MIN_TICK:
        raise TickRangeInvalid("TLM")
    if tick > MAX_TICK:
        raise TickRangeInvalid("TUM")
    compressed = compress(tick, tickSpacing)

    if lte:
        wordPos, bitPos = position(compressed)
        ## all the 1s at or to the right of the current bitPos
        mask = (1 << bitPos) - 1 + (1 << bitPos)
        masked = getWord(self, wordPos) & mask

        ## if there are no initialized ticks to the right of or at the current tick, return rightmost in the word
        initialized = masked != 0
        ## overflow/underflow is possible, but prevented externally by limiting both tickSpacing and tick
        nextTick = (
            (compressed - (bitPos - BitMath.mostSignificantBit(masked))) * tickSpacing
            if initialized
            else (compressed - bitPos) * tickSpacing
        )
    else:
        ## start from the word of the next tick, since the current tick state doesn't matter
        wordPos, bitPos = position(compressed + 1)
        ## all the 1s at or to the left of the bitPos
        mask = MAX_UINT256 ^ ((1 << bitPos) - 1)
        masked = getWord(self, wordPos) & mask

        ## if there are no initialized ticks to the left of the current tick, return leftmost in the word
        initialized = masked != 0
        ## overflow/underflow is possible, but prevented externally by limiting both tickSpacing and tick
        nextTick = (
            (compressed + 1 + (BitMath.leastSignificantBit(masked) - bitPos))
            * tickSpacing
            if initialized
            else (compressed + 1 + (MAX_UINT8 - bitPos)) * tickSpacing
        )

    return nextTick, initialized
