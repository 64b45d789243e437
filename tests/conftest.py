import pytest

from radiswapV3.src.RadiswapPool import RadiswapPool

# Default fee tier tick spacings
TICK_SPACINGS = [1, 10, 60, 200]


@pytest.fixture
def pool():
    return RadiswapPool(60)


@pytest.fixture(params=TICK_SPACINGS)
def poolSpacings(request):
    return RadiswapPool(request.param)


@pytest.fixture
def tickBitmap():
    return dict()


@pytest.fixture
def ticks():
    return dict()


@pytest.fixture
def positions():
    return dict()
