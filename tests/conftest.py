from __future__ import annotations

import pytest

# Import project primitives
from fee_ratio.core import Ceil, CeilFee, Floor, FloorFee, Ratio, UintWidth


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def third() -> Ratio:
    return Ratio(1, 3)


@pytest.fixture()
def ceil_third_fee() -> CeilFee:
    return CeilFee.new(Ratio(1, 3))


@pytest.fixture()
def floor_third_fee() -> FloorFee:
    return FloorFee.new(Ratio(1, 3))


@pytest.fixture()
def u8_u16_ratio() -> Ratio:
    return Ratio(200, 60_000, UintWidth.U8, UintWidth.U16)


@pytest.fixture(params=[Floor, Ceil], ids=["floor", "ceil"])
def rounding_cls(request):
    return request.param
