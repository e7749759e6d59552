import pytest

from fee_ratio.core import (
    U64_MAX,
    AmountRange,
    Ceil,
    Floor,
    Ratio,
    RatioDomainError,
    UintWidth,
)

from _reference import SMALL_RATIOS, brute_preimage, exact_ceil, exact_floor


# -----------------------------
# apply()
# -----------------------------

def test_apply_third_floor_and_ceil(third):
    print("[apply 1/3] 10 -> floor 3, ceil 4")
    assert Floor(third).apply(10) == 3
    assert Ceil(third).apply(10) == 4
    assert Floor(third).apply(9) == 3
    assert Ceil(third).apply(9) == 3


@pytest.mark.parametrize("n,d", [(0, 0), (0, 7), (7, 0)])
def test_apply_zero_ratio_is_zero(n, d, rounding_cls):
    r = rounding_cls(Ratio(n, d))
    assert r.apply(0) == 0
    assert r.apply(12345) == 0
    assert r.apply(U64_MAX) == 0


@pytest.mark.parametrize("n,d", SMALL_RATIOS)
def test_apply_matches_exact_rounding(n, d):
    r = Ratio(n, d)
    for x in list(range(0, 60)) + [U64_MAX // 11, U64_MAX // 5]:
        assert Floor(r).apply(x) == exact_floor(x, r)
        assert Ceil(r).apply(x) == exact_ceil(x, r)


def test_apply_full_width_product_no_precision_loss():
    print("[apply wide] u64::MAX * (u64::MAX-1)/u64::MAX -> u64::MAX-1 exactly")
    r = Ratio(U64_MAX - 1, U64_MAX)
    assert Floor(r).apply(U64_MAX) == U64_MAX - 1
    assert Ceil(r).apply(U64_MAX) == U64_MAX - 1
    assert Floor(r).apply(U64_MAX - 1) == U64_MAX - 2
    assert Ceil(r).apply(U64_MAX - 1) == U64_MAX - 1


def test_apply_overflow_returns_none():
    print("[apply overflow] 2/1 of u64::MAX overflows -> None; largest fitting input ok")
    r = Ratio(2, 1)
    assert Floor(r).apply(U64_MAX) is None
    assert Ceil(r).apply(U64_MAX) is None
    assert Floor(r).apply(U64_MAX // 2) == U64_MAX - 1
    assert Floor(r).apply(U64_MAX // 2 + 1) is None


def test_apply_ceil_overflow_by_rounding_only():
    print("[apply ceil boundary] ceil can overflow where floor does not")
    # 7x/4 == u64::MAX + 3/4 for x = (4*u64::MAX + 3) / 7
    r = Ratio(7, 4)
    assert (4 * U64_MAX + 3) % 7 == 0
    x = (4 * U64_MAX + 3) // 7
    assert Floor(r).apply(x) == U64_MAX
    assert Ceil(r).apply(x) is None


@pytest.mark.parametrize("x", [-1, U64_MAX + 1])
def test_apply_rejects_out_of_domain_amounts(x, rounding_cls):
    with pytest.raises(RatioDomainError):
        rounding_cls(Ratio(1, 2)).apply(x)


def test_apply_mixed_widths(u8_u16_ratio):
    # 200/60000 == 1/300
    assert Floor(u8_u16_ratio).apply(900) == 3
    assert Ceil(u8_u16_ratio).apply(901) == 4


# -----------------------------
# reverse(): zero ratio
# -----------------------------

@pytest.mark.parametrize("n,d", [(0, 0), (0, 7), (7, 0)])
def test_reverse_zero_ratio(n, d, rounding_cls):
    print("[reverse zero-ratio] 0 -> full u64 range; anything else -> None")
    r = rounding_cls(Ratio(n, d))
    assert r.reverse(0) == AmountRange(0, U64_MAX)
    assert r.reverse(1) is None
    assert r.reverse(U64_MAX) is None


# -----------------------------
# reverse(): floor
# -----------------------------

def test_floor_reverse_third(third):
    print("[floor reverse 1/3] y=3 -> [9, 11]")
    assert Floor(third).reverse(3) == AmountRange(9, 11)
    assert Floor(third).reverse(0) == AmountRange(0, 2)


def test_floor_reverse_ratio_above_one_without_preimage():
    print("[floor reverse 2/1] odd y has no preimage -> None")
    r = Floor(Ratio(2, 1))
    assert r.reverse(3) is None
    assert r.reverse(4) == AmountRange(2, 2)


def test_floor_reverse_max_saturates():
    print("[floor reverse top] ranges reaching u64::MAX end there, never beyond")
    r = Floor(Ratio(1, 2))
    y = U64_MAX // 2
    rng = r.reverse(y)
    assert rng == AmountRange(2 * y, U64_MAX)
    # u64::MAX is divisible by 3: the computed max is u64::MAX + 2
    assert Floor(Ratio(1, 3)).reverse(U64_MAX // 3) == AmountRange(U64_MAX, U64_MAX)


def test_floor_reverse_min_overflow_is_none():
    print("[floor reverse overflow] 1/2 with y=u64::MAX -> min = 2*u64::MAX overflows -> None")
    assert Floor(Ratio(1, 2)).reverse(U64_MAX) is None


def test_floor_reverse_one_is_identity():
    r = Floor(Ratio(5, 5))
    assert r.reverse(0) == AmountRange(0, 0)
    assert r.reverse(42) == AmountRange(42, 42)
    assert r.reverse(U64_MAX) == AmountRange(U64_MAX, U64_MAX)


# -----------------------------
# reverse(): ceil
# -----------------------------

def test_ceil_reverse_third(third):
    print("[ceil reverse 1/3] y=4 -> [10, 12]")
    assert Ceil(third).reverse(4) == AmountRange(10, 12)
    assert Ceil(third).reverse(1) == AmountRange(1, 3)


@pytest.mark.parametrize("n,d", [(1, 3), (7, 3), (1, U64_MAX), (U64_MAX, 1), (5, 5)])
def test_ceil_reverse_zero_output_nonzero_ratio_is_singleton_zero(n, d):
    print("[ceil reverse y=0] nonzero ratio: only x=0 rounds up to 0 -> [0, 0]")
    r = Ceil(Ratio(n, d))
    assert r.reverse(0) == AmountRange(0, 0)
    assert r.apply(0) == 0
    assert r.apply(1) != 0


def test_ceil_reverse_ratio_above_one_without_preimage():
    r = Ceil(Ratio(2, 1))
    assert r.reverse(3) is None
    assert r.reverse(4) == AmountRange(2, 2)


def test_ceil_reverse_max_saturates():
    r = Ceil(Ratio(1, 2))
    y = (U64_MAX + 1) // 2
    # ceil(x/2) == 2**63 for x in [2**64 - 1, 2**64], capped at u64::MAX
    assert r.reverse(y) == AmountRange(U64_MAX, U64_MAX)


def test_ceil_reverse_min_overflow_is_none():
    assert Ceil(Ratio(1, 2)).reverse(U64_MAX) is None


def test_ceil_reverse_wide_ratio():
    r = Ceil(Ratio(1, U64_MAX))
    assert r.reverse(1) == AmountRange(1, U64_MAX)


# -----------------------------
# reverse(): brute-force agreement and boundary exactness
# -----------------------------

@pytest.mark.parametrize("n,d", SMALL_RATIOS)
def test_reverse_matches_brute_force(n, d, rounding_cls):
    r = rounding_cls(Ratio(n, d))
    for y in range(0, 25):
        rng = r.reverse(y)
        got = None if rng is None else rng.as_tuple()
        assert got == brute_preimage(r, y, scan_max=200), f"{r} y={y}"


@pytest.mark.parametrize("n,d", SMALL_RATIOS + [(U64_MAX, U64_MAX - 1), (3, U64_MAX)])
def test_reverse_boundaries_are_exact(n, d, rounding_cls):
    r = rounding_cls(Ratio(n, d))
    for x in [0, 1, 2, 17, 1_000_003, U64_MAX // 7]:
        y = r.apply(x)
        if y is None:
            continue
        rng = r.reverse(y)
        assert rng is not None and x in rng
        assert r.apply(rng.start) == y
        assert r.apply(rng.end) == y
        if rng.start > 0:
            assert r.apply(rng.start - 1) != y
        if rng.end < U64_MAX:
            assert r.apply(rng.end + 1) != y


def test_reverse_rejects_out_of_domain_output(rounding_cls):
    with pytest.raises(RatioDomainError):
        rounding_cls(Ratio(1, 2)).reverse(-1)


def test_reverse_narrow_widths():
    r = Ratio(255, 1, UintWidth.U8, UintWidth.U8)
    assert Floor(r).reverse(255 * 3) == AmountRange(3, 3)
    assert Ceil(r).reverse(255 * 3) == AmountRange(3, 3)
    assert Ceil(r).reverse(255 * 3 - 1) is None


# -----------------------------
# Floor / ceil duality
# -----------------------------

@pytest.mark.parametrize("n,d", SMALL_RATIOS + [(U64_MAX, 3), (1, U64_MAX)])
def test_ceil_minus_floor_is_zero_or_one(n, d):
    r = Ratio(n, d)
    for x in [0, 1, 2, 3, 99, 12_345_678, U64_MAX // 4, U64_MAX]:
        f, c = Floor(r).apply(x), Ceil(r).apply(x)
        if f is None or c is None:
            continue
        assert c - f in (0, 1)


def test_floor_and_ceil_are_distinct_values():
    r = Ratio(1, 3)
    assert Floor(r) != Ceil(r)
    assert Floor(r) == Floor(Ratio(2, 6))
    assert str(Floor(r)) == "Floor(1/3)"
    assert str(Ceil(r)) == "Ceil(1/3)"
