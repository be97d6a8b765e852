import pytest

from volray.vector import Vec, add_fixed, add_weighted, blend, mulhi


def test_components_by_name():
    v = Vec(1, 2, 3, 4)
    assert (v.x, v.y, v.z, v.w) == (1, 2, 3, 4)


def test_missing_component_raises():
    with pytest.raises(AttributeError):
        Vec(1, 2).z
    with pytest.raises(IndexError):
        Vec(1, 2)[2]


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Vec(1, 2, 3, 4, 5)
    with pytest.raises(ValueError):
        Vec()


def test_add_sub_round_trip():
    a = Vec(1, -2, 3)
    b = Vec(7, 11, -13)
    assert (a + b) - b == a


def test_mul_commutes():
    a = Vec(1.5, 2.0, -3.0, 4.0)
    b = Vec(2.0, 0.5, 1.0, -1.0)
    assert a * b == b * a


def test_mixed_sizes_keep_tail():
    result = Vec(1, 2, 3) + Vec(10, 20)
    assert result.z == 3
    assert len(result) == 3


def test_incompatible_sizes_raise():
    with pytest.raises(ValueError):
        Vec(1, 2) + Vec(1, 2, 3, 4)


def test_integer_division_truncates():
    assert Vec(-7, 7) / 2 == Vec(-3, 3)


def test_scalar_shift_inverse_of_multiply():
    v = Vec(4, 8, 12)
    assert (v >> 2) * 4 == v


def test_less_than_all_components():
    assert Vec(1, 2) < Vec(2, 3)
    assert not (Vec(1, 5) < Vec(2, 3))


def test_dot_matches_sum_of_products():
    a = Vec(1, 2, 3)
    b = Vec(4, -5, 6)
    assert a.dot(b) == sum(a * b)


def test_dot_size_mismatch_raises():
    with pytest.raises(ValueError):
        Vec(1, 2).dot(Vec(1, 2, 3))


def test_prod_single_component():
    assert Vec(7).prod() == 7


def test_prod_eight_raises():
    with pytest.raises(ValueError):
        Vec(*range(8)).prod()


def test_extract_low_high_partition():
    v = Vec(*range(8))
    assert tuple(v.extract_low()) + tuple(v.extract_high()) == tuple(v)


def test_extract_needs_eight():
    with pytest.raises(ValueError):
        Vec(1, 2, 3, 4).extract_low()


def test_resize_shrink_and_grow():
    v = Vec(1, 2, 3, 4)
    assert tuple(v.resize(3)) == (1, 2, 3)
    grown = Vec(5, 6).resize(4)
    assert tuple(grown[:2]) == (5, 6)
    assert tuple(grown[2:]) == (0, 0)


def test_round_half_away_from_zero():
    assert Vec(2.5, -2.5).round_to_int() == Vec(3, -3)


def test_round_keeps_whole_numbers():
    assert Vec(1.0, -4.0, 9.0).round_to_int() == Vec(1, -4, 9)


def test_format_ints_and_floats():
    assert Vec(1, 2, 3).format() == "(1 2 3)"
    assert Vec(0.5).format() == "(0.500000)"


def test_mulhi_unsigned_half():
    assert mulhi(0x10000, 0x10000, False) == 1
    assert mulhi(1000, 0x80000000, False) == 1000 >> 1


def test_mulhi_zero():
    assert mulhi(0, 12345) == 0


def test_mulhi_vector():
    v = Vec(0x10000, 0)
    assert mulhi(v, 0x10000, False) == Vec(mulhi(0x10000, 0x10000, False), 0)


def test_blend_extremes():
    left = Vec(1.0, 2.0, 3.0)
    right = Vec(-4.0, 5.0, 6.5)
    assert blend(left, right, 1.0) == left
    assert blend(left, right, 0.0) == right


def test_add_weighted_identity():
    left = Vec(1.5, 2.5)
    right = Vec(9.0, 9.0)
    assert add_weighted(left, right, 1, 0) == left


def test_add_fixed_symmetry():
    left = Vec(0x10000, 0x20000, 0x30000)
    right = Vec(0x40000, 0x50000, 0x60000)
    m = 0x12345678
    assert add_fixed(left, right, m, 0) == add_fixed(right, left, 0, m)