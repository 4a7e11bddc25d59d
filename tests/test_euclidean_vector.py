import pytest

from coursekit.euclidean_vector import EuclideanVector, EuclideanVectorError


def ev(*values):
    return EuclideanVector.from_iterable(values)


def test_default_constructor_with_size():
    v = EuclideanVector(3)
    assert list(v) == [0, 0, 0]
    assert v.dimensions == 3


def test_default_constructor_without_size():
    v = EuclideanVector()
    assert v[0] == 0
    assert v.dimensions == 1
    assert len(v) == 1


def test_regular_constructor():
    v = EuclideanVector(3, 5)
    assert [v[2], v[1], v[0]] == [5, 5, 5]
    assert v.dimensions == 3


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        EuclideanVector(-1)


def test_iterable_constructor():
    v = EuclideanVector.from_iterable([1, 2, 3])
    assert v.dimensions == 3
    assert [v[0], v[1], v[2]] == [1, 2, 3]


def test_copy_keeps_original():
    og = EuclideanVector(3, 3)
    c = og.copy()
    assert list(c) == [3, 3, 3]
    assert list(og) == [3, 3, 3]
    c[0] = 7
    assert og[0] == 3


def test_move_empties_original():
    og = EuclideanVector(3, 3)
    moved = og.move()
    assert list(moved) == [3, 3, 3]
    assert moved.dimensions == 3
    assert og.dimensions == 0
    assert str(og) == "[]"


def test_subscript_reads():
    v = ev(1, 2, 3)
    assert (v[0], v[1], v[2]) == (1, 2, 3)


def test_subscript_out_of_range():
    v = ev(1, 2, 3)
    with pytest.raises(IndexError):
        v[3]
    with pytest.raises(IndexError):
        v[-1] = 4
    assert list(v) == [1, 2, 3]
    assert v.dimensions == 3


def test_str():
    assert str(ev(1, 2, 3)) == "[1 2 3]"
    assert str(ev(0.5, 1.5)) == "[0.5 1.5]"


def test_addition():
    s = ev(1, 2, 3) + ev(2, 3, 4)
    assert list(s) == [3, 5, 7]
    assert s.dimensions == 3


def test_subtraction():
    d = ev(1, 2, 3) - ev(2, 3, 4)
    assert list(d) == [-1, -1, -1]
    assert d.dimensions == 3


def test_in_place_add_and_subtract():
    v = ev(1, 2, 3)
    original = v
    v += ev(2, 3, 4)
    assert v is original
    assert list(v) == [3, 5, 7]
    v -= ev(1, 1, 1)
    assert list(v) == [2, 4, 6]


def test_in_place_scalar_multiplication():
    v = ev(1, 2, 3)
    v *= 2
    assert list(v) == [2, 4, 6]


def test_in_place_scalar_division():
    v = ev(1, 2, 3)
    v /= 2
    assert list(v) == [0.5, 1, 1.5]


def test_multiply_then_divide_round_trip():
    v = EuclideanVector(3, 3.0)
    v *= 3
    assert str(v) == "[9 9 9]"
    v /= 3
    assert str(v) == "[3 3 3]"


def test_to_list():
    v = ev(1, 2, 3)
    lst = v.to_list()
    assert lst == [1, 2, 3]
    lst[0] = 100
    assert v[0] == 1


def test_at_reads():
    v = ev(1, 2, 3)
    assert (v.at(0), v.at(1), v.at(2)) == (1, 2, 3)


def test_set_at():
    v = ev(1, 2, 3)
    v.set_at(0, 2)
    v.set_at(1, 3)
    v.set_at(2, 4)
    assert list(v) == [2, 3, 4]


@pytest.mark.parametrize("index", [-1, 6])
def test_at_out_of_range(index):
    v = ev(1, 2, 3)
    with pytest.raises(EuclideanVectorError) as info:
        v.at(index)
    assert str(info.value) == f"Index {index} is not valid for this EuclideanVector object"
    with pytest.raises(EuclideanVectorError):
        v.set_at(index, 1)


def test_at_on_two_dimensions():
    v = EuclideanVector(2)
    assert v.at(0) == 0
    assert v.at(1) == 0
    with pytest.raises(EuclideanVectorError, match="Index 2 is not valid"):
        v.at(2)


def test_dimensions():
    assert ev(1, 2, 3).dimensions == 3


def test_norm():
    assert ev(2, 2, 2, 2).norm() == 4


def test_unit_vector():
    u = ev(2, 2, 2, 2).unit_vector()
    assert list(u) == [0.5, 0.5, 0.5, 0.5]
    assert u.norm() == pytest.approx(1.0)


def test_equality():
    assert ev(1, 2, 3) == ev(1, 2, 3)
    assert not (ev(1, 2, 3) == ev(2, 3, 4))
    assert not (ev(1, 2, 3) != ev(1, 2, 3))
    assert ev(1, 2, 3) != ev(2, 3, 4)
    assert ev(1, 2) != ev(1, 2, 0)


def test_dot_product():
    assert ev(2, 3, 4) * ev(1, 2, 3) == 20


def test_scalar_in_front():
    assert list(2 * ev(1, 2, 3)) == [2, 4, 6]


def test_scalar_behind():
    assert list(ev(1, 2, 3) * 2) == [2, 4, 6]


def test_division():
    assert list(ev(1, 2, 3) / 2) == [0.5, 1, 1.5]


def test_binary_operations_leave_operands_unchanged():
    a = ev(1, 2, 3)
    b = ev(2, 3, 4)
    _ = a + b
    _ = a - b
    _ = a * 2
    _ = a / 2
    assert list(a) == [1, 2, 3]
    assert list(b) == [2, 3, 4]


MISMATCH = "Dimensions of LHS(3) and RHS(2) do not match"


def test_add_mismatch():
    with pytest.raises(EuclideanVectorError) as info:
        ev(1, 2, 3) + ev(1, 2)
    assert str(info.value) == MISMATCH


def test_iadd_mismatch():
    v = ev(1, 2, 3)
    with pytest.raises(EuclideanVectorError) as info:
        v += ev(1, 2)
    assert str(info.value) == MISMATCH


def test_isub_mismatch():
    v = ev(1, 2, 3)
    with pytest.raises(EuclideanVectorError) as info:
        v -= ev(1, 2)
    assert str(info.value) == MISMATCH


def test_sub_mismatch():
    with pytest.raises(EuclideanVectorError) as info:
        ev(1, 2, 3) - ev(1, 2)
    assert str(info.value) == MISMATCH


def test_dot_mismatch():
    with pytest.raises(EuclideanVectorError) as info:
        ev(1, 2, 3) * ev(1, 2)
    assert str(info.value) == MISMATCH


def test_add_mismatch_two_and_three():
    with pytest.raises(EuclideanVectorError) as info:
        EuclideanVector(2) + EuclideanVector(3)
    assert str(info.value) == "Dimensions of LHS(2) and RHS(3) do not match"


def test_divide_by_zero():
    with pytest.raises(EuclideanVectorError) as info:
        ev(1, 2, 3) / 0
    assert str(info.value) == "Invalid vector division by 0"


def test_in_place_divide_by_zero():
    v = ev(1, 2, 3)
    with pytest.raises(EuclideanVectorError, match="Invalid vector division by 0"):
        v /= 0
    assert list(v) == [1, 2, 3]


def test_norm_of_empty_vector():
    with pytest.raises(EuclideanVectorError) as info:
        EuclideanVector(0).norm()
    assert str(info.value) == "EuclideanVector with no dimensions does not have a norm"


def test_unit_vector_of_empty_vector():
    with pytest.raises(EuclideanVectorError) as info:
        EuclideanVector(0).unit_vector()
    assert str(info.value) == "EuclideanVector with no dimensions does not have a unit vector"


def test_unit_vector_of_zero_vector():
    with pytest.raises(EuclideanVectorError) as info:
        EuclideanVector(3).unit_vector()
    assert str(info.value) == (
        "EuclideanVector with euclidean normal of 0 does not have a unit vector"
    )


def test_client_scenario():
    a = EuclideanVector(3, 3.0)
    a.set_at(0, 9)
    a[1] = 9
    a[2] = 9
    b = a.copy()
    assert (a[0], b.at(0)) == (9, 9)
    assert a == b
    assert not (a != b)
    c = (a + b) / 3
    assert list(c) == [6, 6, 6]
    assert str(a) == "[9 9 9]"
    assert (a.dimensions, b.dimensions, c.dimensions) == (3, 3, 3)


def test_vector_is_unhashable():
    with pytest.raises(TypeError):
        hash(ev(1, 2))