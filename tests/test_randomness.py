import pytest

from stealthai.randomness import RandomSource


def test_same_seed_gives_same_sequence():
    a = RandomSource(42)
    b = RandomSource(42)
    first = [a.random_int(20) for _ in range(50)] + [a.random01() for _ in range(5)]
    second = [b.random_int(20) for _ in range(50)] + [b.random01() for _ in range(5)]
    assert first == second


def test_random01_in_unit_interval():
    source = RandomSource(1)
    values = [source.random01() for _ in range(1000)]
    assert all(0.0 <= v <= 1.0 for v in values)


def test_random_int_within_range_and_covers_it():
    source = RandomSource(7)
    values = {source.random_int(5) for _ in range(500)}
    assert values == set(range(5))


def test_random_int_of_one_is_zero():
    source = RandomSource(3)
    assert all(source.random_int(1) == 0 for _ in range(20))


@pytest.mark.parametrize("upper", [0, -3])
def test_random_int_rejects_non_positive(upper):
    with pytest.raises(ValueError):
        RandomSource(0).random_int(upper)


def test_random_float_scales_unit_value():
    a = RandomSource(99)
    b = RandomSource(99)
    assert a.random_float(15.0) == pytest.approx(b.random01() * 15.0)


def test_random_float_within_bounds():
    source = RandomSource(5)
    values = [source.random_float(2.5) for _ in range(500)]
    assert all(0.0 <= v <= 2.5 for v in values)