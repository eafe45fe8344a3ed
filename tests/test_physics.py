import pytest

from doublejumper.physics import PhysicsModel, get_by_modulo


def test_gravitation_is_kept():
    model = PhysicsModel(0.003)
    assert model.gravitation == 0.003


def test_distance_without_gravity_is_linear():
    model = PhysicsModel(0.0)
    assert model.calculate_distance(10, 1.5) == pytest.approx(15.0)


def test_distance_at_zero_time_is_zero():
    model = PhysicsModel(0.0019)
    assert model.calculate_distance(0, 1.0) == 0


def test_distance_grows_with_gravity():
    still = PhysicsModel(0.0).calculate_distance(10, 1.0)
    pulled = PhysicsModel(0.003).calculate_distance(10, 1.0)
    assert pulled > still


def test_speed_without_direction_is_unchanged():
    model = PhysicsModel(0.003)
    assert model.calculate_speed(8, 1.5, 0) == 1.5


@pytest.mark.parametrize("time", [1, 8, 10, 100])
def test_speed_directions_are_symmetric(time):
    model = PhysicsModel(0.0019)
    up = model.calculate_speed(time, 1.0, 1)
    down = model.calculate_speed(time, 1.0, -1)
    assert up + down == pytest.approx(2.0)
    assert down < 1.0 < up


def test_modulo_of_negative_wraps():
    assert get_by_modulo(-1, 520) == 519


@pytest.mark.parametrize("x", [-1041, -520, -7, 0, 3, 519, 520, 2000])
def test_modulo_in_range_and_congruent(x):
    result = get_by_modulo(x, 520)
    assert 0 <= result < 520
    assert (x - result) % 520 == 0


@pytest.mark.parametrize("mod", [0, -5])
def test_modulo_rejects_non_positive(mod):
    with pytest.raises(ValueError):
        get_by_modulo(5, mod)