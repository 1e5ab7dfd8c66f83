import pytest

from hexcolony.latlon import Latitude, Longitude


def test_latitude_poles_are_ninety_degrees():
    assert float(Latitude.from_float(1.0)) == 90.0
    assert float(Latitude.from_float(-1.0)) == -90.0


def test_latitude_saturates():
    assert Latitude.from_float(5.0) == Latitude.from_float(1.0)
    assert Latitude.from_float(-3.0).normalized == -1.0


def test_latitude_abs_mirrors():
    assert Latitude.from_float(-0.5).abs() == Latitude.from_float(0.5)
    assert Latitude.from_float(-0.5).abs() > 0.0


def test_latitude_monotonic():
    values = [float(Latitude.from_float(n / 10)) for n in range(-10, 11)]
    assert values == sorted(values)


def test_latitude_compares_with_float():
    latitude = Latitude.from_float(0.5)
    assert 0.0 < latitude < 90.0


def test_default_is_zero():
    assert Latitude() == 0.0
    assert Longitude() == 0.0


def test_longitude_range():
    assert Longitude.from_float(-1.0) == -180.0
    assert Longitude.from_float(-1.0).abs() == 180.0
    assert Longitude.from_float(2.0) == Longitude.from_float(1.0)


@pytest.mark.parametrize("value", [-0.7, -0.2, 0.3, 0.9])
def test_longitude_abs_preserves_magnitude(value):
    longitude = Longitude.from_float(value)
    assert float(longitude.abs()) == abs(float(longitude))