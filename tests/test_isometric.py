import logging
import math

from pytest import approx

from geoplanar import isometric
from geoplanar._const import WGS84_E
from geoplanar.isometric import phi2, tsfn


def test_tsfn():
    assert tsfn(0., WGS84_E) == approx(1.)

    # Spherical case reduces to tan(pi/4 - phi/2)
    assert tsfn(0.5, 0.) == approx(math.tan(math.pi / 4 - 0.25))

    # Decreasing with latitude, symmetric about the equator
    assert tsfn(0.2, WGS84_E) < tsfn(0.1, WGS84_E) < 1.
    assert tsfn(0.3, WGS84_E) * tsfn(-0.3, WGS84_E) == approx(1.)


def test_phi2():
    for phi in (-1.5, -0.8, -0.1, 0., 0.3, 0.7854, 1.2, 1.55):
        assert phi2(tsfn(phi, WGS84_E), WGS84_E) == approx(phi, abs=1e-10)

    assert phi2(tsfn(0.6, 0.), 0.) == approx(0.6, abs=1e-12)
    assert phi2(1., WGS84_E) == approx(0., abs=1e-12)


def test_phi2_iteration_bound(monkeypatch):
    real_atan = math.atan
    calls = []

    def counting_atan(val):
        calls.append(val)
        return real_atan(val)

    monkeypatch.setattr(isometric.math, 'atan', counting_atan)

    for ts in (1e-6, 0.01, 0.5, 1., 3., 1e4):
        calls.clear()
        phi2(ts, WGS84_E)
        # One initial estimate plus at most 15 refinements
        assert 1 < len(calls) <= 16


def test_phi2_non_convergence(monkeypatch, caplog):
    caplog.set_level(logging.DEBUG, logger='geoplanar')
    monkeypatch.setattr(isometric, 'PHI2_TOLERANCE', -1.)

    real_atan = math.atan
    calls = []

    def counting_atan(val):
        calls.append(val)
        return real_atan(val)

    monkeypatch.setattr(isometric.math, 'atan', counting_atan)

    # Last estimate is still returned, no exception raised
    result = phi2(tsfn(0.7, WGS84_E), WGS84_E)
    assert len(calls) == 16
    assert result == approx(0.7, abs=1e-10)
    assert 'did not converge' in caplog.text
