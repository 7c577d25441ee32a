"""Tests for sphcollection.functions — reference values, widths, shapes."""

import numpy as np
import pytest
from scipy import integrate

import sphcollection as sphc
from sphcollection import functions


ALL_FUNCTIONS = [getattr(functions, name) for name in functions.__all__]

# Values at (theta, phi) = (1.1, 2.3) in double precision
REFERENCE_VALUES = {
    "fornberg_f1": 1.3681900038110557,
    "fornberg_f4": 0.22222222222222221,
    "beentjes_f3": 0.22199637292092772,
    "beentjes_f4": 0.22222222222222221,
    "beentjes_f5": 0.22222222222222221,
    "renka_f3": 0.0060674750707869676,
    "renka_f4": 0.00067331769360564524,
    "renka_f5": 5.5493724352318631e-12,
    "reegar_f2": 0.27109844126491339,
    "reegar_f3": 0.001942178820660771,
    "reegar_f4": 0.99681949060761577,
    "bellet_f4": 0.0,
    "franke": 0.15271722567942556,
    "cf_f1": 1.3260545277803182,
    "cf_f2": 0.93928434494496527,
    "cf_f3": 0.82490956506231428,
    "cf_f4": 0.39112062618020926,
    "cf_f5": 7.879160343097821,
    "cf_f6": 1.1931523026322721,
    "cf_f7": 0.86480025487590029,
    "cf_f8": 0.495974863465178,
    "cf_f9": 0.31418264631182352,
    "cf_f10": 4.7601277467426826,
    "cf_f11": 0.75056503770262695,
    "cf_f12": 2.6597611496653855,
    "cf_f13": 2.0091535311473403,
    "cf_f14": 0.19820234433184328,
    "cf_f15": 0.42843997749653856,
}


def _ids(funcs):
    return [f.__name__ for f in funcs]


# ---------------------------------------------------------------------------
# Regression fixtures from the demonstration program
# ---------------------------------------------------------------------------

class TestDemoValues:
    def test_cf_f1_single_precision(self):
        value = sphc.cf_f1(np.float32(0.23), np.float32(0.42))
        assert value.dtype == np.float32
        assert value == pytest.approx(1.1020302772521973, rel=1e-6)

    def test_fornberg_f1_double_precision(self):
        value = sphc.fornberg_f1(np.float64(0.2), np.float64(0.1))
        assert value.dtype == np.float64
        assert value == pytest.approx(1.2003869337213957, rel=1e-12)

    def test_beentjes_f4_double_precision(self):
        value = sphc.beentjes_f4(np.float64(0.5), np.float64(1.0))
        assert value.dtype == np.float64
        assert value == 2.0 / 9.0


# ---------------------------------------------------------------------------
# Point values
# ---------------------------------------------------------------------------

class TestReferenceValues:
    def test_every_entry_has_a_reference(self):
        assert sorted(REFERENCE_VALUES) == sorted(functions.__all__)

    @pytest.mark.parametrize("name,expected", sorted(REFERENCE_VALUES.items()))
    def test_value(self, name, expected):
        value = getattr(functions, name)(1.1, 2.3)
        assert value == pytest.approx(expected, rel=1e-7, abs=1e-15)

    def test_cf_f5_second_point(self):
        assert sphc.cf_f5(0.7, 1.9) == pytest.approx(7.3432758897069164, rel=1e-9)

    def test_franke_at_north_pole(self):
        assert sphc.franke(0.0, 0.0) == pytest.approx(0.24461047509385589, rel=1e-9)

    def test_cf_f10_constant_offset_at_pole(self):
        """At theta = 0 the oscillating term vanishes, leaving 1 + 5."""
        assert sphc.cf_f10(0.0, 1.0) == pytest.approx(6.0)


# ---------------------------------------------------------------------------
# Floating width and shape behaviour
# ---------------------------------------------------------------------------

class TestGenericWidth:
    @pytest.mark.parametrize("func", ALL_FUNCTIONS, ids=_ids(ALL_FUNCTIONS))
    @pytest.mark.parametrize("dtype", [np.float32, np.float64])
    def test_output_keeps_input_width(self, func, dtype):
        value = func(dtype(0.7), dtype(1.9))
        assert value.dtype == dtype
        assert np.ndim(value) == 0

    @pytest.mark.parametrize("func", ALL_FUNCTIONS, ids=_ids(ALL_FUNCTIONS))
    def test_single_close_to_double(self, func):
        single = func(np.float32(0.7), np.float32(1.9))
        double = func(0.7, 1.9)
        assert float(single) == pytest.approx(float(double), rel=1e-4, abs=1e-5)

    @pytest.mark.parametrize("func", ALL_FUNCTIONS, ids=_ids(ALL_FUNCTIONS))
    def test_mixed_widths_rejected(self, func):
        with pytest.raises(TypeError):
            func(np.float32(0.7), np.float64(1.9))

    @pytest.mark.parametrize("func", ALL_FUNCTIONS, ids=_ids(ALL_FUNCTIONS))
    def test_deterministic(self, func):
        first = func(np.float64(0.3), np.float64(4.1))
        second = func(np.float64(0.3), np.float64(4.1))
        assert first.tobytes() == second.tobytes()

    @pytest.mark.parametrize("func", ALL_FUNCTIONS, ids=_ids(ALL_FUNCTIONS))
    def test_array_matches_scalar_calls(self, func):
        theta = np.array([0.1, 0.9, 1.7, 2.9])
        phi = np.array([0.2, 2.1, 3.3, 6.0])
        values = func(theta, phi)
        assert values.shape == (4,)
        expected = [func(t, p) for t, p in zip(theta, phi)]
        np.testing.assert_allclose(values, expected, rtol=1e-10, atol=1e-300)

    def test_cf_f3_broadcasts_over_theta(self):
        values = sphc.cf_f3(np.linspace(0.0, np.pi, 5), 0.4)
        assert values.shape == (5,)
        np.testing.assert_allclose(values, 1.0 + np.sin(2.0) / 5.0)

    def test_nan_propagates(self):
        assert np.isnan(sphc.fornberg_f1(np.nan, 0.3))


# ---------------------------------------------------------------------------
# Piecewise-constant step functions
# ---------------------------------------------------------------------------

@pytest.fixture(scope="module")
def random_angles():
    rng = np.random.default_rng(1234)
    theta = rng.uniform(0.0, np.pi, 5000)
    phi = rng.uniform(0.0, 2.0 * np.pi, 5000)
    return theta, phi


class TestStepFunctions:
    @pytest.mark.parametrize("func,allowed", [
        (sphc.beentjes_f4, {0.0, 1.0 / 9.0, 2.0 / 9.0}),
        (sphc.beentjes_f5, {0.0, 1.0 / 9.0, 2.0 / 9.0}),
        (sphc.fornberg_f4, {0.0, 1.0 / 9.0, 2.0 / 9.0}),
        (sphc.bellet_f4, {0.0, 0.5, 1.0}),
    ], ids=["beentjes_f4", "beentjes_f5", "fornberg_f4", "bellet_f4"])
    def test_takes_only_step_values(self, random_angles, func, allowed):
        values = set(np.unique(func(*random_angles)).tolist())
        assert values <= allowed
        # both sides of the discontinuity are sampled
        assert len(values) >= 2

    def test_beentjes_f3_approximates_f4_away_from_boundary(self):
        assert sphc.beentjes_f3(0.1, 3.5) == pytest.approx(
            sphc.beentjes_f4(0.1, 3.5), abs=1e-6
        )


# ---------------------------------------------------------------------------
# Smooth ramps vs. discontinuous steps
# ---------------------------------------------------------------------------

def _max_jump(func, n, phi=1.0):
    theta = np.linspace(0.0, np.pi, n)
    return np.max(np.abs(np.diff(func(theta, np.full_like(theta, phi)))))


class TestContinuity:
    @pytest.mark.parametrize("func", [
        sphc.beentjes_f3, sphc.reegar_f2, sphc.reegar_f3, sphc.reegar_f4,
    ], ids=["beentjes_f3", "reegar_f2", "reegar_f3", "reegar_f4"])
    def test_ramp_differences_shrink_with_spacing(self, func):
        coarse = _max_jump(func, 20001)
        fine = _max_jump(func, 40001)
        assert fine < 0.6 * coarse

    @pytest.mark.parametrize("func", [sphc.beentjes_f4, sphc.fornberg_f4],
                             ids=["beentjes_f4", "fornberg_f4"])
    def test_step_jump_persists(self, func):
        assert _max_jump(func, 20001) >= 1.0 / 9.0 - 1e-12
        assert _max_jump(func, 40001) >= 1.0 / 9.0 - 1e-12


# ---------------------------------------------------------------------------
# Known surface integrals (independent check with scipy)
# ---------------------------------------------------------------------------

def _surface_integral(func):
    value, _ = integrate.dblquad(
        lambda phi, theta: float(func(theta, phi)) * np.sin(theta),
        0.0, np.pi, 0.0, 2.0 * np.pi,
    )
    return value


class TestSurfaceIntegrals:
    def test_fornberg_f1(self):
        expected = 4.0 * np.pi * 162.0 / 105.0
        assert _surface_integral(sphc.fornberg_f1) == pytest.approx(expected, rel=1e-7)

    def test_cf_f3(self):
        assert _surface_integral(sphc.cf_f3) == pytest.approx(4.0 * np.pi, rel=1e-7)

    def test_cf_f6(self):
        assert _surface_integral(sphc.cf_f6) == pytest.approx(4.0 * np.pi, rel=1e-7)

    def test_cf_f14_is_odd_in_z(self):
        assert _surface_integral(sphc.cf_f14) == pytest.approx(0.0, abs=1e-7)

    @pytest.mark.filterwarnings("ignore::scipy.integrate.IntegrationWarning")
    @pytest.mark.parametrize("func", [sphc.fornberg_f4, sphc.beentjes_f4],
                             ids=["fornberg_f4", "beentjes_f4"])
    def test_step_integral(self, func):
        """The step is 2/9 on one hemisphere and 0 on the other."""
        assert _surface_integral(func) == pytest.approx(4.0 * np.pi / 9.0, rel=1e-6)
