"""Tests for sphcollection.config — default floating width from the environment."""

import numpy as np
import pytest

import sphcollection as sphc
from sphcollection.config import ENV_DEFAULT_DTYPE, default_dtype


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(ENV_DEFAULT_DTYPE, raising=False)


class TestDefaultDtype:
    def test_unset_is_float64(self):
        assert default_dtype() == np.float64

    @pytest.mark.parametrize("raw,expected", [
        ("float32", np.float32),
        ("single", np.float32),
        (" Float32 ", np.float32),
        ("double", np.float64),
        ("f8", np.float64),
        ("", np.float64),
    ])
    def test_recognised_values(self, monkeypatch, raw, expected):
        monkeypatch.setenv(ENV_DEFAULT_DTYPE, raw)
        assert default_dtype() == expected

    def test_unrecognised_value_warns(self, monkeypatch):
        monkeypatch.setenv(ENV_DEFAULT_DTYPE, "float128")
        with pytest.warns(RuntimeWarning, match="Unrecognised"):
            assert default_dtype() == np.float64


class TestDefaultDtypeInCatalog:
    def test_plain_floats_follow_configuration(self, monkeypatch):
        monkeypatch.setenv(ENV_DEFAULT_DTYPE, "float32")
        assert sphc.fornberg_f1(0.2, 0.1).dtype == np.float32

    def test_explicit_width_wins(self, monkeypatch):
        monkeypatch.setenv(ENV_DEFAULT_DTYPE, "float32")
        assert sphc.fornberg_f1(np.float64(0.2), 0.1).dtype == np.float64
