"""
Test cases for robust seasonal decomposition: component shapes, the residual identity, seasonal recovery, and the moving-median helpers.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from engine.decomposition import Decomposition, decompose
from engine.decomposition.robust import moving_median, phase_medians
from engine.errors import InvalidArgument


def _seasonal_series(n=84, period=7, seed=3):
    rng = np.random.RandomState(seed)
    pattern = np.array([0.0, 4.0, 6.0, 3.0, -2.0, -5.0, -6.0])[:period]
    return 20.0 + np.resize(pattern, n) + rng.normal(0, 0.3, n), pattern


@pytest.mark.parametrize("method", ["stl", "median"])
def test_components_have_same_length(series, method):
    result = decompose(np.array(series), 7, method=method)
    assert isinstance(result, Decomposition)
    assert len(result) == len(series)
    assert result.trend.shape == result.seasonal.shape == result.residual.shape == (30,)


@pytest.mark.parametrize("method", ["stl", "median"])
def test_residual_identity(series, method):
    arr = np.array(series)
    result = decompose(arr, 7, method=method)
    np.testing.assert_allclose(arr - result.trend - result.seasonal, result.residual, atol=1e-8)


def test_stl_trend_is_series_median(series):
    result = decompose(np.array(series), 7, method="stl")
    assert np.all(result.trend == np.median(series))


@pytest.mark.parametrize("method", ["stl", "median"])
def test_seasonal_pattern_recovered(method):
    values, pattern = _seasonal_series()
    result = decompose(values, 7, method=method)
    recovered = result.seasonal[:7]
    assert np.corrcoef(recovered, pattern)[0, 1] > 0.95


def test_median_seasonal_is_periodic():
    values, _ = _seasonal_series()
    result = decompose(values, 7, method="median")
    np.testing.assert_allclose(result.seasonal[:7], result.seasonal[7:14])


def test_spike_stays_in_residual(series):
    result = decompose(np.array(series), 7)
    assert int(np.argmax(result.residual)) == 26
    assert int(np.argmin(result.residual)) == 15


@pytest.mark.parametrize("method", ["stl", "median"])
def test_period_one_has_no_seasonal(method):
    values = np.array([1.0, 2.0, 1.5, 3.0, 2.5, 2.0])
    result = decompose(values, 1, method=method)
    assert np.all(result.seasonal == 0.0)


def test_does_not_mutate_input(series):
    arr = np.array(series)
    decompose(arr, 7)
    assert arr.tolist() == series


def test_settings_select_method(series, monkeypatch):
    monkeypatch.setattr("config.settings.decomposition_method", "median")
    via_settings = decompose(np.array(series), 7)
    explicit = decompose(np.array(series), 7, method="median")
    np.testing.assert_array_equal(via_settings.residual, explicit.residual)


def test_unknown_method():
    with pytest.raises(InvalidArgument, match="unknown decomposition method"):
        decompose(np.ones(14), 7, method="fourier")


def test_moving_median_edges_and_spikes():
    arr = np.array([1.0, 1.0, 50.0, 1.0, 1.0, 2.0, 2.0])
    out = moving_median(arr, 3)
    assert out.tolist() == [1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 2.0]


def test_moving_median_window_one_is_identity():
    arr = np.array([3.0, -1.0, 4.0])
    np.testing.assert_array_equal(moving_median(arr, 1), arr)


def test_phase_medians_broadcast():
    detrended = np.array([1.0, 10.0, 3.0, 20.0, 2.0, 30.0, 100.0])
    out = phase_medians(detrended, 2)
    # phase 0: 1, 3, 2, 100 -> 2.5 ; phase 1: 10, 20, 30 -> 20
    assert out.tolist() == [2.5, 20.0, 2.5, 20.0, 2.5, 20.0, 2.5]


def test_median_trend_window_setting(series, monkeypatch):
    monkeypatch.setattr("config.settings.median_trend_window", 31)
    result = decompose(np.array(series), 7, method="median")
    # a window covering the whole series flattens the trend near the middle
    assert result.trend[14] == np.median(series)


def test_noiseless_periodic_residual_is_exact():
    arr = np.array([0.1 * (i % 7) for i in range(28)])
    result = decompose(arr, 7, method="stl")
    assert np.all(result.residual == 0.0)


def test_residual_tolerance_setting(monkeypatch):
    arr = np.array([0.1 * (i % 7) for i in range(28)])
    arr[10] += 1e-6
    assert decompose(arr, 7, method="stl").residual[10] != 0.0
    monkeypatch.setattr("config.settings.residual_tolerance", 1e-3)
    assert np.all(decompose(arr, 7, method="stl").residual == 0.0)
