"""Unit tests for per-method metrics."""

import pytest

from structure_metrics.analysis.collectors.method_metrics import (
    MethodMetricsCalculator,
    clamp_non_negative,
    cyclomatic_complexity,
)
from structure_metrics.core.exceptions import InvalidArgumentError
from structure_metrics.ir import Method


class TestHelpers:
    """Test counter helpers."""

    def test_clamp(self):
        """Test negatives clamp to zero and positives pass through."""
        assert clamp_non_negative(-3) == 0
        assert clamp_non_negative(0) == 0
        assert clamp_non_negative(7) == 7

    def test_cyclomatic_complexity_floor(self):
        """Test CYCLO is never below 1."""
        assert cyclomatic_complexity(0) == 1
        assert cyclomatic_complexity(-4) == 1
        assert cyclomatic_complexity(5) == 6


class TestMethodMetricsCalculator:
    """Test MethodMetricsCalculator."""

    def test_compute(self):
        """Test raw facts map to MLOC/CYCLO/CALLS/NBD/PARAM."""
        method = Method(
            "N.T.Run",
            parameters=2,
            sloc=10,
            decision_points=3,
            max_nesting_depth=2,
            calls=4,
        )
        metrics = MethodMetricsCalculator().compute(method)

        assert metrics.method_full_name == "N.T.Run"
        assert metrics.mloc == 10
        assert metrics.cyclo == 4
        assert metrics.calls == 4
        assert metrics.nbd == 2
        assert metrics.parameters == 2

    def test_negative_inputs_clamped(self):
        """Test every counter is clamped to >= 0."""
        method = Method(
            "N.T.Bad",
            parameters=-1,
            sloc=-1,
            decision_points=-1,
            max_nesting_depth=-1,
            calls=-1,
        )
        metrics = MethodMetricsCalculator().compute(method)
        assert (metrics.mloc, metrics.calls, metrics.nbd, metrics.parameters) == (
            0,
            0,
            0,
            0,
        )
        assert metrics.cyclo == 1

    def test_compute_all_in_model_order(self, layered_model):
        """Test every method is listed once, in model order."""
        names = [
            m.method_full_name
            for m in MethodMetricsCalculator().compute_all(layered_model)
        ]
        assert names == ["N1.A.Run", "N1.A.Stop", "N1.B.Go", "N2.C.Get"]

    def test_overloads_keep_separate_entries(self, build_model):
        """Test methods sharing a full name each get an entry."""
        from structure_metrics.ir import Type

        model = build_model(
            {"N": [Type("N.T", methods=[Method("N.T.m"), Method("N.T.m", parameters=1)])]}
        )
        assert len(MethodMetricsCalculator().compute_all(model)) == 2

    def test_none_rejected(self):
        """Test None inputs raise InvalidArgumentError."""
        calculator = MethodMetricsCalculator()
        with pytest.raises(InvalidArgumentError):
            calculator.compute(None)
        with pytest.raises(InvalidArgumentError):
            calculator.compute_all(None)
