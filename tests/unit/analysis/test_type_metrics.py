"""Unit tests for per-type metrics."""

import pytest

from structure_metrics.analysis.collectors.type_metrics import (
    TypeMetricsCalculator,
    build_type_graph,
    distinct_targets,
    lcom3,
)
from structure_metrics.core.exceptions import InvalidArgumentError
from structure_metrics.ir import Field, Method, Type


def _type_with_access(*accesses):
    """Type with fields f, g and one method per access list."""
    return Type(
        "N.T",
        fields=[Field("f"), Field("g")],
        methods=[
            Method(f"N.T.m{i}", accessed_fields=list(a)) for i, a in enumerate(accesses)
        ],
    )


class TestLcom3:
    """Test the bounded LCOM3 cohesion metric."""

    def test_half_cohesive(self):
        """Test two methods each touching a different field gives 0.5."""
        assert lcom3(_type_with_access(["f"], ["g"])) == pytest.approx(0.5)

    def test_fully_cohesive(self):
        """Test every method touching every field gives 0."""
        assert lcom3(_type_with_access(["f", "g"], ["f", "g"])) == pytest.approx(0.0)

    def test_no_field_access(self):
        """Test methods touching nothing gives the maximum 1.0."""
        assert lcom3(_type_with_access([], [])) == pytest.approx(1.0)

    def test_single_method(self):
        """Test one method is cohesive by definition."""
        assert lcom3(_type_with_access([])) == 0.0

    def test_single_field(self):
        """Test one field is cohesive by definition."""
        type_ = Type(
            "N.T",
            fields=[Field("f")],
            methods=[Method("N.T.a"), Method("N.T.b")],
        )
        assert lcom3(type_) == 0.0

    def test_unknown_fields_ignored(self):
        """Test accessed names that are not fields do not count."""
        value = lcom3(_type_with_access(["f", "other"], ["missing"]))
        assert value == pytest.approx(0.75)

    def test_always_bounded(self):
        """Test duplicate access entries never push the value below 0."""
        value = lcom3(_type_with_access(["f", "f", "g"], ["f", "g", "g"]))
        assert 0.0 <= value <= 1.0


class TestDistinctTargets:
    """Test dependency target normalization."""

    def test_drops_blanks_and_duplicates(self):
        """Test blank and repeated targets collapse."""
        assert distinct_targets(["A", "A", "", " ", "B"]) == {"A", "B"}

    def test_none(self):
        """Test None is treated as no targets."""
        assert distinct_targets(None) == set()


class TestBuildTypeGraph:
    """Test the internal type graph helper."""

    def test_keeps_internal_edges_only(self, layered_model):
        """Test external and self references are not edges."""
        graph = build_type_graph(layered_model)
        assert sorted(graph.edges()) == [("N1.A", "N1.B"), ("N1.B", "N2.C")]
        assert graph.dropped_edges == 1


class TestTypeMetricsCalculator:
    """Test TypeMetricsCalculator."""

    def test_layered_model(self, layered_model):
        """Test size, complexity and coupling of N1.A."""
        result = {m.type_full_name: m for m in TypeMetricsCalculator().compute_all(layered_model)}
        a = result["N1.A"]

        assert a.sloc == 8
        assert a.nom == 2
        assert a.npm == 1
        assert a.wmc == 3
        assert a.dep == 2
        assert a.i_dep == 1
        assert a.fan_out == 1
        assert a.fan_in == 0
        assert a.noa == 1
        assert a.lcom3 == 0.0

        assert result["N1.B"].fan_in == 1
        assert result["N2.C"].fan_in == 1
        assert result["N2.C"].fan_out == 0

    def test_order_follows_model(self, layered_model):
        """Test results keep model order."""
        names = [m.type_full_name for m in TypeMetricsCalculator().compute_all(layered_model)]
        assert names == ["N1.A", "N1.B", "N2.C"]

    def test_compute_for_matches_compute_all(self, layered_model):
        """Test single-type computation agrees with the batch path."""
        calculator = TypeMetricsCalculator()
        batch = calculator.compute_all(layered_model)
        singles = [
            calculator.compute_for(t, layered_model)
            for t in layered_model.codebase.iter_types()
        ]
        assert singles == batch

    def test_negative_counters_clamped(self, build_model):
        """Test negative SLOC and decision points do not lower the totals."""
        model = build_model(
            {"N": [Type("N.T", methods=[Method("N.T.m", sloc=-5, decision_points=-2)])]}
        )
        metrics = TypeMetricsCalculator().compute_all(model)[0]
        assert metrics.sloc == 0
        assert metrics.wmc == 1

    def test_type_without_members(self, build_model):
        """Test an empty type reports zeros."""
        model = build_model({"N": [Type("N.Empty")]})
        metrics = TypeMetricsCalculator().compute_all(model)[0]
        assert (metrics.sloc, metrics.nom, metrics.wmc, metrics.noa) == (0, 0, 0, 0)
        assert metrics.lcom3 == 0.0

    def test_none_rejected(self, layered_model):
        """Test None arguments raise InvalidArgumentError."""
        calculator = TypeMetricsCalculator()
        with pytest.raises(InvalidArgumentError):
            calculator.compute_all(None)
        with pytest.raises(InvalidArgumentError):
            calculator.compute_for(None, layered_model)
