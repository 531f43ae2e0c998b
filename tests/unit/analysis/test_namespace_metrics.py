"""Unit tests for namespace NOC/NAC metrics."""

import pytest

from structure_metrics.analysis.collectors.namespace_metrics import (
    NamespaceMetricsCalculator,
    count_abstract_classes,
)
from structure_metrics.core.exceptions import InvalidArgumentError
from structure_metrics.ir import (
    Codebase,
    CodeModel,
    DependencyGraph,
    Module,
    Namespace,
    Type,
    TypeKind,
)


class TestCountAbstractClasses:
    """Test NAC counting."""

    def test_interfaces_are_not_abstract_classes(self):
        """Test interfaces never count toward NAC."""
        types = [
            Type("N.I", TypeKind.INTERFACE, is_abstract=True),
            Type("N.Base", TypeKind.CLASS, is_abstract=True),
            Type("N.Rec", TypeKind.RECORD, is_abstract=True),
            Type("N.S", TypeKind.STRUCT),
            Type("N.C", TypeKind.CLASS),
        ]
        assert count_abstract_classes(types) == 2


class TestNamespaceMetricsCalculator:
    """Test NamespaceMetricsCalculator."""

    def test_compute_for(self):
        """Test NOC counts every type and NAC only abstract classes."""
        namespace = Namespace(
            "N",
            [
                Type("N.I", TypeKind.INTERFACE),
                Type("N.Base", is_abstract=True),
                Type("N.Impl"),
            ],
        )
        metrics = NamespaceMetricsCalculator().compute_for(namespace)
        assert metrics.namespace == "N"
        assert metrics.noc == 3
        assert metrics.nac == 1

    def test_empty_namespace(self):
        """Test a namespace without types reports zeros."""
        metrics = NamespaceMetricsCalculator().compute_for(Namespace("Empty"))
        assert (metrics.noc, metrics.nac) == (0, 0)

    def test_compute_all(self, layered_model):
        """Test one entry per namespace in model order."""
        result = NamespaceMetricsCalculator().compute_all(layered_model)
        assert [(m.namespace, m.noc) for m in result] == [("N1", 2), ("N2", 1)]

    def test_same_name_merged(self):
        """Test namespaces with the same name in two modules are merged."""
        model = CodeModel(
            Codebase(
                [
                    Module("A", [Namespace("Shared", [Type("Shared.X", is_abstract=True)])]),
                    Module("B", [Namespace("Shared", [Type("Shared.Y")])]),
                ]
            ),
            DependencyGraph(),
        )
        result = NamespaceMetricsCalculator().compute_all(model)
        assert len(result) == 1
        assert (result[0].noc, result[0].nac) == (2, 1)

    def test_none_rejected(self):
        """Test None inputs raise InvalidArgumentError."""
        calculator = NamespaceMetricsCalculator()
        with pytest.raises(InvalidArgumentError):
            calculator.compute_for(None)
        with pytest.raises(InvalidArgumentError):
            calculator.compute_all(None)
