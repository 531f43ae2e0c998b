"""Per-method metrics: MLOC, CYCLO, CALLS, NBD, PARAM."""

from __future__ import annotations

from ...core.exceptions import require
from ...ir.models import CodeModel, Method
from ..metrics import MethodMetrics


def clamp_non_negative(value: int) -> int:
    """Clamp a raw counter to zero; adapters occasionally report negatives."""
    return value if value > 0 else 0


def cyclomatic_complexity(decision_points: int) -> int:
    """Cyclomatic complexity is 1 + decision points, never below 1."""
    return 1 + clamp_non_negative(decision_points)


class MethodMetricsCalculator:
    """Computes :class:`MethodMetrics` from raw method facts.

    Each method is handled independently, so the calculator is stateless and
    safe to share between threads.
    """

    def compute(self, method: Method) -> MethodMetrics:
        """Compute metrics for a single method.

        Args:
            method: Method node from the IR

        Returns:
            MethodMetrics with every counter clamped to >= 0

        Raises:
            InvalidArgumentError: If ``method`` is None
        """
        require(method, "method")

        return MethodMetrics(
            method_full_name=method.full_name,
            mloc=clamp_non_negative(method.sloc),
            cyclo=cyclomatic_complexity(method.decision_points),
            calls=clamp_non_negative(method.calls),
            nbd=clamp_non_negative(method.max_nesting_depth),
            parameters=clamp_non_negative(method.parameters),
        )

    def compute_all(self, model: CodeModel) -> list[MethodMetrics]:
        """Compute metrics for every method of the model, in model order."""
        require(model, "model")
        return [self.compute(m) for m in model.codebase.iter_methods()]
