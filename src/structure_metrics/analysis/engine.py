"""Metrics engine: runs every calculator over a code model.

Pipeline (fixed order):
    1. methods, types, namespaces      - independent of each other
    2. namespace coupling, type coupling, dependencies - independent
    3. summary                         - needs the type and method metrics

With ``EngineSettings.max_workers > 1`` and a large enough model, the stages
inside groups 1 and 2 run on a thread pool. The summary never starts before
group 1 has finished. Any calculator error propagates unchanged and no
partial result is returned.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from loguru import logger

from ..config.settings import EngineSettings
from ..core.exceptions import require
from ..ir.models import CodeModel
from .collectors.coupling import CouplingMetricsCalculator
from .collectors.dependencies import DependencyMetricsCalculator
from .collectors.method_metrics import MethodMetricsCalculator
from .collectors.namespace_metrics import NamespaceMetricsCalculator
from .collectors.summary import SummaryMetricsAggregator
from .collectors.type_metrics import TypeMetricsCalculator
from .metrics import MetricsResult

Stage = Callable[[CodeModel], Any]


class MetricsEngine:
    """Computes the full :class:`MetricsResult` for a :class:`CodeModel`.

    The engine holds no per-run state, so one instance can serve concurrent
    ``compute`` calls on different models.

    Example:
        engine = MetricsEngine()
        result = engine.compute(model)
        print(result.summary.total_types, len(result.dependencies.cycles))
    """

    def __init__(
        self,
        methods: MethodMetricsCalculator | None = None,
        types: TypeMetricsCalculator | None = None,
        namespaces: NamespaceMetricsCalculator | None = None,
        coupling: CouplingMetricsCalculator | None = None,
        dependencies: DependencyMetricsCalculator | None = None,
        summary: SummaryMetricsAggregator | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            methods: Method calculator (default instance if None)
            types: Type calculator
            namespaces: Namespace calculator
            coupling: Coupling calculator
            dependencies: Dependency calculator
            summary: Summary aggregator
            settings: Scheduling settings (sequential by default)
        """
        self.methods = methods or MethodMetricsCalculator()
        self.types = types or TypeMetricsCalculator()
        self.namespaces = namespaces or NamespaceMetricsCalculator()
        self.coupling = coupling or CouplingMetricsCalculator()
        self.dependencies = dependencies or DependencyMetricsCalculator()
        self.summary = summary or SummaryMetricsAggregator()
        self.settings = settings or EngineSettings()

    def compute(self, model: CodeModel) -> MetricsResult:
        """Compute every metric for ``model``.

        Args:
            model: Code model produced by a language adapter

        Returns:
            Complete metrics result

        Raises:
            InvalidArgumentError: If ``model`` is None
        """
        require(model, "model")
        started = time.perf_counter()

        entity_stages: dict[str, Stage] = {
            "methods": self.methods.compute_all,
            "types": self.types.compute_all,
            "namespaces": self.namespaces.compute_all,
        }
        graph_stages: dict[str, Stage] = {
            "namespace_coupling": self.coupling.compute_namespace_coupling,
            "type_coupling": self.coupling.compute_type_coupling,
            "dependencies": self.dependencies.compute,
        }

        type_count = sum(1 for _ in model.codebase.iter_types())
        if self.settings.use_parallel(type_count):
            logger.debug(
                f"Computing metrics for {type_count} types "
                f"with {self.settings.max_workers} workers"
            )
            with ThreadPoolExecutor(max_workers=self.settings.max_workers) as pool:
                outputs = self._run_parallel(pool, entity_stages, model)
                outputs.update(self._run_parallel(pool, graph_stages, model))
        else:
            outputs = self._run_sequential(entity_stages, model)
            outputs.update(self._run_sequential(graph_stages, model))

        summary = self.summary.compute(model, outputs["types"], outputs["methods"])

        result = MetricsResult(
            summary=summary,
            namespaces=outputs["namespaces"],
            types=outputs["types"],
            methods=outputs["methods"],
            namespace_coupling=outputs["namespace_coupling"],
            type_coupling=outputs["type_coupling"],
            dependencies=outputs["dependencies"],
        )
        logger.info(
            f"Computed metrics for {summary.total_types} types, "
            f"{summary.total_methods} methods, "
            f"{len(result.dependencies.cycles)} cycles "
            f"in {time.perf_counter() - started:.3f}s"
        )
        return result

    def _run_sequential(
        self, stages: dict[str, Stage], model: CodeModel
    ) -> dict[str, Any]:
        outputs: dict[str, Any] = {}
        for name, stage in stages.items():
            outputs[name] = stage(model)
            logger.debug(f"Stage {name} done")
        return outputs

    def _run_parallel(
        self,
        pool: ThreadPoolExecutor,
        stages: dict[str, Stage],
        model: CodeModel,
    ) -> dict[str, Any]:
        futures = {name: pool.submit(stage, model) for name, stage in stages.items()}
        outputs: dict[str, Any] = {}
        # result() re-raises the stage's own exception
        for name, future in futures.items():
            outputs[name] = future.result()
            logger.debug(f"Stage {name} done")
        return outputs
