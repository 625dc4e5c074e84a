# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: HealthService.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass

from api.schemas.health import DeepHealthResponse, ReadinessResponse, SmokeTestSummary
from health.TestRunner import TestRunner
from services.ProductSearchService import ProductSearchService


@dataclass
class HealthService:
    """
    Wraps TestRunner (gateway smoke tests) and the search service's index
    readiness. Returns response models for the API layer.
    """

    test_runner: TestRunner
    search_service: ProductSearchService

    async def deep_health(self, include_chat: bool = True) -> DeepHealthResponse:

        results = await self.test_runner.run_all(include_chat=include_chat)

        total = len(results)
        passed = sum(1 for ok in results.values() if ok)
        failed = total - passed

        overall_status = "ok" if failed == 0 else "error"

        summary = SmokeTestSummary(
            total=total,
            passed=passed,
            failed=failed,
        )

        return DeepHealthResponse(
            status=overall_status,
            results=results,
            summary=summary,
        )

    def readiness(self) -> ReadinessResponse:
        svc = self.search_service
        report = svc.last_index_report
        return ReadinessResponse(
            ready=svc.is_ready,
            indexed_products=svc.store.count(),
            failed_products=report.failed_ids if report is not None else [],
        )
