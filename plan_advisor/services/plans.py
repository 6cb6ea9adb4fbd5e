"""Insurance plan service: the single entry point views and the API call into."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, List, Mapping, Optional, TypeVar, Union

from ..config import Settings
from ..errors import FetchFailure, PlanNotFound, SubmissionFailure
from ..models import (
    DetailedPlan,
    Plan,
    PlanComparison,
    Preferences,
    ProviderInfo,
    SubmissionReceipt,
    UserData,
    plan_to_dict,
)
from .comparison import build_comparison, select_for_comparison
from .enrichment import USD_TO_INR_RATE, build_detailed_plan
from .latency import NoLatency, SimulatedLatency
from .providers import HttpPlanProvider, MockPlanProvider, PlanProvider, match_plan_id


logger = logging.getLogger(__name__)

T = TypeVar("T")

PLANS_ERROR = "Failed to fetch insurance plans. Please try again later."
DETAILS_ERROR = "Failed to fetch plan details. Please try again later."
PROVIDERS_ERROR = "Failed to fetch insurance providers. Please try again later."
SUBMIT_ERROR = "Failed to submit your selection. Please try again later."


class InsurancePlanService:
    """Fetches, enriches and submits insurance plans through a :class:`PlanProvider`.

    Every operation is a single independent request: nothing is cached between
    calls and failures are never retried. Each operation accepts an optional
    ``timeout`` in seconds; running past it counts as a failure of that call.
    """

    def __init__(self, provider: PlanProvider, usd_to_inr_rate: float = USD_TO_INR_RATE) -> None:
        self.provider = provider
        self.usd_to_inr_rate = usd_to_inr_rate

    @staticmethod
    async def _call(awaitable: Awaitable[T], timeout: Optional[float]) -> T:
        if timeout is None:
            return await awaitable
        return await asyncio.wait_for(awaitable, timeout)

    async def fetch_plans(
        self, preferences: Optional[Preferences] = None, timeout: Optional[float] = None
    ) -> List[Plan]:
        logger.info("Fetching insurance plans with preferences: %s", preferences)
        try:
            return await self._call(self.provider.list_plans(preferences or {}), timeout)
        except Exception as exc:
            logger.exception("Error fetching insurance plans")
            raise FetchFailure(PLANS_ERROR, cause=exc) from exc

    async def fetch_plan_details(
        self, plan_id: Any, provider_hint: Optional[str] = None, timeout: Optional[float] = None
    ) -> DetailedPlan:
        logger.info("Fetching details for plan %s from %s", plan_id, provider_hint)
        try:
            plan = await self._call(self.provider.find_plan(plan_id, provider_hint), timeout)
        except Exception as exc:
            logger.exception("Error fetching plan details")
            raise FetchFailure(DETAILS_ERROR, cause=exc) from exc

        if plan is None:
            logger.warning("Plan %s not found", plan_id)
            raise PlanNotFound()

        try:
            return build_detailed_plan(plan, self.usd_to_inr_rate)
        except (TypeError, ValueError, AttributeError) as exc:
            logger.exception("Malformed record for plan %s", plan_id)
            raise FetchFailure(DETAILS_ERROR, cause=exc) from exc

    async def list_providers(self, timeout: Optional[float] = None) -> List[ProviderInfo]:
        try:
            return await self._call(self.provider.list_providers(), timeout)
        except Exception as exc:
            logger.exception("Error fetching insurance providers")
            raise FetchFailure(PROVIDERS_ERROR, cause=exc) from exc

    async def compare_plans(
        self,
        selected_plan_id: Any = None,
        size: int = 3,
        preferences: Optional[Preferences] = None,
        timeout: Optional[float] = None,
    ) -> PlanComparison:
        plans = await self.fetch_plans(preferences, timeout=timeout)
        selected = None
        if selected_plan_id is not None:
            selected = match_plan_id(plans, selected_plan_id)
            if selected is None:
                raise PlanNotFound()
        chosen = select_for_comparison(plans, selected, size)
        try:
            return build_comparison(chosen)
        except ValueError as exc:
            logger.exception("Plans cannot be compared")
            raise FetchFailure(PLANS_ERROR, cause=exc) from exc

    async def submit_selection(
        self,
        user_data: UserData,
        selected_plan: Union[Plan, Mapping[str, Any]],
        timeout: Optional[float] = None,
    ) -> SubmissionReceipt:
        if isinstance(selected_plan, Plan):
            selected_plan = plan_to_dict(selected_plan)
        plan_ref = selected_plan.get("id") if isinstance(selected_plan, Mapping) else selected_plan
        logger.info("Submitting plan selection: user=%s plan=%s", user_data, plan_ref)
        try:
            return await self._call(self.provider.submit(user_data or {}, selected_plan or {}), timeout)
        except Exception as exc:
            logger.exception("Error submitting plan selection")
            raise SubmissionFailure(SUBMIT_ERROR, cause=exc) from exc


def build_service(settings: Settings, latency: Optional[SimulatedLatency] = None) -> InsurancePlanService:
    """Wire the provider chosen in ``settings`` into a service."""

    if settings.backend == "http":
        provider: PlanProvider = HttpPlanProvider(settings)
    else:
        if latency is None:
            latency = SimulatedLatency() if settings.simulate_latency else NoLatency()
        provider = MockPlanProvider(latency)
    return InsurancePlanService(provider, usd_to_inr_rate=settings.usd_to_inr_rate)
