"""Plan providers: the simulated catalog and the HTTP integration seam."""

from __future__ import annotations

import abc
import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional

import httpx

from ..config import Settings
from ..models import Plan, Preferences, ProviderInfo, SubmissionReceipt, UserData, plan_from_dict
from .catalog import generate_catalog, provider_directory
from .latency import LIST_PLANS, LIST_PROVIDERS, PLAN_DETAILS, SUBMIT, SimulatedLatency


logger = logging.getLogger(__name__)

SUBMISSION_MESSAGE = "Your insurance plan selection has been submitted successfully."
NEXT_STEPS = [
    "Our team will review your application",
    "You will receive a confirmation email within 24 hours",
    "A representative may contact you for additional information if needed",
]


def make_reference_id(now_ms: Optional[int] = None) -> str:
    """Time-derived reference like ``REF-123456``.

    Two submissions within the same millisecond get the same id.
    """

    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"REF-{str(now_ms)[7:]}"


def canonical_plan_id(plan_id: Any) -> str:
    """String form used for id comparison; ``1``, ``1.0`` and ``"1"`` agree."""

    if isinstance(plan_id, float) and plan_id.is_integer():
        plan_id = int(plan_id)
    return str(plan_id).strip()


def match_plan_id(plans: List[Plan], plan_id: Any) -> Optional[Plan]:
    wanted = canonical_plan_id(plan_id)
    for plan in plans:
        if canonical_plan_id(plan.id) == wanted:
            return plan
    return None


class PlanProvider(abc.ABC):
    """Source of plan data consumed by :class:`InsurancePlanService`."""

    @abc.abstractmethod
    async def list_plans(self, preferences: Preferences) -> List[Plan]:
        ...

    @abc.abstractmethod
    async def find_plan(self, plan_id: Any, provider_hint: Optional[str] = None) -> Optional[Plan]:
        ...

    @abc.abstractmethod
    async def list_providers(self) -> List[ProviderInfo]:
        ...

    @abc.abstractmethod
    async def submit(self, user_data: UserData, selected_plan: Mapping[str, Any]) -> SubmissionReceipt:
        ...


class MockPlanProvider(PlanProvider):
    """Serves the generated catalog after a simulated round trip."""

    def __init__(self, latency: Optional[SimulatedLatency] = None) -> None:
        self.latency = latency or SimulatedLatency()

    async def list_plans(self, preferences: Preferences) -> List[Plan]:
        await self.latency.wait(LIST_PLANS)
        return generate_catalog(preferences)

    async def find_plan(self, plan_id: Any, provider_hint: Optional[str] = None) -> Optional[Plan]:
        await self.latency.wait(PLAN_DETAILS)
        return match_plan_id(generate_catalog({}), plan_id)

    async def list_providers(self) -> List[ProviderInfo]:
        await self.latency.wait(LIST_PROVIDERS)
        return provider_directory()

    async def submit(self, user_data: UserData, selected_plan: Mapping[str, Any]) -> SubmissionReceipt:
        await self.latency.wait(SUBMIT)
        return SubmissionReceipt(
            reference_id=make_reference_id(),
            message=SUBMISSION_MESSAGE,
            next_steps=list(NEXT_STEPS),
        )


class HttpPlanProvider(PlanProvider):
    """Queries every configured insurer API and merges the results."""

    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None) -> None:
        self.settings = settings
        self._client = client

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self.settings.http_timeout_seconds) as client:
            yield client

    def _headers(self, provider_id: str) -> Dict[str, str]:
        endpoint = self.settings.endpoint_for(provider_id)
        return {
            "Authorization": f"Bearer {endpoint.api_key}",
            "Content-Type": "application/json",
        }

    async def _fetch_provider_plans(
        self, client: httpx.AsyncClient, provider_id: str, preferences: Preferences
    ) -> List[Plan]:
        endpoint = self.settings.endpoint_for(provider_id)
        resp = await client.post(
            f"{endpoint.base_url}/plans/search",
            json=preferences,
            headers=self._headers(provider_id),
        )
        resp.raise_for_status()
        payload = resp.json()
        records = payload.get("plans", []) if isinstance(payload, dict) else payload
        plans: List[Plan] = []
        for record in records or []:
            record = dict(record)
            record.setdefault("apiSource", provider_id)
            plans.append(plan_from_dict(record))
        return plans

    async def list_plans(self, preferences: Preferences) -> List[Plan]:
        async with self._session() as client:
            batches = await asyncio.gather(
                *(
                    self._fetch_provider_plans(client, provider_id, preferences)
                    for provider_id in self.settings.providers
                )
            )
        return [plan for batch in batches for plan in batch]

    async def find_plan(self, plan_id: Any, provider_hint: Optional[str] = None) -> Optional[Plan]:
        return match_plan_id(await self.list_plans({}), plan_id)

    async def list_providers(self) -> List[ProviderInfo]:
        return [info for info in provider_directory() if info.id in self.settings.providers]

    async def submit(self, user_data: UserData, selected_plan: Mapping[str, Any]) -> SubmissionReceipt:
        provider_id = selected_plan.get("apiSource") or selected_plan.get("api_source")
        if not provider_id:
            raise ValueError("Selected plan does not name its provider (apiSource).")
        endpoint = self.settings.endpoint_for(provider_id)
        async with self._session() as client:
            resp = await client.post(
                f"{endpoint.base_url}/selections",
                json={"userData": user_data, "selectedPlan": dict(selected_plan)},
                headers=self._headers(provider_id),
            )
            resp.raise_for_status()
            payload = resp.json()
        return SubmissionReceipt(
            reference_id=payload.get("referenceId") or make_reference_id(),
            message=payload.get("message") or SUBMISSION_MESSAGE,
            next_steps=list(payload.get("nextSteps") or NEXT_STEPS),
            success=bool(payload.get("success", True)),
        )
