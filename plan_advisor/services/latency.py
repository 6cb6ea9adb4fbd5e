"""Simulated network latency and failure injection for mock providers."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Dict, Mapping, Optional


LIST_PLANS = "list_plans"
PLAN_DETAILS = "plan_details"
SUBMIT = "submit"
LIST_PROVIDERS = "list_providers"

DEFAULT_DELAYS: Dict[str, float] = {
    LIST_PLANS: 1.0,
    PLAN_DETAILS: 0.8,
    SUBMIT: 1.2,
    LIST_PROVIDERS: 0.5,
}


class SimulatedLatency:
    """Waits a fixed delay per operation and optionally raises afterwards.

    ``failures`` maps an operation name to the exception to raise once its
    delay has elapsed, which lets callers exercise error paths without a
    real upstream.
    """

    def __init__(
        self,
        delays: Optional[Mapping[str, float]] = None,
        failures: Optional[Mapping[str, BaseException]] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.delays = dict(DEFAULT_DELAYS)
        if delays:
            self.delays.update(delays)
        self.failures = dict(failures or {})
        self._sleep = sleep

    async def wait(self, operation: str) -> None:
        delay = self.delays.get(operation, 0.0)
        if delay > 0:
            await self._sleep(delay)
        failure = self.failures.get(operation)
        if failure is not None:
            raise failure


class NoLatency(SimulatedLatency):
    def __init__(self, failures: Optional[Mapping[str, BaseException]] = None) -> None:
        super().__init__(delays={name: 0.0 for name in DEFAULT_DELAYS}, failures=failures)
