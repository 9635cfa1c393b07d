"""Fetch alert inputs concurrently and synthesize alerts."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Optional

from src.alerts.base import Alert, AlertInputs
from src.alerts.errors import DataFetchError
from src.alerts.synthesizer import synthesize
from src.api.provider import FinanceDataProvider

logger = logging.getLogger(__name__)


class AlertRefresher:
    """
    Runs a full refresh: fan out the three provider reads, join, synthesize.

    A refresh either returns a complete alert list or raises DataFetchError.
    A failed read is never treated as an empty dataset.
    """

    SOURCES = ('budgets', 'summary', 'bills')

    def __init__(self, provider: FinanceDataProvider, config: Optional[dict] = None,
                 timeout: Optional[float] = None, clock: Callable[[], datetime] = datetime.now):
        self.provider = provider
        self.config = config
        self.timeout = timeout
        self.clock = clock

    async def fetch_inputs(self) -> AlertInputs:
        """Issue the three reads concurrently and wait for all of them."""
        calls = (
            self.provider.list_budgets,
            self.provider.get_monthly_summary,
            self.provider.list_upcoming_recurring,
        )
        loop = asyncio.get_running_loop()
        # Not the default executor: asyncio.run joins that one on shutdown
        executor = ThreadPoolExecutor(max_workers=len(calls), thread_name_prefix="alert-fetch")
        try:
            gathered = asyncio.gather(
                *(loop.run_in_executor(executor, call) for call in calls),
                return_exceptions=True,
            )
            results = await asyncio.wait_for(gathered, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Alert input fetch timed out after {self.timeout}s")
            raise DataFetchError({'timeout': e}) from e
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        failures = {
            source: result
            for source, result in zip(self.SOURCES, results)
            if isinstance(result, BaseException)
        }
        if failures:
            for source, err in failures.items():
                logger.error(f"Error fetching {source}: {err}")
            raise DataFetchError(failures) from next(iter(failures.values()))

        budgets, summary, bills = results
        return AlertInputs(budgets=budgets, summary=summary, bills=bills)

    async def refresh(self) -> list[Alert]:
        """Fetch fresh inputs and return the synthesized alerts."""
        inputs = await self.fetch_inputs()
        alerts = synthesize(inputs.budgets, inputs.summary, inputs.bills,
                            now=self.clock(), config=self.config)
        logger.info(
            f"Synthesized {len(alerts)} alerts from {len(inputs.budgets)} budgets "
            f"and {len(inputs.bills)} bills"
        )
        return alerts

    def refresh_blocking(self) -> list[Alert]:
        """Run `refresh` to completion from synchronous code such as a Streamlit page."""
        return asyncio.run(self.refresh())
