"""QRNG fetch orchestration.

This module holds the two flows the CLI exposes (lotto draw and random
array). Side-effects such as printing or spinners stay in the UI layer; the
pipeline reports progress only through `PipelineHooks`, which makes the flows
reusable from tests or other entry-points.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable

from core.config import AppSettings
from core.domain.models import FetchOutcome, LottoResult, RandomArrayResult, RequestParameters
from core.interfaces.source import RandomSource
from core.services.lotto import LOTTO_REQUEST, draw_lotto_numbers

logger = logging.getLogger(__name__)


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    intention: Callable[[float], None] | None = None
    outcome: Callable[[FetchOutcome], None] | None = None


@dataclass
class LottoRun:
    """Output of a lotto invocation."""

    outcome: FetchOutcome
    result: LottoResult | None = None


@dataclass
class RandomArrayRun:
    """Output of a random-array invocation."""

    outcome: FetchOutcome
    result: RandomArrayResult | None = None


def _notify_outcome(hooks: PipelineHooks, outcome: FetchOutcome) -> None:
    logger.debug("QRNG outcome: %s (status=%s)", outcome.kind.value, outcome.status_code)
    if hooks.outcome:
        hooks.outcome(outcome)


async def run_lotto(
    source: RandomSource,
    *,
    settings: AppSettings | None = None,
    hooks: PipelineHooks | None = None,
) -> LottoRun:
    """Fetch the fixed 10 x uint8 request and derive the lotto numbers."""

    settings = settings or AppSettings()
    hooks = hooks or PipelineHooks()

    delay = settings.intention_delay_seconds
    if hooks.intention:
        hooks.intention(delay)
    if delay > 0:
        await asyncio.sleep(delay)

    outcome = await source.fetch(LOTTO_REQUEST)
    _notify_outcome(hooks, outcome)
    if not outcome.ok:
        return LottoRun(outcome=outcome)

    return LottoRun(outcome=outcome, result=draw_lotto_numbers(outcome.values))


async def run_random_array(
    source: RandomSource,
    params: RequestParameters,
    *,
    hooks: PipelineHooks | None = None,
) -> RandomArrayRun:
    """Fetch `params` and pass the decoded values through unchanged."""

    hooks = hooks or PipelineHooks()

    outcome = await source.fetch(params)
    _notify_outcome(hooks, outcome)
    if not outcome.ok:
        return RandomArrayRun(outcome=outcome)

    return RandomArrayRun(
        outcome=outcome,
        result=RandomArrayResult(params=params, values=outcome.values),
    )
