from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO

from connchk.checks.dispatch import check
from connchk.checks.results import CheckFailure, CheckResult
from connchk.config import settings
from connchk.formatting import format_result
from connchk.models import NetworkResources, Target
from connchk.reporting import report

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _run_one(index: int, target: Target) -> tuple[int, CheckResult]:
    start = time.perf_counter()
    try:
        check(target)
    except CheckFailure as e:
        res = CheckResult(ok=False, latency_ms=_elapsed_ms(start), status_code=e.status_code, error=str(e))
    except Exception as e:
        # recorded like any other failure
        logger.exception("unexpected error checking %r", target.description)
        res = CheckResult(ok=False, latency_ms=_elapsed_ms(start), error=f"{e.__class__.__name__}: {e}")
    else:
        res = CheckResult(ok=True, latency_ms=_elapsed_ms(start))
    logger.debug("checked %r ok=%s in %sms", target.description, res.ok, res.latency_ms)
    return index, res


def _pool_size(count: int, max_workers: int | None) -> int:
    limit = max_workers or settings.CONNCHK_MAX_WORKERS
    if limit is None or limit <= 0:
        return count
    return min(count, limit)


def run_checks(resources: NetworkResources, max_workers: int | None = None) -> list[CheckResult]:
    """
    Check every target concurrently and record each outcome on its target.

    Workers only return ``(index, result)``; result slots are written here on
    the calling thread, once every check has finished, so the list and the
    targets stay in declaration order whatever order the checks complete in.
    """
    targets = resources.target
    if not targets:
        return []

    for t in targets:
        if t.result is not None:
            raise RuntimeError(f"target {t.description!r} was already checked")

    results: list[CheckResult | None] = [None] * len(targets)
    workers = _pool_size(len(targets), max_workers)
    logger.debug("dispatching %d checks on %d threads", len(targets), workers)

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="connchk") as pool:
        futures = [pool.submit(_run_one, i, t) for i, t in enumerate(targets)]
        outcomes = [f.result() for f in futures]

    for index, res in outcomes:
        results[index] = res
        targets[index].record(format_result(targets[index].description, res))

    return results


def check_resources(
    resources: NetworkResources,
    stream: TextIO | None = None,
    max_workers: int | None = None,
) -> list[CheckResult]:
    results = run_checks(resources, max_workers=max_workers)
    report(resources, stream=stream)
    return results
