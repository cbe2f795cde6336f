from __future__ import annotations

from connchk.checks.http_check import run_http_form, run_http_get, run_http_json
from connchk.checks.tcp_check import run_tcp
from connchk.models import Target


def check(target: Target) -> None:
    """
    Run the network check for one target.

    Returns on success and raises ``CheckFailure`` otherwise. The target
    itself is never mutated here; the runner records the outcome.
    """
    if target.kind == "Tcp":
        run_tcp(target.address)
        return

    opts = target.http_options
    mode = target.request_mode
    if mode == "form":
        run_http_form(target.address, opts.params, opts.ok)
    elif mode == "json":
        run_http_json(target.address, opts.json_body, opts.ok)
    else:
        run_http_get(target.address)
