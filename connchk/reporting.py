from __future__ import annotations

import sys
from typing import TextIO

from connchk.models import NetworkResources


def report_lines(resources: NetworkResources) -> list[str]:
    """Result lines in declaration order; unchecked targets are skipped."""
    return [t.result for t in resources.target if t.result]


def report(resources: NetworkResources, stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in report_lines(resources):
        print(line, file=out)
    out.flush()
