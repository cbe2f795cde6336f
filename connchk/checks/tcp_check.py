from __future__ import annotations

import logging
import socket

from connchk.checks.results import CheckFailure
from connchk.config import settings

logger = logging.getLogger(__name__)


def split_address(address: str) -> tuple[str, int]:
    host, sep, port = address.strip().rpartition(":")
    if not sep or not host or not port.isdigit():
        raise CheckFailure(f"invalid socket address: {address!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    port_num = int(port)
    if not 0 < port_num <= 65535:
        raise CheckFailure(f"invalid port in socket address: {address!r}")
    return host, port_num


def run_tcp(address: str) -> None:
    host, port = split_address(address)
    timeout = settings.CONNCHK_TIMEOUT_SECONDS
    try:
        if timeout is None:
            sock = socket.create_connection((host, port))
        else:
            sock = socket.create_connection((host, port), timeout=timeout)
    except OSError as exc:
        raise CheckFailure(str(exc)) from exc

    with sock:
        logger.debug("connected to %s:%s", host, port)
        try:
            sock.shutdown(socket.SHUT_RDWR)
        except OSError as exc:
            raise CheckFailure(f"shutdown failed: {exc}") from exc
