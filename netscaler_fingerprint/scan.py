#
# file:     netscaler_fingerprint/scan.py
# author:   Fox-IT Security Research Team <srt@fox-it.com>
#
# Scan a list of hosts concurrently, one classified result per host.
#
from __future__ import annotations

import asyncio
import ipaddress
import logging
from typing import Iterable, Iterator

import httpx

from netscaler_fingerprint.catalog import VersionCatalog
from netscaler_fingerprint.probe import (
    DEFAULT_CONCURRENCY,
    STATUS_INVALID_HOST,
    STATUS_NETWORK_ERROR,
    ConcurrencyGate,
    ProbeOutcome,
    describe_error,
    make_client,
    probe_host,
)
from netscaler_fingerprint.sink import ResultSink

log = logging.getLogger(__name__)

INVALID_IP_ADDRESS = "Invalid IP address"


def is_ip_literal(token: str) -> bool:
    """Return True if token is an IPv4 or IPv6 address.

    >>> is_ip_literal("10.0.0.1"), is_ip_literal("::1"), is_ip_literal("not-an-ip")
    (True, True, False)
    """
    try:
        ipaddress.ip_address(token)
    except ValueError:
        return False
    return True


def read_hosts(lines: Iterable[bytes | str]) -> Iterator[str]:
    """Yield host tokens from a line based host list, dropping blank and undecodable lines.

    >>> list(read_hosts([b"10.0.0.1\\n", b"\\n", b"\\xff\\xfe\\n", "  ::1  "]))
    ['10.0.0.1', '::1']
    """
    for lineno, line in enumerate(lines, start=1):
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError:
                log.debug("Dropping undecodable host line %d: %r", lineno, line)
                continue
        host = line.strip()
        if host:
            yield host


async def scan_host(
    host: str,
    client: httpx.AsyncClient,
    gate: ConcurrencyGate,
    catalog: VersionCatalog,
) -> ProbeOutcome:
    if not is_ip_literal(host):
        return ProbeOutcome(host=host, diagnostic=INVALID_IP_ADDRESS, status=STATUS_INVALID_HOST)
    try:
        return await probe_host(host, client, gate, catalog)
    except Exception as exc:
        log.debug("Exception while scanning %s", host, exc_info=True)
        return ProbeOutcome(host=host, diagnostic=describe_error(exc), status=STATUS_NETWORK_ERROR)


async def scan_hosts(
    hosts: Iterable[str],
    catalog: VersionCatalog,
    sink: ResultSink,
    *,
    concurrency: int = DEFAULT_CONCURRENCY,
    timeout: float | None = 5.0,
    client: httpx.AsyncClient | None = None,
) -> int:
    """Scan all hosts and emit one outcome per host to the sink, in completion order.

    Every host is dispatched up front, the ConcurrencyGate limits how many talk to the network.
    Returns the number of hosts processed.
    """
    gate = ConcurrencyGate(concurrency)
    owns_client = client is None
    if client is None:
        client = make_client(timeout)

    async def run(host: str) -> None:
        sink.emit(await scan_host(host, client, gate, catalog))

    try:
        tasks = [asyncio.create_task(run(host)) for host in hosts]
        log.info("Dispatched %d hosts (concurrency=%d)", len(tasks), concurrency)
        await asyncio.gather(*tasks)
    finally:
        if owns_client:
            await client.aclose()
    log.info("Scan finished, peak concurrency %d", gate.peak)
    return len(tasks)
