#
# file:     netscaler_fingerprint/probe.py
# author:   Fox-IT Security Research Team <srt@fox-it.com>
#
# Probe a single NetScaler host: fetch rdx_en.json.gz, capture the certificate CN and resolve the version.
#
from __future__ import annotations

import asyncio
import ipaddress
import logging
import ssl
from contextlib import asynccontextmanager
from typing import AsyncIterator, NamedTuple

import httpx

from netscaler_fingerprint.catalog import VersionCatalog
from netscaler_fingerprint.certificate import extract_subject
from netscaler_fingerprint.stamp import BadMagic, BuildStampError, extract_build_stamp

log = logging.getLogger(__name__)

RDX_EN_PATH = "/vpn/js/rdx/core/lang/rdx_en.json.gz"
DEFAULT_CONCURRENCY = 256

STATUS_OK = "ok"
STATUS_INVALID_HOST = "invalid_host"
STATUS_NETWORK_ERROR = "network_error"


class ProbeOutcome(NamedTuple):
    host: str
    version: str | None = None
    build_timestamp: str | None = None
    subject: str | None = None
    diagnostic: str | None = None
    status: str = STATUS_OK


class ConcurrencyGate:
    """Bound the number of probes that have a network operation in flight.

    >>> ConcurrencyGate(0)
    Traceback (most recent call last):
      ...
    ValueError: concurrency capacity must be at least 1, got 0
    """

    def __init__(self, capacity: int = DEFAULT_CONCURRENCY):
        if capacity < 1:
            raise ValueError(f"concurrency capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self.in_flight = 0
        self.peak = 0
        self._semaphore = asyncio.Semaphore(capacity)

    @asynccontextmanager
    async def slot(self) -> AsyncIterator[None]:
        async with self._semaphore:
            self.in_flight += 1
            self.peak = max(self.peak, self.in_flight)
            try:
                yield
            finally:
                self.in_flight -= 1


def make_ssl_context() -> ssl.SSLContext:
    """Return a TLS client context that accepts any certificate.

    Scanned hosts are IP addresses with certificates for unknown names, we only want the identity.
    Legacy TLS support is enabled for old NetScaler devices.
    """
    ssl_ctx = ssl.SSLContext(protocol=ssl.PROTOCOL_TLS_CLIENT)
    ssl_ctx.options |= 0x4  # OP_LEGACY_SERVER_CONNECT
    ssl_ctx.check_hostname = False
    ssl_ctx.verify_mode = ssl.CERT_NONE
    ssl_ctx.set_ciphers("ALL:@SECLEVEL=0")
    return ssl_ctx


def make_client(timeout: float | None = 5.0) -> httpx.AsyncClient:
    return httpx.AsyncClient(verify=make_ssl_context(), timeout=timeout)


def probe_url(host: str) -> str:
    """Return the rdx_en.json.gz URL for an IP address.

    >>> probe_url("192.168.1.1")
    'https://192.168.1.1/vpn/js/rdx/core/lang/rdx_en.json.gz'
    >>> probe_url("2001:db8::1")
    'https://[2001:db8::1]/vpn/js/rdx/core/lang/rdx_en.json.gz'
    """
    if ipaddress.ip_address(host).version == 6:
        host = f"[{host}]"
    return f"https://{host}{RDX_EN_PATH}"


def describe_error(exc: BaseException) -> str:
    """Return a one line description of a network error.

    >>> describe_error(httpx.ConnectError("[Errno 111] Connection refused"))
    '[Errno 111] Connection refused'
    >>> describe_error(httpx.ReadTimeout(""))
    'ReadTimeout'
    """
    return str(exc).replace("\n", " ").strip() or type(exc).__name__


def resolve(outcome: ProbeOutcome, catalog: VersionCatalog) -> ProbeOutcome:
    """Join the build timestamp of an outcome with the version table."""
    if outcome.build_timestamp is None:
        return outcome
    return outcome._replace(version=catalog.lookup(outcome.build_timestamp))


async def fetch_rdx_en(client: httpx.AsyncClient, url: str) -> tuple[bytes, str | None]:
    """Return the raw response body and the certificate CN of the TLS session."""
    async with client.stream("GET", url) as response:
        # Grab the TLS session before the body is consumed, the connection may be released afterwards
        network_stream = response.extensions.get("network_stream")
        ssl_object = network_stream.get_extra_info("ssl_object") if network_stream else None
        subject = extract_subject(ssl_object)

        # Raw bytes, the gzip file itself is what we are after (not a decoded Content-Encoding)
        body = b"".join([chunk async for chunk in response.aiter_raw()])
    return body, subject


async def probe_host(
    host: str,
    client: httpx.AsyncClient,
    gate: ConcurrencyGate,
    catalog: VersionCatalog,
) -> ProbeOutcome:
    url = probe_url(host)
    async with gate.slot():
        log.info("Scanning %r", url)
        try:
            body, subject = await fetch_rdx_en(client, url)
        except (httpx.HTTPError, OSError) as exc:
            log.info("Network error on %s: %r", host, exc)
            return ProbeOutcome(host=host, diagnostic=describe_error(exc), status=STATUS_NETWORK_ERROR)

    try:
        build_timestamp = extract_build_stamp(body)
    except BadMagic as exc:
        outcome = ProbeOutcome(host=host, build_timestamp=str(exc), subject=subject, status=exc.status)
    except BuildStampError as exc:
        log.info("No build timestamp for %s: %s", host, exc)
        outcome = ProbeOutcome(host=host, subject=subject, status=exc.status)
    else:
        outcome = ProbeOutcome(host=host, build_timestamp=build_timestamp, subject=subject)

    outcome = resolve(outcome, catalog)
    log.info(
        "Extracted timestamp: host=%s, dt=%s, version=%s", host, outcome.build_timestamp, outcome.version
    )
    return outcome
