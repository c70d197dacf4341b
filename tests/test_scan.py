"""Tests for scanning a host list."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from netscaler_fingerprint import scan
from netscaler_fingerprint.scan import is_ip_literal, read_hosts, scan_host, scan_hosts
from netscaler_fingerprint.probe import ConcurrencyGate, ProbeOutcome
from netscaler_fingerprint.sink import render_line

from conftest import make_certificate_der, mock_client, rdx_en_body, respond


class ListSink:
    def __init__(self):
        self.outcomes: list[ProbeOutcome] = []

    def emit(self, outcome: ProbeOutcome) -> None:
        self.outcomes.append(outcome)

    def by_host(self) -> dict[str, ProbeOutcome]:
        return {outcome.host: outcome for outcome in self.outcomes}


class TestIsIpLiteral:
    @pytest.mark.parametrize("token", ["192.168.1.1", "0.0.0.0", "::1", "2001:db8::1"])
    def test_valid(self, token):
        assert is_ip_literal(token)

    @pytest.mark.parametrize(
        "token", ["not-an-ip", "", "256.1.1.1", "citrix.example.com", "10.0.0.1:443", "https://10.0.0.1"]
    )
    def test_invalid(self, token):
        assert not is_ip_literal(token)


class TestReadHosts:
    def test_file_lines(self, tmp_path):
        path = tmp_path / "hosts.txt"
        path.write_bytes(b"10.0.0.1\r\n\r\n10.0.0.2\n\xc3\x28\nnot-an-ip\n")
        with open(path, "rb") as fh:
            assert list(read_hosts(fh)) == ["10.0.0.1", "10.0.0.2", "not-an-ip"]


class TestScanHost:
    @pytest.mark.asyncio
    async def test_invalid_ip_makes_no_request(self, catalog):
        def handler(request):
            raise AssertionError("no request expected")

        gate = ConcurrencyGate(1)
        async with mock_client(handler) as client:
            outcome = await scan_host("not-an-ip", client, gate, catalog)
        assert outcome == ProbeOutcome(host="not-an-ip", diagnostic="Invalid IP address", status="invalid_host")
        assert gate.peak == 0

    @pytest.mark.asyncio
    async def test_unexpected_error_is_classified(self, catalog, monkeypatch):
        async def broken_probe(*args, **kwargs):
            raise RuntimeError("unexpected")

        monkeypatch.setattr(scan, "probe_host", broken_probe)
        async with mock_client(lambda request: httpx.Response(200)) as client:
            outcome = await scan_host("10.0.0.1", client, ConcurrencyGate(), catalog)
        assert outcome.status == "network_error"
        assert outcome.diagnostic == "unexpected"


class TestScanHosts:
    @pytest.mark.asyncio
    async def test_one_outcome_per_host(self, catalog):
        def handler(request):
            host = request.url.host
            if host == "10.0.0.1":
                return respond(200, rdx_en_body(1720110688))
            if host == "10.0.0.2":
                return respond(200, b"short")
            if host == "10.0.0.3":
                return respond(200, b"<html>not a netscaler</html>")
            raise httpx.ConnectError("Connection refused", request=request)

        hosts = ["10.0.0.1", "10.0.0.2", "10.0.0.3", "10.0.0.4", "not-an-ip"]
        sink = ListSink()
        async with mock_client(handler) as client:
            count = await scan_hosts(hosts, catalog, sink, client=client)

        assert count == 5
        assert len(sink.outcomes) == 5
        results = sink.by_host()
        assert results["10.0.0.1"].version == "14.1-25.56"
        assert results["10.0.0.2"].status == "too_short"
        assert results["10.0.0.3"].build_timestamp == "Invalid gzip header"
        assert results["10.0.0.4"].diagnostic == "Connection refused"
        assert results["not-an-ip"].diagnostic == "Invalid IP address"

    @pytest.mark.asyncio
    async def test_certificate_name_fills_identity(self, catalog):
        der = make_certificate_der("vpn.example.com")

        def handler(request):
            if request.url.host == "10.0.0.1":
                return respond(200, rdx_en_body(1720110688), der=der)
            return respond(200, b"short", der=der)

        sink = ListSink()
        async with mock_client(handler) as client:
            await scan_hosts(["10.0.0.1", "10.0.0.2"], catalog, sink, client=client)
        lines = sorted(render_line(outcome) for outcome in sink.outcomes)
        assert lines == [
            "10.0.0.1,14.1-25.56,2024-07-04T16:31:28+00:00,vpn.example.com",
            "10.0.0.2,Unknown,Unknown,vpn.example.com",
        ]

    @pytest.mark.asyncio
    async def test_duplicate_hosts_each_get_a_result(self, catalog):
        handler = lambda request: respond(200, rdx_en_body(1720110688))  # noqa: E731
        sink = ListSink()
        async with mock_client(handler) as client:
            await scan_hosts(["10.0.0.1"] * 3, catalog, sink, client=client)
        assert [o.version for o in sink.outcomes] == ["14.1-25.56"] * 3

    @pytest.mark.asyncio
    async def test_concurrency_bound(self, catalog):
        active = 0
        peak = 0

        async def handler(request):
            nonlocal active, peak
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0.01)
            active -= 1
            return respond(200, rdx_en_body(1720110688))

        hosts = [f"10.0.0.{i}" for i in range(1, 31)]
        sink = ListSink()
        async with mock_client(handler) as client:
            await scan_hosts(hosts, catalog, sink, concurrency=4, client=client)
        assert len(sink.outcomes) == 30
        assert peak == 4

    @pytest.mark.asyncio
    async def test_invalid_concurrency(self, catalog):
        with pytest.raises(ValueError):
            await scan_hosts([], catalog, ListSink(), concurrency=0)

    @pytest.mark.asyncio
    async def test_empty_host_list(self, catalog):
        async with mock_client(lambda request: httpx.Response(200)) as client:
            assert await scan_hosts([], catalog, ListSink(), client=client) == 0
