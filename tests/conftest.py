"""Shared test fixtures."""

from __future__ import annotations

import datetime

import httpx
import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from netscaler_fingerprint.catalog import VersionCatalog
from netscaler_fingerprint.stamp import GZIP_MAGIC


def rdx_en_body(stamp: int) -> bytes:
    """Start of a rdx_en.json.gz file as served by NetScaler."""
    return GZIP_MAGIC + stamp.to_bytes(4, "little") + b"\x00\x03rdx_en.json\x00"


def make_certificate_der(common_name: str | None = "gateway.example.com") -> bytes:
    key = ec.generate_private_key(ec.SECP256R1())
    attributes = [x509.NameAttribute(NameOID.ORGANIZATION_NAME, "Example")]
    if common_name is not None:
        attributes.append(x509.NameAttribute(NameOID.COMMON_NAME, common_name))
    name = x509.Name(attributes)
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=1))
        .sign(key, hashes.SHA256())
    )
    return cert.public_bytes(serialization.Encoding.DER)


class Body(httpx.AsyncByteStream):
    """Response body that is only read when the client streams it, like a real connection."""

    def __init__(self, data: bytes):
        self.data = data

    async def __aiter__(self):
        yield self.data


class FakeSSLObject:
    def __init__(self, der: bytes | None):
        self.der = der

    def getpeercert(self, binary_form: bool = False):
        assert binary_form
        return self.der


class FakeNetworkStream:
    def __init__(self, der: bytes | None):
        self.ssl_object = FakeSSLObject(der)

    def get_extra_info(self, info: str):
        return self.ssl_object if info == "ssl_object" else None


def respond(status_code: int, body: bytes, *, der: bytes | None = None, headers=None) -> httpx.Response:
    """Mock response served over a TLS session presenting the certificate ``der`` (if any)."""
    extensions = {"network_stream": FakeNetworkStream(der)} if der is not None else {}
    return httpx.Response(status_code, headers=headers, stream=Body(body), extensions=extensions)


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture(scope="session")
def catalog():
    return VersionCatalog.default()


@pytest.fixture(scope="session")
def certificate_der():
    return make_certificate_der()


def _der_header(der: bytes, offset: int) -> tuple[int, int]:
    """Return (header length, content length) of the TLV at offset."""
    first = der[offset + 1]
    if first < 0x80:
        return 2, first
    num_octets = first & 0x7F
    return 2 + num_octets, int.from_bytes(der[offset + 2 : offset + 2 + num_octets], "big")


def _der_length_octets(length: int) -> bytes:
    if length < 0x80:
        return bytes([length])
    octets = length.to_bytes((length.bit_length() + 7) // 8, "big")
    return bytes([0x80 | len(octets)]) + octets


def strip_version(der: bytes) -> bytes:
    """Turn a DER v3 certificate into a v1 one by dropping the explicit [0] version field."""
    cert_header, _ = _der_header(der, 0)
    tbs_header, tbs_length = _der_header(der, cert_header)
    tbs = der[cert_header + tbs_header : cert_header + tbs_header + tbs_length]
    assert tbs[:5] == b"\xa0\x03\x02\x01\x02"
    tbs = tbs[5:]
    rest = der[cert_header + tbs_header + tbs_length :]
    content = b"\x30" + _der_length_octets(len(tbs)) + tbs + rest
    return b"\x30" + _der_length_octets(len(content)) + content
