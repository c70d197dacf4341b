#
# file:     netscaler_fingerprint/certificate.py
# author:   Fox-IT Security Research Team <srt@fox-it.com>
#
# Capture the subject Common Name of the certificate a NetScaler presents.
#
# Certificate verification is disabled while scanning, so this is identity capture only:
# no chain, signature or expiry checks are done here.
#
from __future__ import annotations

import logging
import ssl

from cryptography import x509
from cryptography.x509.oid import NameOID

log = logging.getLogger(__name__)


def peer_certificate(ssl_object: ssl.SSLObject | None) -> bytes | None:
    """Return the DER encoded peer certificate, or None if there is none."""
    if ssl_object is None:
        return None
    return ssl_object.getpeercert(binary_form=True) or None


def der_length(der: bytes) -> int | None:
    """Return the total length of the outer DER TLV, or None if the header is broken.

    >>> der_length(b"\\x30\\x03\\x02\\x01\\x01")
    5
    >>> der_length(b"\\x30\\x82\\x01\\x00")
    260
    >>> der_length(b"\\x30") is None
    True
    """
    if len(der) < 2:
        return None
    first = der[1]
    if first < 0x80:
        return 2 + first
    num_octets = first & 0x7F
    if num_octets == 0 or len(der) < 2 + num_octets:
        return None
    return 2 + num_octets + int.from_bytes(der[2 : 2 + num_octets], "big")


def load_certificate(der: bytes) -> x509.Certificate | None:
    """Parse a DER certificate, None unless it is a well formed X.509 v3 certificate."""
    if der_length(der) != len(der):
        log.debug("Certificate has trailing or missing bytes, ignoring")
        return None
    try:
        cert = x509.load_der_x509_certificate(der)
        version = cert.version
    except (ValueError, x509.InvalidVersion) as exc:
        log.debug("Could not parse certificate: %s", exc)
        return None
    if version != x509.Version.v3:
        log.debug("Unsupported certificate version: %s", version)
        return None
    return cert


def common_name(cert: x509.Certificate) -> str | None:
    attributes = cert.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
    if not attributes:
        return None
    value = attributes[0].value
    return value.decode(errors="replace") if isinstance(value, bytes) else value


def extract_subject(ssl_object: ssl.SSLObject | None) -> str | None:
    """Return the subject CN of the peer certificate of a (possibly unverified) TLS session."""
    der = peer_certificate(ssl_object)
    if der is None:
        return None
    cert = load_certificate(der)
    if cert is None:
        return None
    return common_name(cert)
