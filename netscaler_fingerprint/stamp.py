#
# file:     netscaler_fingerprint/stamp.py
# author:   Fox-IT Security Research Team <srt@fox-it.com>
#
# Extract the build timestamp from the GZIP header of rdx_en.json.gz.
#
# The GZIP header stores the MTIME of the compressed file at offset 4 (uint32, little endian).
# NetScaler builds ship this file with the FNAME flag set, so a valid response starts with 1f 8b 08 08.
#
from __future__ import annotations

from datetime import datetime, timezone

GZIP_MAGIC = b"\x1f\x8b\x08\x08"
MIN_BODY_LENGTH = 16


class BuildStampError(ValueError):
    status = "invalid"


class TooShortResponse(BuildStampError):
    status = "too_short"


class BadMagic(BuildStampError):
    status = "bad_magic"

    def __init__(self, message: str = "Invalid gzip header"):
        super().__init__(message)


class TimestampOutOfRange(BuildStampError):
    status = "timestamp_out_of_range"


def epoch_to_rfc3339(seconds: int) -> str:
    """Render epoch seconds as an RFC3339 UTC timestamp, as used in the version table.

    Raises TimestampOutOfRange if the value does not fit in a datetime.

    >>> epoch_to_rfc3339(1720110688)
    '2024-07-04T16:31:28+00:00'
    >>> epoch_to_rfc3339(0)
    '1970-01-01T00:00:00+00:00'
    """
    try:
        dt = datetime.fromtimestamp(seconds, timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise TimestampOutOfRange(f"Timestamp out of range: {seconds}") from exc
    return dt.isoformat()


def extract_build_stamp(body: bytes) -> str:
    """Return the RFC3339 build timestamp embedded in a rdx_en.json.gz response body.

    Checks are done in order, the first failing one decides the error:
    TooShortResponse, BadMagic, TimestampOutOfRange.

    >>> extract_build_stamp(b"\\x1f\\x8b\\x08\\x08" + (1720110688).to_bytes(4, "little") + bytes(8))
    '2024-07-04T16:31:28+00:00'
    >>> extract_build_stamp(b"\\x00" * 16)
    Traceback (most recent call last):
      ...
    netscaler_fingerprint.stamp.BadMagic: Invalid gzip header
    """
    if len(body) < MIN_BODY_LENGTH:
        raise TooShortResponse(f"Response too short: {len(body)} bytes")
    if body[:4] != GZIP_MAGIC:
        raise BadMagic()
    stamp = int.from_bytes(body[4:8], "little")
    return epoch_to_rfc3339(stamp)
