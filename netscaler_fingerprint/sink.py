#
# file:     netscaler_fingerprint/sink.py
# author:   Fox-IT Security Research Team <srt@fox-it.com>
#
from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from netscaler_fingerprint.probe import ProbeOutcome

UNKNOWN = "Unknown"


class ResultSink(Protocol):
    def emit(self, outcome: ProbeOutcome) -> None: ...


def render_line(outcome: ProbeOutcome) -> str:
    """Render an outcome as ``host,version,build_timestamp,identity``.

    The identity is the certificate CN, the diagnostic when there is no CN, or Unknown.
    """
    identity = outcome.subject or outcome.diagnostic
    return ",".join(
        [
            outcome.host,
            outcome.version or UNKNOWN,
            outcome.build_timestamp or UNKNOWN,
            identity or UNKNOWN,
        ]
    )


class TextSink:
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout

    def emit(self, outcome: ProbeOutcome) -> None:
        print(render_line(outcome), file=self.stream, flush=True)


class JsonSink:
    """Write one JSON object per outcome, absent values as null."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout

    def emit(self, outcome: ProbeOutcome) -> None:
        jdict = {"scanned_at": datetime.now(timezone.utc).isoformat()}
        jdict.update(outcome._asdict())
        print(json.dumps(jdict), file=self.stream, flush=True)
