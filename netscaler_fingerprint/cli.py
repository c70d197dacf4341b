#
# file:     netscaler_fingerprint/cli.py
# author:   Fox-IT Security Research Team <srt@fox-it.com>
#
#  $ scan-netscaler-fingerprint -i hosts.txt -c 256 > results.txt
#
# Output is one line per host: ip,version,build_timestamp,certificate CN or error
#
from __future__ import annotations

import argparse
import asyncio
import logging

from netscaler_fingerprint.catalog import VersionCatalog
from netscaler_fingerprint.probe import DEFAULT_CONCURRENCY
from netscaler_fingerprint.scan import read_hosts, scan_hosts
from netscaler_fingerprint.sink import JsonSink, TextSink


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scan-netscaler-fingerprint",
        description="Fingerprint Citrix NetScaler versions and certificate names for a list of IP addresses",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-i",
        "--input",
        metavar="FILE",
        type=argparse.FileType("rb"),
        default="hosts.txt",
        help="input file with one IP address per line",
    )
    parser.add_argument(
        "-c",
        "--concurrency",
        metavar="N",
        type=positive_int,
        default=DEFAULT_CONCURRENCY,
        help="maximum number of hosts scanned at the same time",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        metavar="SECONDS",
        type=float,
        default=5.0,
        help="http timeout in seconds",
    )
    parser.add_argument(
        "--versions",
        metavar="FILE",
        help="version CSV (rdx_en_date,rdx_en_stamp,vhash,version) to use instead of the builtin table",
    )
    parser.add_argument(
        "--json",
        "-j",
        action="store_true",
        default=False,
        help="output scan results as JSON lines",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="increase verbosity"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    levels = [logging.WARNING, logging.INFO, logging.DEBUG]
    logging.basicConfig(
        level=levels[min(args.verbose, 2)],
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S%z",
    )

    if args.versions:
        try:
            catalog = VersionCatalog.from_file(args.versions)
        except OSError as exc:
            parser.error(f"can't open version table {args.versions!r}: {exc}")
    else:
        catalog = VersionCatalog.default()
    logging.info("Loaded %d version fingerprints", len(catalog))

    sink = JsonSink() if args.json else TextSink()
    with args.input:
        asyncio.run(
            scan_hosts(
                read_hosts(args.input),
                catalog,
                sink,
                concurrency=args.concurrency,
                timeout=args.timeout,
            )
        )
    return 0
