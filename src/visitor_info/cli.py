"""Command line interface for ad-hoc client information lookups."""

import argparse
import asyncio
import json
import logging
import sys

from visitor_info.adapters.config import AppConfig
from visitor_info.bootstrap import build_client_info_service, configure_logging
from visitor_info.domain.errors import GeoDatabaseUnavailableError
from visitor_info.domain.models import ClientInfoPayload, HeaderSet

logger = logging.getLogger(__name__)

EXIT_GEO_DATABASE_UNAVAILABLE = 2


def _parse_header(value: str) -> tuple[str, str]:
    name, separator, header_value = value.partition(":")
    if not separator or not name.strip():
        raise argparse.ArgumentTypeError(f"Header must be NAME:VALUE, got '{value}'")
    return name.strip(), header_value.strip()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="visitor-info",
        description="Resolve client IP, location, device and browser for a request snapshot.",
    )
    parser.add_argument("--ip", help="Client IP supplied by the tracker payload")
    parser.add_argument("--user-agent", help="User agent supplied by the tracker payload")
    parser.add_argument("--screen", help="Screen size as WIDTHxHEIGHT, e.g. 1920x1080")
    parser.add_argument(
        "--header",
        action="append",
        default=[],
        type=_parse_header,
        metavar="NAME:VALUE",
        help="Request header (repeatable)",
    )
    parser.add_argument(
        "--check-blocked",
        action="store_true",
        help="Only report whether the resolved IP is on the ignore list",
    )
    return parser


async def run(args: argparse.Namespace, config: AppConfig) -> dict:
    """Resolve client information for the parsed arguments."""
    service = build_client_info_service(config)
    headers = HeaderSet(args.header)

    if args.check_blocked:
        ip = args.ip or service.resolve_ip(headers) or ""
        return {"ip": ip, "blocked": service.is_blocked(ip)}

    payload = ClientInfoPayload(ip=args.ip, user_agent=args.user_agent, screen=args.screen)
    record = await service.build_client_info(headers, payload)
    return record.to_payload()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    config = AppConfig()
    configure_logging(config.log_level)

    try:
        result = asyncio.run(run(args, config))
    except GeoDatabaseUnavailableError as e:
        logger.error(str(e))
        return EXIT_GEO_DATABASE_UNAVAILABLE

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
