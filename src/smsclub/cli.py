from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from .client import SmsGatewayClient
from .config import get_settings
from .errors import SmsClubError


def build_client(args: argparse.Namespace) -> SmsGatewayClient:
    """Client from CLI flags, falling back to SMSCLUB_* env settings."""
    settings = get_settings()
    overrides: dict[str, Any] = {}
    if args.token is not None:
        overrides["token"] = args.token
    if args.integration_id is not None:
        overrides["integration_id"] = args.integration_id
    if overrides:
        settings = settings.model_copy(update=overrides)
    return SmsGatewayClient.from_settings(settings)


def run_command(client: SmsGatewayClient, args: argparse.Namespace) -> Any:
    if args.command == "balance":
        return client.get_balance()
    if args.command == "signatures":
        return client.get_signatures()
    if args.command == "status":
        return client.sms_status(args.ids)
    if args.command == "send":
        return client.send_sms(args.sender, args.message, args.phones)
    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smsclub",
        description="Send SMS and query the SMSClub account from the command line.",
    )
    parser.add_argument(
        "--token",
        type=str,
        default=None,
        help="API token (default: SMSCLUB_TOKEN env var).",
    )
    parser.add_argument(
        "--integration-id",
        type=str,
        default=None,
        help="Referral integration id (default: SMSCLUB_INTEGRATION_ID env var, 0 = none).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log outgoing requests.")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("balance", help="Show account balance.")
    sub.add_parser("signatures", help="List alpha-names available to the account.")

    status = sub.add_parser("status", help="Delivery status of sent messages.")
    status.add_argument("ids", nargs="+", help="SMS ids (max 100).")

    send = sub.add_parser("send", help="Send one message to up to 100 numbers.")
    send.add_argument("--sender", required=True, help="Alpha-name, 1-11 characters.")
    send.add_argument("--message", required=True, help="Message text.")
    send.add_argument("phones", nargs="+", help="Numbers in 380XXXXXXXXX form.")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        with build_client(args) as client:
            result = run_command(client, args)
    except SmsClubError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
