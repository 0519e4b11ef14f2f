"""
convert_status.py
─────────────────
Developer tool: converts an email recipient status between its JSON document
form and the hex-encoded binary wire form, or checks a recipient address.

Run with:
    python3 convert_status.py to-wire '{"recipient":"a@example.com","delivery_status":{"status":"SUCCESS"}}'
    python3 convert_status.py to-json 0d61406578616d706c652e636f6d0753554343455353 00
    python3 convert_status.py check-email a@example.com
"""

import argparse
import sys
from typing import List, Optional

from models.email_recipient_status import EmailRecipientStatus
from utils.email_validation import validate_email
from utils.errors import DecodeError, NotificationModelError
from utils.log_setup import configure_logging


def _to_wire(args) -> int:
    status = EmailRecipientStatus.from_json(args.document)
    print(status.to_bytes().hex())
    return 0


def _to_json(args) -> int:
    hex_text = "".join(args.hex)
    try:
        data = bytes.fromhex(hex_text)
    except ValueError as e:
        raise DecodeError(f"Input is not valid hex: {e}") from e
    status = EmailRecipientStatus.from_bytes(data)
    print(status.to_json())
    return 0


def _check_email(args) -> int:
    validate_email(args.address)
    print(f"✔ {args.address}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert email recipient delivery statuses between JSON and wire form.")
    parser.add_argument("--log-level", default=None, help="Logging level (default: NOTIFICATION_LOG_LEVEL or INFO).")
    sub = parser.add_subparsers(dest="command", required=True)

    to_wire = sub.add_parser("to-wire", help="JSON document -> hex encoded wire bytes.")
    to_wire.add_argument("document", help="JSON document of one recipient status.")
    to_wire.set_defaults(handler=_to_wire)

    to_json = sub.add_parser("to-json", help="Hex encoded wire bytes -> JSON document.")
    to_json.add_argument("hex", nargs="+", help="Hex string (spaces between groups are allowed).")
    to_json.set_defaults(handler=_to_json)

    check = sub.add_parser("check-email", help="Check the syntax of a recipient address.")
    check.add_argument("address", help="Email address to check.")
    check.set_defaults(handler=_check_email)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = configure_logging(args.log_level)
    try:
        return args.handler(args)
    except NotificationModelError as e:
        logger.debug(f"{args.command} failed: {e.code}")
        print(f"✗ {e.code}: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
