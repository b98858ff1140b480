"""Command line front end: decode SMS-DELIVER PDUs and build SMS-SUBMIT PDUs."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .sms import DeliveredMessage, MessageSubmit, UserData
from .sms import decode_deliver, encode_submit, submit_tpdu_length
from .utils import Address

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
logger = logging.getLogger("pdu_lib")


def print_message(message: DeliveredMessage, out: TextIO) -> None:
    header = message.user_data.header
    print(f"SMSC: {message.service_center or 'default'}", file=out)
    print(f"FROM: {message.sender}", file=out)
    print(f"TIMESTAMP: {message.time_stamp.isoformat()}", file=out)
    print(f"TIME ZONE: {message.time_zone_offset * 15:+d} min", file=out)
    print(f"Protocol ID: 0x{message.protocol_id:02X}", file=out)
    print(f"Encoding: {message.user_data.encoding.value}", file=out)
    print(f"More Messages: {message.command_info.more_messages_to_send}", file=out)
    if header is not None and header.concatenated_message is not None:
        part = header.concatenated_message
        print(
            f"Part: {part.sequence_number}/{part.number_of_messages} "
            f"(ref {part.reference_number})",
            file=out,
        )
    print(f"TEXT: {message.text}", file=out)


def _decode(args: argparse.Namespace, out: TextIO) -> int:
    for i, pdu in enumerate(args.pdu, 1):
        logger.debug("Decoding PDU #%d (%d hex chars)", i, len(pdu))
        message = decode_deliver(pdu, strict_encoding=not args.lenient)
        print_message(message, out)
    return 0


def _encode(args: argparse.Namespace, out: TextIO) -> int:
    submit = MessageSubmit.new_default(
        reject_duplicates=args.reject_duplicates,
        status_report_request=False,
        destination_address=Address.from_string(args.to),
        user_data=UserData.new_utf16(args.text),
    )
    print(f"AT+CMGS={submit_tpdu_length(submit)}", file=out)
    print(encode_submit(submit, include_service_center=args.with_smsc), file=out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdu_lib", description="Decode and encode PDU-mode SMS messages"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    decode = commands.add_parser("decode", help="Decode SMS-DELIVER hex PDUs")
    decode.add_argument("pdu", nargs="+", help="Hex PDU as reported by the modem")
    decode.add_argument(
        "--lenient",
        action="store_true",
        help="Keep bodies with unknown data coding schemes as hex",
    )
    decode.set_defaults(handler=_decode)

    encode = commands.add_parser("encode", help="Build a UTF-16 SMS-SUBMIT PDU")
    encode.add_argument("--to", required=True, help="Destination number")
    encode.add_argument("--text", required=True, help="Message text")
    encode.add_argument("--reject-duplicates", action="store_true")
    encode.add_argument(
        "--with-smsc",
        action="store_true",
        help="Prefix the default service centre octet (00)",
    )
    encode.set_defaults(handler=_encode)
    return parser


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    out = out or sys.stdout
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT
    )
    try:
        return args.handler(args, out)
    except ValueError as exc:
        # ParseError, IncompleteInput and UnsupportedFeature are ValueErrors.
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


__all__ = ["build_parser", "main", "print_message"]
