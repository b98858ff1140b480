"""High level encode/decode helpers for PDU-mode SMS."""

from __future__ import annotations

import logging

from ..errors import ParseError, UnsupportedMessageType
from ..utils import (
    RELATIVE_FORMAT,
    HexReader,
    decode_address,
    decode_service_center,
    decode_timestamp,
    encode_address,
    encode_octet,
    encode_validity_period,
)
from .dcs import decode_data_coding_scheme, encode_data_coding_scheme
from .messages import (
    REJECT_DUPLICATES_BIT,
    VPF_SHIFT,
    CommandInfo,
    DeliveredMessage,
    MessageSubmit,
    MessageType,
)
from .user_data import decode_user_data, encode_user_data

logger = logging.getLogger(__name__)

# Service centre length 0: use the SMSC stored on the SIM.
DEFAULT_SERVICE_CENTER = "00"


def decode_deliver(pdu: str, *, strict_encoding: bool = True) -> DeliveredMessage:
    """Decode an SMS-DELIVER PDU as reported by ``AT+CMGL``/``AT+CMGR``.

    With ``strict_encoding=False`` an unrecognised data coding scheme yields
    :attr:`Encoding.UNKNOWN` user data holding the body as hex instead of
    raising :class:`UnsupportedEncoding`.
    """

    reader = HexReader(pdu.strip())
    service_center = decode_service_center(reader)
    command_info = CommandInfo.from_octet(reader.octet())
    if command_info.message_type is not MessageType.DELIVER:
        raise UnsupportedMessageType(
            f"Expected SMS-DELIVER, got {command_info.message_type.name}"
        )
    sender = decode_address(reader)
    protocol_id = reader.octet()
    encoding = decode_data_coding_scheme(reader.octet(), strict=strict_encoding)
    time_stamp, time_zone_offset = decode_timestamp(reader)
    length = reader.octet()
    user_data = decode_user_data(reader, encoding, length, command_info.has_udh)
    if not reader.at_end:
        raise ParseError(f"{reader.remaining // 2} trailing octet(s) after user data")
    logger.debug(
        "Decoded SMS-DELIVER from %s (%s, %d septets/octets)",
        sender,
        encoding.value,
        length,
    )
    return DeliveredMessage(
        service_center=service_center,
        command_info=command_info,
        sender=sender,
        protocol_id=protocol_id,
        time_stamp=time_stamp,
        time_zone_offset=time_zone_offset,
        user_data=user_data,
    )


def _first_octet(submit: MessageSubmit) -> int:
    first_octet = int(MessageType.SUBMIT) | (RELATIVE_FORMAT << VPF_SHIFT)
    if submit.reject_duplicates:
        first_octet |= REJECT_DUPLICATES_BIT
    return first_octet


def encode_submit(
    submit: MessageSubmit, *, include_service_center: bool = False
) -> str:
    """Serialize *submit* as an uppercase hex SMS-SUBMIT PDU."""

    parts = [
        encode_octet(_first_octet(submit)),
        encode_octet(submit.message_reference),
        encode_address(submit.destination_address),
        encode_octet(submit.protocol_id),
        encode_octet(encode_data_coding_scheme(submit.user_data.encoding)),
        encode_validity_period(submit.validity_period),
        encode_user_data(submit.user_data),
    ]
    if include_service_center:
        parts.insert(0, DEFAULT_SERVICE_CENTER)
    return "".join(parts)


def submit_tpdu_length(submit: MessageSubmit) -> int:
    """Octet count to pass to ``AT+CMGS``; the SMSC prefix is not counted."""
    return len(encode_submit(submit)) // 2


__all__ = [
    "DEFAULT_SERVICE_CENTER",
    "decode_deliver",
    "encode_submit",
    "submit_tpdu_length",
]
