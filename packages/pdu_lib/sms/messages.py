"""Dataclasses describing SMS PDUs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Optional

from ..errors import UnsupportedFeature, UnsupportedMessageType
from ..gsm import MAX_USER_DATA_OCTETS, utf16_octets
from ..utils import MAXIMUM_VALIDITY, Address, ValidityPeriod
from .dcs import Encoding
from .user_data import UserData

# First octet bits:
# 1-0  TP-MTI
#   2  TP-MMS in SMS-DELIVER (0 = more messages), TP-RD in SMS-SUBMIT
# 4-3  TP-VPF in SMS-SUBMIT
#   5  TP-SRI in SMS-DELIVER, TP-SRR in SMS-SUBMIT
#   6  TP-UDHI
#   7  TP-RP
MTI_MASK = 0b0000_0011
MMS_BIT = 0b0000_0100
REJECT_DUPLICATES_BIT = 0b0000_0100
VPF_SHIFT = 3
UDHI_BIT = 0b0100_0000


class MessageType(IntEnum):
    # Each value is shared by the mobile-terminated and mobile-originated
    # PDU of the same slot (DELIVER / DELIVER-REPORT and so on).
    DELIVER = 0
    SUBMIT = 1
    STATUS_REPORT = 2


@dataclass(frozen=True)
class CommandInfo:
    message_type: MessageType
    more_messages_to_send: bool = False
    has_udh: bool = False

    @classmethod
    def from_octet(cls, octet: int) -> "CommandInfo":
        mti = octet & MTI_MASK
        try:
            message_type = MessageType(mti)
        except ValueError:
            raise UnsupportedMessageType(f"Reserved message type {mti}") from None
        return cls(
            message_type=message_type,
            more_messages_to_send=not octet & MMS_BIT,
            has_udh=bool(octet & UDHI_BIT),
        )


@dataclass(frozen=True)
class DeliveredMessage:
    service_center: Optional[Address]
    command_info: CommandInfo
    sender: Address
    protocol_id: int
    time_stamp: datetime
    time_zone_offset: int
    user_data: UserData

    @property
    def text(self) -> str:
        return self.user_data.text


@dataclass(frozen=True)
class MessageSubmit:
    """An outgoing SMS-SUBMIT.

    Only the combinations the encoder can serialize are accepted; anything
    else raises :class:`UnsupportedFeature` at construction time.
    """

    destination_address: Address
    user_data: UserData
    reject_duplicates: bool = False
    protocol_id: int = 0
    message_reference: int = 0
    validity_period: ValidityPeriod = MAXIMUM_VALIDITY
    status_report_request: bool = False
    reply_path: bool = False

    def __post_init__(self) -> None:
        if self.validity_period != MAXIMUM_VALIDITY:
            raise UnsupportedFeature(
                "Only a relative validity period of 255 is supported, "
                f"got {self.validity_period}"
            )
        if self.status_report_request:
            raise UnsupportedFeature("Status report requests are not supported")
        if self.reply_path:
            raise UnsupportedFeature("Reply paths are not supported")
        if self.user_data.encoding is not Encoding.UTF16:
            raise UnsupportedFeature(
                "Only UTF-16 user data can be sent, "
                f"got {self.user_data.encoding.value}"
            )
        if self.user_data.header is not None:
            raise UnsupportedFeature("User data headers cannot be sent")
        if len(utf16_octets(self.user_data.text)) > MAX_USER_DATA_OCTETS:
            raise UnsupportedFeature(
                f"Text exceeds {MAX_USER_DATA_OCTETS} octets; "
                "concatenation is not supported"
            )
        if not 0 <= self.protocol_id <= 0xFF:
            raise ValueError(f"Protocol identifier {self.protocol_id} out of range")
        if self.message_reference != 0:
            raise UnsupportedFeature("Message references are assigned by the modem")

    @classmethod
    def new_default(
        cls,
        reject_duplicates: bool,
        status_report_request: bool,
        destination_address: Address,
        user_data: UserData,
    ) -> "MessageSubmit":
        # Plain MO-MT messages carry PID 0.
        return cls(
            destination_address=destination_address,
            user_data=user_data,
            reject_duplicates=reject_duplicates,
            status_report_request=status_report_request,
        )

    @property
    def command_info(self) -> CommandInfo:
        return CommandInfo(message_type=MessageType.SUBMIT)


__all__ = [
    "CommandInfo",
    "DeliveredMessage",
    "MessageSubmit",
    "MessageType",
    "MTI_MASK",
    "MMS_BIT",
    "REJECT_DUPLICATES_BIT",
    "UDHI_BIT",
    "VPF_SHIFT",
]
