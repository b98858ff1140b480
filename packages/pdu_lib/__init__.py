"""Public API for the PDU-mode SMS codec."""

from __future__ import annotations

from .errors import (
    IncompleteInput,
    InvalidAddress,
    InvalidAddressType,
    InvalidText,
    MalformedHeader,
    MalformedHex,
    MalformedTimestamp,
    ParseError,
    UnsupportedEncoding,
    UnsupportedFeature,
    UnsupportedMessageType,
)
from .sms import (
    CommandInfo,
    ConcatenatedMessage,
    DeliveredMessage,
    Encoding,
    HeaderElement,
    MessageSubmit,
    MessageType,
    UserData,
    UserDataHeader,
    decode_deliver,
    encode_submit,
    submit_tpdu_length,
)
from .utils import Address, AddressFormat, ValidityPeriod

__all__ = [
    "Address",
    "AddressFormat",
    "CommandInfo",
    "ConcatenatedMessage",
    "DeliveredMessage",
    "Encoding",
    "HeaderElement",
    "IncompleteInput",
    "InvalidAddress",
    "InvalidAddressType",
    "InvalidText",
    "MalformedHeader",
    "MalformedHex",
    "MalformedTimestamp",
    "MessageSubmit",
    "MessageType",
    "ParseError",
    "UnsupportedEncoding",
    "UnsupportedFeature",
    "UnsupportedMessageType",
    "UserData",
    "UserDataHeader",
    "ValidityPeriod",
    "decode_deliver",
    "encode_submit",
    "submit_tpdu_length",
]
