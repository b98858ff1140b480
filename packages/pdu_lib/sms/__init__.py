"""SMS TPDU encoding and decoding helpers."""

from __future__ import annotations

from .codec import decode_deliver, encode_submit, submit_tpdu_length
from .dcs import Encoding, decode_data_coding_scheme, encode_data_coding_scheme
from .header import (
    ConcatenatedMessage,
    HeaderElement,
    UserDataHeader,
    decode_header,
    encode_header,
)
from .messages import CommandInfo, DeliveredMessage, MessageSubmit, MessageType
from .user_data import UserData, decode_user_data, encode_user_data

__all__ = [
    "CommandInfo",
    "ConcatenatedMessage",
    "DeliveredMessage",
    "Encoding",
    "HeaderElement",
    "MessageSubmit",
    "MessageType",
    "UserData",
    "UserDataHeader",
    "decode_data_coding_scheme",
    "decode_deliver",
    "decode_header",
    "decode_user_data",
    "encode_data_coding_scheme",
    "encode_header",
    "encode_submit",
    "encode_user_data",
    "submit_tpdu_length",
]
