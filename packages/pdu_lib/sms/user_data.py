"""User data handling for SMS PDUs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging

from ..errors import MalformedHeader, UnsupportedFeature
from ..gsm import decode_gsm7, decode_utf16, encode_utf16
from ..utils.hex import HexReader, encode_octets
from .dcs import Encoding
from .header import UserDataHeader, decode_header

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserData:
    encoding: Encoding
    text: str
    header: Optional[UserDataHeader] = None

    @staticmethod
    def new_utf16(text: str) -> "UserData":
        return UserData(encoding=Encoding.UTF16, text=text)


def decode_user_data(
    reader: HexReader, encoding: Encoding, length: int, has_header: bool
) -> UserData:
    """Decode the TP-UD field whose TP-UDL is *length*.

    The octets consumed by the header, when present, are subtracted from
    *length*; what remains is the character count for GSM 7-bit text and the
    octet count otherwise. GSM 7-bit text is unpacked from step 0 right after
    the header, without fill bits.
    """

    start = reader.fork()
    header: Optional[UserDataHeader] = None
    header_octets = 0
    if has_header:
        header = decode_header(reader)
        header_octets = (reader.position - start.position) // 2

    remaining = length - header_octets
    if remaining < 0:
        raise MalformedHeader(
            f"Header of {header_octets} octets exceeds user data length {length}"
        )
    if encoding is Encoding.GSM7:
        return UserData(encoding, decode_gsm7(reader, remaining), header)
    if encoding is Encoding.UTF16:
        return UserData(encoding, decode_utf16(reader, remaining), header)
    logger.debug("Keeping %d octets of undecoded user data", remaining)
    return UserData(encoding, encode_octets(reader.octets(remaining)), header)


def encode_user_data(user_data: UserData) -> str:
    if user_data.encoding is not Encoding.UTF16:
        raise UnsupportedFeature(
            f"Cannot encode {user_data.encoding.value} user data"
        )
    if user_data.header is not None:
        raise UnsupportedFeature("User data headers cannot be encoded")
    return encode_utf16(user_data.text)


__all__ = ["UserData", "decode_user_data", "encode_user_data"]
