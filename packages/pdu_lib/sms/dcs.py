"""TP-Data-Coding-Scheme helper."""

from __future__ import annotations

from enum import Enum
import logging

from ..errors import UnsupportedEncoding

logger = logging.getLogger(__name__)


class Encoding(Enum):
    GSM7 = "gsm7"
    UTF16 = "utf16"
    UNKNOWN = "unknown"


_DCS_TO_ENCODING = {0x00: Encoding.GSM7, 0x08: Encoding.UTF16}
_ENCODING_TO_DCS = {v: k for k, v in _DCS_TO_ENCODING.items()}


def decode_data_coding_scheme(dcs: int, *, strict: bool = True) -> Encoding:
    encoding = _DCS_TO_ENCODING.get(dcs)
    if encoding is not None:
        return encoding
    if strict:
        logger.debug("Unexpected data coding scheme %d", dcs)
        raise UnsupportedEncoding(f"Unsupported data coding scheme {dcs}")
    return Encoding.UNKNOWN


def encode_data_coding_scheme(encoding: Encoding) -> int:
    try:
        return _ENCODING_TO_DCS[encoding]
    except KeyError:
        raise ValueError(f"No data coding scheme for {encoding.value}") from None


__all__ = ["Encoding", "decode_data_coding_scheme", "encode_data_coding_scheme"]
