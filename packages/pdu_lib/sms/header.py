"""User Data Header (UDH) parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging

from ..errors import IncompleteInput, MalformedHeader
from ..utils.hex import HexReader, encode_octet, encode_octets

logger = logging.getLogger(__name__)

CONCATENATED_MESSAGE_TAG = 0x00


@dataclass(frozen=True)
class HeaderElement:
    """One information element; *data* is the raw payload."""

    tag: int
    data: bytes

    def encode(self) -> str:
        return (
            encode_octet(self.tag)
            + encode_octet(len(self.data))
            + encode_octets(self.data)
        )

    @property
    def octet_length(self) -> int:
        return 2 + len(self.data)


@dataclass(frozen=True)
class ConcatenatedMessage:
    reference_number: int
    number_of_messages: int
    sequence_number: int

    @classmethod
    def from_element(cls, element: HeaderElement) -> "ConcatenatedMessage":
        if len(element.data) != 3:
            raise MalformedHeader(
                f"Concatenation element needs 3 octets, got {len(element.data)}"
            )
        reference, total, sequence = element.data
        return cls(reference, total, sequence)


@dataclass(unsafe_hash=True)
class UserDataHeader:
    entries: Tuple[HeaderElement, ...] = ()
    concatenated_message: Optional[ConcatenatedMessage] = None

    def __post_init__(self) -> None:
        self.entries = tuple(self.entries)

    def decode_entries(self) -> None:
        """Interpret the known elements; every entry stays in ``entries``."""

        for entry in self.entries:
            if entry.tag != CONCATENATED_MESSAGE_TAG:
                continue
            try:
                concatenated = ConcatenatedMessage.from_element(entry)
            except MalformedHeader as exc:
                logger.warning("Ignoring information element %d: %s", entry.tag, exc)
                continue
            if self.concatenated_message is None:
                self.concatenated_message = concatenated

    @property
    def octet_length(self) -> int:
        """Octets on the wire, the UDHL octet included."""
        return 1 + sum(entry.octet_length for entry in self.entries)


def decode_header(reader: HexReader) -> UserDataHeader:
    length = reader.octet()
    window = reader.slice(length)
    entries: List[HeaderElement] = []
    try:
        while not window.at_end:
            tag = window.octet()
            size = window.octet()
            entries.append(HeaderElement(tag=tag, data=window.octets(size)))
    except IncompleteInput as exc:
        raise MalformedHeader(
            f"Information element overruns the {length}-octet header"
        ) from exc
    header = UserDataHeader(entries=tuple(entries))
    header.decode_entries()
    logger.debug("Decoded user data header with %d element(s)", len(entries))
    return header


def encode_header(header: UserDataHeader) -> str:
    body = "".join(entry.encode() for entry in header.entries)
    return encode_octet(len(body) // 2) + body


__all__ = [
    "CONCATENATED_MESSAGE_TAG",
    "ConcatenatedMessage",
    "HeaderElement",
    "UserDataHeader",
    "decode_header",
    "encode_header",
]
