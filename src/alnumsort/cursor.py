# Path: src/alnumsort/cursor.py
from typing import Iterator, Optional, Tuple, Union

__all__ = [
    "PLACEHOLDER",
    "CodepointCursor",
    "MalformedInputError",
    "Text",
    "advance_codepoint",
    "to_buffer",
]

Text = Union[str, bytes, bytearray, memoryview]

PLACEHOLDER = 0xFFFD


class MalformedInputError(ValueError):
    """Raised in strict mode when a buffer holds an invalid UTF-8 sequence."""

    def __init__(self, offset: int, byte: int):
        self.offset = offset
        self.byte = byte
        super().__init__(f"invalid UTF-8 byte 0x{byte:02x} at offset {offset}")


def to_buffer(text: Text) -> bytes:
    if isinstance(text, str):
        # surrogatepass keeps lone surrogates as (malformed) bytes
        return text.encode("utf-8", "surrogatepass")
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError(f"expected str or bytes, got {type(text).__name__}")


def _sequence_width(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def advance_codepoint(
    offset: int, buffer: bytes, strict: bool = False
) -> Tuple[Optional[int], int]:
    """
    Decode the code point starting at `offset`.

    Returns (codepoint, new_offset), or (None, offset) once the buffer is
    exhausted. An invalid sequence yields PLACEHOLDER and advances a single
    byte, unless `strict` is set, in which case MalformedInputError is raised.
    """
    if offset >= len(buffer):
        return None, offset

    lead = buffer[offset]
    if lead < 0x80:
        return lead, offset + 1

    width = _sequence_width(lead)
    if width:
        try:
            char = buffer[offset : offset + width].decode("utf-8")
        except UnicodeDecodeError:
            pass
        else:
            return ord(char), offset + width

    if strict:
        raise MalformedInputError(offset, lead)
    return PLACEHOLDER, offset + 1


class CodepointCursor:
    """Forward-only reader of code points over a UTF-8 buffer."""

    def __init__(self, text: Text, strict: bool = False):
        self.buffer = to_buffer(text)
        self.strict = strict
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def exhausted(self) -> bool:
        return self._offset >= len(self.buffer)

    def next(self) -> Optional[int]:
        codepoint, self._offset = advance_codepoint(
            self._offset, self.buffer, self.strict
        )
        return codepoint

    def __len__(self) -> int:
        return len(self.buffer)

    def __iter__(self) -> Iterator[int]:
        while not self.exhausted:
            yield self.next()
