"""
Positional binary stream primitives for service-to-service transport.

Both wrappers borrow a caller-owned binary file-like object (anything with
read() / write(), e.g. io.BytesIO). They never close it.

Encodings:
  vint    – unsigned, 7 bits per byte, low group first, high bit = "more"
  string  – vint UTF-8 byte length followed by the bytes
  bool    – single byte, 0 or 1
  list    – vint item count followed by each item
"""

from typing import BinaryIO, Callable, List, Optional, TypeVar

from utils.errors import DecodeError, InvalidArgumentError
from utils.settings import get_max_string_bytes

T = TypeVar("T")

_MAX_VINT_BYTES = 5
_MAX_VINT = 2 ** 32


class StreamOutput:
    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def write_bytes(self, data: bytes) -> None:
        self.stream.write(data)

    def write_vint(self, value: int) -> None:
        if value < 0 or value >= _MAX_VINT:
            raise InvalidArgumentError(f"vint out of range: {value}")
        out = bytearray()
        while value > 0x7F:
            out.append((value & 0x7F) | 0x80)
            value >>= 7
        out.append(value)
        self.write_bytes(bytes(out))

    def write_bool(self, value: bool) -> None:
        self.write_bytes(b"\x01" if value else b"\x00")

    def write_string(self, value: str) -> None:
        data = value.encode("utf-8")
        self.write_vint(len(data))
        self.write_bytes(data)

    def write_optional_string(self, value: Optional[str]) -> None:
        if value is None:
            self.write_bool(False)
        else:
            self.write_bool(True)
            self.write_string(value)

    def write_list(self, items: List) -> None:
        """Writes a count followed by each item's own binary form."""
        self.write_vint(len(items))
        for item in items:
            item.write_to(self)


class StreamInput:
    def __init__(self, stream: BinaryIO, max_string_bytes: Optional[int] = None):
        self.stream = stream
        if max_string_bytes is None:
            max_string_bytes = get_max_string_bytes()
        if max_string_bytes <= 0:
            raise InvalidArgumentError(f"max_string_bytes must be positive, got {max_string_bytes}")
        self.max_string_bytes = max_string_bytes

    def read_bytes(self, length: int) -> bytes:
        data = self.stream.read(length)
        if data is None or len(data) < length:
            got = 0 if data is None else len(data)
            raise DecodeError(f"Unexpected end of stream: wanted {length} bytes, got {got}")
        return data

    def read_byte(self) -> int:
        return self.read_bytes(1)[0]

    def read_vint(self) -> int:
        value = 0
        for i in range(_MAX_VINT_BYTES):
            b = self.read_byte()
            value |= (b & 0x7F) << (7 * i)
            if not b & 0x80:
                if value >= _MAX_VINT:
                    raise DecodeError(f"vint overflow: {value}")
                return value
        raise DecodeError(f"vint longer than {_MAX_VINT_BYTES} bytes")

    def read_bool(self) -> bool:
        b = self.read_byte()
        if b == 0:
            return False
        if b == 1:
            return True
        raise DecodeError(f"Invalid boolean byte: {b}")

    def read_string(self) -> str:
        length = self.read_vint()
        if length > self.max_string_bytes:
            raise DecodeError(
                f"String length {length} exceeds limit of {self.max_string_bytes} bytes"
            )
        data = self.read_bytes(length)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Invalid UTF-8 string: {e}") from e

    def read_optional_string(self) -> Optional[str]:
        if self.read_bool():
            return self.read_string()
        return None

    def read_list(self, reader: Callable[["StreamInput"], T]) -> List[T]:
        """`reader` decodes one item, e.g. EmailRecipientStatus.read_from."""
        count = self.read_vint()
        return [reader(self) for _ in range(count)]
