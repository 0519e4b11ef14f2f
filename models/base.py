import io
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict

from utils.document import DocumentBuilder, DocumentParser
from utils.errors import DecodeError
from utils.stream import StreamInput, StreamOutput

logger = logging.getLogger("notification_status")

# Called as hook(model_name, field_name) for every field a parser skips.
UnknownFieldHook = Callable[[str, str], None]


def log_unknown_field(model_name: str, field_name: str) -> None:
    logger.info(f"Unexpected field: {field_name}, while parsing {model_name}")


class WireModel(BaseModel, ABC):
    """
    Immutable model with a binary wire form and a structured document form.

    Subclasses implement the four codec methods; the to_/from_ helpers below
    wrap them for whole-buffer use.
    """

    model_config = ConfigDict(frozen=True)

    def model_copy(self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False) -> "WireModel":
        # Updated copies go back through validation like any other instance.
        if not update:
            return super().model_copy(deep=deep)
        return type(self).model_validate({**self.model_dump(), **update})

    @classmethod
    def model_construct(cls, _fields_set: Optional[set] = None, **values: Any) -> "WireModel":
        return cls.model_validate(values)

    @classmethod
    @abstractmethod
    def read_from(cls, stream: StreamInput) -> "WireModel":
        pass

    @abstractmethod
    def write_to(self, stream: StreamOutput) -> None:
        pass

    @classmethod
    @abstractmethod
    def parse(cls, parser: DocumentParser, on_unknown_field: Optional[UnknownFieldHook] = None) -> "WireModel":
        pass

    @abstractmethod
    def to_document(self, builder: DocumentBuilder, params: Optional[Dict[str, Any]] = None) -> DocumentBuilder:
        pass

    def to_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.write_to(StreamOutput(buf))
        return buf.getvalue()

    @classmethod
    def from_bytes(cls, data: bytes) -> "WireModel":
        """Decode a buffer holding exactly one encoded instance."""
        buf = io.BytesIO(data)
        result = cls.read_from(StreamInput(buf))
        leftover = len(data) - buf.tell()
        if leftover:
            raise DecodeError(f"{leftover} trailing byte(s) after {cls.__name__}")
        return result

    def to_json(self, params: Optional[Dict[str, Any]] = None) -> str:
        return self.to_document(DocumentBuilder(), params).to_json()

    @classmethod
    def from_json(cls, text: str, on_unknown_field: Optional[UnknownFieldHook] = None) -> "WireModel":
        return cls.parse(DocumentParser.from_json(text), on_unknown_field)
