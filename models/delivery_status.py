from typing import Any, Dict, Optional

from pydantic import field_validator

from models.base import UnknownFieldHook, WireModel, log_unknown_field
from models.constants import MESSAGE_TAG, STATUS_TAG
from utils.document import DocumentBuilder, DocumentParser, Token, ensure_expected_token
from utils.errors import InvalidArgumentError, MissingFieldError
from utils.stream import StreamInput, StreamOutput


class DeliveryStatus(WireModel):
    """
    Outcome of one delivery attempt: a status code (e.g. "SUCCESS",
    "FAILED", "200") and an optional detail message.
    """
    status: str
    message: Optional[str] = None

    @field_validator("status")
    @classmethod
    def status_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise InvalidArgumentError(f"{STATUS_TAG} must not be blank")
        return value

    @classmethod
    def read_from(cls, stream: StreamInput) -> "DeliveryStatus":
        status = stream.read_string()
        message = stream.read_optional_string()
        return cls(status=status, message=message)

    def write_to(self, stream: StreamOutput) -> None:
        stream.write_string(self.status)
        stream.write_optional_string(self.message)

    @classmethod
    def parse(cls, parser: DocumentParser, on_unknown_field: Optional[UnknownFieldHook] = None) -> "DeliveryStatus":
        on_unknown_field = on_unknown_field or log_unknown_field
        status = None
        message = None

        ensure_expected_token(Token.START_OBJECT, parser.current_token())
        while True:
            token = parser.next_token()
            if token == Token.END_OBJECT:
                break
            ensure_expected_token(Token.FIELD_NAME, token)
            field_name = parser.current_name()
            parser.next_token()
            if field_name == STATUS_TAG:
                status = parser.text()
            elif field_name == MESSAGE_TAG:
                message = None if parser.current_token() == Token.VALUE_NULL else parser.text()
            else:
                parser.skip_children()
                on_unknown_field(cls.__name__, field_name)

        if status is None:
            raise MissingFieldError(STATUS_TAG)
        return cls(status=status, message=message)

    def to_document(self, builder: DocumentBuilder, params: Optional[Dict[str, Any]] = None) -> DocumentBuilder:
        builder.start_object().field(STATUS_TAG, self.status)
        if self.message is not None:
            builder.field(MESSAGE_TAG, self.message)
        return builder.end_object()
