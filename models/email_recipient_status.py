from typing import Any, Dict, Optional

from pydantic import field_validator

from models.base import UnknownFieldHook, WireModel, log_unknown_field
from models.constants import DELIVERY_STATUS_TAG, RECIPIENT_TAG
from models.delivery_status import DeliveryStatus
from utils.document import DocumentBuilder, DocumentParser, Token, ensure_expected_token
from utils.email_validation import validate_email
from utils.errors import MissingFieldError
from utils.stream import StreamInput, StreamOutput


class EmailRecipientStatus(WireModel):
    """
    Delivery outcome for a single email recipient.

    The recipient address is validated whenever an instance is built,
    whether directly, from the binary wire form or from a document, so an
    instance with a malformed address never exists.

    Binary form:   recipient string, then the DeliveryStatus binary form.
    Document form: {"recipient": "...", "delivery_status": {...}}
    """
    recipient: str
    delivery_status: DeliveryStatus

    @field_validator("recipient")
    @classmethod
    def recipient_is_email(cls, value: str) -> str:
        validate_email(value)
        return value

    @classmethod
    def read_from(cls, stream: StreamInput) -> "EmailRecipientStatus":
        recipient = stream.read_string()
        delivery_status = DeliveryStatus.read_from(stream)
        return cls(recipient=recipient, delivery_status=delivery_status)

    def write_to(self, stream: StreamOutput) -> None:
        stream.write_string(self.recipient)
        self.delivery_status.write_to(stream)

    @classmethod
    def parse(cls, parser: DocumentParser, on_unknown_field: Optional[UnknownFieldHook] = None) -> "EmailRecipientStatus":
        """
        Parse an object starting at the parser's current token.
        Unknown fields are skipped (nested values included) and reported
        through `on_unknown_field`, which logs them by default.
        """
        on_unknown_field = on_unknown_field or log_unknown_field
        recipient = None
        delivery_status = None

        ensure_expected_token(Token.START_OBJECT, parser.current_token())
        while True:
            token = parser.next_token()
            if token == Token.END_OBJECT:
                break
            ensure_expected_token(Token.FIELD_NAME, token)
            field_name = parser.current_name()
            parser.next_token()
            if field_name == RECIPIENT_TAG:
                recipient = parser.text()
            elif field_name == DELIVERY_STATUS_TAG:
                delivery_status = DeliveryStatus.parse(parser, on_unknown_field)
            else:
                parser.skip_children()
                on_unknown_field(cls.__name__, field_name)

        if recipient is None:
            raise MissingFieldError(RECIPIENT_TAG)
        if delivery_status is None:
            raise MissingFieldError(DELIVERY_STATUS_TAG)
        return cls(recipient=recipient, delivery_status=delivery_status)

    def to_document(self, builder: DocumentBuilder, params: Optional[Dict[str, Any]] = None) -> DocumentBuilder:
        return (
            builder.start_object()
            .field(RECIPIENT_TAG, self.recipient)
            .field(DELIVERY_STATUS_TAG, self.delivery_status, params)
            .end_object()
        )
