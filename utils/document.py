"""
Structured (JSON) document primitives.

DocumentParser is a pull parser: callers walk the token stream with
next_token() / current_token() the same way for every model, which keeps
per-model parse code independent of how the JSON text was read.
DocumentBuilder is the matching writer; every method returns the builder so
calls can be chained and models can nest inside a parent document.
"""

import json
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from utils.errors import MalformedDocumentError

T = TypeVar("T")


class Token(str, Enum):
    START_OBJECT = "start_object"
    END_OBJECT = "end_object"
    START_ARRAY = "start_array"
    END_ARRAY = "end_array"
    FIELD_NAME = "field_name"
    VALUE_STRING = "value_string"
    VALUE_NUMBER = "value_number"
    VALUE_BOOLEAN = "value_boolean"
    VALUE_NULL = "value_null"


class _Pairs(list):
    """JSON object kept as ordered (name, value) pairs, duplicates included."""


def ensure_expected_token(expected: Token, actual: Optional[Token]) -> None:
    if actual != expected:
        found = actual.name if actual is not None else "end of document"
        raise MalformedDocumentError(f"Expected {expected.name} but found {found}")


def _scalar_token(value: Any) -> Token:
    if value is None:
        return Token.VALUE_NULL
    if isinstance(value, bool):
        return Token.VALUE_BOOLEAN
    if isinstance(value, str):
        return Token.VALUE_STRING
    return Token.VALUE_NUMBER


def _tokenize(value: Any, name: Optional[str], out: List[Tuple[Token, Optional[str], Any]]) -> None:
    if isinstance(value, _Pairs):
        out.append((Token.START_OBJECT, name, None))
        for field_name, field_value in value:
            out.append((Token.FIELD_NAME, field_name, None))
            _tokenize(field_value, field_name, out)
        out.append((Token.END_OBJECT, name, None))
    elif isinstance(value, list):
        out.append((Token.START_ARRAY, name, None))
        for item in value:
            _tokenize(item, name, out)
        out.append((Token.END_ARRAY, name, None))
    else:
        out.append((_scalar_token(value), name, value))


class DocumentParser:
    def __init__(self, tokens: List[Tuple[Token, Optional[str], Any]]):
        self._tokens = tokens
        self._pos = -1

    @classmethod
    def from_json(cls, text: str) -> "DocumentParser":
        """
        Parse JSON text and position the parser on its first token.
        """
        try:
            root = json.loads(text, object_pairs_hook=_Pairs)
        except (TypeError, ValueError) as e:
            raise MalformedDocumentError(f"Unparseable document: {e}") from e
        tokens: List[Tuple[Token, Optional[str], Any]] = []
        _tokenize(root, None, tokens)
        parser = cls(tokens)
        parser.next_token()
        return parser

    def current_token(self) -> Optional[Token]:
        if 0 <= self._pos < len(self._tokens):
            return self._tokens[self._pos][0]
        return None

    def next_token(self) -> Optional[Token]:
        if self._pos < len(self._tokens):
            self._pos += 1
        return self.current_token()

    def current_name(self) -> Optional[str]:
        """Field name of the current token, or of the value it introduces."""
        if 0 <= self._pos < len(self._tokens):
            return self._tokens[self._pos][1]
        return None

    def value(self) -> Any:
        token = self.current_token()
        if token not in (Token.VALUE_STRING, Token.VALUE_NUMBER, Token.VALUE_BOOLEAN, Token.VALUE_NULL):
            raise MalformedDocumentError(f"Expected a scalar value but found {self._describe(token)}")
        return self._tokens[self._pos][2]

    def text(self) -> str:
        token = self.current_token()
        if token != Token.VALUE_STRING:
            raise MalformedDocumentError(
                f"Expected a string for field '{self.current_name()}' but found {self._describe(token)}"
            )
        return self._tokens[self._pos][2]

    def skip_children(self) -> None:
        """
        On a START_OBJECT / START_ARRAY, advance to the matching end token.
        Any other token is left as is.
        """
        if self.current_token() not in (Token.START_OBJECT, Token.START_ARRAY):
            return
        depth = 1
        while depth > 0:
            token = self.next_token()
            if token is None:
                raise MalformedDocumentError("Unexpected end of document while skipping")
            if token in (Token.START_OBJECT, Token.START_ARRAY):
                depth += 1
            elif token in (Token.END_OBJECT, Token.END_ARRAY):
                depth -= 1

    @staticmethod
    def _describe(token: Optional[Token]) -> str:
        return token.name if token is not None else "end of document"


def parse_list(parser: DocumentParser, item_parser: Callable[[DocumentParser], T]) -> List[T]:
    """Reads a JSON array whose items are parsed by `item_parser`."""
    ensure_expected_token(Token.START_ARRAY, parser.current_token())
    items: List[T] = []
    while parser.next_token() != Token.END_ARRAY:
        if parser.current_token() is None:
            raise MalformedDocumentError("Unexpected end of document inside array")
        items.append(item_parser(parser))
    return items


_NO_NAME = object()


class DocumentBuilder:
    def __init__(self):
        self._stack: List[Any] = []
        self._pending_name: Any = _NO_NAME
        self._root: Any = None
        self._has_root = False

    def _attach(self, value: Any) -> None:
        if not self._stack:
            if self._has_root:
                raise MalformedDocumentError("Document already has a root value")
            self._root = value
            self._has_root = True
            return
        top = self._stack[-1]
        if isinstance(top, dict):
            if self._pending_name is _NO_NAME:
                raise MalformedDocumentError("Object values need a field name")
            top[self._pending_name] = value
            self._pending_name = _NO_NAME
        else:
            top.append(value)

    def start_object(self) -> "DocumentBuilder":
        obj: Dict[str, Any] = {}
        self._attach(obj)
        self._stack.append(obj)
        return self

    def end_object(self) -> "DocumentBuilder":
        if not self._stack or not isinstance(self._stack[-1], dict):
            raise MalformedDocumentError("end_object() without a matching start_object()")
        self._stack.pop()
        return self

    def start_array(self) -> "DocumentBuilder":
        arr: List[Any] = []
        self._attach(arr)
        self._stack.append(arr)
        return self

    def end_array(self) -> "DocumentBuilder":
        if not self._stack or not isinstance(self._stack[-1], list):
            raise MalformedDocumentError("end_array() without a matching start_array()")
        self._stack.pop()
        return self

    def field_name(self, name: str) -> "DocumentBuilder":
        if not self._stack or not isinstance(self._stack[-1], dict):
            raise MalformedDocumentError(f"Field '{name}' written outside an object")
        self._pending_name = name
        return self

    def field(self, name: str, value: Any, params: Optional[Dict[str, Any]] = None) -> "DocumentBuilder":
        return self.field_name(name).value(value, params)

    def value(self, value: Any, params: Optional[Dict[str, Any]] = None) -> "DocumentBuilder":
        if hasattr(value, "to_document"):
            value.to_document(self, params)
        elif isinstance(value, (list, tuple)):
            self.start_array()
            for item in value:
                self.value(item, params)
            self.end_array()
        elif isinstance(value, Enum):
            self._attach(value.value)
        elif value is None or isinstance(value, (str, bool, int, float)):
            self._attach(value)
        else:
            raise MalformedDocumentError(f"Unsupported document value type: {type(value).__name__}")
        return self

    def to_json(self) -> str:
        if self._stack or not self._has_root:
            raise MalformedDocumentError("Document is incomplete")
        return json.dumps(self._root, separators=(",", ":"), ensure_ascii=False)
