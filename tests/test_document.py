import pytest

from utils.document import DocumentBuilder, DocumentParser, Token, ensure_expected_token, parse_list
from utils.errors import MalformedDocumentError

# --- Parser Tests ---

def test_parser_token_stream():
    parser = DocumentParser.from_json('{"a":"x","b":[1,true,null],"c":{}}')
    tokens = [parser.current_token()]
    while parser.next_token() is not None:
        tokens.append(parser.current_token())

    assert tokens == [
        Token.START_OBJECT,
        Token.FIELD_NAME, Token.VALUE_STRING,
        Token.FIELD_NAME, Token.START_ARRAY,
        Token.VALUE_NUMBER, Token.VALUE_BOOLEAN, Token.VALUE_NULL,
        Token.END_ARRAY,
        Token.FIELD_NAME, Token.START_OBJECT, Token.END_OBJECT,
        Token.END_OBJECT,
    ]

def test_parser_names_and_values():
    parser = DocumentParser.from_json('{"a":"x","n":2.5}')
    assert parser.next_token() == Token.FIELD_NAME
    assert parser.current_name() == "a"
    parser.next_token()
    assert parser.current_name() == "a"
    assert parser.text() == "x"
    parser.next_token()
    parser.next_token()
    assert parser.value() == 2.5
    with pytest.raises(MalformedDocumentError, match="Expected a string for field 'n'"):
        parser.text()

def test_value_on_structural_token():
    parser = DocumentParser.from_json('{}')
    with pytest.raises(MalformedDocumentError):
        parser.value()

def test_skip_children_stops_on_matching_end():
    parser = DocumentParser.from_json('{"skip":{"a":[{"b":{}}],"c":1},"keep":"yes"}')
    parser.next_token()
    parser.next_token()
    assert parser.current_token() == Token.START_OBJECT
    parser.skip_children()
    assert parser.current_token() == Token.END_OBJECT
    assert parser.next_token() == Token.FIELD_NAME
    assert parser.current_name() == "keep"

def test_skip_children_on_scalar_is_noop():
    parser = DocumentParser.from_json('{"a":1}')
    parser.next_token()
    parser.next_token()
    parser.skip_children()
    assert parser.current_token() == Token.VALUE_NUMBER

@pytest.mark.parametrize("text", ['{"a":', '', 'not json', '{"a" 1}'])
def test_unparseable_json(text):
    with pytest.raises(MalformedDocumentError, match="Unparseable"):
        DocumentParser.from_json(text)

def test_ensure_expected_token():
    ensure_expected_token(Token.START_OBJECT, Token.START_OBJECT)
    with pytest.raises(MalformedDocumentError, match="Expected START_OBJECT but found START_ARRAY"):
        ensure_expected_token(Token.START_OBJECT, Token.START_ARRAY)
    with pytest.raises(MalformedDocumentError, match="end of document"):
        ensure_expected_token(Token.START_OBJECT, None)

def test_parse_list_requires_array():
    parser = DocumentParser.from_json('{"a":1}')
    with pytest.raises(MalformedDocumentError):
        parse_list(parser, lambda p: p.value())

def test_parse_list_of_scalars():
    parser = DocumentParser.from_json('["a","b"]')
    assert parse_list(parser, lambda p: p.text()) == ["a", "b"]

# --- Builder Tests ---

def test_builder_chains_and_preserves_order():
    text = (
        DocumentBuilder()
        .start_object()
        .field("z", "last?")
        .field("a", 1)
        .field("flags", [True, None])
        .field_name("nested").start_object().field("k", 1.5).end_object()
        .end_object()
        .to_json()
    )
    assert text == '{"z":"last?","a":1,"flags":[true,null],"nested":{"k":1.5}}'

def test_builder_keeps_unicode():
    assert DocumentBuilder().value("café").to_json() == '"café"'

def test_builder_incomplete_document():
    with pytest.raises(MalformedDocumentError, match="incomplete"):
        DocumentBuilder().to_json()
    with pytest.raises(MalformedDocumentError, match="incomplete"):
        DocumentBuilder().start_object().to_json()

def test_builder_mismatched_end():
    with pytest.raises(MalformedDocumentError):
        DocumentBuilder().start_array().end_object()
    with pytest.raises(MalformedDocumentError):
        DocumentBuilder().start_object().end_array()

def test_builder_field_outside_object():
    with pytest.raises(MalformedDocumentError, match="outside an object"):
        DocumentBuilder().start_array().field("a", 1)

def test_builder_value_without_name_in_object():
    with pytest.raises(MalformedDocumentError, match="need a field name"):
        DocumentBuilder().start_object().value(1)

def test_builder_second_root():
    with pytest.raises(MalformedDocumentError, match="root"):
        DocumentBuilder().value(1).value(2)

def test_builder_unsupported_value():
    with pytest.raises(MalformedDocumentError, match="Unsupported"):
        DocumentBuilder().value(object())
