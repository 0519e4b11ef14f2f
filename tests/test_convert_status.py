import pytest

from convert_status import main

DOCUMENT = '{"recipient":"alice@example.com","delivery_status":{"status":"SUCCESS"}}'
WIRE_HEX = (b"\x11alice@example.com" + b"\x07SUCCESS" + b"\x00").hex()

def test_to_wire(capsys):
    assert main(["to-wire", DOCUMENT]) == 0
    assert capsys.readouterr().out.strip() == WIRE_HEX

def test_to_json(capsys):
    assert main(["to-json", WIRE_HEX]) == 0
    assert capsys.readouterr().out.strip() == DOCUMENT

def test_to_json_accepts_grouped_hex(capsys):
    assert main(["to-json", WIRE_HEX[:10], WIRE_HEX[10:]]) == 0
    assert capsys.readouterr().out.strip() == DOCUMENT

def test_to_json_rejects_bad_hex(capsys):
    assert main(["to-json", "zz"]) == 1
    assert "DECODE_ERROR" in capsys.readouterr().err

def test_to_json_rejects_truncated_wire(capsys):
    assert main(["to-json", WIRE_HEX[:-2]]) == 1
    assert "DECODE_ERROR" in capsys.readouterr().err

def test_to_wire_missing_field(capsys):
    assert main(["to-wire", '{"recipient":"alice@example.com"}']) == 1
    err = capsys.readouterr().err
    assert "MISSING_FIELD" in err
    assert "delivery_status field absent" in err

def test_check_email(capsys):
    assert main(["check-email", "alice@example.com"]) == 0
    assert main(["check-email", "alice"]) == 1
    assert "INVALID_ARGUMENT" in capsys.readouterr().err

def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])

def test_environment_is_loaded_once_by_settings():
    import convert_status
    import utils.settings
    assert not hasattr(convert_status, "load_dotenv")
    assert hasattr(utils.settings, "load_dotenv")
