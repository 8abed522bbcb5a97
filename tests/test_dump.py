# tests/test_dump.py
import json
import logging

import pytest

from hexdecode.dump import BYTES_PER_BLOCK, load_dump, parse_dump, read_dump
from hexdecode.errors import DumpError, InvalidHexError

BLOCK0 = "C59B3706" + "00" * 12
BLOCK2 = "504C4100" + "00" * 12


def test_image_zero_fills_missing_blocks():
    dump = parse_dump({"blocks": [{"index": 0, "data": BLOCK0}, {"index": 2, "data": BLOCK2}]})
    assert len(dump.image) == 3 * BYTES_PER_BLOCK
    assert dump.image[16:32] == b"\x00" * 16
    assert dump.image[32:35] == b"PLA"
    assert sorted(dump.blocks) == [0, 2]


def test_uid_from_field_or_block0():
    d1 = parse_dump({"uid": "a1b2c3d4", "blocks": [{"index": 0, "data": BLOCK0}]})
    assert d1.uid == b"\xa1\xb2\xc3\xd4"
    d2 = parse_dump({"blocks": [{"index": 0, "data": BLOCK0}]})
    assert d2.uid_hex == "C59B3706"
    d3 = parse_dump({"blocks": [{"index": 1, "data": BLOCK2}]})
    assert d3.uid == b""


def test_short_block_is_logged(caplog):
    caplog.set_level(logging.WARNING)
    dump = parse_dump({"blocks": [{"index": 0, "data": "0102"}]})
    assert dump.blocks[0] == b"\x01\x02" + b"\x00" * 14
    assert "corto" in caplog.text


def test_long_block_is_truncated(caplog):
    caplog.set_level(logging.WARNING)
    dump = parse_dump({"blocks": [{"index": 0, "data": "11" * 20}]})
    assert dump.image == b"\x11" * 16
    assert "troncato" in caplog.text


def test_block_data_with_spaces():
    data = " ".join(["AB"] * 16)
    dump = parse_dump({"blocks": [{"index": 0, "data": data}]})
    assert dump.image == b"\xab" * 16


def test_empty_block_list():
    dump = parse_dump({"blocks": []})
    assert dump.image == b""


@pytest.mark.parametrize(
    "obj",
    [
        {},
        {"blocks": "nope"},
        {"blocks": [{"index": 0}]},
        {"blocks": [{"index": -1, "data": BLOCK0}]},
        {"blocks": [{"index": "x", "data": BLOCK0}]},
        [],
    ],
)
def test_malformed_dumps(obj):
    with pytest.raises(DumpError):
        parse_dump(obj)


def test_strict_rejects_bad_block():
    with pytest.raises(InvalidHexError):
        parse_dump({"blocks": [{"index": 0, "data": "ZZ" * 16}]}, strict=True)


def test_read_dump_from_file(tmp_path):
    path = tmp_path / "tag.json"
    path.write_text(json.dumps({"uid": "C59B3706", "blocks": [{"index": 0, "data": BLOCK0}]}))
    dump = read_dump(path)
    assert dump.uid_hex == "C59B3706"
    assert dump.image[:4] == b"\xc5\x9b\x37\x06"


def test_load_dump_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(DumpError):
        load_dump(path)


def test_repeated_index_replaces_whole_block():
    dump = parse_dump({"blocks": [{"index": 0, "data": "FF" * 16}, {"index": 0, "data": "01"}]})
    assert dump.blocks[0] == b"\x01" + b"\x00" * 15
    assert dump.image == dump.blocks[0]


def test_odd_extra_digit_is_reported(caplog):
    caplog.set_level(logging.WARNING)
    dump = parse_dump({"blocks": [{"index": 0, "data": "11" * 16 + "2"}]})
    assert dump.image == b"\x11" * 16
    assert "troncato" in caplog.text


def test_non_utf8_dump_file(tmp_path):
    path = tmp_path / "bin.json"
    path.write_bytes(b"\xff\xfe\x00\x81")
    with pytest.raises(DumpError):
        load_dump(path)
