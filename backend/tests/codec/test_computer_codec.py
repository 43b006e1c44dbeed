"""Computer Codec: JSON/XML decoding into ComputerPayload and encoding back.

Tests cover:
    - Content-Type dispatch (XML for */xml and +xml, JSON otherwise)
    - Both XML color layouts decode, order preserved
    - Malformed and empty bodies -> VALIDATION with a body message
    - Missing/blank required fields -> per-field messages
    - Encoders: language omitted when absent, empty colors kept, list shapes
    - JSON and XML round-trips are the identity, colors order included
"""

import json
import xml.etree.ElementTree as ET

import pytest

from computer_keys.codec.computer_codec import (
    decode_body, encode_computer, encode_computers, is_xml_content_type,
    parse_computer, xml_to_dict,
)
from computer_keys.core.domain_types import MediaType
from computer_keys.core.errors import ErrorKind
from computer_keys.core.outcome import Err, Ok
from computer_keys.schemas.computer import ColorsWrapper, ComputerPatch, ComputerPayload

ASUS = ComputerPayload(
    type="laptop", maker="ASUS", model="X507UA", language="日本語",
    colors=ColorsWrapper(color=["black", "silver"]),
)

ASUS_XML = (
    "<computer><type>laptop</type><maker>ASUS</maker><model>X507UA</model>"
    "<language>日本語</language>"
    "<colors><color>black</color><color>silver</color></colors></computer>"
).encode("utf-8")


# ─── Content-Type ────────────────────────────────────────────────

@pytest.mark.parametrize("content_type", [
    "application/xml", "text/xml", "application/xml; charset=UTF-8",
    "application/computer+xml", "APPLICATION/XML",
])
def test_xml_content_types(content_type):
    assert is_xml_content_type(content_type)


@pytest.mark.parametrize("content_type", [None, "", "application/json", "text/plain"])
def test_non_xml_content_types(content_type):
    assert not is_xml_content_type(content_type)


# ─── Decoding ────────────────────────────────────────────────────

def test_decode_json_body():
    outcome = decode_body(b'{"type": "laptop"}', "application/json")
    assert outcome == Ok({"type": "laptop"})


def test_unknown_content_type_decoded_as_json():
    outcome = decode_body(b'{"type": "laptop"}', "text/plain")
    assert outcome == Ok({"type": "laptop"})


def test_decode_wrapped_xml_colors():
    data = xml_to_dict(ET.fromstring(ASUS_XML))
    assert data == {
        "type": "laptop", "maker": "ASUS", "model": "X507UA",
        "language": "日本語", "colors": {"color": ["black", "silver"]},
    }


def test_decode_bare_xml_colors():
    root = ET.fromstring(
        b"<computer><type>t</type><color>red</color><color>blue</color></computer>",
    )
    assert xml_to_dict(root)["colors"] == {"color": ["red", "blue"]}


def test_decode_xml_ignores_unknown_elements():
    root = ET.fromstring(b"<computer><type>t</type><price>9</price></computer>")
    assert xml_to_dict(root) == {"type": "t"}


def test_malformed_xml_is_validation_failure():
    outcome = decode_body(b"<computer><type>", "application/xml")
    assert isinstance(outcome, Err)
    assert outcome.kind == ErrorKind.VALIDATION
    assert outcome.validation_errors == {"body": "Malformed XML request body"}


@pytest.mark.parametrize("body", [
    b"<computers><computer><type>t</type></computer></computers>",
    b"<laptop><type>t</type><maker>M</maker><model>X</model></laptop>",
])
def test_xml_root_other_than_computer_is_rejected(body):
    outcome = decode_body(body, "application/xml")
    assert isinstance(outcome, Err)
    assert outcome.kind == ErrorKind.VALIDATION
    assert outcome.validation_errors == {"body": "XML root element must be <computer>"}


def test_namespaced_computer_root_is_accepted():
    body = b'<c:computer xmlns:c="urn:x"><c:type>t</c:type></c:computer>'
    outcome = decode_body(body, "application/xml")
    assert isinstance(outcome, Ok)


def test_malformed_json_is_validation_failure():
    outcome = decode_body(b"{not json", "application/json")
    assert isinstance(outcome, Err)
    assert outcome.validation_errors == {"body": "Malformed JSON request body"}


def test_empty_body_is_validation_failure():
    outcome = decode_body(b"  ", "application/json")
    assert isinstance(outcome, Err)
    assert outcome.validation_errors == {"body": "Request body is required"}


def test_json_array_body_is_rejected():
    outcome = decode_body(b"[]", "application/json")
    assert isinstance(outcome, Err)
    assert outcome.validation_errors == {"body": "Request body must be an object"}


def test_parse_computer_reports_missing_fields():
    outcome = parse_computer(b'{"type": "laptop"}', "application/json")
    assert isinstance(outcome, Err)
    assert outcome.validation_errors == {
        "maker": "Maker is required",
        "model": "Model is required",
    }


def test_parse_computer_rejects_blank_and_null_fields():
    outcome = parse_computer(
        b'{"type": " ", "maker": null, "model": "M"}', "application/json",
    )
    assert isinstance(outcome, Err)
    assert outcome.validation_errors == {
        "type": "Type is required",
        "maker": "Maker is required",
    }


def test_parse_computer_from_xml():
    outcome = parse_computer(ASUS_XML, "application/xml")
    assert outcome == Ok(ASUS)


def test_parse_patch_allows_partial_body():
    outcome = parse_computer(b'{"language": "en"}', "application/json", ComputerPatch)
    assert isinstance(outcome, Ok)
    assert outcome.value.changes() == {
        "type": None, "maker": None, "model": None,
        "language": "en", "colors": None,
    }


# ─── Encoding ────────────────────────────────────────────────────

def test_encode_json_shape():
    assert json.loads(encode_computer(ASUS, MediaType.JSON)) == {
        "type": "laptop", "maker": "ASUS", "model": "X507UA",
        "language": "日本語", "colors": {"color": ["black", "silver"]},
    }


def test_encode_json_keeps_non_ascii_text():
    assert "日本語".encode("utf-8") in encode_computer(ASUS, MediaType.JSON)


def test_encode_json_omits_absent_language_keeps_empty_colors():
    payload = ComputerPayload(type="desktop", maker="HP", model="Z2")
    assert json.loads(encode_computer(payload, MediaType.JSON)) == {
        "type": "desktop", "maker": "HP", "model": "Z2", "colors": {"color": []},
    }


def test_encode_xml_shape():
    root = ET.fromstring(encode_computer(ASUS, MediaType.XML))
    assert root.tag == "computer"
    assert root.findtext("maker") == "ASUS"
    assert root.findtext("language") == "日本語"
    assert [c.text for c in root.find("colors")] == ["black", "silver"]


def test_encode_xml_declares_utf8():
    assert encode_computer(ASUS, MediaType.XML).lower().startswith(b"<?xml")


def test_encode_xml_empty_colors_and_no_language():
    payload = ComputerPayload(type="desktop", maker="HP", model="Z2")
    root = ET.fromstring(encode_computer(payload, MediaType.XML))
    assert root.find("language") is None
    assert root.find("colors") is not None
    assert list(root.find("colors")) == []


def test_encode_list_shapes():
    assert json.loads(encode_computers([ASUS], MediaType.JSON))[0]["model"] == "X507UA"
    root = ET.fromstring(encode_computers([ASUS, ASUS], MediaType.XML))
    assert root.tag == "computers"
    assert [c.tag for c in root] == ["computer", "computer"]


def test_empty_list_encodings():
    assert json.loads(encode_computers([], MediaType.JSON)) == []
    assert list(ET.fromstring(encode_computers([], MediaType.XML))) == []


# ─── Round-trips ─────────────────────────────────────────────────

def test_xml_round_trip_preserves_all_attributes():
    payload = ComputerPayload(
        type="laptop", maker="ASUS", model="X507UA", language="日本語",
        colors=ColorsWrapper(color=["silver", "black", "gold"]),
    )
    encoded = encode_computer(payload, MediaType.XML)
    assert parse_computer(encoded, "application/xml") == Ok(payload)


def test_json_round_trip_preserves_all_attributes():
    encoded = encode_computer(ASUS, MediaType.JSON)
    assert parse_computer(encoded, "application/json") == Ok(ASUS)
