"""Computer Codec: JSON and XML encodings of the computer record.

Invariants:
    - JSON: {"type", "maker", "model", "language"?, "colors": {"color": [...]}}
    - XML: <computer> with one child element per attribute; colors is
      <colors><color>..</color>...</colors>; language omitted when absent
    - Decoding also accepts <color> elements directly under <computer>
    - Decoding rejects any XML root other than <computer>
    - Color order is preserved in both directions
    - Lists: JSON array of computers / <computers><computer>...</computer></computers>

Design Decisions:
    - XML is mapped onto the JSON dict shape first, then validated by the same
      pydantic model, so both encodings share one set of rules and messages
    - ElementTree from the standard library; no XSD, unknown elements ignored
"""

import json
import logging
import xml.etree.ElementTree as ET
from collections.abc import Sequence

from pydantic import BaseModel, ValidationError

from computer_keys.core import messages
from computer_keys.core.domain_types import MediaType
from computer_keys.core.outcome import Err, Ok, Outcome, validation_failure
from computer_keys.core.repository_protocols import ComputerLike
from computer_keys.codec.validation import format_validation_errors
from computer_keys.schemas.computer import (
    COMPUTER_REQUIRED_MESSAGES, ColorsWrapper, ComputerPayload,
)

logger = logging.getLogger(__name__)

_SCALAR_FIELDS = ("type", "maker", "model", "language")
_XML_SUFFIXES = ("/xml", "+xml")


# ─── Media type helpers ─────────────────────────────────────────

def is_xml_content_type(content_type: str | None) -> bool:
    """True for application/xml, text/xml and any +xml type (parameters ignored)."""
    if not content_type:
        return False
    essence = content_type.split(";", 1)[0].strip().lower()
    return essence.endswith(_XML_SUFFIXES)


# ─── Decoding ───────────────────────────────────────────────────

def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def xml_to_dict(root: ET.Element) -> dict:
    """Map a <computer> element onto the JSON dict shape."""
    data: dict = {}
    colors: list[str] = []
    has_colors = False
    for child in root:
        name = _local_name(child.tag)
        if name == "colors":
            has_colors = True
            colors.extend(
                item.text or "" for item in child
                if _local_name(item.tag) == "color"
            )
        elif name == "color":
            has_colors = True
            colors.append(child.text or "")
        elif name in _SCALAR_FIELDS:
            data[name] = child.text or ""
    if has_colors:
        data["colors"] = {"color": colors}
    return data


def decode_body(body: bytes, content_type: str | None) -> Outcome[dict]:
    """Parse a request body into a plain dict according to its Content-Type."""
    if not body.strip():
        return validation_failure({"body": messages.VALIDATION_BODY_REQUIRED})
    if is_xml_content_type(content_type):
        try:
            root = ET.fromstring(body)
        except ET.ParseError as e:
            logger.warning(f"Rejected malformed XML body: {e}")
            return validation_failure({"body": messages.MALFORMED_XML})
        if _local_name(root.tag) != "computer":
            logger.warning(f"Rejected XML body with root <{root.tag}>")
            return validation_failure({"body": messages.XML_ROOT_NOT_COMPUTER})
        return Ok(xml_to_dict(root))
    try:
        data = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Rejected malformed JSON body: {e}")
        return validation_failure({"body": messages.MALFORMED_JSON})
    if not isinstance(data, dict):
        return validation_failure({"body": messages.VALIDATION_BODY_NOT_OBJECT})
    return Ok(data)


def parse_computer(
    body: bytes, content_type: str | None, schema: type[BaseModel] = ComputerPayload,
) -> Outcome:
    """Decode and validate a computer body into `schema` (ComputerPayload or ComputerPatch)."""
    decoded = decode_body(body, content_type)
    if isinstance(decoded, Err):
        return decoded
    data = decoded.value
    try:
        return Ok(schema.model_validate(data))
    except ValidationError as e:
        return validation_failure(
            format_validation_errors(e.errors(), COMPUTER_REQUIRED_MESSAGES),
        )


# ─── Encoding ───────────────────────────────────────────────────

def to_payload(computer: ComputerLike) -> ComputerPayload:
    """Stored record -> external record."""
    return ComputerPayload(
        type=computer.type,
        maker=computer.maker,
        model=computer.model,
        language=computer.language,
        colors=ColorsWrapper(color=list(computer.colors or [])),
    )


def payload_to_element(payload: ComputerPayload) -> ET.Element:
    root = ET.Element("computer")
    for name in _SCALAR_FIELDS:
        value = getattr(payload, name)
        if value is not None:
            ET.SubElement(root, name).text = value
    colors = ET.SubElement(root, "colors")
    for color in payload.color_list:
        ET.SubElement(colors, "color").text = color
    return root


def _xml_bytes(root: ET.Element) -> bytes:
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def _json_bytes(data: object) -> bytes:
    return json.dumps(
        data, ensure_ascii=False, separators=(",", ":"),
    ).encode("utf-8")


def encode_computer(payload: ComputerPayload, media_type: MediaType) -> bytes:
    """Render one computer in the negotiated media type."""
    if media_type == MediaType.XML:
        return _xml_bytes(payload_to_element(payload))
    return _json_bytes(payload.to_json())


def encode_computers(
    payloads: Sequence[ComputerPayload], media_type: MediaType,
) -> bytes:
    """Render a list of computers in the negotiated media type."""
    if media_type == MediaType.XML:
        root = ET.Element("computers")
        root.extend(payload_to_element(p) for p in payloads)
        return _xml_bytes(root)
    return _json_bytes([p.to_json() for p in payloads])
