"""Content Negotiation: choose the response media type from the Accept header.

Invariants:
    - Only JSON and XML are ever produced; text/xml counts as XML
    - Missing header, */* and application/* resolve to JSON
    - Highest q-value wins; on a tie the more specific range wins, then JSON
    - A header that accepts neither still yields JSON (lenient)
"""

from computer_keys.core.domain_types import MediaType

_ALIASES = {
    "application/json": MediaType.JSON,
    "application/xml": MediaType.XML,
    "text/xml": MediaType.XML,
}
_WILDCARDS = {
    MediaType.JSON: ("application/*", "*/*"),
    MediaType.XML: ("application/*", "text/*", "*/*"),
}


def parse_accept(accept: str) -> list[tuple[str, float]]:
    """Split an Accept header into (media range, q) pairs."""
    ranges = []
    for part in accept.split(","):
        fields = [f.strip() for f in part.split(";")]
        media_range = fields[0].lower()
        if not media_range:
            continue
        q = 1.0
        for param in fields[1:]:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    q = float(value)
                except ValueError:
                    q = 0.0
        ranges.append((media_range, q))
    return ranges


def _score(media_type: MediaType, ranges: list[tuple[str, float]]) -> tuple[float, int]:
    """(q, specificity) of the best range matching media_type; specificity 2 = exact."""
    best = (0.0, -1)
    for media_range, q in ranges:
        if _ALIASES.get(media_range) == media_type:
            candidate = (q, 2)
        elif media_range in _WILDCARDS[media_type]:
            candidate = (q, 0 if media_range == "*/*" else 1)
        else:
            continue
        if candidate[1] > best[1]:
            best = candidate
    return best


def select_media_type(accept: str | None) -> MediaType:
    """Negotiated response media type for a handler producing JSON and XML."""
    if not accept:
        return MediaType.JSON
    ranges = parse_accept(accept)
    json_q, json_rank = _score(MediaType.JSON, ranges)
    xml_q, xml_rank = _score(MediaType.XML, ranges)
    if xml_q > json_q or (xml_q == json_q and xml_q > 0 and xml_rank > json_rank):
        return MediaType.XML
    return MediaType.JSON
