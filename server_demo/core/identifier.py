"""Identifier Parsing — UUID text forms in, canonical form out.

Invariants:
    - parse_identifier accepts exactly four UTF-8 byte lengths: 32 (bare hex),
      36 (canonical), 38 (braced) and 45 (urn:uuid: prefixed); anything else is a
      length error
    - Failures raise InvalidIdentifierError whose message is the client-facing reason
    - Every failure message is printable ASCII (it is sent back as a header value)
    - format_identifier always yields lowercase 8-4-4-4-12

Design Decisions:
    - Own parser over uuid.UUID(str): stdlib accepts hyphens anywhere and reports a
      single generic message; we want positional checks and length diagnostics
    - Lengths and positions are counted in bytes, so multi-byte input is reported
      by its encoded size
    - Pure functions, no IO: verify_identifier_generation only touches uuid4()
"""

import uuid
from uuid import UUID

from server_demo.core.errors import IdentifierGenerationError, InvalidIdentifierError

_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
_HYPHEN = ord("-")
_HYPHEN_POSITIONS = (8, 13, 18, 23)
_URN_PREFIX = b"urn:uuid:"


def parse_identifier(text: str) -> UUID:
    """Parse a UUID from any accepted textual form."""
    raw = text.encode("utf-8", errors="surrogatepass")
    length = len(raw)
    if length == 36:
        return _parse_canonical(raw)
    if length == 45:
        prefix = raw[:9]
        if prefix.lower() != _URN_PREFIX:
            raise InvalidIdentifierError(f"invalid urn prefix: {quote_ascii(prefix)}")
        return _parse_canonical(raw[9:])
    if length == 38:
        if raw[:1] != b"{" or raw[-1:] != b"}":
            raise InvalidIdentifierError("invalid UUID format")
        return _parse_canonical(raw[1:-1])
    if length == 32:
        return _from_hex(raw)
    raise InvalidIdentifierError(f"invalid UUID length: {length}")


def _parse_canonical(raw: bytes) -> UUID:
    if any(raw[i] != _HYPHEN for i in _HYPHEN_POSITIONS):
        raise InvalidIdentifierError("invalid UUID format")
    return _from_hex(raw.replace(b"-", b""))


def _from_hex(digits: bytes) -> UUID:
    if len(digits) != 32 or not _HEX_DIGITS.issuperset(digits):
        raise InvalidIdentifierError("invalid UUID format")
    return UUID(hex=digits.decode("ascii"))


def quote_ascii(raw: bytes) -> str:
    """Double-quote bytes as printable ASCII, escaping everything else."""
    out = []
    for ch in raw.decode("utf-8", errors="surrogateescape"):
        code = ord(ch)
        if ch in '"\\':
            out.append("\\" + ch)
        elif 0x20 <= code < 0x7F:
            out.append(ch)
        elif 0xDC80 <= code <= 0xDCFF:
            # undecodable byte (e.g. a character cut at the prefix boundary)
            out.append(f"\\x{code - 0xDC00:02x}")
        elif code <= 0xFFFF:
            out.append(f"\\u{code:04x}")
        else:
            out.append(f"\\U{code:08x}")
    return '"' + "".join(out) + '"'


def format_identifier(value: UUID) -> str:
    return str(value)


def verify_identifier_generation() -> UUID:
    """Generate one random identifier and check it is usable.

    Raises IdentifierGenerationError when the random source fails or yields a
    value that does not survive a format/parse round trip.
    """
    try:
        generated = uuid.uuid4()
    except (OSError, NotImplementedError) as e:
        raise IdentifierGenerationError(str(e)) from e
    if generated.version != 4:
        raise IdentifierGenerationError(
            f"expected version 4, got {generated.version}",
        )
    try:
        parsed = parse_identifier(format_identifier(generated))
    except InvalidIdentifierError as e:
        raise IdentifierGenerationError(e.message) from e
    if parsed != generated:
        raise IdentifierGenerationError("generated identifier does not round-trip")
    return generated
