"""Utility functions for PDF generation."""

import re

from ...exceptions import EncodingError

# Encoding declared for the standard fonts (/WinAnsiEncoding).
WIN_ANSI = "cp1252"

# C0 controls other than tab, line feed and carriage return, plus DEL.
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

_LITERAL_ESCAPES = {
    ord("\\"): b"\\\\",
    ord("("): b"\\(",
    ord(")"): b"\\)",
}


def ensure_encodable(text: str, where: str = "") -> bytes:
    """Encode text for a standard-font content stream or raise EncodingError.

    Args:
        text: Text to encode
        where: Location used in the error details (e.g. "block 3")

    Returns:
        WinAnsi bytes
    """
    if not isinstance(text, str):
        raise EncodingError("Text must be a string", f"{where} got {type(text).__name__}".strip())
    control = _CONTROL_RE.search(text)
    if control:
        raise EncodingError(
            "Text contains a control character",
            f"{where} {control.group(0)!r} at position {control.start()}".strip(),
        )
    try:
        return text.encode(WIN_ANSI)
    except UnicodeEncodeError as e:
        raise EncodingError(
            "Text cannot be encoded in WinAnsiEncoding",
            f"{where} {text[e.start]!r} at position {e.start}".strip(),
        ) from e


def escape_pdf_bytes(data: bytes) -> bytes:
    """Escape bytes for a PDF literal string.

    Parentheses and backslash get a backslash; anything outside printable
    ASCII becomes a three-digit octal escape, so the result is pure ASCII.
    """
    out = bytearray()
    for byte in data:
        if byte in _LITERAL_ESCAPES:
            out += _LITERAL_ESCAPES[byte]
        elif 32 <= byte < 127:
            out.append(byte)
        else:
            out += b"\\%03o" % byte
    return bytes(out)


def escape_pdf_string(text: str) -> str:
    """Escape a WinAnsi-encodable string for a PDF literal string."""
    return escape_pdf_bytes(ensure_encodable(text)).decode("ascii")


def encode_text_string(text: str) -> bytes:
    """Serialize a document text string (e.g. /Title).

    Latin-1 text is written as an escaped literal string; anything else as
    UTF-16BE hex with a byte order mark.
    """
    try:
        data = text.encode("latin-1")
    except UnicodeEncodeError:
        try:
            encoded = text.encode("utf-16-be")
        except UnicodeEncodeError as e:
            raise EncodingError(
                "Text string cannot be encoded",
                f"{text[e.start]!r} at position {e.start}",
            ) from e
        return b"<FEFF" + encoded.hex().upper().encode("ascii") + b">"
    return b"(" + escape_pdf_bytes(data) + b")"


def format_pdf_number(value: float) -> str:
    """Format number for PDF with exactly two decimal places.

    Python's format mini-language ignores the locale, so output is stable
    across environments.
    """
    text = f"{float(value):.2f}"
    if text == "-0.00":
        return "0.00"
    return text
