"""PDF writer - serializes objects, xref table, trailer into a byte buffer."""

from __future__ import annotations

import io
import logging
from typing import List

from ...exceptions import CompilationError
from .objects import PdfDictionary, PdfDocument, PdfObject, PdfReference, PdfStream, serialize_value

logger = logging.getLogger(__name__)

PDF_HEADER = b"%PDF-1.4\n"
EOF_MARKER = b"%%EOF\n"


class PdfWriter:
    """Writes a PdfDocument to bytes, recording each object's offset."""

    def __init__(self):
        self.offsets: List[int] = []

    def write(self, document: PdfDocument) -> bytes:
        """Serialize a document.

        Args:
            document: Object table with root (and optional info) ids

        Returns:
            Complete PDF file contents

        Raises:
            CompilationError: if the object graph or offset bookkeeping is
                inconsistent
        """
        table = document.objects
        table.validate()

        buffer = io.BytesIO()
        buffer.write(PDF_HEADER)

        self.offsets = []
        for object_id, obj in table.items():
            self.offsets.append(buffer.tell())
            self._write_object(buffer, object_id, obj)

        xref_offset = buffer.tell()
        self._write_xref(buffer)
        self._write_trailer(buffer, xref_offset, document)

        data = buffer.getvalue()
        self._verify(data, len(table))
        logger.debug("Wrote %d objects, %d bytes", len(table), len(data))
        return data

    def _write_object(self, buffer: io.BytesIO, object_id: int, obj: PdfObject) -> None:
        buffer.write(f"{object_id} 0 obj\n".encode("ascii"))
        if isinstance(obj, PdfStream):
            dictionary = PdfDictionary(dict(obj.dictionary.entries))
            dictionary["Length"] = len(obj.data)
            buffer.write(serialize_value(dictionary))
            buffer.write(b"\nstream\n")
            buffer.write(obj.data)
            # The EOL before endstream is not counted in /Length.
            buffer.write(b"\nendstream")
        elif isinstance(obj, PdfDictionary):
            buffer.write(serialize_value(obj))
        else:
            raise CompilationError("Unsupported indirect object", type(obj).__name__)
        buffer.write(b"\nendobj\n")

    def _write_xref(self, buffer: io.BytesIO) -> None:
        buffer.write(b"xref\n")
        buffer.write(f"0 {len(self.offsets) + 1}\n".encode("ascii"))
        buffer.write(b"0000000000 65535 f \n")
        for offset in self.offsets:
            buffer.write(f"{offset:010d} 00000 n \n".encode("ascii"))

    def _write_trailer(self, buffer: io.BytesIO, xref_offset: int, document: PdfDocument) -> None:
        trailer = PdfDictionary({
            "Size": len(self.offsets) + 1,
            "Root": PdfReference(document.root_id),
        })
        if document.info_id is not None:
            trailer["Info"] = PdfReference(document.info_id)
        buffer.write(b"trailer\n")
        buffer.write(serialize_value(trailer))
        buffer.write(f"\nstartxref\n{xref_offset}\n".encode("ascii"))
        buffer.write(EOF_MARKER)

    def _verify(self, data: bytes, object_count: int) -> None:
        """Check the xref invariants against the bytes actually produced."""
        if len(self.offsets) != object_count:
            raise CompilationError(
                "Offset table does not match object table",
                f"{len(self.offsets)} offsets for {object_count} objects",
            )
        previous = -1
        for object_id, offset in enumerate(self.offsets, start=1):
            if offset <= previous:
                raise CompilationError("Object offsets are not increasing", f"object {object_id} at {offset}")
            marker = f"{object_id} 0 obj".encode("ascii")
            if data[offset:offset + len(marker)] != marker:
                raise CompilationError("Offset does not point at its object", f"object {object_id} at {offset}")
            previous = offset
