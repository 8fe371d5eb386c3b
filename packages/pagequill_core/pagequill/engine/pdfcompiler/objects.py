"""PDF objects and data structures.

Indirect objects live in an arena (PdfObjectTable) and are addressed by
dense integer ids starting at 1. References between objects are plain ids,
so the catalog -> pages -> content graph never owns its children.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ...exceptions import CompilationError
from .utils import encode_text_string, format_pdf_number


@dataclass(frozen=True, slots=True)
class PdfName:
    value: str


@dataclass(frozen=True, slots=True)
class PdfString:
    """Document text string (not content-stream text)."""

    value: str


@dataclass(frozen=True, slots=True)
class PdfReference:
    object_id: int


@dataclass(slots=True)
class PdfArray:
    items: List["PdfValue"] = field(default_factory=list)


@dataclass(slots=True)
class PdfDictionary:
    entries: Dict[str, "PdfValue"] = field(default_factory=dict)

    def __getitem__(self, key: str) -> "PdfValue":
        return self.entries[key]

    def __setitem__(self, key: str, value: "PdfValue") -> None:
        self.entries[key] = value


@dataclass(slots=True)
class PdfStream:
    """Stream object; /Length is derived from ``data`` at serialization."""

    data: bytes = b""
    dictionary: PdfDictionary = field(default_factory=PdfDictionary)


PdfValue = Union[PdfName, PdfString, PdfReference, PdfArray, PdfDictionary, bool, int, float]
PdfObject = Union[PdfDictionary, PdfStream]


def serialize_value(value: PdfValue) -> bytes:
    """Serialize a direct value."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return b"true" if value else b"false"
    if isinstance(value, int):
        return str(value).encode("ascii")
    if isinstance(value, float):
        return format_pdf_number(value).encode("ascii")
    if isinstance(value, PdfName):
        return b"/" + value.value.encode("ascii")
    if isinstance(value, PdfString):
        return encode_text_string(value.value)
    if isinstance(value, PdfReference):
        return f"{value.object_id} 0 R".encode("ascii")
    if isinstance(value, PdfArray):
        return b"[" + b" ".join(serialize_value(item) for item in value.items) + b"]"
    if isinstance(value, PdfDictionary):
        parts = [b"<<"]
        for key, item in value.entries.items():
            parts.append(b"/" + key.encode("ascii") + b" " + serialize_value(item))
        parts.append(b">>")
        return b" ".join(parts)
    raise CompilationError("Unsupported PDF value", type(value).__name__)


def iter_references(value: Union[PdfValue, PdfStream]) -> Iterator[int]:
    """Yield every object id referenced from ``value``."""
    if isinstance(value, PdfReference):
        yield value.object_id
    elif isinstance(value, PdfArray):
        for item in value.items:
            yield from iter_references(item)
    elif isinstance(value, PdfDictionary):
        for item in value.entries.values():
            yield from iter_references(item)
    elif isinstance(value, PdfStream):
        yield from iter_references(value.dictionary)


class PdfObjectTable:
    """Arena of indirect objects indexed by dense ids (1-based).

    Ids are handed out by ``allocate`` before the object exists so that
    forward references (page -> font) can be built in one pass.
    """

    def __init__(self):
        self._objects: List[Optional[PdfObject]] = []

    def allocate(self) -> int:
        self._objects.append(None)
        return len(self._objects)

    def assign(self, object_id: int, obj: PdfObject) -> PdfReference:
        if not 1 <= object_id <= len(self._objects):
            raise CompilationError("Object id was never allocated", str(object_id))
        if self._objects[object_id - 1] is not None:
            raise CompilationError("Object id assigned twice", str(object_id))
        self._objects[object_id - 1] = obj
        return PdfReference(object_id)

    def add(self, obj: PdfObject) -> PdfReference:
        return self.assign(self.allocate(), obj)

    def get(self, object_id: int) -> PdfObject:
        obj = self._objects[object_id - 1]
        if obj is None:
            raise CompilationError("Object id allocated but never assigned", str(object_id))
        return obj

    def __len__(self) -> int:
        return len(self._objects)

    def items(self) -> Iterator[Tuple[int, PdfObject]]:
        """Objects in ascending id order, which is also emission order."""
        for index in range(len(self._objects)):
            yield index + 1, self.get(index + 1)

    def validate(self) -> None:
        """Every slot is filled and every reference resolves."""
        for object_id, obj in self.items():
            for target in iter_references(obj):
                if not 1 <= target <= len(self._objects):
                    raise CompilationError(
                        "Dangling object reference",
                        f"object {object_id} refers to {target}",
                    )


@dataclass(slots=True)
class PdfDocument:
    """Object table plus the ids the trailer needs."""

    objects: PdfObjectTable
    root_id: int
    info_id: Optional[int] = None
