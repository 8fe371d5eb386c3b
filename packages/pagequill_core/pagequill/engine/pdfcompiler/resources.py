"""Font resources for PDF."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ...exceptions import CompilationError
from ..layout_primitives import FontFace
from .objects import PdfDictionary, PdfName, PdfReference


@dataclass
class PdfFont:
    """Standard (non-embedded) Type 1 font resource."""

    face: FontFace
    alias: str  # resource name without slash, e.g. "F1"
    object_id: Optional[int] = None

    @property
    def base_name(self) -> str:
        return self.face.value

    def to_dictionary(self) -> PdfDictionary:
        return PdfDictionary({
            "Type": PdfName("Font"),
            "Subtype": PdfName("Type1"),
            "BaseFont": PdfName(self.base_name),
            "Encoding": PdfName("WinAnsiEncoding"),
        })


class PdfFontRegistry:
    """Registry for the two fonts every document declares.

    Registration order fixes both the aliases (F1 regular, F2 bold) and the
    order in which the font objects are emitted.
    """

    def __init__(self):
        self._fonts: Dict[FontFace, PdfFont] = {}
        for face in (FontFace.REGULAR, FontFace.BOLD):
            self.register_font(face)

    def register_font(self, face: FontFace) -> PdfFont:
        if face not in self._fonts:
            self._fonts[face] = PdfFont(face=face, alias=f"F{len(self._fonts) + 1}")
        return self._fonts[face]

    def get_font(self, face: FontFace) -> PdfFont:
        return self._fonts[face]

    def fonts(self) -> List[PdfFont]:
        return list(self._fonts.values())

    def get_resources_dict(self) -> PdfDictionary:
        """/Font sub-dictionary mapping aliases to font objects."""
        fonts = PdfDictionary()
        for font in self._fonts.values():
            if font.object_id is None:
                raise CompilationError("Font has no object id yet", font.base_name)
            fonts[font.alias] = PdfReference(font.object_id)
        return fonts
