"""
Editable Word copies of generated documents.

The recorded page operations are turned back into paragraphs: text drawn on
the same baseline forms one paragraph, its alignment taken from how the
text was placed. Each recorded page ends with a page break.
"""

import logging

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from .canvas import TextOp

logger = logging.getLogger(__name__)

ALIGNMENTS = {
    "left": WD_ALIGN_PARAGRAPH.LEFT,
    "center": WD_ALIGN_PARAGRAPH.CENTER,
    "right": WD_ALIGN_PARAGRAPH.RIGHT,
    "justify": WD_ALIGN_PARAGRAPH.JUSTIFY,
}


def page_lines(page):
    """
    Text operations of one page grouped by baseline, top to bottom, each
    line's operations ordered left to right.
    """
    rows = {}
    for op in page.ops:
        if not isinstance(op, TextOp):
            continue
        rows.setdefault(round(op.y, 1), []).append(op)
    return [sorted(rows[y], key=lambda op: op.x) for y in sorted(rows, reverse=True)]


def _line_alignment(ops):
    aligns = {op.align for op in ops}
    for align in ("justify", "center", "right"):
        if align in aligns:
            return ALIGNMENTS[align]
    return ALIGNMENTS["left"]


def build_docx(canvas, title=None):
    """Returns a python-docx Document mirroring the canvas page by page."""
    doc = Document()
    style = doc.styles['Normal']
    font = style.font
    font.name = 'Times New Roman'
    font.size = Pt(12)

    if title:
        doc.core_properties.title = title

    for page_number, page in enumerate(canvas.pages, start=1):
        for ops in page_lines(page):
            p = doc.add_paragraph()
            p.alignment = _line_alignment(ops)
            for position, op in enumerate(ops):
                run = p.add_run(op.text if position == 0 else " " + op.text)
                run.bold = "Bold" in op.font
                run.italic = "Italic" in op.font or "Oblique" in op.font
                run.font.size = Pt(op.size)
        if page_number < len(canvas.pages):
            doc.add_page_break()
    return doc


def generate_document_docx(document, docx_filename):
    """Writes the Word copy of one GeneratedDocument."""
    doc = build_docx(document.layout, title=document.name)
    doc.save(docx_filename)
    logger.info("DOCX %s saved as: %s", document.name, docx_filename)
    return docx_filename
