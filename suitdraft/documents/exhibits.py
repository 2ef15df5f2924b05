"""
List of documents produced with the plaint.

Marked documents without an explicit marking label are numbered EX-A1,
EX-A2, ... in the order they appear among the marked documents only.
Explicit labels are printed as given.
"""

from ..flow import Table, layout_line, skip
from ..formatting import short_date
from ..models import DocumentType
from ..textlayout import FontVariant
from .common import advocate_block, court_header, dated_line

DOCUMENT_NAME = "List of Documents"

COLUMNS = [
    ("Sl. No.", 0.08, "center"),
    ("Date", 0.14, "center"),
    ("Description of Document", 0.38, "left"),
    ("Nature", 0.16, "left"),
    ("Pages", 0.10, "center"),
    ("Marking", 0.14, "center"),
]

NATURE = {
    DocumentType.ORIGINAL: "Original",
    DocumentType.CERTIFIED_COPY: "Certified Copy",
    DocumentType.XEROX: "Photocopy",
    DocumentType.AFFIDAVIT: "Affidavit",
}


def ordered_documents(snapshot):
    return sorted(snapshot.document_details.documents, key=lambda d: (d.order, d.serial_number))


def marking_labels(documents):
    """
    Display marking per document id: the explicit label, EX-A<n> for a
    marked document without one, '' for unmarked documents.
    """
    labels = {}
    marked_count = 0
    for item in documents:
        if not item.is_marked:
            labels[item.id] = ""
            continue
        marked_count += 1
        labels[item.id] = item.marking_label or f"EX-A{marked_count}"
    return labels


def assemble(snapshot, ctx):
    documents = ordered_documents(snapshot)

    canvas = ctx.new_canvas()
    cursor = canvas.first_cursor()
    cursor = court_header(canvas, cursor, snapshot.basic_details, title="LIST OF DOCUMENTS")

    if not documents:
        cursor = layout_line(canvas, cursor, "No documents are produced along with the plaint.", align="center")
    else:
        labels = marking_labels(documents)
        table = Table(canvas, COLUMNS, size=ctx.settings.small_size)
        cursor = table.draw_header(cursor)
        for item in documents:
            cursor = table.add_row(cursor, [
                item.serial_number,
                short_date(item.date),
                item.description,
                NATURE.get(item.document_type, str(item.document_type)),
                "" if item.page_count is None else item.page_count,
                labels[item.id],
            ])
        total_pages = snapshot.document_details.total_pages or sum(d.page_count or 0 for d in documents)
        cursor = skip(canvas, cursor, 4)
        cursor = layout_line(canvas, cursor, f"Total pages: {total_pages}", FontVariant.BOLD, align="right")

    cursor = skip(canvas, cursor, canvas.settings.leading)
    cursor = layout_line(canvas, cursor, dated_line(ctx))
    advocate_block(canvas, cursor, snapshot)
    return canvas
