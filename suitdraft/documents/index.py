"""
Index of the filing.

Lists every document generated earlier in the same run, in filing order,
with cumulative page ranges, then the annexed documents from the list of
documents. An annexure without a page count shows '-' and does not move
the running page number.
"""

from ..flow import Table, layout_line, skip
from .common import advocate_block, court_header, dated_line
from .exhibits import marking_labels, ordered_documents

DOCUMENT_NAME = "Index"

COLUMNS = [
    ("Sl. No.", 0.10, "center"),
    ("Particulars", 0.68, "left"),
    ("Page No.", 0.22, "center"),
]


def page_range(start, count):
    if not count:
        return "-"
    end = start + count - 1
    return str(start) if end == start else f"{start} - {end}"


def index_rows(snapshot, prior_documents):
    """(particulars, page range) for the generated documents, then the annexures."""
    rows = []
    next_page = 1
    for document in prior_documents:
        rows.append((document.name, page_range(next_page, document.page_count)))
        next_page += document.page_count or 0

    documents = ordered_documents(snapshot)
    labels = marking_labels(documents)
    for item in documents:
        particulars = item.description
        if labels[item.id]:
            particulars = f"{labels[item.id]}: {particulars}"
        rows.append((particulars, page_range(next_page, item.page_count)))
        next_page += item.page_count or 0
    return rows


def assemble(snapshot, ctx):
    canvas = ctx.new_canvas()
    cursor = canvas.first_cursor()
    cursor = court_header(canvas, cursor, snapshot.basic_details, title="INDEX")

    table = Table(canvas, COLUMNS)
    cursor = table.draw_header(cursor)
    for serial, (particulars, pages) in enumerate(index_rows(snapshot, ctx.prior_documents), start=1):
        cursor = table.add_row(cursor, [serial, particulars, pages])

    cursor = skip(canvas, cursor, canvas.settings.leading)
    cursor = layout_line(canvas, cursor, dated_line(ctx))
    advocate_block(canvas, cursor, snapshot)
    return canvas
