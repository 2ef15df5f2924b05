"""
Single draft page for a required document kind that has no dedicated layout
yet, e.g. a written statement.
"""

from ..clauses import clause
from ..flow import layout_heading, layout_paragraph
from .common import advocate_block, cause_title, court_header


def document_title(name):
    """'written_statement' -> 'Written Statement'."""
    return " ".join(word.capitalize() for word in name.replace("_", " ").split())


def assemble(snapshot, ctx, name):
    title = document_title(name)
    canvas = ctx.new_canvas()
    cursor = canvas.first_cursor()
    cursor = court_header(canvas, cursor, snapshot.basic_details)
    cursor = cause_title(canvas, cursor, snapshot)
    cursor = layout_heading(canvas, cursor, title.upper(), underline=True)
    cursor = layout_paragraph(canvas, cursor, clause("placeholder.body", name=title.lower()), first_line_indent=36)
    advocate_block(canvas, cursor, snapshot)
    return canvas
