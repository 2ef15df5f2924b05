"""
List of parties: every plaintiff, then every defendant, one table row each.
"""

from ..flow import Table, layout_line, skip
from ..formatting import party_description
from ..models import Side
from .common import advocate_block, court_header, dated_line, label_for_side, require

DOCUMENT_NAME = "List of Parties"

COLUMNS = [
    ("Sl. No.", 0.10, "center"),
    ("Name and Description", 0.65, "left"),
    ("Status", 0.25, "left"),
]


def _rows(snapshot, side):
    parties = snapshot.parties_on(side)
    label = label_for_side(snapshot, side, 1)
    numbered = len(parties) > 1
    for index, party in enumerate(parties, start=1):
        status = f"{label} No. {index}" if numbered else label
        yield party_description(party), status


def assemble(snapshot, ctx):
    require(snapshot.plaintiffs, "party_details.plaintiffs", DOCUMENT_NAME)

    canvas = ctx.new_canvas()
    cursor = canvas.first_cursor()
    cursor = court_header(canvas, cursor, snapshot.basic_details, title="LIST OF PARTIES")

    table = Table(canvas, COLUMNS)
    cursor = table.draw_header(cursor)
    serial = 0
    for side in (Side.APPLICANT, Side.OPPOSITE):
        for description, status in _rows(snapshot, side):
            serial += 1
            cursor = table.add_row(cursor, [serial, description, status])

    cursor = skip(canvas, cursor, canvas.settings.leading)
    cursor = layout_line(canvas, cursor, dated_line(ctx))
    advocate_block(canvas, cursor, snapshot)
    return canvas
