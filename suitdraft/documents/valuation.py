"""
Valuation statement and court fee certificate.
"""

from ..clauses import clause
from ..flow import Table, layout_heading, layout_paragraph, skip
from ..formatting import rupees
from ..textlayout import FontVariant
from .common import advocate_block, court_header, cause_title, require

DOCUMENT_NAME = "Court Fee Certificate"

COLUMNS = [
    ("Sl. No.", 0.10, "center"),
    ("Particulars", 0.60, "left"),
    ("Amount", 0.30, "right"),
]


def assemble(snapshot, ctx):
    plaint = require(snapshot.plaint_details, "plaint_details", DOCUMENT_NAME)
    valuation = plaint.valuation

    canvas = ctx.new_canvas()
    cursor = canvas.first_cursor()
    cursor = court_header(canvas, cursor, snapshot.basic_details)
    cursor = cause_title(canvas, cursor, snapshot)
    cursor = layout_heading(canvas, cursor, "VALUATION STATEMENT AND COURT FEE CERTIFICATE", underline=True)

    table = Table(canvas, COLUMNS)
    cursor = table.draw_header(cursor)
    rows = [
        ("Market value of the subject matter of the suit", rupees(valuation.market_value)),
        ("Value of the relief claimed", rupees(valuation.relief_value)),
        ("Court fee paid", rupees(valuation.court_fee)),
    ]
    for serial, (particulars, amount) in enumerate(rows, start=1):
        variant = FontVariant.BOLD if serial == len(rows) else FontVariant.REGULAR
        cursor = table.add_row(cursor, [serial, particulars, amount], variant)

    cursor = skip(canvas, cursor, canvas.settings.leading / 2.0)
    if valuation.court_fee_calculation.strip():
        cursor = layout_heading(canvas, cursor, "Computation of Court Fee", size=ctx.settings.body_size)
        cursor = layout_paragraph(canvas, cursor, valuation.court_fee_calculation, first_line_indent=36)

    cursor = layout_heading(canvas, cursor, "CERTIFICATE", size=ctx.settings.body_size)
    cursor = layout_paragraph(
        canvas, cursor, clause("valuation.certificate", court_fee=rupees(valuation.court_fee)), first_line_indent=36
    )
    advocate_block(canvas, cursor, snapshot)
    return canvas
