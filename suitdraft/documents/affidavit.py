"""
Affidavit in support of the plaint, sworn by the first plaintiff.
"""

from ..clauses import clause
from ..flow import layout_block, layout_heading, layout_numbered_paragraph, layout_paragraph, skip
from ..formatting import long_date, party_description
from ..models import Side
from ..textlayout import FontVariant
from .common import cause_title, court_header, label_for_side, require

DOCUMENT_NAME = "Affidavit"


def deponent_block(canvas, cursor, ctx, place):
    """DEPONENT on the right, then the attestation and BEFORE ME."""
    cursor = layout_block(canvas, skip(canvas, cursor, canvas.settings.leading * 2), [("DEPONENT", FontVariant.BOLD)])
    cursor = skip(canvas, cursor, canvas.settings.leading / 2.0)
    cursor = layout_paragraph(canvas, cursor, clause("affidavit.sworn", date=long_date(ctx.today), place=place))
    return layout_block(
        canvas,
        skip(canvas, cursor, canvas.settings.leading),
        [("BEFORE ME", FontVariant.BOLD), "", "Advocate / Notary"],
        align="left",
    )


def assemble(snapshot, ctx):
    plaintiffs = require(snapshot.plaintiffs, "party_details.plaintiffs", DOCUMENT_NAME)
    deponent = plaintiffs[0]
    label = label_for_side(snapshot, Side.APPLICANT, 1)

    canvas = ctx.new_canvas()
    cursor = canvas.first_cursor()
    cursor = court_header(canvas, cursor, snapshot.basic_details)
    cursor = cause_title(canvas, cursor, snapshot)
    cursor = layout_heading(canvas, cursor, "AFFIDAVIT", underline=True)
    cursor = layout_paragraph(
        canvas, cursor, clause("affidavit.deponent", description=party_description(deponent)), first_line_indent=36
    )

    if len(plaintiffs) > 1:
        capacity = clause(
            "affidavit.capacity_multiple",
            position="first",
            label_lower=label.lower(),
            label_plural_lower=label_for_side(snapshot, Side.APPLICANT, len(plaintiffs)).lower(),
        )
    else:
        capacity = clause("affidavit.capacity_single", label_lower=label.lower())
    paragraphs = [capacity, clause("affidavit.plaint_true")]
    if snapshot.document_details.documents:
        paragraphs.append(clause("affidavit.documents"))
    paragraphs.append(clause("affidavit.closing"))

    for number, text in enumerate(paragraphs, start=1):
        cursor = layout_numbered_paragraph(canvas, cursor, number, text)

    deponent_block(canvas, cursor, ctx, snapshot.basic_details.district)
    return canvas
