"""
Synopsis: list of dates, brief facts, reliefs and the authorities relied on.
"""

from ..clauses import clause
from ..flow import Table, layout_heading, layout_lettered_items, layout_line, layout_text, skip
from ..formatting import short_date
from .common import advocate_block, cause_title, court_header, dated_line, require

DOCUMENT_NAME = "Synopsis"

DATE_COLUMNS = [
    ("Date", 0.22, "center"),
    ("Events", 0.78, "left"),
]


def _authority(judgement):
    text = clause(
        "synopsis.authority",
        case_name=judgement.case_name,
        citation=judgement.citation,
        court=judgement.court,
        year=judgement.year,
    )
    if judgement.relevant_paragraphs:
        text += f", paras {judgement.relevant_paragraphs}"
    return text


def assemble(snapshot, ctx):
    plaint = require(snapshot.plaint_details, "plaint_details", DOCUMENT_NAME)
    section_size = ctx.settings.body_size

    canvas = ctx.new_canvas()
    cursor = canvas.first_cursor()
    cursor = court_header(canvas, cursor, snapshot.basic_details)
    cursor = cause_title(canvas, cursor, snapshot)
    cursor = layout_heading(canvas, cursor, "SYNOPSIS", underline=True)

    cursor = layout_heading(canvas, cursor, "LIST OF DATES AND EVENTS", size=section_size)
    facts = sorted(plaint.facts_of_case.chronology, key=lambda f: (f.date, f.order))
    table = Table(canvas, DATE_COLUMNS)
    cursor = table.draw_header(cursor)
    for fact in facts:
        cursor = table.add_row(cursor, [short_date(fact.date), fact.description])
    cause = plaint.cause_of_action
    cursor = table.add_row(
        cursor, [short_date(cause.date_of_cause), f"Cause of action arose at {cause.place_of_cause}."]
    )

    summary = plaint.facts_of_case.summary.strip()
    if summary:
        cursor = layout_heading(canvas, cursor, "BRIEF FACTS", size=section_size, gap_before=12)
        cursor = layout_text(canvas, cursor, summary, first_line_indent=36)

    reliefs = [r.description for r in sorted(plaint.relief_sought, key=lambda r: r.order)]
    if reliefs:
        cursor = layout_heading(canvas, cursor, "RELIEFS SOUGHT", size=section_size, gap_before=12)
        cursor = layout_lettered_items(canvas, cursor, reliefs, indent=0)

    judgements = sorted(snapshot.judgement_details.judgements, key=lambda j: j.order)
    if judgements:
        cursor = layout_heading(canvas, cursor, "AUTHORITIES", size=section_size, gap_before=12)
        cursor = layout_lettered_items(canvas, cursor, [_authority(j) for j in judgements], indent=0)

    cursor = skip(canvas, cursor, canvas.settings.leading)
    cursor = layout_line(canvas, cursor, dated_line(ctx))
    advocate_block(canvas, cursor, snapshot)
    return canvas
