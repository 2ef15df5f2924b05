"""
Interlocutory applications and their supporting affidavits.

All applications of a suit are bundled into one document, each starting on
a new page. The affidavit bundle holds only the applications that need an
affidavit. An empty bundle is a single page saying so.
"""

import logging

from ..clauses import clause
from ..flow import (
    layout_heading,
    layout_lettered_items,
    layout_line,
    layout_numbered_paragraph,
    layout_paragraph,
    paragraphs_of,
)
from ..formatting import party_description
from ..models import IAUrgency, Side
from ..textlayout import FontVariant
from .affidavit import deponent_block
from .common import cause_title, court_header, label_for_side, require, signature_block

logger = logging.getLogger(__name__)

APPLICATION_NAME = "Interlocutory Application"
AFFIDAVIT_NAME = "IA Affidavit"


def ordered_applications(snapshot):
    return sorted(snapshot.ia_details.applications, key=lambda ia: ia.order)


def _start(canvas, snapshot, ia, first):
    cursor = canvas.first_cursor() if first else canvas.new_page()
    if ia.urgency == IAUrgency.URGENT:
        cursor = layout_line(canvas, cursor, "URGENT", FontVariant.BOLD, align="right")
    cursor = court_header(canvas, cursor, snapshot.basic_details)
    cursor = layout_line(canvas, cursor, ia.ia_number, FontVariant.BOLD, align="center")
    return cause_title(canvas, cursor, snapshot)


def _placeholder(canvas, snapshot, title, text):
    cursor = canvas.first_cursor()
    cursor = court_header(canvas, cursor, snapshot.basic_details, title=title)
    return layout_line(canvas, cursor, text, align="center")


def _application(canvas, cursor, snapshot, ctx, ia):
    label = label_for_side(snapshot, Side.APPLICANT, 1)
    cursor = layout_heading(canvas, cursor, ia.title.upper(), underline=True)
    cursor = layout_line(
        canvas, cursor, clause("ia.heading", purpose=ia.purpose.upper()), FontVariant.BOLD, align="center"
    )

    number = 0
    paragraphs = [clause("ia.facts_reference", label_lower=label.lower())]
    paragraphs.extend(paragraphs_of(ia.facts))
    for text in paragraphs:
        number += 1
        cursor = layout_numbered_paragraph(canvas, cursor, number, text)
    if ia.grounds:
        number += 1
        cursor = layout_numbered_paragraph(canvas, cursor, number, clause("ia.grounds_intro"))
        cursor = layout_lettered_items(canvas, cursor, ia.grounds)

    cursor = layout_heading(canvas, cursor, "PRAYER", size=ctx.settings.body_size)
    cursor = layout_paragraph(canvas, cursor, clause("ia.prayer", relief=ia.relief_requested), first_line_indent=36)
    return signature_block(
        canvas, cursor, ctx, f"Counsel for the Petitioner/{label}", snapshot.basic_details.district
    )


def assemble_applications(snapshot, ctx):
    applications = ordered_applications(snapshot)
    canvas = ctx.new_canvas()
    if not applications:
        _placeholder(canvas, snapshot, "INTERLOCUTORY APPLICATION", clause("ia.none"))
        return canvas

    for index, ia in enumerate(applications):
        cursor = _start(canvas, snapshot, ia, first=index == 0)
        _application(canvas, cursor, snapshot, ctx, ia)
    logger.debug("Bundled %d interlocutory application(s) on %d page(s)", len(applications), canvas.page_count)
    return canvas


def _affidavit(canvas, cursor, snapshot, ctx, ia, deponent):
    label = label_for_side(snapshot, Side.APPLICANT, 1)
    cursor = layout_heading(canvas, cursor, f"AFFIDAVIT IN SUPPORT OF {ia.ia_number}".upper(), underline=True)
    cursor = layout_paragraph(
        canvas, cursor, clause("affidavit.deponent", description=party_description(deponent)), first_line_indent=36
    )
    paragraphs = [clause("ia.affidavit_capacity", ia_number=ia.ia_number, label_lower=label.lower())]
    paragraphs.extend(paragraphs_of(ia.facts))
    paragraphs.append(clause("ia.affidavit_petition_true"))
    paragraphs.append(clause("affidavit.closing"))
    for number, text in enumerate(paragraphs, start=1):
        cursor = layout_numbered_paragraph(canvas, cursor, number, text)
    return deponent_block(canvas, cursor, ctx, snapshot.basic_details.district)


def assemble_affidavits(snapshot, ctx):
    applications = [ia for ia in ordered_applications(snapshot) if ia.affidavit_required]
    canvas = ctx.new_canvas()
    if not applications:
        _placeholder(canvas, snapshot, "AFFIDAVIT", clause("ia.no_affidavits"))
        return canvas

    deponent = require(snapshot.plaintiffs, "party_details.plaintiffs", AFFIDAVIT_NAME)[0]
    for index, ia in enumerate(applications):
        cursor = _start(canvas, snapshot, ia, first=index == 0)
        _affidavit(canvas, cursor, snapshot, ctx, ia, deponent)
    return canvas
