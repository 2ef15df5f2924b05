"""
Vakalathnama (or memo of appearance) with its docket page.

Page 1 carries the authorisation: the executing parties, in first person
singular or plural, appoint the named advocate(s) and grant the usual
powers. The executants are the client side, i.e. the side named by the
snapshot's applicant status. The docket follows on its own page.
"""

import logging

from ..clauses import clause
from ..flow import layout_block, layout_heading, layout_line, layout_paragraph, skip
from ..formatting import long_date
from ..grammar import advocate_label, format_advocate_names, format_name_list, pronouns
from ..models import Side, VakalathType
from ..textlayout import FontVariant
from .common import advocate_block, advocate_names, court_header, cause_title, label_for_side, require
from .docket import draw_docket

logger = logging.getLogger(__name__)

DOCUMENT_NAME = "Vakalathnama"


def _title(basic):
    if basic.vakalath_type == VakalathType.MEMO:
        return "MEMO OF APPEARANCE"
    return "VAKALATHNAMA"


def _authorisation(canvas, cursor, snapshot, ctx, executants, label):
    basic = snapshot.basic_details
    names = advocate_names(snapshot)
    adv = advocate_label(names)
    words = pronouns(len(executants))
    retained = f"{format_advocate_names(names)}, {adv.label}," if names else f"{adv.label},"

    text = " ".join([
        clause(
            "vakalath.executants",
            subject=words.subject,
            executants=format_name_list([p.name for p in executants]),
            label=label,
            case_type=basic.case_type,
        ),
        clause(
            "vakalath.authority",
            advocate_label=retained,
            advocate_prefix=adv.prefix,
            subject=words.subject,
            possessive=words.possessive,
            objective=words.objective,
        ),
    ])
    cursor = layout_paragraph(canvas, cursor, text, first_line_indent=36)
    return layout_paragraph(canvas, cursor, clause("vakalath.signed", date=long_date(ctx.today)), first_line_indent=36)


def _memo(canvas, cursor, snapshot, executants, label):
    names = advocate_names(snapshot)
    adv = advocate_label(names)
    text = clause(
        "memo.body",
        advocate_names=format_advocate_names(names) or "the undersigned",
        advocate_label_lower=adv.label_lower,
        verb="appear" if adv.is_plural else "appears",
        label=label,
        parties=format_name_list([p.name for p in executants]),
        case_type=snapshot.basic_details.case_type,
        advocate_objective="them" if adv.is_plural else "the said advocate",
    )
    return layout_paragraph(canvas, cursor, text, first_line_indent=36)


def _party_signatures(canvas, cursor, executants, label):
    lines = [(f"Signature of the {label}", FontVariant.BOLD)]
    numbered = len(executants) > 1
    for index, party in enumerate(executants, start=1):
        prefix = f"{index}. " if numbered else ""
        lines.append(f"{prefix}{party.name}  ..............................")
    return layout_block(canvas, skip(canvas, cursor, canvas.settings.leading), lines, align="left")


def _witnesses(canvas, cursor, witnesses):
    cursor = skip(canvas, cursor, canvas.settings.leading / 2.0)
    cursor = layout_line(canvas, cursor, "Witnesses:", FontVariant.BOLD)
    for index, witness in enumerate(witnesses, start=1):
        cursor = layout_line(canvas, cursor, f"{index}. {witness}")
    return cursor


def assemble(snapshot, ctx):
    basic = snapshot.basic_details
    side = snapshot.client_side
    field = "party_details.plaintiffs" if side == Side.APPLICANT else "party_details.defendants"
    executants = require(snapshot.parties_on(side), field, DOCUMENT_NAME)
    label = label_for_side(snapshot, side, len(executants))
    title = _title(basic)

    canvas = ctx.new_canvas()
    cursor = canvas.first_cursor()
    cursor = court_header(canvas, cursor, basic)
    cursor = cause_title(canvas, cursor, snapshot)
    cursor = layout_heading(canvas, cursor, title, underline=True)

    if basic.vakalath_type == VakalathType.MEMO:
        cursor = _memo(canvas, cursor, snapshot, executants, label)
    else:
        cursor = _authorisation(canvas, cursor, snapshot, ctx, executants, label)
        if basic.party_signature_required:
            cursor = _party_signatures(canvas, cursor, executants, label)
        if snapshot.witnesses:
            cursor = _witnesses(canvas, cursor, snapshot.witnesses)
        cursor = layout_line(canvas, skip(canvas, cursor, 6), "Accepted", align="right")

    advocate_block(canvas, cursor, snapshot)
    draw_docket(canvas, snapshot, ctx, title, accepted=basic.vakalath_type == VakalathType.VAKALATHNAMA)
    logger.debug("Vakalathnama laid out on %d page(s) for %d executant(s)", canvas.page_count, len(executants))
    return canvas
