"""
Plaint.

The body is one run of numbered paragraphs: the parties, the summary, the
facts in date order, the cause of action, jurisdiction, valuation and the
prayer. The counter is never reset between sections, and the verification
names the last paragraph number. The schedules follow the verification,
then (optionally) the docket.
"""

import logging

from ..clauses import clause
from ..flow import (
    layout_heading,
    layout_hanging,
    layout_lettered_items,
    layout_line,
    layout_numbered_paragraph,
    layout_paragraph,
    paragraphs_of,
    skip,
)
from ..formatting import BLANK, area_text, long_date, party_description, rupees, short_date
from ..grammar import format_name_list, pronouns
from ..models import ScheduleType, Side
from ..textlayout import FontVariant
from .common import advocate_names, cause_title, court_header, label_for_side, require, signature_block
from .docket import draw_docket

logger = logging.getLogger(__name__)

DOCUMENT_NAME = "Plaint"

BOUNDARY_SIDES = ("north", "south", "east", "west")


class ParagraphCounter:
    """Running paragraph number shared by every section of the plaint."""

    def __init__(self):
        self.last = 0

    def next(self):
        self.last += 1
        return self.last


def _party_descriptions(parties):
    numbered = len(parties) > 1
    parts = []
    for index, party in enumerate(parties, start=1):
        prefix = f"({index}) " if numbered else ""
        parts.append(prefix + party_description(party))
    return "; ".join(parts)


def _service_address(snapshot):
    advocate = snapshot.advocate
    if not advocate:
        return "as shown above"
    text = f"that of their counsel {advocate.name}"
    if advocate.address:
        text += f", {advocate.address}"
    return text


def _facts(plaint):
    return sorted(plaint.facts_of_case.chronology, key=lambda f: (f.date, f.order))


def _reliefs(plaint):
    return [relief.description for relief in sorted(plaint.relief_sought, key=lambda r: r.order)]


def _schedules(snapshot):
    return sorted(snapshot.schedule_details.schedules, key=lambda s: s.order)


def _schedule_name(schedule):
    """'A' and 'Schedule A' both read as 'A'."""
    name = schedule.schedule_name.strip()
    if name.lower().startswith("schedule"):
        name = name[len("schedule"):].strip()
    return name


def _body(canvas, cursor, snapshot, plaint, counter):
    plaintiffs = snapshot.plaintiffs
    defendants = snapshot.defendants
    plaintiff_label = label_for_side(snapshot, Side.APPLICANT, len(plaintiffs))
    defendant_label = label_for_side(snapshot, Side.OPPOSITE, len(defendants))

    def paragraph(text, c):
        return layout_numbered_paragraph(canvas, c, counter.next(), text)

    cursor = paragraph(clause(
        "plaint.applicant_description",
        label_lower=plaintiff_label.lower(),
        is_are="are" if len(plaintiffs) > 1 else "is",
        descriptions=_party_descriptions(plaintiffs),
        service_address=_service_address(snapshot),
    ), cursor)
    cursor = paragraph(clause(
        "plaint.opposite_description",
        label_lower=defendant_label.lower(),
        is_are="are" if len(defendants) > 1 else "is",
        descriptions=_party_descriptions(defendants),
    ), cursor)

    for summary in paragraphs_of(plaint.facts_of_case.summary):
        cursor = paragraph(clause("plaint.summary", summary=summary), cursor)

    for fact in _facts(plaint):
        cursor = paragraph(clause("plaint.fact", date=short_date(fact.date), description=fact.description), cursor)

    cause = plaint.cause_of_action
    cursor = paragraph(clause(
        "plaint.cause_of_action",
        date=short_date(cause.date_of_cause),
        place=cause.place_of_cause,
        description=cause.description,
    ).strip(), cursor)

    jurisdiction = plaint.jurisdiction
    cursor = paragraph(clause("plaint.territorial", text=jurisdiction.territorial_jurisdiction).strip(), cursor)
    cursor = paragraph(clause("plaint.pecuniary", text=jurisdiction.pecuniary_jurisdiction).strip(), cursor)
    cursor = paragraph(clause("plaint.subject_matter", text=jurisdiction.subject_matter_jurisdiction).strip(), cursor)

    valuation = plaint.valuation
    cursor = paragraph(clause(
        "plaint.valuation",
        market_value=rupees(valuation.market_value),
        relief_value=rupees(valuation.relief_value),
        court_fee=rupees(valuation.court_fee),
        calculation=valuation.court_fee_calculation,
    ).strip(), cursor)

    schedules = _schedules(snapshot)
    if schedules:
        names = format_name_list([_schedule_name(s) for s in schedules])
        cursor = paragraph(clause("plaint.schedules", schedule_names=names), cursor)

    cursor = paragraph(clause(
        "plaint.prayer",
        label_lower=plaintiff_label.lower(),
        pray="pray" if len(plaintiffs) > 1 else "prays",
        opposite_lower=defendant_label.lower(),
    ), cursor)
    cursor = layout_lettered_items(canvas, cursor, _reliefs(plaint))
    return layout_paragraph(canvas, cursor, clause("plaint.prayer_close"), x=canvas.left + 36)


def _verification(canvas, cursor, snapshot, ctx, last_paragraph):
    plaintiffs = snapshot.plaintiffs
    label = label_for_side(snapshot, Side.APPLICANT, len(plaintiffs))
    words = pronouns(len(plaintiffs))
    cursor = layout_heading(canvas, cursor, "VERIFICATION", size=ctx.settings.body_size, gap_before=12)
    text = clause(
        "plaint.verification",
        subject=words.subject,
        subject_lower="I" if words.subject == "I" else words.subject.lower(),
        names=format_name_list([p.name for p in plaintiffs]),
        label_lower=label.lower(),
        last_paragraph=last_paragraph,
        possessive=words.possessive,
        date=long_date(ctx.today),
        place=snapshot.basic_details.district,
    )
    cursor = layout_paragraph(canvas, cursor, text, first_line_indent=36)
    return signature_block(canvas, cursor, ctx, label, snapshot.basic_details.district, [p.name for p in plaintiffs])


def _schedule(canvas, cursor, schedule):
    cursor = layout_heading(canvas, cursor, f"SCHEDULE {_schedule_name(schedule)}".upper(), size=canvas.settings.body_size)
    cursor = layout_paragraph(canvas, cursor, schedule.description, first_line_indent=36)

    measurements = schedule.measurements
    details = []
    if measurements is not None:
        details.append(("Extent", area_text(measurements)))
        if measurements.survey_number:
            details.append(("Survey No.", measurements.survey_number))
        if measurements.dimensions:
            details.append(("Dimensions", measurements.dimensions))
    registration = schedule.registration_details
    if registration is not None:
        details.append((
            "Document",
            f"No. {registration.document_number} of {registration.year}, SRO {registration.sro}",
        ))
    for label, value in details:
        cursor = layout_hanging(canvas, cursor, f"{label}:", value, text_indent=90, justify=False, gap_after=0)

    if schedule.schedule_type == ScheduleType.PROPERTY or schedule.boundaries is not None:
        boundaries = schedule.boundaries
        cursor = skip(canvas, cursor, 4)
        cursor = layout_line(canvas, cursor, "Boundaries", FontVariant.BOLD)
        for side in BOUNDARY_SIDES:
            value = getattr(boundaries, side, "") if boundaries is not None else ""
            cursor = layout_hanging(
                canvas, cursor, f"{side.capitalize()}:", value or BLANK, text_indent=90, justify=False, gap_after=0
            )
    return skip(canvas, cursor, canvas.settings.leading)


def assemble(snapshot, ctx):
    plaint = require(snapshot.plaint_details, "plaint_details", DOCUMENT_NAME)
    require(snapshot.plaintiffs, "party_details.plaintiffs", DOCUMENT_NAME)
    require(snapshot.defendants, "party_details.defendants", DOCUMENT_NAME)

    canvas = ctx.new_canvas()
    cursor = canvas.first_cursor()
    cursor = court_header(canvas, cursor, snapshot.basic_details)
    cursor = cause_title(canvas, cursor, snapshot, detailed=True)
    cursor = layout_heading(canvas, cursor, clause("plaint.heading"), size=ctx.settings.body_size, underline=True)

    counter = ParagraphCounter()
    cursor = _body(canvas, cursor, snapshot, plaint, counter)

    plaintiff_label = label_for_side(snapshot, Side.APPLICANT)
    cursor = signature_block(
        canvas, cursor, ctx, f"Counsel for the {plaintiff_label}", snapshot.basic_details.district,
        [advocate_names(snapshot)] if advocate_names(snapshot) else [],
    )
    cursor = _verification(canvas, cursor, snapshot, ctx, counter.last)

    schedules = _schedules(snapshot)
    if schedules:
        cursor = canvas.new_page()
        for schedule in schedules:
            cursor = _schedule(canvas, cursor, schedule)

    if ctx.settings.include_docket:
        draw_docket(canvas, snapshot, ctx, "PLAINT")

    logger.debug("Plaint: %d numbered paragraph(s), %d page(s)", counter.last, canvas.page_count)
    return canvas
