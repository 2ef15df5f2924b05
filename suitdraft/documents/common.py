"""
Pieces shared by every document assembler: the layout context, required-data
checks, the court header, the cause title and dated signature blocks.
"""

import datetime

from ..canvas import PagedCanvas
from ..config import PAGE_HEIGHT, PAGE_WIDTH, LayoutSettings
from ..errors import MissingRequiredDataError
from ..flow import layout_block, layout_hanging, layout_heading, layout_line, layout_paragraph, skip
from ..formatting import case_number_line, long_date, party_description, short_date
from ..grammar import pluralize, side_labels
from ..models import Side
from ..textlayout import FontVariant, TextEngine, Typeface


class LayoutContext:
    """
    Everything an assembler needs besides the snapshot: settings, the
    typeface and text engine, the date documents are signed on and the
    documents already produced earlier in the same run.
    """

    def __init__(self, settings=None, today=None, prior_documents=()):
        self.settings = settings or LayoutSettings()
        self.today = today or datetime.date.today()
        self.typeface = Typeface(self.settings.font_family)
        self.engine = TextEngine(self.typeface)
        self.prior_documents = tuple(prior_documents)

    def new_canvas(self):
        return PagedCanvas(self.typeface, self.settings, PAGE_WIDTH, PAGE_HEIGHT)

    def with_prior(self, documents):
        """Same settings and date, different set of earlier documents."""
        return LayoutContext(self.settings, self.today, documents)


def require(value, field, document):
    """Returns `value`, or raises MissingRequiredDataError when it is None or empty."""
    if value is None:
        raise MissingRequiredDataError(field, document)
    if isinstance(value, str) and not value.strip():
        raise MissingRequiredDataError(field, document)
    if isinstance(value, (list, tuple, dict)) and not value:
        raise MissingRequiredDataError(field, document)
    return value


###############################################################################
#  LABELS
###############################################################################
def side_label(label, count):
    """'Petitioner/Plaintiff' with 2 parties -> 'Petitioners/Plaintiffs'."""
    if count <= 1:
        return label
    return "/".join(pluralize(part) for part in label.split("/"))


def labels_for(snapshot):
    """(applicant label, opposite label) for the snapshot's case type."""
    return side_labels(snapshot.basic_details.case_type)


def label_for_side(snapshot, side, count=None):
    applicant, opposite = labels_for(snapshot)
    label = applicant if side == Side.APPLICANT else opposite
    if count is None:
        count = len(snapshot.parties_on(side))
    return side_label(label, count)


def advocate_names(snapshot):
    return snapshot.advocate.name if snapshot.advocate else ""


def advocate_contact_lines(advocate):
    """Roll number, address and mobile, skipping whatever is blank."""
    lines = []
    if advocate.enrollment_number:
        lines.append(f"Enrl. No. {advocate.enrollment_number}")
    if advocate.address.strip():
        lines.append(advocate.address.strip())
    if advocate.mobile.strip():
        lines.append(f"Mob: {advocate.mobile.strip()}")
    return lines


###############################################################################
#  HEADER AND CAUSE TITLE
###############################################################################
def court_header(canvas, cursor, basic, title=None):
    """
    BEFORE THE <COURT>, <DISTRICT>
    OS No. ____ of 2025
    [title]
    """
    court = basic.court.upper()
    if basic.district and basic.district.upper() not in court:
        court = f"{court}, {basic.district.upper()}"
    cursor = layout_heading(canvas, cursor, f"BEFORE THE {court}", gap_before=0, gap_after=2)
    cursor = layout_line(canvas, cursor, case_number_line(basic), FontVariant.BOLD, align="center")
    if title:
        cursor = layout_heading(canvas, cursor, title, gap_before=10, underline=True)
    return skip(canvas, cursor, 6)


def _side_block(canvas, cursor, parties, label, detailed):
    numbered = len(parties) > 1
    text_width = canvas.content_width * 0.72
    for index, party in enumerate(parties, start=1):
        text = party_description(party) if detailed else party.name
        if numbered:
            cursor = layout_hanging(
                canvas, cursor, f"{index}.", text, text_indent=20, justify=False, gap_after=2
            )
        else:
            cursor = layout_paragraph(canvas, cursor, text, width=text_width, justify=False, gap_after=2)
    return layout_line(canvas, cursor, f"... {label}", FontVariant.BOLD, align="right")


def cause_title(canvas, cursor, snapshot, detailed=False):
    """
    Applicant-side parties, 'Vs.', opposite-side parties, each side closed by
    its right-aligned, number-agreeing label. Parties are numbered only when
    a side has more than one.
    """
    plaintiffs = snapshot.plaintiffs
    defendants = snapshot.defendants
    cursor = _side_block(
        canvas, cursor, plaintiffs, label_for_side(snapshot, Side.APPLICANT, len(plaintiffs)), detailed
    )
    cursor = skip(canvas, cursor, 4)
    cursor = layout_line(canvas, cursor, "Vs.", FontVariant.BOLD, align="center")
    cursor = skip(canvas, cursor, 4)
    cursor = _side_block(
        canvas, cursor, defendants, label_for_side(snapshot, Side.OPPOSITE, len(defendants)), detailed
    )
    return skip(canvas, cursor, 8)


###############################################################################
#  DATES AND SIGNATURES
###############################################################################
def dated_line(ctx):
    return f"Dated this the {long_date(ctx.today)}."


def signature_block(canvas, cursor, ctx, signer, place=None, names=()):
    """
    Place / date on the left, the signer's label (and names) on the right,
    kept together on one page.
    """
    leading = canvas.settings.leading
    right_lines = [("", FontVariant.REGULAR)] + [(name, FontVariant.REGULAR) for name in names] + [
        (signer, FontVariant.BOLD)
    ]
    left_lines = [f"Place: {place or ''}".rstrip(), f"Date: {short_date(ctx.today)}"]
    height = leading * (max(len(left_lines), len(right_lines)) + 1)
    cursor = canvas.ensure_space(skip(canvas, cursor, leading), height)
    top = cursor
    half = canvas.content_width / 2.0
    end_left = layout_block(canvas, top, left_lines, align="left", width=half)
    end_right = layout_block(canvas, top, right_lines, align="right", x=canvas.left + half, width=half)
    return min(end_left, end_right, key=lambda c: c.y)


def advocate_block(canvas, cursor, snapshot, heading="Counsel for the"):
    """Right-aligned advocate signature with enrolment number, address and mobile."""
    advocate = snapshot.advocate
    label = label_for_side(snapshot, snapshot.client_side)
    lines = [("", FontVariant.REGULAR)]
    if advocate:
        lines.append((advocate.name, FontVariant.BOLD))
        lines.extend(advocate_contact_lines(advocate))
    lines.append(f"{heading} {label}")
    return layout_block(canvas, skip(canvas, cursor, canvas.settings.leading), lines, align="right")
