"""
Half-page docket.

The docket is the outside face of a folded filing: everything is drawn in
the right half of the sheet, the left half is left blank for the fold. The
block is measured first and then centred vertically on its own page.
"""

from ..canvas import Cursor
from ..flow import layout_line, skip
from ..formatting import case_number_line, short_date
from ..models import Side
from ..textlayout import FontVariant
from .common import advocate_contact_lines, advocate_names, label_for_side

FOLD_GUTTER = 20


def _first_with_others(parties):
    if not parties:
        return ""
    return parties[0].name + (" & Others" if len(parties) > 1 else "")


def docket_entries(snapshot, ctx, title, accepted=False):
    """
    The docket as (text, variant, size, align, gap_after) entries,
    top to bottom.
    """
    basic = snapshot.basic_details
    body = ctx.settings.body_size
    bold = FontVariant.BOLD
    regular = FontVariant.REGULAR
    entries = [
        (f"Filed on: {short_date(ctx.today)}", regular, body - 1, "left", 24),
        ("BEFORE THE", bold, body + 2, "center", 2),
        (basic.court.upper(), bold, body + 2, "center", 2),
        (basic.district.upper(), regular, body, "center", 14),
        (case_number_line(basic), bold, body + 1, "center", 24),
        (_first_with_others(snapshot.plaintiffs), regular, body + 1, "center", 0),
        (f"... {label_for_side(snapshot, Side.APPLICANT)}", bold, body, "right", 10),
        ("Vs.", bold, body, "center", 10),
        (_first_with_others(snapshot.defendants), regular, body + 1, "center", 0),
        (f"... {label_for_side(snapshot, Side.OPPOSITE)}", bold, body, "right", 30),
        (title, bold, body + 6, "center", 30),
    ]
    if accepted:
        entries.append(("Accepted", regular, body + 1, "right", 36))
    names = advocate_names(snapshot)
    if names:
        entries.append((names.upper(), bold, body, "center", 2))
        for line in advocate_contact_lines(snapshot.advocate):
            entries.append((line, regular, body - 1, "center", 2))
        entries.append((f"Counsel for the {label_for_side(snapshot, snapshot.client_side)}", regular, body, "center", 0))
    return [entry for entry in entries if entry[0]]


def _entry_height(canvas, entry, width):
    text, variant, size, _, gap_after = entry
    lines = canvas.engine.wrap_to_lines(text, width, variant, size) or [""]
    return len(lines) * size * 1.5 + gap_after


def draw_docket(canvas, snapshot, ctx, title, accepted=False):
    """
    Appends one docket page to `canvas` and returns the cursor below it.
    Nothing is drawn left of the fold line.
    """
    cursor = canvas.new_page()
    page = canvas.page_at(cursor)
    fold_x = canvas.width / 2.0
    x = fold_x + FOLD_GUTTER
    width = canvas.right - x

    entries = docket_entries(snapshot, ctx, title, accepted)
    total_height = sum(_entry_height(canvas, entry, width) for entry in entries)
    available = canvas.top - canvas.bottom
    first_baseline = canvas.top - max(0.0, (available - total_height) / 2.0)

    page.draw_line((fold_x, canvas.bottom), (fold_x, canvas.top), width=0.5, dash=(4, 3))

    cursor = Cursor(cursor.page, first_baseline)
    for text, variant, size, align, gap_after in entries:
        cursor = layout_line(canvas, cursor, text, variant, size, align=align, x=x, width=width, leading=size * 1.5)
        cursor = skip(canvas, cursor, gap_after)
    return cursor
