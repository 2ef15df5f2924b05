"""
Composable layout steps.

Every function takes the canvas and a Cursor, draws, and returns the cursor
for whatever comes next. Space is checked with ensure_space() before each
line or kept-together block, so body content can never run past the bottom
margin; new pages appear transparently.
"""

from .canvas import Cursor
from .textlayout import FontVariant


def _size(canvas, size):
    return size or canvas.settings.body_size


def _leading(canvas, leading, size=None):
    if leading:
        return leading
    if size and size != canvas.settings.body_size:
        return canvas.settings.leading * size / canvas.settings.body_size
    return canvas.settings.leading


def _column(canvas, x, width):
    x0 = canvas.left if x is None else x
    if width is None:
        width = canvas.right - x0
    return x0, width


def skip(canvas, cursor, height):
    """Vertical gap. Never leaves the cursor below the bottom margin."""
    return Cursor(cursor.page, max(cursor.y - height, canvas.bottom))


def layout_line(
    canvas,
    cursor,
    text,
    variant=FontVariant.REGULAR,
    size=None,
    align="left",
    x=None,
    width=None,
    leading=None,
    underline=False
):
    """
    One logical line, left/center/right aligned inside the column.
    Text too wide for the column is wrapped, each piece keeping the alignment
    and, when asked, its own underline.
    """
    size = _size(canvas, size)
    leading = _leading(canvas, leading, size)
    x0, width = _column(canvas, x, width)
    pieces = canvas.engine.wrap_to_lines(text, width, variant, size) or [""]
    for piece in pieces:
        cursor = canvas.ensure_space(cursor, leading)
        page = canvas.page_at(cursor)
        piece_width = canvas.engine.measure_width(piece, variant, size)
        if align == "center":
            start = x0 + (width - piece_width) / 2.0
            page.draw_centred_text(piece, x0 + width / 2.0, cursor.y, variant, size)
        elif align == "right":
            start = x0 + width - piece_width
            page.draw_right_text(piece, x0 + width, cursor.y, variant, size)
        else:
            start = x0
            page.draw_text(piece, x0, cursor.y, variant, size)
        if underline and piece:
            page.draw_line((start, cursor.y - 2), (start + piece_width, cursor.y - 2), width=0.7)
        cursor = Cursor(cursor.page, cursor.y - leading)
    return cursor


def layout_heading(canvas, cursor, text, size=None, gap_before=6, gap_after=6, underline=False):
    """Centred bold heading."""
    size = size or canvas.settings.title_size
    leading = _leading(canvas, None, size)
    cursor = skip(canvas, cursor, gap_before)
    # keep a heading with at least two lines of what follows
    cursor = canvas.ensure_space(cursor, leading + 2 * canvas.settings.leading)
    cursor = layout_line(canvas, cursor, text, FontVariant.BOLD, size, align="center", underline=underline)
    return skip(canvas, cursor, gap_after)


def _wrap_with_indent(canvas, text, width, first_line_indent, variant, size):
    words = text.split()
    if not words:
        return []
    engine = canvas.engine
    first_lines = engine.wrap_to_lines(" ".join(words), width - first_line_indent, variant, size)
    first = first_lines[0]
    rest_words = words[len(first.split()):]
    rest = engine.wrap_to_lines(" ".join(rest_words), width, variant, size) if rest_words else []
    return [first] + rest


def layout_paragraph(
    canvas,
    cursor,
    text,
    variant=FontVariant.REGULAR,
    size=None,
    x=None,
    width=None,
    first_line_indent=0,
    justify=True,
    leading=None,
    gap_after=None
):
    """
    Wraps one paragraph and draws it line by line, fully justified except
    for the final line, which stays left-aligned.
    """
    size = _size(canvas, size)
    leading = _leading(canvas, leading, size)
    x0, width = _column(canvas, x, width)
    lines = _wrap_with_indent(canvas, text, width, first_line_indent, variant, size)
    last_index = len(lines) - 1
    for index, line in enumerate(lines):
        cursor = canvas.ensure_space(cursor, leading)
        page = canvas.page_at(cursor)
        indent = first_line_indent if index == 0 else 0
        line_x = x0 + indent
        line_width = width - indent
        words = line.split()
        if justify and index < last_index and len(words) > 1:
            for word, offset in canvas.engine.justify(words, line_width, variant, size):
                page.draw_text(word, line_x + offset, cursor.y, variant, size, align="justify")
        else:
            page.draw_text(line, line_x, cursor.y, variant, size)
        cursor = Cursor(cursor.page, cursor.y - leading)
    if gap_after is None:
        gap_after = leading / 2.0
    return skip(canvas, cursor, gap_after) if lines else cursor


def paragraphs_of(text):
    """Non-blank, stripped paragraphs of newline-separated free text."""
    return [paragraph.strip() for paragraph in (text or "").split("\n") if paragraph.strip()]


def layout_text(canvas, cursor, text, **kwargs):
    """Several newline-separated paragraphs with the same styling."""
    for paragraph in paragraphs_of(text):
        cursor = layout_paragraph(canvas, cursor, paragraph, **kwargs)
    return cursor


def layout_numbered_paragraph(canvas, cursor, number, text, indent=36, **kwargs):
    """
    '12.   The plaintiff ...' with the number on the first line and the text
    wrapping back to the left margin.
    """
    size = _size(canvas, kwargs.get("size"))
    leading = _leading(canvas, kwargs.get("leading"), size)
    x0, _ = _column(canvas, kwargs.get("x"), kwargs.get("width"))
    cursor = canvas.ensure_space(cursor, 2 * leading)
    canvas.page_at(cursor).draw_text(f"{number}.", x0, cursor.y, FontVariant.REGULAR, size)
    return layout_paragraph(canvas, cursor, text, first_line_indent=indent, **kwargs)


def layout_hanging(canvas, cursor, label, text, label_x=None, text_indent=28, **kwargs):
    """Label in its own gutter, every text line starting at the same x."""
    size = _size(canvas, kwargs.get("size"))
    leading = _leading(canvas, kwargs.get("leading"), size)
    label_x = canvas.left if label_x is None else label_x
    cursor = canvas.ensure_space(cursor, leading)
    canvas.page_at(cursor).draw_text(label, label_x, cursor.y, kwargs.get("variant", FontVariant.REGULAR), size)
    text_x = label_x + text_indent
    return layout_paragraph(canvas, cursor, text, x=text_x, width=canvas.right - text_x, **kwargs)


def lettered(index):
    """0 -> 'a', 25 -> 'z', 26 -> 'aa'."""
    letters = ""
    index += 1
    while index:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord("a") + remainder) + letters
    return letters


def layout_lettered_items(canvas, cursor, items, indent=36, **kwargs):
    for index, item in enumerate(items):
        cursor = layout_hanging(
            canvas, cursor, f"({lettered(index)})", item, label_x=canvas.left + indent, **kwargs
        )
    return cursor


def layout_block(canvas, cursor, lines, align="right", x=None, width=None, size=None, leading=None):
    """
    Lines that must stay on one page (signature blocks, advocate details).
    `lines` holds plain strings or (text, variant) pairs.
    """
    size = _size(canvas, size)
    leading = _leading(canvas, leading, size)
    cursor = canvas.ensure_space(cursor, leading * len(lines))
    for line in lines:
        if isinstance(line, tuple):
            text, variant = line
        else:
            text, variant = line, FontVariant.REGULAR
        cursor = layout_line(canvas, cursor, text, variant, size, align=align, x=x, width=width, leading=leading)
    return cursor


###############################################################################
#  TABLES
###############################################################################
class Table:
    """
    Fixed-column table. Column widths are fractions of the content width, so
    the x-offsets never move. A row is moved whole to a new page when it
    would cross the bottom margin, and the header row is repeated there. A
    row taller than a page is sliced line by line across as many pages as
    it needs.
    """

    def __init__(self, canvas, columns, size=None, padding=4, rules=True):
        # columns: (title, fraction, align)
        self.canvas = canvas
        self.size = _size(canvas, size)
        self.leading = _leading(canvas, None, self.size)
        self.padding = padding
        self.rules = rules
        self.columns = []
        x = canvas.left
        for title, fraction, align in columns:
            width = canvas.content_width * fraction
            self.columns.append((title, x, width, align))
            x += width

    def _wrap_cells(self, cells, variant):
        wrapped = []
        for (_, _, width, _), cell in zip(self.columns, cells):
            text = "" if cell is None else str(cell)
            wrapped.append(self.canvas.engine.wrap_to_lines(text, width - 2 * self.padding, variant, self.size) or [""])
        return wrapped

    def _row_height(self, wrapped):
        return max(len(lines) for lines in wrapped) * self.leading + self.padding

    def _draw_row(self, cursor, wrapped, variant):
        page = self.canvas.page_at(cursor)
        height = self._row_height(wrapped)
        for (_, x, width, align), lines in zip(self.columns, wrapped):
            y = cursor.y
            for line in lines:
                if align == "center":
                    page.draw_centred_text(line, x + width / 2.0, y, variant, self.size)
                elif align == "right":
                    page.draw_right_text(line, x + width - self.padding, y, variant, self.size)
                else:
                    page.draw_text(line, x + self.padding, y, variant, self.size)
                y -= self.leading
        if self.rules:
            rule_y = cursor.y - height + self.leading - self.padding
            page.draw_line((self.canvas.left, rule_y), (self.canvas.right, rule_y), width=0.5)
        return Cursor(cursor.page, cursor.y - height)

    def draw_header(self, cursor):
        wrapped = self._wrap_cells([title for title, _, _, _ in self.columns], FontVariant.BOLD)
        cursor = self.canvas.ensure_space(cursor, self._row_height(wrapped) + self.leading)
        if self.rules:
            top_y = cursor.y + self.leading - self.padding / 2.0
            self.canvas.page_at(cursor).draw_line((self.canvas.left, top_y), (self.canvas.right, top_y), width=0.8)
        return self._draw_row(cursor, wrapped, FontVariant.BOLD)

    def _header_height(self):
        wrapped = self._wrap_cells([title for title, _, _, _ in self.columns], FontVariant.BOLD)
        return self._row_height(wrapped)

    def _lines_that_fit(self, cursor):
        return int((cursor.y - self.canvas.bottom - self.padding) // self.leading)

    def _split_row(self, cursor, wrapped, variant):
        """Draws a row taller than a page in slices, one slice per page."""
        while True:
            fit = self._lines_that_fit(cursor)
            if max(len(lines) for lines in wrapped) <= fit:
                return self._draw_row(cursor, wrapped, variant)
            if fit > 0:
                cursor = self._draw_row(cursor, [lines[:fit] for lines in wrapped], variant)
                wrapped = [lines[fit:] for lines in wrapped]
            cursor = self.draw_header(self.canvas.ensure_space(cursor, self.canvas.top))

    def add_row(self, cursor, cells, variant=FontVariant.REGULAR):
        wrapped = self._wrap_cells(cells, variant)
        height = self._row_height(wrapped)
        room = self.canvas.top - self.canvas.bottom - self._header_height()
        if height > room:
            return self._split_row(cursor, wrapped, variant)
        target = self.canvas.ensure_space(cursor, height)
        if target.page != cursor.page:
            target = self.draw_header(target)
        return self._draw_row(target, wrapped, variant)
