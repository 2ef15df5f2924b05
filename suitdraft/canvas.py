"""
Append-only page sequence with an explicit layout cursor.

Assemblers draw onto Page objects, which only record operations. Once a
document is finished, PagedCanvas.to_pdf() replays every page onto a
reportlab canvas. Recording first lets a page be measured or centred before
anything is committed, and keeps the drawn text inspectable (tests, DOCX
export).
"""

from collections import namedtuple
from io import BytesIO

from reportlab.pdfgen import canvas

from .textlayout import FontVariant, TextEngine

Cursor = namedtuple("Cursor", ["page", "y"])

TextOp = namedtuple("TextOp", ["text", "x", "y", "font", "size", "align"])
LineOp = namedtuple("LineOp", ["x1", "y1", "x2", "y2", "width", "dash"])
RectOp = namedtuple("RectOp", ["x", "y", "width", "height", "line_width", "fill_gray"])


class Page:
    """A single fixed-size sheet. Never rejects a draw call."""

    def __init__(self, typeface, width, height):
        self.typeface = typeface
        self.width = width
        self.height = height
        self.ops = []

    def draw_text(self, text, x, y, variant=FontVariant.REGULAR, size=12, align="left"):
        if not text:
            return
        font = self.typeface.font(variant)
        self.ops.append(TextOp(text, x, y, font.name, size, align))

    def draw_centred_text(self, text, x_centre, y, variant=FontVariant.REGULAR, size=12):
        width = self.typeface.font(variant).width_of_text_at_size(text, size)
        self.draw_text(text, x_centre - width / 2.0, y, variant, size, align="center")

    def draw_right_text(self, text, x_right, y, variant=FontVariant.REGULAR, size=12):
        width = self.typeface.font(variant).width_of_text_at_size(text, size)
        self.draw_text(text, x_right - width, y, variant, size, align="right")

    def draw_line(self, start, end, width=1, dash=None):
        self.ops.append(LineOp(start[0], start[1], end[0], end[1], width, dash))

    def draw_rect(self, x, y, width, height, line_width=1, fill_gray=None):
        self.ops.append(RectOp(x, y, width, height, line_width, fill_gray))

    def text_ops(self):
        return [op for op in self.ops if isinstance(op, TextOp)]

    def texts(self):
        """Drawn strings in drawing order."""
        return [op.text for op in self.text_ops()]

    def plain_text(self):
        return " ".join(self.texts())


class PagedCanvas:
    """
    An ordered, append-only list of pages plus the margins that define the
    writable area. Layout code threads a Cursor through its calls and asks
    ensure_space() before committing a block of known height.
    """

    def __init__(self, typeface, settings, width, height):
        self.typeface = typeface
        self.engine = TextEngine(typeface)
        self.settings = settings
        self.width = width
        self.height = height
        self.pages = []

    @property
    def top(self):
        return self.height - self.settings.margin_top

    @property
    def bottom(self):
        return self.settings.margin_bottom

    @property
    def left(self):
        return self.settings.margin_left

    @property
    def right(self):
        return self.width - self.settings.margin_right

    @property
    def content_width(self):
        return self.right - self.left

    @property
    def page_count(self):
        return len(self.pages)

    def new_page(self):
        self.pages.append(Page(self.typeface, self.width, self.height))
        return Cursor(len(self.pages) - 1, self.top)

    def first_cursor(self):
        if not self.pages:
            return self.new_page()
        return Cursor(0, self.top)

    def page_at(self, cursor):
        return self.pages[cursor.page]

    def fits(self, cursor, required_height):
        return cursor.y - required_height >= self.bottom

    def ensure_space(self, cursor, required_height):
        """
        Returns `cursor` unchanged when a block of `required_height` fits
        above the bottom margin, otherwise a cursor at the top of a newly
        appended page. A block taller than a whole page still gets a fresh
        page and then runs on.
        """
        if self.fits(cursor, required_height):
            return cursor
        if cursor.y >= self.top and cursor.page == len(self.pages) - 1:
            # already at the top of the last page; a new page would not help
            return cursor
        if cursor.page < len(self.pages) - 1:
            return Cursor(cursor.page + 1, self.top)
        return self.new_page()

    def all_texts(self):
        return [text for page in self.pages for text in page.texts()]

    def plain_text(self):
        return " ".join(page.plain_text() for page in self.pages)

    ###########################################################################
    #  RENDERING
    ###########################################################################
    def to_pdf(self, title="", subject=""):
        buffer = BytesIO()
        pdf_canvas = canvas.Canvas(buffer, pagesize=(self.width, self.height))
        pdf_canvas.setTitle(title)
        pdf_canvas.setAuthor(self.settings.author)
        pdf_canvas.setSubject(subject)
        pdf_canvas.setCreator("suitdraft")

        total_pages = len(self.pages)
        for page_number, page in enumerate(self.pages, start=1):
            self._draw_page(pdf_canvas, page)
            if self.settings.number_pages and total_pages > 1:
                footer_font = self.typeface.font(FontVariant.ITALIC).name
                pdf_canvas.setFont(footer_font, 9)
                footer_text = f"Page {page_number} of {total_pages}"
                pdf_canvas.drawCentredString(self.width / 2.0, self.bottom / 2.0, footer_text)
            pdf_canvas.showPage()

        pdf_canvas.save()
        return buffer.getvalue()

    def _draw_page(self, pdf_canvas, page):
        for op in page.ops:
            if isinstance(op, TextOp):
                pdf_canvas.setFont(op.font, op.size)
                pdf_canvas.drawString(op.x, op.y, op.text)
            elif isinstance(op, LineOp):
                pdf_canvas.setLineWidth(op.width)
                if op.dash:
                    pdf_canvas.setDash(*op.dash)
                pdf_canvas.line(op.x1, op.y1, op.x2, op.y2)
                if op.dash:
                    pdf_canvas.setDash()
            elif isinstance(op, RectOp):
                pdf_canvas.setLineWidth(op.line_width)
                if op.fill_gray is not None:
                    pdf_canvas.setFillGray(op.fill_gray)
                    pdf_canvas.rect(op.x, op.y, op.width, op.height, stroke=1, fill=1)
                    pdf_canvas.setFillGray(0)
                else:
                    pdf_canvas.rect(op.x, op.y, op.width, op.height, stroke=1, fill=0)
