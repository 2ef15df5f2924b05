"""
Font metrics, greedy word-wrap and full justification.

Widths come from reportlab's AFM metrics for the standard PDF fonts, so the
line breaks computed here are exactly the ones the rendered PDF shows.
"""

from enum import Enum

from reportlab.pdfbase.pdfmetrics import stringWidth


class FontVariant(str, Enum):
    REGULAR = "regular"
    BOLD = "bold"
    ITALIC = "italic"


# Standard-14 PDF font names per family
FONT_FAMILIES = {
    "Times": {
        FontVariant.REGULAR: "Times-Roman",
        FontVariant.BOLD: "Times-Bold",
        FontVariant.ITALIC: "Times-Italic",
    },
    "Helvetica": {
        FontVariant.REGULAR: "Helvetica",
        FontVariant.BOLD: "Helvetica-Bold",
        FontVariant.ITALIC: "Helvetica-Oblique",
    },
    "Courier": {
        FontVariant.REGULAR: "Courier",
        FontVariant.BOLD: "Courier-Bold",
        FontVariant.ITALIC: "Courier-Oblique",
    },
}


class Font:
    def __init__(self, name):
        self.name = name

    def width_of_text_at_size(self, text, size):
        return stringWidth(text, self.name, size)

    def __repr__(self):
        return f"Font({self.name!r})"


class Typeface:
    """One font family with regular, bold and italic variants."""

    def __init__(self, family="Times"):
        if family not in FONT_FAMILIES:
            raise ValueError(
                f"Unknown font family {family!r}; expected one of {', '.join(sorted(FONT_FAMILIES))}"
            )
        self.family = family
        self._fonts = {variant: Font(name) for variant, name in FONT_FAMILIES[family].items()}

    def font(self, variant=FontVariant.REGULAR):
        return self._fonts[FontVariant(variant)]


class TextEngine:
    """
    Measures, wraps and justifies text for one typeface.
    Nothing here raises: empty input simply produces no lines.
    """

    def __init__(self, typeface):
        self.typeface = typeface

    def font_name(self, variant=FontVariant.REGULAR):
        return self.typeface.font(variant).name

    def measure_width(self, text, variant=FontVariant.REGULAR, size=12):
        return self.typeface.font(variant).width_of_text_at_size(text, size)

    def wrap_to_lines(self, text, max_width, variant=FontVariant.REGULAR, size=12):
        """
        Greedy wrap of a single paragraph. Words are never split; a word
        wider than `max_width` is placed alone on its own line.
        """
        return [line for line, _ in self._wrap_words(text.split(), max_width, variant, size)]

    def wrap_paragraphs(self, full_text, max_width, variant=FontVariant.REGULAR, size=12):
        """
        Splits text on newlines into paragraphs and wraps each one.
        Returns (line_string, ended_full_line) pairs; ended_full_line is True
        when the next word had to move to a new line, i.e. the line may be
        justified. The last line of every paragraph is False.
        """
        all_lines = []
        for paragraph in full_text.split("\n"):
            words = paragraph.split()
            if not words:
                all_lines.append(("", False))
                continue
            all_lines.extend(self._wrap_words(words, max_width, variant, size))
        return all_lines

    def _wrap_words(self, words, max_width, variant, size):
        lines = []
        current_line = ""
        for word in words:
            test_line = word if not current_line else (current_line + " " + word)
            if not current_line or self.measure_width(test_line, variant, size) <= max_width:
                current_line = test_line
            else:
                lines.append((current_line, True))
                current_line = word
        if current_line:
            lines.append((current_line, False))
        return lines

    def justify(self, line_words, max_width, variant=FontVariant.REGULAR, size=12):
        """
        Spreads the words of one line across `max_width`.
        Returns (word, x_offset) pairs measured from the line's left edge.
        """
        words = [w for w in line_words if w]
        if not words:
            return []
        if len(words) == 1:
            return [(words[0], 0.0)]
        widths = [self.measure_width(w, variant, size) for w in words]
        gap = (max_width - sum(widths)) / (len(words) - 1)
        placed = []
        x = 0.0
        for word, width in zip(words, widths):
            placed.append((word, x))
            x += width + gap
        return placed
