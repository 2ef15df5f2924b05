"""
Runtime settings for document generation.

Values come from the environment (a local .env file is honoured) so the
CLI and any embedding application can tune fonts, margins and output
without code changes.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# A4 in points
PAGE_WIDTH = 595.28
PAGE_HEIGHT = 841.89

FONT_FAMILY = os.getenv("SUITDRAFT_FONT_FAMILY", "Times")
BODY_FONT_SIZE = float(os.getenv("SUITDRAFT_BODY_FONT_SIZE", "12"))
LEADING = float(os.getenv("SUITDRAFT_LEADING", "18"))

MARGIN_TOP = float(os.getenv("SUITDRAFT_MARGIN_TOP", "60"))
MARGIN_BOTTOM = float(os.getenv("SUITDRAFT_MARGIN_BOTTOM", "60"))
MARGIN_LEFT = float(os.getenv("SUITDRAFT_MARGIN_LEFT", "72"))
MARGIN_RIGHT = float(os.getenv("SUITDRAFT_MARGIN_RIGHT", "54"))

INCLUDE_DOCKET = os.getenv("SUITDRAFT_INCLUDE_DOCKET", "1") == "1"
NUMBER_PAGES = os.getenv("SUITDRAFT_NUMBER_PAGES", "1") == "1"

OUTPUT_DIR = os.getenv("SUITDRAFT_OUTPUT_DIR", "generated")
LOG_LEVEL = os.getenv("SUITDRAFT_LOG_LEVEL", "INFO")
AUTHOR = os.getenv("SUITDRAFT_AUTHOR", "Kerala Suit Drafting")


class LayoutSettings:
    """
    Layout knobs shared by every assembler in a generation run.
    Defaults are the module-level settings above; any of them can be
    overridden per run, e.g. LayoutSettings(font_family="Helvetica").
    """

    def __init__(
        self,
        font_family=None,
        body_size=None,
        leading=None,
        margin_top=None,
        margin_bottom=None,
        margin_left=None,
        margin_right=None,
        include_docket=None,
        number_pages=None,
        author=None
    ):
        self.font_family = font_family or FONT_FAMILY
        self.body_size = body_size or BODY_FONT_SIZE
        self.leading = leading or LEADING
        self.margin_top = MARGIN_TOP if margin_top is None else margin_top
        self.margin_bottom = MARGIN_BOTTOM if margin_bottom is None else margin_bottom
        self.margin_left = MARGIN_LEFT if margin_left is None else margin_left
        self.margin_right = MARGIN_RIGHT if margin_right is None else margin_right
        self.include_docket = INCLUDE_DOCKET if include_docket is None else include_docket
        self.number_pages = NUMBER_PAGES if number_pages is None else number_pages
        self.author = author or AUTHOR

    @property
    def small_size(self):
        return self.body_size - 2

    @property
    def title_size(self):
        return self.body_size + 2

    def __repr__(self):
        return (
            f"LayoutSettings(font_family={self.font_family!r}, body_size={self.body_size}, "
            f"leading={self.leading}, include_docket={self.include_docket})"
        )
