from suitdraft.canvas import Cursor, LineOp, TextOp
from suitdraft.flow import Table, layout_heading, layout_numbered_paragraph, layout_paragraph, lettered
from suitdraft.textlayout import FontVariant

LONG_PARAGRAPH = " ".join(["The defendant trespassed into the plaint schedule property."] * 120)


def test_first_cursor_creates_the_first_page(ctx):
    canvas = ctx.new_canvas()
    assert canvas.page_count == 0
    cursor = canvas.first_cursor()
    assert cursor == Cursor(0, canvas.top)
    assert canvas.page_count == 1


def test_ensure_space_keeps_cursor_when_block_fits(ctx):
    canvas = ctx.new_canvas()
    cursor = canvas.first_cursor()
    assert canvas.ensure_space(cursor, 100) is cursor
    assert canvas.page_count == 1


def test_ensure_space_appends_page_at_top_margin(ctx):
    canvas = ctx.new_canvas()
    cursor = Cursor(0, canvas.bottom + 10)
    canvas.first_cursor()
    moved = canvas.ensure_space(cursor, 18)
    assert moved == Cursor(1, canvas.top)
    assert canvas.page_count == 2


def test_ensure_space_reuses_an_existing_next_page(ctx):
    canvas = ctx.new_canvas()
    canvas.first_cursor()
    canvas.new_page()
    moved = canvas.ensure_space(Cursor(0, canvas.bottom + 1), 18)
    assert moved == Cursor(1, canvas.top)
    assert canvas.page_count == 2


def test_oversized_block_at_top_of_page_does_not_add_pages(ctx):
    canvas = ctx.new_canvas()
    cursor = canvas.first_cursor()
    assert canvas.ensure_space(cursor, canvas.height * 2) == cursor
    assert canvas.page_count == 1


def test_long_paragraph_flows_onto_new_pages_inside_margins(ctx):
    canvas = ctx.new_canvas()
    layout_paragraph(canvas, canvas.first_cursor(), LONG_PARAGRAPH)
    assert canvas.page_count > 1
    for page in canvas.pages:
        for op in page.text_ops():
            assert canvas.bottom <= op.y <= canvas.top
            assert op.x >= canvas.left - 0.01


def test_paragraph_is_justified_except_last_line(ctx):
    canvas = ctx.new_canvas()
    layout_paragraph(canvas, canvas.first_cursor(), LONG_PARAGRAPH[:600])
    ops = canvas.pages[0].text_ops()
    last_y = min(op.y for op in ops)
    inner = [op for op in ops if op.y != last_y]
    last = [op for op in ops if op.y == last_y]
    assert inner and all(op.align == "justify" for op in inner)
    assert len(last) == 1 and last[0].align == "left"


def test_justified_line_ends_at_right_margin(ctx):
    canvas = ctx.new_canvas()
    layout_paragraph(canvas, canvas.first_cursor(), LONG_PARAGRAPH[:600])
    ops = canvas.pages[0].text_ops()
    first_y = ops[0].y
    last_word = [op for op in ops if op.y == first_y][-1]
    width = canvas.engine.measure_width(last_word.text)
    assert abs(last_word.x + width - canvas.right) < 0.01


def test_numbered_paragraph_draws_its_number(ctx):
    canvas = ctx.new_canvas()
    layout_numbered_paragraph(canvas, canvas.first_cursor(), 7, "The suit is valued correctly.")
    assert canvas.pages[0].texts()[0] == "7."


def test_table_repeats_header_on_every_page(ctx):
    canvas = ctx.new_canvas()
    table = Table(canvas, [("Sl. No.", 0.2, "center"), ("Particulars", 0.8, "left")])
    cursor = table.draw_header(canvas.first_cursor())
    for number in range(1, 80):
        cursor = table.add_row(cursor, [number, f"Document number {number}"])
    assert canvas.page_count > 1
    for page in canvas.pages:
        assert page.texts()[0] == "Sl. No."
        assert all(op.y >= canvas.bottom for op in page.text_ops())


def test_lettered_labels():
    assert [lettered(i) for i in (0, 1, 25, 26)] == ["a", "b", "z", "aa"]


def test_to_pdf_replays_recorded_pages(ctx):
    canvas = ctx.new_canvas()
    cursor = canvas.first_cursor()
    page = canvas.page_at(cursor)
    page.draw_text("VAKALATHNAMA", canvas.left, cursor.y)
    page.draw_line((canvas.left, 100), (canvas.right, 100), dash=(4, 3))
    page.draw_rect(canvas.left, 200, 100, 50, fill_gray=0.9)
    canvas.new_page()
    assert isinstance(page.ops[0], TextOp)
    assert isinstance(page.ops[1], LineOp)
    pdf = canvas.to_pdf(title="Vakalathnama")
    assert pdf.startswith(b"%PDF")


def test_table_row_taller_than_a_page_is_split_across_pages(ctx):
    canvas = ctx.new_canvas()
    table = Table(canvas, [("Sl. No.", 0.2, "center"), ("Particulars", 0.8, "left")])
    cursor = table.draw_header(canvas.first_cursor())
    cursor = table.add_row(cursor, [1, "Short row"])
    cursor = table.add_row(cursor, [2, " ".join(["Sale deed recital"] * 400)])
    table.add_row(cursor, [3, "Row after the long one"])
    assert canvas.page_count > 2
    for page in canvas.pages:
        assert page.texts()[0] == "Sl. No."
        for op in page.text_ops():
            assert canvas.bottom <= op.y <= canvas.top
    assert " ".join(canvas.all_texts()).count("recital") == 400
    assert "Row after the long one" in canvas.pages[-1].texts()


def test_wrapped_heading_is_underlined_line_by_line(ctx):
    canvas = ctx.new_canvas()
    heading = " ".join(["PETITION UNDER ORDER XXXIX RULES 1 AND 2 OF THE CODE OF CIVIL PROCEDURE"] * 3)
    layout_heading(canvas, canvas.first_cursor(), heading, underline=True)
    page = canvas.pages[0]
    lines = [op for op in page.ops if isinstance(op, LineOp)]
    texts = page.text_ops()
    assert len(texts) > 1
    assert len(lines) == len(texts)
    for text, line in zip(texts, lines):
        assert line.y1 == line.y2 == text.y - 2
        assert abs(line.x1 - text.x) < 0.01
        assert canvas.left - 0.01 <= line.x1 < line.x2 <= canvas.right + 0.01


def test_short_heading_underline_matches_its_width(ctx):
    canvas = ctx.new_canvas()
    layout_heading(canvas, canvas.first_cursor(), "PLAINT", underline=True)
    line = [op for op in canvas.pages[0].ops if isinstance(op, LineOp)][0]
    width = canvas.engine.measure_width("PLAINT", FontVariant.BOLD, canvas.settings.title_size)
    assert abs((line.x2 - line.x1) - width) < 0.01
