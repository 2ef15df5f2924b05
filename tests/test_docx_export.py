from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH

from suitdraft.docx_export import build_docx, generate_document_docx, page_lines
from suitdraft.documents import vakalathnama
from suitdraft.flow import layout_heading, layout_paragraph
from suitdraft.orchestrator import DocumentGenerator
from suitdraft.documents import LayoutContext
from conftest import TODAY


def test_page_lines_group_by_baseline_left_to_right(ctx):
    canvas = ctx.new_canvas()
    cursor = canvas.first_cursor()
    page = canvas.page_at(cursor)
    page.draw_text("retain", 200, 500)
    page.draw_text("appoint", 100, 500)
    page.draw_text("VAKALATHNAMA", 150, 700)
    lines = page_lines(page)
    assert [[op.text for op in line] for line in lines] == [["VAKALATHNAMA"], ["appoint", "retain"]]


def test_build_docx_mirrors_pages(snapshot, ctx):
    canvas = vakalathnama.assemble(snapshot, ctx)
    doc = build_docx(canvas, title="Vakalathnama")
    texts = [p.text for p in doc.paragraphs]
    assert "VAKALATHNAMA" in texts
    page_breaks = [p for p in doc.paragraphs if 'w:type="page"' in p._p.xml]
    assert len(page_breaks) == canvas.page_count - 1
    assert doc.core_properties.title == "Vakalathnama"


def test_alignment_follows_layout(ctx):
    canvas = ctx.new_canvas()
    cursor = layout_heading(canvas, canvas.first_cursor(), "PLAINT")
    layout_paragraph(canvas, cursor, " ".join(["The plaintiff submits as follows."] * 12))
    doc = build_docx(canvas)
    heading = doc.paragraphs[0]
    assert heading.text == "PLAINT"
    assert heading.alignment == WD_ALIGN_PARAGRAPH.CENTER
    assert heading.runs[0].bold
    assert doc.paragraphs[1].alignment == WD_ALIGN_PARAGRAPH.JUSTIFY
    assert doc.paragraphs[-1].alignment == WD_ALIGN_PARAGRAPH.LEFT


def test_generate_document_docx_writes_file(settings, snapshot, tmp_path):
    generator = DocumentGenerator(context_factory=lambda: LayoutContext(settings=settings, today=TODAY))
    documents = generator.run(snapshot)
    filename = tmp_path / "plaint.docx"
    generate_document_docx(documents["plaint"], str(filename))
    assert filename.exists()
    reopened = Document(str(filename))
    assert any("VERIFICATION" == p.text for p in reopened.paragraphs)
