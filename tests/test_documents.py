import copy
import datetime

import pytest

from conftest import APPLICATIONS, party, text_of
from suitdraft.canvas import LineOp
from suitdraft.documents import (
    affidavit,
    applications,
    exhibits,
    index,
    parties,
    placeholder,
    plaint,
    synopsis,
    vakalathnama,
    valuation,
)
from suitdraft.errors import MissingRequiredDataError
from suitdraft.models import CaseSnapshot, DocumentItem, GeneratedDocument


def build(case_data):
    return CaseSnapshot.model_validate(case_data)


def all_ops_inside_margins(canvas):
    return all(
        canvas.bottom <= op.y <= canvas.top
        for page in canvas.pages
        for op in page.text_ops()
    )


def all_rules_inside_margins(canvas):
    return all(
        canvas.left - 0.01 <= min(op.x1, op.x2) and max(op.x1, op.x2) <= canvas.right + 0.01
        for page in canvas.pages
        for op in page.ops
        if isinstance(op, LineOp)
    )


###############################################################################
#  VAKALATHNAMA AND DOCKET
###############################################################################
def test_vakalathnama_single_executant(snapshot, ctx):
    canvas = vakalathnama.assemble(snapshot, ctx)
    text = text_of(canvas)
    assert "I, Ravi Kumar, the Plaintiff in the above OS, do hereby appoint and retain" in text
    assert "Adv. Anil Menon, Advocate, to appear for me" in text
    assert "the said Advocate" in text
    assert "Signed this the 21st day of March, 2025." in text
    assert "Signature of the Plaintiff" in text
    assert "Enrl. No. K/123/2001" in text
    assert "High Court Road, Kochi" in text
    assert "Mob: 9847012345" in text
    assert all_ops_inside_margins(canvas)


def test_vakalathnama_plural_executants_and_advocates(case_data, ctx):
    case_data["partyDetails"]["plaintiffs"].append(party("p2", "Lakshmi Devi", "plaintiff", order=2))
    case_data["advocate"]["name"] = "Adv. Anil Menon, Adv. Rekha Nair"
    text = text_of(vakalathnama.assemble(build(case_data), ctx))
    assert "We, Ravi Kumar and Lakshmi Devi, the Plaintiffs in the above OS" in text
    assert "Adv. Anil Menon and Adv. Rekha Nair, Advocates, to appear for us" in text
    assert "the said Advocates" in text
    assert "our behalf" in text


def test_vakalathnama_for_defendant_is_executed_by_defendants(case_data, ctx):
    case_data["basicDetails"]["applicantStatus"] = "defendant"
    text = text_of(vakalathnama.assemble(build(case_data), ctx))
    assert "I, Suresh Babu, the Defendant in the above OS, do hereby appoint and retain" in text
    assert "Counsel for the Defendant" in text


def test_vakalathnama_without_party_signatures(case_data, ctx):
    case_data["basicDetails"]["partySignatureRequired"] = False
    text = text_of(vakalathnama.assemble(build(case_data), ctx))
    assert "Signature of the" not in text


def test_memo_of_appearance(case_data, ctx):
    case_data["basicDetails"]["vakalathType"] = "memo"
    text = text_of(vakalathnama.assemble(build(case_data), ctx))
    assert "MEMO OF APPEARANCE" in text
    assert "Please take notice that Adv. Anil Menon, advocate, appears on behalf of the Plaintiff" in text
    assert "do hereby appoint and retain" not in text


def test_vakalathnama_witnesses(case_data, ctx):
    case_data["witnesses"] = ["Joseph Mathew", "Mary Thomas"]
    text = text_of(vakalathnama.assemble(build(case_data), ctx))
    assert "Witnesses: 1. Joseph Mathew 2. Mary Thomas" in text


def test_vakalathnama_requires_client_side_parties(case_data, ctx):
    case_data["partyDetails"]["plaintiffs"] = []
    with pytest.raises(MissingRequiredDataError) as err:
        vakalathnama.assemble(build(case_data), ctx)
    assert err.value.field == "party_details.plaintiffs"
    assert "Vakalathnama" in str(err.value)


def test_docket_is_confined_to_right_half_and_centred(snapshot, ctx):
    canvas = vakalathnama.assemble(snapshot, ctx)
    docket = canvas.pages[-1]
    fold_x = canvas.width / 2.0
    ops = docket.text_ops()
    assert ops
    assert all(op.x >= fold_x for op in ops)
    assert max(op.y for op in ops) < canvas.top - 50
    assert min(op.y for op in ops) > canvas.bottom + 50
    folds = [op for op in docket.ops if isinstance(op, LineOp) and op.x1 == op.x2 == fold_x]
    assert folds and folds[0].dash
    texts = docket.texts()
    assert "VAKALATHNAMA" in texts
    assert "Accepted" in texts
    assert "Filed on: 21.03.2025" in texts
    assert "ADV. ANIL MENON" in texts
    assert "Enrl. No. K/123/2001" in texts
    assert "High Court Road, Kochi" in texts
    assert "Mob: 9847012345" in texts


###############################################################################
#  CAUSE TITLE, LISTS
###############################################################################
def test_cause_title_numbers_only_crowded_sides(case_data, ctx):
    case_data["partyDetails"]["plaintiffs"].append(party("p2", "Lakshmi Devi", "plaintiff", order=2))
    canvas = parties.assemble(build(case_data), ctx)
    text = text_of(canvas)
    assert "Plaintiff No. 1" in text
    assert "Plaintiff No. 2" in text
    assert "Defendant No." not in text

    texts = vakalathnama.assemble(build(case_data), ctx).pages[0].texts()
    assert "1." in texts and "2." in texts
    assert "... Plaintiffs" in texts
    assert "... Defendant" in texts


def test_list_of_parties_requires_plaintiffs(case_data, ctx):
    case_data["partyDetails"]["plaintiffs"] = []
    with pytest.raises(MissingRequiredDataError):
        parties.assemble(build(case_data), ctx)


def test_marking_labels_follow_marked_order():
    documents = [
        DocumentItem(id="a", serial_number=1, description="Deed", document_type="original", is_marked=True),
        DocumentItem(id="b", serial_number=2, description="Receipt", document_type="xerox", is_marked=False),
        DocumentItem(id="c", serial_number=3, description="Notice", document_type="original", is_marked=True),
    ]
    assert exhibits.marking_labels(documents) == {"a": "EX-A1", "b": "", "c": "EX-A2"}


def test_explicit_marking_label_is_rendered_as_given():
    documents = [
        DocumentItem(
            id="a", serial_number=1, description="Deed", document_type="original",
            is_marked=True, marking_label="Ext. P9",
        ),
        DocumentItem(id="b", serial_number=2, description="Notice", document_type="original", is_marked=True),
    ]
    assert exhibits.marking_labels(documents) == {"a": "Ext. P9", "b": "EX-A2"}


def test_list_of_documents_table(snapshot, ctx):
    canvas = exhibits.assemble(snapshot, ctx)
    texts = canvas.all_texts()
    assert "EX-A1" in texts
    assert "01.06.2010" in texts
    assert "Photocopy" in texts
    assert "Total pages: 5" in texts


def test_list_of_documents_without_documents(case_data, ctx):
    case_data["documentDetails"] = {"documents": []}
    text = text_of(exhibits.assemble(build(case_data), ctx))
    assert "No documents are produced along with the plaint." in text


def test_long_document_description_flows_across_pages(case_data, ctx):
    case_data["documentDetails"]["documents"][0]["description"] = " ".join(["Sale deed recital"] * 400)
    canvas = exhibits.assemble(build(case_data), ctx)
    assert canvas.page_count > 2
    assert all_ops_inside_margins(canvas)
    assert text_of(canvas).count("recital") == 400
    assert "Total pages: 5" in canvas.all_texts()


###############################################################################
#  PLAINT
###############################################################################
def test_plaint_paragraph_counter_runs_across_sections(snapshot, ctx):
    canvas = plaint.assemble(snapshot, ctx)
    texts = canvas.all_texts()
    # parties 2, summary 1, facts 2, cause 1, jurisdiction 3, valuation 1, schedules 1, prayer 1
    numbers = [t for t in texts if len(t) <= 3 and t.endswith(".") and t[:-1].isdigit()]
    assert numbers == [f"{n}." for n in range(1, 13)]
    assert "paragraphs 1 to 12 above" in text_of(canvas)


def test_plaint_facts_follow_date_order(snapshot, ctx):
    text = text_of(plaint.assemble(snapshot, ctx))
    assert text.index("On 01.06.2010, the plaintiff purchased") < text.index("On 15.10.2024, the defendant started")


def test_plaint_reliefs_are_lettered_in_order(snapshot, ctx):
    text = text_of(plaint.assemble(snapshot, ctx))
    assert "(a) a declaration of title" in text
    assert "(b) a permanent prohibitory injunction" in text


def test_plaint_valuation_and_jurisdiction(snapshot, ctx):
    text = text_of(plaint.assemble(snapshot, ctx))
    assert "Rs. 1,25,000.00" in text
    assert "A court fee of Rs. 1,250.00 is paid" in text
    assert "territorial jurisdiction" in text


def test_plaint_schedule_and_docket(snapshot, ctx):
    canvas = plaint.assemble(snapshot, ctx)
    text = text_of(canvas)
    assert "SCHEDULE A" in text
    assert "Extent: 12.5 Cents" in text
    assert "North: Road" in text
    assert "PLAINT" in canvas.pages[-1].texts()
    assert all_ops_inside_margins(canvas)


def test_plaint_without_docket(snapshot, ctx):
    ctx.settings.include_docket = False
    canvas = plaint.assemble(snapshot, ctx)
    assert "Filed on: 21.03.2025" not in canvas.all_texts()


def test_plaint_underlines_stay_inside_margins(snapshot, ctx):
    canvas = plaint.assemble(snapshot, ctx)
    assert any(isinstance(op, LineOp) for op in canvas.pages[0].ops)
    assert all_rules_inside_margins(canvas)


def test_plaint_summary_keeps_paragraph_breaks(case_data, ctx):
    case_data["plaintDetails"]["factsOfCase"]["summary"] = (
        "The plaintiff is the absolute owner of the property.\n\nThe defendant is his neighbour."
    )
    canvas = plaint.assemble(build(case_data), ctx)
    numbers = [t for t in canvas.all_texts() if len(t) <= 3 and t.endswith(".") and t[:-1].isdigit()]
    assert numbers == [f"{n}." for n in range(1, 14)]
    assert "paragraphs 1 to 13 above" in text_of(canvas)


def test_property_schedule_without_boundaries_renders_blanks(case_data, ctx):
    del case_data["scheduleDetails"]["schedules"][0]["boundaries"]
    text = text_of(plaint.assemble(build(case_data), ctx))
    assert "North: ________" in text
    assert "West: ________" in text


def test_plaint_requires_plaint_details(case_data, ctx):
    del case_data["plaintDetails"]
    with pytest.raises(MissingRequiredDataError) as err:
        plaint.assemble(build(case_data), ctx)
    assert err.value.field == "plaint_details"


def test_plaint_requires_defendants(case_data, ctx):
    case_data["partyDetails"]["defendants"] = []
    with pytest.raises(MissingRequiredDataError) as err:
        plaint.assemble(build(case_data), ctx)
    assert err.value.field == "party_details.defendants"


###############################################################################
#  AFFIDAVITS, APPLICATIONS
###############################################################################
def test_affidavit_is_sworn_by_first_plaintiff(case_data, ctx):
    case_data["partyDetails"]["plaintiffs"].append(party("p2", "Lakshmi Devi", "plaintiff", order=2))
    text = text_of(affidavit.assemble(build(case_data), ctx))
    assert "I, Ravi Kumar, aged 45 years, S/o Krishnan Nair" in text
    assert "I am the first plaintiff in the above suit" in text
    assert "DEPONENT" in text


def test_affidavit_requires_plaintiffs(case_data, ctx):
    case_data["partyDetails"]["plaintiffs"] = []
    with pytest.raises(MissingRequiredDataError):
        affidavit.assemble(build(case_data), ctx)


def test_applications_start_on_new_pages(snapshot_with_ias, ctx):
    canvas = applications.assemble_applications(snapshot_with_ias, ctx)
    first_pages = [i for i, page in enumerate(canvas.pages) if "I.A. No. 1 of 2025" in page.texts()]
    second_pages = [i for i, page in enumerate(canvas.pages) if "I.A. No. 2 of 2025" in page.texts()]
    assert first_pages == [0]
    assert second_pages and second_pages[0] > 0
    text = text_of(canvas)
    assert "URGENT" in text
    assert "PETITION FOR TEMPORARY INJUNCTION" in text
    assert "(a) The plaintiff has a prima facie case." in text


def test_ia_affidavit_contains_only_required_applications(snapshot_with_ias, ctx):
    text = text_of(applications.assemble_affidavits(snapshot_with_ias, ctx))
    assert "AFFIDAVIT IN SUPPORT OF I.A. NO. 1 OF 2025" in text
    assert "I.A. No. 2 of 2025" not in text


def test_no_applications_gives_one_placeholder_page(snapshot, ctx):
    canvas = applications.assemble_applications(snapshot, ctx)
    assert canvas.page_count == 1
    assert "No interlocutory applications are filed along with the suit." in text_of(canvas)
    canvas = applications.assemble_affidavits(snapshot, ctx)
    assert canvas.page_count == 1


def test_ia_facts_keep_paragraph_breaks(case_data, ctx):
    ias = copy.deepcopy(APPLICATIONS)
    ias[0]["title"] = " ".join(["Petition for temporary injunction restraining the defendant"] * 3)
    ias[0]["facts"] = "The defendant began construction last week.\nHe has brought building material to the site."
    case_data["iaDetails"] = {"applications": ias}
    snapshot = build(case_data)
    canvas = applications.assemble_applications(snapshot, ctx)
    texts = canvas.all_texts()
    assert texts[texts.index("3.") + 1].startswith("He")
    assert "4." in texts
    assert "He has brought building material to the site." in text_of(canvas)
    assert all_rules_inside_margins(canvas)
    affidavits = applications.assemble_affidavits(snapshot, ctx)
    assert "5." in affidavits.all_texts()
    assert all_rules_inside_margins(affidavits)


###############################################################################
#  CERTIFICATE, SYNOPSIS, INDEX, PLACEHOLDER
###############################################################################
def test_court_fee_certificate(snapshot, ctx):
    text = text_of(valuation.assemble(snapshot, ctx))
    assert "Rs. 1,25,000.00" in text
    assert "proper court fee of Rs. 1,250.00" in text
    assert "section 27(c)" in text


def test_synopsis_lists_dates_and_authorities(case_data, ctx):
    case_data["judgementDetails"] = {"judgements": [{
        "id": "j1", "caseName": "Anathula Sudhakar v. P. Buchi Reddy", "citation": "(2008) 4 SCC 594",
        "court": "Supreme Court", "year": 2008, "relevantParagraphs": "21",
    }]}
    canvas = synopsis.assemble(build(case_data), ctx)
    texts = canvas.all_texts()
    assert "01.06.2010" in texts
    assert "02.11.2024" in texts
    text = text_of(canvas)
    assert "LIST OF DATES AND EVENTS" in text
    assert "(a) Anathula Sudhakar v. P. Buchi Reddy, (2008) 4 SCC 594 (Supreme Court, 2008), paras 21" in text


def test_synopsis_requires_plaint_details(case_data, ctx):
    del case_data["plaintDetails"]
    with pytest.raises(MissingRequiredDataError):
        synopsis.assemble(build(case_data), ctx)


def test_synopsis_long_fact_stays_inside_margins(case_data, ctx):
    case_data["plaintDetails"]["factsOfCase"]["chronology"][0]["description"] = " ".join(["encroached"] * 1200)
    canvas = synopsis.assemble(build(case_data), ctx)
    assert canvas.page_count > 2
    assert all_ops_inside_margins(canvas)
    assert text_of(canvas).count("encroached") == 1200


def test_page_range():
    assert index.page_range(1, 2) == "1 - 2"
    assert index.page_range(4, 1) == "4"
    assert index.page_range(5, None) == "-"


def test_index_rows_use_cumulative_page_ranges(case_data):
    case_data["documentDetails"]["documents"][0]["pageCount"] = None
    prior = [
        GeneratedDocument(id="1", name="Vakalathnama", type="vakalathnama",
                          generated_at=datetime.datetime(2025, 3, 21), page_count=2),
        GeneratedDocument(id="2", name="Plaint", type="plaint",
                          generated_at=datetime.datetime(2025, 3, 21), page_count=3),
    ]
    rows = index.index_rows(build(case_data), prior)
    assert rows == [
        ("Vakalathnama", "1 - 2"),
        ("Plaint", "3 - 5"),
        ("EX-A1: Sale deed No. 1234/2010", "-"),
        ("Tax receipt", "6"),
    ]


def test_placeholder_document(snapshot, ctx):
    assert placeholder.document_title("written_statement") == "Written Statement"
    canvas = placeholder.assemble(snapshot, ctx, "written_statement")
    assert canvas.page_count == 1
    assert "WRITTEN STATEMENT" in text_of(canvas)
