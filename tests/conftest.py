import copy
import datetime

import pytest

from suitdraft.config import LayoutSettings
from suitdraft.documents import LayoutContext
from suitdraft.models import CaseSnapshot

TODAY = datetime.date(2025, 3, 21)


def party(party_id, name, role, order=1, parent="Krishnan Nair", parentage="son_of", age=45):
    return {
        "id": party_id,
        "name": name,
        "parentageType": parentage,
        "parentName": parent,
        "age": age,
        "occupation": "Farmer",
        "address": {
            "building": f"{name.split()[0]} Bhavan",
            "street": "Temple Road",
            "locality": "Edappally",
            "district": "Ernakulam",
            "state": "Kerala",
            "pincode": "682024",
        },
        "role": role,
        "order": order,
    }


# One plaintiff, one defendant, OS, two documents (one marked), no IAs.
CASE_A = {
    "basicDetails": {
        "district": "Ernakulam",
        "court": "Court of the Munsiff",
        "caseType": "OS",
        "vakalathType": "vakalathnama",
        "partySignatureRequired": True,
        "applicantStatus": "plaintiff",
        "year": 2025,
    },
    "partyDetails": {
        "plaintiffs": [party("p1", "Ravi Kumar", "plaintiff")],
        "defendants": [party("d1", "Suresh Babu", "defendant", parent="Gopalan")],
    },
    "plaintDetails": {
        "causeOfAction": {
            "dateOfCause": "2024-11-02",
            "placeOfCause": "Edappally",
            "description": "The defendant trespassed into the plaint schedule property on that day.",
        },
        "jurisdiction": {
            "territorialJurisdiction": "The property is situated within the local limits of this court.",
            "pecuniaryJurisdiction": "The suit is valued below the pecuniary limit of this court.",
            "subjectMatterJurisdiction": "The suit is one of a civil nature.",
        },
        "factsOfCase": {
            "summary": "The plaintiff is the absolute owner in possession of the plaint schedule property.",
            "chronology": [
                {
                    "id": "f2",
                    "date": "2024-10-15",
                    "description": "the defendant started construction of a compound wall encroaching the property.",
                    "order": 1,
                },
                {
                    "id": "f1",
                    "date": "2010-06-01",
                    "description": "the plaintiff purchased the property by a registered sale deed.",
                    "order": 2,
                },
            ],
        },
        "reliefSought": [
            {"id": "r2", "type": "injunction", "description": "a permanent prohibitory injunction", "order": 2},
            {"id": "r1", "type": "declaration", "description": "a declaration of title", "order": 1},
        ],
        "valuation": {
            "marketValue": 125000,
            "reliefValue": 125000,
            "courtFeeCalculation": "Court fee computed under section 27(c) of the Act.",
            "courtFee": 1250,
        },
    },
    "scheduleDetails": {
        "schedules": [
            {
                "id": "s1",
                "scheduleName": "A",
                "scheduleType": "property",
                "description": "All that piece and parcel of land in Edappally village.",
                "measurements": {"area": 12.5, "unit": "cent", "surveyNumber": "123/4"},
                "boundaries": {"north": "Road", "south": "Property of Mani", "east": "Canal", "west": "Temple"},
                "order": 1,
            }
        ]
    },
    "documentDetails": {
        "documents": [
            {
                "id": "doc1",
                "serialNumber": 1,
                "description": "Sale deed No. 1234/2010",
                "documentType": "original",
                "date": "2010-06-01",
                "pageCount": 4,
                "isMarked": True,
                "order": 1,
            },
            {
                "id": "doc2",
                "serialNumber": 2,
                "description": "Tax receipt",
                "documentType": "xerox",
                "pageCount": 1,
                "isMarked": False,
                "order": 2,
            },
        ],
        "totalPages": 5,
    },
    "advocate": {"name": "Adv. Anil Menon", "enrollmentNumber": "K/123/2001", "address": "High Court Road, Kochi", "mobile": "9847012345"},
    "witnesses": [],
}

APPLICATIONS = [
    {
        "id": "ia1",
        "iaNumber": "I.A. No. 1 of 2025",
        "title": "Petition for temporary injunction",
        "purpose": "Order XXXIX Rules 1 and 2 of the Code of Civil Procedure",
        "grounds": ["The plaintiff has a prima facie case.", "The balance of convenience is in his favour."],
        "reliefRequested": "restrain the defendant from trespassing into the plaint schedule property",
        "urgency": "urgent",
        "affidavitRequired": True,
        "order": 1,
    },
    {
        "id": "ia2",
        "iaNumber": "I.A. No. 2 of 2025",
        "title": "Petition to appoint an advocate commissioner",
        "purpose": "Order XXVI Rule 9 of the Code of Civil Procedure",
        "grounds": ["A local inspection is necessary."],
        "reliefRequested": "appoint an advocate commissioner to inspect the property",
        "affidavitRequired": False,
        "order": 2,
    },
]


@pytest.fixture
def case_data():
    return copy.deepcopy(CASE_A)


@pytest.fixture
def snapshot(case_data):
    return CaseSnapshot.model_validate(case_data)


@pytest.fixture
def snapshot_with_ias(case_data):
    case_data["iaDetails"] = {"applications": copy.deepcopy(APPLICATIONS)}
    return CaseSnapshot.model_validate(case_data)


@pytest.fixture
def settings():
    return LayoutSettings(
        font_family="Times",
        body_size=12,
        leading=18,
        margin_top=60,
        margin_bottom=60,
        margin_left=72,
        margin_right=54,
        include_docket=True,
        number_pages=True,
        author="Tests",
    )


@pytest.fixture
def ctx(settings):
    return LayoutContext(settings=settings, today=TODAY)


def text_of(canvas):
    """All drawn text with whitespace normalised, in drawing order."""
    return " ".join(canvas.plain_text().split())
