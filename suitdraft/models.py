"""
Case data consumed by the document generator.

A CaseSnapshot is produced by the (external) drafting wizard once every step
has been validated. All models are frozen: the generator reads a snapshot,
never edits it. Field names are snake_case in Python; the wizard's camelCase
JSON is accepted as well, e.g.

    CaseSnapshot.model_validate_json(path.read_text())
"""

import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CaseModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


###############################################################################
#  ENUMERATIONS
###############################################################################
class VakalathType(str, Enum):
    VAKALATHNAMA = "vakalathnama"
    MEMO = "memo"


class ApplicantStatus(str, Enum):
    COMPLAINANT = "complainant"
    PETITIONER = "petitioner"
    PLAINTIFF = "plaintiff"
    APPLICANT = "applicant"
    DEFENDANT = "defendant"
    RESPONDENT = "respondent"
    OPPOSITE_PARTY = "opposite_party"
    OTHER = "other"


class Parentage(str, Enum):
    SON_OF = "son_of"
    DAUGHTER_OF = "daughter_of"
    WIFE_OF = "wife_of"
    HUSBAND_OF = "husband_of"
    OTHER = "other"


class PartyRole(str, Enum):
    PLAINTIFF = "plaintiff"
    DEFENDANT = "defendant"


class Side(str, Enum):
    """Which side of the cause title a party sits on."""
    APPLICANT = "applicant"
    OPPOSITE = "opposite"


class ReliefType(str, Enum):
    DECLARATION = "declaration"
    INJUNCTION = "injunction"
    DAMAGES = "damages"
    POSSESSION = "possession"
    SPECIFIC_PERFORMANCE = "specific_performance"
    OTHER = "other"


class ScheduleType(str, Enum):
    PROPERTY = "property"
    MOVABLE = "movable"
    DOCUMENT = "document"
    OTHER = "other"


class AreaUnit(str, Enum):
    CENT = "cent"
    ACRE = "acre"
    SQFT = "sqft"
    SQM = "sqm"


class DocumentType(str, Enum):
    ORIGINAL = "original"
    CERTIFIED_COPY = "certified_copy"
    XEROX = "xerox"
    AFFIDAVIT = "affidavit"


class IAUrgency(str, Enum):
    NORMAL = "normal"
    URGENT = "urgent"


class DocumentStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    ERROR = "error"


# Free-text role labels containing any of these words belong to the
# applicant side of the cause title. Everything else is the opposite side.
APPLICANT_KEYWORDS = ("petitioner", "plaintiff", "appellant", "complainant", "applicant")


def classify_role_label(label) -> Side:
    """Map a free-text status such as 'Cr. Petitioner' or 'opposite_party' to a Side."""
    text = (label or "").lower()
    if any(keyword in text for keyword in APPLICANT_KEYWORDS):
        return Side.APPLICANT
    return Side.OPPOSITE


###############################################################################
#  STEP 1: BASIC DETAILS
###############################################################################
class BasicDetails(CaseModel):
    district: str
    court: str
    case_type: str
    vakalath_type: VakalathType = VakalathType.VAKALATHNAMA
    party_signature_required: bool = True
    applicant_status: ApplicantStatus = ApplicantStatus.PLAINTIFF
    year: int
    case_number: Optional[str] = None


###############################################################################
#  STEP 2: PARTIES & PLAINT
###############################################################################
class Address(CaseModel):
    building: str
    street: str = ""
    locality: str = ""
    district: str
    state: str = "Kerala"
    pincode: str


class Party(CaseModel):
    id: str
    name: str
    parentage_type: Parentage
    parent_name: str
    age: int
    occupation: str
    address: Address
    role: PartyRole
    order: int = 1

    @property
    def side(self) -> Side:
        return Side.APPLICANT if self.role == PartyRole.PLAINTIFF else Side.OPPOSITE


class PartyDetails(CaseModel):
    plaintiffs: List[Party] = Field(default_factory=list)
    defendants: List[Party] = Field(default_factory=list)


class CauseOfAction(CaseModel):
    date_of_cause: datetime.date
    place_of_cause: str
    description: str


class Jurisdiction(CaseModel):
    territorial_jurisdiction: str
    pecuniary_jurisdiction: str
    subject_matter_jurisdiction: str


class ChronologicalFact(CaseModel):
    id: str
    date: datetime.date
    description: str
    order: int = 1


class FactsOfCase(CaseModel):
    chronology: List[ChronologicalFact] = Field(default_factory=list)
    summary: str = ""


class Relief(CaseModel):
    id: str
    type: ReliefType = ReliefType.OTHER
    description: str
    order: int = 1


class Valuation(CaseModel):
    market_value: float
    relief_value: float
    court_fee_calculation: str = ""
    court_fee: Optional[float] = None


class PlaintDetails(CaseModel):
    cause_of_action: CauseOfAction
    jurisdiction: Jurisdiction
    facts_of_case: FactsOfCase
    relief_sought: List[Relief] = Field(default_factory=list)
    valuation: Valuation


###############################################################################
#  STEP 3: SCHEDULES
###############################################################################
class Boundaries(CaseModel):
    north: str = ""
    south: str = ""
    east: str = ""
    west: str = ""


class Measurements(CaseModel):
    area: float
    unit: AreaUnit
    survey_number: Optional[str] = None
    dimensions: Optional[str] = None


class RegistrationDetails(CaseModel):
    document_number: str
    year: int
    sro: str


class Schedule(CaseModel):
    id: str
    schedule_name: str
    schedule_type: ScheduleType
    description: str
    measurements: Optional[Measurements] = None
    boundaries: Optional[Boundaries] = None
    registration_details: Optional[RegistrationDetails] = None
    order: int = 1


class ScheduleDetails(CaseModel):
    schedules: List[Schedule] = Field(default_factory=list)


###############################################################################
#  STEP 4: DOCUMENTS
###############################################################################
class DocumentItem(CaseModel):
    id: str
    serial_number: int
    description: str
    document_type: DocumentType
    date: Optional[datetime.date] = None
    page_count: Optional[int] = None
    is_marked: bool = False
    marking_label: Optional[str] = None
    order: int = 1


class DocumentDetails(CaseModel):
    documents: List[DocumentItem] = Field(default_factory=list)
    total_pages: int = 0


###############################################################################
#  STEP 5 & 6: INTERLOCUTORY APPLICATIONS, JUDGEMENTS
###############################################################################
class InterlocutoryApplication(CaseModel):
    id: str
    ia_number: str
    title: str
    purpose: str
    grounds: List[str]
    relief_requested: str
    urgency: IAUrgency = IAUrgency.NORMAL
    facts: str = ""
    affidavit_required: bool = False
    order: int = 1


class IADetails(CaseModel):
    applications: List[InterlocutoryApplication] = Field(default_factory=list)


class Judgement(CaseModel):
    id: str
    case_name: str
    citation: str
    court: str
    year: int
    relevant_paragraphs: Optional[str] = None
    file_url: Optional[str] = None
    order: int = 1


class JudgementDetails(CaseModel):
    judgements: List[Judgement] = Field(default_factory=list)


class AdvocateDetails(CaseModel):
    """The advocate (or advocates, comma separated) being retained."""
    name: str
    enrollment_number: str = ""
    address: str = ""
    mobile: str = ""


###############################################################################
#  SNAPSHOT
###############################################################################
class CaseSnapshot(CaseModel):
    basic_details: BasicDetails
    party_details: PartyDetails = Field(default_factory=PartyDetails)
    plaint_details: Optional[PlaintDetails] = None
    schedule_details: ScheduleDetails = Field(default_factory=ScheduleDetails)
    document_details: DocumentDetails = Field(default_factory=DocumentDetails)
    ia_details: IADetails = Field(default_factory=IADetails)
    judgement_details: JudgementDetails = Field(default_factory=JudgementDetails)
    advocate: Optional[AdvocateDetails] = None
    witnesses: List[str] = Field(default_factory=list)

    @property
    def client_side(self) -> Side:
        """The side whose parties sign the vakalathnama."""
        return classify_role_label(self.basic_details.applicant_status.value)

    def parties_on(self, side) -> List[Party]:
        if side == Side.APPLICANT:
            parties = self.party_details.plaintiffs
        else:
            parties = self.party_details.defendants
        return sorted(parties, key=lambda p: p.order)

    @property
    def plaintiffs(self) -> List[Party]:
        return self.parties_on(Side.APPLICANT)

    @property
    def defendants(self) -> List[Party]:
        return self.parties_on(Side.OPPOSITE)


class GeneratedDocument(CaseModel):
    """
    One finished document of a generation run. Immutable; regenerating a
    suit produces new records rather than updating these.
    """
    id: str
    name: str
    type: str
    status: DocumentStatus = DocumentStatus.READY
    generated_at: datetime.datetime
    pdf: bytes = Field(default=b"", repr=False)
    page_count: int = 0
    layout: Any = Field(default=None, exclude=True, repr=False)
