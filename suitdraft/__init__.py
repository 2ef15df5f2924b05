"""
suitdraft: court-format filing sets for Kerala civil suits.

    from suitdraft import CaseSnapshot, DocumentGenerator
    documents = DocumentGenerator().run(CaseSnapshot.model_validate_json(raw))
"""

from .config import LayoutSettings
from .documents import LayoutContext
from .errors import GenerationCancelled, MissingRequiredDataError, SuitDraftError
from .models import CaseSnapshot, GeneratedDocument
from .orchestrator import DocumentCollection, DocumentGenerator, GenerationState

__version__ = "0.1.0"

__all__ = [
    "CaseSnapshot",
    "DocumentCollection",
    "DocumentGenerator",
    "GeneratedDocument",
    "GenerationCancelled",
    "GenerationState",
    "LayoutContext",
    "LayoutSettings",
    "MissingRequiredDataError",
    "SuitDraftError",
]
