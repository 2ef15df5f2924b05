"""
Document assemblers, keyed by the document type tag they produce.

Every assembler is called as assemble(snapshot, ctx) and returns the
PagedCanvas it laid out.
"""

from collections import OrderedDict

from . import (
    affidavit,
    applications,
    exhibits,
    index,
    parties,
    plaint,
    synopsis,
    vakalathnama,
    valuation,
)
from .common import LayoutContext

# type tag -> (display name, assembler)
ASSEMBLERS = OrderedDict([
    ("vakalathnama", (vakalathnama.DOCUMENT_NAME, vakalathnama.assemble)),
    ("list_of_parties", (parties.DOCUMENT_NAME, parties.assemble)),
    ("list_of_documents", (exhibits.DOCUMENT_NAME, exhibits.assemble)),
    ("plaint", (plaint.DOCUMENT_NAME, plaint.assemble)),
    ("affidavit", (affidavit.DOCUMENT_NAME, affidavit.assemble)),
    ("court_fee_certificate", (valuation.DOCUMENT_NAME, valuation.assemble)),
    ("interlocutory_application", (applications.APPLICATION_NAME, applications.assemble_applications)),
    ("ia_affidavit", (applications.AFFIDAVIT_NAME, applications.assemble_affidavits)),
    ("synopsis", (synopsis.DOCUMENT_NAME, synopsis.assemble)),
    ("index", (index.DOCUMENT_NAME, index.assemble)),
])

__all__ = ["ASSEMBLERS", "LayoutContext"]
