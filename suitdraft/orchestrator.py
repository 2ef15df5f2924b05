"""
Runs the document assemblers for one case, in filing order.

    generator = DocumentGenerator()
    documents = generator.run(snapshot)
    documents["plaint"].pdf

Assemblers run strictly one after another: the index needs the page counts
of everything generated before it. The first failure stops the run, leaves
the generator in the failed state with the error message as raised, and is
re-raised to the caller. No partial collection is kept.
"""

import logging
import uuid
from collections import OrderedDict
from datetime import datetime
from enum import Enum
from functools import partial

from .documents import ASSEMBLERS, LayoutContext, placeholder
from .errors import GenerationCancelled
from .formatting import case_number_line
from .models import GeneratedDocument

logger = logging.getLogger(__name__)

IA_DOCUMENT_TYPES = ("interlocutory_application", "ia_affidavit")


class GenerationState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class DocumentCollection:
    """
    The documents of one completed run, in filing order, keyed by type tag.
    Iterating yields the GeneratedDocument records.
    """

    def __init__(self, documents=()):
        self._documents = OrderedDict()
        for document in documents:
            self._documents[document.type] = document

    def types(self):
        return list(self._documents.keys())

    def names(self):
        return [document.name for document in self._documents.values()]

    @property
    def total_pages(self):
        return sum(document.page_count for document in self._documents.values())

    def __getitem__(self, type_tag):
        return self._documents[type_tag]

    def __iter__(self):
        return iter(self._documents.values())

    def __len__(self):
        return len(self._documents)

    def __contains__(self, type_tag):
        return type_tag in self._documents

    def __repr__(self):
        lines = [f"  {document.type}: {document.name} ({document.page_count} page(s))" for document in self]
        return "DocumentCollection:\n" + "\n".join(lines)


def _round_half_up(value):
    return int(value + 0.5)


def normalize_document_type(name):
    """'Written Statement' -> 'written_statement'."""
    return "_".join(name.strip().lower().replace("-", " ").split())


class DocumentGenerator:
    """
    One generation run at a time: idle -> running -> completed | failed.

    `context_factory` builds the LayoutContext for a run (settings, date);
    `extra_documents` names further required document kinds, laid out as
    draft placeholder pages after the index; `on_progress(percent, document)`
    is called after every finished document.
    """

    def __init__(self, context_factory=None, extra_documents=(), on_progress=None):
        self.context_factory = context_factory or LayoutContext
        self.extra_documents = list(extra_documents)
        self.on_progress = on_progress
        self.state = GenerationState.IDLE
        self.completed = 0
        self.total = 0
        self.progress = 0
        self.error = None
        self.documents = None
        self._cancel_requested = False

    @property
    def is_running(self):
        return self.state == GenerationState.RUNNING

    @property
    def progress_percent(self):
        return self.progress

    def request_cancel(self):
        """Stop before the next document; the one in progress is finished first."""
        self._cancel_requested = True

    def plan(self, snapshot):
        """(type tag, display name, assembler) for every document of this run."""
        has_applications = bool(snapshot.ia_details.applications)
        steps = []
        for type_tag, (name, assembler) in ASSEMBLERS.items():
            if type_tag in IA_DOCUMENT_TYPES and not has_applications:
                continue
            steps.append((type_tag, name, assembler))

        covered = {type_tag for type_tag, _, _ in steps}
        for extra in self.extra_documents:
            type_tag = normalize_document_type(extra)
            if not type_tag or type_tag in covered:
                continue
            covered.add(type_tag)
            steps.append((type_tag, placeholder.document_title(type_tag), partial(placeholder.assemble, name=type_tag)))
        return steps

    def run(self, snapshot):
        steps = self.plan(snapshot)
        self.state = GenerationState.RUNNING
        self.completed = 0
        self.total = len(steps)
        self.progress = 0
        self.error = None
        self.documents = None
        self._cancel_requested = False

        ctx = self.context_factory()
        subject = case_number_line(snapshot.basic_details)
        logger.info("Generating %d document(s) for %s", self.total, subject)

        generated = []
        try:
            for type_tag, name, assembler in steps:
                if self._cancel_requested:
                    raise GenerationCancelled(
                        f"Generation cancelled after {self.completed} of {self.total} documents."
                    )
                document = self._generate(snapshot, ctx.with_prior(generated), type_tag, name, assembler, subject)
                generated.append(document)
                self.completed += 1
                self.progress = _round_half_up(self.completed * 100.0 / self.total)
                logger.info(
                    "Generated %s (%d page(s)), %d%% complete", name, document.page_count, self.progress
                )
                if self.on_progress is not None:
                    self.on_progress(self.progress, document)
        except Exception as exc:
            self.state = GenerationState.FAILED
            self.error = str(exc)
            logger.error("Document generation failed: %s", self.error)
            raise

        self.documents = DocumentCollection(generated)
        self.state = GenerationState.COMPLETED
        return self.documents

    def _generate(self, snapshot, ctx, type_tag, name, assembler, subject):
        canvas = assembler(snapshot, ctx)
        return GeneratedDocument(
            id=uuid.uuid4().hex,
            name=name,
            type=type_tag,
            generated_at=datetime.now(),
            pdf=canvas.to_pdf(title=name, subject=subject),
            page_count=canvas.page_count,
            layout=canvas,
        )
