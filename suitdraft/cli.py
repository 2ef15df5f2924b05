"""
Command line entry point.

    suitdraft --case case.json --output-dir out --docx --pickle
"""

import argparse
import logging
import os
import pickle
import sys

from pydantic import ValidationError

from . import config
from .config import LayoutSettings
from .docx_export import generate_document_docx
from .documents import LayoutContext
from .errors import SuitDraftError
from .models import CaseSnapshot
from .orchestrator import DocumentGenerator

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="suitdraft",
        description=(
            "Generate the filing set for a Kerala civil suit (vakalathnama, lists of parties and "
            "documents, plaint, affidavit, court fee certificate, interlocutory applications, "
            "synopsis and index) as PDF files, with optional DOCX copies and a pickled collection."
        )
    )
    parser.add_argument("--case", required=True,
                        help="Path to the case snapshot JSON (camelCase or snake_case keys).")
    parser.add_argument("--output-dir", default=config.OUTPUT_DIR,
                        help=f"Directory for the generated files (default: {config.OUTPUT_DIR}).")
    parser.add_argument("--docx", action="store_true",
                        help="Also write an editable DOCX copy of every document.")
    parser.add_argument("--pickle", nargs='?', const="", default=None,
                        help="Store the generated document collection in pickle format. "
                             "If no path is given, defaults to '<output-dir>/documents.pickle'.")
    parser.add_argument("--extra", nargs='+', default=[],
                        help="Further required document kinds to draft as placeholder pages, "
                             "e.g. --extra written_statement memo_of_appearance")
    parser.add_argument("--font-family", default=None, choices=["Times", "Helvetica", "Courier"],
                        help=f"Font family for every document (default: {config.FONT_FAMILY}).")
    parser.add_argument("--no-docket", action="store_true",
                        help="Do not append a docket page to the plaint.")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        help=f"Logging level (default: {config.LOG_LEVEL}).")
    return parser


def load_snapshot(path):
    with open(path, 'r', encoding='utf-8') as f:
        return CaseSnapshot.model_validate_json(f.read())


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        snapshot = load_snapshot(args.case)
    except (OSError, ValidationError) as e:
        print(f"Could not read case snapshot {args.case}: {e}", file=sys.stderr)
        return 2

    settings = LayoutSettings(
        font_family=args.font_family,
        include_docket=False if args.no_docket else None,
    )
    generator = DocumentGenerator(
        context_factory=lambda: LayoutContext(settings=settings),
        extra_documents=args.extra,
    )
    try:
        documents = generator.run(snapshot)
    except SuitDraftError as e:
        print(f"Document generation failed: {e}", file=sys.stderr)
        return 1

    os.makedirs(args.output_dir, exist_ok=True)
    written = []
    for document in documents:
        pdf_filename = os.path.join(args.output_dir, f"{document.type}.pdf")
        with open(pdf_filename, "wb") as pf:
            pf.write(document.pdf)
        written.append(pdf_filename)
        if args.docx:
            docx_filename = os.path.splitext(pdf_filename)[0] + ".docx"
            written.append(generate_document_docx(document, docx_filename))

    # Optionally pickle
    if args.pickle is not None:
        pickle_filename = args.pickle if args.pickle else os.path.join(args.output_dir, "documents.pickle")
        with open(pickle_filename, "wb") as pf:
            pickle.dump(documents, pf)
        pkl_path = pickle_filename
    else:
        pkl_path = "Not saved (not requested)."

    # Summary
    for filename in written:
        print(f"Generated: {filename}")
    print(f"Documents: {len(documents)}, total pages: {documents.total_pages}")
    print(f"Collection saved to: {pkl_path}\n")
    print(documents)
    return 0
