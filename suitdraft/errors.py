class SuitDraftError(Exception):
    """Base class for errors raised while generating suit documents."""


class MissingRequiredDataError(SuitDraftError):
    """
    A document needs a snapshot field that is absent or empty
    (for example a plaint with no plaintiffs). Fatal to the generation run.
    """

    def __init__(self, field, document=None):
        self.field = field
        self.document = document
        if document:
            message = f"Cannot generate {document}: required field '{field}' is missing or empty."
        else:
            message = f"Required field '{field}' is missing or empty."
        super().__init__(message)


class GenerationCancelled(SuitDraftError):
    """The caller asked the generator to stop between two documents."""
