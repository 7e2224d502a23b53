class OCIError(Exception):
    """Base class for all pyoras errors."""


class DecodeError(OCIError, ValueError):
    """Raised when a JSON document can not be decoded into an OCI object.

    `field` holds the dotted path of the offending field, e.g. ``layers.0.size``,
    or None when the document itself is not valid JSON.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
