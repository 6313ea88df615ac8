class BBoxError(Exception):
    """Base class for all errors that abort a bounding box run."""


class MalformedRecordError(BBoxError):
    """Raised when a shapes record has fewer fields than required."""


class InvalidNumberError(BBoxError):
    """Raised when a coordinate field is not valid floating point text."""


class InsufficientDataError(BBoxError):
    """Raised when the shapes file holds fewer than two points."""


class ShapesReadError(BBoxError):
    """Raised when a line of the shapes file cannot be read."""


class InvalidInputError(BBoxError):
    pass


class MissingInputError(BBoxError):
    pass
