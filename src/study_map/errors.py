"""Exception hierarchy for study-map."""


class StudyMapError(Exception):
    """Base class for all study-map errors."""


class InvalidFormatError(StudyMapError, ValueError):
    """The input could not be parsed into a study-map document."""


class UnsupportedFileError(StudyMapError):
    """The file does not carry the recognised document suffix."""


class PathOutOfRangeError(StudyMapError, IndexError):
    """A navigation path indexes past the end of a children sequence.

    Internal only: the navigation controller turns it into a no-op.
    """


class NavigationDesyncError(StudyMapError, RuntimeError):
    """The committed navigation path no longer resolves against the document."""
