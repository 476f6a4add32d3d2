"""
ERDKIT Exceptions

Only catalog access failures abort a collection run. Cancellation, entities
the diagram cannot represent and unresolved references are not errors.
"""


class ERDKitError(Exception):
    """Base class for ERDKIT errors."""


class AccessError(ERDKitError):
    """The catalog layer failed to list, cache or describe an object."""

    def __init__(self, message: str, object_name: str = None):
        super().__init__(message)
        self.object_name = object_name


class TraversalError(ERDKitError):
    """Entity collection was aborted by a catalog access failure."""


class CollectionError(ERDKitError):
    """A diagram collection run failed."""
