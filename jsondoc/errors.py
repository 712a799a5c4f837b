from __future__ import annotations


class JsonDocumentError(Exception):
    """Base class for every failure raised by a DocumentStore."""


class DirectoryCreationError(JsonDocumentError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Could not create directory "{path}"')


class FileWriteError(JsonDocumentError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Could not write file "{path}"')


class FileReadError(JsonDocumentError):
    def __init__(self, location: str):
        self.location = location
        super().__init__(f'Could not read "{location}"')


class JsonDecodeError(JsonDocumentError):
    pass


class JsonEncodeError(JsonDocumentError):
    pass


class UnsupportedOperationError(JsonDocumentError):
    """
    A mutating operation was called on a store bound to a URL.
    Remote documents are read-only.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f'The "{operation}" method is not available for remote JSON files')


class DocumentShapeError(JsonDocumentError, TypeError):
    """The document (or the supplied content) is not an object/array the operation can work with."""
