"""Exceptions raised by document stores"""


class DocStoreError(Exception):
    """Base class for store failures."""


class IdConflictError(DocStoreError):
    """A save targeted an id that is already stored (raised only under ConflictPolicy.error)."""

    def __init__(self, doc_id: str):
        super().__init__(f"Document id {doc_id!r} is already taken")
        self.doc_id = doc_id


class IdSpaceExhaustedError(DocStoreError):
    """No free id could be generated within the retry bound."""

    def __init__(self, attempts: int, id_space: int):
        super().__init__(f"No free document id after {attempts} attempt(s) in an id space of {id_space}")
        self.attempts = attempts
        self.id_space = id_space
