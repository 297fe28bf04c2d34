"""
Exceptions raised by the search engine and its bundled collaborators.
"""

from __future__ import annotations


class SearchError(Exception):
    """Base class for errors raised while searching."""


class CollaboratorError(SearchError):
    """
    An expander or heuristic failed during a search.

    The search is aborted and no partial result is produced. The original
    exception is available as ``__cause__``.

    Attributes:
        node: Node being expanded or estimated when the failure happened
    """

    def __init__(self, message: str, node: object = None) -> None:
        super().__init__(message)
        self.node = node


class InvalidLinkError(CollaboratorError, ValueError):
    """An expander returned a link the engine cannot use."""
