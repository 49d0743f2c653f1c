"""Parse result carrying either a document tree or the failure.

Hosts that must always display something use ``document_or_literal()``:
on failure the whole source becomes one unstyled Run.
"""

from __future__ import annotations

from dataclasses import dataclass

from bbspan.errors import ParseError
from bbspan.nodes import Container, Run


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of try_parse().

    Exactly one of document and error is set.

    Attributes:
        source: The markup that was parsed
        document: Root container on success
        error: The ParseError on failure

    """

    source: str
    document: Container | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        """Whether parsing succeeded."""
        return self.error is None

    def unwrap(self) -> Container:
        """Return the document, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        assert self.document is not None
        return self.document

    def document_or_literal(self) -> Container:
        """Return the document, or the entire source as one plain Run."""
        if self.document is not None:
            return self.document
        return Container(children=(Run(text=self.source),))
