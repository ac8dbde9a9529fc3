"""OutputSink Protocol: where rendered parse trees are written.

Any object with a ``write(text)`` method conforms, which includes every text
stream::

    import sys
    from camxes_postproc.protocols import OutputSink

    assert isinstance(sys.stdout, OutputSink)  # True, structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Structural protocol for output destinations.

    No inheritance required: a class with ``write(self, text: str)`` satisfies
    it at runtime.
    """

    def write(self, text: str) -> object: ...
