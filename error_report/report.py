from __future__ import annotations

import io
from typing import Any, Protocol

from error_report.clean import CleanedErrorText, resolve_error

INLINE_SEPARATOR = ": "
CAUSED_BY_HEADER = "\n\nCaused by:\n"
ENTRY_INDENT = "    "


class TextSink(Protocol):
    def write(self, text: str, /) -> Any: ...


class Report:
    """Render an error together with all of its causes.

    Cause messages are cleaned with ``CleanedErrorText`` so errors that
    repeat their cause's message are only printed once.

    ``str(report)`` puts the whole chain on one line separated by colons::

        fn failed: oh no!

    ``repr(report)`` and the alternate form ``f"{report:#}"`` put each error
    on its own line, which reads better at the end of a failed program::

        fn failed

        Caused by:
            1. oh no!

    Exceptions, ``ErrorLike`` objects, and containers exposing ``as_error()``
    can all be wrapped.
    """

    __slots__ = ("_error", "_follow_context")

    def __init__(self, error: Any, *, follow_context: bool = True) -> None:
        resolve_error(error)
        self._error = error
        self._follow_context = follow_context

    @property
    def error(self) -> Any:
        return self._error

    def entries(self) -> CleanedErrorText:
        return CleanedErrorText(self._error, follow_context=self._follow_context)

    def write_to(self, sink: TextSink, multiline: bool = False) -> None:
        texts = (entry.text for entry in self.entries() if entry.text)
        if not multiline:
            for index, text in enumerate(texts):
                if index > 0:
                    sink.write(INLINE_SEPARATOR)
                sink.write(text)
            return

        for index, text in enumerate(texts):
            if index == 0:
                sink.write(text)
                continue
            if index == 1:
                sink.write(CAUSED_BY_HEADER)
            sink.write(f"{ENTRY_INDENT}{index}. {text}\n")

    def render(self, multiline: bool = False) -> str:
        buffer = io.StringIO()
        self.write_to(buffer, multiline)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return self.render(multiline=True)

    def __format__(self, format_spec: str) -> str:
        if format_spec == "":
            return self.render()
        if format_spec == "#":
            return self.render(multiline=True)
        raise ValueError(f"Invalid format specifier {format_spec!r} for Report")


def report(error: Any, *, follow_context: bool = True) -> Report:
    return Report(error, follow_context=follow_context)
