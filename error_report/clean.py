from __future__ import annotations

from typing import Any, NamedTuple, Protocol, runtime_checkable


@runtime_checkable
class ErrorLike(Protocol):
    """Anything that can describe itself and point at the error that caused it."""

    def display(self) -> str: ...

    def cause(self) -> ErrorLike | BaseException | None: ...


class ChainEntry(NamedTuple):
    error: Any
    text: str
    cleaned: bool


def _is_error(value: Any) -> bool:
    if isinstance(value, BaseException):
        return True
    return callable(getattr(value, "display", None)) and callable(getattr(value, "cause", None))


def resolve_error(value: Any) -> Any:
    """Return the error-like object behind ``value``.

    Exceptions and ``ErrorLike`` objects are returned as they are. Opaque
    containers that only hand out their error through ``as_error()`` are
    unwrapped. Anything else is rejected with ``TypeError``.
    """
    if _is_error(value):
        return value
    as_error = getattr(value, "as_error", None)
    if callable(as_error):
        inner = as_error()
        if _is_error(inner):
            return inner
        raise TypeError(
            f"{type(value).__name__}.as_error() returned {type(inner).__name__}, not an error"
        )
    raise TypeError(f"{type(value).__name__} is not an error-like value")


def error_text(err: Any) -> str:
    if isinstance(err, BaseException):
        return str(err)
    return str(err.display())


def error_cause(err: Any, follow_context: bool = True) -> Any:
    if isinstance(err, BaseException):
        if err.__cause__ is not None:
            return err.__cause__
        if follow_context and not err.__suppress_context__:
            return err.__context__
        return None
    cause = err.cause()
    if cause is None:
        return None
    return resolve_error(cause)


class _Step(NamedTuple):
    error: Any
    # text of ``error``, computed by the previous step
    error_text: str


class CleanedErrorText:
    """Iterate over an error chain, removing messages repeated from the cause.

    Some errors carry a cause and also include the cause's message in their
    own message, so printing the whole chain repeats text. Each entry is
    checked for its cause's message as a trailing suffix; when found, the
    suffix is removed along with trailing whitespace and one ``:``.

    Yields ``ChainEntry(error, text, cleaned)`` from the outermost error to
    the root cause. The iterator holds one pending step and cannot be
    restarted.
    """

    def __init__(self, err: Any, *, follow_context: bool = True) -> None:
        err = resolve_error(err)
        self._follow_context = follow_context
        # exceptions visited so far, kept alive so their ids stay unique
        self._seen: dict[int, BaseException] = {}
        if isinstance(err, BaseException):
            self._seen[id(err)] = err
        self._step: _Step | None = _Step(err, error_text(err))

    def __iter__(self) -> CleanedErrorText:
        return self

    def __next__(self) -> ChainEntry:
        step = self._step
        if step is None:
            raise StopIteration
        self._step = None

        source = error_cause(step.error, self._follow_context)
        if source is None or self._seen.get(id(source)) is source:
            return ChainEntry(step.error, step.error_text, False)

        if isinstance(source, BaseException):
            self._seen[id(source)] = source
        source_text = error_text(source)
        self._step = _Step(source, source_text)

        text = step.error_text
        if not text.endswith(source_text):
            return ChainEntry(step.error, text, False)
        text = text[: len(text) - len(source_text)].rstrip()
        if text.endswith(":"):
            text = text[:-1]
        return ChainEntry(step.error, text, True)


def cleaned_errors(err: Any, *, follow_context: bool = True) -> CleanedErrorText:
    return CleanedErrorText(err, follow_context=follow_context)


def error_chain(err: Any, *, follow_context: bool = True) -> list[Any]:
    return [entry.error for entry in cleaned_errors(err, follow_context=follow_context)]


def root_cause(err: Any, *, follow_context: bool = True) -> Any:
    return error_chain(err, follow_context=follow_context)[-1]
