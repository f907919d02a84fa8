"""
Dispatch a value to the handler registered for its type.

Usage:

.. code::

    def on_int(value: int):
        return "Int"

    def on_str(value: str):
        return "String"

    name = Match(on_int, on_str, (MatchAny, lambda value: "Other"))

    name(7)            # "Int"
    "hello" << name    # "String", the handler's result
    6.78 >> name       # runs the wildcard, the result is discarded

A handler is either a one-argument callable whose parameter is annotated with
the type it handles, or a ``(type, callable)`` pair, which is how lambdas are
registered. A handler for :class:`MatchAny` is the wildcard.
"""

import functools
import inspect
import typing

from typing import Any, Callable, Optional


class MatchAny:
    """Marks the wildcard handler of a :class:`Match`"""


def _handled_type(handler) -> tuple:
    if isinstance(handler, tuple):
        kind, function = handler
        return kind, function

    parameters = list(inspect.signature(handler).parameters.values())
    if len(parameters) != 1:
        raise TypeError(f"Match handler {handler!r} must take exactly one argument")

    hints = typing.get_type_hints(handler)
    if parameters[0].name not in hints:
        raise TypeError(
            f"Match handler {handler!r} must annotate its parameter with the type it handles"
        )

    return hints[parameters[0].name], handler


def _as_types(alternatives) -> tuple:
    if isinstance(alternatives, type):
        return (alternatives,)

    return typing.get_args(alternatives) or tuple(alternatives)


class Match:
    """A set of handlers, at most one per type, plus an optional wildcard.

    Calling the match invokes the handler registered for the most specific class
    in the value's MRO, or the wildcard when no handler applies.

    :param handlers: the handlers, see the module documentation
    :param alternatives: the types the match must cover, as a tuple or a
        ``Union``. Construction fails if one of them has neither a handler nor a
        wildcard to fall back on.
    """

    def __init__(self, *handlers, alternatives: Optional[Any] = None):
        self._wildcard: Optional[Callable] = None
        self._handlers = {}

        for handler in handlers:
            kind, function = _handled_type(handler)
            if kind is MatchAny:
                if self._wildcard is not None:
                    raise TypeError("Match accepts a single wildcard handler")
                self._wildcard = function

            elif kind in self._handlers:
                raise TypeError(f"Match has more than one handler for {kind.__name__}")

            else:
                self._handlers[kind] = function

        if alternatives is not None and self._wildcard is None:
            uncovered = [
                alternative
                for alternative in _as_types(alternatives)
                if not any(issubclass(alternative, kind) for kind in self._handlers)
            ]
            if uncovered:
                names = ", ".join(kind.__name__ for kind in uncovered)
                raise TypeError(f"Match does not handle {names} and has no wildcard")

        self._dispatch = functools.singledispatch(self._unmatched)
        for kind, function in self._handlers.items():
            self._dispatch.register(kind, function)

    def _unmatched(self, value: Any) -> Any:
        if self._wildcard is None:
            raise TypeError(f"Match has no handler for {type(value).__name__}")

        return self._wildcard(value)

    def __call__(self, value: Any) -> Any:
        return self._dispatch(value)

    def __rrshift__(self, value: Any):
        self(value)

    def __rlshift__(self, value: Any) -> Any:
        return self(value)
