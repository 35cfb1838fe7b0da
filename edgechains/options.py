"""Command-line scanning in which each option is looked up on demand.

Options are searched anywhere in the argument list; every argument that has
been used is marked consumed, and whatever is left over can be checked at
the end.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, List, Optional, Sequence, Tuple

Converter = Optional[Callable[[str], Any]]

FLAGS_WITH_VALUE = frozenset({"-x", "-y", "-z", "-v", "-o", "-b", "-e"})
FLAGS_ALONE = frozenset({"-r", "-f", "-p", "-s"})

_DIGITS = "0123456789"


def _convert(converter: Callable[[str], Any], text: str) -> Any:
    try:
        return converter(text)
    except (TypeError, ValueError):
        return None


class OptionScanner:
    """Find options in an argument list and track which were consumed."""

    def __init__(self, argv: Optional[Sequence[str]] = None) -> None:
        args = list(sys.argv if argv is None else argv)
        if not args:
            raise ValueError("argv must hold at least the program name")
        self.program = args[0]
        self._args = args[1:]
        self._used = [not arg for arg in self._args]

    @staticmethod
    def _matches(option: str, arg: str) -> bool:
        if option:
            return arg == option
        return (not arg.startswith("-") or arg == "-") and arg[0] not in _DIGITS

    def take(self, option: str, *args: Converter) -> Optional[Tuple[Any, ...]]:
        """Consume ``option`` and the values that follow it.

        An empty ``option`` matches the first free argument that starts
        neither with ``-`` (``-`` alone is allowed) nor with a digit.
        ``args`` holds at most three converters: the first applies to the
        matched argument itself (``None`` keeps the text), the others to the
        arguments that follow it (``None`` means no value there). A value
        that is missing or does not convert comes back as ``None``.

        Return ``None`` if the option is absent, else a tuple whose first
        item is the (converted) matched argument.
        """
        if len(args) > 3:
            raise TypeError("take() accepts at most three converters")
        own = args[0] if args else None
        following = args[1:]

        for position, arg in enumerate(self._args):
            if self._used[position] or not self._matches(option, arg):
                continue
            self._used[position] = True
            values: List[Any] = [arg if own is None else _convert(own, arg)]
            cursor = position
            for converter in following:
                if converter is None:
                    values.append(None)
                    continue
                cursor += 1
                if cursor >= len(self._args):
                    values.append(None)
                    continue
                if self._used[cursor]:
                    values.append(None)
                else:
                    values.append(_convert(converter, self._args[cursor]))
                self._used[cursor] = True
            return tuple(values)
        return None

    def unconsumed(self) -> List[str]:
        """Return the arguments nobody took, ignoring the known free flags."""
        leftovers = []
        remaining = iter(zip(self._args, self._used))
        for arg, used in remaining:
            if used:
                continue
            if arg in FLAGS_WITH_VALUE:
                next(remaining, None)
                continue
            if arg in FLAGS_ALONE:
                continue
            leftovers.append(arg)
        return leftovers

    def check(self) -> bool:
        """Report every unrecognised argument on stderr; tell whether all were."""
        leftovers = self.unconsumed()
        for arg in leftovers:
            print(f"{self.program}: {arg}: unrecognised option", file=sys.stderr)
        return not leftovers