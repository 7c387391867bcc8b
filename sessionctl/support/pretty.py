"""
Prefixed, optionally colored console output.

Every line is tagged with a level (INF, ERR, EXC, DBG) and the category of
the caller: ``[module] Class:`` for objects using `OutputMixin`, ``[module]:``
for the module-level ``print_*`` functions.  Debug output is printed only
when `DEBUG` is set (``--debug`` on the command line).
"""

from __future__ import annotations

import sys
import traceback
import typing as ty

if ty.TYPE_CHECKING:
    from sessionctl.support.types import ExecInfo

__all__ = (
    "OutputMixin",
    "print_debug",
    "print_error",
    "print_exc",
)

DEBUG = False
COLORS = True

_COLOR_INFO = "\033[96m"
_COLOR_WARNING = "\033[93m"
_COLOR_FAIL = "\033[91m"
_COLOR_STD = "\033[0m"

_LEVELS: ty.Final = {
    "INF": _COLOR_INFO,
    "ERR": _COLOR_WARNING,
    "EXC": _COLOR_FAIL,
    "DBG": "",
}


def _prefix(level: str) -> str:
    if COLORS and (color := _LEVELS[level]):
        return f"{color}{level}{_COLOR_STD} "

    return f"{level} "


def _format_item(item: ty.Any) -> str:
    if isinstance(item, (str, int, float)):
        return str(item)

    return repr(item)


class OutputMixin:
    """A mixin class providing prefixed output to standard output (info)
    and standard error (errors, exceptions and debug)."""

    def _output_category(self) -> str:
        return f"[{type(self).__module__}] {type(self).__name__}:"

    def _output_core(
        self,
        level: str,
        sep: str,
        end: str,
        stream: ty.TextIO | None,
        *items: ty.Any,
    ) -> None:
        category = self._output_category()
        print(
            f"{_prefix(level)}{category}",
            *map(_format_item, items),
            sep=sep,
            end=end,
            file=stream,
        )

    def output_info(
        self, *items: ty.Any, sep: str = " ", end: str = "\n", **kwargs: ty.Any
    ) -> None:
        """Output given items using @sep as separator, ending the line with @end"""
        self._output_core("INF", sep, end, sys.stdout, *items)

    def output_exc(self, exc_info: ExecInfo | None = None) -> None:
        """Output current exception, or use @exc_info if given.
        Full traceback is printed only in debug mode."""
        etype, value, tback = exc_info or sys.exc_info()
        if etype is None:
            return

        if DEBUG:
            self._output_core("EXC", "", "\n", sys.stderr)
            traceback.print_exception(etype, value, tback, file=sys.stderr)
            return

        self._output_core(
            "EXC", " ", "\n", sys.stderr, f"{etype.__name__}: {value}"
        )

    def output_debug(
        self, *items: ty.Any, sep: str = " ", end: str = "\n", **kwargs: ty.Any
    ) -> None:
        if DEBUG:
            self._output_core("DBG", sep, end, sys.stderr, *items)

    def output_error(
        self, *items: ty.Any, sep: str = " ", end: str = "\n", **kwargs: ty.Any
    ) -> None:
        self._output_core("ERR", sep, end, sys.stderr, *items)


class _StaticOutput(OutputMixin):
    current_calling_module: str | None = None

    def _output_category(self) -> str:
        return f"[{self.current_calling_module}]:"

    def print_error(
        self, modulename: str, *args: ty.Any, **kwargs: ty.Any
    ) -> None:
        self.current_calling_module = modulename
        self.output_error(*args, **kwargs)

    def print_exc(
        self, modulename: str, *args: ty.Any, **kwargs: ty.Any
    ) -> None:
        self.current_calling_module = modulename
        self.output_exc(*args, **kwargs)

    def print_debug(
        self, modulename: str, *args: ty.Any, **kwargs: ty.Any
    ) -> None:
        if DEBUG:
            self.current_calling_module = modulename
            self.output_debug(*args, **kwargs)


_StaticOutputInst = _StaticOutput()

print_debug = _StaticOutputInst.print_debug
print_error = _StaticOutputInst.print_error
print_exc = _StaticOutputInst.print_exc
