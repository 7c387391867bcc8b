"""
Spawning of detached processes.

Session commands are shell command lines (user overrides may use quoting,
pipes or ``&&``), so they are always run through ``/bin/sh -c``.  Processes
are not tracked: there is no waiting, no output capture, and a failed start
is only logged.
"""

from __future__ import annotations

import typing as ty

from gi.repository import GLib

from sessionctl.support import pretty

__all__ = (
    "SHELL",
    "SpawnError",
    "shell_argv",
    "spawn_async",
    "spawn_async_raise",
    "spawn_shell_command",
)

SHELL: ty.Final = "/bin/sh"


class SpawnError(Exception):
    """Error starting process"""


def shell_argv(command: str) -> list[str]:
    """Argument list running @command with the POSIX shell.

    >>> shell_argv("xflock4 && echo ok")
    ['/bin/sh', '-c', 'xflock4 && echo ok']
    """
    return [SHELL, "-c", command]


def spawn_async(argv: ty.Collection[str], in_dir: str = ".") -> bool:
    """
    Silently spawn @argv in the background

    Returns False on failure
    """
    try:
        return spawn_async_raise(argv, in_dir)
    except SpawnError as exc:
        pretty.print_error(__name__, "spawn_async", argv, exc)
        return False


def spawn_async_raise(argv: ty.Collection[str], workdir: str = ".") -> bool:
    """
    A version of spawn_async that raises on error.

    raises SpawnError
    """
    pretty.print_debug(__name__, "spawn_async", argv, workdir)
    try:
        res = GLib.spawn_async(
            list(argv), working_directory=workdir, flags=GLib.SPAWN_SEARCH_PATH
        )
    except GLib.GError as exc:
        raise SpawnError(exc.message) from exc  # pylint: disable=no-member

    return bool(res)


def spawn_shell_command(command: str) -> bool:
    """Run @command with the shell, detached.  Return False when the
    process could not be started."""
    return spawn_async(shell_argv(command))
