from __future__ import annotations

import argparse
import gettext
import locale
import sys
import typing as ty
from contextlib import suppress
from pathlib import Path

if ty.TYPE_CHECKING:
    from gettext import gettext as _

__all__ = ("main",)


def _setup_locale_and_gettext() -> None:
    """Set up localization with gettext"""
    package_name = "sessionctl"
    localedir = "./locale"
    for ldir in ("./locale", "/usr/local/share/locale/", "/usr/share/locale/"):
        if Path(ldir).is_dir():
            localedir = ldir
            break

    # Install _() builtin for gettext; always returning unicode objects
    gettext.install(package_name, localedir=localedir, names=("ngettext",))
    gettext.bindtextdomain(package_name, localedir)
    gettext.textdomain(package_name)
    # to load in current locale properly for sorting etc
    with suppress(locale.Error):
        locale.setlocale(locale.LC_ALL, "")


_setup_locale_and_gettext()


def _print(*args: ty.Any) -> None:
    enc = locale.getpreferredencoding(do_setlocale=False)
    sys.stdout.buffer.write(" ".join(map(str, args)).encode(enc, "replace"))
    sys.stdout.buffer.write(b"\n")
    sys.stdout.flush()


def _intent(name: str) -> ty.Any:
    # pylint: disable=import-outside-toplevel
    from sessionctl.core.intents import Intent

    try:
        return Intent(name.lower())
    except ValueError as exc:
        choices = ", ".join(i.value for i in Intent)
        raise argparse.ArgumentTypeError(
            _("invalid intent %(name)r (choose from %(choices)s)")
            % {"name": name, "choices": choices}
        ) from exc


def _get_options(argv: ty.Sequence[str] | None) -> argparse.Namespace:
    from sessionctl import version  # pylint: disable=import-outside-toplevel

    parser = argparse.ArgumentParser(
        prog=version.PROGRAM_NAME,
        description=version.SHORT_DESCRIPTION,
    )
    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--list",
        action="store_true",
        help=_("list session commands (default)"),
    )
    action.add_argument(
        "--run", metavar="INTENT", type=_intent, help=_("run session command")
    )
    action.add_argument(
        "--enable", metavar="INTENT", type=_intent, help=_("enable command")
    )
    action.add_argument(
        "--disable",
        metavar="INTENT",
        type=_intent,
        help=_("disable command and forget its title and command"),
    )
    action.add_argument(
        "--title",
        nargs=2,
        metavar=("INTENT", "TEXT"),
        help=_("set title; empty text restores the default"),
    )
    action.add_argument(
        "--command",
        nargs=2,
        metavar=("INTENT", "TEXT"),
        help=_("set command; empty text restores the default"),
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help=_("show where default commands come from"),
    )
    parser.add_argument(
        "--desktop",
        metavar="LIST",
        help=_("colon-separated desktop names used instead of "
               "XDG_CURRENT_DESKTOP"),
    )
    parser.add_argument(
        "--config", metavar="FILE", help=_("use settings file FILE")
    )
    parser.add_argument(
        "--debug", action="store_true", help=_("enable debug info")
    )
    parser.add_argument(
        "--no-colors",
        action="store_true",
        help=_("do not use colored text in terminal"),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{version.PACKAGE_NAME}  {version.VERSION}",
    )

    args = parser.parse_args(argv)
    for opt in ("title", "command"):
        if pair := getattr(args, opt):
            try:
                setattr(args, opt, (_intent(pair[0]), pair[1]))
            except argparse.ArgumentTypeError as exc:
                parser.error(str(exc))

    return args


def _list_commands(catalog: ty.Any, env: ty.Any, verbose: bool) -> None:
    # pylint: disable=import-outside-toplevel
    from sessionctl.core import resolver

    for row in catalog.editor_rows():
        spec = row.spec
        mark = "x" if row.enabled else " "
        title = row.title or spec.default_title
        command = row.command or spec.default_command or _("(not set)")
        _print(f"[{mark}] {spec.id.value:<10} {title:<12} {command}")
        if verbose:
            source = resolver.desktop_for(spec.id, env) or _("none")
            _print(f"      {spec.description}")
            _print("      " + _("default: %s") % (spec.default_command or "-"))
            _print("      " + _("provided by: %s") % source)


def main(argv: ty.Sequence[str] | None = None) -> int:
    cli_opts = _get_options(argv)

    # pylint: disable=import-outside-toplevel
    from sessionctl import version
    from sessionctl.core import resolver, settings
    from sessionctl.core.catalog import Catalog
    from sessionctl.obj import SessionSource
    from sessionctl.support import pretty

    if cli_opts.debug:
        pretty.DEBUG = True
        pretty.print_debug(
            __name__, "Version:", version.PACKAGE_NAME, version.VERSION
        )

    # enable colors only on terminal
    pretty.COLORS = sys.stdout.isatty() and not cli_opts.no_colors

    env = resolver.Environment.from_environ()
    if cli_opts.desktop is not None:
        env = env._replace(desktops=resolver.split_desktops(cli_opts.desktop))

    pretty.print_debug(__name__, "Environment:", env)

    setctl = settings.SettingsController(
        settings.ConfigparserAdapter(cli_opts.config)
    )
    catalog = Catalog.for_environment(env, setctl)

    intent = (
        cli_opts.run
        or cli_opts.enable
        or cli_opts.disable
        or (cli_opts.title or cli_opts.command or (None,))[0]
    )
    if intent is not None and intent not in catalog:
        pretty.print_error(__name__, "Not available here:", intent.value)
        return 1

    if cli_opts.run:
        source = SessionSource(catalog)
        if not (leaf := source.find(cli_opts.run)):
            pretty.print_error(__name__, "Command is disabled:", intent.value)
            return 1

        return 0 if leaf.run() else 1

    if cli_opts.enable:
        catalog.set_enabled(cli_opts.enable, True)
    elif cli_opts.disable:
        catalog.set_enabled(cli_opts.disable, False)
    elif cli_opts.title:
        catalog.set_title(*cli_opts.title)
    elif cli_opts.command:
        catalog.set_command(*cli_opts.command)

    _list_commands(catalog, env, cli_opts.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
