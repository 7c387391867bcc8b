"""
Tests for default command resolution.
"""

import unittest

from sessionctl.core import resolver as R
from sessionctl.core.intents import Intent


def _unix(desktops: str) -> R.Environment:
    return R.Environment(R.Platform.UNIX, R.split_desktops(desktops))


class TestEnvironment(unittest.TestCase):
    def test_from_environ(self):
        env = R.Environment.from_environ(
            {"XDG_CURRENT_DESKTOP": "ubuntu:GNOME"}, R.Platform.UNIX
        )
        self.assertEqual(env.platform, R.Platform.UNIX)
        self.assertEqual(env.desktops, ("ubuntu", "GNOME"))

    def test_from_environ_missing(self):
        env = R.Environment.from_environ({}, R.Platform.UNIX)
        self.assertEqual(env.desktops, ())

    def test_from_environ_forced_desktop(self):
        env = R.Environment.from_environ(
            {"XDG_CURRENT_DESKTOP": "GNOME", "SESSIONCTL_DESKTOP": "XFCE"},
            R.Platform.UNIX,
        )
        self.assertEqual(env.desktops, ("XFCE",))

    def test_detect_platform(self):
        self.assertEqual(R.detect_platform("darwin"), R.Platform.APPLE)
        self.assertEqual(R.detect_platform("linux"), R.Platform.UNIX)
        self.assertEqual(R.detect_platform("freebsd14"), R.Platform.UNIX)
        self.assertEqual(R.detect_platform("win32"), R.Platform.OTHER)


class TestResolveUnix(unittest.TestCase):
    def test_deterministic(self):
        env = _unix("KDE:GNOME")
        for intent in Intent:
            self.assertEqual(R.resolve(intent, env), R.resolve(intent, env))

    def test_first_desktop_wins(self):
        self.assertEqual(
            R.resolve(Intent.LOCK, _unix("GNOME:KDE")),
            R.DESKTOP_COMMANDS["gnome"][Intent.LOCK],
        )
        self.assertEqual(
            R.resolve(Intent.LOCK, _unix("XFCE:GNOME")), "xflock4"
        )

    def test_unknown_desktop_skipped(self):
        self.assertEqual(
            R.resolve(Intent.LOCK, _unix("Foo:MATE")),
            "mate-screensaver-command --lock",
        )

    def test_mate_suspend(self):
        self.assertEqual(
            R.resolve(Intent.SUSPEND, _unix("MATE")),
            'sh -c "mate-screensaver-command --lock && systemctl suspend -i"',
        )

    def test_gnome_suspend_falls_back_to_generic(self):
        self.assertEqual(
            R.resolve(Intent.SUSPEND, _unix("GNOME")), "systemctl suspend -i"
        )
        self.assertEqual(
            R.resolve(Intent.HIBERNATE, _unix("GNOME")),
            "systemctl hibernate -i",
        )

    def test_fall_through_per_intent(self):
        env = _unix("GNOME:MATE")
        self.assertEqual(
            R.resolve(Intent.LOCK, env),
            R.DESKTOP_COMMANDS["gnome"][Intent.LOCK],
        )
        self.assertEqual(
            R.resolve(Intent.SUSPEND, env),
            R.DESKTOP_COMMANDS["mate"][Intent.SUSPEND],
        )
        self.assertEqual(R.desktop_for(Intent.LOCK, env), "gnome")
        self.assertEqual(R.desktop_for(Intent.SUSPEND, env), "mate")

    def test_aliases(self):
        gnome_logout = "gnome-session-quit --logout --no-prompt"
        for name in ("GNOME", "Unity", "Pantheon"):
            with self.subTest(desktop=name):
                self.assertEqual(
                    R.resolve(Intent.LOGOUT, _unix(name)), gnome_logout
                )

        for name in ("KDE", "kde-plasma"):
            with self.subTest(desktop=name):
                self.assertTrue(
                    R.resolve(Intent.REBOOT, _unix(name)).endswith(
                        "org.kde.Shutdown.logoutAndReboot"
                    )
                )

        for name in ("X-Cinnamon", "Cinnamon"):
            with self.subTest(desktop=name):
                self.assertEqual(
                    R.resolve(Intent.POWEROFF, _unix(name)),
                    "cinnamon-session-quit --power-off",
                )

    def test_case_sensitive(self):
        self.assertEqual(
            R.resolve(Intent.LOCK, _unix("gnome")), "xdg-screensaver lock"
        )
        self.assertEqual(R.desktop_for(Intent.LOCK, _unix("xfce")), "generic")

    def test_generic_fallback(self):
        env = _unix("")
        self.assertEqual(R.resolve(Intent.LOCK, env), "xdg-screensaver lock")
        self.assertEqual(
            R.resolve(Intent.LOGOUT, env),
            'notify-send "Error." "Logout command is not set." '
            "--icon=system-log-out",
        )
        self.assertEqual(
            R.resolve(Intent.REBOOT, env),
            'notify-send "Error." "Reboot command is not set." '
            "--icon=system-reboot",
        )
        self.assertEqual(
            R.resolve(Intent.POWEROFF, env),
            'notify-send "Error." "Poweroff command is not set." '
            "--icon=system-shutdown",
        )

    def test_all_resolved(self):
        for desktops in ("", "GNOME", "KDE", "XFCE", "LXQt", "Cinnamon"):
            env = _unix(desktops)
            for intent in Intent:
                with self.subTest(desktops=desktops, intent=intent):
                    self.assertTrue(R.resolve(intent, env))

    def test_xfce_and_lxqt_complete(self):
        for key in ("xfce", "lxqt", "mate"):
            self.assertEqual(set(R.DESKTOP_COMMANDS[key]), set(Intent))

    def test_tables_consistent(self):
        self.assertEqual(
            set(R.DESKTOP_ALIASES.values()), set(R.DESKTOP_COMMANDS)
        )
        self.assertEqual(set(R.GENERIC_COMMANDS), set(Intent))


class TestResolveOtherPlatforms(unittest.TestCase):
    def test_apple(self):
        env = R.Environment(R.Platform.APPLE, ("GNOME",))
        for intent in R.available_intents(R.Platform.APPLE):
            with self.subTest(intent=intent):
                self.assertEqual(
                    R.resolve(intent, env), R.APPLE_COMMANDS[intent]
                )
                self.assertTrue(R.resolve(intent, env))

        self.assertEqual(R.resolve(Intent.HIBERNATE, env), "")
        self.assertEqual(
            R.resolve(Intent.LOGOUT, env),
            """osascript -e 'tell app "System Events" to log out'""",
        )

    def test_apple_intents(self):
        self.assertEqual(
            R.available_intents(R.Platform.APPLE),
            [
                Intent.LOCK,
                Intent.LOGOUT,
                Intent.SUSPEND,
                Intent.REBOOT,
                Intent.POWEROFF,
            ],
        )
        self.assertEqual(R.available_intents(R.Platform.UNIX), list(Intent))

    def test_other(self):
        env = R.Environment(R.Platform.OTHER, ("XFCE",))
        for intent in Intent:
            self.assertEqual(R.resolve(intent, env), "")
            self.assertIsNone(R.desktop_for(intent, env))
