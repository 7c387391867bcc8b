from gettext import gettext as _

VERSION = "1.0.0"
PACKAGE_NAME = "sessionctl"

DESKTOP_ID = "sessionctl"
PROGRAM_NAME = "sessionctl"
SHORT_DESCRIPTION = _(
    "Lock, log out, suspend or shut down using the commands "
    "of the current desktop"
)
