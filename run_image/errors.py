"""
Errors raised while launching the VM.

None of these are handled inside the package: they surface to `main()`,
which prints the message and exits with `exit_status`.
"""

from . import config as app_config


class LaunchError(Exception):
    """Base class for everything that stops the VM from running to success."""

    exit_status = 1


class MissingBinaryError(LaunchError):
    """The QEMU executable could not be found on PATH."""

    def __init__(self, executable):
        super().__init__(f"QEMU executable '{executable}' not found.")
        self.executable = executable


class MissingImageError(LaunchError):
    """A kernel or rootfs image does not exist or is not a readable file."""

    def __init__(self, kind, path, reason="not found"):
        super().__init__(f"{kind.capitalize()} image {reason}: {path}")
        self.kind = kind
        self.path = path


class SubprocessFailureError(LaunchError):
    """QEMU exited with a non-zero status or was killed by a signal."""

    def __init__(self, returncode=None, signal=None):
        if signal is not None:
            message = f"QEMU was terminated by signal {signal}."
        else:
            message = f"QEMU exited with status {returncode}."
        super().__init__(message)
        self.returncode = returncode
        self.signal = signal

    @property
    def exit_status(self):
        if self.signal is not None:
            return app_config.SIGNAL_EXIT_BASE + self.signal
        if not self.returncode:
            return LaunchError.exit_status
        return self.returncode
