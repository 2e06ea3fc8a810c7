import subprocess
import sys

from . import launch as launch_args
from .errors import MissingBinaryError, SubprocessFailureError
from .logging_utils import debug_log


def format_command(args):
    """Formats a QEMU command as a copy-pasteable, line-continued shell command."""
    formatted_command = f"{args[0]} \\\n"
    formatted_command += " \\\n".join([f"    {subprocess.list2cmdline([arg])}" for arg in args[1:]])
    return formatted_command


def _wait_for_exit(process, debug_file):
    """Blocks until QEMU exits. There is no timeout; the guest may run indefinitely."""
    while True:
        try:
            return process.wait()
        except KeyboardInterrupt:
            # Ctrl-C reaches QEMU as well, since it shares our process group.
            print("\nInterrupted, waiting for QEMU to exit.", file=sys.stderr, flush=True)
            debug_log(debug_file, "WAIT: KeyboardInterrupt received, still waiting for QEMU")


def run_qemu(args, working_dir, debug_file=None):
    """
    Executes the QEMU command in the foreground and returns its exit status.

    QEMU inherits our standard streams, so the guest's serial console and any
    QEMU error messages reach the terminal unmodified.
    """
    print("--- Starting QEMU with the following command ---", flush=True)
    print(format_command(args), flush=True)
    print("-" * 50, flush=True)
    debug_log(debug_file, f"SPAWN: cwd={working_dir} argv={args!r}")

    try:
        process = subprocess.Popen(args, cwd=working_dir)
    except FileNotFoundError as e:
        debug_log(debug_file, f"SPAWN: failed: {e}")
        raise MissingBinaryError(args[0]) from e

    returncode = _wait_for_exit(process, debug_file)
    debug_log(debug_file, f"EXIT: returncode={returncode}")

    if returncode < 0:
        raise SubprocessFailureError(signal=-returncode)
    if returncode != 0:
        raise SubprocessFailureError(returncode=returncode)
    return returncode


def launch(working_dir=None, debug_file=None, **overrides):
    """
    Boots the kernel under QEMU and returns QEMU's exit status.

    The images and the QEMU binary are checked before anything is spawned,
    so a failed check never leaves a capture file behind.
    """
    config = launch_args.make_launch_config(working_dir, **overrides)
    debug_log(debug_file, f"CONFIG: {config!r}")

    launch_args.check_images(config)
    qemu_path = launch_args.check_qemu_executable(config)
    debug_log(debug_file, f"CONFIG: using QEMU at {qemu_path}")

    args = launch_args.build_qemu_args(config)
    return run_qemu(args, config["working_dir"], debug_file)
