import argparse
import sys

from . import config as app_config, launch, process
from .errors import LaunchError
from .logging_utils import debug_log, open_debug_log


def build_parser():
    """Builds the argument parser. With no flags the defaults reproduce the classic launch."""
    parser = argparse.ArgumentParser(
        description="Boot a freshly built kernel with an e1000 NIC under QEMU, capturing its traffic.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--kernel-image", default=app_config.KERNEL_IMAGE,
                        help=f"Kernel image to boot. Default: {app_config.KERNEL_IMAGE}")
    parser.add_argument("--rootfs-image", default=None,
                        help=f"Initrd image. Default: ./{app_config.ROOTFS_IMAGE_NAME} in the working directory.")
    parser.add_argument("--nic-model", default=app_config.NIC_MODEL, help="QEMU network card model.")
    parser.add_argument("--capture-file", default=app_config.CAPTURE_FILE,
                        help="Packet capture file written by QEMU in the working directory.")
    parser.add_argument("--debug-file", default=app_config.DEBUG_FILE, help="Append timestamped debug messages to this file.")
    parser.add_argument("--print-command", action="store_true",
                        help="Print the QEMU command and exit without checking or launching anything.")
    parser.add_argument("--qemu-executable", default=app_config.QEMU_EXECUTABLE, help=argparse.SUPPRESS)
    return parser


def main(argv=None):
    """Parses command-line arguments and launches the VM."""
    args = build_parser().parse_args(argv)
    overrides = {
        "qemu_executable": args.qemu_executable,
        "kernel_image": args.kernel_image,
        "rootfs_image": args.rootfs_image,
        "nic_model": args.nic_model,
        "capture_file": args.capture_file,
    }

    if args.print_command:
        config = launch.make_launch_config(**overrides)
        print(process.format_command(launch.build_qemu_args(config)))
        sys.exit(0)

    debug_file = open_debug_log(args.debug_file)
    try:
        debug_log(debug_file, f"MAIN: arguments {vars(args)!r}")
        process.launch(debug_file=debug_file, **overrides)
    except LaunchError as e:
        debug_log(debug_file, f"MAIN: {type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(e.exit_status)
    finally:
        if debug_file:
            debug_file.close()
    sys.exit(0)
