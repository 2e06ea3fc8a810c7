import os
import shutil
from pathlib import Path

from . import config as app_config
from .errors import LaunchError, MissingBinaryError, MissingImageError


def default_launch_config():
    """Returns the launch configuration defaults as a fresh dict."""
    return {
        "qemu_executable": app_config.QEMU_EXECUTABLE,
        "kernel_image": app_config.KERNEL_IMAGE,
        "rootfs_image": None,
        "network_mode": app_config.NETWORK_MODE,
        "network_id": app_config.NETWORK_ID,
        "nic_model": app_config.NIC_MODEL,
        "capture_filter": app_config.CAPTURE_FILTER_TYPE,
        "capture_file": app_config.CAPTURE_FILE,
        "root_device": app_config.KERNEL_ROOT_DEVICE,
        "init_path": app_config.KERNEL_INIT_PATH,
        "guest_ip": app_config.GUEST_IP,
        "gateway_ip": app_config.GATEWAY_IP,
        "netmask": app_config.NETMASK,
        "console": app_config.KERNEL_CONSOLE,
        "extra_kernel_params": list(app_config.KERNEL_EXTRA_PARAMS),
        "working_dir": None,
    }


def make_launch_config(working_dir=None, **overrides):
    """
    Builds the launch configuration for one invocation.

    The rootfs image defaults to `rootfs_img` in the working directory and is
    made absolute. The kernel path only has "~" expanded and is otherwise kept
    as configured, since it follows the kernel source tree layout rather than
    the working directory.
    """
    config = default_launch_config()
    unknown = sorted(set(overrides) - set(config))
    if unknown:
        raise LaunchError(f"Unknown launch option(s): {', '.join(unknown)}")

    for key, value in overrides.items():
        if value is not None:
            config[key] = value

    # QEMU does not expand "~", so the argument must match the checked path
    config["kernel_image"] = os.path.expanduser(config["kernel_image"])
    config["working_dir"] = os.path.abspath(working_dir or os.getcwd())
    if config["rootfs_image"] is None:
        config["rootfs_image"] = os.path.join(config["working_dir"], app_config.ROOTFS_IMAGE_NAME)
    else:
        config["rootfs_image"] = os.path.abspath(resolve_image_path(config["rootfs_image"], config["working_dir"]))
    return config


def build_kernel_cmdline(config):
    """Constructs the kernel command line passed with -append."""
    # ip=<client>:<server>:<gateway>:<netmask>, server left empty
    ip_arg = f"ip={config['guest_ip']}::{config['gateway_ip']}:{config['netmask']}"
    params = [
        f"root={config['root_device']}",
        f"rdinit={config['init_path']}",
        ip_arg,
        f"console={config['console']}",
    ]
    params.extend(config["extra_kernel_params"])
    return " ".join(params)


def build_netdev_arg(config):
    return f"{config['network_mode']},id={config['network_id']}"


def build_nic_arg(config):
    return f"{config['nic_model']},netdev={config['network_id']}"


def build_capture_filter_arg(config):
    # The filter reuses the netdev id as its own object id
    return f"{config['capture_filter']},id={config['network_id']},netdev={config['network_id']},file={config['capture_file']}"


def build_qemu_args(config):
    """Constructs the list of arguments for the QEMU command."""
    return [
        config["qemu_executable"],
        "-netdev", build_netdev_arg(config),
        "-device", build_nic_arg(config),
        "-object", build_capture_filter_arg(config),
        "-kernel", config["kernel_image"],
        "-append", build_kernel_cmdline(config),
        app_config.NO_GRAPHICS_FLAG,
        "-initrd", config["rootfs_image"],
    ]


def resolve_image_path(path, working_dir):
    """Resolves an image path the way QEMU will, relative to its working directory."""
    path = Path(path).expanduser()
    if not path.is_absolute():
        path = Path(working_dir) / path
    return str(path)


def _check_image(kind, path, working_dir):
    resolved = resolve_image_path(path, working_dir)
    if not os.path.exists(resolved):
        raise MissingImageError(kind, path)
    if not os.path.isfile(resolved):
        raise MissingImageError(kind, path, reason="is not a regular file")
    if not os.access(resolved, os.R_OK):
        raise MissingImageError(kind, path, reason="is not readable")


def check_images(config):
    """Verifies the kernel and rootfs images exist, kernel first."""
    _check_image("kernel", config["kernel_image"], config["working_dir"])
    _check_image("rootfs", config["rootfs_image"], config["working_dir"])


def check_qemu_executable(config):
    """Checks the QEMU executable is on PATH and returns where it was found.

    The argument vector keeps the bare name; Popen does the same PATH lookup.
    """
    executable = config["qemu_executable"]
    found = shutil.which(executable)
    if not found:
        raise MissingBinaryError(executable)
    return found
