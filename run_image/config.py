# --- Global Configuration & Executable Paths ---

# Path to the debug log file, if enabled via command line.
DEBUG_FILE = None

# The QEMU system emulator binary used to boot the kernel.
QEMU_EXECUTABLE = "qemu-system-x86_64"
# The kernel image, relative to a sibling checkout of the kernel source tree.
KERNEL_IMAGE = "../linux/arch/x86/boot/bzImage"
# The initrd image, looked up in the current working directory.
ROOTFS_IMAGE_NAME = "rootfs_img"


# --- Network Configuration ---

# The network backend mode for QEMU user-mode networking (SLIRP/NAT).
NETWORK_MODE = "user"
NETWORK_ID = "eth0"
# The emulated network card attached to the backend.
NIC_MODEL = "e1000"

# --- Packet Capture Configuration ---

# QEMU object type that dumps all traffic on a netdev to a pcap file.
CAPTURE_FILTER_TYPE = "filter-dump"
# Capture file, written by QEMU into its working directory.
CAPTURE_FILE = "dump.dat"


# --- Kernel Command Line ---

KERNEL_ROOT_DEVICE = "/dev/ram"
# Init program inside the ramdisk (rdinit= is relative to the initramfs root).
KERNEL_INIT_PATH = "sbin/init"
# Static guest addressing, matching the defaults of QEMU's user-mode network.
GUEST_IP = "10.0.2.15"
GATEWAY_IP = "10.0.2.1"
NETMASK = "255.255.255.0"
KERNEL_CONSOLE = "ttyS0"
# no_timer_check skips the IO-APIC timer sanity check, which is flaky under TCG.
KERNEL_EXTRA_PARAMS = ["no_timer_check"]

# Display flag; the serial console is multiplexed onto the terminal instead.
NO_GRAPHICS_FLAG = "-nographic"

# Exit status offset for a child killed by a signal, as reported by shells.
SIGNAL_EXIT_BASE = 128
