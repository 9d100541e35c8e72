# VM Boot Args
#
# Kernel command line parsing and editing for VM boot configuration.

"""
The top-level :mod:`vmboot` module.

The :mod:`vmboot.lib.kernel_args` module holds the command line codec.
The rest of the package reads and writes command lines for it: GRUB
defaults, /proc/cmdline, an HTTP API and a command line tool.
"""
name = "vmboot"

from .version import *

# Semi-standard module versioning.
__version__ = VMBOOT_VERSION
