from .kernel_args import kernel_args, parse_kernel_args, serialize_kernel_args
from .util import get_vmboot_logger, setup_vmboot_logger, read_proc_cmdline
