import os
import logging
import logging.handlers

from ..const import const
from .kernel_args import kernel_args, parse_kernel_args


def read_file(filepath):
  with open(filepath) as f:
    return f.read()


def write_file(filepath, content):
  with open(filepath, "w") as f:
    f.write(content)
    pass
  pass


global _logger_
_logger_ = None

#
#
#
def setup_vmboot_logger(logger, log_level=None, filename=None):
  if filename is None:
    filename = os.environ.get('VMBOOT_LOG')
    pass
  if filename is None:
    if os.getuid() == 0:
      filename = '/tmp/vmboot.log'
    else:
      filename = '/tmp/vmboot-development.log'
      pass
    pass
  if log_level is None:
    log_level = logging.INFO
    pass
  vlog_handler = logging.handlers.RotatingFileHandler(filename, maxBytes=2**24, backupCount=3)
  vlog_formatter = logging.Formatter('%(asctime)s %(processName)-10s/%(threadName)s %(name)s %(levelname)-8s %(message)s')
  vlog_handler.setFormatter(vlog_formatter)
  if logger:
    while len(logger.handlers):
      logger.removeHandler(logger.handlers[0])
      pass
    logger.setLevel(log_level)
    logger.addHandler(vlog_handler)
    pass
  return logger


def get_vmboot_logger() -> logging.Logger:
  global _logger_
  if _logger_ is None:
    _logger_ = logging.getLogger('vmboot')
    setup_vmboot_logger(_logger_)
  return _logger_


#
# Host kernel command line
#
def strip_line_end(cmdline):
  """Drops the one newline terminating the line. More belong to init's args."""
  if cmdline.endswith("\n"):
    return cmdline[:-1]
  return cmdline


def read_proc_cmdline(path=None) -> kernel_args:
  if path is None:
    path = const.PROC_CMDLINE
    pass
  vlog = get_vmboot_logger()
  try:
    cmdline = read_file(path)
  except FileNotFoundError:
    vlog.info("%s does not exist. No host kernel args." % path)
    return kernel_args()

  return parse_kernel_args(strip_line_end(cmdline))
