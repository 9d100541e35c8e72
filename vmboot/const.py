"""String constants.
Once defined, it becomes immutable.
"""


class _const:

  class ConstError(TypeError):
    pass

  def __setattr__(self, name, value):
    if name in self.__dict__:
      raise self.ConstError
    self.__dict__[name] = value

  def __delattr__(self, name):
    if name in self.__dict__:
      raise self.ConstError
    raise NameError
  pass

const = _const()

# Kernel args with special handling
const.init = "init"
const.ip = "ip"
const.console = "console"

# ip= autoconf setting for static configuration
const.ip_autoconf_off = "off"

# GRUB defaults
const.GRUB_DEFAULT_FILE = "/etc/default/grub"
const.GRUB_CMDLINE_LINUX_DEFAULT = "GRUB_CMDLINE_LINUX_DEFAULT"
const.GRUB_CMDLINE_LINUX = "GRUB_CMDLINE_LINUX"

const.PROC_CMDLINE = "/proc/cmdline"

const.cmdline = 'cmdline'
const.args = 'args'

# cmdline special value for removing vlaue
const._REMOVE_ = '_REMOVE_'
