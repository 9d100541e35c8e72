#
# Kernel boot parameters, to and from a map.
# Kernel docs: https://www.kernel.org/doc/Documentation/admin-guide/kernel-parameters.txt
#
# "key=value" -> args["key"] = "value"
# "key="      -> args["key"] = ""
# "key"       -> args["key"] = None
#
# Everything after the first "init=" belongs to the init process and is
# kept verbatim as args["init"]. The search is textual, so "foo=init=bar"
# splits in the middle of foo's value. Callers rely on this, leave it be.
#

import typing

from ..const import const

_INIT_PREFIX = const.init + "="


class kernel_args(dict):
  """name -> value map of a kernel command line.
  A value of None is a flag (no "="), "" is an explicitly empty value.
  """

  def set_flag(self, flag):
    self[flag] = None
    pass

  def set_tag_value(self, tag, value: str):
    self[tag] = value
    pass

  def remove_flag(self, flag):
    self.pop(flag, None)
    pass

  def has_flag(self, flag) -> bool:
    return flag in self and self[flag] is None

  def apply_option(self, tag, value: typing.Optional[str]):
    if value == const._REMOVE_:
      self.remove_flag(tag)
    elif value is None:
      self.set_flag(tag)
    else:
      self.set_tag_value(tag, value)
      pass
    pass

  def get_cmdline(self) -> str:
    return serialize_kernel_args(self)

  def __str__(self):
    return serialize_kernel_args(self)

  def __repr__(self):
    return "kernel_args(%s)" % dict.__repr__(self)
  pass


def _render(key, value) -> str:
  return key if value is None else "%s=%s" % (key, value)


def parse_kernel_args(cmdline: str) -> kernel_args:
  args = kernel_args()
  init_value = None
  if _INIT_PREFIX in cmdline:
    cmdline, init_value = cmdline.split(_INIT_PREFIX, 1)
    cmdline = cmdline.strip()
    pass

  for field in cmdline.split():
    # only the first "=" separates the key
    key, sep, value = field.partition("=")
    args[key] = value if sep else None
    pass

  if init_value is not None:
    args[const.init] = init_value
    pass
  return args


def serialize_kernel_args(args: typing.Mapping[str, typing.Optional[str]]) -> str:
  fields = [_render(key, value) for key, value in args.items() if key != const.init]
  # init goes last. The kernel hands everything after it to the init process.
  if const.init in args:
    fields.append(_render(const.init, args[const.init]))
    pass
  return " ".join(fields)
