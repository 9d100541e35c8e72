import re
import sys
import typing

from .kernel_args import kernel_args, parse_kernel_args
from .util import get_vmboot_logger, read_file, write_file
from ..const import const

#
# GRUB_CMDLINE_LINUX=""
# GRUB_CMDLINE_LINUX_DEFAULT="quiet splash"
# export GRUB_CMDLINE_LINUX_DEFAULT="quiet splash"  # comment
#
# Only the text between the quotes is rewritten. \" inside is part of the value.
#

class grub_error(Exception):
  pass


class grub_variable:
  """One TAG="..." line of a grub defaults file."""
  tag: str
  args: typing.Optional[kernel_args]

  def __init__(self, tag: str):
    self.tag = tag
    self.rex = r'^(\s*)(export\s+)?({tag})="((?:[^"\\]|\\.)*)"'.format(tag=re.escape(tag))
    self.variable_re = re.compile(self.rex)
    self.line = None
    self.cmdline = None
    self.args = None
    self._parsed = None
    self._span = None
    self._line_no = None
    pass

  def parse_line(self, line, line_no):
    if len(line) == 0 or line.lstrip().startswith('#'):
      return False
    matched = self.variable_re.search(line)
    if matched:
      self.line = line
      self._line_no = line_no
      self._span = matched.span(4)
      self.cmdline = matched.group(4)
      self.args = parse_kernel_args(self.cmdline)
      self._parsed = parse_kernel_args(self.cmdline)
      return True
    return False

  def set_cmdline_option(self, tag, value):
    if self.args is None:
      return
    self.args.apply_option(tag, value)
    pass

  def remove_option(self, tag):
    if self.args is None:
      return
    self.args.remove_flag(tag)
    pass

  @property
  def line_no(self):
    return self._line_no

  def generate_line(self):
    # untouched args keep the line as written
    if self.args == self._parsed:
      return self.line
    start, end = self._span
    return self.line[:start] + str(self.args) + self.line[end:]

  pass


class grub_config:
  """/etc/default/grub kernel command line manipulation"""
  def __init__(self, filename, tags=None):
    self.filename = filename
    if tags is None:
      tags = [const.GRUB_CMDLINE_LINUX_DEFAULT, const.GRUB_CMDLINE_LINUX]
      pass
    self.tags = tags
    # tag -> [grub_variable], one per assignment in the file
    self.variables = {}
    self.override_map = {}
    self.grubcfg = None
    self.grubcfg_lines = None
    pass

  def open(self):
    self.grubcfg = read_file(self.filename)
    self.grubcfg_lines = self.grubcfg.splitlines()
    self.variables = { tag: [] for tag in self.tags }
    self.override_map = {}

    for i_line, line in enumerate(self.grubcfg_lines):
      for tag in self.tags:
        variable = grub_variable(tag)
        if variable.parse_line(line, i_line):
          self.variables[tag].append(variable)
          self.override_map[i_line] = variable
          pass
        pass
      pass
    get_vmboot_logger().debug("%s: cmdline variables at lines %s" % (self.filename, sorted(self.override_map.keys())))
    pass

  def set_cmdline_option(self, tag, value):
    for variable in self.override_map.values():
      variable.set_cmdline_option(tag, value)
      pass
    pass

  def remove_option(self, tag):
    for variable in self.override_map.values():
      variable.remove_option(tag)
      pass
    pass

  def generate(self) -> typing.Tuple[bool, str]:
    if self.grubcfg is None:
      raise grub_error("grub file %s has not been open." % self.filename)

    updated = False
    lines = list(self.grubcfg_lines)
    for i_line, override in self.override_map.items():
      generated = override.generate_line()
      if lines[i_line] != generated:
        updated = True
        lines[i_line] = generated
        pass
      pass
    return (updated, "\n".join(lines + [""]))

  def write(self) -> bool:
    updated, content = self.generate()
    if updated:
      write_file(self.filename, content)
      get_vmboot_logger().info("%s updated." % self.filename)
      pass
    return updated
  pass


def grub_set_cmdline_option(filename, tag, value) -> typing.Tuple[bool, str]:
  grub = grub_config(filename)
  grub.open()
  grub.set_cmdline_option(tag, value)
  return grub.generate()


if __name__ == "__main__":
  filename = const.GRUB_DEFAULT_FILE
  if len(sys.argv) > 1:
    filename = sys.argv[1]
    pass

  grub = grub_config(filename)
  grub.open()
  for tag, variables in grub.variables.items():
    for variable in variables:
      print("%d %s: %s" % (variable.line_no + 1, tag, repr(variable.args)))
      pass
    pass
  pass
