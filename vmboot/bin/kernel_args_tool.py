#!/usr/bin/env python3
#
# Show or edit a kernel command line.
#
#  kernel_args_tool.py "quiet console=ttyS0" --set console=ttyS1 --remove quiet
#  kernel_args_tool.py --proc --json
#  kernel_args_tool.py --grub /etc/default/grub --set cgroup_enable=memory --write
#
import argparse
import json
import sys

from ..const import const
from ..lib.kernel_args import parse_kernel_args
from ..lib.grub import grub_config
from ..lib.util import read_proc_cmdline, get_vmboot_logger, strip_line_end


def split_option(option):
  """"name=value" -> (name, value), "name" -> (name, None)"""
  tag, sep, value = option.partition("=")
  return (tag, value if sep else None)


def build_parser():
  parser = argparse.ArgumentParser(description="Show or edit a kernel command line.")
  source = parser.add_mutually_exclusive_group()
  source.add_argument("cmdline", nargs="?", default=None, help="Kernel command line.")
  source.add_argument("--proc", nargs="?", const=const.PROC_CMDLINE, default=None, metavar="PATH",
                      help="Read the command line of the running kernel.")
  source.add_argument("--grub", metavar="FILE", help="Edit the cmdline variables of a grub defaults file.")
  parser.add_argument("-s", "--set", action="append", default=[], metavar="NAME[=VALUE]",
                      help="Set a flag, or a value. Repeatable.")
  parser.add_argument("-r", "--remove", action="append", default=[], metavar="NAME",
                      help="Remove an arg. Repeatable.")
  parser.add_argument("-j", "--json", action="store_true", help="Print the args as JSON.")
  parser.add_argument("-w", "--write", action="store_true", help="With --grub, rewrite the file.")
  return parser


def edit_grub(args, out):
  grub = grub_config(args.grub)
  grub.open()
  for option in args.set:
    grub.set_cmdline_option(*split_option(option))
    pass
  for tag in args.remove:
    grub.remove_option(tag)
    pass

  if args.write:
    updated = grub.write()
    out.write(("Updated %s\n" if updated else "Unchanged %s\n") % args.grub)
  else:
    updated, content = grub.generate()
    out.write(content)
    pass
  return 0


def main(argv=None, out=sys.stdout):
  parser = build_parser()
  args = parser.parse_args(argv)

  if args.write and not args.grub:
    parser.error("--write needs --grub")
    pass

  if args.grub:
    return edit_grub(args, out)

  if args.proc:
    kargs = read_proc_cmdline(args.proc)
  else:
    kargs = parse_kernel_args(args.cmdline if args.cmdline is not None else strip_line_end(sys.stdin.read()))
    pass

  for option in args.set:
    kargs.apply_option(*split_option(option))
    pass
  for tag in args.remove:
    kargs.remove_flag(tag)
    pass
  get_vmboot_logger().debug("kernel_args_tool: %s" % str(kargs))

  if args.json:
    out.write(json.dumps(kargs, indent=2) + "\n")
  else:
    out.write(str(kargs) + "\n")
    pass
  return 0


if __name__ == "__main__":
  sys.exit(main())
