import unittest

from vmboot.const import const
from vmboot.lib.kernel_args import *


class Test_parse_kernel_args(unittest.TestCase):

  def test_empty(self):
    self.assertEqual(parse_kernel_args(""), {})
    self.assertEqual(parse_kernel_args("   \t \n"), {})
    self.assertIsInstance(parse_kernel_args(""), kernel_args)
    pass

  def test_flag_empty_value_and_value(self):
    args = parse_kernel_args("quiet console=ttyS0 foo=")
    self.assertEqual(args, {"quiet": None, "console": "ttyS0", "foo": ""})
    self.assertIsNone(args["quiet"])
    self.assertEqual(args["foo"], "")
    pass

  def test_init_is_verbatim(self):
    args = parse_kernel_args("quiet console=ttyS0 init=/sbin/init arg1 arg2")
    self.assertEqual(args, {"quiet": None, "console": "ttyS0", "init": "/sbin/init arg1 arg2"})
    pass

  def test_init_keeps_whitespace(self):
    cmdline = "ro  init=/bin/sh -c  'echo a=b'  \t"
    args = parse_kernel_args(cmdline)
    self.assertEqual(args["init"], "/bin/sh -c  'echo a=b'  \t")
    self.assertEqual(args["ro"], None)
    self.assertEqual(len(args), 2)
    pass

  def test_init_overrides_tokenized_init(self):
    # second "init=" is inside the captured value, the first bare "init" is a flag
    args = parse_kernel_args("init quiet init=/sbin/init init=x")
    self.assertEqual(args, {"init": "/sbin/init init=x", "quiet": None})
    pass

  def test_empty_init(self):
    self.assertEqual(parse_kernel_args("init="), {"init": ""})
    self.assertEqual(parse_kernel_args("quiet init="), {"quiet": None, "init": ""})
    pass

  def test_init_search_is_textual(self):
    self.assertEqual(parse_kernel_args("foo=init=bar baz"), {"foo": "", "init": "bar baz"})
    self.assertEqual(parse_kernel_args("quiet rdinit=/init"), {"quiet": None, "rd": None, "init": "/init"})
    pass

  def test_split_at_first_equal(self):
    self.assertEqual(parse_kernel_args("a=1=2"), {"a": "1=2"})
    self.assertEqual(parse_kernel_args("root=UUID=1234-abcd"), {"root": "UUID=1234-abcd"})
    pass

  def test_empty_value_and_flag(self):
    self.assertEqual(parse_kernel_args("foo= bar"), {"foo": "", "bar": None})
    pass

  def test_duplicates_last_wins(self):
    self.assertEqual(parse_kernel_args("console=tty0 console=ttyS0 quiet quiet="), {"console": "ttyS0", "quiet": ""})
    pass

  def test_irregular_whitespace(self):
    self.assertEqual(parse_kernel_args("\t quiet\n\nsplash   nomodeset "), {"quiet": None, "splash": None, "nomodeset": None})
    pass

  def test_case_sensitive(self):
    self.assertEqual(parse_kernel_args("Quiet quiet=1"), {"Quiet": None, "quiet": "1"})
    pass

  pass


class Test_serialize_kernel_args(unittest.TestCase):

  def test_empty(self):
    self.assertEqual(serialize_kernel_args({}), "")
    self.assertEqual(str(kernel_args()), "")
    pass

  def test_fields(self):
    self.assertEqual(serialize_kernel_args({"foo": "", "bar": None}), "foo= bar")
    self.assertEqual(serialize_kernel_args({"console": "ttyS0"}), "console=ttyS0")
    pass

  def test_init_last(self):
    args = kernel_args()
    args["init"] = "/sbin/init arg1 arg2"
    args["quiet"] = None
    args["console"] = "ttyS0"
    self.assertEqual(str(args), "quiet console=ttyS0 init=/sbin/init arg1 arg2")
    pass

  def test_init_only(self):
    self.assertEqual(serialize_kernel_args({"init": "/sbin/init"}), "init=/sbin/init")
    self.assertEqual(serialize_kernel_args({"init": ""}), "init=")
    self.assertEqual(serialize_kernel_args({"init": None}), "init")
    pass

  def test_init_flag_last(self):
    self.assertEqual(serialize_kernel_args({"init": None, "ro": None}), "ro init")
    pass

  def test_example_round_trip(self):
    cmdline = "quiet console=ttyS0 init=/sbin/init arg1 arg2"
    args = parse_kernel_args(cmdline)
    self.assertEqual(str(args), cmdline)
    self.assertTrue(args.get_cmdline().endswith("init=/sbin/init arg1 arg2"))
    pass

  def test_round_trip_without_init(self):
    original = {"reboot": "k", "panic": "1", "pci": "off", "nomodeset": None, "cgroup_enable": ""}
    self.assertEqual(parse_kernel_args(serialize_kernel_args(original)), original)
    pass

  def test_whitespace_normalized(self):
    self.assertEqual(str(parse_kernel_args("  a   b=1\tc  ")), "a b=1 c")
    pass

  pass


class Test_kernel_args_edit(unittest.TestCase):

  def setUp(self):
    self.args = parse_kernel_args("quiet splash console=ttyS0 init=/sbin/init --verbose")
    pass

  def test_set_flag(self):
    self.args.set_flag("nomodeset")
    self.args.set_flag("console")
    self.assertTrue(self.args.has_flag("nomodeset"))
    self.assertTrue(self.args.has_flag("console"))
    self.assertEqual(str(self.args), "quiet splash console nomodeset init=/sbin/init --verbose")
    pass

  def test_set_tag_value(self):
    self.args.set_tag_value("console", "ttyS1")
    self.args.set_tag_value("cgroup_enable", "")
    self.assertFalse(self.args.has_flag("cgroup_enable"))
    self.assertEqual(str(self.args), "quiet splash console=ttyS1 cgroup_enable= init=/sbin/init --verbose")
    pass

  def test_remove_flag(self):
    self.args.remove_flag("splash")
    self.args.remove_flag("nonexistent")
    self.assertEqual(str(self.args), "quiet console=ttyS0 init=/sbin/init --verbose")
    self.args.remove_flag("init")
    self.assertEqual(str(self.args), "quiet console=ttyS0")
    pass

  def test_apply_option(self):
    self.args.apply_option("quiet", const._REMOVE_)
    self.args.apply_option("ro", None)
    self.args.apply_option("console", "")
    self.assertEqual(self.args, {"splash": None, "console": "", "init": "/sbin/init --verbose", "ro": None})
    pass

  def test_new_init_goes_last(self):
    args = parse_kernel_args("quiet")
    args.set_tag_value("init", "/bin/sh -c true")
    args.set_flag("ro")
    self.assertEqual(str(args), "quiet ro init=/bin/sh -c true")
    pass

  def test_repr(self):
    self.assertEqual(repr(parse_kernel_args("a=1")), "kernel_args({'a': '1'})")
    pass

  pass


if __name__ == '__main__':
  unittest.main()
