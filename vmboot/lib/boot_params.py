#
# Kernel command line for a VM.
#
# Static network config goes in as "ip=". See "ip" in
# https://www.kernel.org/doc/Documentation/filesystems/nfs/nfsroot.txt
#
# ip=<client-ip>:<server-ip>:<gw-ip>:<netmask>:<hostname>:<device>:<autoconf>:<dns0-ip>:<dns1-ip>:<ntp0-ip>
#
# server-ip and ntp0-ip are always left empty.
#

import ipaddress
import re
import typing

from ..const import const
from .kernel_args import parse_kernel_args
from .util import get_vmboot_logger

MAX_NAMESERVERS = 2

# whitespace ends the ip= arg, ":" shifts the fields
_bad_field_re = re.compile(r"[\s:]")


class boot_params_error(ValueError):
  pass


def _check_field(name, value) -> str:
  if not value:
    return ""
  if _bad_field_re.search(value):
    raise boot_params_error("Invalid %s for ip=: %s" % (name, repr(value)))
  return value


class ip_configuration:
  """Static IPv4 configuration of a VM's interface.
  client_ip is in CIDR form, eg "10.0.0.2/24".
  """
  client: ipaddress.IPv4Interface
  gateway: ipaddress.IPv4Address
  hostname: str
  if_name: str
  nameservers: typing.List[str]

  def __init__(self, client_ip, gateway, hostname=None, if_name=None, nameservers=None):
    try:
      self.client = ipaddress.IPv4Interface(client_ip)
      self.gateway = ipaddress.IPv4Address(gateway)
      self.nameservers = [str(ipaddress.IPv4Address(ns)) for ns in (nameservers or [])]
    except ipaddress.AddressValueError as exc:
      raise boot_params_error("Invalid IPv4 address: %s" % exc) from exc
    except ipaddress.NetmaskValueError as exc:
      raise boot_params_error("Invalid netmask: %s" % exc) from exc
    self.hostname = _check_field("hostname", hostname)
    self.if_name = _check_field("interface name", if_name)
    pass
  pass


def ip_boot_param(ip_config: ip_configuration) -> str:
  nameservers = ip_config.nameservers
  if len(nameservers) > MAX_NAMESERVERS:
    get_vmboot_logger().warning("Only %d nameservers fit in ip=. Dropping %s"
                                % (MAX_NAMESERVERS, ", ".join(nameservers[MAX_NAMESERVERS:])))
    pass
  nameservers = (nameservers + [""] * MAX_NAMESERVERS)[:MAX_NAMESERVERS]

  fields = [ str(ip_config.client.ip),
             "",
             str(ip_config.gateway),
             str(ip_config.client.netmask),
             ip_config.hostname,
             ip_config.if_name,
             const.ip_autoconf_off ] + nameservers + [ "" ]
  return ":".join(fields)


def setup_kernel_args(cmdline: str, ip_config: ip_configuration = None, extra: dict = None) -> str:
  """Returns the kernel command line to boot a VM with.

  :param cmdline: base command line
  :param ip_config: static network config. Becomes "ip=" unless cmdline has one.
  :param extra: {name: value} applied after. None value sets a flag, _REMOVE_ removes.
  """
  vlog = get_vmboot_logger()
  args = parse_kernel_args(cmdline)

  if ip_config is not None:
    if const.ip in args:
      vlog.info("Kernel args already have ip=%s. Not overriding with static ip config." % args[const.ip])
    else:
      args.set_tag_value(const.ip, ip_boot_param(ip_config))
      pass
    pass

  if extra:
    for tag, value in extra.items():
      vlog.debug("kernel arg %s -> %s" % (tag, value))
      args.apply_option(tag, value)
      pass
    pass
  return str(args)
