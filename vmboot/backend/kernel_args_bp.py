from http import HTTPStatus

from flask import jsonify, Blueprint, request, current_app

from ..const import const
from ..lib.kernel_args import kernel_args, parse_kernel_args, serialize_kernel_args
from ..lib.util import read_proc_cmdline


kernel_args_bp = Blueprint('kernel_args', __name__, url_prefix='/kernel-args')


class bad_request(Exception):
  pass


@kernel_args_bp.errorhandler(bad_request)
def handle_bad_request(exc):
  current_app.logger.info("kernel-args: bad request. %s" % str(exc))
  return jsonify({"error": str(exc)}), HTTPStatus.BAD_REQUEST


def _request_json() -> dict:
  body = request.get_json(silent=True)
  if not isinstance(body, dict):
    raise bad_request("Request body must be a JSON object.")
  return body


def _get_cmdline(body) -> str:
  cmdline = body.get(const.cmdline)
  if not isinstance(cmdline, str):
    raise bad_request("'cmdline' must be a string.")
  return cmdline


def _get_args(body, key) -> kernel_args:
  """JSON object -> kernel_args. null is a flag."""
  value = body.get(key, {})
  if not isinstance(value, dict):
    raise bad_request("'%s' must be an object." % key)
  args = kernel_args()
  for tag, tag_value in value.items():
    if tag_value is not None and not isinstance(tag_value, str):
      raise bad_request("'%s' value of %s must be a string or null." % (key, tag))
    args[tag] = tag_value
    pass
  return args


@kernel_args_bp.route("/parse", methods=["POST"])
def route_parse():
  """Kernel command line -> args"""
  cmdline = _get_cmdline(_request_json())
  return jsonify({const.args: parse_kernel_args(cmdline)})


@kernel_args_bp.route("/serialize", methods=["POST"])
def route_serialize():
  """Args -> kernel command line"""
  body = _request_json()
  if const.args not in body:
    raise bad_request("'args' is required.")
  return jsonify({const.cmdline: serialize_kernel_args(_get_args(body, const.args))})


@kernel_args_bp.route("/edit", methods=["POST"])
def route_edit():
  """Applies "set" and then "remove" to the command line."""
  body = _request_json()
  args = parse_kernel_args(_get_cmdline(body))

  for tag, value in _get_args(body, "set").items():
    args.apply_option(tag, value)
    pass

  remove = body.get("remove", [])
  if not isinstance(remove, list) or not all(isinstance(tag, str) for tag in remove):
    raise bad_request("'remove' must be a list of strings.")
  for tag in remove:
    args.remove_flag(tag)
    pass

  current_app.logger.debug("kernel-args edit: %s" % str(args))
  return jsonify({const.cmdline: str(args), const.args: args})


@kernel_args_bp.route("/host")
def route_host():
  """Host's kernel command line"""
  args = read_proc_cmdline(current_app.config["PROC_CMDLINE"])
  return jsonify({const.cmdline: str(args), const.args: args})
