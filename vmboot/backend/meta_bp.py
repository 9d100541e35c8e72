from flask import jsonify, Blueprint
from ..version import VMBOOT_VERSION, VMBOOT_TIMESTAMP


meta_bp = Blueprint('meta', __name__)


@meta_bp.route('/version.json')
@meta_bp.route('/version')
def route_version():
  """Get the version number of backend"""
  return jsonify({"version": {"backend": VMBOOT_VERSION + "-" + VMBOOT_TIMESTAMP}})
