"""
vmboot HTTP server -
kernel command line parse/serialize over JSON
"""
import logging

from flask import Flask
from flask_cors import CORS

from .config import DevConfig


def create_app(config=None, log_level=logging.DEBUG):
  from ..lib.util import setup_vmboot_logger
  app = Flask(__name__)
  setup_vmboot_logger(app.logger, log_level=log_level)
  app.url_map.strict_slashes = False
  app.json.sort_keys = False
  app.config.from_object(config if config is not None else DevConfig)

  CORS(app, origins=app.config["CORS_ORIGIN_WHITELIST"])

  from .meta_bp import meta_bp
  app.register_blueprint(meta_bp)

  from .kernel_args_bp import kernel_args_bp
  app.register_blueprint(kernel_args_bp)
  return app


if __name__ == "__main__":
  from .config import Config
  app = create_app()
  app.run(host=Config.HOST, port=Config.PORT)
  pass
