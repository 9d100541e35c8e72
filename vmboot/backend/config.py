"""
config.py: vmboot http server configuration
"""
import os

from ..const import const


class Config(object):
  """Base configuration."""
  # Flask app configuration
  PROPAGATE_EXCEPTIONS = False
  CORS_ORIGIN_WHITELIST = [
    'http://0.0.0.0:10700',
    'http://localhost:10700',
    'http://0.0.0.0:8080',
    'http://localhost:8080',
  ]

  HOST = 'localhost'
  PORT = 10700

  # Where the host kernel command line and grub defaults are read from
  PROC_CMDLINE = os.environ.get('VMBOOT_PROC_CMDLINE', const.PROC_CMDLINE)
  GRUB_DEFAULT = os.environ.get('VMBOOT_GRUB_DEFAULT', const.GRUB_DEFAULT_FILE)
  pass


class DevConfig(Config):
  """Development configuration."""
  ENV = 'dev'
  DEBUG = True
  pass


class ProdConfig(Config):
  """Production configuration."""
  ENV = 'prod'
  DEBUG = False
  pass


class TestConfig(Config):
  """Test configuration."""
  ENV = 'test'
  TESTING = True
  DEBUG = True
  pass
