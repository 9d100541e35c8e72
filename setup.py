import setuptools, sys, os

with open("README.rst", "r") as fh:
  long_description = fh.read()

# The ipaddress interface/netmask handling and Flask 3 need
# Python 3.8 or later.
python_version = sys.version_info
need_python_version = (3, 8)

if python_version < need_python_version:
  raise RuntimeError("vmboot requires Python version %d.%d or higher"
                     % need_python_version)

sys.path.append(os.getcwd())
from vmboot.version import *

setuptools.setup(
  name="vmboot",
  version=VMBOOT_VERSION,
  author="Naoyuki Tai",
  author_email="ntai@cleanwinner.com",
  description="Kernel command line parsing and editing for VM boot configuration",
  long_description=long_description,
  long_description_content_type="text/x-rst",
  packages=['vmboot',
            'vmboot.backend',
            'vmboot.bin',
            'vmboot.lib'],
  include_package_data=True,
  install_requires=[
    'Flask>=3.0.0',
    'Flask-Cors>=4.0.0',
  ],
  extras_require={
    'test': ['pytest'],
  },
  entry_points={
    'console_scripts': [
      'vmboot-kernel-args=vmboot.bin.kernel_args_tool:main',
    ],
  },
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: POSIX :: Linux",
  ],
)
