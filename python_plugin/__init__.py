"""
python-plugin — Python toolchain resolution for a version-manager host.
"""

__version__ = "0.1.0"
