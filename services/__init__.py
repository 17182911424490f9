# services/__init__.py
"""Services package for the tyre P&L calculator"""

from . import config
from . import storage

__all__ = ['config', 'storage']
