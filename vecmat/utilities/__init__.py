"""
Supporting utilities for :mod:`vecmat`, mostly the options layer used to configure the stateful helpers.
"""

from vecmat.utilities.options import UserOptions
from vecmat.utilities.mixin_classes import UserOptionConfigured

__all__ = ['UserOptions', 'UserOptionConfigured']
