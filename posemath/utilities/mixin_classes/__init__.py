"""
This package contains helpful mixin classes to provide basic functionality throughout posemath.
"""

from posemath.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ["UserOptionConfigured"]
