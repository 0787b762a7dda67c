from vecmat.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ['UserOptionConfigured']
