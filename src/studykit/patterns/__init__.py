from . import singleton, factory, observer, decorator, proxy, command

__all__ = ["singleton", "factory", "observer", "decorator", "proxy", "command"]
