# CLI package
"""
netspeed command line package.

`netspeed_cli.cli` is the console script entry point. It is resolved on
first access so that the driver and output modules import without click's
command machinery.
"""

__all__ = ['cli']

def __getattr__(name):
    if name == 'cli':
        from .main import cli
        return cli
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
