"""The `version` module holds the version information for recase."""
from __future__ import annotations as _annotations
__all__ = ('VERSION', 'version_info')
VERSION = '0.1.0'
'The version of recase.'

def version_info() -> str:
    """Return complete version information for recase and its dependencies."""
    import platform
    import pydantic_core

    info = [
        f'recase version: {VERSION}',
        f'pydantic-core version: {pydantic_core.__version__}',
        f'platform: {platform.platform()}',
        f'python version: {platform.python_version()}',
    ]
    return '\n'.join(info)
