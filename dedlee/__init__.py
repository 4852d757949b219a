"""
# Dedlee: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Compiler from dedlee source to Dedalus story markup.
"""

from dedlee._version import __version__
