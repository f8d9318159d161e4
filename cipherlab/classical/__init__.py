# Classical Ciphers Module
"""
Classical cipher implementations including:
- Caesar shift (Latin and Vietnamese alphabets) - caesar.py
- Playfair digraph substitution - playfair.py
- Rail Fence columnar transposition - rail_fence.py

Each module is a namespace of pure functions; import the module and
call e.g. caesar.encode(...) or playfair.encrypt(...).
"""

from . import caesar, playfair, rail_fence

__all__ = [
    'caesar',
    'playfair',
    'rail_fence',
]
