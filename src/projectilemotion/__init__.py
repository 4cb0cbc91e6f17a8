"""
Projectile motion solver: enter what you know, get everything derivable.
"""
__version__ = "0.1.0"
