"""DRILLS

A worked exercise set packaged as a small library: a LIFO stack, a coupon
catalog with discount calculation, input validators, clock-gated business
rules, and storefront operations that reach external collaborators only
through narrow capability interfaces.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
