"""Adapters for DRILLS.

Provide concrete, in-process implementations of the capability interfaces
(clock, exchange rates, shipping, analytics, payment, email, security codes).

Dependency rule: may import `drills.domain` and `drills.interfaces`; the domain
must not import this package.
"""
