"""Domain layer for DRILLS.

Contains the business rules: the Stack container, the coupon catalog,
validators, clock-gated rules, value objects, and result types. This package
is deliberately technology-agnostic.

Dependency rule: do not import from `drills.adapters` or `drills.entrypoints`.
"""
