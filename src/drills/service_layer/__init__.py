"""Service layer for DRILLS.

Implements the storefront use-cases (currency conversion, shipping, page
rendering, order submission, sign-up, login) on top of injected capabilities.

Dependency rule: may import `drills.domain` and `drills.interfaces`, but not
`drills.adapters` or `drills.entrypoints`.
"""
