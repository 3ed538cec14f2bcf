"""Error taxonomy for name parsing.

Both kinds are synchronous and deterministic for a given input and rule
list. Callers pick a propagation style through the facade entry point:
``parse`` raises, ``valid`` collapses to a bool, ``domain`` to None.
"""

from __future__ import annotations


class PublicSuffixError(Exception):
    """Base class for every error raised while resolving a name."""


class InvalidDomainError(PublicSuffixError):
    """The name is not a domain at all (blank, dotted edge, URL, no rule)."""


class DomainNotAllowedError(PublicSuffixError):
    """The name is a bare public suffix with no registrable label beneath it."""
