"""Domain value: the result of resolving a name against a rule list."""

from __future__ import annotations

from dataclasses import dataclass

from suffixctl.core.rules import DOT


def name_to_labels(name: str) -> list[str]:
    """Split a domain name into its labels.

    Examples:
        >>> name_to_labels("someone.spaces.live.com")
        ['someone', 'spaces', 'live', 'com']
    """
    return name.split(DOT)


@dataclass(frozen=True)
class Domain:
    """A name split into public suffix, registrable label and subdomain.

    Attributes:
        tld: Public suffix (may span several labels, e.g. ``co.uk``).
        sld: Label directly beneath the suffix, if any.
        trd: Everything left of ``sld``, possibly several labels.
    """

    tld: str
    sld: str | None = None
    trd: str | None = None

    def to_tuple(self) -> tuple[str | None, str | None, str]:
        return self.trd, self.sld, self.tld

    def __str__(self) -> str:
        return DOT.join(part for part in self.to_tuple() if part)

    @property
    def domain(self) -> str | None:
        """Registrable domain (``sld.tld``), or None for a bare suffix."""
        if not self.sld:
            return None
        return f"{self.sld}{DOT}{self.tld}"

    @property
    def subdomain(self) -> str | None:
        """Full name when a subdomain part is present, else None."""
        if not (self.trd and self.sld):
            return None
        return f"{self.trd}{DOT}{self.sld}{DOT}{self.tld}"

    @property
    def is_domain(self) -> bool:
        return bool(self.sld)

    @property
    def is_subdomain(self) -> bool:
        return bool(self.trd and self.sld)
