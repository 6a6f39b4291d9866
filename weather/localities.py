"""Localities served by the proxy and their URL slugs."""

from __future__ import annotations

from dataclasses import dataclass

# Trailing administrative-division marker -> ASCII word used in slugs.
DIVISION_WORDS: dict[str, str] = {
    "縣": "county",
    "市": "city",
}


@dataclass(frozen=True)
class Locality:
    """A CWA location name plus the ASCII romanization of its stem."""

    name: str
    romanization: str

    @property
    def slug(self) -> str:
        return slugify(self.name, self.romanization)

    @property
    def path(self) -> str:
        return f"/api/weather/{self.slug}"


def slugify(name: str, romanization: str) -> str:
    """Build the URL slug, e.g. ``新竹縣`` + ``Hsinchu`` -> ``hsinchucounty``."""

    marker = name[-1:]
    suffix = DIVISION_WORDS.get(marker)
    if suffix is None:
        raise ValueError(f"Unsupported administrative division: {name}")
    return f"{romanization}{suffix}".lower()


LOCALITIES: tuple[Locality, ...] = (
    Locality(name="新竹縣", romanization="Hsinchu"),
    Locality(name="桃園市", romanization="Taoyuan"),
    Locality(name="新竹市", romanization="Hsinchu"),
    Locality(name="苗栗縣", romanization="Miaoli"),
)
