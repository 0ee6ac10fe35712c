from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from biots_life.population import Population


@dataclass(frozen=True)
class Census:
    count: int = 0
    intelligent: int = 0
    mean_attack: float = 0.0
    mean_defense: float = 0.0
    mean_photosynthesis: float = 0.0
    mean_motion: float = 0.0
    mean_intelligence: float = 0.0
    mean_life: float = 0.0
    oldest: int = 0

    def summary(self) -> str:
        return (
            f"biots={self.count} intelligent={self.intelligent} "
            f"atk={self.mean_attack:.3f} def={self.mean_defense:.3f} "
            f"pho={self.mean_photosynthesis:.3f} mot={self.mean_motion:.3f} "
            f"int={self.mean_intelligence:.2f} life={self.mean_life:.2f} "
            f"oldest={self.oldest}"
        )


def census(population: Population) -> Census:
    biots = population.biots
    n = len(biots)
    if n == 0:
        return Census()
    return Census(
        count=n,
        intelligent=sum(1 for b in biots if b.intelligence > 0.0),
        mean_attack=sum(b.attack for b in biots) / n,
        mean_defense=sum(b.defense for b in biots) / n,
        mean_photosynthesis=sum(b.photosynthesis for b in biots) / n,
        mean_motion=sum(b.motion for b in biots) / n,
        mean_intelligence=sum(b.intelligence for b in biots) / n,
        mean_life=sum(b.life for b in biots) / n,
        oldest=max(b.age for b in biots),
    )
