"""
Flyweight pattern demo.

ParticleType holds the shared intrinsic state (name, texture, drag);
each Particle only stores its own position, velocity and remaining life.
"""

import random
import threading
from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class ParticleType:
    """Flyweight: intrinsic, shared."""
    name: str
    texture: str
    drag: float

    def render(self, x: float, y: float, life: float) -> str:
        return f"{self.name}[{self.texture}] at ({x:.1f},{y:.1f}) life={life:.2f}"


class ParticleFactory:
    """Returns one shared ParticleType per name."""

    def __init__(self):
        self._types: Dict[str, ParticleType] = {}
        self._lock = threading.Lock()

    def get(self, name: str, texture: str, drag: float) -> ParticleType:
        """
        Shared ParticleType for name, created on first request.

        Args:
            name: Key of the flyweight
            texture: Used only when the type is first created
            drag: Used only when the type is first created

        Returns:
            The same object for every call with this name
        """
        with self._lock:
            if name not in self._types:
                self._types[name] = ParticleType(name, texture, drag)
            return self._types[name]

    def distinct(self) -> int:
        """Number of ParticleTypes created."""
        with self._lock:
            return len(self._types)


class Particle:
    """Extrinsic state only."""

    __slots__ = ("type", "x", "y", "vx", "vy", "life")

    def __init__(self, ptype: ParticleType, x: float, y: float, vx: float, vy: float, life: float):
        self.type = ptype
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.life = life

    def update(self, dt: float) -> None:
        """Move, apply the type's drag and age by dt seconds."""
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.vx *= (1 - self.type.drag * dt)
        self.vy *= (1 - self.type.drag * dt)
        self.life -= dt

    def alive(self) -> bool:
        return self.life > 0

    def render(self) -> str:
        return self.type.render(self.x, self.y, self.life)


def spawn_particles(factory: ParticleFactory, count: int, seed: int = 0) -> List[Particle]:
    """Create count sparks and count smoke puffs from a seeded RNG."""
    rng = random.Random(seed)
    spark = factory.get("spark", "spark.png", 0.02)
    smoke = factory.get("smoke", "smoke.png", 0.05)

    particles = []
    for _ in range(count):
        particles.append(Particle(spark, 0, 0,
                                  rng.random() * 6 - 3, rng.random() * 6 - 3, 1.0 + rng.random()))
        particles.append(Particle(smoke, 0, 0,
                                  rng.random() * 2 - 1, rng.random() * 2 - 1, 2.0 + rng.random()))
    return particles


def step(particles: List[Particle], dt: float) -> List[Particle]:
    """Advance every particle and drop the dead ones."""
    survivors = []
    for p in particles:
        p.update(dt)
        if p.alive():
            survivors.append(p)
    return survivors


def main():
    factory = ParticleFactory()
    particles = spawn_particles(factory, 6)

    for n in range(5):
        print(f"Step {n}")
        particles = step(particles, 0.2)
        for p in particles:
            print(p.render())
        print(f"Alive: {len(particles)}  |  Distinct types: {factory.distinct()}")
        print()


if __name__ == '__main__':
    main()
