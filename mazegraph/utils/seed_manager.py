"""Deterministic seed derivation to avoid global random.seed() order dependencies."""

from __future__ import annotations

import hashlib
import random
from typing import Any, Optional


class SeedManager:
    """Derives per-component seeds from a single master seed.

    Each consumer of randomness (e.g. a maze carver) gets its own
    ``random.Random`` seeded from SHA-256 of the master seed and the
    component identifiers, so results do not depend on call order.

    Usage:
        seed_mgr = SeedManager(42)
        rng = seed_mgr.create_random_state("carver", "kruskal")
    """

    def __init__(self, master_seed: Optional[int] = None) -> None:
        """Initialize the seed manager.

        Args:
            master_seed: Master seed for deterministic operations. If None,
                seed derivation returns None (non-deterministic).
        """
        self.master_seed = master_seed

    def derive_seed(self, *components: Any) -> Optional[int]:
        """Derive a deterministic seed from master seed and component identifiers.

        Args:
            *components: Identifiers (strings, integers, etc.) naming the
                component that needs a seed.

        Returns:
            Derived seed as a positive 31-bit integer, or None if no master seed set.
        """
        if self.master_seed is None:
            return None

        seed_input = f"{self.master_seed}:" + ":".join(str(c) for c in components)
        hash_digest = hashlib.sha256(seed_input.encode()).digest()

        seed_value = int.from_bytes(hash_digest[:4], byteorder="big")
        return seed_value & 0x7FFFFFFF

    def create_random_state(self, *components: Any) -> random.Random:
        """Create a new Random instance with a derived seed.

        Args:
            *components: Component identifiers for seed derivation.

        Returns:
            Random instance seeded with the derived seed, or unseeded if no
            master seed is set.
        """
        derived_seed = self.derive_seed(*components)
        rng = random.Random()
        if derived_seed is not None:
            rng.seed(derived_seed)
        return rng
