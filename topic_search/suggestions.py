"""Random topic suggestions for an empty search box."""

import random
from collections.abc import Sequence
from typing import Optional

from .catalog import TopicRecord


def sample(
    catalog: Sequence[TopicRecord],
    count: int = 6,
    rng: Optional[random.Random] = None,
) -> list[TopicRecord]:
    """Pick up to `count` distinct topics at random.

    The whole catalog is shuffled and the first `count` topics are kept, so
    asking for more topics than exist returns the whole catalog once.

    Args:
        catalog: Topics to draw from. Not modified.
        count: Number of topics wanted.
        rng: Random source. Pass a seeded random.Random for repeatable
            picks; defaults to the module-level generator.

    Returns:
        Between 0 and min(count, len(catalog)) topics.
    """
    if count <= 0:
        return []
    rng = rng if rng is not None else random
    shuffled = list(catalog)
    rng.shuffle(shuffled)
    return shuffled[:count]
