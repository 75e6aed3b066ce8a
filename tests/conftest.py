import random
from typing import Sequence, TypeVar

import pytest

from pro_mode_prompting.dto.concept import ConceptComponents

T = TypeVar("T")

SCENARIO_A_DESCRIPTION = (
    "Christmas morning scene, wearing a red Ganni sweater, cream wide-leg trousers, and white "
    "sneakers, sitting on a leather sofa in an industrial loft with exposed brick walls, a "
    "minimalist Christmas tree with string lights, warm contrast lighting."
)

SCENARIO_C_DESCRIPTION = (
    "Relaxed afternoon in a sunlit coffee shop, sipping an iced latte by the window, "
    "soft natural light."
)


class FixedChoiceRandom(random.Random):
    """Always picks the same candidate index and returns a fixed ``random()`` value."""

    def __init__(self, index: int = 0, value: float = 0.0) -> None:
        super().__init__(0)
        self.index = index
        self.value = value

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.index % len(seq)]

    def random(self) -> float:
        return self.value


@pytest.fixture
def scenario_a_concept() -> ConceptComponents:
    return ConceptComponents(
        title="Cozy Christmas Loft",
        description=SCENARIO_A_DESCRIPTION,
        category="SEASONAL_CHRISTMAS",
    )


@pytest.fixture
def scenario_c_concept() -> ConceptComponents:
    return ConceptComponents(
        title="Afternoon Coffee",
        description=SCENARIO_C_DESCRIPTION,
        category="LIFESTYLE",
    )


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)
