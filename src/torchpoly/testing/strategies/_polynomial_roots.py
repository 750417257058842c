import hypothesis.strategies


def integer_roots(
    min_value: int = -5,
    max_value: int = 5,
    min_size: int = 1,
    max_size: int = 6,
) -> hypothesis.strategies.SearchStrategy[list[float]]:
    """Strategy for root multisets of small integers, repeats allowed."""
    return hypothesis.strategies.lists(
        hypothesis.strategies.integers(min_value=min_value, max_value=max_value),
        min_size=min_size,
        max_size=max_size,
    ).map(lambda roots: [float(r) for r in roots])


@hypothesis.strategies.composite
def separated_roots(
    draw: hypothesis.strategies.DrawFn,
    min_size: int = 1,
    max_size: int = 6,
    span: int = 40,
    spacing: float = 0.25,
) -> list[float]:
    """Strategy for distinct roots on a grid, pairwise at least ``spacing``
    apart.

    Roots are drawn as distinct integers in ``[-span, span]`` scaled by
    ``spacing``, so polynomials built from them are square-free and well
    conditioned.
    """
    ticks = draw(
        hypothesis.strategies.lists(
            hypothesis.strategies.integers(min_value=-span, max_value=span),
            min_size=min_size,
            max_size=max_size,
            unique=True,
        )
    )
    return sorted(t * spacing for t in ticks)
