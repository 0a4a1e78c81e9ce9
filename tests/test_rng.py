from random import Random

import pytest

from cardduel.core.rng import RNG


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    ints_a = [rng_a.randint(1, 100) for _ in range(5)]
    ints_b = [rng_b.randint(1, 100) for _ in range(5)]
    choices_a = [rng_a.choice(["a", "b", "c"]) for _ in range(5)]
    choices_b = [rng_b.choice(["a", "b", "c"]) for _ in range(5)]

    assert ints_a == ints_b
    assert choices_a == choices_b


def test_rng_shuffle_is_deterministic_permutation() -> None:
    items_a = list(range(10))
    items_b = list(range(10))

    RNG(7).shuffle(items_a)
    RNG(7).shuffle(items_b)

    assert items_a == items_b
    assert sorted(items_a) == list(range(10))


def test_rng_shuffle_handles_short_sequences() -> None:
    empty: list[int] = []
    single = [1]
    RNG(1).shuffle(empty)
    RNG(1).shuffle(single)

    assert empty == []
    assert single == [1]


def test_rng_unseeded_records_no_seed() -> None:
    assert RNG().seed is None
    assert RNG(3).seed == 3


def test_rng_choice_rejects_empty_sequence() -> None:
    with pytest.raises(ValueError):
        RNG(1).choice([])


def test_rng_shuffle_matches_random_shuffle_for_same_seed() -> None:
    ours = list(range(12))
    expected = list(range(12))

    RNG(21).shuffle(ours)
    Random(21).shuffle(expected)

    assert ours == expected
