import pytest

from adapters.probability.sampler import RandomSampler


def test_seeded_sampler_is_reproducible():
    population = list(range(20))

    assert RandomSampler(seed=7).sample(population, 5) == RandomSampler(seed=7).sample(population, 5)


def test_sample_without_replacement_has_unique_members():
    drawn = RandomSampler(seed=1).sample([1, 2, 3, 4, 5], 5)

    assert sorted(drawn) == [1, 2, 3, 4, 5]


def test_sample_larger_than_population_raises():
    with pytest.raises(ValueError):
        RandomSampler().sample([1, 2], 3)


def test_choices_with_replacement():
    drawn = RandomSampler(seed=3).choices([1, 2], 10)

    assert len(drawn) == 10
    assert set(drawn) <= {1, 2}


def test_choices_from_empty_population_raises():
    with pytest.raises(ValueError):
        RandomSampler().choices([], 1)


def test_shuffle_returns_new_list():
    items = [1, 2, 3, 4]

    shuffled = RandomSampler(seed=0).shuffle(items)

    assert items == [1, 2, 3, 4]
    assert sorted(shuffled) == items
