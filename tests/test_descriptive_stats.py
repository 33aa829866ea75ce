import pytest

from adapters.statistics.descriptive import mean, std_dev, summarize, variance


def test_mean_of_three_readings():
    assert mean([3.5, 7.1, 5.6]) == pytest.approx(5.4)


def test_population_and_sample_variance():
    data = [2, 4, 4, 4, 5, 5, 7, 9]

    assert variance(data) == pytest.approx(4.0)
    assert std_dev(data) == pytest.approx(2.0)
    assert variance(data, sample=True) == pytest.approx(32 / 7)


def test_summarize():
    summary = summarize([1, 2, 3])

    assert summary.count == 3
    assert summary.mean == 2.0
    assert summary.variance == pytest.approx(2 / 3)
    assert (summary.minimum, summary.maximum) == (1.0, 3.0)
    assert summary.sample is False


def test_empty_data_raises():
    with pytest.raises(ValueError):
        mean([])
    with pytest.raises(ValueError):
        summarize([5.0], sample=True)
