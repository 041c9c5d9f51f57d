import math
import random

from cma_analytics.statistics import compute_statistics, properties_frame, summarize


def test_end_to_end_three_comps(three_comps):
    stats = compute_statistics(three_comps)
    assert stats.price.average == 400000
    assert stats.price.median == 400000
    assert stats.price.min == 300000
    assert stats.price.max == 500000
    assert stats.price_per_sqft.average == 200
    assert stats.price_per_sqft.median == 200
    assert stats.living_area.average == 2000


def test_empty_input_is_all_zero():
    stats = compute_statistics([])
    d = stats.to_dict()
    for key in ("price", "pricePerSqFt", "livingArea", "daysOnMarket", "bedrooms", "bathrooms"):
        assert d[key]["average"] == 0
        assert d[key]["median"] == 0
        assert d[key]["range"] == {"min": 0, "max": 0}
        assert d[key]["count"] == 0


def test_missing_or_non_positive_living_area_is_excluded():
    props = [
        {"listPrice": 300000, "livingArea": 1500},
        {"listPrice": 900000, "livingArea": 0},
        {"listPrice": 800000},
        {"listPrice": 700000, "livingArea": -10},
    ]
    stats = compute_statistics(props)
    assert stats.living_area.count == 1
    assert stats.living_area.average == 1500
    assert stats.price_per_sqft.count == 1
    assert stats.price_per_sqft.average == 200
    # price still counts every property with a price
    assert stats.price.count == 4


def test_dirty_values_are_filtered_not_zeroed():
    props = [
        {"closePrice": "$450,000", "daysOnMarket": 10, "bedrooms": 3},
        {"closePrice": "n/a", "daysOnMarket": 0, "beds": "4"},
        {"closePrice": None, "daysOnMarket": None, "bedrooms": -1},
        {"closePrice": True, "dom": "20"},
    ]
    stats = compute_statistics(props)
    assert stats.price.count == 1
    assert stats.price.average == 450000
    assert stats.days_on_market.average == 15
    assert stats.bedrooms.average == 3.5


def test_price_field_priority():
    frame = properties_frame([{"soldPrice": 410000, "closePrice": 1, "listPrice": 999999}])
    assert frame.loc[0, "price"] == 410000


def test_mean_and_median_match_definition():
    values = [120.0, 80.0, 100.0, 300.0]
    s = summarize(values)
    assert s.average == sum(values) / len(values)
    assert s.median == (100.0 + 120.0) / 2
    assert (s.min, s.max) == (80.0, 300.0)


def test_median_is_order_independent():
    props = [{"listPrice": p} for p in (250000, 410000, 330000, 520000, 199000, 610000)]
    expected = compute_statistics(props).price.median
    rng = random.Random(7)
    for _ in range(5):
        shuffled = props[:]
        rng.shuffle(shuffled)
        assert compute_statistics(shuffled).price.median == expected


def test_bathroom_synonyms():
    props = [{"bathroomsTotal": 2}, {"bathroomsTotalInteger": 3}, {"baths": 1}]
    assert compute_statistics(props).bathrooms.average == 2


def test_frame_marks_absent_values_as_nan():
    frame = properties_frame([{"listingId": "X", "listPrice": 0, "standardStatus": "Active"}, None])
    assert len(frame) == 1
    assert math.isnan(frame.loc[0, "price"])
    assert frame.loc[0, "status"] == "ACTIVE"
    assert frame.loc[0, "id"] == "X"
