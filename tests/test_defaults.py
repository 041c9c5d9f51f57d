from dataclasses import fields

from cma_analytics.defaults import SmartDefaults, compute_smart_defaults, has_custom_filters


def test_none_subject_has_no_bounds():
    d = compute_smart_defaults(None)
    assert all(getattr(d, f.name) is None for f in fields(SmartDefaults))
    assert d.is_empty()
    assert d.to_dict() == {}


def test_price_bounds():
    d = compute_smart_defaults({"price": 500000})
    assert d.min_price == 400000
    assert d.max_price == 600000


def test_sqft_bounds():
    d = compute_smart_defaults({"livingArea": 2000})
    assert d.min_sqft == 1500
    assert d.max_sqft == 2500


def test_full_subject(subject):
    d = compute_smart_defaults(subject, current_year=2026)
    assert d.to_dict() == {
        "minPrice": 400000,
        "maxPrice": 600000,
        "minSqft": 1500,
        "maxSqft": 2500,
        "minYearBuilt": 1985,
        "maxYearBuilt": 2026,
        "minBeds": 2,
        "maxBeds": 4,
        "minBaths": 1,
        "maxBaths": 4,
        "minLotAcres": 0.13,
        "maxLotAcres": 0.38,
    }


def test_old_or_missing_year_is_ignored():
    assert compute_smart_defaults({"yearBuilt": 1890}).min_year_built is None
    assert compute_smart_defaults({"yearBuilt": None}).max_year_built is None


def test_single_bedroom_floor():
    d = compute_smart_defaults({"bedrooms": 1})
    assert (d.min_beds, d.max_beds) == (1, 2)


def test_list_price_preferred_over_close_price():
    d = compute_smart_defaults({"listPrice": 100000, "closePrice": 900000})
    assert d.min_price == 80000


def test_has_custom_filters_false_for_untouched_defaults(subject):
    current = compute_smart_defaults(subject).to_dict()
    assert has_custom_filters(current, subject) is False


def test_has_custom_filters_detects_change(subject):
    assert has_custom_filters({"minPrice": 350000}, subject) is True
    assert has_custom_filters({"min_sqft": 1400}, subject) is True


def test_has_custom_filters_ignores_baths_and_lot(subject):
    assert has_custom_filters({"minBaths": 3, "maxLotAcres": 9.0}, subject) is False


def test_has_custom_filters_without_subject():
    assert has_custom_filters({"minPrice": 1}, None) is False


def test_has_custom_filters_accepts_dataclass(subject):
    d = compute_smart_defaults(subject)
    d.max_beds = 6
    assert has_custom_filters(d, subject) is True


def test_has_custom_filters_falls_back_to_camel_key(subject):
    assert has_custom_filters({"min_price": None, "minPrice": 350000}, subject) is True
    assert has_custom_filters({"min_price": None, "minPrice": 400000}, subject) is False


def test_bath_bounds_prefer_whole_bath_count():
    d = compute_smart_defaults({"bathroomsTotal": 2.5, "bathroomsTotalInteger": 2})
    assert (d.min_baths, d.max_baths) == (1, 3)
    d = compute_smart_defaults({"bathroomsTotal": 2.5})
    assert (d.min_baths, d.max_baths) == (1, 4)
