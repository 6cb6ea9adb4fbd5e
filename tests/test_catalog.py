"""Tests for the generated plan catalog."""

from plan_advisor.services.catalog import FEATURE_NAMES, generate_catalog, provider_directory


def test_catalog_has_five_plans_with_unique_ids():
    plans = generate_catalog()
    assert [plan.id for plan in plans] == [1, 2, 3, 4, 5]


def test_every_plan_shares_the_feature_vocabulary():
    for plan in generate_catalog({"coverageType": "premium"}):
        assert list(plan.features) == FEATURE_NAMES
        assert len(plan.benefits) == 5


def test_catalog_ignores_preferences():
    assert generate_catalog({"monthlyBudget": 100}) == generate_catalog(None)


def test_catalog_is_rebuilt_on_every_call():
    first = generate_catalog()
    first[0].monthly_premium_inr = 1.0
    first[0].benefits.append("mutated")
    second = generate_catalog()
    assert second[0].monthly_premium_inr is None
    assert "mutated" not in second[0].benefits


def test_provider_directory_matches_catalog_sources():
    sources = {plan.api_source for plan in generate_catalog()}
    assert {info.id for info in provider_directory()} == sources
