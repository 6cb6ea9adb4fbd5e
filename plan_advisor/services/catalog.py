"""Mock health insurance catalog modelled on offerings in India."""

from __future__ import annotations

from typing import List, Optional

from ..models import Plan, Preferences, ProviderInfo


FEATURE_NAMES: List[str] = [
    "Hospital Room",
    "Pre-existing Conditions",
    "Annual Health Checkup",
    "Maternity Coverage",
    "Dental Coverage",
    "Vision Coverage",
    "Mental Health Coverage",
    "Prescription Drugs",
    "Network Hospitals",
    "Claim Settlement Ratio",
]


def _features(*values: str) -> dict:
    return dict(zip(FEATURE_NAMES, values))


def generate_catalog(preferences: Optional[Preferences] = None) -> List[Plan]:
    """Return a freshly built list of plans.

    ``preferences`` is accepted for parity with a real provider query but
    does not filter anything yet.
    """

    return [
        Plan(
            id=1,
            name="Premium Health Plus",
            provider="HDFC ERGO Health Insurance",
            monthly_premium=2999,
            coverage=500_000,
            benefits=[
                "Comprehensive hospital coverage",
                "No waiting period for accidents",
                "Covers pre-existing conditions after 2 years",
                "Free annual health checkup",
                "24/7 telemedicine support",
            ],
            features=_features(
                "Private Room",
                "Covered after 2 years",
                "Free",
                "Included",
                "Included",
                "Included",
                "Full Coverage",
                "Full Coverage",
                "5000+",
                "98%",
            ),
            rating=4.8,
            api_source="hdfc",
        ),
        Plan(
            id=2,
            name="Care Health Shield",
            provider="Care Health Insurance",
            monthly_premium=1999,
            coverage=300_000,
            benefits=[
                "Basic hospital coverage",
                "3 months waiting period for accidents",
                "Covers pre-existing conditions after 3 years",
                "Discounted health checkups",
                "Emergency helpline",
            ],
            features=_features(
                "Semi-Private Room",
                "Covered after 3 years",
                "Discounted",
                "Additional Cost",
                "Basic Coverage",
                "Basic Coverage",
                "Partial Coverage",
                "Generic Only",
                "3000+",
                "95%",
            ),
            rating=4.5,
            api_source="care",
        ),
        Plan(
            id=3,
            name="Bajaj Allianz Health Guard",
            provider="Bajaj Allianz General Insurance",
            monthly_premium=1499,
            coverage=200_000,
            benefits=[
                "Essential hospital coverage",
                "6 months waiting period for accidents",
                "Covers pre-existing conditions after 4 years",
                "Basic health checkup",
                "Customer support during business hours",
            ],
            features=_features(
                "General Ward",
                "Covered after 4 years",
                "Basic",
                "Not Included",
                "Not Included",
                "Not Included",
                "Emergency Only",
                "Limited Coverage",
                "2000+",
                "92%",
            ),
            rating=4.2,
            api_source="bajaj",
        ),
        Plan(
            id=4,
            name="ICICI Lombard Complete Health",
            provider="ICICI Lombard General Insurance",
            monthly_premium=2499,
            coverage=400_000,
            benefits=[
                "Comprehensive hospital coverage",
                "No waiting period for accidents",
                "Covers pre-existing conditions after 2.5 years",
                "Annual health checkup included",
                "24/7 customer support",
            ],
            features=_features(
                "Private Room",
                "Covered after 2.5 years",
                "Included",
                "Included with sub-limits",
                "Partial Coverage",
                "Partial Coverage",
                "Included",
                "Covered with limits",
                "4500+",
                "96%",
            ),
            rating=4.6,
            api_source="icici",
        ),
        Plan(
            id=5,
            name="Go Digit Health Insurance",
            provider="Go Digit General Insurance",
            monthly_premium=1799,
            coverage=250_000,
            benefits=[
                "Digital-first health insurance",
                "2 months waiting period for accidents",
                "Covers pre-existing conditions after 3 years",
                "Digital health checkup vouchers",
                "App-based claim processing",
            ],
            features=_features(
                "Semi-Private Room",
                "Covered after 3 years",
                "Digital Vouchers",
                "Optional Add-on",
                "Optional Add-on",
                "Optional Add-on",
                "Basic Coverage",
                "Partial Coverage",
                "3500+",
                "94%",
            ),
            rating=4.4,
            api_source="goDigit",
        ),
    ]


def provider_directory() -> List[ProviderInfo]:
    return [
        ProviderInfo(id="hdfc", name="HDFC ERGO Health Insurance", logo="hdfc-logo.png"),
        ProviderInfo(id="care", name="Care Health Insurance", logo="care-logo.png"),
        ProviderInfo(id="bajaj", name="Bajaj Allianz General Insurance", logo="bajaj-logo.png"),
        ProviderInfo(id="icici", name="ICICI Lombard General Insurance", logo="icici-logo.png"),
        ProviderInfo(id="goDigit", name="Go Digit General Insurance", logo="godigit-logo.png"),
    ]
