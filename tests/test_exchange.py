"""Tests for business/consumer classification and exemption."""

import pytest

from salestax.tax_calculation import (
    AreaClassifier,
    ExchangeClassifier,
    RateResolver,
    ReferenceDataRepository,
    TaxExchange,
)


def _classifier(origin="DE", repository=None):
    repository = repository or ReferenceDataRepository()
    return ExchangeClassifier(
        AreaClassifier(repository),
        RateResolver(repository),
        origin_country_code=origin,
    )


class TestHasTotalSalesTax:
    """Test cases for the combined country and state check."""

    @pytest.mark.parametrize("country, state, expected", [
        ("DE", None, True),
        ("US", "NY", True),
        ("US", None, False),
        ("US", "OR", False),
        ("US", "ZZ", False),
        ("??", None, False),
    ])
    def test_bundled(self, country, state, expected):
        assert _classifier(origin=None).has_total_sales_tax(country, state) is expected

    def test_state_only_tax(self, sample_rates):
        classifier = _classifier(repository=ReferenceDataRepository(rate_data=sample_rates))
        assert classifier.has_total_sales_tax("DD", "YY") is True
        assert classifier.has_total_sales_tax("DD", None) is False


class TestExchangeClassifier:
    """Test cases for exchange status from a German origin."""

    @pytest.mark.parametrize("country, tax_number, expected_exchange, expected_exempt", [
        ("DE", None, TaxExchange.CONSUMER, False),
        ("DE", "DE000000000", TaxExchange.BUSINESS, False),
        ("FR", "FR000000000", TaxExchange.BUSINESS, True),
        ("FR", None, TaxExchange.CONSUMER, False),
        ("US", "0123456789", TaxExchange.CONSUMER, True),
        ("??", None, TaxExchange.CONSUMER, True),
    ])
    def test_classify(self, country, tax_number, expected_exchange, expected_exempt):
        exchange, exempt = _classifier().classify(country, None, tax_number)
        assert exchange == expected_exchange
        assert exempt is expected_exempt

    def test_worldwide_business_with_state_tax(self):
        exchange, exempt = _classifier().classify("US", "NY", "0123456789")
        assert exchange == TaxExchange.BUSINESS
        assert exempt is True

    def test_empty_tax_number_is_consumer(self):
        assert _classifier().classify("FR", None, "") == (TaxExchange.CONSUMER, False)

    def test_no_origin_business_is_exempt(self):
        assert _classifier(origin=None).classify("DE", None, "DE000000000") == (TaxExchange.BUSINESS, True)
