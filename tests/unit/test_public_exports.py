from __future__ import annotations

import registrant_alert_client
import registrant_alert_client.search as search


def test_package_exports_clients_config_and_errors():
    expected = {
        "RegistrantAlertClient",
        "AsyncRegistrantAlertClient",
        "RegistrantAlertClientConfig",
        "RawResponse",
        "RegistrantAlertError",
        "RegistrantAlertArgumentError",
        "RegistrantAlertTransportError",
        "RegistrantAlertParseError",
        "RegistrantAlertStatusError",
        "RegistrantAlertApiError",
    }
    assert expected.issubset(set(registrant_alert_client.__all__))


def test_search_package_exports_models_and_options_only():
    expected = {
        "BasicSearchTerms",
        "AdvancedSearchTerm",
        "Action",
        "DomainItem",
        "RegistrantAlertResponse",
        "response_format",
        "since_date",
        "punycode",
        "created_date_from",
        "created_date_to",
        "updated_date_from",
        "updated_date_to",
        "expired_date_from",
        "expired_date_to",
    }
    assert expected.issubset(set(search.__all__))
    assert "RegistrantAlertService" not in search.__all__
    assert not hasattr(search, "RegistrantAlertService")
    assert not hasattr(search, "AsyncRegistrantAlertService")
