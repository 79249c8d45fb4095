"""
Tests for wire <-> aggregate mapping.
"""

import pytest

from store_admin.domains.store_config.api.schemas import (
    DomainRequest,
    DomainsConfigurationRequest,
    DomainUpdateRequest,
    InstalledAppRequest,
)
from store_admin.domains.store_config.application.mappers import (
    DOMAIN_FIELDS,
    INSTALLED_APP_FIELDS,
    apps_channels_configuration_response,
    domains_configuration_input,
    domains_configuration_response,
    mutation_response,
    payload_of,
    shipping_configuration_input,
    to_internal,
    to_wire,
)
from store_admin.domains.store_config.application.use_cases import MutationResult
from store_admin.domains.store_config.domain.entities import (
    AppsAndChannelsConfiguration,
    DomainsConfiguration,
)


@pytest.mark.unit
class TestFieldRenaming:
    """Tests for to_internal / to_wire."""

    def test_to_internal_renames_known_fields(self):
        result = to_internal({"domain_name": "a.com", "domain_type": "principal", "https": True}, DOMAIN_FIELDS)

        assert result == {"name": "a.com", "kind": "principal", "https": True}

    def test_to_wire_reverses(self):
        result = to_wire({"name": "Shipper", "kind": "shipping", "permissions": ["x"]}, INSTALLED_APP_FIELDS)

        assert result == {"app_name": "Shipper", "app_type": "shipping", "permissions": ["x"]}

    def test_payload_of_drops_unset_fields(self):
        request = DomainUpdateRequest(status="verifying")

        assert payload_of(request) == {"status": "verifying"}
        assert payload_of(None) == {}

    def test_update_request_maps_only_sent_fields(self):
        request = DomainUpdateRequest(status="verifying")

        assert to_internal(request, DOMAIN_FIELDS) == {"connection_state": "verifying"}


@pytest.mark.unit
class TestConfigurationInput:
    """Tests for whole-configuration request mapping."""

    def test_domains_input_maps_nested_items(self):
        request = DomainsConfigurationRequest(
            domains=[
                DomainRequest(domain_name="a.com", domain_type="principal", status="connected", origin="external")
            ],
            principal_domain="a.com",
        )

        data = domains_configuration_input(request)

        assert data["principal_domain"] == "a.com"
        assert data["domains"][0]["name"] == "a.com"
        assert "domain_name" not in data["domains"][0]

    def test_input_builds_a_valid_aggregate(self):
        request = DomainsConfigurationRequest(
            domains=[
                DomainRequest(domain_name="a.com", domain_type="principal", status="connected", origin="external")
            ]
        )

        configuration = DomainsConfiguration.create("store-1", domains_configuration_input(request))

        assert configuration.principal_domain == "a.com"

    def test_shipping_input_from_plain_mapping(self):
        data = shipping_configuration_input(
            {"packagings": [{"packaging_type": "box"}], "delivery_methods": [{"delivery_type": "store_pickup"}]}
        )

        assert data["packagings"] == [{"type": "box"}]
        assert data["delivery_methods"] == [{"type": "store_pickup"}]


@pytest.mark.unit
class TestResponses:
    """Tests for aggregate -> wire responses."""

    def test_domains_response(self, id_factory):
        configuration = DomainsConfiguration.create(
            "store-1",
            {"domains": [{"name": "a.com", "kind": "principal", "connection_state": "connected", "source": "external"}]},
            id_factory=id_factory,
        )

        response = domains_configuration_response(configuration)

        assert response["id"] == "id-1"
        assert response["store_id"] == "store-1"
        assert response["version"] == 0
        assert response["principal_domain"] == "a.com"
        assert response["domains"][0]["domain_name"] == "a.com"
        assert response["domains"][0]["domain_type"] == "principal"
        assert response["domains"][0]["change_history"] == []

    def test_apps_response_summary(self, id_factory):
        configuration = AppsAndChannelsConfiguration.create("store-1", id_factory=id_factory)
        request = InstalledAppRequest(app_name="x", app_type="marketing", permissions=["a"])
        configuration.add_installed_app(to_internal(request, INSTALLED_APP_FIELDS))

        response = apps_channels_configuration_response(configuration)

        assert response["summary"] == {"installed_apps": 1, "active_sales_channels": 0, "development_apps": 0}
        assert response["installed_apps"][0]["app_name"] == "x"

    def test_mutation_response_with_record(self, id_factory):
        configuration = DomainsConfiguration.create("store-1", id_factory=id_factory)
        domain = configuration.add_domain(
            {"name": "b.com", "kind": "secondary", "connection_state": "verifying", "source": "external"}
        )

        response = mutation_response(
            MutationResult(configuration=configuration, result=domain), domains_configuration_response, DOMAIN_FIELDS
        )

        assert response["result"]["domain_name"] == "b.com"
        assert response["configuration"]["domains"][0]["id"] == domain.id

    def test_mutation_response_without_record(self, id_factory):
        configuration = DomainsConfiguration.create("store-1", id_factory=id_factory)

        response = mutation_response(MutationResult(configuration=configuration), domains_configuration_response)

        assert response["result"] is None
