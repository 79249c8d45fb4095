"""
Conversion between wire-level request/response shapes and aggregate input.

Wire names follow the public API (domain_name, app_type, channel_url...),
the aggregates use their own internal names. No business rules live here.
"""

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel

from store_admin.domains.store_config.application.use_cases.base import MutationResult
from store_admin.domains.store_config.domain.entities import (
    AppsAndChannelsConfiguration,
    ConfigurationAggregate,
    DomainsConfiguration,
    PoliciesConfiguration,
    ShippingConfiguration,
)

FieldMap = Mapping[str, str]

# wire name -> internal name; fields missing from a map keep their name

DOMAIN_FIELDS: FieldMap = {
    "domain_name": "name",
    "domain_type": "kind",
    "status": "connection_state",
    "origin": "source",
    "change_history": "history",
}

INSTALLED_APP_FIELDS: FieldMap = {
    "app_name": "name",
    "app_type": "kind",
    "app_version": "version",
    "install_date": "installed_at",
}

SALES_CHANNEL_FIELDS: FieldMap = {
    "channel_name": "name",
    "channel_type": "kind",
    "channel_url": "url",
}

DEVELOPMENT_APP_FIELDS: FieldMap = {
    "app_name": "name",
    "status": "state",
    "developer_email": "responsible",
    "dev_endpoint": "sandbox_endpoint",
    "error_webhook_url": "error_webhook",
    "environment_variables": "env_vars",
    "review_status": "review_state",
    "app_version": "version",
}

UNINSTALLED_APP_FIELDS: FieldMap = {
    "app_name": "name",
    "uninstall_reason": "reason",
    "uninstall_date": "uninstalled_at",
    "previous_data": "snapshot",
}

SHIPPING_PROFILE_FIELDS: FieldMap = {
    "profile_name": "name",
    "shipping_zones": "zones",
    "shipping_rates": "rates",
    "products": "product_ids",
}

DELIVERY_METHOD_FIELDS: FieldMap = {
    "delivery_type": "type",
    "delivery_customization": "customization",
}

PACKAGING_FIELDS: FieldMap = {
    "packaging_type": "type",
}

TRANSPORT_PROVIDER_FIELDS: FieldMap = {
    "provider_account": "account",
}

DOCUMENTATION_TEMPLATE_FIELDS: FieldMap = {}

RETURN_RULE_FIELDS: FieldMap = {
    "rule_type": "type",
}


def payload_of(request: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    """Plain dict with only the fields the caller actually sent."""
    if request is None:
        return {}
    if isinstance(request, BaseModel):
        return request.model_dump(exclude_unset=True)
    return dict(request)


def to_internal(request: BaseModel | Mapping[str, Any] | None, fields: FieldMap) -> dict[str, Any]:
    """Rename wire fields to the names the aggregate expects."""
    return {fields.get(name, name): value for name, value in payload_of(request).items()}


def to_wire(data: Mapping[str, Any], fields: FieldMap) -> dict[str, Any]:
    """Rename internal fields back to their wire names."""
    reverse = {internal: wire for wire, internal in fields.items()}
    return {reverse.get(name, name): value for name, value in data.items()}


def _items_to_internal(items: Any, fields: FieldMap) -> Any:
    if not isinstance(items, list):
        return items
    return [to_internal(item, fields) if isinstance(item, BaseModel | Mapping) else item for item in items]


def _collection_to_wire(records: list[dict[str, Any]], fields: FieldMap) -> list[dict[str, Any]]:
    return [to_wire(record, fields) for record in records]


# ===== REQUEST MAPPERS (wire -> aggregate input) =====


def domains_configuration_input(request: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    data = payload_of(request)
    if "domains" in data:
        data["domains"] = _items_to_internal(data["domains"], DOMAIN_FIELDS)
    return data


def apps_channels_configuration_input(request: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    data = payload_of(request)
    for attr, fields in (
        ("installed_apps", INSTALLED_APP_FIELDS),
        ("sales_channels", SALES_CHANNEL_FIELDS),
        ("development_apps", DEVELOPMENT_APP_FIELDS),
        ("uninstalled_apps", UNINSTALLED_APP_FIELDS),
    ):
        if attr in data:
            data[attr] = _items_to_internal(data[attr], fields)
    return data


def shipping_configuration_input(request: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    data = payload_of(request)
    for attr, fields in (
        ("shipping_profiles", SHIPPING_PROFILE_FIELDS),
        ("delivery_methods", DELIVERY_METHOD_FIELDS),
        ("packagings", PACKAGING_FIELDS),
        ("transport_providers", TRANSPORT_PROVIDER_FIELDS),
        ("documentation_templates", DOCUMENTATION_TEMPLATE_FIELDS),
    ):
        if attr in data:
            data[attr] = _items_to_internal(data[attr], fields)
    return data


def policies_configuration_input(request: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    data = payload_of(request)
    if "return_rules" in data:
        data["return_rules"] = _items_to_internal(data["return_rules"], RETURN_RULE_FIELDS)
    return data


# ===== RESPONSE MAPPERS (aggregate -> wire) =====


def _identity(configuration: ConfigurationAggregate) -> dict[str, Any]:
    return {
        "id": configuration.id,
        "store_id": configuration.store_id,
        "version": configuration.version,
        "created_at": configuration.created_at.isoformat(),
        "updated_at": configuration.updated_at.isoformat(),
    }


def domains_configuration_response(configuration: DomainsConfiguration) -> dict[str, Any]:
    return {
        **_identity(configuration),
        "domains": _collection_to_wire([d.to_dict() for d in configuration.domains], DOMAIN_FIELDS),
        "principal_domain": configuration.principal_domain,
        "global_redirection": configuration.global_redirection,
    }


def apps_channels_configuration_response(configuration: AppsAndChannelsConfiguration) -> dict[str, Any]:
    return {
        **_identity(configuration),
        "installed_apps": _collection_to_wire(
            [app.to_dict() for app in configuration.installed_apps], INSTALLED_APP_FIELDS
        ),
        "sales_channels": _collection_to_wire(
            [channel.to_dict() for channel in configuration.sales_channels], SALES_CHANNEL_FIELDS
        ),
        "development_apps": _collection_to_wire(
            [app.to_dict() for app in configuration.development_apps], DEVELOPMENT_APP_FIELDS
        ),
        "uninstalled_apps": _collection_to_wire(
            [app.to_dict() for app in configuration.uninstalled_apps], UNINSTALLED_APP_FIELDS
        ),
        "summary": {
            "installed_apps": configuration.count_installed_apps(),
            "active_sales_channels": configuration.count_active_sales_channels(),
            "development_apps": configuration.count_development_apps(),
        },
    }


def shipping_configuration_response(configuration: ShippingConfiguration) -> dict[str, Any]:
    default = configuration.default_packaging()
    return {
        **_identity(configuration),
        "shipping_profiles": _collection_to_wire(
            [p.to_dict() for p in configuration.shipping_profiles], SHIPPING_PROFILE_FIELDS
        ),
        "delivery_methods": _collection_to_wire(
            [m.to_dict() for m in configuration.delivery_methods], DELIVERY_METHOD_FIELDS
        ),
        "packagings": _collection_to_wire([p.to_dict() for p in configuration.packagings], PACKAGING_FIELDS),
        "transport_providers": _collection_to_wire(
            [p.to_dict() for p in configuration.transport_providers], TRANSPORT_PROVIDER_FIELDS
        ),
        "documentation_templates": _collection_to_wire(
            [t.to_dict() for t in configuration.documentation_templates], DOCUMENTATION_TEMPLATE_FIELDS
        ),
        "default_packaging_id": default.id if default else None,
    }


def policies_configuration_response(configuration: PoliciesConfiguration) -> dict[str, Any]:
    state = configuration.to_persisted_shape()
    return {
        **_identity(configuration),
        "return_rules_state": state["return_rules_state"],
        "return_rules": _collection_to_wire(state["return_rules"], RETURN_RULE_FIELDS),
        "privacy_policy": state["privacy_policy"],
        "terms_of_service": state["terms_of_service"],
        "shipping_policy": state["shipping_policy"],
        "contact_info": state["contact_info"],
        "final_sale_product_ids": state["final_sale_product_ids"],
    }


def record_response(record: Any, fields: FieldMap) -> dict[str, Any]:
    """Wire representation of a single sub-entity."""
    return to_wire(record.to_dict(), fields)


def mutation_response(
    outcome: MutationResult,
    configuration_response: Callable[[Any], dict[str, Any]],
    fields: FieldMap | None = None,
) -> dict[str, Any]:
    """Wire form of a MutationResult: the configuration plus the touched record, if any."""
    record = outcome.result
    return {
        "configuration": configuration_response(outcome.configuration),
        "result": record_response(record, fields) if fields is not None and record is not None else None,
    }
