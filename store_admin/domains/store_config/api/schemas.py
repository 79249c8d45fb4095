"""
Store Configuration API Schemas

Pydantic schemas for request shape validation. Business rules
(uniqueness, URL/email validity, cross-field checks) are enforced by
the aggregates, so these schemas only describe the wire format.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from store_admin.domains.store_config.domain.value_objects import (
    AppKind,
    ChannelKind,
    ConnectionState,
    DeliveryType,
    DevelopmentAppState,
    DomainKind,
    DomainSource,
    PackagingType,
    RateType,
    ReturnRulesState,
    ReturnRuleType,
    ReviewState,
)

# ============================================================================
# Shared
# ============================================================================


class ActiveRequest(BaseModel):
    """Toggle request for anything with an active flag."""

    active: bool


class MutationResponse(BaseModel):
    """Updated configuration plus the sub-entity the operation touched."""

    configuration: dict[str, Any]
    result: dict[str, Any] | None = None


# ============================================================================
# Domains
# ============================================================================


class DomainRequest(BaseModel):
    """Domain to add to the store."""

    domain_name: str = Field(..., max_length=253, description="Hostname, e.g. shop.example.com")
    domain_type: DomainKind
    status: ConnectionState
    origin: DomainSource
    connected_at: datetime | None = None
    redirection: bool = False
    purchased: bool = False
    subdomain: str | None = None
    ssl_active: bool = False
    https: bool = False


class DomainUpdateRequest(BaseModel):
    """Partial domain update; only the sent fields are applied."""

    domain_name: str | None = Field(default=None, max_length=253)
    domain_type: DomainKind | None = None
    status: ConnectionState | None = None
    origin: DomainSource | None = None
    connected_at: datetime | None = None
    redirection: bool | None = None
    purchased: bool | None = None
    subdomain: str | None = None
    ssl_active: bool | None = None
    https: bool | None = None


class DomainsConfigurationRequest(BaseModel):
    """Initial domains configuration, also used to replace the whole collection."""

    domains: list[DomainRequest] = Field(default_factory=list)
    principal_domain: str | None = None
    global_redirection: bool = False


class PrincipalDomainRequest(BaseModel):
    domain_name: str


class GlobalRedirectionRequest(BaseModel):
    enabled: bool


class DomainHistoryRequest(BaseModel):
    change_type: str = Field(..., min_length=1, max_length=100)
    responsible: str = Field(..., min_length=1, max_length=200)
    details: str | None = None


# ============================================================================
# Apps and sales channels
# ============================================================================


class InstalledAppRequest(BaseModel):
    """App to install in the store."""

    app_name: str
    app_type: AppKind
    permissions: list[str]
    installed: bool = True
    app_version: str | None = None
    access_token: str | None = None
    config_url: str | None = None


class InstalledAppUpdateRequest(BaseModel):
    app_name: str | None = None
    app_type: AppKind | None = None
    permissions: list[str] | None = None
    installed: bool | None = None
    app_version: str | None = None
    access_token: str | None = None
    config_url: str | None = None


class UninstallAppRequest(BaseModel):
    uninstall_reason: str = Field(..., min_length=1, max_length=500)


class SalesChannelRequest(BaseModel):
    """Sales channel; `configuration` is stored as-is."""

    channel_name: str
    channel_type: ChannelKind
    channel_url: str | None = None
    active: bool = True
    configuration: dict[str, Any] = Field(default_factory=dict)


class SalesChannelUpdateRequest(BaseModel):
    channel_name: str | None = None
    channel_type: ChannelKind | None = None
    channel_url: str | None = None
    active: bool | None = None
    configuration: dict[str, Any] | None = None


class DevelopmentAppRequest(BaseModel):
    """App under development for the store."""

    app_name: str
    status: DevelopmentAppState
    dev_token: str
    developer_email: str
    scopes: list[str]
    app_version: str | None = None
    sandbox: bool = False
    dev_endpoint: str | None = None
    error_webhook_url: str | None = None
    environment_variables: dict[str, Any] = Field(default_factory=dict)


class DevelopmentAppUpdateRequest(BaseModel):
    app_name: str | None = None
    status: DevelopmentAppState | None = None
    dev_token: str | None = None
    developer_email: str | None = None
    scopes: list[str] | None = None
    app_version: str | None = None
    sandbox: bool | None = None
    dev_endpoint: str | None = None
    error_webhook_url: str | None = None
    environment_variables: dict[str, Any] | None = None
    review_status: ReviewState | None = None
    review_notes: str | None = None
    published_at: datetime | None = None


class UninstalledAppRequest(BaseModel):
    app_name: str
    uninstall_reason: str
    uninstall_date: datetime | None = None
    previous_data: dict[str, Any] = Field(default_factory=dict)


class UninstalledAppUpdateRequest(BaseModel):
    app_name: str | None = None
    uninstall_reason: str | None = None
    uninstall_date: datetime | None = None
    previous_data: dict[str, Any] | None = None


class AppsChannelsConfigurationRequest(BaseModel):
    installed_apps: list[InstalledAppRequest] = Field(default_factory=list)
    sales_channels: list[SalesChannelRequest] = Field(default_factory=list)
    development_apps: list[DevelopmentAppRequest] = Field(default_factory=list)
    uninstalled_apps: list[UninstalledAppRequest] = Field(default_factory=list)


# ============================================================================
# Shipping
# ============================================================================


class ShippingZoneSchema(BaseModel):
    country: str
    region: str | None = None
    postal_codes: list[str] = Field(default_factory=list)


class ShippingRateSchema(BaseModel):
    type: RateType
    amount: float | None = None
    conditions: dict[str, Any] = Field(default_factory=dict)


class ShippingProfileRequest(BaseModel):
    profile_name: str
    shipping_zones: list[ShippingZoneSchema]
    shipping_rates: list[ShippingRateSchema]
    products: list[str] = Field(default_factory=list)


class ShippingProfileUpdateRequest(BaseModel):
    profile_name: str | None = None
    shipping_zones: list[ShippingZoneSchema] | None = None
    shipping_rates: list[ShippingRateSchema] | None = None
    products: list[str] | None = None


class DeliveryMethodRequest(BaseModel):
    delivery_type: DeliveryType
    active: bool = True
    delivery_customization: dict[str, Any] = Field(default_factory=dict)


class DeliveryMethodUpdateRequest(BaseModel):
    active: bool | None = None
    delivery_customization: dict[str, Any] | None = None


class DimensionsSchema(BaseModel):
    length: float
    width: float
    height: float


class PackagingRequest(BaseModel):
    packaging_type: PackagingType
    dimensions: DimensionsSchema
    weight: float
    is_default: bool = False


class PackagingUpdateRequest(BaseModel):
    packaging_type: PackagingType | None = None
    dimensions: DimensionsSchema | None = None
    weight: float | None = None
    is_default: bool | None = None


class TransportProviderRequest(BaseModel):
    provider_name: str
    provider_account: str
    active: bool = True
    api_url: str | None = None
    api_key: str | None = None


class TransportProviderUpdateRequest(BaseModel):
    provider_name: str | None = None
    provider_account: str | None = None
    active: bool | None = None
    api_url: str | None = None
    api_key: str | None = None


class DocumentationTemplateRequest(BaseModel):
    delivery_note_template: str | None = None
    label_store_name: str | None = None


class ShippingConfigurationRequest(BaseModel):
    shipping_profiles: list[ShippingProfileRequest] = Field(default_factory=list)
    delivery_methods: list[DeliveryMethodRequest] = Field(default_factory=list)
    packagings: list[PackagingRequest] = Field(default_factory=list)
    transport_providers: list[TransportProviderRequest] = Field(default_factory=list)
    documentation_templates: list[DocumentationTemplateRequest] = Field(default_factory=list)


# ============================================================================
# Policies
# ============================================================================


class ReturnRuleRequest(BaseModel):
    rule_type: ReturnRuleType
    condition: str
    value: float | None = None
    description: str | None = None
    active: bool = True


class ReturnRuleUpdateRequest(BaseModel):
    rule_type: ReturnRuleType | None = None
    condition: str | None = None
    value: float | None = None
    description: str | None = None
    active: bool | None = None


class PolicyDocumentSchema(BaseModel):
    title: str
    content: str
    updated_on: datetime
    active: bool = True


class ContactInfoSchema(BaseModel):
    email: str
    phone: str | None = None
    address: str | None = None
    business_hours: str | None = None


class PoliciesConfigurationRequest(BaseModel):
    """
    Policies input.

    On creation absent sections take their defaults; on PATCH only the
    sent sections are validated and applied.
    """

    return_rules_state: ReturnRulesState | None = None
    return_rules: list[ReturnRuleRequest] | None = None
    privacy_policy: PolicyDocumentSchema | None = None
    terms_of_service: PolicyDocumentSchema | None = None
    shipping_policy: PolicyDocumentSchema | None = None
    contact_info: ContactInfoSchema | None = None
    final_sale_product_ids: list[str] | None = None


class FinalSaleProductRequest(BaseModel):
    product_id: str
