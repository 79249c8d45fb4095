"""
Tests for the DomainsConfiguration aggregate.
"""

from datetime import UTC, datetime

import pytest

from store_admin.core.domain import (
    DuplicateEntityException,
    EntityNotFoundException,
    ErrorKind,
    InvalidValueException,
    MissingValueException,
)
from store_admin.domains.store_config.domain.entities import DomainsConfiguration
from store_admin.domains.store_config.domain.value_objects import ConnectionState, DomainKind


CREATED_AT = datetime(2024, 1, 1, tzinfo=UTC)


def domain_data(name: str, kind: str = "secondary", **overrides) -> dict:
    return {
        "name": name,
        "kind": kind,
        "connection_state": "connected",
        "source": "external",
        **overrides,
    }


# ===== FIXTURES =====


@pytest.fixture
def configuration(id_factory) -> DomainsConfiguration:
    """Configuration with a single principal domain a.com, redirection off."""
    return DomainsConfiguration.create(
        "store-1",
        {"domains": [domain_data("a.com", "principal")]},
        id_factory=id_factory,
    )


# ===== CREATION =====


@pytest.mark.unit
class TestCreate:
    """Tests for DomainsConfiguration.create."""

    def test_empty_configuration(self, id_factory):
        configuration = DomainsConfiguration.create("store-1", id_factory=id_factory)

        assert configuration.id == "id-1"
        assert configuration.store_id == "store-1"
        assert configuration.domains == []
        assert configuration.principal_domain is None
        assert configuration.global_redirection is False
        assert configuration.version == 0

    def test_principal_is_derived_from_kind(self, configuration):
        assert configuration.principal_domain == "a.com"
        assert configuration.domains[0].kind == DomainKind.PRINCIPAL

    def test_connected_at_defaults_to_creation_time(self, configuration):
        assert configuration.domains[0].connected_at == configuration.created_at

    def test_blank_store_id_is_missing(self):
        with pytest.raises(MissingValueException):
            DomainsConfiguration.create("  ")

    def test_duplicate_names_are_rejected(self):
        with pytest.raises(DuplicateEntityException):
            DomainsConfiguration.create("store-1", {"domains": [domain_data("a.com"), domain_data("A.COM")]})

    def test_principal_domain_must_be_listed(self):
        with pytest.raises(InvalidValueException) as exc_info:
            DomainsConfiguration.create(
                "store-1", {"domains": [domain_data("a.com")], "principal_domain": "b.com"}
            )

        assert exc_info.value.code == "DOMAINS.INVALID_PRINCIPAL"

    def test_principal_domain_promotes_named_domain(self):
        configuration = DomainsConfiguration.create(
            "store-1", {"domains": [domain_data("a.com")], "principal_domain": "A.com"}
        )

        assert configuration.principal_domain == "a.com"
        assert configuration.domains[0].kind == DomainKind.PRINCIPAL

    def test_redirection_requires_principal(self):
        with pytest.raises(InvalidValueException) as exc_info:
            DomainsConfiguration.create("store-1", {"domains": [domain_data("a.com")], "global_redirection": True})

        assert exc_info.value.code == "DOMAINS.PRINCIPAL_REQUIRED"

    def test_invalid_hostname(self):
        with pytest.raises(InvalidValueException) as exc_info:
            DomainsConfiguration.create("store-1", {"domains": [domain_data("not a host")]})

        assert exc_info.value.field == "name"

    def test_principal_with_https_needs_ssl(self):
        with pytest.raises(InvalidValueException) as exc_info:
            DomainsConfiguration.create(
                "store-1", {"domains": [domain_data("a.com", "principal", https=True, ssl_active=False)]}
            )

        assert exc_info.value.code == "DOMAINS.SSL_REQUIRED"


# ===== MUTATIONS =====


@pytest.mark.unit
class TestDomainScenario:
    """Duplicate detection, redirection and principal removal in sequence."""

    def test_full_scenario(self, configuration):
        with pytest.raises(DuplicateEntityException) as exc_info:
            configuration.add_domain(domain_data("A.com"))
        assert exc_info.value.kind == ErrorKind.DUPLICATE

        configuration.toggle_global_redirection(True)
        assert configuration.global_redirection is True

        with pytest.raises(InvalidValueException) as exc_info:
            configuration.remove_domain("a.com")
        assert exc_info.value.code == "DOMAINS.PRINCIPAL_IN_USE"
        assert configuration.count_domains() == 1

    def test_principal_can_be_removed_without_redirection(self, configuration):
        removed = configuration.remove_domain("A.COM")

        assert removed.name == "a.com"
        assert configuration.domains == []
        assert configuration.principal_domain is None


@pytest.mark.unit
class TestMutations:
    """Tests for the domain mutations."""

    def test_add_domain_uses_id_factory(self, configuration):
        domain = configuration.add_domain(domain_data("b.com"))

        assert domain.id == "id-3"
        assert configuration.count_domains() == 2

    def test_failed_add_leaves_state_untouched(self, configuration):
        before = configuration.to_persisted_shape()

        with pytest.raises(InvalidValueException):
            configuration.add_domain(domain_data("b.com", "principal"))

        assert configuration.to_persisted_shape() == before

    def test_subdomain_must_belong_to_principal(self, configuration):
        configuration.add_domain(domain_data("shop.a.com", "subdomain"))

        with pytest.raises(InvalidValueException) as exc_info:
            configuration.add_domain(domain_data("shop.b.com", "subdomain"))

        assert exc_info.value.code == "DOMAINS.INVALID_SUBDOMAIN"

    def test_update_domain_merges_patch(self, configuration):
        updated = configuration.update_domain("a.com", {"connection_state": "verifying", "ssl_active": True})

        assert updated.connection_state == ConnectionState.VERIFYING
        assert updated.ssl_active is True
        assert updated.source == configuration.domains[0].source

    def test_renaming_principal_moves_reference(self, configuration):
        configuration.update_domain("a.com", {"name": "new.com"})

        assert configuration.principal_domain == "new.com"

    def test_rename_to_existing_name_is_duplicate(self, configuration):
        configuration.add_domain(domain_data("b.com"))

        with pytest.raises(DuplicateEntityException):
            configuration.update_domain("b.com", {"name": "A.com"})

    def test_update_unknown_domain(self, configuration):
        with pytest.raises(EntityNotFoundException) as exc_info:
            configuration.update_domain("zzz.com", {"https": True})

        assert exc_info.value.code == "DOMAINS.DOMAIN_NOT_FOUND"

    def test_set_principal_demotes_previous(self, configuration):
        configuration.add_domain(domain_data("b.com"))

        promoted = configuration.set_principal_domain("b.com")

        assert promoted.kind == DomainKind.PRINCIPAL
        assert configuration.principal_domain == "b.com"
        assert configuration.get_domain("a.com").kind == DomainKind.SECONDARY

    def test_toggle_redirection_without_principal(self, id_factory):
        configuration = DomainsConfiguration.create("store-1", id_factory=id_factory)

        with pytest.raises(InvalidValueException):
            configuration.toggle_global_redirection(True)

    def test_add_domain_history(self, configuration):
        domain = configuration.add_domain_history("a.com", "ssl_renewal", "ops@example.com", "renewed")

        assert len(domain.history) == 1
        assert domain.history[0].change_type == "ssl_renewal"
        assert domain.history[0].details == "renewed"

    def test_add_domain_history_requires_responsible(self, configuration):
        with pytest.raises(MissingValueException):
            configuration.add_domain_history("a.com", "ssl_renewal", " ")

    def test_replace_domains_validates_whole_collection(self, configuration):
        with pytest.raises(DuplicateEntityException):
            configuration.replace_domains([domain_data("x.com"), domain_data("X.com")])

        assert configuration.principal_domain == "a.com"

    def test_replace_domains(self, configuration):
        configuration.replace_domains(
            [domain_data("x.com"), domain_data("y.com")], principal_domain="y.com", global_redirection=True
        )

        assert [d.name for d in configuration.domains] == ["x.com", "y.com"]
        assert configuration.principal_domain == "y.com"
        assert configuration.global_redirection is True


@pytest.fixture
def redirecting(id_factory) -> DomainsConfiguration:
    """a.com principal plus b.com, with global redirection on."""
    return DomainsConfiguration.create(
        "store-1",
        {"domains": [domain_data("a.com", "principal"), domain_data("b.com")], "global_redirection": True},
        id_factory=id_factory,
    )


@pytest.mark.unit
class TestReplaceDomains:
    """Whole-collection replacement keeps the principal and redirection rules."""

    def test_cannot_drop_principal_while_redirecting(self, redirecting):
        before = redirecting.to_persisted_shape()

        with pytest.raises(InvalidValueException) as exc_info:
            redirecting.replace_domains(
                [domain_data("b.com", "principal")], principal_domain="b.com", global_redirection=True
            )

        assert exc_info.value.code == "DOMAINS.PRINCIPAL_IN_USE"
        assert redirecting.to_persisted_shape() == before

    def test_principal_may_change_kind_while_redirecting(self, redirecting):
        redirecting.replace_domains([domain_data("A.com", "principal"), domain_data("c.com")])

        assert [d.name for d in redirecting.domains] == ["A.com", "c.com"]
        assert redirecting.global_redirection is True

    def test_omitted_redirection_keeps_current_value(self, redirecting):
        redirecting.replace_domains([domain_data("a.com", "principal")])

        assert redirecting.global_redirection is True

    def test_principal_can_be_dropped_once_redirection_is_off(self, redirecting):
        redirecting.replace_domains([domain_data("b.com", "principal")], global_redirection=False)

        assert redirecting.principal_domain == "b.com"
        assert redirecting.global_redirection is False


@pytest.mark.unit
class TestSubdomainsFollowPrincipal:
    """Every subdomain is re-checked against the principal after each mutation."""

    @pytest.fixture
    def with_subdomain(self, configuration) -> DomainsConfiguration:
        configuration.add_domain(domain_data("shop.a.com", "subdomain"))
        configuration.add_domain(domain_data("b.com"))
        return configuration

    def test_principal_change_cannot_orphan_subdomain(self, with_subdomain):
        before = with_subdomain.to_persisted_shape()

        with pytest.raises(InvalidValueException) as exc_info:
            with_subdomain.set_principal_domain("b.com")

        assert exc_info.value.code == "DOMAINS.INVALID_SUBDOMAIN"
        assert with_subdomain.to_persisted_shape() == before

    def test_principal_removal_cannot_orphan_subdomain(self, with_subdomain):
        with pytest.raises(InvalidValueException) as exc_info:
            with_subdomain.remove_domain("a.com")

        assert exc_info.value.code == "DOMAINS.INVALID_SUBDOMAIN"
        assert with_subdomain.principal_domain == "a.com"

    def test_principal_change_after_subdomain_removal(self, with_subdomain):
        with_subdomain.remove_domain("shop.a.com")

        with_subdomain.set_principal_domain("b.com")
        with_subdomain.remove_domain("a.com")

        assert with_subdomain.principal_domain == "b.com"
        assert [d.name for d in with_subdomain.domains] == ["b.com"]


@pytest.mark.unit
class TestUpdatedAt:
    """Successful mutations refresh updated_at; rejected ones leave it alone."""

    @pytest.fixture
    def created_earlier(self, id_factory) -> DomainsConfiguration:
        return DomainsConfiguration.create(
            "store-1", {"domains": [domain_data("a.com", "principal")]}, id_factory=id_factory, now=CREATED_AT
        )

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda c: c.add_domain(domain_data("b.com")),
            lambda c: c.update_domain("a.com", {"ssl_active": True}),
            lambda c: c.toggle_global_redirection(True),
            lambda c: c.add_domain_history("a.com", "connection", "ops@example.com"),
            lambda c: c.replace_domains([domain_data("x.com", "principal")]),
            lambda c: c.remove_domain("a.com"),
        ],
    )
    def test_success_refreshes_updated_at(self, created_earlier, mutate):
        mutate(created_earlier)

        assert created_earlier.updated_at > CREATED_AT
        assert created_earlier.created_at == CREATED_AT

    def test_set_principal_refreshes_updated_at(self, created_earlier):
        created_earlier.add_domain(domain_data("b.com"))
        created_earlier.updated_at = CREATED_AT

        created_earlier.set_principal_domain("b.com")

        assert created_earlier.updated_at > CREATED_AT

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda c: c.add_domain(domain_data("A.com")),
            lambda c: c.update_domain("missing.com", {"https": True}),
            lambda c: c.replace_domains([domain_data("x.com"), domain_data("X.com")]),
        ],
    )
    def test_failure_keeps_updated_at(self, created_earlier, mutate):
        before = created_earlier.to_persisted_shape()

        with pytest.raises((DuplicateEntityException, EntityNotFoundException)):
            mutate(created_earlier)

        assert created_earlier.updated_at == CREATED_AT
        assert created_earlier.to_persisted_shape() == before

@pytest.mark.unit
class TestQueries:
    """Tests for the read-only queries."""

    def test_filters(self, configuration):
        configuration.add_domain(domain_data("b.com", connection_state="disconnected"))

        assert [d.name for d in configuration.domains_by_kind("secondary")] == ["b.com"]
        assert [d.name for d in configuration.domains_by_state(ConnectionState.DISCONNECTED)] == ["b.com"]
        assert [d.name for d in configuration.connected_domains()] == ["a.com"]

    def test_is_domain_connected(self, configuration):
        assert configuration.is_domain_connected("A.com") is True
        assert configuration.is_domain_connected("missing.com") is False


@pytest.mark.unit
class TestPersistedShape:
    """Tests for to_persisted_shape / reconstruct."""

    def test_reconstruct_restores_state(self, configuration):
        configuration.add_domain_history("a.com", "connection", "ops@example.com")
        configuration.toggle_global_redirection(True)

        restored = DomainsConfiguration.reconstruct(configuration.to_persisted_shape())

        assert restored.to_persisted_shape() == configuration.to_persisted_shape()
        assert restored.domains[0].history[0].responsible == "ops@example.com"
