"""
DomainsConfiguration aggregate.

Owns the store's hostnames, the principal domain reference and the
global redirection flag.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Self

from store_admin.core.domain import EntityNotFoundException, InvalidValueException, guards, utc_now
from store_admin.domains.store_config.domain.entities.aggregate import (
    ConfigurationAggregate,
    create_records,
    ensure_all_unique,
    ensure_unique,
    replaced,
    without,
)
from store_admin.domains.store_config.domain.entities.base import name_key
from store_admin.domains.store_config.domain.entities.domain import Domain
from store_admin.domains.store_config.domain.value_objects import ConnectionState, DomainChange, DomainKind

DOMAIN_NOT_FOUND = "DOMAINS.DOMAIN_NOT_FOUND"
DUPLICATE_DOMAIN = "DOMAINS.DUPLICATE_DOMAIN"
PRINCIPAL_REQUIRED = "DOMAINS.PRINCIPAL_REQUIRED"
PRINCIPAL_IN_USE = "DOMAINS.PRINCIPAL_IN_USE"
MULTIPLE_PRINCIPALS = "DOMAINS.MULTIPLE_PRINCIPALS"
INVALID_PRINCIPAL = "DOMAINS.INVALID_PRINCIPAL"
INVALID_SUBDOMAIN = "DOMAINS.INVALID_SUBDOMAIN"


def _domain_key(domain: Domain) -> str:
    return domain.key


def _resolve_principal(domains: list[Domain]) -> str | None:
    """Name of the single domain of kind principal, if any."""
    principals = [domain for domain in domains if domain.kind == DomainKind.PRINCIPAL]
    if len(principals) > 1:
        raise InvalidValueException(
            "kind",
            DomainKind.PRINCIPAL.value,
            "Only one domain can be the principal domain; use set_principal_domain to change it",
            MULTIPLE_PRINCIPALS,
        )
    return principals[0].name if principals else None


def _check_subdomain(domain: Domain, principal: str | None) -> None:
    if domain.kind != DomainKind.SUBDOMAIN:
        return
    if principal is None:
        raise InvalidValueException(
            "kind", domain.kind.value, "A subdomain requires a principal domain", INVALID_SUBDOMAIN
        )
    if not domain.key.endswith("." + name_key(principal)):
        raise InvalidValueException(
            "name",
            domain.name,
            f"Subdomain '{domain.name}' must belong to the principal domain '{principal}'",
            INVALID_SUBDOMAIN,
        )


@dataclass(eq=False)
class DomainsConfiguration(ConfigurationAggregate):
    """
    Domains of a store.

    Invariants:
    - domain names are unique (case-insensitive)
    - principal_domain, when set, names the single domain of kind principal
    - global redirection can only be enabled while a principal domain is set
    """

    domains: list[Domain] = field(default_factory=list)
    principal_domain: str | None = None
    global_redirection: bool = False

    ENTITY_TYPE: ClassVar[str] = "DomainsConfiguration"

    # ===== CONSTRUCTION =====

    @classmethod
    def create(
        cls,
        store_id: str,
        data: Mapping[str, Any] | None = None,
        *,
        id_factory: Callable[[], str] | None = None,
        now: datetime | None = None,
    ) -> Self:
        """
        Create a brand-new configuration, validating every supplied domain.

        Args:
            store_id: Owning store
            data: Optional initial state with keys domains, principal_domain
                and global_redirection
            id_factory: Identifier generator for the aggregate and its domains
            now: Creation time (defaults to the current UTC time)
        """
        identity, id_factory, now = cls._start(store_id, id_factory=id_factory, now=now)
        domains, principal, redirection = cls._build_state(cls._input(data), id_factory, now)
        return cls(**identity, domains=domains, principal_domain=principal, global_redirection=redirection)

    @classmethod
    def reconstruct(cls, shape: Mapping[str, Any]) -> Self:
        return cls(
            **cls._stored_identity(shape),
            domains=[Domain.from_dict(item) for item in shape.get("domains", [])],
            principal_domain=shape.get("principal_domain"),
            global_redirection=shape.get("global_redirection", False),
        )

    @classmethod
    def _build_state(
        cls,
        data: Mapping[str, Any],
        id_factory: Callable[[], str],
        now: datetime,
    ) -> tuple[list[Domain], str | None, bool]:
        domains = create_records(Domain, data.get("domains"), "domains", id_factory, now)
        ensure_all_unique(
            domains, key=_domain_key, entity_type="Domain", field="name", code=DUPLICATE_DOMAIN
        )
        redirection = guards.optional_bool(data.get("global_redirection"), "global_redirection", default=False)

        requested = guards.optional_string(data.get("principal_domain"), "principal_domain")
        if requested is not None:
            domains = cls._promote_requested(domains, requested, now)

        principal = _resolve_principal(domains)
        for domain in domains:
            _check_subdomain(domain, principal)
        cls._check_redirection(principal, redirection)
        return domains, principal, redirection

    @staticmethod
    def _promote_requested(domains: list[Domain], requested: str, now: datetime) -> list[Domain]:
        key = name_key(requested)
        target = next((domain for domain in domains if domain.key == key), None)
        if target is None:
            raise InvalidValueException(
                "principal_domain",
                requested,
                f"Principal domain '{requested}' is not one of the configured domains",
                INVALID_PRINCIPAL,
            )
        current = _resolve_principal(domains)
        if current is not None and name_key(current) != key:
            raise InvalidValueException(
                "principal_domain",
                requested,
                f"Principal domain '{requested}' disagrees with domain '{current}' of kind principal",
                INVALID_PRINCIPAL,
            )
        return [
            domain.with_kind(DomainKind.PRINCIPAL, now) if domain.id == target.id else domain
            for domain in domains
        ]

    @staticmethod
    def _check_redirection(principal: str | None, redirection: bool) -> None:
        if redirection and principal is None:
            raise InvalidValueException(
                "global_redirection",
                True,
                "Global redirection requires a principal domain",
                PRINCIPAL_REQUIRED,
            )

    def _state_to_dict(self) -> dict[str, Any]:
        return {
            "domains": [domain.to_dict() for domain in self.domains],
            "principal_domain": self.principal_domain,
            "global_redirection": self.global_redirection,
        }

    # ===== MUTATIONS =====

    def _commit(self, domains: list[Domain], now: datetime) -> None:
        """Check the collection-wide rules on the resulting domains, then apply them."""
        principal = _resolve_principal(domains)
        for domain in domains:
            _check_subdomain(domain, principal)
        self._check_redirection(principal, self.global_redirection)
        self.domains = domains
        self.principal_domain = principal
        self.touch(now)

    def _is_principal(self, domain: Domain) -> bool:
        if domain.kind == DomainKind.PRINCIPAL:
            return True
        return self.principal_domain is not None and domain.key == name_key(self.principal_domain)

    def _index_of(self, name: str) -> int:
        key = name_key(guards.require_string(name, "name"))
        for index, domain in enumerate(self.domains):
            if domain.key == key:
                return index
        raise EntityNotFoundException("Domain", name, code=DOMAIN_NOT_FOUND)

    def add_domain(self, data: Mapping[str, Any]) -> Domain:
        """Append a new domain; duplicate if the name already exists (any case)."""
        now = utc_now()
        domain = Domain.create(data, record_id=self.next_id(), now=now)
        ensure_unique(domain, self.domains, key=_domain_key, entity_type="Domain", field="name", code=DUPLICATE_DOMAIN)

        self._commit([*self.domains, domain], now)
        return domain

    def update_domain(self, name: str, patch: Mapping[str, Any]) -> Domain:
        """
        Merge patch fields over an existing domain.

        Renaming re-checks uniqueness against the other domains; renaming
        the principal domain moves the principal reference with it.
        """
        index = self._index_of(name)
        now = utc_now()
        updated = self.domains[index].apply_patch(patch, now=now)
        ensure_unique(updated, self.domains, key=_domain_key, entity_type="Domain", field="name", code=DUPLICATE_DOMAIN)

        self._commit(replaced(self.domains, index, updated), now)
        return updated

    def remove_domain(self, name: str) -> Domain:
        """Remove a domain; the principal cannot be removed while redirection is on."""
        index = self._index_of(name)
        removed = self.domains[index]
        if self._is_principal(removed) and self.global_redirection:
            raise InvalidValueException(
                "name",
                removed.name,
                "Cannot remove the principal domain while global redirection is enabled",
                PRINCIPAL_IN_USE,
            )
        self._commit(without(self.domains, index), utc_now())
        return removed

    def set_principal_domain(self, name: str) -> Domain:
        """Promote a domain to principal, demoting the previous one to secondary."""
        index = self._index_of(name)
        now = utc_now()
        target = self.domains[index]
        candidate = [
            domain.with_kind(DomainKind.SECONDARY, now)
            if domain.kind == DomainKind.PRINCIPAL and domain.id != target.id
            else domain
            for domain in self.domains
        ]
        promoted = target.with_kind(DomainKind.PRINCIPAL, now)
        self._commit(replaced(candidate, index, promoted), now)
        return promoted

    def toggle_global_redirection(self, enabled: bool) -> None:
        enabled = guards.require_bool(enabled, "enabled")
        self._check_redirection(self.principal_domain, enabled)
        self.global_redirection = enabled
        self.touch()

    def add_domain_history(
        self,
        name: str,
        change_type: str,
        responsible: str,
        details: str | None = None,
    ) -> Domain:
        """Append a change record to a domain's history."""
        index = self._index_of(name)
        now = utc_now()
        change = DomainChange(
            changed_at=now,
            change_type=guards.require_string(change_type, "change_type"),
            responsible=guards.require_string(responsible, "responsible"),
            details=guards.optional_string(details, "details"),
        )
        updated = self.domains[index].with_change(change, now)
        self._commit(replaced(self.domains, index, updated), now)
        return updated

    def replace_domains(
        self,
        domains: list[Mapping[str, Any]],
        principal_domain: str | None = None,
        global_redirection: bool | None = None,
    ) -> None:
        """
        Replace the whole collection, validated as if it were created anew.

        global_redirection keeps its current value when not given. While it
        is on, the current principal domain must remain in the collection.
        """
        now = utc_now()
        new_domains, principal, redirection = self._build_state(
            {
                "domains": domains,
                "principal_domain": principal_domain,
                "global_redirection": self.global_redirection if global_redirection is None else global_redirection,
            },
            self.id_factory,
            now,
        )
        if self.global_redirection and self.principal_domain is not None:
            kept = {domain.key for domain in new_domains}
            if name_key(self.principal_domain) not in kept:
                raise InvalidValueException(
                    "name",
                    self.principal_domain,
                    "Cannot remove the principal domain while global redirection is enabled",
                    PRINCIPAL_IN_USE,
                )
        self.domains = new_domains
        self.principal_domain = principal
        self.global_redirection = redirection
        self.touch(now)

    # ===== QUERIES =====

    def find_domain(self, name: str) -> Domain | None:
        key = name_key(name)
        return next((domain for domain in self.domains if domain.key == key), None)

    def get_domain(self, name: str) -> Domain:
        return self.domains[self._index_of(name)]

    def domains_by_kind(self, kind: DomainKind | str) -> list[Domain]:
        kind = DomainKind(kind)
        return [domain for domain in self.domains if domain.kind == kind]

    def domains_by_state(self, state: ConnectionState | str) -> list[Domain]:
        state = ConnectionState(state)
        return [domain for domain in self.domains if domain.connection_state == state]

    def connected_domains(self) -> list[Domain]:
        return self.domains_by_state(ConnectionState.CONNECTED)

    def is_domain_connected(self, name: str) -> bool:
        domain = self.find_domain(name)
        return domain is not None and domain.is_connected()

    def count_domains(self) -> int:
        return len(self.domains)
