"""
Shared utilities: validation predicates and logging.
"""

from store_admin.core.shared.logger import (
    ContextLogger,
    configure_logging,
    get_logger,
    get_repository_logger,
    get_service_logger,
)
from store_admin.core.shared.validators import (
    is_enum_member,
    is_in_range,
    is_non_empty_list,
    is_non_empty_string,
    is_non_negative_number,
    is_positive_number,
    is_valid_email,
    is_valid_hostname,
    is_valid_url,
    is_within_length,
)

__all__ = [
    # Logging
    "ContextLogger",
    "configure_logging",
    "get_logger",
    "get_service_logger",
    "get_repository_logger",
    # Validators
    "is_non_empty_string",
    "is_non_empty_list",
    "is_valid_url",
    "is_valid_email",
    "is_valid_hostname",
    "is_enum_member",
    "is_in_range",
    "is_positive_number",
    "is_non_negative_number",
    "is_within_length",
]
