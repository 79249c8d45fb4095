"""
Value objects for installed apps, sales channels and development apps.
"""

from store_admin.core.domain import StatusEnum


class AppKind(StatusEnum):
    ONLINE_STORE = "online_store"
    WORKFLOW = "workflow"
    LANDING_PAGE = "landing_page"
    POINT_OF_SALE = "point_of_sale"
    MARKETING = "marketing"
    ANALYTICS = "analytics"
    INVENTORY = "inventory"
    SHIPPING = "shipping"


class ChannelKind(StatusEnum):
    ONLINE_STORE = "online_store"
    POS = "pos"
    EXTERNAL_APP = "external_app"
    MARKETPLACE = "marketplace"
    SOCIAL_MEDIA = "social_media"
    WHATSAPP = "whatsapp"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"


class DevelopmentAppState(StatusEnum):
    """Functional lifecycle of an app under development."""

    IN_DEVELOPMENT = "in_development"
    PUBLISHED = "published"
    ARCHIVED = "archived"
    SUSPENDED = "suspended"


class ReviewState(StatusEnum):
    """Moderation status, independent of DevelopmentAppState."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
