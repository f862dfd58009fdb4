"""
Data models for the permissions engine.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Type, TypeVar, Union

from pydantic import (
    AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr,
    ValidationError, field_validator
)
from pydantic.alias_generators import to_camel

from shared.logging import get_logger

logger = get_logger("permissions.models")

E = TypeVar("E", bound=Enum)

# Identifiers arrive as strings from most stores and as ints from a few
Identifier = Union[StrictStr, StrictInt]


def _lookup(enum_cls: Type[E], value: Any) -> Optional[E]:
    """Resolve a raw value to an enum member, or None when unrecognized."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None


def is_collection(value: Any) -> bool:
    """True for iterables of items such as lists or generators.

    Strings, bytes and mappings are single values here, not collections.
    """
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping))


class Role(str, Enum):
    """Actor roles, strongest first."""
    ADMIN = "admin"
    SELLER = "seller"
    USER = "user"
    GUEST = "guest"

    @classmethod
    def parse(cls, value: Any) -> Optional["Role"]:
        return _lookup(cls, value)


class Action(str, Enum):
    """Actions an actor can attempt on a resource."""
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    # Label for list filtering only; it has no rules of its own
    BULK = "bulk"

    @classmethod
    def parse(cls, value: Any) -> Optional["Action"]:
        return _lookup(cls, value)


class VisibilityClass(str, Enum):
    """How a resource type is exposed to readers."""
    PUBLIC_LISTING = "public_listing"
    MODERATED = "moderated"
    PRIVATE = "private"


class ResourceType(str, Enum):
    """Resource types known to the engine."""
    HERO_SLIDES = "hero_slides"
    CATEGORIES = "categories"
    PRODUCTS = "products"
    AUCTIONS = "auctions"
    ORDERS = "orders"
    SHOPS = "shops"
    COUPONS = "coupons"
    TICKETS = "tickets"
    REVIEWS = "reviews"
    PAYOUTS = "payouts"
    USERS = "users"

    @classmethod
    def parse(cls, value: Any) -> Optional["ResourceType"]:
        return _lookup(cls, value)

    @property
    def visibility(self) -> VisibilityClass:
        return RESOURCE_VISIBILITY[self]


RESOURCE_VISIBILITY: Mapping[ResourceType, VisibilityClass] = MappingProxyType({
    ResourceType.HERO_SLIDES: VisibilityClass.PUBLIC_LISTING,
    ResourceType.CATEGORIES: VisibilityClass.PUBLIC_LISTING,
    ResourceType.PRODUCTS: VisibilityClass.PUBLIC_LISTING,
    ResourceType.AUCTIONS: VisibilityClass.PUBLIC_LISTING,
    ResourceType.SHOPS: VisibilityClass.PUBLIC_LISTING,
    ResourceType.REVIEWS: VisibilityClass.MODERATED,
    ResourceType.ORDERS: VisibilityClass.PRIVATE,
    ResourceType.TICKETS: VisibilityClass.PRIVATE,
    ResourceType.PAYOUTS: VisibilityClass.PRIVATE,
    ResourceType.COUPONS: VisibilityClass.PRIVATE,
    ResourceType.USERS: VisibilityClass.PRIVATE,
})

PUBLIC_STATUSES = frozenset({"active", "published", "approved"})


class Actor(BaseModel):
    """The party making a request.

    Built by the calling layer once per request. ``uid`` is accepted as an
    alias for ``id``. ``role`` is kept as a plain string so that unknown
    roles coming from untyped boundaries still load and simply match no
    rules.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore"
    )

    id: Identifier = Field(validation_alias=AliasChoices("id", "uid"))
    role: StrictStr = Role.GUEST.value
    shop_id: Optional[Identifier] = None
    email: Optional[StrictStr] = None

    @field_validator("role", mode="before")
    @classmethod
    def _role_value(cls, value: Any) -> Any:
        if isinstance(value, Role):
            return value.value
        return value

    @property
    def role_enum(self) -> Optional[Role]:
        """The actor's role, or None when it is not a known role."""
        return Role.parse(self.role)

    @classmethod
    def coerce(cls, raw: Any) -> Optional["Actor"]:
        """Read an actor from an Actor, a mapping or None.

        Anything that cannot be read as an actor is treated as anonymous.
        """
        if raw is None or isinstance(raw, cls):
            return raw
        if not isinstance(raw, Mapping):
            logger.debug("Unreadable actor treated as anonymous", actor_type=type(raw).__name__)
            return None
        try:
            return cls.model_validate({k: v for k, v in raw.items() if isinstance(k, str)})
        except ValidationError as e:
            logger.debug("Malformed actor treated as anonymous", errors=e.error_count())
            return None


class ResourceData(BaseModel):
    """The attributes of one resource instance that the rules inspect.

    Every field is optional. Keys may be snake_case or the camelCase used
    by the stores (``shopId``, ``createdBy`` ...). Any other keys are
    ignored, and a known key holding a value of the wrong shape is dropped
    as if it were absent, so loading never fails.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore"
    )

    id: Optional[Identifier] = None
    uid: Optional[Identifier] = None
    status: Optional[StrictStr] = None
    is_active: Optional[StrictBool] = None
    shop_id: Optional[Identifier] = None
    user_id: Optional[Identifier] = None
    created_by: Optional[Identifier] = None
    owner_id: Optional[Identifier] = None

    @field_validator("*", mode="wrap")
    @classmethod
    def _drop_malformed(cls, value: Any, handler: Any) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None

    @property
    def is_public(self) -> bool:
        """Whether the instance is visible to anyone."""
        return self.status in PUBLIC_STATUSES or self.is_active is True

    @classmethod
    def coerce(cls, raw: Any) -> "ResourceData":
        """Read resource data from a ResourceData, a mapping or anything else.

        None and non-mapping values load as a record with no fields.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, Mapping):
            return cls()
        return cls.model_validate({k: v for k, v in raw.items() if isinstance(k, str)})

