"""
Authorization policy - who may act on whose health data.

Every function here is pure: it looks only at the principal and the target
username. Services call these at the top of each operation, before touching
any store, so an unauthorized caller never learns whether a record exists.
"""

from ..models import Principal

ADMIN_ROLE = "ROLE_ADMIN"


def can_act_as_owner(principal: Principal, target_username: str) -> bool:
    """True iff the principal is the owner of ``target_username``'s data."""
    return principal.username == target_username


def is_admin(principal: Principal) -> bool:
    """True iff the principal holds the administrative role."""
    return principal.has_role(ADMIN_ROLE)


def may_create(principal: Principal, target_username: str) -> bool:
    # Self-registration only, admins get no override
    return can_act_as_owner(principal, target_username)


def may_read(principal: Principal, target_username: str) -> bool:
    return can_act_as_owner(principal, target_username) or is_admin(principal)


def may_delete(principal: Principal) -> bool:
    # Owners cannot delete their own records
    return is_admin(principal)
