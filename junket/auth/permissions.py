"""
Role-based access control for the junket dashboard.

Every question the UI asks ("may this user edit customers?") is answered
from one matrix of capability -> roles. Roles arrive as raw strings from the
session layer and are parsed with UserRole.parse; anything unrecognised
becomes UserRole.UNKNOWN, which is in no set and therefore can do nothing.

Nothing here raises: a bad role is simply "no permission".

Usage:
    from junket.auth import can_edit
    if can_edit(user.role):
        show_edit_button()
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional, Union

from junket.models.user import UserRole
from junket.schemas.permissions import UIPermissions

RoleLike = Optional[Union[str, UserRole]]


class Capability(str, Enum):
    """Things a role may be allowed to do."""
    VIEW = "view"
    EDIT = "edit"
    VIEW_FINANCIAL_DATA = "view_financial_data"
    MANAGE_STAFF = "manage_staff"
    MANAGE_AGENTS = "manage_agents"
    MANAGE_CUSTOMERS = "manage_customers"
    ACCESS_DASHBOARD = "access_dashboard"
    ACCESS_PROJECTS = "access_projects"
    ACCESS_DATA = "access_data"


ADMIN, AGENT, STAFF, BOSS = UserRole.ADMIN, UserRole.AGENT, UserRole.STAFF, UserRole.BOSS

PERMISSION_MATRIX: Dict[Capability, FrozenSet[UserRole]] = {
    Capability.VIEW: frozenset({ADMIN, AGENT, STAFF, BOSS}),
    Capability.EDIT: frozenset({ADMIN, AGENT}),
    # Staff never sees profit figures
    Capability.VIEW_FINANCIAL_DATA: frozenset({ADMIN, AGENT, BOSS}),
    Capability.MANAGE_STAFF: frozenset({ADMIN, BOSS}),
    Capability.MANAGE_AGENTS: frozenset({ADMIN, BOSS}),
    Capability.MANAGE_CUSTOMERS: frozenset({ADMIN, AGENT}),
    Capability.ACCESS_DASHBOARD: frozenset({ADMIN, AGENT, BOSS}),
    Capability.ACCESS_PROJECTS: frozenset({ADMIN, AGENT, BOSS}),
    Capability.ACCESS_DATA: frozenset({ADMIN, BOSS}),
}

# Can look at everything they are allowed to see, change nothing
READ_ONLY_ROLES: FrozenSet[UserRole] = frozenset({BOSS, STAFF})

PERMISSION_MESSAGES: Dict[UserRole, str] = {
    UserRole.BOSS: "You have read-only access to all system data.",
    UserRole.STAFF: "You have limited access to customer and agent information.",
    UserRole.AGENT: "You can manage your customers and view relevant data.",
    UserRole.ADMIN: "You have full administrative access to all system features.",
    UserRole.UNKNOWN: "Access level not recognized.",
}


def has_permission(role: RoleLike, capability: Capability) -> bool:
    """
    Return True if `role` holds `capability`.

    Args:
        role: Raw role string or UserRole
        capability: Capability member (or its string value)
    """
    try:
        capability = Capability(capability)
    except ValueError:
        return False
    return UserRole.parse(role) in PERMISSION_MATRIX[capability]


def is_boss_role(role: RoleLike) -> bool:
    return UserRole.parse(role) is UserRole.BOSS


def is_staff_role(role: RoleLike) -> bool:
    return UserRole.parse(role) is UserRole.STAFF


def is_read_only_role(role: RoleLike) -> bool:
    """Boss and staff may view but never create, update or delete."""
    return UserRole.parse(role) in READ_ONLY_ROLES


def can_edit(role: RoleLike) -> bool:
    return has_permission(role, Capability.EDIT)


def can_view(role: RoleLike) -> bool:
    return has_permission(role, Capability.VIEW)


def can_view_financial_data(role: RoleLike) -> bool:
    return has_permission(role, Capability.VIEW_FINANCIAL_DATA)


def can_manage_staff(role: RoleLike) -> bool:
    return has_permission(role, Capability.MANAGE_STAFF)


def can_manage_agents(role: RoleLike) -> bool:
    return has_permission(role, Capability.MANAGE_AGENTS)


def can_manage_customers(role: RoleLike) -> bool:
    return has_permission(role, Capability.MANAGE_CUSTOMERS)


def can_access_dashboard(role: RoleLike) -> bool:
    return has_permission(role, Capability.ACCESS_DASHBOARD)


def can_access_projects(role: RoleLike) -> bool:
    """Trips are called "projects" in the dashboard navigation."""
    return has_permission(role, Capability.ACCESS_PROJECTS)


def can_access_data(role: RoleLike) -> bool:
    return has_permission(role, Capability.ACCESS_DATA)


def get_permission_message(role: RoleLike) -> str:
    """Human-readable summary of what the role may do."""
    return PERMISSION_MESSAGES[UserRole.parse(role)]


def get_ui_permissions(role: RoleLike) -> UIPermissions:
    """
    Flags the view layer uses to show or hide controls.

    Add/edit/delete buttons, the transaction and rolling forms and the
    sharing configuration all follow can_edit.
    """
    parsed = UserRole.parse(role)
    editable = can_edit(parsed)
    return UIPermissions(
        role=parsed,
        show_add_buttons=editable,
        show_edit_buttons=editable,
        show_delete_buttons=editable,
        show_financial_data=can_view_financial_data(parsed),
        show_transaction_form=editable,
        show_rolling_form=editable,
        show_sharing_config=editable,
        read_only_mode=is_read_only_role(parsed),
    )
