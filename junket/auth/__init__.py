"""Access control module."""

from junket.auth.permissions import (
    Capability,
    can_access_dashboard,
    can_access_data,
    can_access_projects,
    can_edit,
    can_manage_agents,
    can_manage_customers,
    can_manage_staff,
    can_view,
    can_view_financial_data,
    get_permission_message,
    get_ui_permissions,
    has_permission,
    is_boss_role,
    is_read_only_role,
    is_staff_role,
)

__all__ = [
    "Capability",
    "has_permission",
    "is_boss_role",
    "is_staff_role",
    "is_read_only_role",
    "can_edit",
    "can_view",
    "can_view_financial_data",
    "can_manage_staff",
    "can_manage_agents",
    "can_manage_customers",
    "can_access_dashboard",
    "can_access_projects",
    "can_access_data",
    "get_permission_message",
    "get_ui_permissions",
]
