"""UI permission flags derived from a role."""

from junket.models.user import UserRole
from junket.schemas.base import CamelModel


class UIPermissions(CamelModel):
    """Which dashboard controls a role gets to see."""

    role: UserRole
    show_add_buttons: bool = False
    show_edit_buttons: bool = False
    show_delete_buttons: bool = False
    show_financial_data: bool = False
    show_transaction_form: bool = False
    show_rolling_form: bool = False
    show_sharing_config: bool = False
    read_only_mode: bool = False
