"""
ACL data for editing the access control list of a single admin object.

AdminObjectAclData is a passive holder shared between the ACL controller,
its forms, and the ACL manipulator. The only derived state is the mask
cache, computed once from the admin's object permissions.
"""

import logging
import warnings
from typing import Any, Iterable, Optional

logger = logging.getLogger('AdminAdapters.security.acl')


class AdminObjectAclData:
    """
    Holds the ACL users, roles, forms and masks for one admin object.

    Args:
        admin: Admin owning the object; provides get_security_handler() and is_granted()
        obj: The domain object whose ACL is edited
        acl_users: Users to set ACL entries for
        mask_builder_class: Class exposing MASK_<PERMISSION> constants
        acl_roles: Roles to set ACL entries for (default: none)
    """

    # Permissions only an OWNER may grant or revoke
    OWNER_PERMISSIONS = ('MASTER', 'OWNER')

    def __init__(
        self,
        admin: Any,
        obj: Any,
        acl_users: Iterable,
        mask_builder_class: type,
        acl_roles: Optional[Iterable] = None
    ):
        self._admin = admin
        self._object = obj
        self._acl_users = acl_users
        self._acl_roles = [] if acl_roles is None else acl_roles
        self._mask_builder_class = mask_builder_class

        self._acl = None
        self._acl_users_form = None
        self._acl_roles_form = None
        self._masks: dict[str, Optional[int]] = {}

        self._update_masks()

    @property
    def admin(self) -> Any:
        return self._admin

    @property
    def object(self) -> Any:
        return self._object

    @property
    def acl_users(self) -> Iterable:
        return self._acl_users

    @property
    def acl_roles(self) -> Iterable:
        return self._acl_roles

    @property
    def masks(self) -> dict[str, Optional[int]]:
        """Cached permission -> mask mapping."""
        return self._masks

    @property
    def acl(self) -> Any:
        return self._acl

    @acl.setter
    def acl(self, acl: Any) -> None:
        self._acl = acl

    def set_acl(self, acl: Any) -> "AdminObjectAclData":
        self._acl = acl
        return self

    @property
    def acl_users_form(self) -> Any:
        return self._acl_users_form

    @acl_users_form.setter
    def acl_users_form(self, form: Any) -> None:
        self._acl_users_form = form

    def set_acl_users_form(self, form: Any) -> "AdminObjectAclData":
        self._acl_users_form = form
        return self

    @property
    def acl_roles_form(self) -> Any:
        return self._acl_roles_form

    @acl_roles_form.setter
    def acl_roles_form(self, form: Any) -> None:
        self._acl_roles_form = form

    def set_acl_roles_form(self, form: Any) -> "AdminObjectAclData":
        self._acl_roles_form = form
        return self

    def set_form(self, form: Any) -> "AdminObjectAclData":
        """Deprecated alias of set_acl_users_form()."""
        warnings.warn(
            "set_form() is deprecated, use set_acl_users_form() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.set_acl_users_form(form)

    def get_form(self) -> Any:
        """Deprecated alias of the acl_users_form property."""
        warnings.warn(
            "get_form() is deprecated, use acl_users_form instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._acl_users_form

    def get_permissions(self) -> list[str]:
        return list(self.get_security_handler().get_object_permissions())

    def get_user_permissions(self) -> list[str]:
        """
        Get the permissions the current user is allowed to set.

        Non-owners cannot hand out MASTER or OWNER. Order of the remaining
        permissions is preserved.
        """
        permissions = self.get_permissions()

        if not self.is_owner():
            permissions = [p for p in permissions if p not in self.OWNER_PERMISSIONS]

        return permissions

    def get_owner_permissions(self) -> list[str]:
        return list(self.OWNER_PERMISSIONS)

    def is_owner(self) -> bool:
        """Check whether the current user holds OWNER on the object."""
        return bool(self._admin.is_granted('OWNER', self._object))

    def get_security_handler(self) -> Any:
        return self._admin.get_security_handler()

    def get_security_information(self) -> Any:
        return self.get_security_handler().build_security_information(self._admin)

    def _update_masks(self) -> None:
        """Cache the mask of every object permission."""
        self._masks = {}
        for permission in self.get_permissions():
            mask = getattr(self._mask_builder_class, f'MASK_{permission}', None)
            if mask is None:
                logger.warning(
                    f"{self._mask_builder_class.__name__} defines no mask for permission {permission!r}"
                )
            self._masks[permission] = mask
