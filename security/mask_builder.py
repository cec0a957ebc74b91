"""
Permission bit masks for object ACL entries.

Each permission name maps to a MASK_<NAME> class constant. Masks combine
with bitwise OR; MASK_IDDQD grants everything.
"""

from typing import Optional


class MaskBuilder:
    """Builds integer ACL masks from permission names."""

    MASK_VIEW = 1           # 1 << 0
    MASK_CREATE = 2         # 1 << 1
    MASK_EDIT = 4           # 1 << 2
    MASK_DELETE = 8         # 1 << 3
    MASK_UNDELETE = 16      # 1 << 4
    MASK_OPERATOR = 32      # 1 << 5
    MASK_MASTER = 64        # 1 << 6
    MASK_OWNER = 128        # 1 << 7
    MASK_IDDQD = 1073741823  # 1 << 0 | 1 << 1 | ... | 1 << 29

    # Admin-specific permissions
    MASK_LIST = 4096        # 1 << 12
    MASK_EXPORT = 8192      # 1 << 13

    def __init__(self, mask: int = 0):
        self._mask = mask

    @classmethod
    def get_mask(cls, permission: str) -> Optional[int]:
        """Return the mask for permission (e.g. 'EDIT'), or None if unknown."""
        return getattr(cls, f'MASK_{permission.upper()}', None)

    def add(self, permission) -> "MaskBuilder":
        """Add a permission name or raw mask. Returns self for chaining."""
        self._mask |= self._resolve(permission)
        return self

    def remove(self, permission) -> "MaskBuilder":
        """Remove a permission name or raw mask. Returns self for chaining."""
        self._mask &= ~self._resolve(permission)
        return self

    def get(self) -> int:
        return self._mask

    def reset(self) -> "MaskBuilder":
        self._mask = 0
        return self

    def _resolve(self, permission) -> int:
        if isinstance(permission, int) and not isinstance(permission, bool):
            return permission
        if not isinstance(permission, str):
            raise ValueError(f"Permission must be a name or an int mask, got: {permission!r}")
        mask = self.get_mask(permission)
        if mask is None:
            raise ValueError(f"Unknown permission: {permission!r}")
        return mask
