"""Security adapters: ACL data holder and permission masks."""
from security.acl import AdminObjectAclData
from security.mask_builder import MaskBuilder

__all__ = [
    'AdminObjectAclData',
    'MaskBuilder',
]
