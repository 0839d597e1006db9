from types import MappingProxyType

from .errors import UnknownACLError

# canned ACL names -> value of the ACL parameter boto3 sends
SUPPORTED_ACLS = MappingProxyType({
    "private": "private",
    "public-read": "public-read",
    "public-read-write": "public-read-write",
    "authenticated-read": "authenticated-read",
    "bucket-owner-read": "bucket-owner-read",
    "bucket-owner-full-control": "bucket-owner-full-control",
})


def lookup_acl(name: str) -> str:
    try:
        return SUPPORTED_ACLS[name]
    except KeyError:
        raise UnknownACLError(name, SUPPORTED_ACLS) from None
