"""
Resource identifiers.

Every resource kind gets its own id type so that a job id can never be
mistaken for a grant id, even though both travel over the wire as plain
strings.
"""


class ResourceId(str):
    """Opaque, server-assigned resource id."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"

    def __eq__(self, other: object) -> bool:
        # Different kinds never match; plain strings compare by text.
        if isinstance(other, ResourceId) and type(other) is not type(self):
            return False
        return str.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = str.__hash__


class JobId(ResourceId):
    __slots__ = ()


class GrantId(ResourceId):
    __slots__ = ()


class DocumentId(ResourceId):
    __slots__ = ()


class IdentityId(ResourceId):
    __slots__ = ()


class ConsentId(ResourceId):
    __slots__ = ()
