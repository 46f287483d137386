"""
Property name allow-list.

The allow-list decides which event properties a formatter writes. It is
resolved once from a comma-separated configuration string:

- empty or missing: the built-in ``DEFAULT_ALLOWED_PROPERTIES``
- contains ``clear``: exactly the listed names, without ``clear`` (in any
  case); a ``*`` among them still allows every property
- contains ``*``: every property
- anything else: the built-in defaults (the listed names are ignored)

Names match case-insensitively.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional

logger = logging.getLogger(__name__)

WILDCARD = "*"
CLEAR = "clear"

DEFAULT_ALLOWED_PROPERTIES: FrozenSet[str] = frozenset(
    {
        "ConnectionId",
        "ContentLength",
        "DeviceId",
        "Duration",
        "Elapsed",
        "ElapsedMilliseconds",
        "EventId",
        "Headers",
        "Host",
        "HostingRequestFinishedLog",
        "Ip",
        "MachineName",
        "Method",
        "Path",
        "Protocol",
        "QueryString",
        "RequestId",
        "ResponseHeaders",
        "Scheme",
        "SourceContext",
        "StatusCode",
        "ThreadId",
        "TraceIdentifier",
        "Traffic",
        "Url",
        "User",
        "UserAgent",
        "XRequestId",
    }
)


def parse_property_names(config: Optional[str]) -> List[str]:
    """
    Split a comma-separated list of property names.

    Entries are whitespace-trimmed and empty entries are dropped.

    Args:
        config: Configuration string, e.g. ``"clear, RequestId"``

    Returns:
        The names in the order given
    """
    if not config:
        return []
    names = (entry.strip() for entry in config.split(","))
    return [name for name in names if name]


def _fold(names: Iterable[str]) -> FrozenSet[str]:
    return frozenset(name.casefold() for name in names)


@dataclass(frozen=True)
class AllowList:
    """
    An immutable, case-insensitive set of permitted property names.

    Attributes:
        names: Permitted names, case-folded
        wildcard: When True every name is permitted
    """

    names: FrozenSet[str] = frozenset()
    wildcard: bool = False

    @classmethod
    def default(cls) -> "AllowList":
        return cls(names=_fold(DEFAULT_ALLOWED_PROPERTIES))

    @classmethod
    def allow_all(cls) -> "AllowList":
        return cls(wildcard=True)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "AllowList":
        return cls(names=_fold(names))

    @classmethod
    def from_config(cls, config: Optional[str] = None) -> "AllowList":
        """
        Resolve an allow-list from its configuration string.

        Args:
            config: Comma-separated property names, optionally including the
                ``clear`` or ``*`` sentinel

        Returns:
            The resolved AllowList

        Example:
            ```python
            AllowList.from_config("clear,UserId").contains("userid")  # True
            AllowList.from_config("*").contains("Anything")  # True
            ```
        """
        names = parse_property_names(config)

        if not names:
            allow_list = cls.default()
        elif CLEAR in names:
            listed = [name for name in names if name.casefold() != CLEAR]
            if WILDCARD in listed:
                allow_list = cls.allow_all()
            else:
                allow_list = cls.from_names(listed)
        elif WILDCARD in names:
            allow_list = cls.allow_all()
        else:
            # TODO: decide whether a plain list should extend the defaults; kept as-is until product confirms
            logger.warning(
                "Allow-list %r has no 'clear' or '*' entry; using the default property names",
                config,
            )
            allow_list = cls.default()

        logger.debug(
            "Resolved property allow-list: wildcard=%s, %d names",
            allow_list.wildcard,
            len(allow_list.names),
        )
        return allow_list

    def contains(self, name: str) -> bool:
        """Return True if the property ``name`` may be written."""
        return self.wildcard or name.casefold() in self.names

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __len__(self) -> int:
        return len(self.names)
