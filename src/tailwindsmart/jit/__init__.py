from tailwindsmart.jit.arbitrary import (
    ARBITRARY_PREFIXES,
    ArbitraryKind,
    arbitrary_value_kind,
    is_arbitrary,
    parse_arbitrary,
    parse_arbitrary_property,
    split_arbitrary,
)

__all__ = [
    "ARBITRARY_PREFIXES",
    "ArbitraryKind",
    "arbitrary_value_kind",
    "is_arbitrary",
    "parse_arbitrary",
    "parse_arbitrary_property",
    "split_arbitrary",
]
