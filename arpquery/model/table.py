"""ARP table data models: address types, entries, interfaces."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional

from ..defaults import ADDRESS_TYPE_DYNAMIC, ADDRESS_TYPE_NULL, ADDRESS_TYPE_STATIC
from ..util import parse_hex_index


class AddressType(Enum):
    NONE = ADDRESS_TYPE_NULL
    DYNAMIC = ADDRESS_TYPE_DYNAMIC
    STATIC = ADDRESS_TYPE_STATIC

    @classmethod
    def parse(cls, text: Optional[str]) -> "AddressType":
        """Case-insensitive lookup; anything unrecognised is NONE."""
        if not text:
            return cls.NONE
        lowered = text.lower()
        if lowered == ADDRESS_TYPE_DYNAMIC:
            return cls.DYNAMIC
        if lowered == ADDRESS_TYPE_STATIC:
            return cls.STATIC
        return cls.NONE

    def __str__(self) -> str:
        return self.value


def address_type_to_string(address_type: AddressType) -> str:
    return str(address_type)


def string_to_address_type(text: Optional[str]) -> AddressType:
    return AddressType.parse(text)


@dataclass(frozen=True)
class Entry:
    network_address: str                    # "192.168.1.10"
    physical_address: str                   # "aa-bb-cc-dd-ee-ff"
    address_type: AddressType

    @property
    def ip_address(self) -> str:
        return self.network_address

    @property
    def mac_address(self) -> str:
        return self.physical_address

    def to_dict(self) -> Dict[str, Any]:
        return {
            "network_address": self.network_address,
            "physical_address": self.physical_address,
            "type": str(self.address_type),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Entry":
        address_type = AddressType.parse(d.get("type"))
        if address_type == AddressType.NONE:
            raise ValueError(f"unknown address type: {d.get('type')!r}")
        return cls(
            network_address=d["network_address"],
            physical_address=d["physical_address"],
            address_type=address_type,
        )


@dataclass
class Interface:
    gateway: str
    index: int
    entries: List[Entry] = field(default_factory=list)

    @classmethod
    def from_strings(cls, gateway: str, index: str,
                     entries: Optional[List[Entry]] = None) -> "Interface":
        """Build an Interface from the raw gateway text and hex index literal."""
        return cls(
            gateway=gateway,
            index=parse_hex_index(index),
            entries=list(entries or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gateway": self.gateway,
            "index": self.index,
            "entries": [e.to_dict() for e in self.entries],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Interface":
        return cls(
            gateway=d["gateway"],
            index=int(d["index"]),
            entries=[Entry.from_dict(e) for e in d.get("entries") or []],
        )


@dataclass
class ArpTable:
    """Interfaces in the order they appear in the 'arp -a' output."""

    interfaces: List[Interface] = field(default_factory=list)

    def __iter__(self) -> Iterator[Interface]:
        return iter(self.interfaces)

    def __len__(self) -> int:
        return len(self.interfaces)

    def __getitem__(self, pos: int) -> Interface:
        return self.interfaces[pos]

    def append(self, iface: Interface):
        if not isinstance(iface, Interface):
            raise TypeError(f"Cannot append {type(iface).__name__} to an ARP table")
        self.interfaces.append(iface)

    def insert(self, pos: int, iface: Interface):
        if not isinstance(iface, Interface):
            raise TypeError(f"Cannot insert {type(iface).__name__} into an ARP table")
        self.interfaces.insert(pos, iface)

    def find(self, pred: Callable[[Interface], bool]) -> Optional[Interface]:
        """Return the first interface matching pred, or None."""
        for iface in self.interfaces:
            if pred(iface):
                return iface
        return None

    def by_gateway(self, address: str) -> Optional[Interface]:
        return self.find(lambda i: i.gateway == address)

    def by_index(self, index: int) -> Optional[Interface]:
        return self.find(lambda i: i.index == index)

    def entry_count(self) -> int:
        return sum(len(i.entries) for i in self.interfaces)

    def to_dict(self) -> Dict[str, Any]:
        return {"interfaces": [i.to_dict() for i in self.interfaces]}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ArpTable":
        return cls(interfaces=[Interface.from_dict(i) for i in d.get("interfaces") or []])
