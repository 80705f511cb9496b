"""Parse Windows 'arp -a' output into a structured ARP table."""

__version__ = "0.1.0"
