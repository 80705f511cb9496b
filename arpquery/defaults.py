"""Default values and constants for arpquery."""

# Report layout
DEFAULT_COLUMN_WIDTH = 22
REPORT_INDENT = "  "
HEADER_INTERNET_ADDRESS = "Internet Address"
HEADER_PHYSICAL_ADDRESS = "Physical Address"
HEADER_TYPE = "Type"

# External command that produces the ARP table text
DEFAULT_ARP_COMMAND = ("arp", "-a")
DEFAULT_COMMAND_TIMEOUT = 30  # seconds

# Output formats understood by the CLI
OUTPUT_FORMATS = ("text", "yaml")
DEFAULT_OUTPUT_FORMAT = "text"

# Address type literals as printed by 'arp -a'
ADDRESS_TYPE_DYNAMIC = "dynamic"
ADDRESS_TYPE_STATIC = "static"
ADDRESS_TYPE_NULL = "(null)"
