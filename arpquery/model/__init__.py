"""ARP table data model."""
