"""Output emitters for parsed ARP tables."""
