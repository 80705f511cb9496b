"""Lexeme classifier, tokenizer, and parser for 'arp -a' output."""
