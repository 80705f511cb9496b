"""Single-pass parser that folds the token stream into an ArpTable."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..defaults import ADDRESS_TYPE_DYNAMIC, ADDRESS_TYPE_STATIC
from ..model.table import AddressType, ArpTable, Entry, Interface
from ..util import GrammarViolation
from .tokenizer import Token, TokenType, tokenize

log = logging.getLogger(__name__)


# Grammar accepted by the parser:
#
#   <section> ::= <net-address> "---" <hex-number> <entry>*
#   <entry>   ::= <net-address> <mac-address> <word>
#
# Anything else (header words, punctuation, unclassifiable runs) is noise.


@dataclass(frozen=True)
class ParseContext:
    """Types of the tokens on either side of the one being parsed."""

    last: Optional[TokenType] = None
    next: Optional[TokenType] = None


@dataclass
class TableBuilder:
    """Working state of the parse.

    Holds the pending interface header, the pending entry fields, and the
    entries collected for the interface currently being built.
    """

    table: ArpTable = field(default_factory=ArpTable)
    gateway: str = ""
    index: str = ""
    ip: str = ""
    mac: str = ""
    address_type: AddressType = AddressType.NONE
    entries: List[Entry] = field(default_factory=list)
    done: bool = False

    def commit_entry(self):
        """Move the pending entry into the current interface, if it is complete."""
        if not self.ip or not self.mac or self.address_type == AddressType.NONE:
            return
        self.entries.append(Entry(self.ip, self.mac, self.address_type))
        self.ip = self.mac = ""
        self.address_type = AddressType.NONE

    def commit_interface(self):
        """Move the pending interface into the table, if it has a gateway and index."""
        self.commit_entry()
        if not self.gateway or not self.index:
            return
        iface = Interface.from_strings(self.gateway, self.index, self.entries)
        self.table.append(iface)
        log.debug(f"Interface {iface.gateway} (index {iface.index}): {len(iface.entries)} entries")
        self.gateway = self.index = ""
        self.entries = []

    def finish(self) -> ArpTable:
        self.commit_interface()
        self.done = True
        return self.table

    def feed(self, tok: Token, ctx: ParseContext = ParseContext()):
        """Apply one token to the working state."""
        if self.done:
            return

        if tok.type == TokenType.NET_ADDRESS:
            if ctx.next == TokenType.TRIPLE_DASH:
                # Gateway of a new interface section
                self.commit_interface()
                self.gateway = tok.text
            elif not self.ip:
                self.ip = tok.text
            else:
                raise GrammarViolation("Unmatched IP address", tok.text,
                                       tok.type.describe(), tok.line_num)

        elif tok.type == TokenType.MAC_ADDRESS:
            self.mac = tok.text

        elif tok.type == TokenType.NUMBER:
            if ctx.last != TokenType.TRIPLE_DASH:
                raise GrammarViolation("Illegal number appearance", tok.text,
                                       tok.type.describe(), tok.line_num)
            self.index = tok.text

        elif tok.type == TokenType.WORD:
            if ctx.last != TokenType.MAC_ADDRESS:
                return  # column headers and other prose
            if tok.text == ADDRESS_TYPE_DYNAMIC:
                self.address_type = AddressType.DYNAMIC
            elif tok.text == ADDRESS_TYPE_STATIC:
                self.address_type = AddressType.STATIC
            else:
                raise GrammarViolation("Unrecognized address type", tok.text,
                                       tok.type.describe(), tok.line_num)
            self.commit_entry()

        elif tok.type == TokenType.END:
            self.finish()

        # TRIPLE_DASH, PUNCT and NONE carry no state


def parse(tokens: List[Token]) -> ArpTable:
    """Build an ArpTable from a token list.

    Raises GrammarViolation on the first token that breaks the grammar;
    no partially built table is returned in that case.
    """
    builder = TableBuilder()
    last: Optional[TokenType] = None

    for i, tok in enumerate(tokens):
        nxt = tokens[i + 1].type if i + 1 < len(tokens) else None
        builder.feed(tok, ParseContext(last=last, next=nxt))
        if builder.done:
            break
        last = tok.type

    if not builder.done:
        # Token list without an END token
        builder.finish()

    log.debug(f"Parsed {len(builder.table)} interface(s), {builder.table.entry_count()} entries")
    return builder.table


def parse_text(text: str) -> ArpTable:
    """Tokenize and parse raw 'arp -a' output."""
    return parse(tokenize(text))
