"""Shared fixtures: captured 'arp -a' output."""

import pytest


SINGLE_INTERFACE = """\
Interface: 192.168.1.1 --- 0x3
  Internet Address      Physical Address      Type
  192.168.1.10           aa-bb-cc-dd-ee-ff      dynamic
"""

MULTI_INTERFACE = """\

Interface: 192.168.1.100 --- 0x4
  Internet Address      Physical Address      Type
  192.168.1.1           00-11-22-33-44-55     dynamic
  192.168.1.10          aa-bb-cc-dd-ee-ff     dynamic
  192.168.1.255         ff-ff-ff-ff-ff-ff     static
  224.0.0.22            01-00-5e-00-00-16     static

Interface: 172.17.80.1 --- 0x1a
  Internet Address      Physical Address      Type
  172.17.95.255         ff-ff-ff-ff-ff-ff     static
"""


@pytest.fixture
def single_interface_output():
    return SINGLE_INTERFACE


@pytest.fixture
def multi_interface_output():
    return MULTI_INTERFACE
