"""TP-Link Easy Smart switches (TL-SG108E and siblings)."""

from switchexporter.vendors.tplink.client import TPLinkSwitch

__all__ = ["TPLinkSwitch"]
