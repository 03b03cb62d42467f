"""Plusvalía Municipal - calculadora del IIVTNU (post RDL 26/2021)."""

__version__ = "0.1.0"
