"""DocuPrint - gated-community document printing portal API."""

__version__ = "0.1.0"
