"""EddyWatch: Eddystone beacon frame decoder and scanner."""

__version__ = "0.1.0"
