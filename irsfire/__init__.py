"""Constants, record layouts, JSON models, encryption and document storage for IRS FIRE files."""

__version__ = "0.1.0"