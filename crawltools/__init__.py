"""Crawler building blocks: logging, buffers and pools, scheduler arguments and status, domain parsing, Go package inspection."""

__version__ = "0.1.0"