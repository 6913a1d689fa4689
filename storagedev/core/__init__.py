"""Core runtime helpers: configuration, logging, process and udev access."""
