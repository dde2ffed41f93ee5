"""Drivers for the Rollerball engine: terminal game and REST API."""
