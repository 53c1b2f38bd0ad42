"""Kernel – error hierarchy and clock port shared by every hooklog layer."""
