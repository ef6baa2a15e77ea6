"""Rendering of DataTables for humans and other programs."""
