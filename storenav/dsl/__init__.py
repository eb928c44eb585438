"""Venue layout documents.

Layouts are described in YAML (or JSON) using the store layout shape of
``sections`` and ``paths``. Load and validate them with
`storenav.dsl.loader.load_layout_yaml`.
"""
