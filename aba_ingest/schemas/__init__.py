"""
Record schema definitions sub-package for aba-ingest.

Contains YAML files that define the column layout of each ABA record type,
keyed by the record's leading discriminant character. The loader module
(schema_registry.py in the parent package) reads these files at runtime.
"""
