"""Schema.org structured-metadata builders and per-page assembly."""

from pagegate.schema.assembler import PageSchemaAssembler, assemble_page_schema

__all__ = ["PageSchemaAssembler", "assemble_page_schema"]
