"""
GraphQL SDL renderer.

Formats resolved field maps as ``type`` blocks. No inference happens here.
"""

from typing import List, Mapping

from graphql_schemagen.inference.nested_types import FieldSchema

INDENT = "  "


class TypeDefinitionRenderer:
    """Generates GraphQL schema-definition-language text."""

    def render_block(self, type_name: str, field_lines: List[str]) -> str:
        """
        Render a ``type`` block from pre-formatted field lines.

        Args:
            type_name: GraphQL type name
            field_lines: Field definitions without indentation

        Returns:
            ``type Name {...}`` text; a block with no fields keeps an empty
            line between the braces
        """
        body = "\n".join(f"{INDENT}{line}" for line in field_lines)
        return f"type {type_name} {{\n{body}\n}}"

    def render_type(self, type_name: str, fields: Mapping[str, FieldSchema]) -> str:
        """
        Render an object type, preserving field order.

        Args:
            type_name: GraphQL type name
            fields: Field name -> FieldSchema

        Returns:
            SDL type definition
        """
        return self.render_block(
            type_name,
            [f"{field_name}: {schema.type}" for field_name, schema in fields.items()],
        )
