"""DDL renderers: CREATE / DROP / ALTER / RENAME and the table elements they carry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from sqlunparse.errors import malformed
from sqlunparse.nodes.kinds import AliasType, ConstraintType, DefaultAction, JoinType, NodeKind, RenameType
from sqlunparse.render.base import _UnparserBase, _unknown  # pyright: ignore[reportPrivateUsage]
from sqlunparse.render.constants import _DROP_STATEMENT  # pyright: ignore[reportPrivateUsage]
from sqlunparse.render.utils import quote_ident, quote_string

if TYPE_CHECKING:
    from sqlunparse.nodes.base import Node
    from sqlunparse.nodes.ddl import (
        AlterDropIndex,
        AlterTable,
        ColumnDefinition,
        ConstraintDefinition,
        CreateAlias,
        CreateIndex,
        CreateSchema,
        CreateTable,
        CreateView,
        Drop,
        DropColumn,
        DropIndex,
        DropSchema,
        FKConstraintDefinition,
        IndexColumn,
        IndexColumnList,
        IndexDefinition,
        ModifyColumnConstraint,
        ModifyColumnDefault,
        ModifyColumnType,
        Rename,
        RenameColumn,
        StorageFormat,
    )

#: Keyword naming the constraint a ``DROP`` constraint definition removes.
_DROPPED_CONSTRAINT: Final = {
    ConstraintType.DROP: "CONSTRAINT",
    ConstraintType.PRIMARY_KEY: "PRIMARY KEY",
    ConstraintType.UNIQUE: "UNIQUE",
    ConstraintType.CHECK: "CHECK",
    ConstraintType.FOREIGN_KEY: "FOREIGN KEY",
}

_GROUP_INDEX_SIDE: Final = {JoinType.LEFT_OUTER: "LEFT", JoinType.RIGHT_OUTER: "RIGHT"}


class _DdlMixin(_UnparserBase):
    """Mixin providing DDL statement and table element renderers."""

    # ── Table elements ────────────────────────────────────────────

    def _render_column_definition(self, node: ColumnDefinition) -> str:
        text = f"{quote_ident(node.column_name)} {node.data_type}"
        if node.default is not None:
            text += f" {self.visit(node.default)}"
        return text

    def _render_constraint_definition(self, node: ConstraintDefinition) -> str:
        if node.constraint_type is ConstraintType.DROP:
            return self._render_drop_constraint(node)
        prefix = f"CONSTRAINT {self.visit(node.constraint_name)} " if node.constraint_name is not None else ""
        match node.constraint_type:
            case ConstraintType.PRIMARY_KEY | ConstraintType.UNIQUE:
                if node.columns is None:
                    malformed(f"{node.constraint_type.name} constraint has no columns", kind=node.kind)
                keyword = "PRIMARY KEY" if node.constraint_type is ConstraintType.PRIMARY_KEY else "UNIQUE"
                return f"{prefix}{keyword}({self.visit(node.columns)})"
            case ConstraintType.CHECK:
                if node.check_condition is None:
                    malformed("CHECK constraint has no condition", kind=node.kind)
                return f"{prefix}CHECK ({self.visit(node.check_condition)})"
            case _:
                return f"{prefix}{_unknown(node.constraint_type)}"

    def _render_drop_constraint(self, node: ConstraintDefinition) -> str:
        target = node.verify_type if node.verify_type is not None else ConstraintType.DROP
        keyword = _DROPPED_CONSTRAINT.get(target)
        if keyword is None:
            return f"DROP {_unknown(target)}"
        parts = ["DROP", keyword]
        check = self._existence_check(node.existence_check)
        if check:
            parts.append(check.rstrip())
        if node.constraint_name is not None:
            parts.append(self.visit(node.constraint_name))
        return " ".join(parts)

    def _render_fk_constraint(self, node: FKConstraintDefinition) -> str:
        parts: list[str] = []
        if node.constraint_name is not None:
            parts.append(f"CONSTRAINT {self.visit(node.constraint_name)}")
        if node.grouping:
            parts.append("GROUPING")
        references = self.visit(node.ref_table)
        if node.ref_columns is not None:
            references += f"({self.visit(node.ref_columns)})"
        parts.append(f"FOREIGN KEY({self.visit(node.columns)}) REFERENCES {references}")
        if node.deferrable:
            parts.append("DEFERRABLE")
        if node.initially_deferred:
            parts.append("INITIALLY DEFERRED")
        return " ".join(parts)

    def _render_index_definition(self, node: IndexDefinition) -> str:
        parts = ["INDEX"]
        if node.name is not None:
            parts.append(quote_ident(node.name))
        parts.append(f"({self.visit(node.columns)})")
        if node.storage_format is not None:
            parts.append(self.visit(node.storage_format))
        return " ".join(parts)

    def _render_index_column_list(self, node: IndexColumnList) -> str:
        columns = [self.visit(column) for column in node]
        start, end = node.function_start, node.function_end
        if node.function_name is not None and start is not None and end is not None:
            wrapped = f"{node.function_name}({', '.join(columns[start : end + 1])})"
            columns[start : end + 1] = [wrapped]
        return ", ".join(columns)

    def _render_index_column(self, node: IndexColumn) -> str:
        text = quote_ident(node.column_name)
        if node.table_name is not None:
            text = f"{self.visit(node.table_name)}.{text}"
        if not node.ascending:
            text += " DESC"
        return text

    def _render_storage_format(self, node: StorageFormat) -> str:
        text = f"STORAGE_FORMAT {node.format_name}"
        if node.options:
            options = ", ".join(f"{key} = {quote_string(value)}" for key, value in node.options)
            text += f"({options})"
        return text

    # ── ALTER TABLE actions ───────────────────────────────────────

    def _render_rename_column(self, node: RenameColumn) -> str:
        return f"RENAME COLUMN {quote_ident(node.old_name)} TO {quote_ident(node.new_name)}"

    def _render_drop_column(self, node: DropColumn) -> str:
        return f"DROP COLUMN {self._existence_check(node.existence_check)}{quote_ident(node.column_name)}"

    def _render_modify_column_type(self, node: ModifyColumnType) -> str:
        return f"ALTER COLUMN {quote_ident(node.column_name)} SET DATA TYPE {node.data_type}"

    def _render_modify_column_default(self, node: ModifyColumnDefault) -> str:
        column = f"ALTER COLUMN {quote_ident(node.column_name)}"
        if node.action is DefaultAction.INCREMENT:
            return f"{column} SET INCREMENT BY {self._required_int(node.increment, 'increment', node)}"
        if node.action is DefaultAction.RESTART:
            return f"{column} RESTART WITH {self._required_int(node.start, 'start', node)}"
        if node.generation_expression is not None or node.autoincrement:
            mode = "BY DEFAULT" if node.default is not None else "ALWAYS"
            if node.generation_expression is not None:
                generated = f"({self.visit(node.generation_expression)})"
            else:
                start = self._required_int(node.start, "start", node)
                increment = self._required_int(node.increment, "increment", node)
                generated = f"IDENTITY (START WITH {start}, INCREMENT BY {increment})"
            return f"{column} SET GENERATED {mode} AS {generated}"
        if node.default is not None:
            return f"{column} SET {self.visit(node.default)}"
        return f"{column} DROP DEFAULT"

    @staticmethod
    def _required_int(value: int | None, field: str, node: Node) -> int:
        if value is None:
            malformed(f"column default change is missing its {field} value", kind=node.kind)
        return value

    def _render_modify_column_constraint(self, node: ModifyColumnConstraint) -> str:
        nullability = "NOT NULL" if node.kind is NodeKind.MODIFY_COLUMN_CONSTRAINT_NOT_NULL else "NULL"
        return f"ALTER COLUMN {quote_ident(node.column_name)} {nullability}"

    def _render_alter_drop_index(self, node: AlterDropIndex) -> str:
        return f"DROP INDEX {quote_ident(node.index_name)}"

    # ── CREATE ────────────────────────────────────────────────────

    def _render_create_table(self, node: CreateTable) -> str:
        text = f"CREATE TABLE {self._existence_check(node.existence_check)}{self.visit(node.table_name)}"
        if node.elements is not None:
            text += f"({self.visit(node.elements)})"
        if node.query is not None:
            data = "DATA" if node.with_data else "NO DATA"
            text += f" AS ({self.visit(node.query)}) WITH {data}"
        if node.storage_format is not None:
            text += f" {self.visit(node.storage_format)}"
        return text

    def _render_create_view(self, node: CreateView) -> str:
        text = f"CREATE VIEW {self._existence_check(node.existence_check)}{self.visit(node.view_name)}"
        if node.columns is not None:
            text += f"({self.visit(node.columns)})"
        return f"{text} AS ({self.visit(node.query)})"

    def _render_create_index(self, node: CreateIndex) -> str:
        unique = "UNIQUE " if node.unique else ""
        text = (
            f"CREATE {unique}INDEX {self._existence_check(node.existence_check)}{self.visit(node.index_name)}"
            f" ON {self.visit(node.table_name)}({self.visit(node.columns)})"
        )
        if node.join_type is not None:
            side = _GROUP_INDEX_SIDE.get(node.join_type)
            if side is None:
                malformed(f"group index cannot use a {node.join_type.name} join", kind=node.kind)
            text += f" USING {side} JOIN"
        if node.storage_format is not None:
            text += f" {self.visit(node.storage_format)}"
        return text

    def _render_create_schema(self, node: CreateSchema) -> str:
        parts = [f"CREATE SCHEMA {self._existence_check(node.existence_check)}{quote_ident(node.schema_name)}"]
        if node.authorization is not None:
            parts.append(f"AUTHORIZATION {quote_ident(node.authorization)}")
        if node.character_set is not None:
            parts.append(f"DEFAULT CHARACTER SET {quote_ident(node.character_set)}")
        if node.collation is not None:
            parts.append(f"DEFAULT COLLATION {quote_ident(node.collation)}")
        return " ".join(parts)

    def _render_create_alias(self, node: CreateAlias) -> str:
        routine = "FUNCTION" if node.alias_type is AliasType.FUNCTION else "PROCEDURE"
        or_replace = "OR REPLACE " if node.create_or_replace else ""
        text = f"CREATE {or_replace}{routine} {self.visit(node.alias_name)}{node.signature}"
        if node.definition is not None:
            if "\n" in node.definition:
                return f"{text} AS $${node.definition}$$"
            return f"{text} AS {quote_string(node.definition)}"
        if node.external_name is None:
            malformed(f"{routine} has neither a definition nor an external name", kind=node.kind)
        external = node.external_name
        if node.method_name is not None:
            external = f"{external}.{node.method_name}"
        return f"{text} EXTERNAL NAME {quote_string(external)}"

    # ── DROP / ALTER / RENAME ─────────────────────────────────────

    def _render_drop(self, node: Drop) -> str:
        return (
            f"{_DROP_STATEMENT[node.kind]} {self._existence_check(node.existence_check)}"
            f"{self.visit(node.object_name)}{self._drop_behavior(node.drop_behavior)}"
        )

    def _render_drop_schema(self, node: DropSchema) -> str:
        return (
            f"DROP SCHEMA {self._existence_check(node.existence_check)}"
            f"{quote_ident(node.schema_name)}{self._drop_behavior(node.drop_behavior)}"
        )

    def _render_drop_index(self, node: DropIndex) -> str:
        index = quote_ident(node.index_name)
        if node.table_name is not None:
            index = f"{self.visit(node.table_name)}.{index}"
        return f"DROP INDEX {self._existence_check(node.existence_check)}{index}"

    def _render_alter_table(self, node: AlterTable) -> str:
        verb = "TRUNCATE" if node.truncate else "ALTER"
        text = f"{verb} TABLE {self._existence_check(node.existence_check)}{self.visit(node.table_name)}"
        if node.elements:
            actions = ", ".join(self._alter_action_prefix(element) + self.visit(element) for element in node.elements)
            text += f" {actions}"
        return text

    @staticmethod
    def _alter_action_prefix(element: Node) -> str:
        match element.kind:
            case NodeKind.COLUMN_DEFINITION:
                return "ADD COLUMN "
            case NodeKind.CONSTRAINT_DEFINITION:
                dropping = getattr(element, "constraint_type", None) is ConstraintType.DROP
                return "" if dropping else "ADD "
            case NodeKind.FK_CONSTRAINT_DEFINITION | NodeKind.INDEX_DEFINITION:
                return "ADD "
            case _:
                return ""

    def _render_rename(self, node: Rename) -> str:
        if node.alter_table or node.rename_type in (RenameType.INDEX, RenameType.COLUMN):
            if node.old_name is None or node.new_name is None:
                malformed(f"RENAME {node.rename_type.name} needs old and new names", kind=node.kind)
            old, new = quote_ident(node.old_name), quote_ident(node.new_name)
            if node.alter_table:
                if node.object_name is None:
                    malformed("ALTER TABLE RENAME COLUMN needs a table name", kind=node.kind)
                return f"ALTER TABLE {self.visit(node.object_name)} RENAME COLUMN {old} TO {new}"
            if node.object_name is not None:
                old = f"{self.visit(node.object_name)}.{old}"
            return f"RENAME {node.rename_type.name} {old} TO {new}"
        if node.object_name is None or node.new_table_name is None:
            malformed("RENAME TABLE needs old and new table names", kind=node.kind)
        return f"RENAME TABLE {self.visit(node.object_name)} TO {self.visit(node.new_table_name)}"
