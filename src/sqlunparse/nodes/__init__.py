"""Typed AST nodes consumed by the unparser."""

from sqlunparse.nodes.base import Node, NodeList, UnknownNode, node_class, register, registered_classes
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
from sqlunparse.nodes.expressions import (
    Aggregate,
    AggregateWindowFunction,
    Between,
    BinaryOperator,
    Cast,
    Coalesce,
    ColumnReference,
    Conditional,
    Constant,
    ConstantValue,
    CurrentDatetime,
    Default,
    ExplicitCollate,
    Extract,
    GroupConcat,
    InList,
    Is,
    Like,
    Parameter,
    RoutineCall,
    RowConstructor,
    RowNumberFunction,
    SequenceValue,
    SimpleCase,
    SpecialValue,
    Subquery,
    TableName,
    TernaryOperator,
    Trim,
    UnaryOperator,
    VirtualColumn,
)
from sqlunparse.nodes.kinds import (
    AccessMode,
    AliasType,
    ConstraintType,
    CopyFormat,
    CopyMode,
    DatetimeField,
    DefaultAction,
    DropBehavior,
    ExistenceCheck,
    ExplainDetail,
    IsolationLevel,
    JoinType,
    NodeKind,
    RenameType,
    SubqueryType,
    TransactionCommand,
)
from sqlunparse.nodes.lists import (
    FromList,
    GroupByList,
    OrderByList,
    PartitionByList,
    ResultColumnList,
    TableElementList,
    TableNameList,
    ValueNodeList,
    WindowList,
)
from sqlunparse.nodes.query import (
    AllResultColumn,
    Cursor,
    FromBaseTable,
    FromSubquery,
    GroupByColumn,
    Join,
    OrderByColumn,
    PartitionByColumn,
    ResultColumn,
    RowResultSet,
    RowsResultSet,
    Select,
    Union,
    WindowDefinition,
    WindowReference,
)
from sqlunparse.nodes.statements import (
    CallStatement,
    Close,
    CopyStatement,
    Deallocate,
    Declare,
    Delete,
    Execute,
    Explain,
    Fetch,
    Insert,
    Prepare,
    SetConfiguration,
    SetConstraints,
    SetTransactionAccess,
    SetTransactionIsolation,
    ShowConfiguration,
    TransactionControl,
    Update,
)

__all__ = [
    "AccessMode",
    "Aggregate",
    "AggregateWindowFunction",
    "AliasType",
    "AllResultColumn",
    "AlterDropIndex",
    "AlterTable",
    "Between",
    "BinaryOperator",
    "CallStatement",
    "Cast",
    "Close",
    "Coalesce",
    "ColumnDefinition",
    "ColumnReference",
    "Conditional",
    "Constant",
    "ConstantValue",
    "ConstraintDefinition",
    "ConstraintType",
    "CopyFormat",
    "CopyMode",
    "CopyStatement",
    "CreateAlias",
    "CreateIndex",
    "CreateSchema",
    "CreateTable",
    "CreateView",
    "CurrentDatetime",
    "Cursor",
    "DatetimeField",
    "Deallocate",
    "Declare",
    "Default",
    "DefaultAction",
    "Delete",
    "Drop",
    "DropBehavior",
    "DropColumn",
    "DropIndex",
    "DropSchema",
    "ExistenceCheck",
    "Execute",
    "Explain",
    "ExplainDetail",
    "ExplicitCollate",
    "Extract",
    "Fetch",
    "FKConstraintDefinition",
    "FromBaseTable",
    "FromList",
    "FromSubquery",
    "GroupByColumn",
    "GroupByList",
    "GroupConcat",
    "IndexColumn",
    "IndexColumnList",
    "IndexDefinition",
    "InList",
    "Insert",
    "Is",
    "IsolationLevel",
    "Join",
    "JoinType",
    "Like",
    "ModifyColumnConstraint",
    "ModifyColumnDefault",
    "ModifyColumnType",
    "Node",
    "node_class",
    "NodeKind",
    "NodeList",
    "OrderByColumn",
    "OrderByList",
    "Parameter",
    "PartitionByColumn",
    "PartitionByList",
    "Prepare",
    "register",
    "registered_classes",
    "Rename",
    "RenameColumn",
    "RenameType",
    "ResultColumn",
    "ResultColumnList",
    "RoutineCall",
    "RowConstructor",
    "RowNumberFunction",
    "RowResultSet",
    "RowsResultSet",
    "Select",
    "SequenceValue",
    "SetConfiguration",
    "SetConstraints",
    "SetTransactionAccess",
    "SetTransactionIsolation",
    "ShowConfiguration",
    "SimpleCase",
    "SpecialValue",
    "StorageFormat",
    "Subquery",
    "SubqueryType",
    "TableElementList",
    "TableName",
    "TableNameList",
    "TernaryOperator",
    "TransactionCommand",
    "TransactionControl",
    "Trim",
    "UnaryOperator",
    "Union",
    "UnknownNode",
    "Update",
    "ValueNodeList",
    "VirtualColumn",
    "WindowDefinition",
    "WindowList",
    "WindowReference",
]
