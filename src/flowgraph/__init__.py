"""Dataflow graph engine for node-based visual computation."""

__all__ = [
    "Cache",
    "ConfigError",
    "ConfigSlotDef",
    "CyclicGraph",
    "DuplicateEdge",
    "DuplicateId",
    "EdgeSource",
    "EdgeTarget",
    "EngineConfig",
    "EvaluationDepthExceeded",
    "Graph",
    "GraphError",
    "GraphSession",
    "InputConnection",
    "Node",
    "NodeKind",
    "NodeNotFound",
    "NodeTrace",
    "NodeTypeDef",
    "NodeTypeSchema",
    "OutputConnection",
    "RemovalResult",
    "SelfLoopEdge",
    "SocketDef",
    "SocketIndexError",
    "SocketMaxConnectionsExceeded",
    "TypeMismatchEdge",
    "UnknownNodeType",
    "ValueType",
    "add_edge",
    "add_node",
    "evaluate_node",
    "get_config",
    "get_node_type",
    "load_config",
    "lookup",
    "mark_dirty",
    "mark_dirty_many",
    "node_kinds",
    "node_type_schemas",
    "produce_default_config",
    "reachable_from",
    "remove_edge",
    "remove_node",
    "trace_evaluation",
    "update_node_data",
]

from ._config import ConfigError, EngineConfig, get_config, load_config
from ._errors import (
    CyclicGraph,
    DuplicateEdge,
    DuplicateId,
    EvaluationDepthExceeded,
    GraphError,
    NodeNotFound,
    SelfLoopEdge,
    SocketIndexError,
    SocketMaxConnectionsExceeded,
    TypeMismatchEdge,
    UnknownNodeType,
)
from ._eval_engine import NodeTrace, evaluate_node, trace_evaluation
from ._graph import (
    EdgeSource,
    EdgeTarget,
    Graph,
    InputConnection,
    Node,
    OutputConnection,
    RemovalResult,
    add_edge,
    add_node,
    reachable_from,
    remove_edge,
    remove_node,
    update_node_data,
)
from ._invalidation import Cache, mark_dirty, mark_dirty_many
from ._registry import (
    ConfigSlotDef,
    NodeKind,
    NodeTypeDef,
    SocketDef,
    ValueType,
    lookup,
    node_kinds,
    produce_default_config,
)
from ._schema import NodeTypeSchema, get_node_type, node_type_schemas
from ._session import GraphSession
