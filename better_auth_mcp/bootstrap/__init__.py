from __future__ import annotations

from better_auth_mcp.bootstrap.container import RuntimeComponents, build_runtime_components
from better_auth_mcp.bootstrap.lifespan import create_lifespan

__all__ = [
    "RuntimeComponents",
    "build_runtime_components",
    "create_lifespan",
]
