"""World configuration state and access.

Architecture Note:
    world/ is the stateful service layer. WorldsConfigManager owns the live
    document; WorldConfig and PropertyHandle are views onto its sections.
    Unlike core/ (stateless building blocks), world/ holds runtime state.
"""

from mvworlds.world.config import ConfigProperty, WorldConfig
from mvworlds.world.handle import PropertyHandle
from mvworlds.world.manager import WorldsConfigManager
from mvworlds.world.result import LoadResult, Result

__all__ = [
    "WorldsConfigManager",
    "WorldConfig",
    "ConfigProperty",
    "PropertyHandle",
    "Result",
    "LoadResult",
]
