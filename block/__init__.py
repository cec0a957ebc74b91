"""Dashboard blocks."""
from block.stats import AdminStatsBlockService, BlockContext, StatsBlockSettings

__all__ = [
    'AdminStatsBlockService',
    'BlockContext',
    'StatsBlockSettings',
]
