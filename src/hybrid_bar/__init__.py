"""
Cached access to the Hybrid Bar JSON configuration.

    from hybrid_bar.core.config import AppContext
"""

__version__ = "0.3.0"
