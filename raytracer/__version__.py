"""
Version information for the package.
"""

__version__ = "0.1.0"
__author__ = "Asher Wrobel"
__license__ = "MIT"
__description__ = "An offline recursive ray tracer for triangle scenes with stochastic transparency and point lights"

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
]
