"""
HC_Libs - Histogram Compare Library Modules

This package contains core functionality for the Histogram Compare project,
organized into specialized sub-packages:

- HistogramLib: Pixel sampling, histogram building, scaling and overlay rendering
- SessionLib: Two-slot comparison session and asynchronous histogram loading
- ViewerLib: PyQt5 comparison window
"""

__version__ = "0.1.0"
