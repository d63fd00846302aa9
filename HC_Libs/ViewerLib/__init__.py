"""
ViewerLib - PyQt5 comparison window

This package contains the desktop window that lets the user pick two
images, switch between Value and Color histograms, and see both
histograms overlaid. It imports PyQt5, so it is not loaded by HC_Libs
itself:

- histogram_compare_window: HistogramCompareWindow
"""
