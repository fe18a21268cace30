"""
Reporting Module.

Renders laid-out tables to PDF.
"""
