"""
compatscan - Steam compatdata inventory

A Python-based tool to scan Steam library folders, cross-reference installed
applications with leftover Proton compatdata directories, and annotate each
entry with names from the Steam store catalog.
"""

__version__ = "0.3.0"
__author__ = "compatscan contributors"
