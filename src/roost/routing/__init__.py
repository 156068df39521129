"""Routing — host + path route table with longest-prefix matching.

Routes are registered during setup and frozen before serving begins.
"""
