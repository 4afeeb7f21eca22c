"""Varpp preprocessor toolchain.

Provides CLI on top of `libvarpp` library.
"""
