"""Command line interface for header2py"""
