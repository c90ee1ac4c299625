"""Entrypoints (outer surfaces) for casework.

Currently the command-line interface. Entrypoints import `casework.bootstrap`
to obtain a wired message bus and translate domain errors into their own
responses.
"""
