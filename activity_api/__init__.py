"""
Package marker for source code under `activity_api`.
It groups the HTTP service and its shared helpers under a stable import path.
Most functionality lives in the sibling packages; this file intentionally stays lightweight.
"""
