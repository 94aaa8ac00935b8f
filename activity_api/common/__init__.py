"""
Package marker for shared helpers under `activity_api.common`.
"""
