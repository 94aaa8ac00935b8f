# This file marks the services package for validation and store access logic.
# Service modules isolate SQL and input rules from transport concerns.
