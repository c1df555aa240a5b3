# Archive paths use a single forward slash, regardless of host OS
SEPARATOR = "/"

EMPTY = ""

# Canonical form of the root path
ROOT = SEPARATOR
