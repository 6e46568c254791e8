"""Subject type tags."""

# Wildcard subject type; a rule declared for it matches every queried type.
ALL_SUBJECTS = "all"
