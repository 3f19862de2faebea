"""HTTP surface for the planning UI."""
