"""Public multi-step foster application form."""
