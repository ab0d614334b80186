"""Family member collection editing for the signed-in household."""
