"""Path normalisation and match classification."""
