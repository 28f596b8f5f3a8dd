"""Client Layer — typed HTTP access to the portfolio API driven by the contract registry."""
