"""What-if analysis over single-field passenger changes."""
