"""casework command-line interface."""
