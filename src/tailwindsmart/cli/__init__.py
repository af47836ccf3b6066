"""tailwind-smart command-line interface."""
