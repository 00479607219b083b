"""ajour - a command line journal."""
