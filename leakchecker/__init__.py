"""Password Leak Checker: look up an email in known public data breaches."""
