"""Build-system command builders and target discovery."""
