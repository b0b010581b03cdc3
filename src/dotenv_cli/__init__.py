"""dotenv_cli: read, write and run with .env files."""

__version__ = "1.0.0"
