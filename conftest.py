"""Global pytest configuration."""

import os

# Force the deterministic stub client in tests before any imports
os.environ["OPENAI_API_KEY"] = ""
